"""Authentication module for loading Confluence credentials.

This module loads Confluence credentials and connection settings from
environment variables using python-dotenv. It validates that all required
credentials are present before any client is created.
"""

import os
from typing import NamedTuple

from dotenv import load_dotenv

from .errors import MissingCredentialsError, ValidationError

DEFAULT_TIMEOUT = 30


class Credentials(NamedTuple):
    """Confluence API credentials."""
    url: str
    user: str
    api_token: str


class ConnectionSettings(NamedTuple):
    """Transport settings that are not secrets."""
    timeout: int = DEFAULT_TIMEOUT
    cloud: bool = True


class Authenticator:
    """Loads and validates Confluence credentials from environment variables.

    Credentials are loaded from a .env file using python-dotenv and are never
    cached or logged.

    Required environment variables:
        CONFLUENCE_URL: Confluence instance URL (e.g., https://yourinstance.atlassian.net/wiki)
        CONFLUENCE_USER: Confluence user email address
        CONFLUENCE_API_TOKEN: Confluence API token

    Optional environment variables:
        CONFLUENCE_TIMEOUT: Request timeout in seconds (default: 30)
        CONFLUENCE_CLOUD: "true" for Confluence Cloud, "false" for Server/DC

    Example:
        >>> auth = Authenticator()
        >>> creds = auth.get_credentials()
        >>> print(f"Connecting to {creds.url}")
    """

    def __init__(self):
        """Initialize the authenticator by loading environment variables from .env file."""
        load_dotenv()

    def get_credentials(self) -> Credentials:
        """Get Confluence credentials from environment variables.

        Returns:
            Credentials: A named tuple containing url, user, and api_token

        Raises:
            MissingCredentialsError: If any required credential is missing
        """
        url = os.getenv('CONFLUENCE_URL')
        user = os.getenv('CONFLUENCE_USER')
        api_token = os.getenv('CONFLUENCE_API_TOKEN')

        missing = []
        if not url:
            missing.append('CONFLUENCE_URL')
        if not user:
            missing.append('CONFLUENCE_USER')
        if not api_token:
            missing.append('CONFLUENCE_API_TOKEN')

        if missing:
            raise MissingCredentialsError(missing)

        return Credentials(url=url.rstrip('/'), user=user, api_token=api_token)  # type: ignore[union-attr, arg-type]

    def get_settings(self) -> ConnectionSettings:
        """Get optional transport settings from environment variables.

        Raises:
            ValidationError: If CONFLUENCE_TIMEOUT is not a positive integer
        """
        raw_timeout = os.getenv('CONFLUENCE_TIMEOUT')
        raw_cloud = os.getenv('CONFLUENCE_CLOUD')

        timeout = DEFAULT_TIMEOUT
        if raw_timeout:
            try:
                timeout = int(raw_timeout)
            except ValueError:
                raise ValidationError(
                    f"CONFLUENCE_TIMEOUT must be an integer, got '{raw_timeout}'",
                    field='CONFLUENCE_TIMEOUT',
                )
            if timeout <= 0:
                raise ValidationError(
                    "CONFLUENCE_TIMEOUT must be positive",
                    field='CONFLUENCE_TIMEOUT',
                )

        cloud = True
        if raw_cloud:
            cloud = raw_cloud.strip().lower() not in ('false', '0', 'no')

        return ConnectionSettings(timeout=timeout, cloud=cloud)
