"""Confluence client library: transport, credentials and error types.

This package provides the HTTP transport over the Confluence REST API
(backed by atlassian-python-api), credential loading, and the typed
exception hierarchy shared by the whole content client.
"""

from .errors import (
    ContentClientError,
    ValidationError,
    TransportError,
    APIUnreachableError,
    InvalidCredentialsError,
    ContentNotFoundError,
    VersionConflictError,
    DecodingError,
    HydrationError,
    MissingCredentialsError,
)
from .auth import Authenticator, Credentials, ConnectionSettings
from .transport import ConfluenceTransport, decode_json

__all__ = [
    "ContentClientError",
    "ValidationError",
    "TransportError",
    "APIUnreachableError",
    "InvalidCredentialsError",
    "ContentNotFoundError",
    "VersionConflictError",
    "DecodingError",
    "HydrationError",
    "MissingCredentialsError",
    "Authenticator",
    "Credentials",
    "ConnectionSettings",
    "ConfluenceTransport",
    "decode_json",
]
