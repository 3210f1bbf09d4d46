"""Typed exception hierarchy for the Confluence content client.

This module defines all custom exceptions raised by the client library.
All exceptions inherit from ContentClientError so callers can catch every
library failure in one place, and each carries enough context (field,
path, status code) to tell what went wrong without parsing the message.
"""

from typing import List, Optional


class ContentClientError(Exception):
    """Base exception for all confluence-content-client errors."""
    pass


class ValidationError(ContentClientError):
    """Raised when a caller violates a precondition before any request is sent."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class TransportError(ContentClientError):
    """Raised when the HTTP round trip fails or returns a non-success status."""

    def __init__(
        self,
        message: str,
        method: Optional[str] = None,
        path: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.method = method
        self.path = path
        self.status_code = status_code


class APIUnreachableError(TransportError):
    """Raised when the Confluence API is not available or unreachable."""

    def __init__(self, endpoint: str):
        super().__init__(f"API is not available at {endpoint}")
        self.endpoint = endpoint


class InvalidCredentialsError(TransportError):
    """Raised when the API rejects the configured credentials (HTTP 401)."""

    def __init__(self, user: str, endpoint: str):
        super().__init__(
            f"API key is invalid (user: {user}, endpoint: {endpoint})",
            status_code=401,
        )
        self.user = user
        self.endpoint = endpoint


class ContentNotFoundError(TransportError):
    """Raised when the requested resource does not exist (HTTP 404)."""

    def __init__(self, path: str, method: Optional[str] = None):
        super().__init__(
            f"Resource {path} not found",
            method=method,
            path=path,
            status_code=404,
        )


class VersionConflictError(TransportError):
    """Raised when the server rejects an update against a stale version (HTTP 409)."""

    def __init__(self, path: str, method: Optional[str] = None):
        super().__init__(
            f"Version conflict on {path}",
            method=method,
            path=path,
            status_code=409,
        )


class DecodingError(ContentClientError):
    """Raised when a response body is not valid JSON."""

    def __init__(self, message: str, body: Optional[str] = None):
        super().__init__(message)
        self.body = body


class HydrationError(ContentClientError):
    """Raised when decoded JSON does not match the expected entity shape."""

    def __init__(self, message: str, field: Optional[str] = None):
        if field:
            full_message = f"{message} (field: '{field}')"
        else:
            full_message = message
        super().__init__(full_message)
        self.field = field
        self.original_message = message


class MissingCredentialsError(ContentClientError):
    """Raised when required credential environment variables are not set."""

    def __init__(self, missing: List[str]):
        super().__init__(
            f"Missing required environment variables: {', '.join(missing)}"
        )
        self.missing = missing
