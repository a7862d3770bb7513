"""Typed exception hierarchy for Confluence content errors.

This module defines all custom exceptions raised while resolving content from
the Confluence REST API. The presentation layer only distinguishes
NotFoundError from everything else, so every other failure derives from a
common ConfluenceError base and carries enough context to be logged.
"""

from typing import Optional


class ConvergenceError(Exception):
    """Base exception for all convergence errors.

    Use this to catch any application-level error from the content layer.
    """
    pass


class ConfluenceError(ConvergenceError):
    """Base exception for all Confluence-related errors."""
    pass


class RemoteError(ConfluenceError):
    """Raised when the Confluence API cannot be contacted or fails at transport level."""

    def __init__(self, endpoint: str, reason: Optional[str] = None):
        message = f"Confluence API request to {endpoint} failed"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.endpoint = endpoint
        self.reason = reason


class InvalidCredentialsError(RemoteError):
    """Raised when API credentials are missing or rejected."""

    def __init__(self, user: str, endpoint: str):
        super().__init__(endpoint, f"API key is invalid (user: {user})")
        self.user = user


class EmptyResponseError(ConfluenceError):
    """Raised when the API answered but the response body was empty."""

    def __init__(self, endpoint: str):
        super().__init__(f"Empty response from {endpoint}")
        self.endpoint = endpoint


class MalformedResponseError(ConfluenceError):
    """Raised when a response body is missing a field or has the wrong shape."""

    def __init__(self, path: str, message: str):
        super().__init__(f"Malformed response at '{path}': {message}")
        self.path = path
        self.original_message = message


class NotFoundError(ConfluenceError):
    """Raised when a requested space, page or attachment does not exist."""

    def __init__(self, resource: str):
        super().__init__(f"{resource} not found")
        self.resource = resource
