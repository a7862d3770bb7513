"""Confluence client library for read-only content resolution.

This package provides Python abstractions over the Confluence REST API
content endpoints, turning JSON and byte responses into typed models.
"""

from .auth import Authenticator, Credentials
from .content_client import ContentClient
from .errors import (
    ConvergenceError,
    ConfluenceError,
    RemoteError,
    InvalidCredentialsError,
    EmptyResponseError,
    MalformedResponseError,
    NotFoundError,
)

__all__ = [
    "Authenticator",
    "Credentials",
    "ContentClient",
    "ConvergenceError",
    "ConfluenceError",
    "RemoteError",
    "InvalidCredentialsError",
    "EmptyResponseError",
    "MalformedResponseError",
    "NotFoundError",
]
