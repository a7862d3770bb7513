"""Test fixtures for Confluence content tests.

This module provides sample space listing, page and search responses as
returned by the Confluence REST API.
"""

from .sample_responses import (
    EMPTY_SEARCH,
    PAGE_RELEASE_NOTES,
    PAGE_SEARCH,
    SPACE_DEV,
    SPACE_LIST,
    SPACE_MINIMAL,
    SPACE_OPS,
    to_bytes,
)

__all__ = [
    "EMPTY_SEARCH",
    "PAGE_RELEASE_NOTES",
    "PAGE_SEARCH",
    "SPACE_DEV",
    "SPACE_LIST",
    "SPACE_MINIMAL",
    "SPACE_OPS",
    "to_bytes",
]
