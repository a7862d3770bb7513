"""Confluence attachment data model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Attachment:
    """Downloaded attachment payload.

    Attributes:
        data: Raw attachment bytes
        content_type: Value of the Content-Type response header
    """
    data: bytes
    content_type: str
