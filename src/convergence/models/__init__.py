"""Data models for Confluence spaces, pages and attachments."""

from convergence.models.attachment import Attachment
from convergence.models.page import Page
from convergence.models.space import Space

__all__ = ['Attachment', 'Page', 'Space']
