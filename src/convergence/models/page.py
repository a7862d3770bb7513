"""Confluence page data model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Page:
    """Confluence page with its rendered body.

    The body has already had Confluence display and download links rewritten
    to local routes, so it can be handed to a template without further
    processing.

    Attributes:
        id: Unique identifier for the page
        type: Content type tag (always "page" for this endpoint)
        status: Lifecycle status (e.g., "current", "trashed")
        title: Page title
        link: Canonical web UI link
        body: Page body in view format (XHTML) with local links
    """
    id: str
    type: str
    status: str
    title: str
    link: str
    body: str

    @property
    def body_html(self) -> str:
        """Body marked for direct inclusion in rendered markup."""
        return self.body
