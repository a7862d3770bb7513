"""Confluence space data model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Space:
    """Confluence space as listed by the space endpoint.

    Attributes:
        id: Unique identifier for the space
        key: Short human-readable space key (e.g., "DEV"), unique per instance
        name: Display name
        type: Space type tag (e.g., "global", "personal")
        link: Canonical API link to the space
        description: Rendered (view format) description
        homepage_id: Content ID of the space homepage, resolved lazily
    """
    id: str
    key: str
    name: str
    type: str
    link: str
    description: str
    homepage_id: str
