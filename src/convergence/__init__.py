"""Read-through cache over the Confluence content API."""

__version__ = "0.1.0"
