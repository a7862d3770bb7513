"""Read-through cache in front of the Confluence content client.

This module provides the ContentCache class that the presentation layer
calls for spaces, pages and attachments. On a miss it delegates to the
ContentClient, stores the result under every key it can be reached by, and
returns it. Failures from the client are passed through unchanged and are
never cached.
"""

import logging
import time
from typing import Callable, Optional, Tuple

from convergence.confluence_client.content_client import ContentClient
from convergence.confluence_client.errors import NotFoundError
from convergence.models import Attachment, Page, Space

from .keys import (
    SPACES_KEY,
    attachment_key,
    page_key,
    page_title_key,
)
from .ttl_store import TTLStore

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 30 * 60
DEFAULT_SWEEP_INTERVAL_SECONDS = 5 * 60

RESET_TTL_SECONDS = 5 * 60
RESET_SWEEP_INTERVAL_SECONDS = 30


class ContentCache:
    """Caches Confluence spaces, pages and attachments for a bounded time.

    Cache keys:
        spaces-all                              full space list
        pages-{space}-{id}                      page by content ID
        pages-{space}-{normalized title}        same page by title
        attachment-{id}-{file}-{mod date}       attachment bytes

    A page fetched either way is written under both page keys, so a lookup
    by title warms the lookup by ID and vice versa. The two entries carry
    their own timestamps and expire independently.

    Concurrent misses on the same key are not deduplicated; both callers
    fetch and the last write wins.

    Example:
        >>> cache = ContentCache(ContentClient(Authenticator()))
        >>> space = cache.get_space("DEV")
        >>> home = cache.get_page_by_id("DEV", space.homepage_id)
    """

    def __init__(
        self,
        client: ContentClient,
        store: Optional[TTLStore] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize the cache around a content client.

        Args:
            client: Client used on cache misses
            store: Store to use; defaults to a 30 minute TTL store
            clock: Time source for stores created by this cache
        """
        self._client = client
        self._clock = clock
        if store is None:
            store = TTLStore(
                ttl_seconds=DEFAULT_TTL_SECONDS,
                sweep_interval_seconds=DEFAULT_SWEEP_INTERVAL_SECONDS,
                clock=clock,
            )
        self._store = store

    @property
    def store(self) -> TTLStore:
        return self._store

    def get_spaces(self) -> Tuple[Space, ...]:
        """Get all spaces.

        Returns:
            Tuple of spaces in API order

        Raises:
            ConfluenceError: Any client failure, unchanged
        """
        logger.debug(f"Check cache for key '{SPACES_KEY}'")
        spaces = self._store.get(SPACES_KEY)
        if spaces is not None:
            logger.debug(f"Cache hit: '{SPACES_KEY}'")
            return spaces

        spaces = tuple(self._client.fetch_spaces())
        self._store.set(SPACES_KEY, spaces)
        logger.info(f"Cached {len(spaces)} spaces under '{SPACES_KEY}'")
        return spaces

    def get_space(self, key: str) -> Space:
        """Get one space by its key.

        Served from the cached space list; there is no per-space key.

        Raises:
            NotFoundError: If no space has this key
            ConfluenceError: Any client failure, unchanged
        """
        for space in self.get_spaces():
            if space.key == key:
                return space
        raise NotFoundError(f"Space {key}")

    def get_page_by_title(self, space_key: str, title: str) -> Page:
        """Get a page by space key and title.

        The title is sent to Confluence exactly as given. For the cache key
        spaces are normalized to "+", so "Release Notes" and "Release+Notes"
        share a cache line once the page has been fetched.

        Raises:
            NotFoundError: If no page has this title
            ConfluenceError: Any client failure, unchanged
        """
        cache_key = page_title_key(space_key, title)
        page = self._lookup(cache_key)
        if page is not None:
            return page

        page = self._client.fetch_page_by_title(space_key, title)
        self._store_page(space_key, page)
        return page

    def get_page_by_id(self, space_key: str, page_id: str) -> Page:
        """Get a page by space key and content ID.

        Raises:
            NotFoundError: If the page doesn't exist
            ConfluenceError: Any client failure, unchanged
        """
        cache_key = page_key(space_key, page_id)
        page = self._lookup(cache_key)
        if page is not None:
            return page

        page = self._client.fetch_page_by_id(space_key, page_id)
        self._store_page(space_key, page)
        return page

    def get_attachment(
        self,
        content_id: str,
        filename: str,
        version: str,
        mod_date: str,
        api_token: str,
    ) -> Attachment:
        """Get an attachment's bytes.

        The modification date is treated as the freshness discriminator:
        version and api_token are forwarded to Confluence but are not part of
        the cache key.

        Raises:
            NotFoundError: If the attachment doesn't exist or is empty
            ConfluenceError: Any client failure, unchanged
        """
        cache_key = attachment_key(content_id, filename, mod_date)
        attachment = self._lookup(cache_key)
        if attachment is not None:
            return attachment

        attachment = self._client.fetch_attachment(
            content_id, filename, version, mod_date, api_token
        )
        self._store.set(cache_key, attachment)
        logger.info(f"Cached attachment under '{cache_key}'")
        return attachment

    def reset(self) -> None:
        """Drop everything by swapping in a new, empty, shorter-lived store."""
        self._store = TTLStore(
            ttl_seconds=RESET_TTL_SECONDS,
            sweep_interval_seconds=RESET_SWEEP_INTERVAL_SECONDS,
            clock=self._clock,
        )
        logger.info("Cache reset")

    def _lookup(self, cache_key: str):
        logger.debug(f"Check cache for key '{cache_key}'")
        value = self._store.get(cache_key)
        if value is not None:
            logger.debug(f"Cache hit: '{cache_key}'")
        return value

    def _store_page(self, space_key: str, page: Page) -> None:
        id_key = page_key(space_key, page.id)
        title_key = page_title_key(space_key, page.title)
        self._store.set(id_key, page)
        self._store.set(title_key, page)
        logger.info(f"Cached page under '{id_key}' and '{title_key}'")
