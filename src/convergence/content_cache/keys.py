"""Cache key derivation.

Keys are plain strings built from fixed per-kind prefixes, so a space list,
a page and an attachment can never share a key. Titles are normalized the
way Confluence encodes them in display URLs (spaces become "+"), which keeps
by-title and by-id lookups of the same page on the same cache lines.
"""

SPACES_KEY = "spaces-all"
PAGE_PREFIX = "pages-"
ATTACHMENT_PREFIX = "attachment-"

TITLE_SEPARATOR = "+"


def normalize_title(title: str) -> str:
    """Replace spaces in a title with the URL title separator."""
    return title.replace(" ", TITLE_SEPARATOR)


def page_key(space_key: str, identifier: str) -> str:
    return f"{PAGE_PREFIX}{space_key}-{identifier}"


def page_title_key(space_key: str, title: str) -> str:
    return page_key(space_key, normalize_title(title))


def attachment_key(content_id: str, filename: str, mod_date: str) -> str:
    # version and api token are left out on purpose, see DESIGN.md
    return f"{ATTACHMENT_PREFIX}{content_id}-{filename}-{mod_date}"
