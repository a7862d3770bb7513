"""Typed decoding of Confluence REST responses into domain models.

Confluence returns loosely structured JSON. Every field the models need is
looked up by a dotted path and type-checked up front, so a payload of the
wrong shape fails once with MalformedResponseError instead of surfacing as a
KeyError or TypeError deep inside a caller.
"""

import json
from typing import Any, Dict, List, Tuple, Type, Union

from convergence.models import Page, Space

from .errors import MalformedResponseError

HOMEPAGE_PREFIX = "/rest/api/content/"
FIELD_MISSING = "field is missing"

# Confluence route -> local route, applied to rendered page bodies
LINK_REWRITES = (
    ("/wiki/display/", "/page/"),
    ("/wiki/download/attachments/", "/download/"),
)


def parse_json(body: bytes) -> Any:
    """Decode a response body into JSON.

    Args:
        body: Raw response bytes (non-empty)

    Returns:
        The decoded JSON document

    Raises:
        MalformedResponseError: If the body is not valid JSON
    """
    try:
        return json.loads(body)
    except (ValueError, UnicodeDecodeError) as e:
        raise MalformedResponseError("$", f"invalid JSON: {e}") from e


def require(
    document: Any,
    path: str,
    expected: Union[Type, Tuple[Type, ...]] = str,
) -> Any:
    """Look up a dotted path in a JSON document and check its type.

    Args:
        document: Decoded JSON object
        path: Dotted field path (e.g., "body.view.value")
        expected: Python type (or tuple of types) the value must have

    Returns:
        The value found at path

    Raises:
        MalformedResponseError: If a segment is missing or the value has
            the wrong type
    """
    value = document
    for segment in path.split("."):
        if not isinstance(value, dict) or segment not in value:
            raise MalformedResponseError(path, FIELD_MISSING)
        value = value[segment]

    allowed = expected if isinstance(expected, tuple) else (expected,)
    # bool is an int subclass; JSON true/false is never a numeric ID
    if not isinstance(value, allowed) or (
        isinstance(value, bool) and bool not in allowed
    ):
        wanted = " or ".join(t.__name__ for t in allowed)
        raise MalformedResponseError(
            path, f"expected {wanted}, got {type(value).__name__}"
        )
    return value


def optional(document: Any, path: str, default: str = "") -> str:
    """Like require() for string fields a listing may omit.

    A missing path yields default, but a present value of the wrong type
    is still rejected.
    """
    try:
        return require(document, path)
    except MalformedResponseError as e:
        if e.original_message != FIELD_MISSING:
            raise
        return default


def rewrite_links(body: str) -> str:
    """Rewrite Confluence display and download links to local routes.

    Idempotent: the local routes never contain the Confluence prefixes, so
    applying this to an already rewritten body changes nothing.
    """
    for remote, local in LINK_REWRITES:
        body = body.replace(remote, local)
    return body


def parse_space(document: Dict[str, Any]) -> Space:
    """Build a Space from one element of the space listing.

    id, key, name and the expandable homepage link are mandatory; the
    descriptive fields default to an empty string when omitted.
    """
    homepage_link = require(document, "_expandable.homepage")

    return Space(
        id=str(require(document, "id", (str, int))),
        key=require(document, "key"),
        name=require(document, "name"),
        type=optional(document, "type"),
        link=optional(document, "_links.self"),
        description=optional(document, "description.view.value"),
        homepage_id=homepage_link.replace(HOMEPAGE_PREFIX, ""),
    )


def parse_spaces(document: Any) -> List[Space]:
    """Build the list of spaces from a space listing response.

    Raises:
        MalformedResponseError: If the listing or any element is malformed
    """
    results = require(document, "results", list)
    return [parse_space(item) for item in results]


def parse_results(document: Any) -> List[Any]:
    """Return the "results" array of a content listing response."""
    return require(document, "results", list)


def parse_page(document: Any) -> Page:
    """Build a Page from a content response expanded with body.view.

    The body is rewritten to local links and the canonical link is built
    from the _links.base and _links.webui fields.

    Raises:
        MalformedResponseError: If any required field is missing
    """
    body = require(document, "body.view.value")
    link_base = require(document, "_links.base")
    link_web = require(document, "_links.webui")

    return Page(
        id=str(require(document, "id", (str, int))),
        type=require(document, "type"),
        status=require(document, "status"),
        title=require(document, "title"),
        link=f"{link_base}/{link_web}",
        body=rewrite_links(body),
    )
