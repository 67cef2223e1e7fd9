"""Split a request path into its page slug and dynamic tail."""

from __future__ import annotations

import logging
from typing import List, Tuple

from .config import DEFAULTS
from .errors import MalformedPlaceholderToken
from .types import ParsedPath

logger = logging.getLogger(__name__)

DEFAULT_DELIMITERS: Tuple[str, str] = DEFAULTS["PLACEHOLDER_DELIMITERS"]


def parse_placeholder(segment: str, delimiters: Tuple[str, str] = DEFAULT_DELIMITERS) -> str:
    """Return the name inside a ``{name}`` route segment."""

    opening, closing = delimiters
    if len(segment) <= len(opening) + len(closing):
        raise MalformedPlaceholderToken(segment)
    if not segment.startswith(opening) or not segment.endswith(closing):
        raise MalformedPlaceholderToken(segment)

    name = segment[len(opening):len(segment) - len(closing)]
    if opening in name or closing in name:
        raise MalformedPlaceholderToken(segment)
    return name


def degenerate_placeholder(segment: str) -> str:
    """Strip the first and last character, whatever they are."""

    return segment[1:-1]


def decompose_path(
    request_path: str,
    route_path: str,
    page_slug: str,
    *,
    delimiters: Tuple[str, str] = DEFAULT_DELIMITERS,
    strict: bool = False,
) -> ParsedPath:
    """Split ``request_path`` by the shape of ``route_path``.

    Leading path segments move into the slug until exactly as many remain
    as the route pattern has segments; those are the dynamic values. The
    result carries no segments when the path is the page slug itself, or
    is too short to hold the pattern after the page slug.

    Example::

        >>> decompose_path("/products/household/brand-acme", "/{category}/{facet}", "/products")
        ParsedPath(slug='/products', segments=('household', 'brand-acme'), placeholders=('category', 'facet'))
    """

    if request_path == page_slug:
        return ParsedPath(slug=page_slug)

    path_segments = request_path.split("/")
    route_segments = route_path.split("/")
    if len(path_segments) < len(route_segments):
        return ParsedPath(slug=page_slug)

    slug_segments: List[str] = []
    while len(path_segments) >= len(route_segments):
        slug_segments.append(path_segments.pop(0))

    if len(slug_segments) < len(page_slug.split("/")):
        # The tail would swallow part of the page slug.
        return ParsedPath(slug=page_slug)

    if route_segments and not route_segments[0]:
        route_segments.pop(0)

    slug = "/".join(slug_segments)
    placeholders: List[str] = []
    for segment in route_segments[:len(path_segments)]:
        try:
            placeholders.append(parse_placeholder(segment, delimiters))
        except MalformedPlaceholderToken:
            if strict:
                logger.warning("Route pattern %r has malformed segment %r", route_path, segment)
                return ParsedPath(slug=slug)
            logger.warning("Route pattern %r has malformed segment %r; using %r", route_path, segment,
                           degenerate_placeholder(segment))
            placeholders.append(degenerate_placeholder(segment))

    return ParsedPath(
        slug=slug,
        segments=tuple(path_segments[:len(placeholders)]),
        placeholders=tuple(placeholders),
    )
