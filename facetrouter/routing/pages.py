"""Resolve a request path to the page whose slug it starts with."""

from __future__ import annotations

import logging
from typing import Any

from .errors import SlugLookupError
from .types import PageMatch, PageSlugIndex

logger = logging.getLogger(__name__)


def current_language(site: Any) -> str:
    """Return the language used for slug lookups.

    Only the site's default language is supported.
    """

    return getattr(site, "default_language", "") or ""


def resolve_page(path: str, site: Any, index: PageSlugIndex) -> PageMatch:
    """Find the longest registered page slug that prefixes ``path``.

    The path is shortened one trailing segment at a time until a candidate
    slug equals it exactly. An empty candidate set or an emptied path ends
    the search without a match.
    """

    language = current_language(site)
    while True:
        try:
            candidates = index.candidates_for_path(site, path, language)
        except SlugLookupError:
            logger.warning("Slug lookup failed for %r; passing request through", path, exc_info=True)
            return PageMatch()

        if not candidates or not path:
            return PageMatch()

        for candidate in candidates:
            if candidate.slug == path:
                return PageMatch(page_id=int(candidate.page_id), slug=candidate.slug)

        path = path.rsplit("/", 1)[0] if "/" in path else ""
