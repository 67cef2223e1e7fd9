"""Shared fixtures for routing core tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

import pytest

from facetrouter.routing.config import load_settings
from facetrouter.routing.errors import SlugLookupError
from facetrouter.routing.types import PageCandidate


@dataclass(frozen=True)
class FakeSite:
    identifier: str
    default_language: str = "en"


class FakeSlugIndex:
    """In-memory slug index returning every page whose slug prefixes the path."""

    def __init__(self, pages: Mapping[str, int], *, fail: bool = False) -> None:
        self.pages = dict(pages)
        self.fail = fail
        self.lookups: List[str] = []

    def candidates_for_path(self, site: Any, path: str, language: str) -> List[PageCandidate]:
        self.lookups.append(path)
        if self.fail:
            raise SlugLookupError("index offline")
        return [
            PageCandidate(page_id=page_id, slug=slug)
            for slug, page_id in self.pages.items()
            if slug == "/" or path == slug or path.startswith(slug.rstrip("/") + "/")
        ]


class FakeEnhancerStore:
    def __init__(self, enhancers: Any) -> None:
        self.enhancers = enhancers

    def route_enhancers(self, site: Any) -> Any:
        return self.enhancers


class FakeSiteResolver:
    def __init__(self, sites: Optional[Dict[str, FakeSite]] = None) -> None:
        self.sites = sites or {}

    def find_site_for_host(self, host: str) -> Optional[FakeSite]:
        return self.sites.get(host)


@pytest.fixture()
def routing_settings():
    """Provide the default routing settings."""

    return load_settings(None)


@pytest.fixture()
def site():
    return FakeSite("main")


def make_enhancer(
    route_path: str = "/{category}/{facet}",
    arguments: Optional[Dict[str, str]] = None,
    *,
    pages: Optional[List[int]] = None,
    type: str = "CombinedFacetEnhancer",
    separator: Optional[str] = ",",
    extension_key: Optional[str] = None,
) -> Dict[str, Any]:
    raw: Dict[str, Any] = {
        "type": type,
        "limitToPages": pages if pages is not None else [10],
        "routePath": route_path,
        "_arguments": arguments if arguments is not None else {
            "category": "filter/category",
            "facet": "filter-type",
        },
    }
    if separator is not None:
        raw["solr"] = {"facetValueSeparator": separator}
    if extension_key is not None:
        raw["extensionKey"] = extension_key
    return raw
