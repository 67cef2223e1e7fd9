"""Typed data structures used by the routing pipeline."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence, Tuple, Union


@dataclass(frozen=True)
class PageCandidate:
    """A page record returned by the slug index."""

    page_id: int
    slug: str


@dataclass(frozen=True)
class PageMatch:
    """Result of resolving a request path to a page."""

    page_id: int = 0
    slug: str = ""

    @property
    def matched(self) -> bool:
        return self.page_id != 0


@dataclass(frozen=True)
class ParsedPath:
    """A request path split into the page slug and its dynamic tail."""

    slug: str
    segments: Tuple[str, ...] = ()
    placeholders: Tuple[str, ...] = ()

    def values(self) -> Dict[str, str]:
        """Map placeholder names to their raw segment values, in order."""

        return dict(zip(self.placeholders, self.segments))


@dataclass
class FacetList:
    """Leaf holding encoded ``name:value`` facet tokens."""

    tokens: List[str] = field(default_factory=list)

    def to_node(self) -> "Node":
        return Node({position: token for position, token in enumerate(self.tokens)})


@dataclass
class Node:
    """Inner query parameter mapping.

    Keys are parameter names, or integer positions for values appended
    to a mapping that also holds named keys.
    """

    entries: Dict[Union[str, int], "Tree"] = field(default_factory=dict)

    def next_position(self) -> int:
        positions = [key for key in self.entries if isinstance(key, int)]
        return max(positions) + 1 if positions else 0

    def append(self, token: str) -> None:
        self.entries[self.next_position()] = token

    def to_params(self) -> Dict[Union[str, int], Any]:
        """Render the tree as plain dicts, lists and strings."""

        return {key: _render(value) for key, value in self.entries.items()}


Tree = Union[Node, FacetList, str]


def _render(value: Tree) -> Any:
    if isinstance(value, Node):
        return value.to_params()
    if isinstance(value, FacetList):
        return list(value.tokens)
    return value


class Outcome(enum.Enum):
    """What the rewriter did with a request."""

    REWRITTEN = "rewritten"
    NO_SITE = "no_site"
    NO_PAGE = "no_page"
    NO_ENHANCER = "no_enhancer"
    NO_DYNAMIC_SEGMENTS = "no_dynamic_segments"


class SiteResolver(Protocol):
    def find_site_for_host(self, host: str) -> Optional[Any]:
        ...


class PageSlugIndex(Protocol):
    def candidates_for_path(self, site: Any, path: str, language: str) -> Sequence[PageCandidate]:
        ...


class EnhancerConfigStore(Protocol):
    def route_enhancers(self, site: Any) -> Optional[Mapping[str, Any]]:
        ...
