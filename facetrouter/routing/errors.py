"""Exceptions raised inside the routing core.

None of these escape the middleware: each one is caught at the step that
produced it and turned into a pass-through.
"""

from __future__ import annotations


class FacetRoutingError(Exception):
    """Base class for routing errors."""


class MalformedBaseURI(FacetRoutingError):
    """A site's base URL could not be parsed."""

    def __init__(self, base: str) -> None:
        super().__init__(f"Cannot parse site base URL: {base!r}")
        self.base = base


class MalformedPlaceholderToken(FacetRoutingError):
    """A route pattern segment is not a ``{name}`` placeholder."""

    def __init__(self, segment: str) -> None:
        super().__init__(f"Route segment is not a placeholder: {segment!r}")
        self.segment = segment


class SlugLookupError(FacetRoutingError):
    """The page slug index failed to answer a lookup."""


class ConfigurationError(FacetRoutingError):
    """A site configuration document is invalid."""
