"""Coordinator for the facet routing pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .arguments import expand_arguments
from .config import EnhancerConfig, RoutingSettings, load_settings
from .enhancers import select_enhancer
from .pages import resolve_page
from .paths import decompose_path
from .query import merge_query_params
from .types import EnhancerConfigStore, Outcome, PageMatch, PageSlugIndex, ParsedPath, SiteResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RewriteResult:
    """What the rewriter decided for one request."""

    outcome: Outcome
    path: str
    query_params: Dict[Any, Any]
    produced: Dict[Any, Any] = field(default_factory=dict)
    page: PageMatch = PageMatch()
    enhancer: Optional[EnhancerConfig] = None
    parsed: Optional[ParsedPath] = None

    @property
    def rewritten(self) -> bool:
        return self.outcome is Outcome.REWRITTEN


class RequestRewriter:
    """Turn a pretty facet path into a page path plus search parameters."""

    def __init__(
        self,
        sites: SiteResolver,
        pages: PageSlugIndex,
        enhancers: EnhancerConfigStore,
        settings: RoutingSettings | None = None,
    ) -> None:
        self.sites = sites
        self.pages = pages
        self.enhancers = enhancers
        self.settings = settings or load_settings(None)

    def rewrite(self, host: str, path: str, query_params: Dict[Any, Any]) -> RewriteResult:
        """Return the rewritten path and parameters, or a pass-through result."""

        def passthrough(outcome: Outcome, **details: Any) -> RewriteResult:
            logger.debug("Passing %s through: %s", path, outcome.value)
            return RewriteResult(outcome=outcome, path=path, query_params=query_params, **details)

        site = self.sites.find_site_for_host(host)
        if site is None:
            return passthrough(Outcome.NO_SITE)

        page = resolve_page(path, site, self.pages)
        if not page.matched:
            return passthrough(Outcome.NO_PAGE)

        enhancer = select_enhancer(site, page.page_id, self.enhancers, self.settings)
        if enhancer is None:
            return passthrough(Outcome.NO_ENHANCER, page=page)

        parsed = decompose_path(
            path,
            enhancer.route_path,
            page.slug,
            delimiters=self.settings.delimiters,
            strict=self.settings.strict_placeholders,
        )
        if not parsed.segments:
            return passthrough(Outcome.NO_DYNAMIC_SEGMENTS, page=page, enhancer=enhancer, parsed=parsed)

        tree = expand_arguments(
            parsed.values(),
            enhancer.arguments,
            enhancer.namespace,
            enhancer.facet_value_separator,
            marker=self.settings.facet_marker,
        )
        produced = tree.to_params()
        logger.debug("Rewrote %s to %s with %r via enhancer %r", path, page.slug, produced, enhancer.name)

        return RewriteResult(
            outcome=Outcome.REWRITTEN,
            path=page.slug,
            query_params=merge_query_params(query_params, produced),
            produced=produced,
            page=page,
            enhancer=enhancer,
            parsed=parsed,
        )
