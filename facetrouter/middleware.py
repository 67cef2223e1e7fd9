from __future__ import annotations

from typing import Any, Callable, Dict

from django.conf import settings
from django.http import HttpRequest, HttpResponse, QueryDict

from .routing.config import RoutingSettings, load_settings
from .routing.query import encode_nested_query, is_nested_name, parse_nested_query, query_root
from .routing.rewriter import RequestRewriter, RewriteResult
from .routing.types import EnhancerConfigStore, PageSlugIndex, SiteResolver
from .services import ModelEnhancerConfigStore, ModelPageSlugIndex, ModelSiteResolver


class FacetRoutingMiddleware:
    """Rewrite pretty facet URLs into a page path plus search parameters.

    Must run before URL resolution: a request for
    ``/products/household/brand-acme`` reaches the view as ``/products``
    with ``tx_solr[filter][...]`` query parameters. Requests that do not
    match a site, page and enhancer pass through untouched.
    """

    def __init__(
        self,
        get_response: Callable[[HttpRequest], HttpResponse],
        *,
        sites: SiteResolver | None = None,
        pages: PageSlugIndex | None = None,
        enhancers: EnhancerConfigStore | None = None,
        routing_settings: RoutingSettings | None = None,
    ) -> None:
        self.get_response = get_response
        self.rewriter = RequestRewriter(
            sites or ModelSiteResolver(),
            pages or ModelPageSlugIndex(),
            enhancers or ModelEnhancerConfigStore(),
            routing_settings or load_settings(getattr(settings, 'FACET_ROUTING', None)),
        )

    def __call__(self, request: HttpRequest) -> HttpResponse:
        existing = parse_nested_query(self._query_pairs(request.GET))
        result = self.rewriter.rewrite(request.get_host(), request.path_info, existing)
        request.facet_routing = result

        if not result.rewritten:
            request.facet_query = existing
            return self.get_response(request)

        self._apply(request, result)
        return self.get_response(request)

    def _apply(self, request: HttpRequest, result: RewriteResult) -> None:
        query = request.GET.copy()
        roots = {str(key) for key in result.produced}
        for name in list(query.keys()):
            # Names that do not decode are kept verbatim.
            if query_root(name) in roots and is_nested_name(name):
                del query[name]

        replaced: Dict[Any, Any] = {key: value for key, value in result.query_params.items() if str(key) in roots}
        for name, value in encode_nested_query(replaced):
            query.appendlist(name, value)

        request.GET = query
        request.META['QUERY_STRING'] = query.urlencode()
        request.facet_query = parse_nested_query(self._query_pairs(query))

        script_name = request.META.get('SCRIPT_NAME', '')
        request.path_info = result.path
        request.META['PATH_INFO'] = result.path
        request.path = '%s/%s' % (script_name.rstrip('/'), result.path.replace('/', '', 1))

    @staticmethod
    def _query_pairs(query: QueryDict) -> list[tuple[str, str]]:
        return [(name, value) for name, values in query.lists() for value in values]


def facet_routing_middleware(get_response: Callable[[HttpRequest], HttpResponse]) -> FacetRoutingMiddleware:
    return FacetRoutingMiddleware(get_response)
