"""Django views for the facetrouter app.

The page view stands in for the host's page rendering: it resolves the
(already rewritten) request path to a page and reports the search
parameters the facet routing middleware attached to the request.
"""

from __future__ import annotations

from django.http import Http404, HttpRequest, JsonResponse
from django.shortcuts import get_object_or_404
from django.views.decorators.http import require_GET

from .models import Page
from .routing.query import parse_nested_query
from .services import ModelSiteResolver


@require_GET
def page_detail(request: HttpRequest, path: str = '') -> JsonResponse:
    """Return the page addressed by the request path with its search parameters."""

    site = ModelSiteResolver().find_site_for_host(request.get_host())
    if site is None:
        raise Http404('No site is configured for this host.')

    page = get_object_or_404(Page, site=site, slug=request.path_info, language=site.default_language)
    query = getattr(request, 'facet_query', None)
    if query is None:
        query = parse_nested_query((name, value) for name, values in request.GET.lists() for value in values)

    routing = getattr(request, 'facet_routing', None)
    return JsonResponse(
        {
            'site': site.identifier,
            'page': {'id': page.pk, 'slug': page.slug, 'title': page.title},
            'query': query,
            'routing': routing.outcome.value if routing is not None else None,
        }
    )
