"""Database-backed collaborators for the routing pipeline.

The routing core only knows three read-only interfaces: a site resolver,
a page slug index and a store of route enhancer declarations. This module
implements them on top of the ``Site`` and ``Page`` models, and imports
site configuration documents into those models.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence
from urllib.parse import urlsplit

from django.db import DatabaseError, IntegrityError, transaction

from .models import Page, Site
from .routing.config import default_language
from .routing.errors import ConfigurationError, MalformedBaseURI, SlugLookupError
from .routing.types import PageCandidate

logger = logging.getLogger(__name__)


def normalize_host(host: str) -> str:
    """Lower-case a ``Host`` header value and drop its port."""

    try:
        hostname = urlsplit(f"//{host}").hostname
    except ValueError:
        return ''
    return hostname or ''


def base_host(base: str) -> str:
    """Return the host part of a site's base URL.

    A base without a scheme (such as ``/``) has an empty host.
    """

    try:
        parts = urlsplit(base)
        hostname = parts.hostname
    except ValueError as exc:
        raise MalformedBaseURI(base) from exc
    return hostname or ''


def candidate_slugs(path: str) -> List[str]:
    """Return every slug that could match ``path`` or one of its prefixes.

    Each prefix is listed with and without a trailing slash, longest
    first, ending with the root slug ``/``.
    """

    segments = [segment for segment in path.split('/') if segment]
    candidates: List[str] = []
    while segments:
        prefix = '/' + '/'.join(segments)
        candidates.extend([prefix + '/', prefix])
        segments.pop()
    candidates.append('/')
    return candidates


class ModelSiteResolver:
    """Match the request host against the configured sites."""

    def find_site_for_host(self, host: str) -> Optional[Site]:
        sites = list(Site.objects.all())
        if len(sites) == 1:
            return sites[0]

        wanted = normalize_host(host)
        for site in sites:
            try:
                site_host = base_host(site.base_url)
            except MalformedBaseURI:
                logger.warning("Skipping site %s with malformed base %r", site.identifier, site.base_url)
                continue

            if site_host != wanted:
                continue
            return site

        return None


class ModelPageSlugIndex:
    """Look up pages whose slug is a prefix of a request path."""

    def candidates_for_path(self, site: Site, path: str, language: str) -> Sequence[PageCandidate]:
        try:
            pages = list(
                Page.objects
                .filter(site=site, language=language, slug__in=candidate_slugs(path))
                .values_list('pk', 'slug')
            )
        except DatabaseError as exc:
            raise SlugLookupError(f"Slug lookup failed for {path!r}") from exc

        pages.sort(key=lambda item: len(item[1]), reverse=True)
        return [PageCandidate(page_id=pk, slug=slug) for pk, slug in pages]


class ModelEnhancerConfigStore:
    """Read route enhancer declarations stored on the site."""

    def route_enhancers(self, site: Site) -> Optional[Mapping[str, Any]]:
        return site.route_enhancers


@transaction.atomic
def import_site_document(identifier: str, document: Mapping[str, Any]) -> Site:
    """Create or update a site, and its pages, from a configuration document.

    Pages are optional and listed under ``pages`` as mappings with ``id``,
    ``slug`` and ``title``; ``id`` is what ``limitToPages`` refers to.
    """

    language = default_language(document)
    site, _ = Site.objects.update_or_create(
        identifier=identifier,
        defaults={
            'base_url': str(document['base']),
            'default_language': language,
            'route_enhancers': document.get('routeEnhancers') or {},
        },
    )

    for entry in document.get('pages') or []:
        page_data = _page_entry(entry)
        defaults: Dict[str, Any] = {
            'site': site,
            'slug': page_data['slug'],
            'language': language,
            'title': page_data['title'],
        }
        if page_data['id'] is not None and Page.objects.filter(pk=page_data['id']).exclude(site=site).exists():
            raise ConfigurationError(f"Page {page_data['id']} belongs to another site")

        try:
            if page_data['id'] is None:
                Page.objects.update_or_create(site=site, slug=page_data['slug'], language=language, defaults=defaults)
            else:
                Page.objects.update_or_create(pk=page_data['id'], defaults=defaults)
        except IntegrityError as exc:
            raise ConfigurationError(f"Page slug {page_data['slug']!r} is already taken on {identifier}") from exc

    return site


def _page_entry(entry: Any) -> Dict[str, Any]:
    if not isinstance(entry, Mapping) or not entry.get('slug'):
        raise ConfigurationError(f"Page entries need a slug: {entry!r}")

    page_id = entry.get('id')
    if page_id is not None:
        try:
            page_id = int(page_id)
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"Page id must be an integer: {page_id!r}") from exc

    return {
        'id': page_id,
        'slug': str(entry['slug']),
        'title': str(entry.get('title', '')),
    }
