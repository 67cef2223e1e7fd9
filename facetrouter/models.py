"""Database models for the facetrouter app.

The app stores sites (one per host) and the pages published under them.
Each page has a slug, the canonical path the host resolves to a page.
A site also carries its route enhancer declarations, which describe how
a dynamic path tail after a page slug maps onto search parameters.
"""

from __future__ import annotations

from django.db import models


class Site(models.Model):
    """A configured site, matched against the request host."""

    identifier = models.SlugField(max_length=100, unique=True)
    base_url = models.CharField(max_length=255)
    default_language = models.CharField(max_length=10, default='en')
    route_enhancers = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['pk']

    def __str__(self) -> str:  # pragma: no cover - convenience display
        return self.identifier


class Page(models.Model):
    """A page of a site, addressed by its slug."""

    site = models.ForeignKey(Site, on_delete=models.CASCADE, related_name='pages')
    slug = models.CharField(max_length=255, db_index=True)
    language = models.CharField(max_length=10, default='en')
    title = models.CharField(max_length=300, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['pk']
        unique_together = ('site', 'slug', 'language')

    def __str__(self) -> str:  # pragma: no cover - convenience display
        return f"{self.site} · {self.slug}"
