"""Import a YAML site configuration into the database."""

from __future__ import annotations

from django.core.management.base import BaseCommand, CommandError

from facetrouter.routing.config import load_site_document
from facetrouter.routing.errors import ConfigurationError
from facetrouter.services import import_site_document


class Command(BaseCommand):
    help = 'Create or update a site, its pages and route enhancers from a YAML config file.'

    def add_arguments(self, parser) -> None:
        parser.add_argument('identifier', help='Site identifier, e.g. "main".')
        parser.add_argument('path', help='Path to the site config.yaml.')

    def handle(self, *args, **options) -> None:
        try:
            document = load_site_document(options['path'])
            site = import_site_document(options['identifier'], document)
        except ConfigurationError as exc:
            raise CommandError(str(exc)) from exc

        enhancers = len(site.route_enhancers or {})
        pages = site.pages.count()
        self.stdout.write(
            self.style.SUCCESS(
                f'Loaded site {site.identifier} ({site.base_url}) with {pages} pages and {enhancers} route enhancers.'
            )
        )
