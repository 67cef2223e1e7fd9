from django.apps import AppConfig


class FacetRouterConfig(AppConfig):
    """Configuration for the facetrouter Django app."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'facetrouter'
