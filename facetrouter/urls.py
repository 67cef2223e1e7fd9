"""URL configuration for the facetrouter app.

Every path is handed to the page view; the facet routing middleware has
already reduced pretty facet URLs to their page slug by the time the
resolver sees them.
"""

from django.urls import re_path

from . import views

app_name = 'facetrouter'

urlpatterns = [
    re_path(r'^(?P<path>.*)$', views.page_detail, name='page'),
]
