"""Project URL configuration.

The admin lives under ``/admin/``; every other path is a site page.
"""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path('admin/', admin.site.urls),
    path('', include('facetrouter.urls')),
]
