from django.contrib import admin

from .models import Page, Site


@admin.register(Site)
class SiteAdmin(admin.ModelAdmin):
    list_display = ('identifier', 'base_url', 'default_language', 'created_at')
    search_fields = ('identifier', 'base_url')


@admin.register(Page)
class PageAdmin(admin.ModelAdmin):
    list_display = ('slug', 'site', 'language', 'title', 'created_at')
    list_filter = ('site', 'language')
    search_fields = ('slug', 'title')
