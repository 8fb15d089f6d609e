"""
Storefront URL Configuration
"""

from django.contrib import admin
from django.urls import path, include
from django.http import JsonResponse

from storefront.config import config


def api_root(request):
    """API root — minimal public surface."""
    return JsonResponse({
        "service": "Storefront API",
        "version": "1.0.0",
        "notice": "Use /api/v1/ prefix. Unversioned /api/ is deprecated.",
        "example": "/api/v1/products/search/?q=red+shirt+for+men",
    })


urlpatterns = [
    path('', api_root, name='api_root'),
    path(f'{config.security.admin_url}/', admin.site.urls),

    # ── Versioned API (canonical) ─────────────────────────────────────
    path('api/v1/', include('catalog.urls')),

    # ── Legacy unversioned API (deprecated, kept for backward compat) ─
    path('api/', include(('catalog.urls', 'catalog'), namespace='catalog-legacy')),
]
