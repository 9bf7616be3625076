"""
URL configuration for the Stock Watchlist project.
"""

from django.contrib import admin
from django.urls import path, include
from django.http import JsonResponse


def health_check(request):
    """Health check endpoint for load balancers."""
    return JsonResponse({'status': 'healthy', 'service': 'watchlist-api'})


urlpatterns = [
    # Health check (no auth required)
    path('health', health_check, name='health'),

    # Admin
    path('admin/', admin.site.urls),

    # Authentication
    path('auth/', include('watchlist_api.urls.auth')),

    # API endpoints
    path('api/', include('watchlist_api.urls.api')),

    # Server-rendered pages and page-level actions
    path('', include('watchlist_api.urls.pages')),
]
