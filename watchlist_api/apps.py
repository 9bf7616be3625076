"""Watchlist API app configuration."""

from django.apps import AppConfig


class WatchlistApiConfig(AppConfig):
    """Watchlist API application configuration."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'watchlist_api'
    verbose_name = 'Stock Watchlist API'
