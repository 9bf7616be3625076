"""API URL configuration for watchlist endpoints."""

from django.urls import path
from watchlist_api.views import api

urlpatterns = [
    # Watchlist membership
    path('watchlist/symbols', api.WatchlistSymbolsView.as_view(), name='api-watchlist-symbols'),
    path('watchlist/add', api.WatchlistAddView.as_view(), name='api-watchlist-add'),
    path('watchlist/remove', api.WatchlistRemoveView.as_view(), name='api-watchlist-remove'),
    path('watchlist/status', api.WatchlistStatusView.as_view(), name='api-watchlist-status'),

    # Watchlist enriched with quotes
    path('watchlist/dashboard', api.WatchlistDashboardView.as_view(), name='api-watchlist-dashboard'),

    # Symbol search
    path('stocks/search', api.StockSearchView.as_view(), name='api-stock-search'),
]
