"""Watchlist API views package."""

from .auth import (
    RegisterView,
    LoginView,
    LogoutView,
    CurrentUserView,
)

from .api import (
    WatchlistSymbolsView,
    WatchlistAddView,
    WatchlistRemoveView,
    WatchlistStatusView,
    WatchlistDashboardView,
    StockSearchView,
)

__all__ = [
    # Auth views
    'RegisterView',
    'LoginView',
    'LogoutView',
    'CurrentUserView',
    # API views
    'WatchlistSymbolsView',
    'WatchlistAddView',
    'WatchlistRemoveView',
    'WatchlistStatusView',
    'WatchlistDashboardView',
    'StockSearchView',
]
