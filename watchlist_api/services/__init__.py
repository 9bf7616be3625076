"""Watchlist services package.

Persistence, identity resolution, market data and dashboard helpers used by
the API and page views.
"""

from .watchlist_store import (
    StoreResult,
    StoreStatus,
    WatchlistStore,
    store,
    get_watchlist_symbols_by_email,
    add_to_watchlist,
    remove_from_watchlist,
    is_in_watchlist,
)
from .identity import resolve_user_id
from .market_data import FinnhubClient, MarketDataError, fetch_json, get_market_data_client
from .dashboard import get_cached_dashboard, invalidate_watchlist_view

__all__ = [
    'StoreResult',
    'StoreStatus',
    'WatchlistStore',
    'store',
    'get_watchlist_symbols_by_email',
    'add_to_watchlist',
    'remove_from_watchlist',
    'is_in_watchlist',
    'resolve_user_id',
    'FinnhubClient',
    'MarketDataError',
    'fetch_json',
    'get_market_data_client',
    'get_cached_dashboard',
    'invalidate_watchlist_view',
]
