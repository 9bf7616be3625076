"""Watchlist API models."""

from .user import User
from .watchlist import WatchlistEntry

__all__ = [
    'User',
    'WatchlistEntry',
]
