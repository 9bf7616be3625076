"""Client-side watchlist synchronization."""

from .api import StockWithWatchlistStatus, WatchlistApiClient
from .logger import setup_logger
from .state import SymbolState, Toggle, Confirm, Revert, Reset, reduce
from .sync import WatchlistSync, FAILURE_NOTICE

__all__ = [
    'StockWithWatchlistStatus',
    'WatchlistApiClient',
    'SymbolState',
    'Toggle',
    'Confirm',
    'Revert',
    'Reset',
    'reduce',
    'WatchlistSync',
    'FAILURE_NOTICE',
    'setup_logger',
]
