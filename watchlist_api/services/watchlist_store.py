"""Watchlist persistence.

Every operation resolves the caller's email to an owner id, normalizes the
symbol to uppercase and converts any failure into a ``StoreResult`` instead
of raising. Callers that only need the boolean answer can use the
module-level helpers at the bottom of this file.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from watchlist_api.models import WatchlistEntry
from watchlist_api.services.identity import resolve_user_id

logger = logging.getLogger(__name__)


class StoreStatus(str, Enum):
    """Outcome of a store operation."""
    OK = 'ok'
    NOT_FOUND = 'not_found'
    FAILURE = 'failure'


@dataclass(frozen=True)
class StoreResult:
    """Result of a store operation.

    Truthy only for ``StoreStatus.OK``.
    """
    status: StoreStatus
    symbols: List[str] = field(default_factory=list)
    user_id: Optional[str] = None
    created: bool = False
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is StoreStatus.OK

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def not_found(cls, user_id: Optional[str] = None) -> 'StoreResult':
        return cls(StoreStatus.NOT_FOUND, user_id=user_id)

    @classmethod
    def failure(cls, error: Exception) -> 'StoreResult':
        return cls(StoreStatus.FAILURE, error=str(error))


def normalize_symbol(symbol: str) -> str:
    """Uppercase a ticker symbol."""
    return symbol.upper()


class WatchlistStore:
    """Per-user watchlist operations keyed by ``(user_id, SYMBOL)``."""

    def list_symbols(self, email: str) -> StoreResult:
        """Get the symbols on a user's watchlist."""
        if not email:
            return StoreResult.not_found()

        try:
            user_id = resolve_user_id(email)
            if not user_id:
                return StoreResult.not_found()

            symbols = list(
                WatchlistEntry.objects
                .filter(user_id=user_id)
                .values_list('symbol', flat=True)
            )
            logger.debug(f"Loaded {len(symbols)} watchlist symbols for user {user_id}")
            return StoreResult(StoreStatus.OK, symbols=[str(s) for s in symbols], user_id=user_id)

        except Exception as e:
            logger.error(f"list_symbols error for {email}: {e}")
            return StoreResult.failure(e)

    def add_symbol(self, email: str, symbol: str, company: str) -> StoreResult:
        """Add a symbol if absent.

        ``company`` and ``added_at`` are only written on first insert, so
        repeated adds succeed without touching the stored record.
        """
        try:
            user_id = resolve_user_id(email)
            if not user_id:
                logger.error(f"User not found for email: {email}")
                return StoreResult.not_found()

            entry, created = WatchlistEntry.objects.get_or_create(
                user_id=user_id,
                symbol=normalize_symbol(symbol),
                defaults={'company': company.strip()},
            )

            if created:
                logger.info(f"Watchlist add: user={user_id} symbol={entry.symbol}")
            else:
                logger.debug(f"Watchlist add no-op, already present: user={user_id} symbol={entry.symbol}")

            return StoreResult(StoreStatus.OK, symbols=[entry.symbol], user_id=user_id, created=created)

        except Exception as e:
            logger.error(f"add_symbol error for {email}/{symbol}: {e}")
            return StoreResult.failure(e)

    def remove_symbol(self, email: str, symbol: str) -> StoreResult:
        """Delete a symbol.

        Removing a symbol that is not on the watchlist reports NOT_FOUND.
        """
        try:
            user_id = resolve_user_id(email)
            if not user_id:
                return StoreResult.not_found()

            symbol = normalize_symbol(symbol)
            deleted, _ = WatchlistEntry.objects.filter(user_id=user_id, symbol=symbol).delete()

            if deleted > 0:
                logger.info(f"Watchlist remove: user={user_id} symbol={symbol}")
                return StoreResult(StoreStatus.OK, symbols=[symbol], user_id=user_id)

            logger.info(f"Watchlist remove, symbol not present: user={user_id} symbol={symbol}")
            return StoreResult.not_found(user_id=user_id)

        except Exception as e:
            logger.error(f"remove_symbol error for {email}/{symbol}: {e}")
            return StoreResult.failure(e)

    def is_member(self, email: str, symbol: str) -> StoreResult:
        """Check whether a symbol is on the user's watchlist."""
        try:
            user_id = resolve_user_id(email)
            if not user_id:
                return StoreResult.not_found()

            symbol = normalize_symbol(symbol)
            if WatchlistEntry.objects.filter(user_id=user_id, symbol=symbol).exists():
                return StoreResult(StoreStatus.OK, symbols=[symbol], user_id=user_id)
            return StoreResult.not_found(user_id=user_id)

        except Exception as e:
            logger.error(f"is_member error for {email}/{symbol}: {e}")
            return StoreResult.failure(e)


store = WatchlistStore()


def get_watchlist_symbols_by_email(email: str) -> List[str]:
    return store.list_symbols(email).symbols


def add_to_watchlist(email: str, symbol: str, company: str) -> bool:
    return bool(store.add_symbol(email, symbol, company))


def remove_from_watchlist(email: str, symbol: str) -> bool:
    return bool(store.remove_symbol(email, symbol))


def is_in_watchlist(email: str, symbol: str) -> bool:
    return bool(store.is_member(email, symbol))
