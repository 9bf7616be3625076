"""Watchlist dashboard rows and their per-user cache."""

import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from django.conf import settings
from django.core.cache import cache

from watchlist_api.services.market_data import FinnhubClient

logger = logging.getLogger(__name__)

PLACEHOLDER = '—'


@dataclass
class DashboardRow:
    """One watchlist symbol enriched with market data."""
    symbol: str
    company: str
    price: str
    change: str
    change_positive: Optional[bool]
    market_cap: str
    pe_ratio: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def format_price(quote: Optional[Dict[str, Any]]) -> str:
    if not quote or quote.get('c') is None:
        return PLACEHOLDER
    return f"${quote['c']:.2f}"


def format_change(quote: Optional[Dict[str, Any]]) -> str:
    # A zero change renders as a placeholder, like a missing one
    if not quote or not quote.get('d'):
        return PLACEHOLDER
    sign = '+' if quote['d'] >= 0 else ''
    return f"{sign}{quote['d']:.2f} ({quote.get('dp') or 0:.2f}%)"


def format_market_cap(profile: Optional[Dict[str, Any]]) -> str:
    """Finnhub reports market cap in millions; shown in billions."""
    market_cap = (profile or {}).get('marketCapitalization')
    if not market_cap or market_cap <= 0:
        return PLACEHOLDER
    return f"${market_cap / 1e3:.1f}B"


def format_pe_ratio(profile: Optional[Dict[str, Any]]) -> str:
    pe_ratio = (profile or {}).get('peRatio')
    if not pe_ratio or pe_ratio <= 0:
        return PLACEHOLDER
    return f"{pe_ratio:.1f}"


def build_row(symbol: str, quote: Optional[Dict[str, Any]], profile: Optional[Dict[str, Any]]) -> DashboardRow:
    change = (quote or {}).get('d')
    return DashboardRow(
        symbol=symbol,
        company=(profile or {}).get('name') or symbol,
        price=format_price(quote),
        change=format_change(quote),
        change_positive=(change >= 0) if change else None,
        market_cap=format_market_cap(profile),
        pe_ratio=format_pe_ratio(profile),
    )


def build_dashboard(symbols: List[str], client: FinnhubClient) -> List[DashboardRow]:
    """Fetch quote and profile for every symbol and format the rows."""
    rows = []
    for symbol in symbols:
        quote = client.get_quote(symbol)
        profile = client.get_profile(symbol)
        rows.append(build_row(symbol, quote, profile))
    return rows


def view_cache_key(user_id: str) -> str:
    return f"watchlist:view:{user_id}"


def view_ttl() -> int:
    """Seconds a dashboard stays cached; never longer than a cached quote."""
    return min(settings.WATCHLIST_VIEW_TTL, settings.MARKET_DATA['QUOTE_TTL'])


def get_cached_dashboard(user_id: str, symbols: List[str], client: FinnhubClient) -> List[Dict[str, Any]]:
    """Return the user's dashboard rows, building them on a cache miss."""
    key = view_cache_key(user_id)
    rows = cache.get(key)
    if rows is not None:
        logger.debug(f"Dashboard cache hit for user {user_id}")
        return rows

    rows = [row.to_dict() for row in build_dashboard(symbols, client)]
    cache.set(key, rows, timeout=view_ttl())
    logger.debug(f"Dashboard cached for user {user_id}: {len(rows)} rows")
    return rows


def invalidate_watchlist_view(user_id: Optional[str]) -> None:
    """Mark the user's watchlist view stale so the next render recomputes it."""
    if not user_id:
        return
    cache.delete(view_cache_key(user_id))
    logger.debug(f"Watchlist view invalidated for user {user_id}")
