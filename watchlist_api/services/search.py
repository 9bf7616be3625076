"""Stock search annotated with watchlist membership."""

import logging
from typing import Dict, Iterable, List, Any

from django.conf import settings

from watchlist_api.services.market_data import FinnhubClient

logger = logging.getLogger(__name__)

POPULAR_LIMIT = 10


def popular_stocks(client: FinnhubClient) -> List[Dict[str, str]]:
    """Popular symbols with their profile names, shown before a query is typed."""
    stocks = []
    for symbol in settings.MARKET_DATA['POPULAR_SYMBOLS'][:POPULAR_LIMIT]:
        profile = client.get_profile(symbol) or {}
        stocks.append({
            'symbol': symbol,
            'name': profile.get('name') or symbol,
            'exchange': profile.get('exchange') or 'US',
            'type': 'Stock',
        })
    return stocks


def search_stocks(query: str, client: FinnhubClient, watchlist_symbols: Iterable[str]) -> List[Dict[str, Any]]:
    """Search stocks and flag the ones already on the watchlist.

    A blank query returns the popular list.
    """
    query = (query or '').strip()
    if query:
        limit = settings.MARKET_DATA.get('SEARCH_LIMIT', 15)
        stocks = client.search(query)[:limit]
    else:
        stocks = popular_stocks(client)

    members = set(watchlist_symbols)
    logger.debug(f"Stock search '{query}': {len(stocks)} results")
    return [dict(stock, isInWatchlist=stock['symbol'] in members) for stock in stocks]
