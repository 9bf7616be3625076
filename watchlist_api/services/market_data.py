"""Market data client for quotes, company profiles and symbol search (Finnhub)."""

import hashlib
import json
import logging
from typing import Any, Dict, List, Optional

import requests
from django.conf import settings
from django.core.cache import cache

logger = logging.getLogger(__name__)


class MarketDataError(Exception):
    """Raised when a market data request cannot be completed."""


def _cache_key(url: str, params: Optional[Dict[str, Any]]) -> str:
    raw = url + '?' + json.dumps(params or {}, sort_keys=True)
    return 'market:' + hashlib.sha256(raw.encode('utf-8')).hexdigest()


def fetch_json(
    url: str,
    params: Optional[Dict[str, Any]] = None,
    revalidate_seconds: Optional[int] = None,
    timeout: float = 10,
) -> Any:
    """GET a JSON document, caching it for ``revalidate_seconds``.

    Without ``revalidate_seconds`` the response is never cached.

    Raises:
        MarketDataError: on network failure, non-2xx status or invalid JSON
    """
    key = _cache_key(url, params) if revalidate_seconds else None
    if key:
        cached = cache.get(key)
        if cached is not None:
            return cached

    try:
        response = requests.get(url, params=params, timeout=timeout)
        response.raise_for_status()
        data = response.json()
    except requests.RequestException as e:
        raise MarketDataError(f"Request to {url} failed: {e}") from e
    except ValueError as e:
        raise MarketDataError(f"Invalid JSON from {url}: {e}") from e

    if key:
        cache.set(key, data, timeout=revalidate_seconds)
    return data


class FinnhubClient:
    """Client for the Finnhub REST API."""

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None):
        market_config = settings.MARKET_DATA
        self.api_key = market_config.get('FINNHUB_API_KEY', '') if api_key is None else api_key
        self.base_url = (base_url or market_config['FINNHUB_BASE_URL']).rstrip('/')
        self.timeout = market_config.get('REQUEST_TIMEOUT', 10)
        self.quote_ttl = market_config.get('QUOTE_TTL', 60)
        self.profile_ttl = market_config.get('PROFILE_TTL', 3600)
        self.search_ttl = market_config.get('SEARCH_TTL', 1800)

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def _get(self, path: str, params: Dict[str, Any], ttl: int) -> Any:
        params = dict(params, token=self.api_key)
        return fetch_json(
            f"{self.base_url}{path}",
            params=params,
            revalidate_seconds=ttl,
            timeout=self.timeout,
        )

    def get_quote(self, symbol: str) -> Optional[Dict[str, float]]:
        """Get the latest quote for a symbol.

        Args:
            symbol: Stock ticker symbol (e.g., 'AAPL')

        Returns:
            Finnhub quote dict (``c``, ``d``, ``dp``, ``h``, ``l``, ``o``, ``pc``)
            or None if unavailable
        """
        try:
            quote = self._get('/quote', {'symbol': symbol}, self.quote_ttl)
        except MarketDataError as e:
            logger.error(f"Error fetching quote for {symbol}: {e}")
            return None
        return quote or None

    def get_profile(self, symbol: str) -> Optional[Dict[str, Any]]:
        """Get the company profile for a symbol, or None if unavailable."""
        try:
            profile = self._get('/stock/profile2', {'symbol': symbol}, self.profile_ttl)
        except MarketDataError as e:
            logger.error(f"Error fetching profile for {symbol}: {e}")
            return None
        return profile or None

    def search(self, query: str) -> List[Dict[str, str]]:
        """Search symbols by ticker or company name.

        Returns:
            List of dicts with ``symbol``, ``name``, ``exchange`` and ``type``
        """
        try:
            data = self._get('/search', {'q': query}, self.search_ttl)
        except MarketDataError as e:
            logger.error(f"Error searching symbols for '{query}': {e}")
            return []

        results = []
        for item in (data or {}).get('result', []):
            symbol = item.get('symbol') or ''
            if not symbol:
                continue
            results.append({
                'symbol': symbol.upper(),
                'name': item.get('description') or symbol,
                'exchange': 'US',
                'type': item.get('type') or 'Stock',
            })
        return results


def get_market_data_client() -> FinnhubClient:
    """Build a client from settings."""
    return FinnhubClient()
