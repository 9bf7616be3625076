"""HTTP client for the watchlist server."""

from dataclasses import dataclass
from typing import Dict, List, Optional

import requests
from loguru import logger

from watchlist_client.config import config


@dataclass
class StockWithWatchlistStatus:
    """A search result or popular stock with its membership flag."""
    symbol: str
    name: str
    exchange: str = 'US'
    type: str = 'Stock'
    is_in_watchlist: bool = False

    @classmethod
    def from_dict(cls, data: Dict) -> 'StockWithWatchlistStatus':
        return cls(
            symbol=data['symbol'],
            name=data.get('name') or data['symbol'],
            exchange=data.get('exchange') or 'US',
            type=data.get('type') or 'Stock',
            is_in_watchlist=bool(data.get('isInWatchlist', False)),
        )


class WatchlistApiClient:
    """Thin wrapper over the watchlist endpoints.

    Methods return the raw ``requests.Response`` so callers decide what a
    non-2xx status means. Network errors propagate as
    ``requests.RequestException``.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        access_token: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or config.api.base_url).rstrip('/')
        self.timeout = timeout if timeout is not None else config.api.timeout
        self.session = session or requests.Session()

        token = config.api.access_token if access_token is None else access_token
        if token:
            self.session.headers['Authorization'] = f"Bearer {token}"

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def fetch_symbols(self) -> requests.Response:
        return self.session.get(self._url('/api/watchlist/symbols'), timeout=self.timeout)

    def add(self, symbol: str, company: str) -> requests.Response:
        logger.debug(f"POST add {symbol}")
        return self.session.post(
            self._url('/api/watchlist/add'),
            data={'symbol': symbol, 'company': company},
            timeout=self.timeout,
        )

    def remove(self, symbol: str, company: str = '') -> requests.Response:
        logger.debug(f"POST remove {symbol}")
        return self.session.post(
            self._url('/api/watchlist/remove'),
            data={'symbol': symbol, 'company': company},
            timeout=self.timeout,
        )

    def search(self, term: str) -> List[StockWithWatchlistStatus]:
        """Search stocks on the server.

        Raises:
            requests.RequestException: on network failure or non-2xx status
        """
        response = self.session.get(
            self._url('/api/stocks/search'),
            params={'q': term},
            timeout=self.timeout,
        )
        response.raise_for_status()
        return [StockWithWatchlistStatus.from_dict(item) for item in response.json()]
