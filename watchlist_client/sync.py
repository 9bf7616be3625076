"""Optimistic watchlist synchronization.

``WatchlistSync`` keeps one ``SymbolState`` per symbol. A toggle updates the
local state before the request is sent, then confirms or reverts once the
server answers. Toggles are not queued: when several requests for the same
symbol overlap, whichever response arrives last decides the final state.
"""

from dataclasses import replace
from typing import Callable, Dict, Iterable, List, Optional, Set

import requests
from loguru import logger

from watchlist_client.api import StockWithWatchlistStatus, WatchlistApiClient
from watchlist_client.config import config
from watchlist_client.state import Confirm, Reset, Revert, SymbolState, Toggle, reduce

FAILURE_NOTICE = "Failed to update watchlist"


def _log_notice(message: str) -> None:
    logger.warning(message)


class WatchlistSync:
    """Client-side watchlist membership with optimistic toggles."""

    def __init__(
        self,
        api: Optional[WatchlistApiClient] = None,
        notify: Optional[Callable[[str], None]] = None,
        initial_stocks: Optional[Iterable[StockWithWatchlistStatus]] = None,
    ):
        self.api = api or WatchlistApiClient()
        self.notify = notify or _log_notice
        self.initial_stocks: List[StockWithWatchlistStatus] = list(initial_stocks or [])
        self.states: Dict[str, SymbolState] = {}

    # ------------------------------------------------------------------
    # Local state
    # ------------------------------------------------------------------

    def state(self, symbol: str) -> SymbolState:
        return self.states.get(symbol, SymbolState())

    def is_member(self, symbol: str) -> bool:
        return self.state(symbol).displayed

    @property
    def symbols(self) -> Set[str]:
        """Symbols currently shown as on the watchlist."""
        return {symbol for symbol, state in self.states.items() if state.displayed}

    def _dispatch(self, symbol: str, event) -> SymbolState:
        new_state = reduce(self.state(symbol), event)
        self.states[symbol] = new_state
        return new_state

    # ------------------------------------------------------------------
    # Server round trips
    # ------------------------------------------------------------------

    def toggle(self, symbol: str, company: str) -> bool:
        """Flip a symbol's membership, optimistically.

        Returns:
            The membership displayed once the server has answered
        """
        target = self._dispatch(symbol, Toggle()).displayed

        try:
            if target:
                response = self.api.add(symbol, company)
            else:
                response = self.api.remove(symbol, company)
        except requests.RequestException as e:
            logger.error(f"Network error updating watchlist for {symbol}: {e}")
            return self._dispatch(symbol, Revert(target)).displayed

        if not response.ok:
            logger.warning(f"Watchlist update for {symbol} rejected: HTTP {response.status_code}")
            new_state = self._dispatch(symbol, Revert(target))
            self.notify(FAILURE_NOTICE)
            return new_state.displayed

        return self._dispatch(symbol, Confirm(target)).displayed

    def reconcile(self) -> Set[str]:
        """Load authoritative membership and overwrite local state.

        An unauthenticated caller or a failed request is treated as an
        empty watchlist.
        """
        symbols: Set[str] = set()
        try:
            response = self.api.fetch_symbols()
            if response.status_code == 401:
                logger.info("Not signed in, treating watchlist as empty")
            elif response.ok:
                symbols = {str(s) for s in response.json()}
            else:
                # Keep local state; only a definitive answer overwrites it
                logger.warning(f"Watchlist fetch failed: HTTP {response.status_code}")
                return self.symbols
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Failed to fetch watchlist: {e}")

        self.states = {symbol: reduce(SymbolState(), Reset(True)) for symbol in symbols}
        return set(symbols)

    # ------------------------------------------------------------------
    # Candidate lists
    # ------------------------------------------------------------------

    def annotate(self, stocks: Iterable[StockWithWatchlistStatus]) -> List[StockWithWatchlistStatus]:
        """Copy ``stocks`` with membership flags taken from local state."""
        return [replace(stock, is_in_watchlist=self.is_member(stock.symbol)) for stock in stocks]

    def search(self, term: str) -> List[StockWithWatchlistStatus]:
        """Search stocks, flagging local membership.

        A blank term shows the first few initial stocks. A failed search
        yields an empty list.
        """
        if not term.strip():
            return self.annotate(self.initial_stocks[:config.initial_display_limit])

        try:
            results = self.api.search(term.strip())
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Search failed: {e}")
            return []
        return self.annotate(results)
