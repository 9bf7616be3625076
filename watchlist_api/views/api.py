"""Watchlist API views.

Authentication is checked inside each view rather than by a permission
class, so unauthenticated callers get the documented body (``[]`` for the
symbol list, ``{'error': ...}`` elsewhere) along with the 401. Rejected
credentials get the same answer, see ``WatchlistAPIView``.
"""

import logging
import time
from rest_framework import exceptions, status
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import AllowAny

from watchlist_api.services.watchlist_store import normalize_symbol
from watchlist_api.views.session import get_session

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Lazy import helpers
# ---------------------------------------------------------------------------

def get_watchlist_store():
    """Get the shared watchlist store."""
    from watchlist_api.services import store
    return store


def get_market_data_client():
    """Get a market data client configured from settings."""
    from watchlist_api.services import get_market_data_client as _get_client
    return _get_client()


def invalidate_view(user_id):
    from watchlist_api.services import invalidate_watchlist_view
    invalidate_watchlist_view(user_id)


class WatchlistAPIView(APIView):
    """Base view for the watchlist endpoints.

    A bearer token that fails validation, or a session request that fails
    the CSRF check, is answered like a request without credentials.
    """

    permission_classes = [AllowAny]
    credential_errors = (
        exceptions.NotAuthenticated,
        exceptions.AuthenticationFailed,
        exceptions.PermissionDenied,
    )

    def unauthorized(self):
        return Response({'error': 'Unauthorized'}, status=status.HTTP_401_UNAUTHORIZED)

    def handle_exception(self, exc):
        if isinstance(exc, self.credential_errors):
            logger.info(f"{type(self).__name__}: credentials rejected: {exc}")
            return self.unauthorized()
        return super().handle_exception(exc)


class WatchlistSymbolsView(WatchlistAPIView):
    """List the caller's watchlist symbols."""

    def unauthorized(self):
        return Response([], status=status.HTTP_401_UNAUTHORIZED)

    def get(self, request):
        session = get_session(request)
        if session is None:
            return self.unauthorized()

        result = get_watchlist_store().list_symbols(session.email)
        return Response(result.symbols)


class WatchlistAddView(WatchlistAPIView):
    """Add a symbol to the caller's watchlist."""

    def post(self, request):
        session = get_session(request)
        if session is None:
            return self.unauthorized()

        symbol = (request.data.get('symbol') or '').strip()
        company = request.data.get('company')
        if not symbol or company is None:
            return Response(
                {'error': 'symbol and company are required'},
                status=status.HTTP_400_BAD_REQUEST
            )

        result = get_watchlist_store().add_symbol(session.email, symbol, company)
        if not result:
            logger.warning(f"Watchlist add failed for {session.email}/{symbol}: {result.status.value}")
            return Response(
                {'error': 'Failed to add to watchlist'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        invalidate_view(result.user_id)
        return Response({'success': True})


class WatchlistRemoveView(WatchlistAPIView):
    """Remove a symbol from the caller's watchlist."""

    def post(self, request):
        session = get_session(request)
        if session is None:
            return self.unauthorized()

        symbol = (request.data.get('symbol') or '').strip()
        if not symbol:
            return Response({'error': 'symbol is required'}, status=status.HTTP_400_BAD_REQUEST)

        result = get_watchlist_store().remove_symbol(session.email, symbol)
        if not result:
            logger.warning(f"Watchlist remove failed for {session.email}/{symbol}: {result.status.value}")
            return Response(
                {'error': 'Failed to remove from watchlist'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        invalidate_view(result.user_id)
        return Response({'success': True})


class WatchlistStatusView(WatchlistAPIView):
    """Check whether one symbol is on the caller's watchlist."""

    def get(self, request):
        session = get_session(request)
        if session is None:
            return self.unauthorized()

        symbol = (request.query_params.get('symbol') or '').strip()
        if not symbol:
            return Response({'error': 'symbol is required'}, status=status.HTTP_400_BAD_REQUEST)

        result = get_watchlist_store().is_member(session.email, symbol)
        return Response({'symbol': normalize_symbol(symbol), 'in_watchlist': bool(result)})


class WatchlistDashboardView(WatchlistAPIView):
    """Watchlist symbols enriched with quotes and company profiles."""

    def get(self, request):
        from watchlist_api.services import get_cached_dashboard

        start_time = time.time()
        session = get_session(request)
        if session is None:
            return self.unauthorized()

        result = get_watchlist_store().list_symbols(session.email)
        if not result.symbols:
            return Response({'watchlist': []})

        client = get_market_data_client()
        if not client.configured:
            logger.error("WatchlistDashboardView: FINNHUB_API_KEY is not configured")
            return Response(
                {'error': 'Stock data unavailable: FINNHUB_API_KEY is not configured'},
                status=status.HTTP_503_SERVICE_UNAVAILABLE
            )

        try:
            rows = get_cached_dashboard(result.user_id, result.symbols, client)
        except Exception as e:
            elapsed = time.time() - start_time
            logger.error(f"WatchlistDashboardView.get failed in {elapsed:.2f}s: {e}")
            return Response(
                {'error': 'Failed to load watchlist data'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        elapsed = time.time() - start_time
        logger.info(f"WatchlistDashboardView.get completed in {elapsed:.2f}s: {len(rows)} symbols")
        return Response({'watchlist': rows})


class StockSearchView(WatchlistAPIView):
    """Search stocks; results carry the caller's watchlist membership."""

    def get(self, request):
        from watchlist_api.services.search import search_stocks

        query = request.query_params.get('q', '')
        session = get_session(request)
        symbols = get_watchlist_store().list_symbols(session.email).symbols if session else []

        try:
            results = search_stocks(query, get_market_data_client(), symbols)
        except Exception as e:
            logger.error(f"Stock search failed for '{query}': {e}")
            return Response({'error': 'Search failed'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(results)
