"""Server-rendered watchlist page and its form actions.

Unlike the JSON API, these redirect unauthenticated callers to the sign-in
page instead of answering 401.
"""

import logging
from django.conf import settings
from django.http import HttpResponse, HttpResponseNotAllowed
from django.shortcuts import redirect, render

from watchlist_api.views.api import (
    get_market_data_client,
    get_watchlist_store,
    invalidate_view,
)
from watchlist_api.views.session import get_session

logger = logging.getLogger(__name__)


def watchlist_page(request):
    """Render the caller's watchlist with quotes and profiles."""
    from watchlist_api.services import get_cached_dashboard

    session = get_session(request)
    if session is None:
        return redirect(settings.LOGIN_URL)

    result = get_watchlist_store().list_symbols(session.email)
    if not result.symbols:
        return render(request, 'watchlist/page.html', {'rows': [], 'empty': True})

    client = get_market_data_client()
    if not client.configured:
        logger.error("watchlist_page: FINNHUB_API_KEY is not configured")
        return render(
            request,
            'watchlist/page.html',
            {'rows': [], 'config_error': 'API key missing. Please configure FINNHUB_API_KEY.'},
            status=503,
        )

    rows = get_cached_dashboard(result.user_id, result.symbols, client)
    return render(request, 'watchlist/page.html', {
        'rows': rows,
        'alert_rows': rows[:5],
    })


def add_action(request):
    """Form action: add a symbol, then return to the watchlist page."""
    if request.method != 'POST':
        return HttpResponseNotAllowed(['POST'])

    session = get_session(request)
    if session is None:
        return redirect(settings.LOGIN_URL)

    symbol = request.POST.get('symbol', '').strip()
    company = request.POST.get('company', '')
    if not symbol:
        return HttpResponse('symbol is required', status=400)

    result = get_watchlist_store().add_symbol(session.email, symbol, company)
    if not result:
        return HttpResponse('Failed to add to watchlist', status=500)

    invalidate_view(result.user_id)
    return redirect('watchlist-page')


def remove_action(request):
    """Form action: remove a symbol, then return to the watchlist page."""
    if request.method != 'POST':
        return HttpResponseNotAllowed(['POST'])

    session = get_session(request)
    if session is None:
        return redirect(settings.LOGIN_URL)

    symbol = request.POST.get('symbol', '').strip()
    if not symbol:
        return HttpResponse('symbol is required', status=400)

    result = get_watchlist_store().remove_symbol(session.email, symbol)
    if not result:
        return HttpResponse('Failed to remove from watchlist', status=500)

    invalidate_view(result.user_id)
    return redirect('watchlist-page')
