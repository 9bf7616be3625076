import pytest
from unittest.mock import patch

from watchlist_api.models import WatchlistEntry
from watchlist_api.services.search import search_stocks


SEARCH_URL = '/api/stocks/search'


def test_blank_query_returns_popular_stocks(market_client, settings):
    settings.MARKET_DATA = dict(settings.MARKET_DATA, POPULAR_SYMBOLS=['AAPL', 'MSFT'])

    results = search_stocks('  ', market_client, ['MSFT'])

    assert [r['symbol'] for r in results] == ['AAPL', 'MSFT']
    assert results[0]['name'] == 'AAPL Inc'
    assert [r['isInWatchlist'] for r in results] == [False, True]
    market_client.search.assert_not_called()


def test_query_results_are_capped_and_annotated(market_client, settings):
    settings.MARKET_DATA = dict(settings.MARKET_DATA, SEARCH_LIMIT=2)
    market_client.search.return_value = [
        {'symbol': s, 'name': s, 'exchange': 'US', 'type': 'Common Stock'} for s in ('TSLA', 'TSLL', 'TSLQ')
    ]

    results = search_stocks('tsla', market_client, {'TSLA'})

    market_client.search.assert_called_once_with('tsla')
    assert [r['symbol'] for r in results] == ['TSLA', 'TSLL']
    assert results[0]['isInWatchlist'] is True
    assert results[1]['isInWatchlist'] is False


@pytest.mark.django_db
def test_search_endpoint_flags_caller_membership(auth_client, user, market_client):
    WatchlistEntry.objects.create(user_id=str(user.pk), symbol='AAPL', company='Apple Inc')
    market_client.search.return_value = [
        {'symbol': 'AAPL', 'name': 'APPLE INC', 'exchange': 'US', 'type': 'Common Stock'},
    ]

    with patch('watchlist_api.views.api.get_market_data_client', return_value=market_client):
        response = auth_client.get(SEARCH_URL, {'q': 'apple'})

    assert response.status_code == 200
    assert response.json() == [
        {'symbol': 'AAPL', 'name': 'APPLE INC', 'exchange': 'US', 'type': 'Common Stock', 'isInWatchlist': True},
    ]


@pytest.mark.django_db
def test_search_endpoint_for_anonymous_caller(api_client, market_client):
    market_client.search.return_value = [
        {'symbol': 'AAPL', 'name': 'APPLE INC', 'exchange': 'US', 'type': 'Common Stock'},
    ]

    with patch('watchlist_api.views.api.get_market_data_client', return_value=market_client):
        response = api_client.get(SEARCH_URL, {'q': 'apple'})

    assert response.status_code == 200
    assert response.json()[0]['isInWatchlist'] is False
