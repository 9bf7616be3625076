import pytest
from unittest.mock import MagicMock, patch
from django.core.cache import cache
from django.test import Client

from watchlist_api.models import WatchlistEntry
from watchlist_api.services.dashboard import view_cache_key
from watchlist_api.services.watchlist_store import StoreResult, StoreStatus, WatchlistStore


@pytest.fixture
def page_client(user):
    client = Client()
    client.force_login(user)
    return client


@pytest.mark.django_db
def test_page_redirects_anonymous_to_sign_in():
    response = Client().get('/watchlist/')

    assert response.status_code == 302
    assert response['Location'] == '/sign-in'


@pytest.mark.django_db
def test_page_action_redirects_anonymous_to_sign_in():
    response = Client().post('/watchlist/add', {'symbol': 'AAPL', 'company': 'Apple Inc'})

    assert response.status_code == 302
    assert response['Location'] == '/sign-in'
    assert WatchlistEntry.objects.count() == 0


@pytest.mark.django_db
def test_empty_watchlist_page(page_client):
    response = page_client.get('/watchlist/')

    assert response.status_code == 200
    assert b'No stocks in your watchlist yet.' in response.content


@pytest.mark.django_db
def test_page_renders_rows(page_client, user, market_client):
    WatchlistEntry.objects.create(user_id=str(user.pk), symbol='NFLX', company='Netflix')

    with patch('watchlist_api.views.pages.get_market_data_client', return_value=market_client):
        response = page_client.get('/watchlist/')

    assert response.status_code == 200
    content = response.content.decode()
    assert 'NFLX' in content
    assert '$190.50' in content
    assert '$2950.0B' in content


@pytest.mark.django_db
def test_page_without_api_key(page_client, user, market_client):
    WatchlistEntry.objects.create(user_id=str(user.pk), symbol='NFLX', company='Netflix')
    market_client.configured = False

    with patch('watchlist_api.views.pages.get_market_data_client', return_value=market_client):
        response = page_client.get('/watchlist/')

    assert response.status_code == 503
    assert b'FINNHUB_API_KEY' in response.content


@pytest.mark.django_db
def test_add_action_adds_and_invalidates(page_client, user):
    key = view_cache_key(str(user.pk))
    cache.set(key, [])

    response = page_client.post('/watchlist/add', {'symbol': 'tsla', 'company': 'Tesla'})

    assert response.status_code == 302
    assert response['Location'] == '/watchlist/'
    assert WatchlistEntry.objects.filter(user_id=str(user.pk), symbol='TSLA').exists()
    assert cache.get(key) is None


@pytest.mark.django_db
def test_remove_action_removes_and_invalidates(page_client, user):
    WatchlistEntry.objects.create(user_id=str(user.pk), symbol='TSLA', company='Tesla')
    key = view_cache_key(str(user.pk))
    cache.set(key, [{'symbol': 'TSLA'}])

    response = page_client.post('/watchlist/remove', {'symbol': 'TSLA'})

    assert response.status_code == 302
    assert not WatchlistEntry.objects.exists()
    assert cache.get(key) is None


@pytest.mark.django_db
def test_remove_action_failure_keeps_view_cached(page_client, user):
    key = view_cache_key(str(user.pk))
    cache.set(key, [{'symbol': 'AAPL'}])

    response = page_client.post('/watchlist/remove', {'symbol': 'TSLA'})

    assert response.status_code == 500
    assert cache.get(key) == [{'symbol': 'AAPL'}]


@pytest.mark.django_db
def test_add_action_store_failure(page_client):
    store = MagicMock(spec=WatchlistStore)
    store.add_symbol.return_value = StoreResult(StoreStatus.FAILURE, error='db down')
    with patch('watchlist_api.views.pages.get_watchlist_store', return_value=store):
        response = page_client.post('/watchlist/add', {'symbol': 'AAPL', 'company': 'Apple Inc'})

    assert response.status_code == 500


@pytest.mark.django_db
def test_page_actions_reject_get(page_client):
    assert page_client.get('/watchlist/add').status_code == 405
