import pytest
from unittest.mock import MagicMock
from django.contrib.auth import get_user_model
from django.core.cache import cache
from rest_framework.test import APIClient

from watchlist_api.services.market_data import FinnhubClient
# Import page views before any test patches watchlist_api.views.api helpers,
# so their `from ... import` bindings capture the real functions.
import watchlist_api.views.pages  # noqa: F401


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def user(db):
    return get_user_model().objects.create_user(
        email='trader@example.com',
        password='Secret123',
        name='Trader',
    )


@pytest.fixture
def external_user(db):
    return get_user_model().objects.create_user(
        email='u1@example.com',
        password='Secret123',
        external_id='u1',
        auth_provider='external',
    )


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def auth_client(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def market_client():
    client = MagicMock(spec=FinnhubClient)
    client.configured = True
    client.get_quote.side_effect = lambda symbol: {
        'c': 190.5, 'd': 2.25, 'dp': 1.19, 'h': 191.0, 'l': 187.2, 'o': 188.0, 'pc': 188.25,
    }
    client.get_profile.side_effect = lambda symbol: {
        'name': f"{symbol} Inc", 'marketCapitalization': 2950000.0, 'peRatio': 31.4,
    }
    client.search.return_value = []
    return client
