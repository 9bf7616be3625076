import pytest
import requests
from unittest.mock import MagicMock

from watchlist_client.api import StockWithWatchlistStatus, WatchlistApiClient
from watchlist_client.state import SymbolState
from watchlist_client.sync import FAILURE_NOTICE, WatchlistSync


def _response(status_code=200, payload=None):
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.ok = status_code < 400
    response.json.return_value = payload
    return response


@pytest.fixture
def api():
    return MagicMock(spec=WatchlistApiClient)


@pytest.fixture
def notices():
    return []


@pytest.fixture
def sync(api, notices):
    return WatchlistSync(api=api, notify=notices.append)


def test_toggle_is_visible_before_the_request_completes(sync, api):
    seen_during_request = []

    def add(symbol, company):
        seen_during_request.append(sync.is_member(symbol))
        return _response(200, {'success': True})

    api.add.side_effect = add

    assert sync.toggle('TSLA', 'Tesla') is True
    assert seen_during_request == [True]
    assert sync.state('TSLA') == SymbolState(committed=True)
    api.add.assert_called_once_with('TSLA', 'Tesla')


def test_network_failure_reverts_without_notice(sync, api, notices):
    api.add.side_effect = requests.ConnectionError('offline')

    assert sync.toggle('TSLA', 'Tesla') is False
    assert sync.is_member('TSLA') is False
    assert notices == []


def test_rejected_request_reverts_with_notice(sync, api, notices):
    api.add.return_value = _response(500, {'error': 'Failed to add to watchlist'})

    assert sync.toggle('TSLA', 'Tesla') is False
    assert sync.is_member('TSLA') is False
    assert notices == [FAILURE_NOTICE]


def test_toggle_member_calls_remove(sync, api):
    sync.states['AAPL'] = SymbolState(committed=True)
    api.remove.return_value = _response(200, {'success': True})

    assert sync.toggle('AAPL', 'Apple Inc') is False
    api.remove.assert_called_once_with('AAPL', 'Apple Inc')
    api.add.assert_not_called()


def test_failed_remove_restores_membership(sync, api, notices):
    sync.states['AAPL'] = SymbolState(committed=True)
    api.remove.return_value = _response(500, {'error': 'Failed to remove from watchlist'})

    assert sync.toggle('AAPL', 'Apple Inc') is True
    assert sync.symbols == {'AAPL'}
    assert notices == [FAILURE_NOTICE]


def test_reconcile_overwrites_local_flags(sync, api):
    sync.states['TSLA'] = SymbolState(committed=True)
    api.fetch_symbols.return_value = _response(200, ['MSFT', 'NFLX'])

    assert sync.reconcile() == {'MSFT', 'NFLX'}
    assert sync.symbols == {'MSFT', 'NFLX'}
    assert sync.is_member('TSLA') is False


def test_reconcile_unauthenticated_is_empty(sync, api):
    sync.states['TSLA'] = SymbolState(committed=True)
    api.fetch_symbols.return_value = _response(401, [])

    assert sync.reconcile() == set()
    assert sync.symbols == set()


def test_reconcile_network_failure_is_empty(sync, api):
    sync.states['TSLA'] = SymbolState(committed=True)
    api.fetch_symbols.side_effect = requests.Timeout('slow')

    assert sync.reconcile() == set()


def test_reconcile_server_error_keeps_local_state(sync, api):
    sync.states['TSLA'] = SymbolState(committed=True)
    api.fetch_symbols.return_value = _response(500, None)

    assert sync.reconcile() == {'TSLA'}
    assert sync.is_member('TSLA') is True


def test_annotate_merges_membership(sync):
    sync.states['AAPL'] = SymbolState(committed=True)
    stocks = [StockWithWatchlistStatus('AAPL', 'Apple Inc'), StockWithWatchlistStatus('TSLA', 'Tesla', is_in_watchlist=True)]

    annotated = sync.annotate(stocks)

    assert [s.is_in_watchlist for s in annotated] == [True, False]
    assert stocks[1].is_in_watchlist is True


def test_blank_search_shows_initial_stocks(api, notices):
    initial = [StockWithWatchlistStatus(f"S{i}", f"Stock {i}") for i in range(12)]
    sync = WatchlistSync(api=api, notify=notices.append, initial_stocks=initial)

    results = sync.search('   ')

    assert len(results) == 10
    api.search.assert_not_called()


def test_search_failure_is_empty(sync, api):
    api.search.side_effect = requests.HTTPError('500')

    assert sync.search('apple') == []


def test_search_results_use_local_membership(sync, api):
    sync.states['AAPL'] = SymbolState(committed=True)
    api.search.return_value = [StockWithWatchlistStatus('AAPL', 'APPLE INC')]

    results = sync.search(' apple ')

    api.search.assert_called_once_with('apple')
    assert results[0].is_in_watchlist is True
