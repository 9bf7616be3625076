import pytest
from unittest.mock import patch
from django.db import DatabaseError

from watchlist_api.models import WatchlistEntry
from watchlist_api.services import watchlist_store
from watchlist_api.services.watchlist_store import StoreStatus, WatchlistStore


@pytest.fixture
def store():
    return WatchlistStore()


@pytest.mark.django_db
def test_add_twice_keeps_one_record_with_first_added_at(store, user):
    first = store.add_symbol(user.email, 'AAPL', 'Apple Inc')
    entry = WatchlistEntry.objects.get(user_id=str(user.pk), symbol='AAPL')
    first_added_at = entry.added_at

    second = store.add_symbol(user.email, 'aapl', 'Something Else')

    assert first.ok and first.created
    assert second.ok and not second.created
    assert WatchlistEntry.objects.filter(user_id=str(user.pk), symbol='AAPL').count() == 1
    entry.refresh_from_db()
    assert entry.added_at == first_added_at
    assert entry.company == 'Apple Inc'


@pytest.mark.django_db
def test_add_normalizes_symbol_and_trims_company(store, user):
    store.add_symbol(user.email, 'aapl', '  Apple Inc  ')

    entry = WatchlistEntry.objects.get(user_id=str(user.pk))
    assert entry.symbol == 'AAPL'
    assert entry.company == 'Apple Inc'
    assert store.is_member(user.email, 'AAPL').ok


@pytest.mark.django_db
def test_add_for_unknown_email_is_not_found(store):
    result = store.add_symbol('nobody@example.com', 'AAPL', 'Apple Inc')

    assert result.status is StoreStatus.NOT_FOUND
    assert not result
    assert WatchlistEntry.objects.count() == 0


@pytest.mark.django_db
def test_remove_absent_symbol_returns_false_and_leaves_store_unchanged(store, user):
    store.add_symbol(user.email, 'MSFT', 'Microsoft')

    result = store.remove_symbol(user.email, 'TSLA')

    assert result.status is StoreStatus.NOT_FOUND
    assert not result
    assert list(WatchlistEntry.objects.values_list('symbol', flat=True)) == ['MSFT']


@pytest.mark.django_db
def test_remove_existing_symbol(store, user):
    store.add_symbol(user.email, 'MSFT', 'Microsoft')

    result = store.remove_symbol(user.email, 'msft')

    assert result.ok
    assert result.user_id == str(user.pk)
    assert not store.is_member(user.email, 'MSFT')


@pytest.mark.django_db
def test_list_symbols_for_external_identity(store, external_user):
    WatchlistEntry.objects.create(user_id='u1', symbol='MSFT', company='Microsoft')
    WatchlistEntry.objects.create(user_id='u1', symbol='NFLX', company='Netflix')
    WatchlistEntry.objects.create(user_id='someone-else', symbol='TSLA', company='Tesla')

    result = store.list_symbols(external_user.email)

    assert result.ok
    assert result.user_id == 'u1'
    assert sorted(result.symbols) == ['MSFT', 'NFLX']


@pytest.mark.django_db
def test_list_symbols_unknown_or_blank_email_is_empty(store):
    assert store.list_symbols('').symbols == []
    assert store.list_symbols('nobody@example.com').status is StoreStatus.NOT_FOUND


@pytest.mark.django_db
def test_is_member_is_scoped_per_user(store, user, external_user):
    store.add_symbol(user.email, 'NVDA', 'NVIDIA')

    assert store.is_member(user.email, 'nvda').ok
    assert store.is_member(external_user.email, 'NVDA').status is StoreStatus.NOT_FOUND


@pytest.mark.django_db
def test_persistence_errors_become_failures(store, user):
    with patch.object(watchlist_store, 'resolve_user_id', side_effect=DatabaseError('db down')):
        listed = store.list_symbols(user.email)
        added = store.add_symbol(user.email, 'AAPL', 'Apple Inc')
        removed = store.remove_symbol(user.email, 'AAPL')
        member = store.is_member(user.email, 'AAPL')

    for result in (listed, added, removed, member):
        assert result.status is StoreStatus.FAILURE
        assert not result
        assert 'db down' in result.error
    assert listed.symbols == []


@pytest.mark.django_db
def test_module_level_helpers_return_plain_values(user):
    assert watchlist_store.add_to_watchlist(user.email, 'amzn', 'Amazon') is True
    assert watchlist_store.is_in_watchlist(user.email, 'AMZN') is True
    assert watchlist_store.get_watchlist_symbols_by_email(user.email) == ['AMZN']
    assert watchlist_store.remove_from_watchlist(user.email, 'AMZN') is True
    assert watchlist_store.remove_from_watchlist(user.email, 'AMZN') is False
    assert watchlist_store.get_watchlist_symbols_by_email(user.email) == []
