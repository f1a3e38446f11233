import json

import pytest

from domain.errors import DuplicateEmailError
from services.accounts import AccountRegistry, normalize_email
from services.persistence import MemoryStore

USERS_KEY = 'deejoft-portal-users'


def fixed_clock(value='2026-01-01T00:00:00Z'):
    return lambda: value


def make_registry(store=None):
    return AccountRegistry(store or MemoryStore(), clock=fixed_clock())


def stored_users(store):
    return json.loads(store.slots[USERS_KEY])


def test_normalize_email():
    assert normalize_email('  Jane@X.com ') == 'jane@x.com'
    assert normalize_email(None) == ''


def test_register_normalizes_and_persists():
    store = MemoryStore()
    registry = make_registry(store)
    account = registry.register(' Jane Doe ', 'Jane@X.com', 'password1')
    assert account.email == 'jane@x.com'
    assert account.name == 'Jane Doe'
    assert account.created_at == '2026-01-01T00:00:00Z'
    assert account.last_login is None
    assert stored_users(store) == [{
        'name': 'Jane Doe', 'email': 'jane@x.com', 'password': 'password1',
        'createdAt': '2026-01-01T00:00:00Z',
    }]


def test_duplicate_email_rejected_case_insensitively():
    registry = make_registry()
    registry.register('Jane Doe', 'jane@x.com', 'password1')
    with pytest.raises(DuplicateEmailError):
        registry.register('Other Jane', '  JANE@x.COM', 'password2')
    assert len(registry) == 1


def test_no_two_accounts_share_an_email():
    registry = make_registry()
    emails = ['a@x.com', 'A@x.com', 'b@x.com', ' b@X.com ', 'c@x.com', 'a@x.com']
    for e in emails:
        try:
            registry.register('Name', e, 'password1')
        except DuplicateEmailError:
            pass
    stored = [a.email for a in registry.accounts()]
    assert sorted(stored) == ['a@x.com', 'b@x.com', 'c@x.com']
    assert len(stored) == len(set(stored))


def test_find_by_email_returns_copy():
    registry = make_registry()
    registry.register('Jane Doe', 'jane@x.com', 'password1')
    found = registry.find_by_email(' JANE@X.COM')
    assert found is not None
    found.name = 'Mutated'
    assert registry.find_by_email('jane@x.com').name == 'Jane Doe'
    assert registry.find_by_email('nobody@x.com') is None
    assert registry.find_by_email('') is None


def test_record_login_updates_and_persists():
    store = MemoryStore()
    registry = make_registry(store)
    registry.register('Jane Doe', 'jane@x.com', 'password1')
    registry.record_login('Jane@x.com', '2026-02-02T10:00:00Z')
    assert registry.find_by_email('jane@x.com').last_login == '2026-02-02T10:00:00Z'
    assert stored_users(store)[0]['lastLogin'] == '2026-02-02T10:00:00Z'


def test_record_login_unknown_email_is_noop():
    store = MemoryStore()
    registry = make_registry(store)
    registry.record_login('ghost@x.com', '2026-02-02T10:00:00Z')
    assert USERS_KEY not in store.slots


def test_registry_loads_existing_accounts_in_order():
    store = MemoryStore()
    store.save(USERS_KEY, [
        {'name': 'A', 'email': 'a@x.com', 'password': 'p', 'createdAt': 't1'},
        {'name': 'B', 'email': 'b@x.com', 'password': 'p', 'createdAt': 't2', 'lastLogin': 't3'},
    ])
    registry = make_registry(store)
    accounts = registry.accounts()
    assert [a.email for a in accounts] == ['a@x.com', 'b@x.com']
    assert accounts[1].last_login == 't3'


def test_registry_skips_malformed_records():
    store = MemoryStore()
    store.save(USERS_KEY, [
        'garbage',
        {'name': 'No email'},
        {'name': 'A', 'email': 'a@x.com', 'password': 'p', 'createdAt': 't1'},
    ])
    registry = make_registry(store)
    assert [a.email for a in registry.accounts()] == ['a@x.com']


def test_registry_treats_non_list_slot_as_empty():
    store = MemoryStore({USERS_KEY: '{"email": "a@x.com"}'})
    assert len(make_registry(store)) == 0
    store = MemoryStore({USERS_KEY: 'not json at all'})
    assert len(make_registry(store)) == 0


def test_reload_picks_up_store_changes():
    store = MemoryStore()
    registry = make_registry(store)
    other = make_registry(store)
    other.register('Jane Doe', 'jane@x.com', 'password1')
    assert registry.find_by_email('jane@x.com') is None
    registry.reload()
    assert registry.find_by_email('jane@x.com') is not None


def test_namespace_changes_storage_key():
    store = MemoryStore()
    registry = AccountRegistry(store, namespace='acme', clock=fixed_clock())
    registry.register('Jane Doe', 'jane@x.com', 'password1')
    assert 'acme-users' in store.slots


def test_two_registries_on_one_store_keep_each_others_accounts():
    store = MemoryStore()
    first = make_registry(store)
    second = make_registry(store)
    first.register('Jane Doe', 'jane@x.com', 'password1')
    second.register('Bob Stone', 'bob@x.com', 'password2')
    assert sorted(u['email'] for u in stored_users(store)) == ['bob@x.com', 'jane@x.com']
    with pytest.raises(DuplicateEmailError):
        second.register('Jane Again', 'JANE@x.com', 'password3')


def test_record_login_from_stale_registry_keeps_newer_accounts():
    store = MemoryStore()
    stale = make_registry(store)
    stale.register('Jane Doe', 'jane@x.com', 'password1')
    make_registry(store).register('Bob Stone', 'bob@x.com', 'password2')
    stale.record_login('jane@x.com', '2026-02-02T10:00:00Z')
    users = {u['email']: u for u in stored_users(store)}
    assert set(users) == {'jane@x.com', 'bob@x.com'}
    assert users['jane@x.com']['lastLogin'] == '2026-02-02T10:00:00Z'
