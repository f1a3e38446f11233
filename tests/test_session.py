import json

import pytest

from domain.errors import InvalidCredentialsError
from services.accounts import AccountRegistry
from services.persistence import MemoryStore, NullStore
from services.session import SessionManager

SESSION_KEY = 'deejoft-portal-active-user'


class TickClock:
    """Returns a new ISO timestamp on every call."""

    def __init__(self):
        self.n = 0

    def __call__(self):
        self.n += 1
        return f"2026-01-01T00:00:{self.n:02d}Z"


def make_manager(store=None):
    store = store or MemoryStore()
    clock = TickClock()
    registry = AccountRegistry(store, clock=clock)
    return store, registry, SessionManager(store, registry, clock=clock)


def test_register_then_authenticate_succeeds():
    store, registry, sessions = make_manager()
    registry.register('Jane Doe', 'Jane@X.com', 'password1')
    session = sessions.authenticate('JANE@x.com', 'password1')
    assert session.email == 'jane@x.com'
    assert session.name == 'Jane Doe'
    assert session.last_login == '2026-01-01T00:00:02Z'
    assert session.account.last_login == session.last_login
    assert sessions.current() is session
    assert registry.find_by_email('jane@x.com').last_login == session.last_login
    stored = json.loads(store.slots[SESSION_KEY])
    assert stored['email'] == 'jane@x.com'
    assert stored['lastLogin'] == session.last_login


def test_wrong_password_and_unknown_email_fail_identically():
    _, registry, sessions = make_manager()
    registry.register('Jane Doe', 'jane@x.com', 'password1')
    with pytest.raises(InvalidCredentialsError) as wrong_pw:
        sessions.authenticate('jane@x.com', 'wrong')
    with pytest.raises(InvalidCredentialsError) as unknown:
        sessions.authenticate('nobody@x.com', 'password1')
    assert type(wrong_pw.value) is type(unknown.value)
    assert str(wrong_pw.value) == str(unknown.value)
    assert sessions.current() is None


def test_failed_authentication_leaves_registry_unchanged():
    store, registry, sessions = make_manager()
    registry.register('Jane Doe', 'jane@x.com', 'password1')
    before = store.slots['deejoft-portal-users']
    with pytest.raises(InvalidCredentialsError):
        sessions.authenticate('jane@x.com', 'wrong')
    assert store.slots['deejoft-portal-users'] == before
    assert SESSION_KEY not in store.slots


def test_password_match_is_exact():
    _, registry, sessions = make_manager()
    registry.register('Jane Doe', 'jane@x.com', 'password1')
    with pytest.raises(InvalidCredentialsError):
        sessions.authenticate('jane@x.com', 'password1 ')
    with pytest.raises(InvalidCredentialsError):
        sessions.authenticate('jane@x.com', 'PASSWORD1')


def test_session_snapshot_is_not_live():
    _, registry, sessions = make_manager()
    registry.register('Jane Doe', 'jane@x.com', 'password1')
    session = sessions.authenticate('jane@x.com', 'password1')
    registry.record_login('jane@x.com', '2030-01-01T00:00:00Z')
    assert session.account.last_login != '2030-01-01T00:00:00Z'


def test_sign_out_clears_session_and_slot():
    store, registry, sessions = make_manager()
    registry.register('Jane Doe', 'jane@x.com', 'password1')
    sessions.authenticate('jane@x.com', 'password1')
    sessions.sign_out()
    assert sessions.current() is None
    assert SESSION_KEY not in store.slots


def test_persisted_session_restored_on_start():
    store, registry, sessions = make_manager()
    registry.register('Jane Doe', 'jane@x.com', 'password1')
    original = sessions.authenticate('jane@x.com', 'password1')
    _, _, restored = make_manager(store)
    assert restored.current() is not None
    assert restored.current().to_dict() == original.to_dict()


def test_malformed_session_slot_is_absent():
    store = MemoryStore({SESSION_KEY: '[1, 2, 3]'})
    _, _, sessions = make_manager(store)
    assert sessions.current() is None
    store = MemoryStore({SESSION_KEY: '{broken'})
    _, _, sessions = make_manager(store)
    assert sessions.current() is None


def test_listeners_see_every_change():
    _, registry, sessions = make_manager()
    seen = []
    sessions.subscribe(seen.append)
    registry.register('Jane Doe', 'jane@x.com', 'password1')
    session = sessions.authenticate('jane@x.com', 'password1')
    sessions.sign_out()
    assert seen == [session, None]


def test_reload_detects_external_expiry():
    store, registry, sessions = make_manager()
    registry.register('Jane Doe', 'jane@x.com', 'password1')
    sessions.authenticate('jane@x.com', 'password1')
    seen = []
    sessions.subscribe(seen.append)
    del store.slots[SESSION_KEY]
    assert sessions.reload() is None
    assert seen == [None]
    # Nothing changed: no extra notification
    sessions.reload()
    assert seen == [None]


def test_reload_keeps_session_without_durable_store():
    store, registry, sessions = make_manager(NullStore())
    registry.register('Jane Doe', 'jane@x.com', 'password1')
    session = sessions.authenticate('jane@x.com', 'password1')
    assert sessions.reload() is session
