"""Session manager: owns the single active session and its storage slot."""
from __future__ import annotations
import logging
from typing import Callable, List, Optional

from domain.constants import ACTIVE_USER_SLOT, DEFAULT_NAMESPACE, storage_key
from domain.errors import InvalidCredentialsError, MalformedStorageError
from domain.models import Session, session_from_dict, _now_iso
from services.accounts import AccountRegistry, normalize_email
from services.persistence import KeyValueStore

logger = logging.getLogger(__name__)

SessionListener = Callable[[Optional[Session]], None]


def decode_session(payload) -> Optional[Session]:
    if payload is None:
        return None
    try:
        session = session_from_dict(payload)
    except MalformedStorageError as exc:
        logger.warning("Ignoring malformed session record: %s", exc)
        return None
    session.account.email = normalize_email(session.account.email)
    return session


class SessionManager:
    def __init__(self, store: KeyValueStore, registry: AccountRegistry,
                 namespace: str = DEFAULT_NAMESPACE, clock: Callable[[], str] = _now_iso):
        self.store = store
        self.registry = registry
        self.key = storage_key(namespace, ACTIVE_USER_SLOT)
        self.clock = clock
        self._listeners: List[SessionListener] = []
        self._session: Optional[Session] = decode_session(self.store.load(self.key))

    def current(self) -> Optional[Session]:
        return self._session

    def subscribe(self, listener: SessionListener):
        self._listeners.append(listener)

    def authenticate(self, email: str, password: str) -> Session:
        norm = normalize_email(email)
        self.registry.reload()
        match = self.registry.find_by_email(norm)
        if match is None or match.password != password:
            logger.info("Rejected sign-in for %s", norm or "<blank>")
            raise InvalidCredentialsError()

        timestamp = self.clock()
        self.registry.record_login(norm, timestamp)
        snapshot = self.registry.find_by_email(norm)
        session = Session(account=snapshot, last_login=timestamp)
        self._set(session)
        logger.info("Signed in %s", norm)
        return session

    def sign_out(self):
        previous = self._session
        self._set(None)
        if previous is not None:
            logger.info("Signed out %s", previous.email)

    def reload(self) -> Optional[Session]:
        """Re-read the persisted slot, picking up an expiry done outside this process."""
        if not self.store.durable:
            return self._session
        stored = decode_session(self.store.load(self.key))
        current = self._session
        if stored is None and current is None:
            return None
        if stored is not None and current is not None and stored.to_dict() == current.to_dict():
            return current
        if stored is None:
            logger.info("Persisted session for %s is gone", current.email)
        self._session = stored
        self._notify()
        return self._session

    def _set(self, session: Optional[Session]):
        self._session = session
        if session is None:
            self.store.delete(self.key)
        else:
            self.store.save(self.key, session.to_dict())
        self._notify()

    def _notify(self):
        for listener in list(self._listeners):
            listener(self._session)
