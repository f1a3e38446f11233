"""Account registry: in-memory mirror of the persisted user list.

Uniqueness is keyed on the normalized email. Every mutation writes the whole
list back to the store before returning.
"""
from __future__ import annotations
import logging
from typing import Callable, List, Optional

from domain.constants import DEFAULT_NAMESPACE, USERS_SLOT, storage_key
from domain.errors import DuplicateEmailError, MalformedStorageError
from domain.models import Account, account_from_dict, _now_iso
from services.persistence import KeyValueStore

logger = logging.getLogger(__name__)


def normalize_email(email: Optional[str]) -> str:
    return (email or '').strip().lower()


def decode_accounts(payload) -> List[Account]:
    """Turn a stored user list into Accounts, skipping unreadable records."""
    if not isinstance(payload, list):
        if payload is not None:
            logger.warning("User slot is not a list; treating registry as empty")
        return []
    accounts: List[Account] = []
    seen = set()
    for item in payload:
        try:
            account = account_from_dict(item)
        except MalformedStorageError as exc:
            logger.warning("Skipping malformed account record: %s", exc)
            continue
        account.email = normalize_email(account.email)
        if account.email in seen:
            logger.warning("Skipping duplicate stored account %s", account.email)
            continue
        seen.add(account.email)
        accounts.append(account)
    return accounts


class AccountRegistry:
    """Mirror of the shared user list, re-read before every write."""

    def __init__(self, store: KeyValueStore, namespace: str = DEFAULT_NAMESPACE,
                 clock: Callable[[], str] = _now_iso):
        self.store = store
        self.key = storage_key(namespace, USERS_SLOT)
        self.clock = clock
        self._accounts: List[Account] = []
        self.reload()

    def __len__(self):
        return len(self._accounts)

    def reload(self):
        """Re-read the shared user list; other browsers may have written to it."""
        if not self.store.durable:
            return
        self._accounts = decode_accounts(self.store.load(self.key, []))

    def accounts(self) -> List[Account]:
        """Snapshot copies in insertion order."""
        return [a.copy() for a in self._accounts]

    def _find(self, email: str) -> Optional[Account]:
        norm = normalize_email(email)
        if not norm:
            return None
        return next((a for a in self._accounts if a.email == norm), None)

    def find_by_email(self, email: str) -> Optional[Account]:
        account = self._find(email)
        return account.copy() if account else None

    def register(self, name: str, email: str, password: str) -> Account:
        norm = normalize_email(email)
        self.reload()
        if self.find_by_email(norm) is not None:
            raise DuplicateEmailError(norm)
        account = Account(
            name=(name or '').strip(),
            email=norm,
            password=password,
            created_at=self.clock(),
        )
        self._accounts.append(account)
        self._persist()
        logger.info("Registered account %s", norm)
        return account.copy()

    def record_login(self, email: str, timestamp: str):
        self.reload()
        account = self._find(email)
        if account is None:
            return
        account.last_login = timestamp
        self._persist()

    def _persist(self):
        self.store.save(self.key, [a.to_dict() for a in self._accounts])
