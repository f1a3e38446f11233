from dataclasses import dataclass, field, replace
from typing import Dict, Optional, Any
import datetime as _dt

from domain.errors import MalformedStorageError


def _now_iso():
    return _dt.datetime.now(_dt.timezone.utc).replace(microsecond=0).isoformat().replace('+00:00', 'Z')


@dataclass
class Account:
    name: str
    email: str  # normalized, unique key
    password: str  # plaintext, local simulation only
    created_at: str = field(default_factory=_now_iso)
    last_login: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'name': self.name,
            'email': self.email,
            'password': self.password,
            'createdAt': self.created_at,
        }
        if self.last_login:
            data['lastLogin'] = self.last_login
        return data

    def copy(self) -> 'Account':
        return replace(self)


def account_from_dict(d: Any) -> Account:
    """Build an Account from a stored record, raising MalformedStorageError on junk."""
    if not isinstance(d, dict) or not isinstance(d.get('email'), str) or not d['email']:
        raise MalformedStorageError(f"not an account record: {d!r:.80}")
    return Account(
        name=str(d.get('name') or ''),
        email=d['email'],
        password=str(d.get('password') or ''),
        created_at=d.get('createdAt') or _now_iso(),
        last_login=d.get('lastLogin') or None,
    )


@dataclass
class Session:
    """Active sign-in: a frozen copy of the account plus the login timestamp."""
    account: Account
    last_login: str

    @property
    def email(self) -> str:
        return self.account.email

    @property
    def name(self) -> str:
        return self.account.name

    def to_dict(self) -> Dict[str, Any]:
        # Stored flat (account fields + lastLogin) to stay readable by older sessions.
        data = self.account.to_dict()
        data['lastLogin'] = self.last_login
        return data


def session_from_dict(d: Any) -> Session:
    account = account_from_dict(d)
    last_login = account.last_login or account.created_at
    return Session(account=account, last_login=last_login)
