"""
PortalState: the one aggregate the views talk to.

It is built once per browser session (kept in `st.session_state`) and wires the
account registry, session manager, view router, form controller and expanded
course panels together. Views call the intent methods below and then render
whatever `view` says.
"""
from __future__ import annotations
import logging
from typing import Callable, Optional

from domain.constants import DEFAULT_NAMESPACE, FORM_MODES, MODE_LOGIN, MODE_SIGNUP
from domain.models import Session, _now_iso
from services.accounts import AccountRegistry
from services.forms import AuthFormController
from services.panels import ExpandedPanels
from services.persistence import KeyValueStore
from services.router import ViewRouter
from services.session import SessionManager

logger = logging.getLogger(__name__)


class PortalState:
    def __init__(self, store: KeyValueStore, namespace: str = DEFAULT_NAMESPACE,
                 clock: Callable[[], str] = _now_iso,
                 session_store: Optional[KeyValueStore] = None):
        # `store` holds the user list shared by every browser; `session_store` holds
        # this browser's active-user slot (defaults to `store`).
        self.store = store
        self.session_store = session_store if session_store is not None else store
        self.registry = AccountRegistry(store, namespace, clock=clock)
        self.sessions = SessionManager(self.session_store, self.registry, namespace, clock=clock)
        self.router = ViewRouter(self.sessions.current())
        self.panels = ExpandedPanels()
        self.forms = AuthFormController(
            self.registry, self.sessions, self.router, self.panels, mode=MODE_SIGNUP)

        self.sessions.subscribe(self.router.on_session_change)
        self.router.on_fallback(self.forms.clear_status)

    @classmethod
    def open(cls, store: KeyValueStore, namespace: str = DEFAULT_NAMESPACE,
             clock: Callable[[], str] = _now_iso,
             session_store: Optional[KeyValueStore] = None) -> 'PortalState':
        portal = cls(store, namespace, clock=clock, session_store=session_store)
        logger.info("Portal opened: %d account(s), view=%s", len(portal.registry), portal.view)
        return portal

    @property
    def view(self) -> str:
        return self.router.view

    @property
    def session(self) -> Optional[Session]:
        return self.sessions.current()

    @property
    def mode(self) -> str:
        return self.forms.mode

    @property
    def status(self):
        return self.forms.status

    def navigate_to_auth(self, mode: str = MODE_LOGIN):
        if mode not in FORM_MODES:
            raise ValueError(f"Unknown form mode: {mode}")
        self.forms.mode = mode
        self.forms.clear_status()
        self.router.to_auth()

    def switch_mode(self, next_mode: str):
        self.forms.switch_mode(next_mode)

    def set_field(self, mode: str, field_name: str, value):
        self.forms.set_field(mode, field_name, value)

    def submit(self, values=None):
        return self.forms.submit(values)

    def submit_signup(self, values=None):
        return self.forms.submit_signup(values)

    def submit_login(self, values=None):
        return self.forms.submit_login(values)

    def sign_out(self):
        current = self.sessions.current()
        self.forms.reset_after_sign_out(current.email if current else "")
        self.sessions.sign_out()
        self.router.to_landing()
        self.panels.clear()

    def refresh_session(self):
        """Pick up accounts added by other browsers and changes to this browser's session slot."""
        self.registry.reload()
        return self.sessions.reload()

    def toggle_course(self, title: str) -> bool:
        return self.panels.toggle(title)

    def is_expanded(self, title: str) -> bool:
        return title in self.panels
