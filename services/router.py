"""View router over landing / auth / dashboard.

The dashboard is only reachable with a live session; losing the session
while on the dashboard drops the view back to landing.
"""
import logging
from typing import Callable, List, Optional

from domain.constants import VIEWS, VIEW_AUTH, VIEW_DASHBOARD, VIEW_LANDING
from domain.models import Session

logger = logging.getLogger(__name__)


class ViewRouter:
    def __init__(self, session: Optional[Session] = None):
        self.view = VIEW_DASHBOARD if session is not None else VIEW_LANDING
        self._fallback_hooks: List[Callable[[], None]] = []

    def on_fallback(self, hook: Callable[[], None]):
        """Register a callback run when the dashboard guard forces landing."""
        self._fallback_hooks.append(hook)

    def to_auth(self):
        self.view = VIEW_AUTH

    def to_landing(self):
        self.view = VIEW_LANDING

    def to_dashboard(self, session: Optional[Session]):
        if session is None:
            self._fall_back()
            return
        self.view = VIEW_DASHBOARD

    def go(self, view: str, session: Optional[Session] = None):
        if view not in VIEWS:
            raise ValueError(f"Unknown view: {view}")
        if view == VIEW_DASHBOARD:
            self.to_dashboard(session)
        else:
            self.view = view

    def on_session_change(self, session: Optional[Session]):
        if self.view == VIEW_DASHBOARD and session is None:
            self._fall_back()

    def _fall_back(self):
        logger.info("No active session; routing to %s", VIEW_LANDING)
        self.view = VIEW_LANDING
        for hook in self._fallback_hooks:
            hook()
