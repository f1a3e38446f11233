import streamlit as st

from domain.constants import BRAND_NAME, VIEW_AUTH, VIEW_DASHBOARD, VIEW_LANDING
from services.persistence import open_browser_store, open_store
from services.portal import PortalState
from utils.config import load_config
from utils.ids import is_browser_id, new_browser_id
from utils.logging_config import init_logging

# Import the page rendering functions from the view modules
from views import auth, dashboard, landing

# --- Page Registry ---
# Maps a router view to its label, rendering function and whether it needs a session.
PAGE_REGISTRY = {
    VIEW_LANDING: {
        "label": "Welcome",
        "render_func": landing.view,
        "requires_session": False,
    },
    VIEW_AUTH: {
        "label": "Sign in",
        "render_func": auth.view,
        "requires_session": False,
    },
    VIEW_DASHBOARD: {
        "label": "Dashboard",
        "render_func": dashboard.view,
        "requires_session": True,
    },
}


def browser_id() -> str:
    """Per-browser id carried in the `browser` query param, so a page reload keeps it."""
    bid = st.query_params.get("browser")
    if not is_browser_id(bid):
        bid = new_browser_id()
        st.query_params["browser"] = bid
    return bid


def get_portal() -> PortalState:
    """Return the PortalState for this browser session, building it on first run."""
    if 'portal' not in st.session_state:
        config = load_config()
        init_logging(config.log_level, config.log_format)
        store = open_store(config.data_dir)
        session_store = open_browser_store(config.data_dir, browser_id())
        st.session_state.portal = PortalState.open(
            store, config.namespace, session_store=session_store)
    return st.session_state.portal


def resolve_page(portal: PortalState) -> str:
    """Pick the page to render, never a session-only page without a session."""
    if PAGE_REGISTRY[portal.view]["requires_session"] and portal.session is None:
        portal.router.on_session_change(None)
    return portal.view


def main():
    """
    Main application router.

    Re-reads the persisted session (so an expiry elsewhere lands on the landing
    page), then renders the page the view router currently points at.
    """
    st.set_page_config(page_title=BRAND_NAME, layout="wide")

    portal = get_portal()
    portal.refresh_session()

    page_key = resolve_page(portal)
    PAGE_REGISTRY[page_key]["render_func"](portal)


if __name__ == "__main__":
    main()
