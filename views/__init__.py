"""View modules for manual routing.

The portal uses a custom router in `app.py` instead of Streamlit's automatic
multi-page system. Each page lives under `views/` and exposes a `view(portal)`
function taking the session's PortalState.

Add any new page as a module with a `view(portal)` callable and register it in
`PAGE_REGISTRY` inside `app.py`.
"""
