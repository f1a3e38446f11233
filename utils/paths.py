import os
from typing import Optional


def resolve_data_dir(override: Optional[str] = None) -> str:
    """Resolve the portal data directory across local dev and container layouts.

    Strategy:
    1. An explicit override (PORTAL_DATA_DIR) wins, existing or not.
    2. Try project-root relative (data/) based on this file location.
    3. Try cwd + data/ (in case working dir is project root).
    4. Try /mount/src/data (Streamlit ephemeral container pattern).
    Falls back to the project-root candidate, which the store creates on first write.
    """
    if override:
        return os.path.abspath(os.path.expanduser(override))
    base_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
    candidates = [
        os.path.join(base_dir, 'data'),
        os.path.join(os.getcwd(), 'data'),
        '/mount/src/data',
    ]
    for p in candidates:
        if os.path.isdir(p):
            return p
    return candidates[0]
