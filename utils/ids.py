import re
import uuid
from typing import Optional

_BROWSER_ID = re.compile(r'^[0-9a-f]{32}$')


def new_browser_id() -> str:
    return uuid.uuid4().hex


def is_browser_id(value: Optional[str]) -> bool:
    # Used as a directory name, so only plain hex is accepted.
    return isinstance(value, str) and bool(_BROWSER_ID.match(value))
