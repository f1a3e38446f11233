"""
Portal configuration, read from the environment.

PORTAL_DATA_DIR           directory holding the persisted slots (default: ./data)
PORTAL_STORAGE_NAMESPACE  prefix of the storage keys (default: deejoft-portal)
PORTAL_LOG_LEVEL          logging level name (default: INFO)
PORTAL_LOG_FORMAT         "text" or "json" (default: text)
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from domain.constants import DEFAULT_NAMESPACE
from utils.paths import resolve_data_dir


@dataclass(frozen=True)
class PortalConfig:
    data_dir: str
    namespace: str = DEFAULT_NAMESPACE
    log_level: str = "INFO"
    log_format: str = "text"


def load_config(environ: Optional[Mapping[str, str]] = None) -> PortalConfig:
    env = os.environ if environ is None else environ
    log_format = (env.get("PORTAL_LOG_FORMAT") or "text").strip().lower()
    if log_format not in {"text", "json"}:
        log_format = "text"
    return PortalConfig(
        data_dir=resolve_data_dir(env.get("PORTAL_DATA_DIR")),
        namespace=(env.get("PORTAL_STORAGE_NAMESPACE") or DEFAULT_NAMESPACE).strip() or DEFAULT_NAMESPACE,
        log_level=(env.get("PORTAL_LOG_LEVEL") or "INFO").strip().upper(),
        log_format=log_format,
    )
