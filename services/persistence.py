"""Key-value persistence for the portal's two storage slots.

Every store fails soft: reads return the caller's default on a missing key,
a corrupt payload or a backend error, and writes are best-effort.
"""
import json
import logging
import os
import shutil
import tempfile
from typing import Any, Dict, Optional

from domain.errors import MalformedStorageError
from utils.ids import is_browser_id

logger = logging.getLogger(__name__)


class KeyValueStore:
    """Base store. Subclasses implement the raw string primitives."""

    # NullStore keeps nothing, so it cannot be re-read as the source of truth.
    durable = True

    def _read(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def _write(self, key: str, text: str):
        raise NotImplementedError

    def _remove(self, key: str):
        raise NotImplementedError

    def load(self, key: str, default: Any = None) -> Any:
        try:
            raw = self._read(key)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read slot %s: %s", key, exc)
            return default
        if raw is None:
            return default
        try:
            return decode(raw)
        except MalformedStorageError as exc:
            logger.warning("Ignoring malformed slot %s: %s", key, exc)
            return default

    def save(self, key: str, value: Any):
        try:
            text = json.dumps(value, ensure_ascii=False, indent=2)
        except (TypeError, ValueError) as exc:
            logger.warning("Could not serialize slot %s: %s", key, exc)
            return
        try:
            self._write(key, text)
        except OSError as exc:
            logger.warning("Could not write slot %s: %s", key, exc)

    def delete(self, key: str):
        try:
            self._remove(key)
        except OSError as exc:
            logger.warning("Could not delete slot %s: %s", key, exc)


def decode(raw: str) -> Any:
    try:
        return json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise MalformedStorageError(str(exc)) from exc


class JsonFileStore(KeyValueStore):
    """One `<key>.json` file per slot inside `data_dir`."""

    def __init__(self, data_dir: str):
        self.data_dir = os.path.normpath(data_dir)

    def _path(self, key: str) -> str:
        return os.path.join(self.data_dir, f"{key}.json")

    def _read(self, key):
        file_path = self._path(key)
        if not os.path.exists(file_path):
            return None
        with open(file_path, 'r', encoding='utf-8') as f:
            return f.read()

    def _write(self, key, text):
        file_path = self._path(key)
        os.makedirs(self.data_dir, exist_ok=True)
        tmp_fd, tmp_path = tempfile.mkstemp(prefix='tmp_', suffix='.json', dir=self.data_dir)
        try:
            with os.fdopen(tmp_fd, 'w', encoding='utf-8') as f:
                f.write(text)
            shutil.move(tmp_path, file_path)
        except OSError:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def _remove(self, key):
        file_path = self._path(key)
        if os.path.exists(file_path):
            os.remove(file_path)


class MemoryStore(KeyValueStore):
    """Serialized strings kept in a dict; used by tests and throwaway sessions."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.slots: Dict[str, str] = dict(initial or {})

    def _read(self, key):
        return self.slots.get(key)

    def _write(self, key, text):
        self.slots[key] = text

    def _remove(self, key):
        self.slots.pop(key, None)


class NullStore(KeyValueStore):
    """No storage backend available: nothing is kept."""

    durable = False

    def _read(self, key):
        return None

    def _write(self, key, text):
        pass

    def _remove(self, key):
        pass


def open_store(data_dir: Optional[str]) -> KeyValueStore:
    if not data_dir:
        logger.warning("No data directory configured; portal state will not persist")
        return NullStore()
    try:
        os.makedirs(data_dir, exist_ok=True)
    except OSError as exc:
        logger.warning("Data directory %s unavailable (%s); portal state will not persist", data_dir, exc)
        return NullStore()
    return JsonFileStore(data_dir)


def open_browser_store(data_dir: Optional[str], browser_id: str) -> KeyValueStore:
    """Store scoped to one browser: `<data_dir>/browsers/<browser_id>/`.

    Holds the active-session slot so one browser's sign-in is invisible to the others.
    """
    if not is_browser_id(browser_id):
        raise ValueError(f"Invalid browser id: {browser_id!r}")
    if not data_dir:
        return NullStore()
    return open_store(os.path.join(data_dir, 'browsers', browser_id))
