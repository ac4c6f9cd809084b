"""Settings store persisted as a JSON file on the local filesystem."""

from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from ..errors import PersistFailureError

logger = logging.getLogger(__name__)

_S = TypeVar("_S", bound=BaseModel)


_path_locks: dict[Path, threading.Lock] = {}
_path_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.Lock:
    key = path.resolve()
    with _path_locks_guard:
        return _path_locks.setdefault(key, threading.Lock())


def _atomic_write(path: Path, data: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + f".{os.getpid()}.{threading.get_ident()}.tmp")
    try:
        tmp.write_text(data, encoding="utf-8")
        tmp.replace(path)
    finally:
        if tmp.exists():
            tmp.unlink()


def _load_json(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError):
        logger.warning("Ignoring unreadable settings file %s", path)
        return {}
    return raw if isinstance(raw, dict) else {}


class LocalFilesystemSettingsStore(Generic[_S]):
    """Reads/writes one JSON object mapping definition id -> settings record.

    Each variant gets its own file; settings_model is the pydantic model of
    that variant and validates every record read back. Stores on the same
    file within one process share a lock; separate processes are not
    coordinated.
    """

    def __init__(self, path: Path, settings_model: type[_S]) -> None:
        self._path = Path(path)
        self._model = settings_model
        self._lock = _lock_for(self._path)

    @property
    def path(self) -> Path:
        return self._path

    def get(self, definition_id: str) -> _S | None:
        with self._lock:
            raw = _load_json(self._path)
        record = raw.get(definition_id)
        if not isinstance(record, dict):
            return None
        try:
            return self._model.model_validate(record)
        except ValidationError:
            logger.warning("Ignoring invalid settings record %r in %s", definition_id, self._path)
            return None

    def put(self, definition_id: str, settings: _S) -> None:
        with self._lock:
            raw = _load_json(self._path)
            raw[definition_id] = settings.model_dump(mode="json", by_alias=True)
            try:
                _atomic_write(self._path, json.dumps(raw, indent=2))
            except OSError as e:
                raise PersistFailureError(
                    definition_id,
                    f"Could not write settings for {definition_id} to {self._path}: {e}",
                ) from e
