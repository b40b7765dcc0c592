from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from core.interfaces import SessionStorage
from infra.path import session_file_path

logger = logging.getLogger(__name__)


class JsonFileSessionStorage(SessionStorage):
    """Keeps the signed-in user in a small JSON file under the user data dir."""

    def __init__(self, path: str | Path | None = None):
        self._path = Path(path) if path is not None else session_file_path()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Optional[dict[str, Any]]:
        if not self._path.exists():
            return None
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable session file %s: %s", self._path, exc)
            return None
        return payload if isinstance(payload, dict) else None

    def save(self, payload: dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(payload, ensure_ascii=True, sort_keys=True), encoding="utf-8")

    def clear(self) -> None:
        try:
            self._path.unlink()
        except FileNotFoundError:
            pass


__all__ = ["JsonFileSessionStorage"]
