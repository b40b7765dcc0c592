from __future__ import annotations

import copy
from typing import Any, Optional

from core.interfaces import SessionStorage


class InMemorySessionStorage(SessionStorage):
    def __init__(self, payload: dict[str, Any] | None = None):
        self._payload: Optional[dict[str, Any]] = copy.deepcopy(payload) if payload else None

    def load(self) -> Optional[dict[str, Any]]:
        return copy.deepcopy(self._payload) if self._payload is not None else None

    def save(self, payload: dict[str, Any]) -> None:
        self._payload = copy.deepcopy(payload)

    def clear(self) -> None:
        self._payload = None


__all__ = ["InMemorySessionStorage"]
