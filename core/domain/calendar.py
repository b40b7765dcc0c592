from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Holiday:
    """A public holiday. Derived from the year; never persisted."""

    date: date
    name: str
    is_national: bool = True


__all__ = ["Holiday"]
