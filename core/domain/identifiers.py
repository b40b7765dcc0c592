from __future__ import annotations

from uuid import uuid4


def generate_id() -> str:
    return str(uuid4())


def normalize_id(value: str | None) -> str:
    """Strip surrounding whitespace; empty or missing ids become ""."""
    return (value or "").strip()


__all__ = ["generate_id", "normalize_id"]
