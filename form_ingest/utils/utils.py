"""Misc cross-cutting helpers."""

from __future__ import annotations

import os


def get_env_bool(name: str, default: bool = False) -> bool:
    return os.getenv(name, str(int(default))).lower() in {"1", "true", "yes"}


def get_env_int(name: str, default: int) -> int:
    """Read an integer env var, failing loudly on garbage.

    Empty values fall back to *default* so a blank line in ``.env`` behaves
    like an unset variable.
    """
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from exc
