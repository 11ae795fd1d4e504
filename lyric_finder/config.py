from __future__ import annotations

import os
from dataclasses import dataclass

from .client import BASE_URL


@dataclass(frozen=True)
class ClientConfig:
    base_url: str
    timeout_s: float | None


def load_config() -> ClientConfig:
    """Raises ValueError when LYRIC_FINDER_TIMEOUT is not a non-negative number."""
    base_url = (os.getenv("LYRIC_FINDER_BASE_URL") or BASE_URL).rstrip("/")

    # Unset, empty or 0 leaves the transport default (no timeout)
    timeout_env = os.getenv("LYRIC_FINDER_TIMEOUT", "").strip()
    try:
        timeout_s = float(timeout_env) if timeout_env else None
    except ValueError:
        raise ValueError(f"LYRIC_FINDER_TIMEOUT must be a number, got {timeout_env!r}") from None
    if timeout_s is not None and timeout_s < 0:
        raise ValueError(f"LYRIC_FINDER_TIMEOUT must not be negative, got {timeout_env!r}")
    if not timeout_s:
        timeout_s = None

    return ClientConfig(base_url=base_url, timeout_s=timeout_s)
