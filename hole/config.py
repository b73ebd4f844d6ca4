"""
Process configuration read from HOLE_* environment variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 7070
DEFAULT_GUESTBOOK = "guestbook.txt"
TRUTHY = ("1", "true", "yes", "on")


def _parse_port(raw: Optional[str]) -> int:
    try:
        return int(raw) if raw else DEFAULT_PORT
    except ValueError:
        return DEFAULT_PORT


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if value > 0 else None


@dataclass(frozen=True)
class Config:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    guestbook_path: str = DEFAULT_GUESTBOOK
    read_timeout: Optional[float] = None
    verbose: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        env = os.environ if environ is None else environ
        return cls(
            host=env.get("HOLE_HOST") or DEFAULT_HOST,
            port=_parse_port(env.get("HOLE_PORT")),
            guestbook_path=env.get("HOLE_GUESTBOOK") or DEFAULT_GUESTBOOK,
            read_timeout=_parse_timeout(env.get("HOLE_READ_TIMEOUT")),
            verbose=env.get("HOLE_VERBOSE", "").strip().lower() in TRUTHY,
        )


__all__ = ["Config"]
