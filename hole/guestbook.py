"""
Append-only guestbook stored as a plain text file.
"""

from __future__ import annotations

import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

_APPEND_LOCK = threading.Lock()


def iso_timestamp(now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    now = now.astimezone(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class Guestbook:
    """
    One entry per line: ``<timestamp> - <text>``. Entries are stored and shown
    verbatim. Appends from concurrent connections are serialized.
    """

    def __init__(self, path: Union[str, Path] = "guestbook.txt"):
        self.path = Path(path)

    def sign(self, text: str, now: Optional[datetime] = None) -> str:
        entry = f"{iso_timestamp(now)} - {text}\n"
        with _APPEND_LOCK:
            with open(self.path, "a", encoding="utf-8") as fh:
                fh.write(entry)
        return entry

    def read(self) -> Optional[str]:
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                return fh.read()
        except FileNotFoundError:
            return None


__all__ = ["Guestbook", "iso_timestamp"]
