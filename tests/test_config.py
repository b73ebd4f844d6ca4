from __future__ import annotations

import pytest

from hole.config import Config


def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("HOLE_HOST", "HOLE_PORT", "HOLE_GUESTBOOK", "HOLE_READ_TIMEOUT", "HOLE_VERBOSE"):
        monkeypatch.delenv(key, raising=False)


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)
    cfg = Config.from_env()
    assert cfg.host == "localhost"
    assert cfg.port == 7070
    assert cfg.guestbook_path == "guestbook.txt"
    assert cfg.read_timeout is None
    assert cfg.verbose is False


def test_values_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("HOLE_HOST", "hole.example")
    monkeypatch.setenv("HOLE_PORT", "70")
    monkeypatch.setenv("HOLE_GUESTBOOK", "/var/lib/hole/book.txt")
    monkeypatch.setenv("HOLE_READ_TIMEOUT", "2.5")
    monkeypatch.setenv("HOLE_VERBOSE", "yes")
    cfg = Config.from_env()
    assert cfg == Config("hole.example", 70, "/var/lib/hole/book.txt", 2.5, True)


def test_bad_numbers_fall_back() -> None:
    cfg = Config.from_env({"HOLE_PORT": "seventy", "HOLE_READ_TIMEOUT": "soon"})
    assert cfg.port == 7070
    assert cfg.read_timeout is None
