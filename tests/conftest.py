from __future__ import annotations

from typing import List

import pytest

from gopherlib import CRLF, MenuEntry, Request, parse_menu
from hole.context import GopherContext
from hole.server import ServerConfig


class FakeSocket:
    def __init__(self) -> None:
        self.sent = bytearray()
        self.closed = False

    def sendall(self, data: bytes) -> None:
        self.sent.extend(data)

    def raw_lines(self) -> List[str]:
        text = self.sent.decode("utf-8")
        assert text == "" or text.endswith(CRLF)
        return text.split(CRLF)[:-1]

    def entries(self) -> List[MenuEntry]:
        return parse_menu(self.raw_lines())


class FakeServer:
    def __init__(self, host: str = "gopher.test", port: int = 7070) -> None:
        self.config = ServerConfig(host=host, port=port)


@pytest.fixture
def make_context():
    def factory(path: str = "/", query=None, host: str = "gopher.test", port: int = 7070) -> GopherContext:
        return GopherContext(FakeServer(host, port), Request(path, query), FakeSocket(), ("127.0.0.1", 50000))

    return factory
