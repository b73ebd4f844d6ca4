"""
Per-request output for Gopher handlers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Tuple

from gopherlib import (
    TYPE_DIRECTORY,
    TYPE_ERROR,
    TYPE_HTML,
    TYPE_INFO,
    TYPE_SEARCH,
    Request,
    ResponseLine,
    parse_gopher_url,
)

if TYPE_CHECKING:
    from .server import GopherServer

INFO_WIDTH = 70
TITLE_SELECTOR = "TITLE"


class GopherContext:
    """
    Everything a handler sees for one request: the decoded request, the
    owning server (for the advertised host/port) and the client socket.

    Every helper writes its line to the socket straight away, so the order
    of calls is the order of lines on the wire.
    """

    def __init__(self, server: "GopherServer", request: Request, socket,
                 remote: Optional[Tuple[str, int]] = None):
        self.server = server
        self.request = request
        self.socket = socket
        self.remote = remote

    @property
    def path(self) -> str:
        return self.request.path

    @property
    def query(self) -> Optional[str]:
        return self.request.query

    def info(self, txt: str) -> None:
        """
        Informational text. Splits on newlines and hard-wraps anything longer
        than 70 characters; an empty string still yields one (blank) line.
        """
        for chunk in txt.split("\n"):
            while len(chunk) > INFO_WIDTH:
                self.line(TYPE_INFO, chunk[:INFO_WIDTH])
                chunk = chunk[INFO_WIDTH:]
            self.line(TYPE_INFO, chunk)

    def title(self, txt: str) -> None:
        # Gopher-II draft convention; most clients show a plain info line
        self.line(TYPE_INFO, txt, TITLE_SELECTOR)

    def directory(self, display: str, path: str, host: Optional[str] = None,
                  port: Optional[int] = None) -> None:
        """Link to a menu. Omit host and port for a link on this server."""
        config = self.server.config
        self.line(
            TYPE_DIRECTORY,
            display,
            path,
            config.host if host is None else host,
            config.port if port is None else port,
        )

    def link(self, display: str, url: str) -> None:
        """Link to a gopher:// resource, or any other URL as an h-type line."""
        if url.lower().startswith("gopher://"):
            target = parse_gopher_url(url)
            self.line(target.type, display, target.selector, target.host, target.port)
        else:
            self.line(TYPE_HTML, display, "URL:" + url)

    def error(self, txt: str) -> None:
        self.line(TYPE_ERROR, txt)

    def search(self, display: str, path: str) -> None:
        config = self.server.config
        self.line(TYPE_SEARCH, display, path, config.host, config.port)

    def line(self, type_char: str, display: str, selector: Optional[str] = None,
             host: Optional[str] = None, port: Optional[int] = None) -> None:
        self.socket.sendall(ResponseLine(type_char, display, selector, host, port).encode())


__all__ = ["GopherContext", "INFO_WIDTH"]
