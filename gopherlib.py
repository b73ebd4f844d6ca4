#!/usr/bin/env python3
# gopherlib.py
"""
Gopher wire format: request decoding, menu line encoding, gopher:// URLs.
"""

from __future__ import annotations

import socket
from dataclasses import dataclass
from typing import List, Optional, Union
from urllib.parse import urlsplit

CRLF = "\r\n"
DEFAULT_PORT = 70
SOCKET_TIMEOUT = 15

# Fillers for menu fields a line does not carry
NO_SELECTOR = ""
NO_HOST = "host.invalid"
NO_PORT = 0

TYPE_DIRECTORY = "1"
TYPE_ERROR = "3"
TYPE_SEARCH = "7"
TYPE_HTML = "h"
TYPE_INFO = "i"


@dataclass(frozen=True)
class Request:
    path: str
    query: Optional[str] = None


@dataclass
class ResponseLine:
    """
    One menu line. Display text must not contain tabs or newlines; nothing
    escapes them.
    """
    type: str
    display: str
    selector: Optional[str] = None
    host: Optional[str] = None
    port: Optional[int] = None

    def encode(self) -> bytes:
        fields = [
            self.type + self.display,
            NO_SELECTOR if self.selector is None else self.selector,
            NO_HOST if self.host is None else self.host,
            str(NO_PORT if self.port is None else self.port),
        ]
        return ("\t".join(fields) + CRLF).encode("utf-8")


def encode_line(type_char: str, display: str, selector: Optional[str] = None,
                host: Optional[str] = None, port: Optional[int] = None) -> bytes:
    return ResponseLine(type_char, display, selector, host, port).encode()


def normalize_selector(path: str) -> str:
    # Empty selector is the root menu; "menu" is treated as "/menu"
    return path if path.startswith("/") else "/" + path


def decode_request(raw: Union[bytes, str]) -> Request:
    text = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw
    text = text.rstrip()
    if "\t" in text:
        path, query = text.split("\t", 1)
        return Request(path=normalize_selector(path), query=query)
    return Request(path=normalize_selector(text))


@dataclass
class GopherURL:
    host: str
    port: int
    type: str
    selector: str


def parse_gopher_url(url: str) -> GopherURL:
    parts = urlsplit(url)
    if parts.scheme != "gopher":
        raise ValueError("URL must start with gopher://")

    # Query and fragment are not part of the selector
    path = parts.path
    return GopherURL(
        host=parts.hostname or "",
        port=parts.port or DEFAULT_PORT,
        type=path[1] if len(path) >= 2 else TYPE_DIRECTORY,
        selector=path[2:],
    )


@dataclass
class MenuEntry:
    type: str
    display: str
    selector: str
    host: str
    port: int


def _make_menu_entry(type_char: str, display: str, selector: str, host: str, port: str) -> MenuEntry:
    try:
        pnum = int(port) if port else NO_PORT
    except ValueError:
        pnum = NO_PORT
    return MenuEntry(
        type=type_char or TYPE_INFO,
        display=display,
        selector=selector,
        host=host or "",
        port=pnum,
    )


def parse_menu(lines: List[str]) -> List[MenuEntry]:
    out: List[MenuEntry] = []
    for line in lines:
        line = line.rstrip("\r\n")
        if line == ".":
            break
        if not line:
            continue
        type_char = line[0]
        fields = line[1:].split("\t")
        display = fields[0] if len(fields) > 0 else ""
        selector = fields[1] if len(fields) > 1 else ""
        host = fields[2] if len(fields) > 2 else ""
        port = fields[3] if len(fields) > 3 else ""
        out.append(_make_menu_entry(type_char, display, selector, host, port))
    return out


def fetch_lines(host: str, port: int, selector: str, query: Optional[str] = None,
                timeout: float = SOCKET_TIMEOUT) -> List[str]:
    """
    Send one request and collect the reply until the server closes.
    """
    request = selector if query is None else f"{selector}\t{query}"
    with socket.create_connection((host, port), timeout=timeout) as s:
        s.sendall(f"{request}{CRLF}".encode("utf-8", errors="replace"))
        chunks = []
        while True:
            data = s.recv(4096)
            if not data:
                break
            chunks.append(data)
    text = b"".join(chunks).decode("utf-8", errors="replace")
    return text.split(CRLF)[:-1] if text.endswith(CRLF) else text.split(CRLF)


__all__ = [
    "CRLF",
    "DEFAULT_PORT",
    "GopherURL",
    "MenuEntry",
    "Request",
    "ResponseLine",
    "decode_request",
    "encode_line",
    "fetch_lines",
    "normalize_selector",
    "parse_gopher_url",
    "parse_menu",
]
