"""
Threaded Gopher server: one thread and one request per connection.
"""

from __future__ import annotations

import socket
import socketserver
import threading
from dataclasses import dataclass, replace
from typing import Optional

from gopherlib import decode_request

from . import events
from .context import GopherContext
from .router import Handler, Router

RECV_SIZE = 1024
# Clients hanging up or going quiet; not failures
BENIGN_SOCKET_ERRORS = (ConnectionResetError, BrokenPipeError, socket.timeout)


@dataclass(frozen=True)
class ServerConfig:
    host: str = "localhost"
    port: int = 7070


class GopherServer(socketserver.ThreadingTCPServer):
    allow_reuse_address = True
    # server_close() joins connection threads still writing their reply
    daemon_threads = False

    def __init__(self, host: str, port: int, router: Optional[Router] = None,
                 read_timeout: Optional[float] = None):
        self.config = ServerConfig(host=host, port=port)
        self.router = router if router is not None else Router()
        self.read_timeout = read_timeout
        self.listening = False
        self.closing = False
        self._waiting = set()
        self._waiting_lock = threading.Lock()
        super().__init__((host, port), GopherRequestHandler, bind_and_activate=False)

    @property
    def host(self) -> str:
        return self.config.host

    @property
    def port(self) -> int:
        return self.config.port

    def route(self, path: str, handler: Optional[Handler] = None):
        return self.router.route(path, handler)

    def listen(self) -> None:
        if self.listening:
            return
        try:
            self.server_bind()
            self.server_activate()
        except OSError:
            self.server_close()
            raise
        bound_port = self.server_address[1]
        if bound_port != self.config.port:
            self.config = replace(self.config, port=bound_port)
        self.listening = True

    def start(self) -> None:
        """Bind and serve until shutdown() is called from another thread."""
        self.listen()
        self.serve_forever()

    def start_background(self) -> threading.Thread:
        self.listen()
        thread = threading.Thread(target=self.serve_forever, daemon=True)
        thread.start()
        return thread

    def shutdown_request(self, request):
        # GopherRequestHandler closes its own socket
        pass

    def begin_read(self, request) -> bool:
        """Track a connection that has not sent its request line yet."""
        with self._waiting_lock:
            if self.closing:
                return False
            self._waiting.add(request)
            return True

    def end_read(self, request) -> None:
        with self._waiting_lock:
            self._waiting.discard(request)

    def server_close(self):
        # Idle clients would keep server_close() joining their threads forever;
        # cut them off and let connections already being answered finish.
        with self._waiting_lock:
            self.closing = True
            waiting = list(self._waiting)
        for request in waiting:
            try:
                request.shutdown(socket.SHUT_RDWR)
            except OSError:
                pass
        super().server_close()


class GopherRequestHandler(socketserver.BaseRequestHandler):
    server: GopherServer

    def handle(self):
        try:
            self._serve()
        except BENIGN_SOCKET_ERRORS as exc:
            events.publish_disconnect(self.client_address, exc.errno)
        except OSError as exc:
            events.publish_socket_error(self.client_address, exc.errno, str(exc))
        finally:
            self._close()

    def _serve(self):
        if self.server.read_timeout is not None:
            self.request.settimeout(self.server.read_timeout)
        if not self.server.begin_read(self.request):
            return
        try:
            # A Gopher request is one short line; it is expected in a single read
            data = self.request.recv(RECV_SIZE)
        finally:
            self.server.end_read(self.request)
        if not data:
            return

        request = decode_request(data)
        ctx = GopherContext(self.server, request, self.request, self.client_address)
        events.publish_request(self.client_address, request.path, request.query)

        result = self.server.router.dispatch(ctx)
        if result.ok:
            return
        if isinstance(result.error, BENIGN_SOCKET_ERRORS):
            events.publish_disconnect(self.client_address, result.error.errno)
        else:
            events.publish_handler_error(self.client_address, request.path, result.error)

    def _close(self):
        try:
            self.request.shutdown(socket.SHUT_WR)
        except OSError:
            pass  # peer already gone
        self.request.close()


__all__ = ["GopherRequestHandler", "GopherServer", "ServerConfig"]
