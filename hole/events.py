"""
Server events published over PyPubSub, plus a console subscriber.
"""

from __future__ import annotations

from typing import Optional

from pubsub import pub

TOPIC_REQUEST = "hole.request"
TOPIC_DISCONNECT = "hole.disconnect"
TOPIC_SOCKET_ERROR = "hole.socket.error"
TOPIC_HANDLER_ERROR = "hole.handler.error"


# Prototype listeners fix each topic's message data up front, so publishing
# works before anything subscribes.
def _request_proto(remote, path, query):
    pass


def _disconnect_proto(remote, code):
    pass


def _socket_error_proto(remote, code, message):
    pass


def _handler_error_proto(remote, path, error):
    pass


_topics = pub.getDefaultTopicMgr()
_topics.getOrCreateTopic(TOPIC_REQUEST, _request_proto)
_topics.getOrCreateTopic(TOPIC_DISCONNECT, _disconnect_proto)
_topics.getOrCreateTopic(TOPIC_SOCKET_ERROR, _socket_error_proto)
_topics.getOrCreateTopic(TOPIC_HANDLER_ERROR, _handler_error_proto)


def format_remote(remote) -> str:
    if isinstance(remote, tuple) and len(remote) >= 2:
        return f"{remote[0]}:{remote[1]}"
    return str(remote)


def publish_request(remote, path: str, query: Optional[str]) -> None:
    pub.sendMessage(TOPIC_REQUEST, remote=remote, path=path, query=query)


def publish_disconnect(remote, code: Optional[int]) -> None:
    pub.sendMessage(TOPIC_DISCONNECT, remote=remote, code=code)


def publish_socket_error(remote, code: Optional[int], message: str) -> None:
    pub.sendMessage(TOPIC_SOCKET_ERROR, remote=remote, code=code, message=message)


def publish_handler_error(remote, path: str, error: BaseException) -> None:
    pub.sendMessage(TOPIC_HANDLER_ERROR, remote=remote, path=path, error=error)


class ConsoleLogger:
    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        pub.subscribe(self._on_request, TOPIC_REQUEST)
        pub.subscribe(self._on_disconnect, TOPIC_DISCONNECT)
        pub.subscribe(self._on_socket_error, TOPIC_SOCKET_ERROR)
        pub.subscribe(self._on_handler_error, TOPIC_HANDLER_ERROR)

    def close(self):
        pub.unsubscribe(self._on_request, TOPIC_REQUEST)
        pub.unsubscribe(self._on_disconnect, TOPIC_DISCONNECT)
        pub.unsubscribe(self._on_socket_error, TOPIC_SOCKET_ERROR)
        pub.unsubscribe(self._on_handler_error, TOPIC_HANDLER_ERROR)

    def _on_request(self, remote, path, query, topic=pub.AUTO_TOPIC):
        host = remote[0] if isinstance(remote, tuple) else remote
        if query:
            print(f'[Hole] {host} "{path}" "{query}"')
        else:
            print(f'[Hole] {host} "{path}"')

    def _on_disconnect(self, remote, code, topic=pub.AUTO_TOPIC):
        # Clients hanging up early is routine
        if self.verbose:
            print(f"[Hole] {format_remote(remote)} disconnected (errno={code})")

    def _on_socket_error(self, remote, code, message, topic=pub.AUTO_TOPIC):
        print(f"[Hole] Socket error: code={code} message={message!r} remote={format_remote(remote)}")

    def _on_handler_error(self, remote, path, error, topic=pub.AUTO_TOPIC):
        print(f'[Hole] Handler error for "{path}" from {format_remote(remote)}: {error!r}')


_console: Optional[ConsoleLogger] = None


def subscribe_console_logging(verbose: bool = False) -> ConsoleLogger:
    """
    Attach the process-wide console logger. PyPubSub keeps weak references to
    listeners, so the instance is held here for the life of the process.
    """
    global _console
    if _console is None:
        _console = ConsoleLogger(verbose=verbose)
    else:
        _console.verbose = verbose
    return _console


__all__ = [
    "ConsoleLogger",
    "TOPIC_DISCONNECT",
    "TOPIC_HANDLER_ERROR",
    "TOPIC_REQUEST",
    "TOPIC_SOCKET_ERROR",
    "publish_disconnect",
    "publish_handler_error",
    "publish_request",
    "publish_socket_error",
    "subscribe_console_logging",
]
