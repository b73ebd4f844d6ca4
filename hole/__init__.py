"""
A small Gopher server with exact-path routing.
"""

from .context import GopherContext
from .guestbook import Guestbook
from .router import DispatchResult, Route, Router
from .server import GopherServer, ServerConfig

__all__ = [
    "DispatchResult",
    "GopherContext",
    "GopherServer",
    "Guestbook",
    "Route",
    "Router",
    "ServerConfig",
]
