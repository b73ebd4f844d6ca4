"""
Exact-path routing for Gopher selectors.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, List, Optional, Union

from .context import GopherContext

Handler = Callable[[GopherContext], Union[None, Awaitable[None]]]

NOT_FOUND_MESSAGE = "Page not found!"
HOME_LINK_TEXT = "Go back to home"


@dataclass
class Route:
    path: str
    handler: Handler


@dataclass
class DispatchResult:
    route: Optional[Route] = None  # None when the not-found page was served
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def not_found(ctx: GopherContext) -> None:
    ctx.error(NOT_FOUND_MESSAGE)
    ctx.directory(HOME_LINK_TEXT, "/")


class Router:
    """
    Ordered table of (path, handler). The first route whose path equals the
    request path wins; registering a path twice leaves the later handler
    unreachable.
    """

    def __init__(self):
        self.routes: List[Route] = []

    def route(self, path: str, handler: Optional[Handler] = None) -> Any:
        if handler is None:
            def decorator(fn: Handler) -> Handler:
                self.routes.append(Route(path, fn))
                return fn
            return decorator
        self.routes.append(Route(path, handler))
        return handler

    def match(self, path: str) -> Optional[Route]:
        for route in self.routes:
            if route.path == path:
                return route
        return None

    def dispatch(self, ctx: GopherContext) -> DispatchResult:
        route = self.match(ctx.path)
        try:
            if route is None:
                not_found(ctx)
            else:
                result = route.handler(ctx)
                if asyncio.iscoroutine(result):
                    asyncio.run(result)
        except Exception as exc:
            return DispatchResult(route=route, error=exc)
        return DispatchResult(route=route)


__all__ = ["DispatchResult", "Handler", "Route", "Router", "not_found"]
