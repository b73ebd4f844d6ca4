from __future__ import annotations

import pytest

from hole.router import NOT_FOUND_MESSAGE, Router


def test_dispatch_calls_matching_handler(make_context) -> None:
    router = Router()
    seen = []
    router.route("/about", lambda ctx: seen.append(ctx.path))
    result = router.dispatch(make_context("/about"))
    assert result.ok
    assert result.route is router.routes[0]
    assert seen == ["/about"]


@pytest.mark.parametrize("path", ["/missing", "/about/", "/About", "/"])
def test_unmatched_path_serves_not_found(make_context, path: str) -> None:
    router = Router()
    router.route("/about", lambda ctx: ctx.info("about"))
    ctx = make_context(path, host="hole.example", port=7070)
    result = router.dispatch(ctx)
    assert result.ok
    assert result.route is None
    assert ctx.socket.raw_lines() == [
        f"3{NOT_FOUND_MESSAGE}\t\thost.invalid\t0",
        "1Go back to home\t/\thole.example\t7070",
    ]


def test_first_registered_route_wins(make_context) -> None:
    router = Router()
    calls = []
    router.route("/dup", lambda ctx: calls.append("first"))
    router.route("/dup", lambda ctx: calls.append("second"))
    for _ in range(3):
        router.dispatch(make_context("/dup"))
    assert calls == ["first", "first", "first"]


def test_route_as_decorator(make_context) -> None:
    router = Router()

    @router.route("/links")
    def links(ctx):
        ctx.info("links")

    assert links is router.routes[0].handler
    ctx = make_context("/links")
    router.dispatch(ctx)
    assert [e.display for e in ctx.socket.entries()] == ["links"]


def test_coroutine_handler_is_awaited(make_context) -> None:
    router = Router()

    async def slow(ctx):
        ctx.info("before")
        ctx.info("after")

    router.route("/slow", slow)
    ctx = make_context("/slow")
    assert router.dispatch(ctx).ok
    assert [e.display for e in ctx.socket.entries()] == ["before", "after"]


def test_handler_failure_is_returned_with_partial_output(make_context) -> None:
    router = Router()

    def broken(ctx):
        ctx.info("partial")
        raise OSError("disk gone")

    router.route("/broken", broken)
    ctx = make_context("/broken")
    result = router.dispatch(ctx)
    assert not result.ok
    assert isinstance(result.error, OSError)
    assert result.route is router.routes[0]
    assert [e.display for e in ctx.socket.entries()] == ["partial"]
