"""ContextHook base and convenience hook classes."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from fastapi_request_context.context import RequestContext


class ContextHook:
    """Base abstraction for context lifecycle hooks. All methods are no-op by default."""

    async def on_context_start(self, ctx: RequestContext) -> None:
        pass

    async def on_context_end(
        self, ctx: RequestContext, error: BaseException | None
    ) -> None:
        pass


class OnContextStart(ContextHook):
    """Convenience hook that only fires once the context is built."""

    def __init__(self, callback: Callable[[RequestContext], Awaitable[None]]) -> None:
        self._callback = callback

    async def on_context_start(self, ctx: RequestContext) -> None:
        await self._callback(ctx)


class OnContextEnd(ContextHook):
    """Convenience hook that fires when the request is done with the context."""

    def __init__(
        self,
        callback: Callable[[RequestContext, BaseException | None], Awaitable[None]],
    ) -> None:
        self._callback = callback

    async def on_context_end(
        self, ctx: RequestContext, error: BaseException | None
    ) -> None:
        await self._callback(ctx, error)
