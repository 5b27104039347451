"""context_dependency() — factory producing FastAPI-compatible dependency callables."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Callable, Sequence

from starlette.requests import Request

from fastapi_request_context.context import RequestContext, RequestKind
from fastapi_request_context.hooks import ContextHook

logger = logging.getLogger(__name__)


def context_dependency(
    *,
    kind: RequestKind = RequestKind.PRIMARY,
    hooks: Sequence[ContextHook] = (),
    reset_on_exit: bool = True,
) -> Callable[..., AsyncIterator[RequestContext]]:
    """Return a FastAPI yield-dependency providing one RequestContext per request.

    The context is seeded with the route's path parameters. Hooks see the
    context before the endpoint runs and again once it finishes, together
    with the exception that ended it, if any. Errors are re-raised unchanged
    so the host maps them to a response.
    """
    hook_chain = tuple(hooks)

    async def dependency(request: Request) -> AsyncIterator[RequestContext]:
        ctx = RequestContext(request, kind=kind)
        ctx.set_params(dict(request.path_params))
        logger.debug(
            "Created %s context for %s %s",
            kind.value,
            request.method,
            request.url.path,
        )

        for hook in hook_chain:
            await hook.on_context_start(ctx)

        try:
            yield ctx
        except BaseException as exc:
            for hook in hook_chain:
                await hook.on_context_end(ctx, exc)
            raise
        else:
            for hook in hook_chain:
                await hook.on_context_end(ctx, None)
        finally:
            if reset_on_exit:
                ctx.reset()
                logger.debug("Reset context for %s", request.url.path)

    return dependency
