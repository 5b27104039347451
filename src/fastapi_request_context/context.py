"""RequestContext — per-request state container."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, NoReturn

from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import Response

from fastapi_request_context._types import HeaderMapping, iter_header_items
from fastapi_request_context.exceptions import HttpSignaledError

logger = logging.getLogger(__name__)


class RequestKind(Enum):
    """Whether a request started the processing cycle or was issued inside it."""

    PRIMARY = "primary"
    NESTED = "nested"


class RequestContext:
    """Mutable per-request state shared by the handlers of one request.

    Holds the inbound request, the outbound response, the request kind, the
    route parameters and an ordered log of handler outputs. Every getter
    returns ``None`` for absent state; only ``raise_error`` raises.
    """

    def __init__(
        self, request: Request | None = None, kind: RequestKind | None = None
    ) -> None:
        if kind is None:
            kind = RequestKind.PRIMARY if request is not None else RequestKind.NESTED
        self.request = request
        self.kind = kind
        self.response: Response | None = None
        self.params: dict[str, Any] = {}
        self.output: list[Any] = []

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self.kind.name}, "
            f"params={self.params!r}, outputs={len(self.output)})"
        )

    # Request

    def get_request(self) -> Request | None:
        return self.request

    def set_request(self, request: Request, kind: RequestKind | None = None) -> None:
        """Store ``request``, overwriting the request kind when one is given."""
        self.request = request
        if kind is not None:
            self.kind = kind

    def is_primary(self) -> bool:
        return self.kind is RequestKind.PRIMARY

    # Response

    def get_response(self) -> Response | None:
        return self.response

    def set_response(
        self,
        response: Response | str | bytes,
        status_code: int = 200,
        headers: HeaderMapping | None = None,
    ) -> None:
        """Store the response for this request.

        A ``Response`` instance is stored as-is. Anything else is used as the
        body of a new ``Response`` built with ``status_code`` and ``headers``;
        caller headers replace the defaults Starlette sets and list values
        produce one header line per item.
        """
        if not isinstance(response, Response):
            content = response
            response = Response(content, status_code=status_code)
            seen: set[str] = set()
            for name, value in iter_header_items(headers):
                if name.lower() in seen:
                    response.headers.append(name, value)
                else:
                    # replaces defaults such as content-length
                    response.headers[name] = value
                    seen.add(name.lower())
        self.response = response

    # Errors

    def raise_error(
        self,
        error: BaseException | str = "",
        status_code: int = 500,
        headers: HeaderMapping | None = None,
        code: int = 0,
    ) -> NoReturn:
        """Raise an ``HttpSignaledError``.

        When ``error`` is an exception its message and code are reused and it
        becomes the cause of the raised error; an explicit non-zero ``code``
        takes precedence over the exception's own. An ``HTTPException`` detail
        is reused as-is, so structured details stay structured. Otherwise
        ``error`` is the message.
        """
        cause: BaseException | None = None
        message: Any
        if isinstance(error, BaseException):
            cause = error
            if isinstance(error, HTTPException):
                message = error.detail
            else:
                message = str(error)
            if not code:
                cause_code = getattr(error, "code", 0)
                code = cause_code if isinstance(cause_code, int) else 0
        else:
            message = error

        logger.debug(
            "Signalling HTTP %d error (code=%s): %s", status_code, code, message
        )
        raise HttpSignaledError(
            message,
            status_code=status_code,
            headers=headers,
            code=code,
            cause=cause,
        ) from cause

    # Route parameters

    def get_params(self) -> dict[str, Any]:
        return self.params

    def set_params(self, params: dict[str, Any]) -> None:
        """Merge ``params`` over the current ones; new values win on collision."""
        self.params = {**self.params, **params}

    def param(self, key: str, default: Any = None) -> Any:
        """Return a route parameter, or ``default`` when the key is missing.

        A parameter explicitly set to ``None`` is returned as ``None``.
        """
        if key in self.params:
            return self.params[key]
        return default

    # Handler output

    def append(self, value: Any) -> None:
        self.output.append(value)

    def last(self) -> Any:
        if self.output:
            return self.output[-1]
        return None

    def reset(self) -> None:
        """Clear all state, including the kind, back to an empty context."""
        self.request = None
        self.response = None
        self.kind = RequestKind.NESTED
        self.params = {}
        self.output = []
