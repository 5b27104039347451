"""ContextException hierarchy for errors signalled through a RequestContext."""

from __future__ import annotations

from typing import Any

from fastapi import HTTPException

from fastapi_request_context._types import HeaderMapping, flatten_headers


class ContextException(Exception):
    """Base for all context exceptions."""


class HttpSignaledError(ContextException, HTTPException):
    """HTTP-mapped failure raised by ``RequestContext.raise_error``.

    Subclasses FastAPI's ``HTTPException`` so the host's default handler turns
    it into a response with ``status_code``, ``detail`` and ``headers``.
    """

    def __init__(
        self,
        message: Any = "",
        *,
        status_code: int = 500,
        headers: HeaderMapping | None = None,
        code: int = 0,
        cause: BaseException | None = None,
    ) -> None:
        flat = flatten_headers(headers)
        HTTPException.__init__(
            self, status_code=status_code, detail=message, headers=flat
        )
        self.message = message
        self.headers = flat
        self.code = code
        self.cause = cause
