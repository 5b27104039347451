"""Tests for ContextException hierarchy."""

from __future__ import annotations

from fastapi import HTTPException

from fastapi_request_context.exceptions import ContextException, HttpSignaledError


class TestContextException:
    def test_is_base_exception(self) -> None:
        exc = ContextException("test")
        assert isinstance(exc, Exception)
        assert str(exc) == "test"


class TestHttpSignaledError:
    def test_defaults(self) -> None:
        exc = HttpSignaledError()
        assert exc.status_code == 500
        assert exc.message == ""
        assert exc.detail == ""
        assert exc.headers == {}
        assert exc.code == 0
        assert exc.cause is None

    def test_detail_mirrors_message(self) -> None:
        exc = HttpSignaledError("not found", status_code=404)
        assert exc.detail == "not found"
        assert exc.status_code == 404

    def test_wraps_cause(self) -> None:
        original = ValueError("something broke")
        exc = HttpSignaledError("something broke", cause=original)
        assert exc.cause is original

    def test_headers_are_stringified(self) -> None:
        exc = HttpSignaledError(headers={"Retry-After": 30})
        assert exc.headers == {"Retry-After": "30"}

    def test_list_headers_are_joined(self) -> None:
        exc = HttpSignaledError(headers={"Vary": ["Accept", "Cookie"]})
        assert exc.headers == {"Vary": "Accept, Cookie"}

    def test_is_context_exception(self) -> None:
        assert issubclass(HttpSignaledError, ContextException)

    def test_is_http_exception(self) -> None:
        assert issubclass(HttpSignaledError, HTTPException)
