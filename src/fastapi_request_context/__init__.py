"""FastAPI Request Context - request-scoped state for FastAPI handlers."""

from fastapi_request_context.context import RequestContext, RequestKind
from fastapi_request_context.dependency import context_dependency
from fastapi_request_context.exceptions import ContextException, HttpSignaledError
from fastapi_request_context.hooks import ContextHook, OnContextEnd, OnContextStart

__all__ = [
    "ContextException",
    "ContextHook",
    "HttpSignaledError",
    "OnContextEnd",
    "OnContextStart",
    "RequestContext",
    "RequestKind",
    "context_dependency",
]
