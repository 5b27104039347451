"""
Basic usage example of fastapi-request-context.

Demonstrates:
- Injecting a RequestContext with route parameters into an endpoint
- Recording handler output and building the response from it
- Rendering an embedded fragment through a nested context
- Signalling HTTP errors through the context
"""

from fastapi import Depends, FastAPI

from fastapi_request_context import (
    OnContextEnd,
    RequestContext,
    RequestKind,
    context_dependency,
)

app = FastAPI(title="Basic Context Example")

ARTICLES = {
    "intro": "Welcome to the site.",
    "news": "Nothing happened today.",
}


async def audit(ctx: RequestContext, error: BaseException | None) -> None:
    """Print the outcome of each request."""
    status = getattr(error, "status_code", 200) if error else 200
    print(f"[AUDIT] {ctx.param('slug')} -> {status}")


page_context = context_dependency(hooks=[OnContextEnd(audit)])


def render_sidebar(parent: RequestContext) -> str:
    """Render a fragment in its own nested context."""
    ctx = RequestContext(parent.get_request(), kind=RequestKind.NESTED)
    ctx.set_params({"section": "sidebar"})
    ctx.append(f"<aside>{len(ARTICLES)} articles</aside>")
    return ctx.last()


@app.get("/articles/{slug}")
async def show_article(slug: str, ctx: RequestContext = Depends(page_context)):
    """Render an article page, or 404 when the slug is unknown."""
    body = ARTICLES.get(ctx.param("slug"))
    if body is None:
        ctx.raise_error(f"No article named {slug!r}", 404)

    ctx.append(f"<article>{body}</article>")
    ctx.append(ctx.last() + render_sidebar(ctx))
    ctx.set_response(ctx.last(), 200, {"Content-Type": "text/html"})
    return ctx.get_response()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
