"""Artisan marketplace HTTP service.

Serves the directory, reviews and tips APIs from one FastAPI app. Commands
are processed synchronously inside the request; each request runs in the
protean domain context that owns its URL prefix.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

from directory.domain import directory
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from reviews.domain import reviews
from shared.errors import register_error_handlers
from shared.logging import bind_request_context, clear_request_context, get_logger
from tips.domain import tips

logger = get_logger(__name__)

# PROTEAN_ENV selects the overlay: the default runs projectors inside the
# unit of work, "production" hands events to the Engine (src/server.py).
directory.init()
reviews.init()
tips.init()

_DOMAINS_BY_PREFIX = (
    ("/members", directory),
    ("/artisans", directory),
    ("/reviews", reviews),
    ("/tips", tips),
)


def domain_for(path: str):
    """The domain serving ``path``, or None for routes outside every context."""
    for prefix, domain in _DOMAINS_BY_PREFIX:
        if path == prefix or path.startswith(prefix + "/"):
            return domain
    return None


app = FastAPI(
    title="Artisan Marketplace API",
    description="Curator reviews, moderation and tipping",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    domain = domain_for(request.url.path)
    if domain is None:
        return await call_next(request)

    bind_request_context(
        domain=domain.name,
        method=request.method,
        path=request.url.path,
        user_id=request.headers.get("x-user-id"),
    )
    try:
        with domain.domain_context():
            response = await call_next(request)
        logger.debug("Request handled", status_code=response.status_code)
        return response
    finally:
        clear_request_context()


register_error_handlers(app)

from directory.api import artisan_router, member_router  # noqa: E402
from reviews.api import review_router  # noqa: E402
from tips.api import tip_router  # noqa: E402

app.include_router(member_router)
app.include_router(artisan_router)
app.include_router(review_router)
app.include_router(tip_router)


@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": [domain.name for domain in (directory, reviews, tips)],
        }
    )
