"""FastAPI application factory.

Routers
-------
    /scrape    — G2 review scraping (headless browser per request)
    /health    — liveness check

Error shape
-----------
Every error response carries ``{"error": ...}`` and, where useful,
``{"details": ...}``.  Malformed request bodies are reported as ``400`` in
that same shape instead of FastAPI's default ``422``.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from g2scraper.api.routers import health as health_router
from g2scraper.api.routers import scrape as scrape_router

INVALID_BODY_ERROR = "Invalid request body."


def _summarise_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg', 'invalid')}")
    return "; ".join(parts)


async def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"error": INVALID_BODY_ERROR, "details": _summarise_errors(exc)},
    )


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    app = FastAPI(
        title="G2 Review Scraper",
        description=(
            "Loads a G2 product review page in a headless browser, extracts "
            "the visible review cards and returns them as JSON."
        ),
        version="1.0.0",
    )

    # Allow browser frontends on any origin (tighten for production).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    app.include_router(scrape_router.router, tags=["scrape"])
    app.include_router(health_router.router, tags=["health"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn g2scraper.api.app:app --reload
app = create_app()
