"""FastAPI application factory.

Lifespan
--------
On startup the app opens a single ``httpx.AsyncClient`` (shared across all
requests), selects the storage backend and auth provider from the
configuration and stores the resulting :class:`SiteContext` on
``app.state.site``.  On shutdown it closes the client.

Routers
-------
    /, /api/projects, /api/certificates, /api/settings, /api/messages
                — public site
    /login, /logout
                — admin sign-in
    /admin, /api/admin/...
                — dashboard and content mutations (session required)
    /api/chat   — portfolio assistant
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from portfolio import __version__
from portfolio.api.deps import build_site_context
from portfolio.api.routers import admin as admin_router
from portfolio.api.routers import auth as auth_router
from portfolio.api.routers import chat as chat_router
from portfolio.api.routers import site as site_router
from portfolio.config import Settings, settings as default_settings
from portfolio.errors import AuthError, StoreError
from portfolio.logging_setup import configure_logging


async def _store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    return JSONResponse(status_code=502, content={"detail": exc.message})


async def _auth_error_handler(request: Request, exc: AuthError) -> JSONResponse:
    return JSONResponse(status_code=401, content={"detail": exc.message})


def create_app(config: Settings | None = None) -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    config = config or default_settings
    configure_logging(config.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Open the shared HTTP client on startup and close it on shutdown."""
        client = httpx.AsyncClient(timeout=config.request_timeout)
        app.state.site = build_site_context(client, config)
        try:
            yield
        finally:
            await client.aclose()

    app = FastAPI(
        title="Portfolio API",
        description=(
            "Backend for a personal portfolio: public content, contact form, "
            "the session-gated admin dashboard and the portfolio chat assistant."
        ),
        version=__version__,
        lifespan=lifespan,
    )

    # Allow browser frontends on any origin (tighten for production).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StoreError, _store_error_handler)
    app.add_exception_handler(AuthError, _auth_error_handler)

    app.include_router(site_router.router, tags=["site"])
    app.include_router(auth_router.router, tags=["auth"])
    app.include_router(admin_router.page_router, tags=["admin"])
    app.include_router(admin_router.router, prefix="/api/admin", tags=["admin"])
    app.include_router(chat_router.router, prefix="/api/chat", tags=["chat"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn portfolio.api.app:app --reload
app = create_app()
