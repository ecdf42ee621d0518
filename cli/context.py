"""Service wiring for CLI commands.

Each command runs one coroutine against a :class:`SiteContext` built the
same way the API builds it (backend selected once from the environment),
over an HTTP client that lives only for that command.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, TypeVar

import httpx

from portfolio.api.deps import SiteContext, build_site_context
from portfolio.config import settings

T = TypeVar("T")


async def _run(fn: Callable[[SiteContext], Awaitable[T]]) -> T:
    async with httpx.AsyncClient(timeout=settings.request_timeout) as client:
        site = build_site_context(client, settings)
        return await fn(site)


def run_with_site(fn: Callable[[SiteContext], Awaitable[T]]) -> T:
    """Run ``fn(site)`` to completion on a fresh event loop."""
    return asyncio.run(_run(fn))
