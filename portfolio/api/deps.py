"""Shared request dependencies.

``SiteContext`` is built once in the app lifespan and holds everything a
request needs: the content service (over the backend selected at
startup), the auth provider and the chat adapter.  Routes receive it, and
the per-request settings / session resolution, through FastAPI
dependencies rather than fetching them ad hoc.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

import httpx
from fastapi import Depends, HTTPException, Request

from portfolio.admin.dashboard import AdminDashboard
from portfolio.auth.gate import AuthGate
from portfolio.auth.provider import AuthProvider, Session, select_auth_provider
from portfolio.chat.adapter import ChatAdapter
from portfolio.config import Settings
from portfolio.maintenance import should_show_maintenance
from portfolio.store.content import ContentService
from portfolio.store.models import SiteSettings
from portfolio.store.selection import select_backend


@dataclass
class SiteContext:
    config: Settings
    content: ContentService
    auth: AuthProvider
    chat: ChatAdapter


def build_site_context(client: httpx.AsyncClient, config: Settings) -> SiteContext:
    """Select the backend and auth provider once and wire the services."""
    content = ContentService(select_backend(client, config))
    return SiteContext(
        config=config,
        content=content,
        auth=select_auth_provider(client, config),
        chat=ChatAdapter(content, client=client, config=config),
    )


@dataclass
class SiteView:
    """Settings and session for one request, resolved together."""

    settings: SiteSettings | None
    gate: AuthGate
    maintenance: bool


def get_site(request: Request) -> SiteContext:
    return request.app.state.site


def access_token(request: Request, site: SiteContext = Depends(get_site)) -> str | None:
    """Session token from the cookie, or from an ``Authorization: Bearer`` header."""
    token = request.cookies.get(site.config.session_cookie_name)
    if token:
        return token
    header = request.headers.get("Authorization", "")
    scheme, _, value = header.partition(" ")
    if scheme.lower() == "bearer" and value:
        return value.strip()
    return None


def get_gate(
    site: SiteContext = Depends(get_site),
    token: str | None = Depends(access_token),
) -> AuthGate:
    """A fresh, unresolved gate for this request."""
    return AuthGate(site.auth, token)


async def resolve_site_view(
    request: Request,
    site: SiteContext = Depends(get_site),
    gate: AuthGate = Depends(get_gate),
) -> SiteView:
    """Fetch settings and check the session concurrently, then apply the maintenance gate."""
    site_settings, _ = await asyncio.gather(site.content.get_site_settings(), gate.resolve())
    flag = site_settings.maintenance_mode if site_settings else False
    return SiteView(
        settings=site_settings,
        gate=gate,
        maintenance=should_show_maintenance(flag, gate.has_session, request.url.path),
    )


async def open_site(view: SiteView = Depends(resolve_site_view)) -> SiteView:
    """Public API routes answer 503 while the site is in maintenance."""
    if view.maintenance:
        raise HTTPException(status_code=503, detail="Site is under maintenance.")
    return view


async def require_session(gate: AuthGate = Depends(get_gate)) -> Session:
    await gate.resolve()
    if not gate.has_session or gate.session is None:
        raise HTTPException(status_code=401, detail="Not authenticated.")
    return gate.session


def admin_content(
    session: Session = Depends(require_session),
    site: SiteContext = Depends(get_site),
) -> ContentService:
    return site.content.as_user(session.access_token)


def get_dashboard(content: ContentService = Depends(admin_content)) -> AdminDashboard:
    return AdminDashboard(content)
