"""Public site endpoints.

Routes
------
GET  /                   Home view, or the maintenance view
GET  /api/projects       Projects (sample data on store failure), ?category= filter
GET  /api/certificates   Certificates (sample data on store failure)
GET  /api/settings       Site settings, or null
POST /api/messages       Contact-form submission

All ``/api`` routes answer 503 while maintenance mode hides the site from
visitors.
"""

from __future__ import annotations

import asyncio
from typing import Any, Optional

from fastapi import APIRouter, Depends

from portfolio.admin.forms import ContactForm
from portfolio.api.deps import SiteContext, SiteView, get_site, open_site, resolve_site_view

router = APIRouter()


@router.get("/", response_model=dict[str, Any])
async def home_view(
    view: SiteView = Depends(resolve_site_view),
    site: SiteContext = Depends(get_site),
) -> dict[str, Any]:
    """Everything the landing page renders, fetched once and handed down."""
    if view.maintenance:
        return {
            "view": "maintenance",
            "site_title": view.settings.site_title if view.settings else "",
        }

    projects, certificates = await asyncio.gather(
        site.content.get_projects(),
        site.content.get_certificates(),
    )
    return {
        "view": "home",
        "settings": view.settings.to_dict() if view.settings else None,
        "projects": [p.to_dict() for p in projects],
        "certificates": [c.to_dict() for c in certificates],
    }


@router.get("/api/projects", response_model=list[dict[str, Any]])
async def list_projects_endpoint(
    category: Optional[str] = None,
    _: SiteView = Depends(open_site),
    site: SiteContext = Depends(get_site),
) -> list[dict[str, Any]]:
    projects = await site.content.get_projects()
    if category and category.lower() != "all":
        projects = [p for p in projects if p.category == category]
    return [p.to_dict() for p in projects]


@router.get("/api/certificates", response_model=list[dict[str, Any]])
async def list_certificates_endpoint(
    _: SiteView = Depends(open_site),
    site: SiteContext = Depends(get_site),
) -> list[dict[str, Any]]:
    return [c.to_dict() for c in await site.content.get_certificates()]


@router.get("/api/settings", response_model=Optional[dict[str, Any]])
async def get_settings_endpoint(
    view: SiteView = Depends(open_site),
) -> Optional[dict[str, Any]]:
    return view.settings.to_dict() if view.settings else None


@router.post("/api/messages", status_code=201, response_model=dict[str, Any])
async def send_message_endpoint(
    body: ContactForm,
    _: SiteView = Depends(open_site),
    site: SiteContext = Depends(get_site),
) -> dict[str, Any]:
    """Store a visitor's message.  Store failures surface as 502."""
    await site.content.send_message(body.to_draft())
    return {"sent": True}
