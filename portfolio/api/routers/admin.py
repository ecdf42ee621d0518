"""Admin dashboard endpoints (session required).

Routes
------
GET    /admin                          Dashboard view, or redirect to /login
POST   /api/admin/content              Create a project or certificate
PUT    /api/admin/content/{id}         Update a project or certificate
DELETE /api/admin/{kind}/{id}          Delete a project, certificate or message
PATCH  /api/admin/settings             Partial update of the settings row
POST   /api/admin/uploads              Upload an image (?target=hero sets the hero image)

Mutations answer with a fresh re-fetch of the affected entity.  A store
rejection answers 502 and nothing is returned.
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Depends, UploadFile
from fastapi.responses import JSONResponse, RedirectResponse, Response

from portfolio.admin.dashboard import AdminDashboard
from portfolio.admin.forms import ContentForm, EntryKind, SettingsUpdate
from portfolio.api.deps import SiteContext, get_dashboard, get_gate, get_site
from portfolio.auth.gate import AuthGate
from portfolio.maintenance import ADMIN_PREFIX

page_router = APIRouter()
router = APIRouter()


def _dump(items: list[Any]) -> list[dict[str, Any]]:
    return [item.to_dict() for item in items]


# ---------------------------------------------------------------------------
# Dashboard page
# ---------------------------------------------------------------------------

async def _loading_view() -> Response:
    return JSONResponse({"view": "loading"})


async def _redirect_view(path: str) -> Response:
    return RedirectResponse(path, status_code=303)


async def _dashboard_view(dashboard: AdminDashboard, email: str | None) -> Response:
    data = await dashboard.load()
    return JSONResponse({"view": "dashboard", "user": email, **data.to_dict()})


@page_router.get(ADMIN_PREFIX)
async def dashboard_page(
    gate: AuthGate = Depends(get_gate),
    site: SiteContext = Depends(get_site),
) -> Response:
    await gate.resolve()

    def protected():
        session = gate.session
        content = site.content.as_user(session.access_token)
        return _dashboard_view(AdminDashboard(content), session.email)

    view = gate.render(
        protected=protected,
        placeholder=_loading_view,
        redirect=_redirect_view,
    )
    return await view


# ---------------------------------------------------------------------------
# Content mutations
# ---------------------------------------------------------------------------

@router.post("/content", status_code=201, response_model=list[dict[str, Any]])
async def create_entry_endpoint(
    body: ContentForm,
    dashboard: AdminDashboard = Depends(get_dashboard),
) -> list[dict[str, Any]]:
    return _dump(await dashboard.save(body))


@router.put("/content/{entry_id}", response_model=list[dict[str, Any]])
async def update_entry_endpoint(
    entry_id: int,
    body: ContentForm,
    dashboard: AdminDashboard = Depends(get_dashboard),
) -> list[dict[str, Any]]:
    return _dump(await dashboard.save(body, entry_id=entry_id))


@router.delete("/{kind}/{entry_id}", response_model=list[dict[str, Any]])
async def delete_entry_endpoint(
    kind: EntryKind,
    entry_id: int,
    dashboard: AdminDashboard = Depends(get_dashboard),
) -> list[dict[str, Any]]:
    return _dump(await dashboard.delete(kind, entry_id))


# ---------------------------------------------------------------------------
# Settings and uploads
# ---------------------------------------------------------------------------

@router.patch("/settings", response_model=Optional[dict[str, Any]])
async def update_settings_endpoint(
    body: SettingsUpdate,
    dashboard: AdminDashboard = Depends(get_dashboard),
) -> Optional[dict[str, Any]]:
    refreshed = await dashboard.update_settings(body.to_fields())
    return refreshed.to_dict() if refreshed else None


@router.post("/uploads", status_code=201, response_model=dict[str, Any])
async def upload_image_endpoint(
    file: UploadFile,
    target: Optional[str] = None,
    dashboard: AdminDashboard = Depends(get_dashboard),
) -> dict[str, Any]:
    """Store the file in the image bucket and return its public URL (null in demo mode)."""
    content = await file.read()
    url = await dashboard.upload_image(
        file.filename or "upload",
        content,
        content_type=file.content_type,
        target=target,
    )
    return {"url": url}
