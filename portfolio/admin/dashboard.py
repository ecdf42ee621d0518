"""Admin mutation flows.

Every mutation is confirmed by the store before anything is returned, and
the result handed back is always a fresh re-fetch of the affected entity,
never a locally patched copy.  Store failures propagate untouched so the
caller can keep the form open and report the error.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

from portfolio.admin.forms import CertificateForm, EntryKind, ProjectForm
from portfolio.store.content import ContentService
from portfolio.store.models import SETTINGS_FIELDS, Certificate, Message, Project, SiteSettings

logger = logging.getLogger(__name__)

HERO_TARGET = "hero"


@dataclass
class DashboardData:
    projects: list[Project] = field(default_factory=list)
    certificates: list[Certificate] = field(default_factory=list)
    settings: SiteSettings | None = None
    messages: list[Message] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "projects": [p.to_dict() for p in self.projects],
            "certificates": [c.to_dict() for c in self.certificates],
            "settings": self.settings.to_dict() if self.settings else None,
            "messages": [m.to_dict() for m in self.messages],
        }


class AdminDashboard:
    def __init__(self, content: ContentService) -> None:
        self.content = content

    async def load(self) -> DashboardData:
        """Fetch all four entities concurrently."""
        projects, certificates, site_settings, messages = await asyncio.gather(
            self.content.get_projects(),
            self.content.get_certificates(),
            self.content.get_site_settings(),
            self.content.get_messages(),
        )
        return DashboardData(projects, certificates, site_settings, messages)

    async def refetch(self, kind: EntryKind) -> list[Any]:
        if kind is EntryKind.PROJECTS:
            return await self.content.get_projects()
        if kind is EntryKind.CERTIFICATES:
            return await self.content.get_certificates()
        return await self.content.get_messages()

    async def save(
        self,
        form: ProjectForm | CertificateForm,
        entry_id: int | None = None,
    ) -> list[Any]:
        """Create (no *entry_id*) or update an entry, then re-fetch its list."""
        if isinstance(form, ProjectForm):
            draft = form.to_draft()
            if entry_id is None:
                await self.content.add_project(draft)
            else:
                await self.content.update_project(entry_id, draft.to_dict())
            logger.info("Saved project %r", draft.title)
            return await self.refetch(EntryKind.PROJECTS)

        draft = form.to_draft()
        if entry_id is None:
            await self.content.add_certificate(draft)
        else:
            await self.content.update_certificate(entry_id, draft.to_dict())
        logger.info("Saved certificate %r", draft.name)
        return await self.refetch(EntryKind.CERTIFICATES)

    async def delete(self, kind: EntryKind, entry_id: int) -> list[Any]:
        if kind is EntryKind.PROJECTS:
            await self.content.delete_project(entry_id)
        elif kind is EntryKind.CERTIFICATES:
            await self.content.delete_certificate(entry_id)
        else:
            await self.content.delete_message(entry_id)
        logger.info("Deleted %s %d", kind.value, entry_id)
        return await self.refetch(kind)

    async def update_settings(self, fields: dict[str, Any]) -> SiteSettings | None:
        unknown = set(fields) - SETTINGS_FIELDS
        if unknown:
            raise ValueError(f"Unknown settings fields: {', '.join(sorted(unknown))}")
        if fields:
            await self.content.update_site_settings(fields)
        return await self.content.get_site_settings()

    async def upload_image(
        self,
        filename: str,
        content: bytes,
        content_type: str | None = None,
        target: str | None = None,
    ) -> str | None:
        """Upload an image; with ``target="hero"`` also make it the hero image."""
        url = await self.content.upload_image(filename, content, content_type)
        if url and target == HERO_TARGET:
            await self.content.update_site_settings({"hero_image_url": url})
        return url
