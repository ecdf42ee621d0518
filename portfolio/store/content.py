"""Read/write facade over a :class:`StorageBackend`.

Reads are where the degradation rules live:

- projects and certificates fall back to the sample content on a store
  error, so the public site never renders empty;
- messages fall back to an empty list (they are private, never mocked);
- settings fall back to ``None``.

Writes go straight to the backend and propagate
:class:`~portfolio.errors.StoreError` / :class:`~portfolio.errors.UploadError`
to the caller, which must report the failure and re-fetch on success.
"""

from __future__ import annotations

import logging
from typing import Any

from portfolio.errors import StoreError
from portfolio.store.base import StorageBackend
from portfolio.store.mock_data import mock_certificates, mock_projects
from portfolio.store.models import (
    Certificate,
    CertificateDraft,
    Message,
    MessageDraft,
    Project,
    ProjectDraft,
    SiteSettings,
)

logger = logging.getLogger(__name__)


class ContentService:
    def __init__(self, backend: StorageBackend) -> None:
        self.backend = backend

    def as_user(self, access_token: str) -> ContentService:
        """Same service, with writes authorised by the admin's session."""
        return ContentService(self.backend.as_user(access_token))

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    async def get_projects(self) -> list[Project]:
        try:
            return await self.backend.list_projects()
        except StoreError as exc:
            logger.warning("Error fetching projects, serving sample data: %s", exc)
            return mock_projects()

    async def get_certificates(self) -> list[Certificate]:
        try:
            return await self.backend.list_certificates()
        except StoreError as exc:
            logger.warning("Error fetching certificates, serving sample data: %s", exc)
            return mock_certificates()

    async def get_site_settings(self) -> SiteSettings | None:
        try:
            return await self.backend.get_site_settings()
        except StoreError as exc:
            logger.warning("Error fetching site settings: %s", exc)
            return None

    async def get_messages(self) -> list[Message]:
        try:
            return await self.backend.list_messages()
        except StoreError as exc:
            logger.warning("Error fetching messages: %s", exc)
            return []

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    async def add_project(self, draft: ProjectDraft) -> Project | None:
        return await self.backend.add_project(draft)

    async def update_project(self, project_id: int, fields: dict[str, Any]) -> Project | None:
        return await self.backend.update_project(project_id, fields)

    async def delete_project(self, project_id: int) -> None:
        await self.backend.delete_project(project_id)

    async def add_certificate(self, draft: CertificateDraft) -> Certificate | None:
        return await self.backend.add_certificate(draft)

    async def update_certificate(
        self, certificate_id: int, fields: dict[str, Any]
    ) -> Certificate | None:
        return await self.backend.update_certificate(certificate_id, fields)

    async def delete_certificate(self, certificate_id: int) -> None:
        await self.backend.delete_certificate(certificate_id)

    async def update_site_settings(self, fields: dict[str, Any]) -> SiteSettings | None:
        return await self.backend.update_site_settings(fields)

    async def send_message(self, draft: MessageDraft) -> None:
        await self.backend.send_message(draft)

    async def delete_message(self, message_id: int) -> None:
        await self.backend.delete_message(message_id)

    async def upload_image(
        self,
        filename: str,
        content: bytes,
        content_type: str | None = None,
    ) -> str | None:
        return await self.backend.upload_image(filename, content, content_type)
