"""Demo-mode backend used when no store credentials are configured."""

from __future__ import annotations

from typing import Any

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


class DemoBackend(StorageBackend):
    """Serve sample content; accept and discard every write.

    Nothing here raises: the public site always renders, and admin
    mutations quietly return ``None``.
    """

    @property
    def name(self) -> str:
        return "demo"

    @property
    def is_demo(self) -> bool:
        return True

    async def list_projects(self) -> list[Project]:
        return mock_projects()

    async def add_project(self, draft: ProjectDraft) -> Project | None:
        return None

    async def update_project(self, project_id: int, fields: dict[str, Any]) -> Project | None:
        return None

    async def delete_project(self, project_id: int) -> None:
        return None

    async def list_certificates(self) -> list[Certificate]:
        return mock_certificates()

    async def add_certificate(self, draft: CertificateDraft) -> Certificate | None:
        return None

    async def update_certificate(
        self, certificate_id: int, fields: dict[str, Any]
    ) -> Certificate | None:
        return None

    async def delete_certificate(self, certificate_id: int) -> None:
        return None

    async def get_site_settings(self) -> SiteSettings | None:
        return None

    async def update_site_settings(self, fields: dict[str, Any]) -> SiteSettings | None:
        return None

    async def list_messages(self) -> list[Message]:
        return []

    async def send_message(self, draft: MessageDraft) -> None:
        return None

    async def delete_message(self, message_id: int) -> None:
        return None

    async def upload_image(
        self,
        filename: str,
        content: bytes,
        content_type: str | None = None,
    ) -> str | None:
        return None
