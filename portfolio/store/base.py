"""Storage backend capability interface.

Two implementations exist:

``RemoteBackend``
    Talks to the Supabase REST, Storage and Auth endpoints.  Store
    rejections raise :class:`~portfolio.errors.StoreError` (or
    :class:`~portfolio.errors.UploadError` for bucket writes).

``DemoBackend``
    Used when store credentials are absent.  Reads return built-in sample
    data (projects, certificates), an empty list (messages) or ``None``
    (settings); every write is a silent no-op returning ``None``.

The backend is chosen once at startup by
:func:`portfolio.store.select_backend`; callers never branch on the
configuration themselves.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from portfolio.store.models import (
    Certificate,
    CertificateDraft,
    Message,
    MessageDraft,
    Project,
    ProjectDraft,
    SiteSettings,
)


class StorageBackend(ABC):
    """Abstract base class for the content store."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable backend name."""

    @property
    def is_demo(self) -> bool:
        return False

    def as_user(self, access_token: str) -> StorageBackend:
        """Return a backend whose calls are made on behalf of *access_token*."""
        return self

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------
    @abstractmethod
    async def list_projects(self) -> list[Project]:
        """Return all projects, newest first."""

    @abstractmethod
    async def add_project(self, draft: ProjectDraft) -> Project | None: ...

    @abstractmethod
    async def update_project(self, project_id: int, fields: dict[str, Any]) -> Project | None: ...

    @abstractmethod
    async def delete_project(self, project_id: int) -> None: ...

    # ------------------------------------------------------------------
    # Certificates
    # ------------------------------------------------------------------
    @abstractmethod
    async def list_certificates(self) -> list[Certificate]:
        """Return all certificates, newest first."""

    @abstractmethod
    async def add_certificate(self, draft: CertificateDraft) -> Certificate | None: ...

    @abstractmethod
    async def update_certificate(
        self, certificate_id: int, fields: dict[str, Any]
    ) -> Certificate | None: ...

    @abstractmethod
    async def delete_certificate(self, certificate_id: int) -> None: ...

    # ------------------------------------------------------------------
    # Site settings (singleton row, id=1)
    # ------------------------------------------------------------------
    @abstractmethod
    async def get_site_settings(self) -> SiteSettings | None: ...

    @abstractmethod
    async def update_site_settings(self, fields: dict[str, Any]) -> SiteSettings | None: ...

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------
    @abstractmethod
    async def list_messages(self) -> list[Message]:
        """Return all contact messages, newest first."""

    @abstractmethod
    async def send_message(self, draft: MessageDraft) -> None: ...

    @abstractmethod
    async def delete_message(self, message_id: int) -> None: ...

    # ------------------------------------------------------------------
    # Object storage
    # ------------------------------------------------------------------
    @abstractmethod
    async def upload_image(
        self,
        filename: str,
        content: bytes,
        content_type: str | None = None,
    ) -> str | None:
        """Store *content* under a random name and return its public URL."""
