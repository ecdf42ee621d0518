"""Supabase-backed storage: PostgREST tables and the Storage bucket.

Endpoints used
--------------
``GET    /rest/v1/{table}?select=*&order=created_at.desc``   list rows
``POST   /rest/v1/{table}``                                   insert (returns row)
``PATCH  /rest/v1/{table}?id=eq.{id}``                        update (returns row)
``DELETE /rest/v1/{table}?id=eq.{id}``                        delete
``POST   /storage/v1/object/{bucket}/{name}``                 upload object

Every request carries the project's anon key in ``apikey``.  The
``Authorization`` bearer is the anon key for public calls, or the admin's
access token on a backend obtained through :meth:`RemoteBackend.as_user`,
so row-level security sees the signed-in user.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from portfolio.errors import StoreError, UploadError
from portfolio.store.base import StorageBackend
from portfolio.store.models import (
    Certificate,
    CertificateDraft,
    Message,
    MessageDraft,
    Project,
    ProjectDraft,
    SiteSettings,
)
from portfolio.store.uploads import generate_object_name

logger = logging.getLogger(__name__)

_SETTINGS_ROW_ID = 1


def _error_detail(response: httpx.Response) -> str:
    """Pull the most useful message out of a PostgREST / Storage error body."""
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    if isinstance(body, dict):
        for key in ("message", "error_description", "error", "msg"):
            if body.get(key):
                return str(body[key])
    return f"HTTP {response.status_code}"


class RemoteBackend(StorageBackend):
    """Content store on a Supabase project."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: str,
        anon_key: str,
        bucket: str = "portfolio-images",
        access_token: str | None = None,
    ) -> None:
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._anon_key = anon_key
        self._bucket = bucket
        self._access_token = access_token

    @property
    def name(self) -> str:
        return "supabase"

    def as_user(self, access_token: str) -> RemoteBackend:
        return RemoteBackend(
            self._client,
            self._base_url,
            self._anon_key,
            bucket=self._bucket,
            access_token=access_token,
        )

    # ------------------------------------------------------------------
    # HTTP plumbing
    # ------------------------------------------------------------------
    def _headers(self, extra: dict[str, str] | None = None) -> dict[str, str]:
        headers = {
            "apikey": self._anon_key,
            "Authorization": f"Bearer {self._access_token or self._anon_key}",
        }
        if extra:
            headers.update(extra)
        return headers

    async def _rest(
        self,
        method: str,
        table: str,
        *,
        params: dict[str, str] | None = None,
        json: Any = None,
        returning: bool = False,
    ) -> list[dict[str, Any]]:
        """Run one PostgREST call and return the decoded row list."""
        extra = {"Prefer": "return=representation"} if returning else None
        try:
            response = await self._client.request(
                method,
                f"{self._base_url}/rest/v1/{table}",
                params=params,
                json=json,
                headers=self._headers(extra),
            )
        except httpx.HTTPError as exc:
            raise StoreError(f"{method} {table} failed: {exc}") from exc

        if response.is_error:
            raise StoreError(
                f"{method} {table} failed: {_error_detail(response)}",
                status_code=response.status_code,
            )
        if not response.content:
            return []
        try:
            data = response.json()
        except ValueError as exc:
            raise StoreError(f"{method} {table} returned invalid JSON") from exc
        return data if isinstance(data, list) else [data]

    async def _select_all(self, table: str) -> list[dict[str, Any]]:
        return await self._rest(
            "GET", table, params={"select": "*", "order": "created_at.desc"}
        )

    async def _insert(self, table: str, row: dict[str, Any]) -> dict[str, Any] | None:
        rows = await self._rest("POST", table, json=[row], returning=True)
        return rows[0] if rows else None

    async def _update(
        self, table: str, row_id: int, fields: dict[str, Any]
    ) -> dict[str, Any] | None:
        rows = await self._rest(
            "PATCH", table, params={"id": f"eq.{row_id}"}, json=fields, returning=True
        )
        return rows[0] if rows else None

    async def _delete(self, table: str, row_id: int) -> None:
        await self._rest("DELETE", table, params={"id": f"eq.{row_id}"})

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------
    async def list_projects(self) -> list[Project]:
        return [Project.from_row(r) for r in await self._select_all("projects")]

    async def add_project(self, draft: ProjectDraft) -> Project | None:
        row = await self._insert("projects", draft.to_dict())
        return Project.from_row(row) if row else None

    async def update_project(self, project_id: int, fields: dict[str, Any]) -> Project | None:
        row = await self._update("projects", project_id, fields)
        return Project.from_row(row) if row else None

    async def delete_project(self, project_id: int) -> None:
        await self._delete("projects", project_id)

    # ------------------------------------------------------------------
    # Certificates
    # ------------------------------------------------------------------
    async def list_certificates(self) -> list[Certificate]:
        return [Certificate.from_row(r) for r in await self._select_all("certificates")]

    async def add_certificate(self, draft: CertificateDraft) -> Certificate | None:
        row = await self._insert("certificates", draft.to_dict())
        return Certificate.from_row(row) if row else None

    async def update_certificate(
        self, certificate_id: int, fields: dict[str, Any]
    ) -> Certificate | None:
        row = await self._update("certificates", certificate_id, fields)
        return Certificate.from_row(row) if row else None

    async def delete_certificate(self, certificate_id: int) -> None:
        await self._delete("certificates", certificate_id)

    # ------------------------------------------------------------------
    # Site settings
    # ------------------------------------------------------------------
    async def get_site_settings(self) -> SiteSettings | None:
        rows = await self._rest(
            "GET",
            "site_settings",
            params={"select": "*", "id": f"eq.{_SETTINGS_ROW_ID}"},
        )
        if not rows:
            logger.warning("site_settings row %d is missing", _SETTINGS_ROW_ID)
            return None
        return SiteSettings.from_row(rows[0])

    async def update_site_settings(self, fields: dict[str, Any]) -> SiteSettings | None:
        row = await self._update("site_settings", _SETTINGS_ROW_ID, fields)
        return SiteSettings.from_row(row) if row else None

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------
    async def list_messages(self) -> list[Message]:
        return [Message.from_row(r) for r in await self._select_all("messages")]

    async def send_message(self, draft: MessageDraft) -> None:
        await self._rest("POST", "messages", json=[draft.to_dict()])

    async def delete_message(self, message_id: int) -> None:
        await self._delete("messages", message_id)

    # ------------------------------------------------------------------
    # Object storage
    # ------------------------------------------------------------------
    def public_url(self, object_name: str) -> str:
        return f"{self._base_url}/storage/v1/object/public/{self._bucket}/{object_name}"

    async def upload_image(
        self,
        filename: str,
        content: bytes,
        content_type: str | None = None,
    ) -> str | None:
        object_name = generate_object_name(filename)
        headers = self._headers(
            {"Content-Type": content_type or "application/octet-stream", "x-upsert": "false"}
        )
        try:
            response = await self._client.post(
                f"{self._base_url}/storage/v1/object/{self._bucket}/{object_name}",
                content=content,
                headers=headers,
            )
        except httpx.HTTPError as exc:
            raise UploadError(f"Upload of {filename!r} failed: {exc}") from exc

        if response.is_error:
            raise UploadError(
                f"Upload of {filename!r} failed: {_error_detail(response)}",
                status_code=response.status_code,
            )
        logger.info("Uploaded %s as %s", filename, object_name)
        return self.public_url(object_name)
