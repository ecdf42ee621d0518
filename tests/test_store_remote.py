"""Tests for the Supabase-backed RemoteBackend.

HTTP is served by ``httpx.MockTransport``; each test inspects the requests
the backend made and feeds back canned PostgREST / Storage responses.
"""

from __future__ import annotations

import json
from typing import Callable

import httpx
import pytest

from portfolio.errors import StoreError, UploadError
from portfolio.store.models import MessageDraft, ProjectDraft
from portfolio.store.remote import RemoteBackend

BASE = "https://abc.supabase.co"

PROJECT_ROW = {
    "id": 7,
    "created_at": "2026-03-01T10:00:00Z",
    "title": "Packet Sniffer",
    "description": "Captures traffic.",
    "tech_stack": ["Python", "Scapy"],
    "demo_url": "",
    "repo_url": "https://github.com/x/sniffer",
    "image_url": "",
    "category": "Security",
}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _backend(handler: Callable[[httpx.Request], httpx.Response]) -> tuple[RemoteBackend, list]:
    seen: list[httpx.Request] = []

    def _record(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    client = httpx.AsyncClient(transport=httpx.MockTransport(_record))
    return RemoteBackend(client, BASE, "anon-key"), seen


# ---------------------------------------------------------------------------
# Reads
# ---------------------------------------------------------------------------

class TestReads:
    async def test_list_projects_orders_newest_first(self) -> None:
        backend, seen = _backend(lambda r: httpx.Response(200, json=[PROJECT_ROW]))

        projects = await backend.list_projects()

        assert [p.title for p in projects] == ["Packet Sniffer"]
        assert projects[0].tech_stack == ["Python", "Scapy"]
        request = seen[0]
        assert request.method == "GET"
        assert request.url.path == "/rest/v1/projects"
        assert request.url.params["order"] == "created_at.desc"
        assert request.headers["apikey"] == "anon-key"
        assert request.headers["Authorization"] == "Bearer anon-key"

    async def test_get_site_settings_filters_singleton_row(self) -> None:
        row = {"id": 1, "maintenance_mode": True, "site_title": "Dev", "skills": ["Go"]}
        backend, seen = _backend(lambda r: httpx.Response(200, json=[row]))

        site_settings = await backend.get_site_settings()

        assert site_settings is not None
        assert site_settings.maintenance_mode is True
        assert site_settings.skills == ["Go"]
        assert seen[0].url.params["id"] == "eq.1"

    async def test_missing_settings_row_is_none(self) -> None:
        backend, _ = _backend(lambda r: httpx.Response(200, json=[]))
        assert await backend.get_site_settings() is None

    async def test_error_status_raises_store_error(self) -> None:
        backend, _ = _backend(
            lambda r: httpx.Response(401, json={"message": "JWT expired", "code": "PGRST301"})
        )

        with pytest.raises(StoreError) as excinfo:
            await backend.list_certificates()

        assert "JWT expired" in str(excinfo.value)
        assert excinfo.value.status_code == 401

    async def test_transport_error_raises_store_error(self) -> None:
        def _boom(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        backend, _ = _backend(_boom)
        with pytest.raises(StoreError):
            await backend.list_messages()


# ---------------------------------------------------------------------------
# Writes
# ---------------------------------------------------------------------------

class TestWrites:
    async def test_add_project_posts_row_and_returns_representation(self) -> None:
        backend, seen = _backend(lambda r: httpx.Response(201, json=[PROJECT_ROW]))

        created = await backend.add_project(
            ProjectDraft(title="Packet Sniffer", tech_stack=["Python", "Scapy"])
        )

        assert created is not None and created.id == 7
        request = seen[0]
        assert request.method == "POST"
        assert request.headers["Prefer"] == "return=representation"
        body = json.loads(request.content)
        assert body[0]["title"] == "Packet Sniffer"
        assert "id" not in body[0]

    async def test_update_targets_row_by_id(self) -> None:
        backend, seen = _backend(
            lambda r: httpx.Response(200, json=[{**PROJECT_ROW, "title": "Renamed"}])
        )

        updated = await backend.update_project(7, {"title": "Renamed"})

        assert updated is not None and updated.title == "Renamed"
        assert seen[0].method == "PATCH"
        assert seen[0].url.params["id"] == "eq.7"
        assert json.loads(seen[0].content) == {"title": "Renamed"}

    async def test_delete_targets_row_by_id(self) -> None:
        backend, seen = _backend(lambda r: httpx.Response(204))

        await backend.delete_message(3)

        assert seen[0].method == "DELETE"
        assert seen[0].url.path == "/rest/v1/messages"
        assert seen[0].url.params["id"] == "eq.3"

    async def test_send_message_inserts_only_visitor_fields(self) -> None:
        backend, seen = _backend(lambda r: httpx.Response(201))

        await backend.send_message(MessageDraft(name="Ana", email="ana@x.io", message="Hi"))

        assert json.loads(seen[0].content) == [
            {"name": "Ana", "email": "ana@x.io", "message": "Hi"}
        ]

    async def test_rejected_mutation_raises(self) -> None:
        backend, _ = _backend(
            lambda r: httpx.Response(403, json={"message": "new row violates row-level security"})
        )
        with pytest.raises(StoreError, match="row-level security"):
            await backend.delete_project(1)

    async def test_as_user_sends_access_token(self) -> None:
        backend, seen = _backend(lambda r: httpx.Response(204))

        await backend.as_user("user-jwt").delete_certificate(2)

        assert seen[0].headers["Authorization"] == "Bearer user-jwt"
        assert seen[0].headers["apikey"] == "anon-key"


# ---------------------------------------------------------------------------
# Uploads
# ---------------------------------------------------------------------------

class TestUpload:
    async def test_upload_returns_public_url_with_extension(self) -> None:
        backend, seen = _backend(lambda r: httpx.Response(200, json={"Key": "x"}))

        url = await backend.upload_image("photo.PNG", b"\x89PNG", "image/png")

        assert url is not None
        assert url.startswith(f"{BASE}/storage/v1/object/public/portfolio-images/")
        assert url.endswith(".PNG")
        request = seen[0]
        assert request.url.path.startswith("/storage/v1/object/portfolio-images/")
        assert request.content == b"\x89PNG"
        assert request.headers["Content-Type"] == "image/png"

    async def test_failed_bucket_write_raises_upload_error(self) -> None:
        backend, _ = _backend(
            lambda r: httpx.Response(400, json={"error": "Bucket not found"})
        )
        with pytest.raises(UploadError, match="Bucket not found"):
            await backend.upload_image("a.jpg", b"data")
