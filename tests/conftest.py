"""Shared fixtures.

``InMemoryBackend`` is a :class:`StorageBackend` that keeps rows in dicts so
read-after-write behaviour can be exercised without a store.  Setting
``fail_with`` makes every call raise that error instead.
"""

from __future__ import annotations

import itertools
import time
from dataclasses import replace
from typing import Any

import pytest
from fastapi.testclient import TestClient

from portfolio.api.app import create_app
from portfolio.api.deps import SiteContext
from portfolio.auth.provider import AuthProvider, Session
from portfolio.chat.adapter import ChatAdapter
from portfolio.config import Settings
from portfolio.errors import AuthError, StoreError
from portfolio.store.base import StorageBackend
from portfolio.store.content import ContentService
from portfolio.store.models import (
    Certificate,
    CertificateDraft,
    Message,
    MessageDraft,
    Project,
    ProjectDraft,
    SiteSettings,
)


class InMemoryBackend(StorageBackend):
    def __init__(self) -> None:
        self._ids = itertools.count(100)
        self._clock = itertools.count(1)
        self.projects: dict[int, tuple[int, Project]] = {}
        self.certificates: dict[int, tuple[int, Certificate]] = {}
        self.messages: dict[int, tuple[int, Message]] = {}
        self.settings: SiteSettings | None = SiteSettings(site_title="Security Engineer")
        self.uploads: list[str] = []
        self.tokens: list[str | None] = []
        self.fail_with: Exception | None = None
        self._token: str | None = None

    @property
    def name(self) -> str:
        return "memory"

    def as_user(self, access_token: str) -> InMemoryBackend:
        self._token = access_token
        return self

    def _check(self) -> None:
        self.tokens.append(self._token)
        if self.fail_with is not None:
            raise self.fail_with

    @staticmethod
    def _newest_first(table: dict[int, tuple[int, Any]]) -> list[Any]:
        return [row for _, row in sorted(table.values(), key=lambda t: t[0], reverse=True)]

    async def list_projects(self) -> list[Project]:
        self._check()
        return self._newest_first(self.projects)

    async def add_project(self, draft: ProjectDraft) -> Project | None:
        self._check()
        project = Project(id=next(self._ids), **draft.to_dict())
        self.projects[project.id] = (next(self._clock), project)
        return project

    async def update_project(self, project_id: int, fields: dict[str, Any]) -> Project | None:
        self._check()
        if project_id not in self.projects:
            return None
        stamp, project = self.projects[project_id]
        updated = replace(project, **fields)
        self.projects[project_id] = (stamp, updated)
        return updated

    async def delete_project(self, project_id: int) -> None:
        self._check()
        self.projects.pop(project_id, None)

    async def list_certificates(self) -> list[Certificate]:
        self._check()
        return self._newest_first(self.certificates)

    async def add_certificate(self, draft: CertificateDraft) -> Certificate | None:
        self._check()
        cert = Certificate(id=next(self._ids), **draft.to_dict())
        self.certificates[cert.id] = (next(self._clock), cert)
        return cert

    async def update_certificate(
        self, certificate_id: int, fields: dict[str, Any]
    ) -> Certificate | None:
        self._check()
        if certificate_id not in self.certificates:
            return None
        stamp, cert = self.certificates[certificate_id]
        updated = replace(cert, **fields)
        self.certificates[certificate_id] = (stamp, updated)
        return updated

    async def delete_certificate(self, certificate_id: int) -> None:
        self._check()
        self.certificates.pop(certificate_id, None)

    async def get_site_settings(self) -> SiteSettings | None:
        self._check()
        return replace(self.settings) if self.settings else None

    async def update_site_settings(self, fields: dict[str, Any]) -> SiteSettings | None:
        self._check()
        if self.settings is None:
            return None
        self.settings = replace(self.settings, **fields)
        return replace(self.settings)

    async def list_messages(self) -> list[Message]:
        self._check()
        return self._newest_first(self.messages)

    async def send_message(self, draft: MessageDraft) -> None:
        self._check()
        stamp = next(self._clock)
        msg = Message(
            id=next(self._ids),
            created_at=f"2026-01-01T00:00:{stamp:02d}Z",
            **draft.to_dict(),
        )
        self.messages[msg.id] = (stamp, msg)

    async def delete_message(self, message_id: int) -> None:
        self._check()
        self.messages.pop(message_id, None)

    async def upload_image(
        self,
        filename: str,
        content: bytes,
        content_type: str | None = None,
    ) -> str | None:
        self._check()
        url = f"https://cdn.test/{len(self.uploads)}-{filename}"
        self.uploads.append(url)
        return url


@pytest.fixture()
def memory_backend() -> InMemoryBackend:
    return InMemoryBackend()


@pytest.fixture()
def store_error() -> StoreError:
    return StoreError("permission denied for table", status_code=401)


@pytest.fixture()
def demo_config() -> Settings:
    """Settings with no store and no chat credentials."""
    return Settings(supabase_url="", supabase_anon_key="", gemini_api_key="")


@pytest.fixture()
def remote_config() -> Settings:
    return Settings(
        supabase_url="https://abc.supabase.co",
        supabase_anon_key="anon-key",
        gemini_api_key="gemini-key",
    )


class FakeAuthProvider(AuthProvider):
    """Accepts ``admin@x.io`` / ``secret`` and knows the tokens it issued."""

    EMAIL = "admin@x.io"
    PASSWORD = "secret"

    def __init__(self) -> None:
        self.sessions: dict[str, Session] = {}
        self.signed_out: list[str] = []

    def issue(self) -> str:
        token = f"tok-{len(self.sessions) + 1}"
        self.sessions[token] = Session(
            access_token=token, email=self.EMAIL, expires_at=int(time.time()) + 3600
        )
        return token

    async def sign_in(self, email: str, password: str) -> Session:
        if (email, password) != (self.EMAIL, self.PASSWORD):
            raise AuthError("Invalid login credentials")
        return self.sessions[self.issue()]

    async def get_session(self, access_token: str) -> Session | None:
        return self.sessions.get(access_token)

    async def sign_out(self, access_token: str) -> None:
        self.signed_out.append(access_token)
        self.sessions.pop(access_token, None)


@pytest.fixture()
def fake_auth() -> FakeAuthProvider:
    return FakeAuthProvider()


@pytest.fixture()
def client(memory_backend, fake_auth, demo_config):
    """TestClient whose site context runs on the in-memory backend and fake auth.

    The lifespan builds its own context on enter; it is replaced straight
    away so no request reaches a real store.
    """
    content = ContentService(memory_backend)
    site = SiteContext(
        config=demo_config,
        content=content,
        auth=fake_auth,
        chat=ChatAdapter(content, config=demo_config),
    )
    with TestClient(create_app(demo_config), raise_server_exceptions=True) as c:
        c.app.state.site = site
        yield c
