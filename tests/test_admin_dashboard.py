"""Tests for the admin forms and mutation flows."""

from __future__ import annotations

import pytest
from pydantic import TypeAdapter, ValidationError

from portfolio.admin import AdminDashboard, EntryKind
from portfolio.admin.forms import (
    CertificateForm,
    ContactForm,
    ContentForm,
    ProjectForm,
    SettingsUpdate,
)
from portfolio.errors import StoreError
from portfolio.store import ContentService
from portfolio.store.models import MessageDraft

_content_form = TypeAdapter(ContentForm)


# ---------------------------------------------------------------------------
# Forms
# ---------------------------------------------------------------------------

class TestForms:
    def test_kind_selects_variant(self) -> None:
        project = _content_form.validate_python({"kind": "project", "title": "P"})
        cert = _content_form.validate_python({"kind": "certificate", "name": "C"})

        assert isinstance(project, ProjectForm)
        assert isinstance(cert, CertificateForm)

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _content_form.validate_python({"kind": "message", "title": "P"})

    def test_tech_stack_csv_is_split(self) -> None:
        form = ProjectForm(title="P", tech_stack=" React , Tailwind,, ")
        assert form.tech_stack == ["React", "Tailwind"]

    def test_project_defaults(self) -> None:
        draft = ProjectForm(title="P").to_draft()
        assert draft.category == "Web App"
        assert draft.tech_stack == []

    def test_empty_title_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ProjectForm(title="")

    def test_settings_update_only_sends_given_fields(self) -> None:
        update = SettingsUpdate(maintenance_mode=True, skills="Python, Go")
        assert update.to_fields() == {"maintenance_mode": True, "skills": ["Python", "Go"]}

    def test_settings_update_drops_null_for_required_columns(self) -> None:
        update = SettingsUpdate(maintenance_mode=None, site_title=None, github_url=None)
        assert update.to_fields() == {"github_url": None}

    def test_contact_form_validates_email(self) -> None:
        with pytest.raises(ValidationError):
            ContactForm(name="A", email="not-an-email", message="hi")
        draft = ContactForm(name="A", email="a@example.com", message="hi").to_draft()
        assert draft.email == "a@example.com"


# ---------------------------------------------------------------------------
# Dashboard flows
# ---------------------------------------------------------------------------

class TestDashboard:
    async def test_load_fetches_everything(self, memory_backend) -> None:
        data = await AdminDashboard(ContentService(memory_backend)).load()

        assert data.projects == []
        assert data.settings is not None
        assert data.settings.site_title == "Security Engineer"
        assert data.to_dict()["messages"] == []

    async def test_create_then_update_returns_refetched_list(self, memory_backend) -> None:
        dashboard = AdminDashboard(ContentService(memory_backend))

        created = await dashboard.save(ProjectForm(title="Scanner", tech_stack="Python"))
        assert [p.title for p in created] == ["Scanner"]

        updated = await dashboard.save(ProjectForm(title="Scanner v2"), entry_id=created[0].id)
        assert [p.title for p in updated] == ["Scanner v2"]
        assert updated[0].tech_stack == []

    async def test_certificate_save(self, memory_backend) -> None:
        dashboard = AdminDashboard(ContentService(memory_backend))
        listed = await dashboard.save(CertificateForm(name="OSCP", issuer="OffSec"))
        assert [c.name for c in listed] == ["OSCP"]

    async def test_delete_returns_refetched_list(self, memory_backend) -> None:
        content = ContentService(memory_backend)
        dashboard = AdminDashboard(content)
        await content.send_message(MessageDraft("A", "a@x.io", "one"))
        message_id = (await content.get_messages())[0].id

        remaining = await dashboard.delete(EntryKind.MESSAGES, message_id)

        assert remaining == []

    async def test_failed_mutation_propagates_and_skips_refetch(
        self, memory_backend, store_error
    ) -> None:
        dashboard = AdminDashboard(ContentService(memory_backend))
        memory_backend.fail_with = store_error

        with pytest.raises(StoreError):
            await dashboard.save(ProjectForm(title="X"))

        # Only the failed insert reached the backend.
        assert len(memory_backend.tokens) == 1

    async def test_update_settings_refetches(self, memory_backend) -> None:
        dashboard = AdminDashboard(ContentService(memory_backend))

        result = await dashboard.update_settings({"maintenance_mode": True})

        assert result is not None and result.maintenance_mode is True

    async def test_hero_upload_sets_hero_image(self, memory_backend) -> None:
        dashboard = AdminDashboard(ContentService(memory_backend))

        url = await dashboard.upload_image("hero.png", b"\x89PNG", "image/png", target="hero")

        assert url == "https://cdn.test/0-hero.png"
        assert memory_backend.settings.hero_image_url == url

    async def test_plain_upload_leaves_settings_alone(self, memory_backend) -> None:
        dashboard = AdminDashboard(ContentService(memory_backend))

        await dashboard.upload_image("shot.png", b"", "image/png")

        assert memory_backend.settings.hero_image_url is None

    async def test_unknown_settings_field_rejected(self, memory_backend) -> None:
        dashboard = AdminDashboard(ContentService(memory_backend))

        with pytest.raises(ValueError, match="colour"):
            await dashboard.update_settings({"colour": "red"})

        assert memory_backend.tokens == []
