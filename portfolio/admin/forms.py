"""Admin form payloads.

Project and certificate forms are two variants of one discriminated union
keyed by ``kind``, so a payload is never ambiguous about which entity it
describes::

    {"kind": "project", "title": "...", "tech_stack": "React, Tailwind"}
    {"kind": "certificate", "name": "...", "issuer": "..."}
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, EmailStr, Field, field_validator

from portfolio.store.models import CertificateDraft, MessageDraft, ProjectDraft


def _split_csv(value: Any) -> Any:
    """Accept either a list or a comma-separated string."""
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    return value


class EntryKind(str, Enum):
    PROJECTS = "projects"
    CERTIFICATES = "certificates"
    MESSAGES = "messages"


class ProjectForm(BaseModel):
    kind: Literal["project"] = "project"
    title: str = Field(min_length=1)
    description: str = ""
    tech_stack: list[str] = Field(default_factory=list)
    demo_url: str = ""
    repo_url: str = ""
    image_url: str = ""
    category: str = "Web App"

    @field_validator("tech_stack", mode="before")
    @classmethod
    def split_tech_stack(cls, value: Any) -> Any:
        return _split_csv(value)

    def to_draft(self) -> ProjectDraft:
        return ProjectDraft(**self.model_dump(exclude={"kind"}))


class CertificateForm(BaseModel):
    kind: Literal["certificate"] = "certificate"
    name: str = Field(min_length=1)
    issuer: str = ""
    date: str = ""
    credential_url: str = ""
    image_url: str = ""

    def to_draft(self) -> CertificateDraft:
        return CertificateDraft(**self.model_dump(exclude={"kind"}))


ContentForm = Annotated[Union[ProjectForm, CertificateForm], Field(discriminator="kind")]


# Settings columns that may be cleared with null.
_NULLABLE_SETTINGS = frozenset({"hero_image_url", "github_url", "linkedin_url"})


class SettingsUpdate(BaseModel):
    """Partial update of the settings row; only fields sent are written."""

    maintenance_mode: Optional[bool] = None
    site_title: Optional[str] = None
    about_description: Optional[str] = None
    skills: Optional[list[str]] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    contact_address: Optional[str] = None
    hero_image_url: Optional[str] = None
    github_url: Optional[str] = None
    linkedin_url: Optional[str] = None

    @field_validator("skills", mode="before")
    @classmethod
    def split_skills(cls, value: Any) -> Any:
        return _split_csv(value)

    def to_fields(self) -> dict[str, Any]:
        """Fields the caller sent; null is only kept for the clearable URL columns."""
        fields = self.model_dump(exclude_unset=True)
        return {
            key: value
            for key, value in fields.items()
            if value is not None or key in _NULLABLE_SETTINGS
        }


class ContactForm(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr
    message: str = Field(min_length=1)

    def to_draft(self) -> MessageDraft:
        return MessageDraft(name=self.name, email=str(self.email), message=self.message)
