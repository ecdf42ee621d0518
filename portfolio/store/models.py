"""Dataclass models representing store rows.

These are plain Python objects, not ORM models.  The backends parse rows
returned by the store into these types with ``from_row``; unknown columns
(``created_at`` on projects, for instance) are ignored.

``*Draft`` types are the field sets accepted for creation (no ``id``).
Updates take a plain ``dict`` of the fields to change.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


def _as_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    return [str(item) for item in value]


@dataclass
class Project:
    id: int
    title: str
    description: str = ""
    tech_stack: list[str] = field(default_factory=list)
    demo_url: str = ""
    repo_url: str = ""
    image_url: str = ""
    category: str = ""

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> Project:
        return cls(
            id=row["id"],
            title=row.get("title") or "",
            description=row.get("description") or "",
            tech_stack=_as_list(row.get("tech_stack")),
            demo_url=row.get("demo_url") or "",
            repo_url=row.get("repo_url") or "",
            image_url=row.get("image_url") or "",
            category=row.get("category") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class ProjectDraft:
    title: str
    description: str = ""
    tech_stack: list[str] = field(default_factory=list)
    demo_url: str = ""
    repo_url: str = ""
    image_url: str = ""
    category: str = "Web App"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class Certificate:
    id: int
    name: str
    issuer: str = ""
    date: str = ""
    credential_url: str = ""
    image_url: str = ""

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> Certificate:
        return cls(
            id=row["id"],
            name=row.get("name") or "",
            issuer=row.get("issuer") or "",
            date=str(row.get("date") or ""),
            credential_url=row.get("credential_url") or "",
            image_url=row.get("image_url") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class CertificateDraft:
    name: str
    issuer: str = ""
    date: str = ""
    credential_url: str = ""
    image_url: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class SiteSettings:
    """The singleton ``site_settings`` row (always ``id == 1``)."""

    id: int = 1
    maintenance_mode: bool = False
    site_title: str = ""
    about_description: str = ""
    skills: list[str] = field(default_factory=list)
    contact_email: str = ""
    contact_phone: str = ""
    contact_address: str = ""
    hero_image_url: str | None = None
    github_url: str | None = None
    linkedin_url: str | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> SiteSettings:
        return cls(
            id=row.get("id", 1),
            maintenance_mode=bool(row.get("maintenance_mode")),
            site_title=row.get("site_title") or "",
            about_description=row.get("about_description") or "",
            skills=_as_list(row.get("skills")),
            contact_email=row.get("contact_email") or "",
            contact_phone=row.get("contact_phone") or "",
            contact_address=row.get("contact_address") or "",
            hero_image_url=row.get("hero_image_url"),
            github_url=row.get("github_url"),
            linkedin_url=row.get("linkedin_url"),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


# Columns an admin may change on the settings row.
SETTINGS_FIELDS = frozenset(
    {
        "maintenance_mode",
        "site_title",
        "about_description",
        "skills",
        "contact_email",
        "contact_phone",
        "contact_address",
        "hero_image_url",
        "github_url",
        "linkedin_url",
    }
)


@dataclass
class Message:
    id: int
    created_at: str
    name: str
    email: str
    message: str
    is_read: bool = False

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> Message:
        return cls(
            id=row["id"],
            created_at=str(row.get("created_at") or ""),
            name=row.get("name") or "",
            email=row.get("email") or "",
            message=row.get("message") or "",
            is_read=bool(row.get("is_read")),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class MessageDraft:
    """A visitor's contact-form submission; ``id``, ``created_at`` and ``is_read`` are server-assigned."""

    name: str
    email: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
