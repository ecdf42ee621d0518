"""Context block that grounds the assistant in the portfolio's content."""

from __future__ import annotations

from portfolio.store.models import Certificate, Project, SiteSettings

_DEFAULT_TITLE = "Web Developer"
_DEFAULT_ABOUT = "Passionate developer."
_DEFAULT_SKILLS = "Web Development"

_INSTRUCTIONS = (
    "Instructions:\n"
    "- Answer questions based on this information.\n"
    "- Be polite, professional, and concise.\n"
    "- If you don't know the answer, say you don't have that information.\n"
    "- Reply in the language the user writes in."
)


def build_context_block(
    settings: SiteSettings | None,
    projects: list[Project],
    certificates: list[Certificate],
) -> str:
    """Render settings, projects and certificates as a plain-text briefing."""
    title = (settings.site_title if settings else "") or _DEFAULT_TITLE
    about = (settings.about_description if settings else "") or _DEFAULT_ABOUT
    skills = ", ".join(settings.skills) if settings and settings.skills else _DEFAULT_SKILLS
    email = settings.contact_email if settings else ""

    project_lines = "\n".join(
        f"- {p.title} ({p.category}): {p.description}. Tech: {', '.join(p.tech_stack)}"
        for p in projects
    )
    certificate_lines = "\n".join(
        f"- {c.name} from {c.issuer} ({c.date})" for c in certificates
    )

    return (
        "You are a helpful AI assistant for a portfolio website.\n"
        "Here is the information about the portfolio owner:\n\n"
        f"Title: {title}\n"
        f"About: {about}\n"
        f"Skills: {skills}\n\n"
        f"Projects:\n{project_lines}\n\n"
        f"Certificates:\n{certificate_lines}\n\n"
        f"Contact Email: {email}\n\n"
        f"{_INSTRUCTIONS}"
    )
