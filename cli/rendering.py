"""Plain-text renderings of portfolio content for the terminal."""

from __future__ import annotations

from typing import List

from portfolio.store.models import Certificate, Project, SiteSettings


def render_projects(projects: List[Project]) -> str:
    if not projects:
        return "No projects found."
    lines = []
    for p in projects:
        lines.append(f"  [{p.id}] {p.title}  ({p.category or 'Uncategorised'})")
        if p.tech_stack:
            lines.append(f"      Tech: {', '.join(p.tech_stack)}")
    return "\n".join(lines)


def render_certificates(certificates: List[Certificate]) -> str:
    if not certificates:
        return "No certificates found."
    return "\n".join(
        f"  [{c.id}] {c.name} from {c.issuer} ({c.date})" for c in certificates
    )


def render_settings(site_settings: SiteSettings | None) -> str:
    if site_settings is None:
        return "No site settings (demo mode or store unavailable)."
    rows = [
        ("Title", site_settings.site_title),
        ("Maintenance", "on" if site_settings.maintenance_mode else "off"),
        ("Skills", ", ".join(site_settings.skills)),
        ("Email", site_settings.contact_email),
        ("Phone", site_settings.contact_phone),
        ("Address", site_settings.contact_address),
        ("GitHub", site_settings.github_url or ""),
        ("LinkedIn", site_settings.linkedin_url or ""),
    ]
    width = max(len(label) for label, _ in rows)
    return "\n".join(f"  {label:<{width}} : {value}" for label, value in rows)
