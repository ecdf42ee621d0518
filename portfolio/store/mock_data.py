"""Built-in sample content shown when the store is unconfigured or unreachable."""

from __future__ import annotations

import copy

from portfolio.store.models import Certificate, Project

_MOCK_PROJECTS: tuple[Project, ...] = (
    Project(
        id=1,
        title="E-Commerce Dashboard",
        description=(
            "A comprehensive dashboard for managing online stores, featuring "
            "real-time analytics and inventory management."
        ),
        tech_stack=["React", "TypeScript", "Tailwind", "Supabase"],
        demo_url="#",
        repo_url="#",
        image_url="https://images.unsplash.com/photo-1460925895917-afdab827c52f?auto=format&fit=crop&w=800&q=80",
        category="Web App",
    ),
    Project(
        id=2,
        title="Network Security Scanner",
        description=(
            "A python-based tool for scanning network vulnerabilities and "
            "generating detailed reports."
        ),
        tech_stack=["Python", "Flask", "Docker"],
        demo_url="#",
        repo_url="#",
        image_url="https://images.unsplash.com/photo-1550751827-4bd374c3f58b?auto=format&fit=crop&w=800&q=80",
        category="Security",
    ),
    Project(
        id=3,
        title="Portfolio Website",
        description="Modern personal portfolio with dark theme and smooth animations.",
        tech_stack=["React", "GSAP", "Tailwind"],
        demo_url="#",
        repo_url="#",
        image_url="https://images.unsplash.com/photo-1507238691740-187a5b1d37b8?auto=format&fit=crop&w=800&q=80",
        category="Web App",
    ),
)

_MOCK_CERTIFICATES: tuple[Certificate, ...] = (
    Certificate(
        id=1,
        name="Certified Ethical Hacker (CEH)",
        issuer="EC-Council",
        date="2024",
        credential_url="#",
        image_url="https://images.unsplash.com/photo-1550751827-4bd374c3f58b?auto=format&fit=crop&w=800&q=80",
    ),
    Certificate(
        id=2,
        name="Google Cybersecurity Professional",
        issuer="Google",
        date="2023",
        credential_url="#",
        image_url="https://images.unsplash.com/photo-1573164713988-8665fc963095?auto=format&fit=crop&w=800&q=80",
    ),
    Certificate(
        id=3,
        name="Meta Frontend Developer",
        issuer="Meta",
        date="2023",
        credential_url="#",
        image_url="https://images.unsplash.com/photo-1517694712202-14dd9538aa97?auto=format&fit=crop&w=800&q=80",
    ),
)


def mock_projects() -> list[Project]:
    """Return a fresh copy of the sample projects (callers may mutate it)."""
    return copy.deepcopy(list(_MOCK_PROJECTS))


def mock_certificates() -> list[Certificate]:
    """Return a fresh copy of the sample certificates."""
    return copy.deepcopy(list(_MOCK_CERTIFICATES))
