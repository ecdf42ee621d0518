"""Read-only content commands."""

from __future__ import annotations

from typing import Optional

import typer

from cli.context import run_with_site
from cli.rendering import render_certificates, render_projects, render_settings

content_app = typer.Typer(help="Show the content the public site renders.", no_args_is_help=True)


@content_app.command("projects")
def content_projects(
    category: Optional[str] = typer.Option(None, "--category", help="Only this category."),
) -> None:
    """List projects, newest first."""

    async def _fetch(site):
        return await site.content.get_projects()

    projects = run_with_site(_fetch)
    if category:
        projects = [p for p in projects if p.category == category]
    typer.echo(render_projects(projects))


@content_app.command("certificates")
def content_certificates() -> None:
    """List certificates, newest first."""

    async def _fetch(site):
        return await site.content.get_certificates()

    typer.echo(render_certificates(run_with_site(_fetch)))


@content_app.command("settings")
def content_settings() -> None:
    """Show the site settings row."""

    async def _fetch(site):
        return await site.content.get_site_settings()

    typer.echo(render_settings(run_with_site(_fetch)))
