"""Maintenance-mode commands."""

from __future__ import annotations

import typer

from cli.context import run_with_site
from portfolio.admin.dashboard import AdminDashboard
from portfolio.errors import AuthError, StoreError

maintenance_app = typer.Typer(help="Inspect or toggle maintenance mode.", no_args_is_help=True)

_EMAIL = typer.Option(..., "--email", envvar="PORTFOLIO_ADMIN_EMAIL", help="Admin email.")
_PASSWORD = typer.Option(
    ...,
    "--password",
    envvar="PORTFOLIO_ADMIN_PASSWORD",
    prompt=True,
    hide_input=True,
    help="Admin password.",
)


@maintenance_app.command("status")
def maintenance_status() -> None:
    """Print whether visitors currently see the maintenance page."""

    async def _fetch(site):
        return site.content.backend.is_demo, await site.content.get_site_settings()

    is_demo, site_settings = run_with_site(_fetch)
    flag = site_settings.maintenance_mode if site_settings else False
    typer.echo(f"Maintenance mode: {'on' if flag else 'off'}")
    if is_demo:
        typer.echo("(demo mode: no store configured, the flag cannot be changed)")


def _set_maintenance(flag: bool, email: str, password: str) -> None:
    async def _apply(site):
        session = await site.auth.sign_in(email, password)
        try:
            dashboard = AdminDashboard(site.content.as_user(session.access_token))
            return await dashboard.update_settings({"maintenance_mode": flag})
        finally:
            await site.auth.sign_out(session.access_token)

    try:
        refreshed = run_with_site(_apply)
    except AuthError as exc:
        typer.echo(f"❌ Login failed: {exc.message}")
        raise typer.Exit(code=1)
    except StoreError as exc:
        typer.echo(f"❌ Failed to save: {exc.message}")
        raise typer.Exit(code=1)

    if refreshed is None:
        typer.echo("⚠️  Settings unavailable; nothing was changed.")
        return
    typer.echo(f"✅ Maintenance mode: {'on' if refreshed.maintenance_mode else 'off'}")


@maintenance_app.command("on")
def maintenance_on(email: str = _EMAIL, password: str = _PASSWORD) -> None:
    """Hide the public site behind the maintenance page."""
    _set_maintenance(True, email, password)


@maintenance_app.command("off")
def maintenance_off(email: str = _EMAIL, password: str = _PASSWORD) -> None:
    """Bring the public site back."""
    _set_maintenance(False, email, password)
