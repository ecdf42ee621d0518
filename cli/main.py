"""Portfolio CLI: entry-point for operating the site from a terminal.

Usage:
    python cli/main.py --help

Command groups:
    serve        → run the HTTP API
    content      → show projects, certificates, settings
    maintenance  → inspect / toggle maintenance mode
    chat         → talk to the portfolio assistant
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from portfolio.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import typer

from cli.commands.chat import chat_app
from cli.commands.content import content_app
from cli.commands.maintenance import maintenance_app
from portfolio.config import settings
from portfolio.logging_setup import configure_logging

app = typer.Typer(
    name="portfolio",
    help="Portfolio backend CLI.",
    no_args_is_help=True,
)
app.add_typer(content_app, name="content")
app.add_typer(maintenance_app, name="maintenance")
app.add_typer(chat_app, name="chat")


@app.callback()
def main(
    log_level: str = typer.Option(None, "--log-level", help="Override LOG_LEVEL."),
) -> None:
    configure_logging(log_level)


@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1", help="Bind address."),
    port: int = typer.Option(8000, help="Port."),
    reload: bool = typer.Option(False, help="Reload on code changes."),
) -> None:
    """Run the API with uvicorn."""
    import uvicorn

    mode = "Supabase" if settings.store_configured else "demo (sample data)"
    typer.echo(f"[serve] Store: {mode}")
    typer.echo(f"[serve] Chat : {'enabled' if settings.gemini_api_key else 'not configured'}")
    uvicorn.run("portfolio.api.app:app", host=host, port=port, reload=reload)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
