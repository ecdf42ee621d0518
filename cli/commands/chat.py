"""Chat with the portfolio assistant from a terminal."""

from __future__ import annotations

import typer

from cli.context import run_with_site
from portfolio.chat.session import GREETING, ChatSession

chat_app = typer.Typer(help="Talk to the portfolio assistant.", no_args_is_help=True)

_EXIT_WORDS = {"exit", "quit", ":q"}


@chat_app.command("ask")
def chat_ask(question: str = typer.Argument(..., help="Your question.")) -> None:
    """Ask a single question (no history)."""

    async def _ask(site):
        return await site.chat.send_turn(question, [])

    typer.echo(run_with_site(_ask))


@chat_app.command("repl")
def chat_repl() -> None:
    """Interactive conversation; history lives until you exit."""

    async def _loop(site):
        session = ChatSession(site.chat)
        typer.echo(f"🤖 {GREETING}  (type 'exit' to leave)")
        while True:
            text = typer.prompt("you").strip()
            if text.lower() in _EXIT_WORDS:
                return len(session.history)
            if not text:
                continue
            reply = await session.ask(text)
            typer.echo(f"🤖 {reply}")

    turns = run_with_site(_loop)
    typer.echo(f"Bye! ({turns} messages this session)")
