"""Main Typer application.

Entry point: ``gitnotify`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from gitnotify.config import NotifySettings
from gitnotify.logging_setup import configure_logging
from gitnotify.models.github import User
from gitnotify.routing.recipients import RecipientResolver

app = typer.Typer(
    name="gitnotify",
    help="gitnotify: route source-control events to Slack channels and users.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

console = Console()


@app.callback()
def main() -> None:
    """Configure logging from GITNOTIFY_LOG_LEVEL."""
    configure_logging(NotifySettings().log_level)


@app.command(name="recipients", help="Show who would get a direct message for an event.")
def recipients_cmd(
    owner: str = typer.Option(..., help="Login of the item owner."),
    sender: Optional[str] = typer.Option(None, help="Login of the user who acted."),
    assignee: Optional[List[str]] = typer.Option(None, help="Assignee login (repeatable)."),
    bot_login: Optional[str] = typer.Option(
        None, help="Service account login. Defaults to GITNOTIFY_BOT_LOGIN."
    ),
) -> None:
    """Resolve and print the direct-message recipients in delivery order."""
    resolver = RecipientResolver(bot_login or NotifySettings().bot_login)
    resolved = resolver.resolve(
        User(login=owner),
        User(login=sender) if sender else None,
        [User(login=a) for a in assignee or []],
    )

    if not resolved:
        console.print("[dim]No direct recipients.[/dim]")
        return

    table = Table(title="Direct recipients")
    table.add_column("#", justify="right")
    table.add_column("Login", style="cyan")
    table.add_column("Role")
    for i, user in enumerate(resolved, start=1):
        role = "owner" if user.login == owner else "assignee"
        table.add_row(str(i), user.login, role)
    console.print(table)


@app.command(name="settings", help="Show the effective configuration.")
def settings_cmd() -> None:
    """Print settings resolved from the environment and .env file."""
    settings = NotifySettings()
    table = Table(title="gitnotify settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for name, value in settings.model_dump().items():
        if name == "slack_webhook_url" and value:
            value = "********"
        table.add_row(name, str(value))
    console.print(table)
