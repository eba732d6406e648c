"""Main Typer application.

Entry point: ``switchyard`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import logging

import typer
from pydantic import BaseModel
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from switchyard.config import Settings
from switchyard.core.builder import ResourceLocatorBuilder
from switchyard.errors import HandlerNotFoundError
from switchyard.handlers.defaults import build_default_registry
from switchyard.models.messages import Message

console = Console()

app = typer.Typer(
    name="switchyard",
    help="Switchyard: locator building and tag-based message dispatch.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


@app.callback()
def _configure(
    log_level: str = typer.Option(None, "--log-level", help="Override SWITCHYARD_LOG_LEVEL."),
) -> None:
    level = (log_level or Settings().log_level).upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command(name="locator", help="Build and print a resource locator.")
def locator_cmd(
    host: str = typer.Argument(..., help="Host name."),
    scheme: str = typer.Option(None, "--scheme", "-s", help="Scheme; defaults to SWITCHYARD_DEFAULT_SCHEME."),
    port: int = typer.Option(None, "--port", "-p", help="Port; omitted unless positive."),
    path: str = typer.Option(None, "--path", help="Path segment."),
    query: str = typer.Option(None, "--query", "-q", help="Query segment."),
) -> None:
    """Print the rendered locator for the given components."""
    locator = (
        ResourceLocatorBuilder.create(scheme or Settings().default_scheme, host)
        .with_port(port)
        .with_path(path)
        .with_query(query)
        .build()
    )
    console.print(locator.render(), markup=False, highlight=False)


@app.command(name="send", help="Dispatch a message to the handler bound to TAG.")
def send_cmd(
    tag: str = typer.Argument(..., help="Handler tag, e.g. EMAIL or SMS (case-sensitive)."),
    body: str = typer.Option("", "--body", "-b", help="Message body."),
    subject: str = typer.Option("", "--subject", help="Message subject."),
) -> None:
    """Dispatch a message through the default registry and show the queued payload."""
    registry = build_default_registry(Settings())
    try:
        result = registry.dispatch(tag, Message(body=body, subject=subject))
    except HandlerNotFoundError as exc:
        console.print(f"[red]Dispatch failed:[/red] {exc}")
        raise typer.Exit(code=1)

    console.print(f"[bold green]Dispatched[/bold green] to [cyan]{tag}[/cyan]")
    if isinstance(result, BaseModel):
        console.print_json(result.model_dump_json(by_alias=True))


@app.command(name="handlers", help="List the tags bound in the default registry.")
def handlers_cmd() -> None:
    """Show every tag and the handler bound to it."""
    registry = build_default_registry(Settings())

    table = Table(title="Registered Handlers")
    table.add_column("Tag", style="cyan")
    table.add_column("Handler", style="green")
    for tag in registry.registered_tags:
        table.add_row(tag, registry.resolve(tag).handler_name)

    console.print(table)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
