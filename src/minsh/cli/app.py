"""CLI entry points for minsh."""

from __future__ import annotations

from typing import Optional

import typer
from pydantic import ValidationError

from minsh.cli.render import LineReader, create_line_reader
from minsh.config import Settings, get_settings
from minsh.logging_utils import configure_logging
from minsh.shell import Shell

app = typer.Typer(
    name="minsh",
    help="A small interactive command interpreter.",
    add_completion=False,
)


def _load_settings(log_level: Optional[str]) -> Settings:
    try:
        settings = get_settings(log_level=log_level)
    except ValidationError as exc:
        fields = ", ".join(".".join(str(part) for part in error["loc"]) for error in exc.errors())
        typer.echo(f"Invalid configuration: {fields}", err=True)
        raise typer.Exit(1) from exc
    configure_logging(level=settings.log_level, profile=settings.log_profile)
    return settings


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override MINSH_LOG_LEVEL."),
) -> None:
    ctx.obj = _load_settings(log_level)
    if ctx.invoked_subcommand is None:
        interactive(ctx.obj)


def interactive(settings: Settings) -> None:
    """Start the read-eval-print loop."""
    shell = Shell(settings, create_line_reader(settings.history_file))
    shell.run()


@app.command()
def run(ctx: typer.Context, line: str = typer.Argument(..., help="Command line to execute.")) -> None:
    """Execute a single command line and exit."""
    settings: Settings = ctx.obj
    shell = Shell(settings, LineReader(interactive=False))
    shell.run_line(line)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
