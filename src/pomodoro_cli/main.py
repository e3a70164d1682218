"""Main entry point for Pomodoro CLI."""

import typer
from pydantic import ValidationError

from pomodoro_cli import __version__
from pomodoro_cli.models.config_models import PomodoroConfig
from pomodoro_cli.services.pomodoro_service import PomodoroService
from pomodoro_cli.utils.exit_codes import ERROR_INVALID_ARGS
from pomodoro_cli.utils.ui.console import get_console

app = typer.Typer(
    name="pomodoro",
    help="A terminal Pomodoro timer with keyboard controls",
    add_completion=False,
)

console = get_console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold]Pomodoro CLI[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()


@app.command()
def start(
    work: int = typer.Option(25, "--work", "-w", help="Work session length in minutes"),
    short_break: int = typer.Option(
        5, "--short-break", "-s", help="Short break length in minutes"
    ),
    long_break: int = typer.Option(
        15, "--long-break", "-l", help="Long break length in minutes"
    ),
    cycles: int = typer.Option(
        4, "--cycles", "-c", help="Work sessions per cycle; the last one gets a long break"
    ),
    no_sound: bool = typer.Option(
        False, "--no-sound", "-n", help="Disable the completion tone and notification"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version information and exit",
    ),
) -> None:
    """Run work and break sessions until you quit.

    Keys: p pause, space toggle, r resume, s skip break, x reset, q/Esc quit.
    """
    try:
        config = PomodoroConfig(
            work_minutes=work,
            short_break_minutes=short_break,
            long_break_minutes=long_break,
            cycles=cycles,
            sound=not no_sound,
        )
    except ValidationError as e:
        for error in e.errors():
            field = error["loc"][0] if error["loc"] else "value"
            console.print(f"[red]Error:[/red] {field}: {error['msg']}")
        raise typer.Exit(ERROR_INVALID_ARGS) from e

    PomodoroService(config, console=console).run()


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
