"""Typer CLI application."""

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from mim import __version__
from mim.core.config import EditorConfig
from mim.core.constants import MESSAGE_TIMEOUT, QUIT_TIMES, TAB_STOP

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class LogLevel(str, Enum):
    """Accepted values for --log-level."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


def configure_logging(log_file: Optional[Path], level: str) -> None:
    """Send package logs to ``log_file``; without one they are discarded.

    The terminal is in raw mode while the editor runs, so logs never go
    to stdout or stderr. Raises OSError when the file cannot be opened.
    """
    if log_file is None:
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger = logging.getLogger("mim")
    logger.addHandler(handler)
    logger.setLevel(level.upper())


def _version_callback(value: bool) -> None:
    if value:
        Console().print(f"mim {__version__}")
        raise typer.Exit()


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="mim",
        help="A minimal full-screen terminal text editor.",
        add_completion=False,
        rich_markup_mode="rich",
    )
    console = Console(stderr=True)

    @app.command()
    def edit(
        path: Annotated[Optional[Path], typer.Argument(help="File to open (created on first save)")] = None,
        tab_stop: Annotated[int, typer.Option("--tab-stop", "-t", min=1, envvar="MIM_TAB_STOP", help="Tab width in columns")] = TAB_STOP,
        quit_times: Annotated[int, typer.Option("--quit-times", min=0, envvar="MIM_QUIT_TIMES", help="Extra Ctrl-Q presses needed to quit with unsaved changes")] = QUIT_TIMES,
        message_timeout: Annotated[float, typer.Option("--message-timeout", min=0.0, envvar="MIM_MESSAGE_TIMEOUT", help="Seconds a status message stays visible")] = MESSAGE_TIMEOUT,
        log_file: Annotated[Optional[Path], typer.Option("--log-file", envvar="MIM_LOG_FILE", help="Write debug log to this file")] = None,
        log_level: Annotated[LogLevel, typer.Option("--log-level", envvar="MIM_LOG_LEVEL", case_sensitive=False, help="Log level for --log-file")] = LogLevel.INFO,
        version: Annotated[bool, typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version and exit")] = False,
    ) -> None:
        """Edit a text file in the terminal."""
        from mim.cli.core.terminal import TerminalError
        from mim.cli.studio.editor import EditorApp

        try:
            configure_logging(log_file, log_level.value)
        except OSError as e:
            console.print(f"[red]Can't open log file {escape(str(log_file))}: {escape(str(e.strerror or e))}[/]")
            raise typer.Exit(1)
        config = EditorConfig(
            tab_stop=tab_stop,
            quit_times=quit_times,
            message_timeout=message_timeout,
        )

        try:
            editor = EditorApp(path, config)
        except OSError as e:
            console.print(f"[red]Can't open {escape(str(path))}: {escape(str(e.strerror or e))}[/]")
            raise typer.Exit(1)

        try:
            editor.run()
        except TerminalError as e:
            logging.getLogger(__name__).error("editor aborted: %s", e)
            console.print(f"[red]{escape(str(e))}[/]")
            raise typer.Exit(1)

    return app
