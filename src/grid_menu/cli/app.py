"""Typer CLI application for the interactive menu."""

import logging
from enum import Enum
from typing import Annotated, List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from grid_menu import __version__
from grid_menu.cli.menu import MenuController
from grid_menu.core.color import Color
from grid_menu.core.highlight import select_highlighter
from grid_menu.core.state import (
    DEFAULT_CELL_WIDTH,
    DEFAULT_COLUMNS,
    DEFAULT_PROMPT,
    MenuConfig,
)
from grid_menu.errors import MenuError

EXAMPLES = """\
Examples:

  grid-menu "Apple" "Banana" "Orange"

  grid-menu -p "Which OS?" "Linux" "macOS" "Windows"

  grid-menu -c 3 -s 30 "Item A" "Item B" "Item C" "Item D" "Item E"

  grid-menu -f "255 255 0" -b "50 50 50" "Setting 1" "Setting 2"

  grid-menu -c 4 txt md log json | xargs -I {} touch "new_file.{}"
"""


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


def setup_logging(level: LogLevel) -> None:
    """Send log records to stderr through rich so stdout stays pipe-clean."""
    logging.basicConfig(
        level=level.value,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def parse_color(value: str, option: str) -> Optional[Color]:
    """Parse an ``"R G B"`` option value. An empty value means no color."""
    if not value.strip():
        return None
    try:
        return Color.parse(value)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint=f"'{option}'") from e


def unescape(text: str) -> str:
    """Interpret backslash escapes such as ``\\n`` and ``\\t``."""
    return text.encode("latin-1", "backslashreplace").decode("unicode_escape")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"grid-menu {__version__}")
        raise typer.Exit()


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="grid-menu",
        help="Pick one option from an interactive grid menu.",
        add_completion=False,
        rich_markup_mode="rich",
    )
    console = Console(stderr=True)

    @app.command(
        context_settings={"help_option_names": ["-h", "--help"]},
        epilog=EXAMPLES,
    )
    def select(
        options: Annotated[Optional[List[str]], typer.Argument(
            help="Menu option labels, in display order", show_default=False)] = None,
        columns: Annotated[int, typer.Option(
            "--columns", "-c", min=1, envvar="GRID_MENU_COLUMNS",
            help="Number of columns to display options")] = DEFAULT_COLUMNS,
        cell_size: Annotated[int, typer.Option(
            "--cell-size", "-s", min=1, envvar="GRID_MENU_CELL_SIZE",
            help="Width of each option cell; longer labels are truncated")] = DEFAULT_CELL_WIDTH,
        fore_color: Annotated[str, typer.Option(
            "--fore-color", "-f", metavar="'R G B'", envvar="GRID_MENU_FORE_COLOR",
            help="Highlight foreground color")] = str(Color.WHITE),
        back_color: Annotated[str, typer.Option(
            "--back-color", "-b", metavar="'R G B'", envvar="GRID_MENU_BACK_COLOR",
            help="Highlight background color")] = str(Color.MEDIUM_BLUE),
        prompt: Annotated[str, typer.Option(
            "--prompt", "-p", envvar="GRID_MENU_PROMPT",
            help="Prompt shown above the options")] = DEFAULT_PROMPT,
        header_separator: Annotated[str, typer.Option(
            "--header-separator",
            help="Text between prompt and options (backslash escapes allowed)")] = "\\n",
        no_color: Annotated[bool, typer.Option(
            "--no-color", help="Mark the selection with > < only")] = False,
        log_level: Annotated[LogLevel, typer.Option(
            "--log-level", envvar="GRID_MENU_LOG_LEVEL", case_sensitive=False,
            help="Diagnostic log level")] = LogLevel.WARNING,
        version: Annotated[Optional[bool], typer.Option(
            "--version", "-V", callback=_version_callback, is_eager=True,
            help="Show version and exit")] = None,
    ) -> None:
        """
        Show an interactive menu and print the chosen option.

        Arrow keys move the selection, Enter or Space confirms. The menu is
        drawn on stderr; only the chosen label is written to stdout.
        """
        setup_logging(log_level)

        config = MenuConfig(
            columns=columns,
            cell_width=cell_size,
            prompt=prompt,
            foreground=parse_color(fore_color, "--fore-color"),
            background=parse_color(back_color, "--back-color"),
            header_separator=unescape(header_separator),
        )
        controller = MenuController(config, highlighter=select_highlighter(not no_color))

        try:
            _, ok = controller.run(options or [])
        except MenuError as e:
            console.print(f"[red]Error:[/] {e}", highlight=False)
            raise typer.Exit(1)

        raise typer.Exit(0 if ok else 1)

    return app
