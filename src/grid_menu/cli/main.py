"""Main CLI entry point."""

import sys
from typing import Optional, Sequence

from grid_menu.cli.app import create_app

# Exit status the command-line parser uses for usage errors
USAGE_ERROR = 2


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the menu CLI and return the process exit code.

    0 when an option was chosen, 1 for usage errors, missing options, or
    when the menu closed without a selection.
    """
    app = create_app()
    try:
        app(
            args=list(argv) if argv is not None else None,
            prog_name="grid-menu",
        )
    except SystemExit as e:
        if e.code is None:
            return 0
        if not isinstance(e.code, int):
            return 1
        return 1 if e.code == USAGE_ERROR else e.code
    return 0


if __name__ == "__main__":
    sys.exit(main())
