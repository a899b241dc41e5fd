"""Screen widgets."""

from grid_menu.cli.widgets.option_grid import OptionGridRenderer

__all__ = ["OptionGridRenderer"]
