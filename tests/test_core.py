"""Tests for core data structures (no terminal needed)."""

import pytest

from grid_menu.core.color import Color
from grid_menu.core.grid import GridLayout, calculate_grid, grid_rows
from grid_menu.core.highlight import (
    Highlighter,
    PlainHighlighter,
    TrueColorHighlighter,
    select_highlighter,
)
from grid_menu.core.keys import Key, KeyEvent
from grid_menu.core.state import MenuConfig, MenuState, Outcome
from grid_menu.errors import NoOptionsError


class TestColor:
    """Tests for Color."""

    def test_parse(self) -> None:
        assert Color.parse("255 165 0") == Color(255, 165, 0)
        assert Color.parse("  1   2 3 ") == Color(1, 2, 3)

    def test_parse_rejects_wrong_count(self) -> None:
        with pytest.raises(ValueError):
            Color.parse("1 2")
        with pytest.raises(ValueError):
            Color.parse("1 2 3 4")

    def test_parse_rejects_non_integers(self) -> None:
        with pytest.raises(ValueError):
            Color.parse("red green blue")

    def test_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            Color(256, 0, 0)
        with pytest.raises(ValueError):
            Color(0, -1, 0)

    def test_to_sgr(self) -> None:
        color = Color(255, 0, 10)
        assert color.to_sgr_fg() == "38;2;255;0;10"
        assert color.to_sgr_bg() == "48;2;255;0;10"

    def test_str_round_trips_through_parse(self) -> None:
        assert Color.parse(str(Color.MEDIUM_BLUE)) == Color.MEDIUM_BLUE

    def test_defaults(self) -> None:
        assert Color.WHITE == Color(255, 255, 255)
        assert Color.MEDIUM_BLUE == Color(0, 100, 200)


class TestHighlighter:
    """Tests for highlighter selection and output."""

    def test_true_color_sequences(self) -> None:
        hl = TrueColorHighlighter()
        assert hl.foreground(Color(1, 2, 3)) == "\x1b[38;2;1;2;3m"
        assert hl.background(Color(4, 5, 6)) == "\x1b[48;2;4;5;6m"
        assert hl.reset() == "\x1b[0m"

    def test_plain_emits_nothing(self) -> None:
        hl = PlainHighlighter()
        assert hl.foreground(Color.WHITE) == ""
        assert hl.background(Color.WHITE) == ""
        assert hl.reset() == ""

    def test_both_satisfy_protocol(self) -> None:
        assert isinstance(TrueColorHighlighter(), Highlighter)
        assert isinstance(PlainHighlighter(), Highlighter)

    def test_select_default_is_true_color(self) -> None:
        assert isinstance(select_highlighter(env={}), TrueColorHighlighter)

    def test_select_disabled(self) -> None:
        assert isinstance(select_highlighter(False, env={}), PlainHighlighter)

    def test_select_respects_no_color(self) -> None:
        assert isinstance(select_highlighter(env={"NO_COLOR": "1"}), PlainHighlighter)
        assert isinstance(select_highlighter(env={"NO_COLOR": ""}), TrueColorHighlighter)


class TestGridRows:
    """Tests for row count arithmetic."""

    @pytest.mark.parametrize("count,columns,rows", [
        (1, 1, 1),
        (2, 1, 2),
        (5, 2, 3),
        (6, 2, 3),
        (7, 3, 3),
        (3, 5, 1),
    ])
    def test_ceiling(self, count: int, columns: int, rows: int) -> None:
        assert grid_rows(count, columns) == rows

    def test_matches_ceiling_everywhere(self) -> None:
        for count in range(1, 40):
            for columns in range(1, 10):
                rows = grid_rows(count, columns)
                assert (rows - 1) * columns < count <= rows * columns

    def test_invalid(self) -> None:
        with pytest.raises(ValueError):
            grid_rows(0, 2)
        with pytest.raises(ValueError):
            grid_rows(3, 0)


class TestGridLayout:
    """Tests for grid layout and navigation."""

    def test_column_major_indices(self) -> None:
        layout = calculate_grid(5, 2)
        assert layout.rows == 3
        assert [layout.index_at(r, 0) for r in range(3)] == [0, 1, 2]
        assert [layout.index_at(r, 1) for r in range(3)] == [3, 4, None]

    def test_cells_cover_every_option_once(self) -> None:
        layout = calculate_grid(7, 3)
        indices = [
            layout.index_at(row, col)
            for row in range(layout.rows)
            for col in range(layout.columns)
            if layout.index_at(row, col) is not None
        ]
        assert sorted(indices) == list(range(7))

    def test_down_and_up_wrap_whole_list(self) -> None:
        layout = calculate_grid(3, 2)
        assert layout.navigate(2, Key.DOWN) == 0
        assert layout.navigate(0, Key.UP) == 2

    def test_k_downs(self) -> None:
        for n in range(1, 8):
            layout = calculate_grid(n, 2)
            for start in range(n):
                selected = start
                for k in range(1, 2 * n + 2):
                    selected = layout.navigate(selected, Key.DOWN)
                    assert selected == (start + k) % n

    def test_k_ups(self) -> None:
        for n in range(1, 8):
            layout = calculate_grid(n, 3)
            for start in range(n):
                selected = start
                for k in range(1, 2 * n + 2):
                    selected = layout.navigate(selected, Key.UP)
                    assert selected == (start - k) % n

    def test_right_jumps_a_column(self) -> None:
        layout = calculate_grid(5, 2)
        assert layout.navigate(0, Key.RIGHT) == 3
        assert layout.navigate(3, Key.RIGHT) == 1
        assert layout.navigate(0, Key.LEFT) == 2

    def test_right_then_left_is_identity(self) -> None:
        for n in range(1, 12):
            for columns in range(1, 5):
                layout = calculate_grid(n, columns)
                for i in range(n):
                    assert layout.navigate(layout.navigate(i, Key.RIGHT), Key.LEFT) == i
                    assert layout.navigate(layout.navigate(i, Key.LEFT), Key.RIGHT) == i

    def test_non_navigation_keys_keep_index(self) -> None:
        layout = calculate_grid(4, 2)
        assert layout.navigate(1, Key.CONFIRM) == 1
        assert layout.navigate(1, Key.UNRECOGNIZED) == 1

    def test_single_option(self) -> None:
        layout = calculate_grid(1, 4)
        for key in (Key.UP, Key.DOWN, Key.LEFT, Key.RIGHT):
            assert layout.navigate(0, key) == 0

    def test_out_of_range_selection(self) -> None:
        layout = GridLayout(count=3, columns=1, rows=3)
        with pytest.raises(ValueError):
            layout.navigate(3, Key.DOWN)


class TestKeyEvent:
    def test_navigation_flag(self) -> None:
        assert KeyEvent(Key.LEFT).is_navigation
        assert not KeyEvent(Key.CONFIRM).is_navigation
        assert not KeyEvent(Key.UNRECOGNIZED, raw=b"x").is_navigation


class TestMenuConfig:
    """Tests for MenuConfig defaults and validation."""

    def test_defaults(self) -> None:
        config = MenuConfig()
        assert config.columns == 2
        assert config.cell_width == 20
        assert config.prompt == "Select an option:"
        assert config.foreground == Color.WHITE
        assert config.background == Color.MEDIUM_BLUE
        assert config.header_separator == "\n"

    def test_frozen(self) -> None:
        config = MenuConfig()
        with pytest.raises(AttributeError):
            config.columns = 3  # type: ignore[misc]

    @pytest.mark.parametrize("kwargs", [
        {"columns": 0},
        {"cell_width": 0},
        {"column_spacing": -1},
        {"poll_timeout": 0},
    ])
    def test_invalid(self, kwargs: dict) -> None:
        with pytest.raises(ValueError):
            MenuConfig(**kwargs)


class TestMenuState:
    """Tests for MenuState."""

    def test_start(self) -> None:
        state = MenuState.start(["a", "b"])
        assert state.options == ("a", "b")
        assert state.selected == 0
        assert state.closed is False
        assert state.outcome == Outcome.NONE
        assert state.current == "a"

    def test_empty_is_rejected(self) -> None:
        with pytest.raises(NoOptionsError):
            MenuState.start([])

    def test_selected_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            MenuState(options=("a",), selected=1)

    def test_close_confirmed(self) -> None:
        state = MenuState.start(["a", "a"])
        state.selected = 1
        state.close(Outcome.CONFIRMED)
        assert state.closed
        assert state.confirmed
        assert state.current == "a"

    def test_close_without_selection(self) -> None:
        state = MenuState.start(["a"])
        state.close()
        assert state.closed
        assert not state.confirmed
