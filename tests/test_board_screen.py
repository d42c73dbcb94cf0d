"""Tests for the board screen's drag gesture bookkeeping.

The snapshot is patched in, so no running app is required.
"""

from unittest.mock import PropertyMock, patch

import pytest

from taskflow.models import BoardStats, DragEvent, Task
from taskflow.ui.screens.board import BoardScreen
from taskflow.ui.widgets.column import KanbanColumn, css_safe_id
from taskflow.ui.widgets.stats_bar import StatsBar
from taskflow.ui.widgets.task_card import TaskCard


@pytest.fixture
def screen(board):
    """A BoardScreen reading the sample board, with rendering stubbed out."""
    with (
        patch.object(BoardScreen, "board", new_callable=PropertyMock, return_value=board),
        patch.object(BoardScreen, "load_tasks"),
    ):
        yield BoardScreen()


def place_cursor(screen: BoardScreen, column: int, task: int) -> None:
    screen._current_column = column
    screen._current_task = task


class TestPickUp:
    """Tests for starting a gesture."""

    def test_pick_up_records_source(self, screen):
        place_cursor(screen, 0, 1)

        task = screen.pick_up()

        assert task.id == "B"
        assert screen.is_dragging
        assert screen._lifted_task_id == "B"

    def test_pick_up_on_empty_position(self, screen):
        place_cursor(screen, 1, 5)

        assert screen.pick_up() is None
        assert not screen.is_dragging


class TestFinishDrag:
    """Tests for completing a gesture."""

    def test_drop_at_cursor(self, screen):
        place_cursor(screen, 0, 0)
        screen.pick_up()
        place_cursor(screen, 2, 1)

        event = screen.finish_drag()

        assert event == DragEvent.move("todo", 0, "done", 1)
        assert not screen.is_dragging
        assert screen._lifted_task_id is None

    def test_drop_at_end(self, screen):
        place_cursor(screen, 0, 0)
        screen.pick_up()
        place_cursor(screen, 2, 0)

        event = screen.finish_drag(at_end=True)

        assert event == DragEvent.move("todo", 0, "done", 2)

    def test_finish_without_pick_up(self, screen):
        assert screen.finish_drag() is None


class TestCancelDrag:
    """Tests for abandoning a gesture."""

    def test_cancel_gives_event_without_destination(self, screen):
        place_cursor(screen, 2, 1)
        screen.pick_up()
        place_cursor(screen, 0, 0)

        event = screen.cancel_drag()

        assert event == DragEvent.cancelled("done", 1)
        assert not screen.is_dragging

    def test_cancel_without_pick_up(self, screen):
        assert screen.cancel_drag() is None


class TestCursor:
    """Tests for cursor helpers."""

    def test_current_task(self, screen):
        place_cursor(screen, 2, 1)
        assert screen.get_current_task().id == "Y"

    def test_clamp_cursor(self, screen):
        place_cursor(screen, 5, 9)
        screen._clamp_cursor()
        assert (screen._current_column, screen._current_task) == (2, 1)


class TestStatsBar:
    """Tests for stats formatting."""

    def test_format_stats(self, board):
        text = StatsBar.format_stats(board.stats())

        assert "To Do [b]3[/]" in text
        assert "In Progress [b]1[/]" in text
        assert "Done [b]2[/]" in text
        assert text.endswith("Total [b]6[/]")

    def test_format_empty(self):
        assert StatsBar.format_stats(BoardStats()) == "Total [b]0[/]"


class TestColumnWidgets:
    """Tests for column and card helpers that need no running app."""

    def test_css_safe_id(self):
        assert css_safe_id("inProgress") == "inprogress"
        assert css_safe_id("item-412") == "item-412"
        assert css_safe_id("a b/c") == "a-b-c"
        assert css_safe_id("##") == "task"

    def test_column_header_counts_tasks(self, board):
        column = KanbanColumn(title="To Do", list_id="todo")
        assert column._header_text == "To Do [dim](0)[/]"

        column._tasks = board.get_list("todo")
        assert column._header_text == "To Do [dim](3)[/]"

    def test_card_truncates_long_content(self):
        card = TaskCard(Task(id="item-1", list_id="todo", content="x" * 60))
        text = card._truncate("x" * 60, 40)

        assert len(text) == 40
        assert text.endswith("…")
        assert card._truncate("short", 40) == "short"
