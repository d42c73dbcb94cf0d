"""Tests for BoardService."""

import pytest

from board_helpers import ids, make_board
from taskflow.config import Settings
from taskflow.errors import InvalidIndex, UnknownListId
from taskflow.models import DragEvent
from taskflow.services import BoardService


@pytest.fixture
def board_service(board) -> BoardService:
    """Create a BoardService holding the sample board."""
    return BoardService(Settings(seed=1), board)


class TestBoardServiceInit:
    """Tests for the initial snapshot."""

    def test_generates_board_from_settings(self):
        service = BoardService(Settings(seed=3, items_per_list=4))

        assert service.state.list_ids == ("todo", "inProgress", "done")
        assert service.state.stats().counts == {"todo": 4, "inProgress": 4, "done": 4}

    def test_same_seed_same_board(self):
        first = BoardService(Settings(seed=7)).state
        second = BoardService(Settings(seed=7)).state
        assert first == second

    def test_uses_given_state(self, board):
        service = BoardService(Settings(), board)
        assert service.state is board

    def test_reseed_replaces_board(self, board_service, board):
        new_state = board_service.reseed()

        assert board_service.state is new_state
        assert new_state.total_count == 30
        assert new_state != board

    def test_logs_board_size_and_seed(self, caplog):
        with caplog.at_level("INFO", logger="taskflow"):
            BoardService(Settings(seed=11, items_per_list=2))
        assert "Board ready: 6 tasks across 3 lists (seed=11)" in caplog.text

    def test_reset(self, board_service):
        other = make_board(todo=["Q"], inProgress=[], done=[])
        board_service.reset(other)
        assert board_service.state is other


class TestBoardServiceDrop:
    """Tests for applying drag events."""

    def test_drop_replaces_snapshot(self, board_service, board):
        result = board_service.drop(DragEvent.move("todo", 0, "done", 0))

        assert board_service.state is result
        assert ids(result, "done") == ["A", "X", "Y"]
        # Previous snapshot stays intact
        assert ids(board, "todo") == ["A", "B", "C"]

    def test_cancelled_drop_keeps_snapshot(self, board_service, board):
        result = board_service.drop(DragEvent.cancelled("todo", 0))
        assert result is board
        assert board_service.state is board

    def test_invalid_drop_keeps_snapshot(self, board_service, board):
        with pytest.raises(InvalidIndex):
            board_service.drop(DragEvent.move("todo", 9, "done", 0))
        assert board_service.state is board

    def test_drop_logs_move(self, board_service, caplog):
        with caplog.at_level("INFO", logger="taskflow"):
            board_service.drop(DragEvent.move("todo", 0, "done", 0))
        assert "Drop: todo[0] -> done[0]" in caplog.text


class TestBoardServiceMoveTask:
    """Tests for keyboard moves between lists."""

    def test_move_task_returns_new_position(self, board_service):
        position = board_service.move_task("todo", 1, "done", 1)

        assert position == ("done", 1)
        assert ids(board_service.state, "done") == ["X", "B", "Y"]

    def test_move_task_reports_clamped_position(self, board_service):
        position = board_service.move_task("todo", 0, "done", 50)
        assert position == ("done", 2)

    def test_move_task_right_keeps_row(self, board_service):
        position = board_service.move_task_right("todo", 0)

        assert position == ("inProgress", 0)
        assert ids(board_service.state, "inProgress") == ["A", "D"]
        assert ids(board_service.state, "todo") == ["B", "C"]

    def test_move_task_right_clamps_row(self, board_service):
        position = board_service.move_task_right("todo", 2)
        assert position == ("inProgress", 1)

    def test_move_task_left(self, board_service):
        position = board_service.move_task_left("done", 1)

        assert position == ("inProgress", 1)
        assert ids(board_service.state, "inProgress") == ["D", "Y"]

    def test_move_task_left_from_first_list_stays(self, board_service, board):
        """move_task_left from the first list is a no-op (boundary)."""
        assert board_service.move_task_left("todo", 0) is None
        assert board_service.state is board

    def test_move_task_right_from_last_list_stays(self, board_service, board):
        """move_task_right from the last list is a no-op (boundary)."""
        assert board_service.move_task_right("done", 0) is None
        assert board_service.state is board

    def test_move_task_unknown_list(self, board_service):
        with pytest.raises(UnknownListId):
            board_service.move_task_right("backlog", 0)

    def test_move_task_invalid_index(self, board_service, board):
        with pytest.raises(InvalidIndex):
            board_service.move_task_right("todo", 5)
        assert board_service.state is board


class TestBoardServiceReorder:
    """Tests for reordering within a list."""

    def test_reorder_down(self, board_service):
        assert board_service.reorder_task("todo", 0, 1) is True
        assert ids(board_service.state, "todo") == ["B", "A", "C"]

    def test_reorder_up(self, board_service):
        assert board_service.reorder_task("todo", 2, -1) is True
        assert ids(board_service.state, "todo") == ["A", "C", "B"]

    def test_reorder_at_top_boundary(self, board_service, board):
        assert board_service.reorder_task("todo", 0, -1) is False
        assert board_service.state is board

    def test_reorder_at_bottom_boundary(self, board_service, board):
        assert board_service.reorder_task("todo", 2, 1) is False
        assert board_service.state is board

    def test_reorder_single_task_list(self, board_service):
        assert board_service.reorder_task("inProgress", 0, 1) is False
