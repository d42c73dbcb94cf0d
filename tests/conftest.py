"""Shared fixtures for board tests."""

import pytest

from board_helpers import make_board
from taskflow.models import BoardState


@pytest.fixture
def board() -> BoardState:
    """A three-list board with a few tasks in each list."""
    return make_board(todo=["A", "B", "C"], inProgress=["D"], done=["X", "Y"])
