"""Service layer for business logic."""

from .board_service import BoardService
from .seed_service import generate_board, generate_board_from_settings

__all__ = [
    "BoardService",
    "generate_board",
    "generate_board_from_settings",
]
