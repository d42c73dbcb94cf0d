"""Data models."""

from .board import BoardState, BoardStats
from .events import DragEvent, DragLocation
from .task import (
    DEFAULT_LIST_IDS,
    ID_SPACE,
    LIST_DONE,
    LIST_IN_PROGRESS,
    LIST_TITLES,
    LIST_TODO,
    Task,
    list_title,
)

__all__ = [
    "DEFAULT_LIST_IDS",
    "ID_SPACE",
    "LIST_DONE",
    "LIST_IN_PROGRESS",
    "LIST_TITLES",
    "LIST_TODO",
    "BoardState",
    "BoardStats",
    "DragEvent",
    "DragLocation",
    "Task",
    "list_title",
]
