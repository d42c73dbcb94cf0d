"""Widget components."""

from .column import EmptyColumnMessage, KanbanColumn
from .stats_bar import StatsBar
from .task_card import TaskCard

__all__ = [
    "EmptyColumnMessage",
    "KanbanColumn",
    "StatsBar",
    "TaskCard",
]
