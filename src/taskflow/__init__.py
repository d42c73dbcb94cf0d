"""TaskFlow - kanban board with drag-and-drop reordering."""

from .errors import InvalidIndex, TaskflowError, UnknownListId
from .models import BoardState, DragEvent, DragLocation, Task
from .reducer import apply

__version__ = "0.1.0"

__all__ = [
    "BoardState",
    "DragEvent",
    "DragLocation",
    "InvalidIndex",
    "Task",
    "TaskflowError",
    "UnknownListId",
    "apply",
]
