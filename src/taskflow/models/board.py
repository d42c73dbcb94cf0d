"""Board state models."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from pydantic import BaseModel, Field, model_validator

from ..errors import UnknownListId
from .task import DEFAULT_LIST_IDS, Task


class BoardStats(BaseModel):
    """Task counts per list and across the board."""

    counts: dict[str, int] = Field(default_factory=dict)
    total: int = 0


class BoardState(BaseModel):
    """Snapshot of the board: each list id mapped to its ordered tasks.

    Snapshots are never modified: ``lists`` is a read-only mapping of tuples.
    Transitions build a new snapshot and may share the sequences of untouched
    lists with the previous one.
    """

    lists: Mapping[str, tuple[Task, ...]] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_lists(self) -> BoardState:
        """Every task must appear exactly once; lists are exposed read-only."""
        seen: set[str] = set()
        for list_id, tasks in self.lists.items():
            for task in tasks:
                if task.id in seen:
                    raise ValueError(f"Duplicate task id {task.id!r} in list {list_id!r}")
                seen.add(task.id)
        object.__setattr__(self, "lists", MappingProxyType(dict(self.lists)))
        return self

    @classmethod
    def empty(cls, list_ids: Iterable[str] = DEFAULT_LIST_IDS) -> BoardState:
        """Create a board with empty lists."""
        return cls(lists={list_id: () for list_id in list_ids})

    @classmethod
    def from_tasks(
        cls, tasks: Iterable[Task], list_ids: Iterable[str] = DEFAULT_LIST_IDS
    ) -> BoardState:
        """
        Create a board from tasks, grouping them by their list_id.

        Args:
            tasks: Tasks in display order
            list_ids: Lists that make up the board, in display order

        Raises:
            UnknownListId: If a task refers to a list not on the board
        """
        grouped: dict[str, list[Task]] = {list_id: [] for list_id in list_ids}
        for task in tasks:
            if task.list_id not in grouped:
                raise UnknownListId(task.list_id)
            grouped[task.list_id].append(task)
        return cls(lists={list_id: tuple(items) for list_id, items in grouped.items()})

    @property
    def list_ids(self) -> tuple[str, ...]:
        """List identifiers in display order."""
        return tuple(self.lists)

    def get_list(self, list_id: str) -> tuple[Task, ...]:
        """Get the ordered tasks of a list."""
        try:
            return self.lists[list_id]
        except KeyError:
            raise UnknownListId(list_id) from None

    def count(self, list_id: str) -> int:
        """Number of tasks in a list."""
        return len(self.get_list(list_id))

    @property
    def total_count(self) -> int:
        """Number of tasks across all lists."""
        return sum(len(tasks) for tasks in self.lists.values())

    def task_ids(self) -> list[str]:
        """All task ids in board order."""
        return [task.id for tasks in self.lists.values() for task in tasks]

    def find_task(self, task_id: str) -> tuple[str, int] | None:
        """Get (list_id, index) of a task, or None if not on the board."""
        for list_id, tasks in self.lists.items():
            for index, task in enumerate(tasks):
                if task.id == task_id:
                    return (list_id, index)
        return None

    def stats(self) -> BoardStats:
        """Per-list counts and the board total."""
        counts = {list_id: len(tasks) for list_id, tasks in self.lists.items()}
        return BoardStats(counts=counts, total=sum(counts.values()))
