"""Drag gesture events."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel


class DragLocation(BaseModel):
    """A position on the board: a list and an index into it."""

    list_id: str
    index: int

    model_config = {"frozen": True}

    @classmethod
    def from_result(cls, data: Mapping[str, Any]) -> DragLocation:
        """Create from a drag-and-drop callback location ({droppableId, index})."""
        return cls(list_id=data["droppableId"], index=data["index"])


class DragEvent(BaseModel):
    """One completed drag gesture.

    A missing destination means the gesture ended outside any drop target
    (or was cancelled) and is applied as a no-op.
    """

    source: DragLocation
    destination: DragLocation | None = None

    model_config = {"frozen": True}

    @classmethod
    def move(
        cls,
        source_list_id: str,
        source_index: int,
        destination_list_id: str,
        destination_index: int,
    ) -> DragEvent:
        """Create an event that drops a card at a destination."""
        return cls(
            source=DragLocation(list_id=source_list_id, index=source_index),
            destination=DragLocation(list_id=destination_list_id, index=destination_index),
        )

    @classmethod
    def cancelled(cls, source_list_id: str, source_index: int) -> DragEvent:
        """Create an event for a gesture that ended without a drop target."""
        return cls(source=DragLocation(list_id=source_list_id, index=source_index))

    @classmethod
    def from_result(cls, result: Mapping[str, Any]) -> DragEvent:
        """
        Create from a drag-and-drop library result.

        Expects the ``{"source": {...}, "destination": {...} | None}`` shape
        where each location carries ``droppableId`` and ``index``.
        """
        destination = result.get("destination")
        return cls(
            source=DragLocation.from_result(result["source"]),
            destination=DragLocation.from_result(destination) if destination else None,
        )

    @property
    def is_cancelled(self) -> bool:
        """True when the gesture has no destination."""
        return self.destination is None

    @property
    def source_list_id(self) -> str:
        return self.source.list_id

    @property
    def source_index(self) -> int:
        return self.source.index

    @property
    def destination_list_id(self) -> str | None:
        return self.destination.list_id if self.destination else None

    @property
    def destination_index(self) -> int | None:
        return self.destination.index if self.destination else None
