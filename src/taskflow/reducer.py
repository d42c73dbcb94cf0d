"""Drag-and-drop state transition."""

from __future__ import annotations

import logging
from types import MappingProxyType

from .errors import InvalidIndex, UnknownListId
from .models import BoardState, DragEvent, Task

logger = logging.getLogger(__name__)


def remove_from_list(tasks: tuple[Task, ...], index: int) -> tuple[Task, tuple[Task, ...]]:
    """Return the task at index and the sequence without it."""
    return tasks[index], tasks[:index] + tasks[index + 1 :]


def add_to_list(tasks: tuple[Task, ...], index: int, task: Task) -> tuple[Task, ...]:
    """Return the sequence with task inserted at index (past the end appends)."""
    index = min(index, len(tasks))
    return tasks[:index] + (task,) + tasks[index:]


def apply(state: BoardState, event: DragEvent) -> BoardState:
    """
    Compute the board that results from a drag gesture.

    The destination index is interpreted against the destination list after
    the card has been removed from its source, so for a same-list move it
    counts positions in the shortened list. Lists not touched by the move
    are carried over unchanged.

    Args:
        state: Current board snapshot (left untouched)
        event: Completed drag gesture

    Returns:
        The next snapshot, or ``state`` itself when the gesture was cancelled

    Raises:
        UnknownListId: If the source or destination list is not on the board
        InvalidIndex: If the source index is out of range or the destination
            index is negative
    """
    source_list_id = event.source_list_id
    source = state.get_list(source_list_id)
    if not 0 <= event.source_index < len(source):
        raise InvalidIndex(source_list_id, event.source_index, len(source))

    if event.destination is None:
        logger.debug("Drop cancelled: %s[%d]", source_list_id, event.source_index)
        return state

    destination_list_id = event.destination.list_id
    if destination_list_id not in state.lists:
        raise UnknownListId(destination_list_id)
    if event.destination.index < 0:
        raise InvalidIndex(
            destination_list_id, event.destination.index, len(state.lists[destination_list_id])
        )

    removed, shortened = remove_from_list(source, event.source_index)

    lists = dict(state.lists)
    lists[source_list_id] = shortened

    if removed.list_id != destination_list_id:
        removed = removed.model_copy(update={"list_id": destination_list_id})
    lists[destination_list_id] = add_to_list(
        lists[destination_list_id], event.destination.index, removed
    )

    logger.debug(
        "Task moved: %s (%s[%d] -> %s[%d])",
        removed.id,
        source_list_id,
        event.source_index,
        destination_list_id,
        min(event.destination.index, len(lists[destination_list_id]) - 1),
    )
    # Membership is preserved by construction, so skip re-validation and keep
    # untouched sequences shared with the previous snapshot.
    return BoardState.model_construct(lists=MappingProxyType(lists))
