"""Service holding the current board snapshot."""

from __future__ import annotations

import logging
import random

from ..config import Settings
from ..models import BoardState, DragEvent
from ..reducer import apply
from .seed_service import generate_board_from_settings

logger = logging.getLogger(__name__)


class BoardService:
    """Owns the current board snapshot and replaces it on every drop."""

    def __init__(
        self,
        settings: Settings | None = None,
        state: BoardState | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self._rng = random.Random(self.settings.seed)
        self._state = state if state is not None else self._generate()
        logger.info(
            "Board ready: %d tasks across %d lists (seed=%s)",
            self._state.total_count,
            len(self._state.list_ids),
            self.settings.seed,
        )

    def _generate(self) -> BoardState:
        return generate_board_from_settings(self.settings, self._rng)

    @property
    def state(self) -> BoardState:
        """The current board snapshot."""
        return self._state

    def reset(self, state: BoardState) -> None:
        """Replace the current snapshot."""
        self._state = state

    def reseed(self) -> BoardState:
        """Replace the board with freshly generated tasks."""
        self._state = self._generate()
        logger.info("Board reseeded: %d tasks", self._state.total_count)
        return self._state

    def drop(self, event: DragEvent) -> BoardState:
        """
        Apply a completed drag gesture to the board.

        Raises:
            UnknownListId: If the event references a list not on the board
            InvalidIndex: If the event references an out-of-range position
        """
        new_state = apply(self._state, event)
        if new_state is self._state:
            logger.debug("Drop ignored: no destination")
        else:
            logger.info(
                "Drop: %s[%d] -> %s[%d]",
                event.source_list_id,
                event.source_index,
                event.destination_list_id,
                event.destination_index,
            )
        self._state = new_state
        return new_state

    def move_task(
        self, list_id: str, index: int, to_list_id: str, to_index: int
    ) -> tuple[str, int] | None:
        """
        Move a task and return its resulting (list_id, index).

        The returned index reflects clamping when to_index is past the end.
        """
        previous = self._state
        self.drop(DragEvent.move(list_id, index, to_list_id, to_index))
        task = previous.get_list(list_id)[index]
        return self._state.find_task(task.id)

    def move_task_left(self, list_id: str, index: int) -> tuple[str, int] | None:
        """Move a task to the previous list, keeping its row where possible."""
        new_list = self._neighbour(list_id, -1)
        if new_list is None:
            return None  # Already at leftmost list
        return self.move_task(list_id, index, new_list, index)

    def move_task_right(self, list_id: str, index: int) -> tuple[str, int] | None:
        """Move a task to the next list, keeping its row where possible."""
        new_list = self._neighbour(list_id, 1)
        if new_list is None:
            return None  # Already at rightmost list
        return self.move_task(list_id, index, new_list, index)

    def reorder_task(self, list_id: str, index: int, delta: int) -> bool:
        """
        Reorder a task within its list.

        Args:
            list_id: List holding the task
            index: Current position of the task
            delta: -1 to move up, 1 to move down

        Returns:
            True if the task was moved
        """
        new_index = index + delta
        if new_index < 0 or new_index >= self._state.count(list_id):
            logger.debug("reorder_task: at boundary, cannot move: %s[%d]", list_id, index)
            return False

        self.drop(DragEvent.move(list_id, index, list_id, new_index))
        return True

    def _neighbour(self, list_id: str, delta: int) -> str | None:
        """Get the list delta positions away, or None past either edge."""
        list_ids = self._state.list_ids
        # Validates list_id
        self._state.get_list(list_id)
        idx = list_ids.index(list_id) + delta
        if 0 <= idx < len(list_ids):
            return list_ids[idx]
        return None
