"""Generated tasks for a fresh board."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable
from typing import TYPE_CHECKING

from ..models import DEFAULT_LIST_IDS, ID_SPACE, BoardState, Task

if TYPE_CHECKING:
    from ..config import Settings

logger = logging.getLogger(__name__)


def generate_tasks(list_id: str, numbers: Iterable[int]) -> list[Task]:
    """Create one task per number for the given list."""
    return [Task(id=f"item-{n}", list_id=list_id, content=f"item {n}") for n in numbers]


def generate_board(
    count: int = 10,
    list_ids: Iterable[str] = DEFAULT_LIST_IDS,
    rng: random.Random | None = None,
) -> BoardState:
    """
    Create a board with ``count`` generated tasks in every list.

    Task numbers are sampled without replacement so ids stay unique across
    the whole board.

    Args:
        count: Tasks per list
        list_ids: Lists that make up the board
        rng: Random source (a fresh unseeded one if None)

    Raises:
        ValueError: If count is negative or the board needs more tasks than
            there are distinct ids
    """
    list_ids = tuple(list_ids)
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    total = count * len(list_ids)
    if total > ID_SPACE:
        raise ValueError(f"Cannot generate {total} unique tasks (limit {ID_SPACE})")

    rng = rng or random.Random()
    numbers = rng.sample(range(ID_SPACE), total)

    lists = {
        list_id: tuple(generate_tasks(list_id, numbers[i * count : (i + 1) * count]))
        for i, list_id in enumerate(list_ids)
    }
    logger.debug("Generated board: %d tasks across %d lists", total, len(list_ids))
    return BoardState(lists=lists)


def generate_board_from_settings(
    settings: Settings, rng: random.Random | None = None
) -> BoardState:
    """Create a generated board sized by settings."""
    if rng is None:
        rng = random.Random(settings.seed)
    return generate_board(settings.items_per_list, settings.list_ids, rng)
