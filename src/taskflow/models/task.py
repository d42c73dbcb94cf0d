"""Task domain model."""

from pydantic import BaseModel, Field

# List identifiers for the default board
LIST_TODO = "todo"
LIST_IN_PROGRESS = "inProgress"
LIST_DONE = "done"

DEFAULT_LIST_IDS: tuple[str, ...] = (LIST_TODO, LIST_IN_PROGRESS, LIST_DONE)

# Generated task numbers are drawn from range(ID_SPACE)
ID_SPACE = 1000

LIST_TITLES: dict[str, str] = {
    LIST_TODO: "To Do",
    LIST_IN_PROGRESS: "In Progress",
    LIST_DONE: "Done",
}


def list_title(list_id: str) -> str:
    """Display title for a list, falling back to the identifier."""
    return LIST_TITLES.get(list_id, list_id)


class Task(BaseModel):
    """A single card on the board.

    Tasks are immutable. Moving a card replaces the sequences that hold it,
    never the card's identity.
    """

    id: str = Field(..., min_length=1)  # e.g. "item-412", unique across the board
    list_id: str = Field(..., min_length=1)  # list the card is displayed in
    content: str = ""

    model_config = {"frozen": True}
