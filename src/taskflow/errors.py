"""Exceptions raised by the board core."""


class TaskflowError(Exception):
    """Base exception for board errors."""

    pass


class UnknownListId(TaskflowError, KeyError):
    """A list identifier is not part of the board."""

    def __init__(self, list_id: str) -> None:
        super().__init__(list_id)
        self.list_id = list_id

    def __str__(self) -> str:
        return f"Unknown list: {self.list_id!r}"


class InvalidIndex(TaskflowError, IndexError):
    """An index falls outside the bounds of the referenced list."""

    def __init__(self, list_id: str, index: int, length: int) -> None:
        super().__init__(list_id, index, length)
        self.list_id = list_id
        self.index = index
        self.length = length

    def __str__(self) -> str:
        return f"Index {self.index} out of range for list {self.list_id!r} (length {self.length})"
