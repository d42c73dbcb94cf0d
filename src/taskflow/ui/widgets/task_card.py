"""Task card widget."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.widget import Widget
from textual.widgets import Static

from ...models import Task


class TaskCard(Widget, can_focus=True):
    """A task card displayed in a column."""

    def __init__(self, task_data: Task, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._task_data = task_data

    def compose(self) -> ComposeResult:
        """Create card layout."""
        yield Static(self._truncate(self._task_data.content or self._task_data.id, 40), classes="task-title")
        yield Static(f"[dim]{self._task_data.id}[/]", classes="task-id")

    def _truncate(self, text: str, max_len: int) -> str:
        """Truncate text with ellipsis."""
        if len(text) <= max_len:
            return text
        return text[: max_len - 1] + "…"

    def set_lifted(self, lifted: bool) -> None:
        """Mark the card as picked up by a drag gesture."""
        self.set_class(lifted, "lifted")
