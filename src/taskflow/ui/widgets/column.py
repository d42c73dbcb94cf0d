"""Kanban column widget."""

import re

from textual.actions import SkipAction
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widget import Widget
from textual.widgets import Static

from ...models import Task
from .task_card import TaskCard


def css_safe_id(value: str) -> str:
    """Generate a CSS-safe ID fragment, e.g. "inProgress" -> "inprogress"."""
    safe_id = re.sub(r"[^a-zA-Z0-9\-]", "-", value)
    safe_id = safe_id.strip("-").lower()
    return safe_id or "task"


class TaskListScroll(VerticalScroll):
    """Scroll container for task lists.

    Raises SkipAction for navigation keys so they bubble up to the App
    for task navigation instead of being handled as scroll actions.
    """

    def action_scroll_up(self) -> None:
        raise SkipAction()

    def action_scroll_down(self) -> None:
        raise SkipAction()

    def action_scroll_home(self) -> None:
        raise SkipAction()

    def action_scroll_end(self) -> None:
        raise SkipAction()


class EmptyColumnMessage(Static):
    """Displayed when a column has no tasks."""

    pass


class KanbanColumn(Widget):
    """A single list on the board."""

    def __init__(self, title: str, list_id: str, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.title = title
        self.list_id = list_id
        self._tasks: tuple[Task, ...] = ()
        self._lifted_task_id: str | None = None

    @property
    def _list_css_id(self) -> str:
        return css_safe_id(self.list_id)

    def compose(self) -> ComposeResult:
        """Create column layout."""
        yield Static(self._header_text, classes="column-header", id=f"header-{self._list_css_id}")
        yield TaskListScroll(classes="column-content", id=f"content-{self._list_css_id}")

    def on_mount(self) -> None:
        """Refresh tasks when column is mounted."""
        if self._tasks:
            self.call_after_refresh(self._refresh_tasks)

    @property
    def _header_text(self) -> str:
        """Header text with styled task count."""
        return f"{self.title} [dim]({len(self._tasks)})[/]"

    def set_tasks(self, tasks: tuple[Task, ...], lifted_task_id: str | None = None) -> None:
        """Set the tasks for this column.

        Args:
            tasks: Tasks to display, in order
            lifted_task_id: Task currently picked up by a drag gesture, if any
        """
        self._tasks = tasks
        self._lifted_task_id = lifted_task_id
        # Use call_after_refresh to ensure DOM is ready
        self.call_after_refresh(self._refresh_tasks)

    async def _refresh_tasks(self) -> None:
        """Rebuild the task cards in this column."""
        content_id = f"#content-{self._list_css_id}"
        try:
            content = self.query_one(content_id, TaskListScroll)
        except Exception as e:
            self.log.error(f"Cannot find {content_id}: {e}")
            return

        await content.remove_children()

        if not self._tasks:
            await content.mount(EmptyColumnMessage("No tasks yet"))
        else:
            for task in self._tasks:
                card = TaskCard(task, id=f"task-{css_safe_id(task.id)}")
                card.set_lifted(task.id == self._lifted_task_id)
                await content.mount(card)

        try:
            header = self.query_one(f"#header-{self._list_css_id}", Static)
            header.update(self._header_text)
        except Exception:
            pass

    def focus_task(self, index: int) -> bool:
        """
        Focus the task at the given index.

        Returns:
            True if a task was focused, False otherwise
        """
        if not self._tasks or index < 0 or index >= len(self._tasks):
            self.screen.set_focus(None)
            return False

        task = self._tasks[index]
        try:
            card = self.query_one(f"#task-{css_safe_id(task.id)}", TaskCard)
            card.focus()
            card.scroll_visible()
            return True
        except Exception:
            return False
