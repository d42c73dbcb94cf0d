"""Main kanban board screen."""

from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from ...models import BoardState, DragEvent, DragLocation, Task, list_title
from ..widgets.column import KanbanColumn, css_safe_id
from ..widgets.stats_bar import StatsBar


class BoardScreen(Screen):
    """Main kanban board screen with navigation and drag gestures."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._current_column = 0
        self._current_task = 0
        # Source of the drag gesture in progress, if any
        self._drag_source: DragLocation | None = None
        self._lifted_task_id: str | None = None
        self._pending_focus_task_id: str | None = None

    @property
    def board(self) -> BoardState:
        """Current snapshot from the app's board service."""
        return self.app.board_service.state  # pyrefly: ignore[missing-attribute]

    @property
    def column_ids(self) -> tuple[str, ...]:
        """List IDs in display order."""
        return self.board.list_ids

    @property
    def column_count(self) -> int:
        return len(self.column_ids)

    def compose(self) -> ComposeResult:
        """Create the board layout with one column per list."""
        yield Header()
        yield StatsBar(id="stats-bar")

        with Container(id="board-container"), Horizontal(id="columns"):
            for list_id in self.column_ids:
                yield KanbanColumn(
                    title=list_title(list_id),
                    list_id=list_id,
                    id=f"column-{css_safe_id(list_id)}",
                )

        yield Static("", id="drag-status", classes="drag-status-bar")
        yield Footer()

    def on_mount(self) -> None:
        """Render the board when screen mounts."""
        self.load_tasks()
        self.call_after_refresh(self._update_focus)

    def load_tasks(self) -> None:
        """Populate columns and the stats bar from the current snapshot."""
        board = self.board
        for list_id in board.list_ids:
            column = self._get_column_by_id(list_id)
            if column is None:
                self.log.error(f"Missing column for list {list_id}")
                continue
            column.set_tasks(board.get_list(list_id), self._lifted_task_id)

        try:
            self.query_one("#stats-bar", StatsBar).update_stats(board.stats())
        except Exception:
            pass
        self._update_drag_status()

    def refresh_board(self, focus_task_id: str | None = None) -> None:
        """
        Re-render from the current snapshot.

        Args:
            focus_task_id: If provided, focus this task after refresh.
                           If None, preserves current position.
        """
        self.load_tasks()
        self._pending_focus_task_id = focus_task_id
        # Double-defer so column cards are rebuilt before focusing
        self.call_after_refresh(lambda: self.call_after_refresh(self._apply_pending_focus))

    def _apply_pending_focus(self) -> None:
        """Apply pending focus after refresh completes."""
        if self._pending_focus_task_id:
            position = self.board.find_task(self._pending_focus_task_id)
            self._pending_focus_task_id = None
            if position:
                list_id, self._current_task = position
                self._current_column = self.column_ids.index(list_id)
                self._update_focus()
                return

        self._clamp_cursor()
        self._update_focus()

    def _clamp_cursor(self) -> None:
        """Keep the cursor inside the board after the lists changed."""
        self._current_column = max(0, min(self._current_column, self.column_count - 1))
        count = self.board.count(self.column_ids[self._current_column])
        self._current_task = max(0, min(self._current_task, count - 1))

    def navigate_column(self, delta: int) -> None:
        """Navigate between columns."""
        new_column = max(0, min(self._current_column + delta, self.column_count - 1))
        if new_column != self._current_column:
            self._current_column = new_column
            self._clamp_cursor()
            self._update_focus()

    def navigate_task(self, delta: int) -> None:
        """Navigate between tasks in current column."""
        count = self.board.count(self.current_list_id)
        if count == 0:
            return

        new_task = max(0, min(self._current_task + delta, count - 1))
        if new_task != self._current_task:
            self._current_task = new_task
            self._update_focus()

    def navigate_to_task(self, index: int) -> None:
        """Navigate to specific task index (-1 for last)."""
        count = self.board.count(self.current_list_id)
        if count == 0:
            return

        self._current_task = count - 1 if index < 0 else min(index, count - 1)
        self._update_focus()

    def _get_column_by_id(self, list_id: str) -> KanbanColumn | None:
        try:
            return self.query_one(f"#column-{css_safe_id(list_id)}", KanbanColumn)
        except Exception:
            return None

    def _update_focus(self) -> None:
        """Move focus to the cursor and highlight the current column."""
        for index, list_id in enumerate(self.column_ids):
            column = self._get_column_by_id(list_id)
            if column is None:
                continue
            column.set_class(index == self._current_column, "current")
            if index == self._current_column:
                column.focus_task(self._current_task)

    def get_current_task(self) -> Task | None:
        """Get the task under the cursor."""
        tasks = self.board.get_list(self.current_list_id)
        if 0 <= self._current_task < len(tasks):
            return tasks[self._current_task]
        return None

    @property
    def current_list_id(self) -> str:
        return self.column_ids[self._current_column]

    @property
    def current_location(self) -> DragLocation:
        """The cursor position as a board location."""
        return DragLocation(list_id=self.current_list_id, index=self._current_task)

    # Drag gesture

    @property
    def is_dragging(self) -> bool:
        return self._drag_source is not None

    def pick_up(self) -> Task | None:
        """Start a drag gesture from the task under the cursor."""
        task = self.get_current_task()
        if task is None:
            return None
        self._drag_source = self.current_location
        self._lifted_task_id = task.id
        self.load_tasks()
        return task

    def finish_drag(self, at_end: bool = False) -> DragEvent | None:
        """
        Complete the gesture in progress with a drop at the cursor.

        Args:
            at_end: Drop after the last card of the current column

        Returns:
            The drag event to apply, or None if nothing was picked up
        """
        if self._drag_source is None:
            return None
        index = self.board.count(self.current_list_id) if at_end else self._current_task
        event = DragEvent(
            source=self._drag_source,
            destination=DragLocation(list_id=self.current_list_id, index=index),
        )
        self._end_drag()
        return event

    def cancel_drag(self) -> DragEvent | None:
        """Abandon the gesture in progress without a destination."""
        if self._drag_source is None:
            return None
        event = DragEvent(source=self._drag_source)
        self._end_drag()
        return event

    def _end_drag(self) -> None:
        self._drag_source = None
        self._lifted_task_id = None

    def _update_drag_status(self) -> None:
        """Show which card is being dragged."""
        try:
            status = self.query_one("#drag-status", Static)
        except Exception:
            return
        if self._lifted_task_id:
            status.update(
                f"[dim]Dragging[/] {self._lifted_task_id} "
                "[dim](space: drop here, enter: drop at end, esc: cancel)[/]"
            )
            status.display = True
        else:
            status.update("")
            status.display = False
