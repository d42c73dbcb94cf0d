"""TaskFlow TUI Application."""

import logging

from textual.app import App
from textual.binding import Binding

from .config import Settings
from .errors import TaskflowError
from .models import BoardState, DragEvent, list_title
from .services import BoardService
from .ui.screens.board import BoardScreen

logger = logging.getLogger(__name__)


class TaskflowApp(App):
    """TaskFlow - kanban board with drag-and-drop reordering."""

    TITLE = "TaskFlow"

    CSS_PATH = "ui/styles.tcss"

    BINDINGS = [
        # Core bindings
        Binding("q", "quit", "Quit", show=True),
        Binding("r", "reseed", "New board", show=True),
        # Navigation - vim style
        Binding("h", "nav_left", "← Column", show=False),
        Binding("j", "nav_down", "↓ Task", show=False),
        Binding("k", "nav_up", "↑ Task", show=False),
        Binding("l", "nav_right", "→ Column", show=False),
        # Navigation - arrow keys
        Binding("left", "nav_left", "← Column", show=False),
        Binding("down", "nav_down", "↓ Task", show=False),
        Binding("up", "nav_up", "↑ Task", show=False),
        Binding("right", "nav_right", "→ Column", show=False),
        # Jump navigation
        Binding("g", "nav_first", "First", show=False),
        Binding("G", "nav_last", "Last", show=False),
        Binding("home", "nav_first", "First", show=False),
        Binding("end", "nav_last", "Last", show=False),
        # Drag gesture
        Binding("space", "pick_or_drop", "Drag/Drop", show=True),
        Binding("enter", "drop_at_end", "Drop at end", show=False),
        Binding("escape", "cancel_drag", "Cancel", show=False, priority=True),
        # Quick moves
        Binding("H", "move_task_left", "Move ←", show=False),
        Binding("L", "move_task_right", "Move →", show=False),
        Binding("shift+left", "move_task_left", "Move ←", show=False),
        Binding("shift+right", "move_task_right", "Move →", show=False),
        Binding("K", "move_task_up", "Move ↑", show=False),
        Binding("J", "move_task_down", "Move ↓", show=False),
        Binding("shift+up", "move_task_up", "Move ↑", show=False),
        Binding("shift+down", "move_task_down", "Move ↓", show=False),
    ]

    SCREENS = {
        "board": BoardScreen,
    }

    def __init__(self, settings: Settings | None = None, state: BoardState | None = None) -> None:
        super().__init__()
        self.settings = settings or Settings()
        self.board_service = BoardService(self.settings, state)

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.push_screen("board")

    def action_reseed(self) -> None:
        """Replace the board with freshly generated tasks."""
        screen = self.screen
        if not isinstance(screen, BoardScreen):
            return

        screen.cancel_drag()
        self.board_service.reseed()
        screen.refresh_board()
        self.notify("New board generated", timeout=2)

    # Navigation actions
    def action_nav_left(self) -> None:
        """Navigate to previous column."""
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.navigate_column(-1)

    def action_nav_right(self) -> None:
        """Navigate to next column."""
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.navigate_column(1)

    def action_nav_up(self) -> None:
        """Navigate to previous task."""
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.navigate_task(-1)

    def action_nav_down(self) -> None:
        """Navigate to next task."""
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.navigate_task(1)

    def action_nav_first(self) -> None:
        """Navigate to first task in column."""
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.navigate_to_task(0)

    def action_nav_last(self) -> None:
        """Navigate to last task in column."""
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.navigate_to_task(-1)

    # Drag gesture actions
    def action_pick_or_drop(self) -> None:
        """Pick up the focused task, or drop the carried task at the cursor."""
        screen = self.screen
        if not isinstance(screen, BoardScreen):
            return

        if screen.is_dragging:
            self._complete_drop(screen, screen.finish_drag())
            return

        task = screen.pick_up()
        if task is not None:
            logger.debug("Picked up %s", task.id)

    def action_drop_at_end(self) -> None:
        """Drop the carried task after the last task of the current column."""
        screen = self.screen
        if isinstance(screen, BoardScreen) and screen.is_dragging:
            self._complete_drop(screen, screen.finish_drag(at_end=True))

    def action_cancel_drag(self) -> None:
        """Abandon the drag in progress; the board is left as it was."""
        screen = self.screen
        if not isinstance(screen, BoardScreen) or not screen.is_dragging:
            return

        event = screen.cancel_drag()
        if event is not None:
            self._dispatch(event)
        screen.refresh_board()
        self.notify("Drop cancelled", timeout=2)

    def _complete_drop(self, screen: BoardScreen, event: DragEvent | None) -> None:
        """Apply a finished drag and refocus the moved task."""
        if event is None:
            return

        previous = self.board_service.state
        if self._dispatch(event) is None:
            screen.refresh_board()
            return

        task = previous.get_list(event.source_list_id)[event.source_index]
        screen.refresh_board(focus_task_id=task.id)
        if event.destination_list_id != event.source_list_id:
            self.notify(f"Moved to {list_title(event.destination_list_id)}", timeout=2)

    def _dispatch(self, event: DragEvent) -> BoardState | None:
        """Hand an event to the board service, reporting rejected events."""
        try:
            return self.board_service.drop(event)
        except TaskflowError as e:
            logger.error("Drop rejected: %s", e)
            self.notify(str(e), severity="error")
            return None

    # Quick move actions
    def action_move_task_left(self) -> None:
        """Move current task to previous column."""
        self._quick_move(self.board_service.move_task_left)

    def action_move_task_right(self) -> None:
        """Move current task to next column."""
        self._quick_move(self.board_service.move_task_right)

    def action_move_task_up(self) -> None:
        """Move current task up in column."""
        self._reorder(-1)

    def action_move_task_down(self) -> None:
        """Move current task down in column."""
        self._reorder(1)

    def _quick_move(self, move) -> None:
        screen = self.screen
        if not isinstance(screen, BoardScreen) or screen.is_dragging:
            return

        task = screen.get_current_task()
        if task is None:
            return

        location = screen.current_location
        try:
            position = move(location.list_id, location.index)
        except TaskflowError as e:
            logger.error("Move rejected: %s", e)
            self.notify(str(e), severity="error")
            return

        if position is not None:
            screen.refresh_board(focus_task_id=task.id)
            self.notify(f"Moved to {list_title(position[0])}", timeout=2)

    def _reorder(self, delta: int) -> None:
        screen = self.screen
        if not isinstance(screen, BoardScreen) or screen.is_dragging:
            return

        task = screen.get_current_task()
        if task is None:
            return

        location = screen.current_location
        if self.board_service.reorder_task(location.list_id, location.index, delta):
            screen.refresh_board(focus_task_id=task.id)


def run(settings: Settings | None = None) -> None:
    """Run the TaskFlow application."""
    app = TaskflowApp(settings)
    app.run()
