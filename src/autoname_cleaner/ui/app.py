"""Interactive single-key front end built on textual."""

from __future__ import annotations

from typing import Any, Coroutine

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.message import Message
from textual.widgets import Static

from autoname_cleaner.managers.cleanup_controller import CleanupController
from autoname_cleaner.models.containers import CleanupOutcome
from autoname_cleaner.ui.rendering import session_view
from autoname_cleaner.utils import get_logger

logger = get_logger(__name__)

# Table header (1) + borders (3) + scroll hint (1) + status lines (2)
RESERVED_ROWS = 7


class RemovalFinished(Message):
    """Posted once the dispatched removal batch has completed."""

    def __init__(self, outcome: CleanupOutcome) -> None:
        super().__init__()
        self.outcome = outcome


class CleanupApp(App[CleanupOutcome | None]):
    """Full-screen candidate list with y/n confirmation and arrow-key scrolling."""

    TITLE = "Autoname Cleaner"
    BINDINGS = [
        Binding("y", "confirm", "Delete"),
        Binding("enter", "confirm", "Delete", show=False),
        Binding("n", "cancel", "Cancel"),
        Binding("q", "cancel", "Cancel", show=False),
        Binding("ctrl+c", "cancel", "Cancel", show=False, priority=True),
        Binding("up", "scroll_up", "Scroll up", show=False),
        Binding("down", "scroll_down", "Scroll down", show=False),
    ]

    def __init__(self, controller: CleanupController, image_width: int = 40) -> None:
        super().__init__()
        self.controller = controller
        self.image_width = image_width
        self._view = Static(id="session")

    def compose(self) -> ComposeResult:
        yield self._view

    def on_mount(self) -> None:
        self._fit_window(self.size.height)
        self._refresh_view()

    def on_resize(self, event: events.Resize) -> None:
        self._fit_window(event.size.height)
        self._refresh_view()

    def on_unmount(self) -> None:
        # Abandon any runtime call still in flight when the screen goes away.
        if not self.controller.finished:
            self.controller.remover.ctx.cancel()

    def _fit_window(self, height: int) -> None:
        self.controller.set_window_size(height - RESERVED_ROWS)

    def _refresh_view(self) -> None:
        self._view.update(session_view(self.controller, image_width=self.image_width))

    def action_confirm(self) -> None:
        removal = self.controller.confirm()
        if removal is not None:
            self.run_worker(self._dispatch(removal), name="removal", exclusive=True)
        self._refresh_view()
        if self.controller.finished:
            self.exit(self.controller.outcome)

    def action_cancel(self) -> None:
        if self.controller.cancel():
            self._refresh_view()
            self.exit(None)

    def action_scroll_up(self) -> None:
        self.controller.scroll_up()
        self._refresh_view()

    def action_scroll_down(self) -> None:
        self.controller.scroll_down()
        self._refresh_view()

    async def _dispatch(self, removal: Coroutine[Any, Any, CleanupOutcome]) -> None:
        outcome = await removal
        self.post_message(RemovalFinished(outcome))

    def on_removal_finished(self, message: RemovalFinished) -> None:
        self.controller.handle_result(message.outcome)
        self._refresh_view()
        logger.info(
            "Interactive cleanup finished",
            extra={"removed": len(message.outcome.removed_names)},
        )
        self.exit(self.controller.outcome)
