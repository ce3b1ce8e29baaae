"""Rich renderables shared by the line-oriented and interactive front ends."""

from typing import Optional

from rich.console import Group, RenderableType
from rich.style import Style
from rich.table import Table
from rich.text import Text

from autoname_cleaner.managers.cleanup_controller import CleanupController, CleanupState
from autoname_cleaner.models.containers import CandidateSet, CleanupOutcome
from autoname_cleaner.utils.exceptions import AutonameCleanerError

ACCENT = "color(51)"
MUTED = "color(243)"
ROW_STYLES = ["color(250)", "color(244)"]

IDLE_HELP = "Press y/Enter to delete, n/q to cancel."
DELETING_TEXT = "⏳ Deleting containers..."
CANCELLED_TEXT = "Operation cancelled."
NO_CANDIDATES_TEXT = "No auto-named containers found."


def truncate(value: str, width: int) -> str:
    """Shorten a display string to ``width`` characters with a ``...`` suffix."""
    if len(value) <= width:
        return value
    return value[: width - 3] + "..."


def candidate_table(
    candidates: CandidateSet,
    start: int = 0,
    end: Optional[int] = None,
    image_width: int = 40,
) -> Table:
    """
    Build the candidate table for rows ``[start, end)``.

    Row numbers are 1-based positions in the full candidate set.
    """
    table = Table(
        border_style=ACCENT,
        header_style=Style.parse(f"bold {ACCENT}"),
        row_styles=ROW_STYLES,
    )
    table.add_column("#", justify="right")
    table.add_column("Name")
    table.add_column("Image")

    stop = len(candidates) if end is None else end
    for index in range(start, stop):
        container = candidates[index]
        table.add_row(
            str(index + 1),
            container.primary_name,
            truncate(container.image, image_width),
        )
    return table


def window_indicator(controller: CleanupController) -> Optional[Text]:
    """Return the ``(start-end of total)`` hint, or None when everything fits."""
    if not controller.is_windowed:
        return None
    start, end = controller.visible_range()
    return Text(f"({start + 1}-{end} of {controller.total}) Use ↑↓ to scroll", style=MUTED)


def outcome_text(outcome: CleanupOutcome) -> Text:
    """Summarize a finished batch, separating full success from partial success."""
    removed = len(outcome.removed_names)
    if outcome.error is None:
        return Text(f"✓ Removed {removed} container(s) successfully.", style="green")

    text = Text(f"Removed {removed} container(s).\n")
    text.append(f"Completed with errors: {outcome.error}", style="red")
    return text


def status_text(controller: CleanupController) -> Text:
    """Return the status line for the controller's current state."""
    if controller.state is CleanupState.IDLE:
        return Text(IDLE_HELP, style=MUTED)
    if controller.state is CleanupState.DELETING:
        return Text(DELETING_TEXT, style="yellow")
    if controller.state is CleanupState.CANCELLED:
        return Text(CANCELLED_TEXT, style="bright_black")
    if controller.outcome is None:
        raise AutonameCleanerError("Cleanup session finished without an outcome")
    return outcome_text(controller.outcome)


def session_view(controller: CleanupController, image_width: int = 40) -> RenderableType:
    """Render the windowed table, the scroll hint and the status line."""
    start, end = controller.visible_range()
    parts: list[RenderableType] = [
        candidate_table(controller.candidates, start, end, image_width=image_width)
    ]
    indicator = window_indicator(controller)
    if indicator is not None:
        parts.append(indicator)
    parts.append(status_text(controller))
    return Group(*parts)
