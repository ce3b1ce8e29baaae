"""Line-oriented front end: print the candidates, read one answer."""

from typing import Callable, Optional

import click
from rich.console import Console

from autoname_cleaner.context import run_detached
from autoname_cleaner.managers.cleanup_controller import (
    CleanupController,
    CleanupState,
    is_confirmation,
)
from autoname_cleaner.ui.rendering import (
    CANCELLED_TEXT,
    DELETING_TEXT,
    candidate_table,
    outcome_text,
)
from autoname_cleaner.utils import get_logger
from autoname_cleaner.utils.exceptions import AutonameCleanerError

logger = get_logger(__name__)

PROMPT_TEXT = "Do you want to delete these containers? (yes/no)"


def read_answer() -> str:
    """Read the operator's answer; end of input counts as a refusal."""
    try:
        return click.prompt(PROMPT_TEXT, default="", show_default=False)
    except click.Abort:
        click.echo()
        return ""


async def run_prompt_session(
    controller: CleanupController,
    console: Console,
    image_width: int = 40,
    answer_reader: Optional[Callable[[], str]] = None,
) -> CleanupState:
    """
    Drive the controller from a single line of operator input.

    Args:
        controller: Session state machine
        console: Console used for output
        image_width: Maximum image characters shown per row
        answer_reader: Blocking callable returning the operator's answer

    Returns:
        Terminal state reached by the session
    """
    console.print(f"Found {controller.total} auto-named container(s):")
    console.print(candidate_table(controller.candidates, image_width=image_width))
    console.print()

    # ^C here cancels the whole run before anything is removed
    answer = await run_detached(answer_reader or read_answer)

    if not is_confirmation(answer):
        controller.cancel()
        console.print(CANCELLED_TEXT)
        return controller.state

    removal = controller.confirm()
    if removal is not None:
        console.print(DELETING_TEXT)
        # ^C during the batch cancels the remaining removals but keeps the result
        with controller.remover.ctx.cancel_on_interrupt():
            result = await removal
        controller.handle_result(result)

    outcome = controller.outcome
    if outcome is None:
        raise AutonameCleanerError("Cleanup session finished without an outcome")
    console.print()
    console.print(outcome_text(outcome))
    for name in outcome.removed_names:
        console.print(f"  - {name}")
    if outcome.already_absent:
        logger.info(
            "Some containers were already gone",
            extra={"container_names": outcome.already_absent},
        )
    return controller.state
