"""Confirmation state machine that drives one cleanup session."""

from enum import Enum
from typing import Coroutine, Optional, Tuple

from autoname_cleaner.managers.removal_manager import ContainerRemover
from autoname_cleaner.models.containers import CandidateSet, CleanupOutcome
from autoname_cleaner.utils import get_logger
from autoname_cleaner.utils.audit_logger import AuditEventType

logger = get_logger(__name__)

CONFIRMATION_ANSWERS = frozenset({"yes", "y"})


class CleanupState(str, Enum):
    """States of a cleanup session."""

    IDLE = "idle"
    DELETING = "deleting"
    DONE = "done"
    CANCELLED = "cancelled"


TERMINAL_STATES = frozenset({CleanupState.DONE, CleanupState.CANCELLED})


def is_confirmation(answer: str) -> bool:
    """Return True for a line-mode answer that confirms deletion."""
    return answer.strip().lower() in CONFIRMATION_ANSWERS


class CleanupController:
    """
    Finite-state machine for the confirm/cancel flow.

    ``IDLE --confirm--> DELETING --result--> DONE`` and
    ``IDLE --cancel--> CANCELLED``. Input outside ``IDLE`` is ignored, and
    nothing leaves a terminal state. The removal batch is the only
    asynchronous step: :meth:`confirm` hands the front end one coroutine to
    run, and the front end reports its result through :meth:`handle_result`.

    The controller also owns the scroll position of the windowed candidate
    view so both front ends share the same clamping rules.
    """

    def __init__(self, candidates: CandidateSet, remover: ContainerRemover) -> None:
        """
        Initialize the controller.

        Args:
            candidates: Candidate set produced by discovery
            remover: Remover used once the operator confirms
        """
        self.candidates = candidates
        self.remover = remover
        self.state = CleanupState.IDLE
        self.outcome: Optional[CleanupOutcome] = None
        self.window_size = max(1, len(candidates))
        self.scroll_pos = 0

    @property
    def total(self) -> int:
        return len(self.candidates)

    @property
    def finished(self) -> bool:
        return self.state in TERMINAL_STATES

    # Transitions

    def confirm(self) -> Optional[Coroutine[None, None, CleanupOutcome]]:
        """
        Accept the candidate list.

        Returns:
            The removal coroutine to dispatch, or None when there is nothing to
            run (not idle, or no candidates)
        """
        if self.state is not CleanupState.IDLE:
            logger.debug("Ignoring confirm", extra={"state": self.state.value})
            return None

        self.remover.ctx.audit.log_event(
            AuditEventType.CLEANUP_CONFIRMED, details={"candidates": self.total}
        )

        if not self.candidates:
            self.state = CleanupState.DONE
            self.outcome = CleanupOutcome()
            return None

        self.state = CleanupState.DELETING
        return self.remover.remove_all(self.candidates)

    def cancel(self) -> bool:
        """
        Decline the candidate list.

        Returns:
            True if the session moved to CANCELLED
        """
        if self.state is not CleanupState.IDLE:
            logger.debug("Ignoring cancel", extra={"state": self.state.value})
            return False

        self.state = CleanupState.CANCELLED
        self.remover.ctx.audit.log_event(
            AuditEventType.CLEANUP_CANCELLED, details={"candidates": self.total}
        )
        return True

    def handle_result(self, outcome: CleanupOutcome) -> None:
        """
        Record the result of the removal batch.

        Args:
            outcome: Outcome delivered by the dispatched removal
        """
        if self.state is not CleanupState.DELETING:
            logger.warning("Ignoring unexpected removal result", extra={"state": self.state.value})
            return

        self.state = CleanupState.DONE
        self.outcome = outcome

    # Windowed view

    @property
    def max_scroll(self) -> int:
        return max(0, self.total - self.window_size)

    @property
    def is_windowed(self) -> bool:
        return self.total > self.window_size

    def set_window_size(self, rows: int) -> None:
        """
        Set how many candidate rows fit on screen.

        Args:
            rows: Available rows (values below 1 are treated as 1)
        """
        self.window_size = max(1, rows)
        self.scroll_pos = min(self.scroll_pos, self.max_scroll)

    def scroll_up(self) -> None:
        if self.scroll_pos > 0:
            self.scroll_pos -= 1

    def scroll_down(self) -> None:
        if self.scroll_pos < self.max_scroll:
            self.scroll_pos += 1

    def visible_range(self) -> Tuple[int, int]:
        """Return the ``[start, end)`` slice of candidates currently shown."""
        end = min(self.scroll_pos + self.window_size, self.total)
        return self.scroll_pos, end
