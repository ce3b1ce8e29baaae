"""Best-effort batch removal of cleanup candidates."""

from typing import List

from autoname_cleaner.context import CleanupContext
from autoname_cleaner.models.containers import CandidateSet, CleanupOutcome
from autoname_cleaner.utils import get_logger
from autoname_cleaner.utils.audit_logger import AuditEventType
from autoname_cleaner.utils.exceptions import (
    CleanupError,
    ContainerNotFoundError,
    RemovalError,
)

logger = get_logger(__name__)


class ContainerRemover:
    """Removes candidate containers one at a time, collecting every failure."""

    def __init__(self, ctx: CleanupContext) -> None:
        """
        Initialize container remover.

        Args:
            ctx: Cleanup context for this run
        """
        self.ctx = ctx

    async def remove_all(self, candidates: CandidateSet) -> CleanupOutcome:
        """
        Remove every candidate, in order, without stopping at failures.

        A container that vanished before its removal is not an error, but it is
        not reported as removed either.

        Args:
            candidates: Containers selected by discovery

        Returns:
            Outcome listing removed names and an aggregate of the failures
        """
        outcome = CleanupOutcome()
        failures: List[RemovalError] = []

        logger.info("Removing auto-named containers", extra={"count": len(candidates)})

        for container in candidates:
            name = container.primary_name
            try:
                await self.ctx.call(
                    f"remove container {name}",
                    self.ctx.runtime.remove_container,
                    container.id,
                    force=False,
                )
            except ContainerNotFoundError:
                # Removed concurrently by someone else
                outcome.already_absent.append(name)
                logger.info(
                    "Container already removed",
                    extra={"container_id": container.id, "container_name": name},
                )
                self.ctx.audit.log_event(
                    AuditEventType.CONTAINER_ALREADY_ABSENT,
                    container_id=container.id,
                    container_name=name,
                )
                continue
            except Exception as e:
                failures.append(RemovalError(container.id, name, e))
                logger.error(
                    "Failed to remove container",
                    extra={"container_id": container.id, "container_name": name, "error": str(e)},
                )
                self.ctx.audit.log_event(
                    AuditEventType.CONTAINER_REMOVE_FAILED,
                    container_id=container.id,
                    container_name=name,
                    details={"error": str(e)},
                )
                continue

            outcome.removed_names.append(name)
            logger.info(
                "Removed container",
                extra={"container_id": container.id, "container_name": name},
            )
            self.ctx.audit.log_event(
                AuditEventType.CONTAINER_REMOVED,
                container_id=container.id,
                container_name=name,
            )

        if failures:
            outcome.error = CleanupError(failures)

        logger.info(
            "Container removal completed",
            extra={
                "removed": len(outcome.removed_names),
                "already_absent": len(outcome.already_absent),
                "failed": len(failures),
            },
        )
        self.ctx.audit.log_event(
            AuditEventType.CLEANUP_COMPLETED,
            details={
                "removed": outcome.removed_names,
                "already_absent": outcome.already_absent,
                "failed": [failure.container_name for failure in failures],
            },
        )
        return outcome
