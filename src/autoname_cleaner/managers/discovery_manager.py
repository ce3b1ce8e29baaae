"""Discovery of containers that still carry a runtime-generated name."""

from autoname_cleaner.context import CleanupContext
from autoname_cleaner.models.containers import CandidateSet
from autoname_cleaner.utils import get_logger
from autoname_cleaner.utils.audit_logger import AuditEventType
from autoname_cleaner.utils.exceptions import DiscoveryError

logger = get_logger(__name__)


class ContainerDiscovery:
    """Finds cleanup candidates among all containers of the runtime."""

    def __init__(self, ctx: CleanupContext) -> None:
        """
        Initialize container discovery.

        Args:
            ctx: Cleanup context for this run
        """
        self.ctx = ctx

    async def find_candidates(self) -> CandidateSet:
        """
        List every container, stopped ones included, and keep the auto-named ones.

        Returns:
            Auto-named containers in the runtime's listing order

        Raises:
            DiscoveryError: If the runtime listing fails
        """
        try:
            containers = await self.ctx.call(
                "list containers", self.ctx.runtime.list_containers, all=True
            )
        except Exception as e:
            logger.error("Failed to list containers", extra={"error": str(e)})
            raise DiscoveryError(f"Failed to list containers: {e}", e) from e

        classifier = self.ctx.classifier
        candidates = tuple(
            container
            for container in containers
            if container.primary_name and classifier.is_auto_generated(container.primary_name)
        )

        logger.info(
            "Discovered auto-named containers",
            extra={"total": len(containers), "candidates": len(candidates)},
        )
        self.ctx.audit.log_event(
            AuditEventType.CLEANUP_DISCOVERED,
            details={
                "total": len(containers),
                "candidates": [container.primary_name for container in candidates],
            },
        )
        return candidates
