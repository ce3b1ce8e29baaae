"""Structured audit logging for cleanup operations."""

import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from autoname_cleaner.utils.logging import get_logger


class AuditEventType(str, Enum):
    """Types of audit events."""

    # Session events
    CLEANUP_DISCOVERED = "cleanup_discovered"
    CLEANUP_CONFIRMED = "cleanup_confirmed"
    CLEANUP_CANCELLED = "cleanup_cancelled"
    CLEANUP_COMPLETED = "cleanup_completed"

    # Container events
    CONTAINER_REMOVED = "container_removed"
    CONTAINER_ALREADY_ABSENT = "container_already_absent"
    CONTAINER_REMOVE_FAILED = "container_remove_failed"


class AuditLogger:
    """Structured audit logger for tracking every destructive decision."""

    def __init__(self, enabled: bool = True):
        """
        Initialize the audit logger.

        Args:
            enabled: Whether events are emitted at all
        """
        self.enabled = enabled
        self._logger = get_logger("audit")
        # Audit events must survive the default WARNING level
        self._logger.setLevel(logging.INFO)

    def log_event(
        self,
        event_type: AuditEventType,
        container_id: Optional[str] = None,
        container_name: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Log an audit event.

        Args:
            event_type: Type of event being logged
            container_id: Container ID if relevant
            container_name: Primary container name if relevant
            details: Additional event-specific details
        """
        if not self.enabled:
            return

        event: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "event_type": event_type.value,
        }

        if container_id:
            event["container_id"] = container_id
        if container_name:
            event["container_name"] = container_name
        if details:
            event["details"] = details

        self._logger.info("audit_event", extra=event)
