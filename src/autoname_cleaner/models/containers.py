"""Container data models shared by discovery, removal and presentation."""

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

from autoname_cleaner.utils.exceptions import CleanupError


@dataclass(frozen=True)
class ContainerSummary:
    """Read-only view of one container as reported by the runtime."""

    id: str
    names: Tuple[str, ...] = ()
    image: str = ""

    @property
    def primary_name(self) -> str:
        """First reported name without Docker's leading '/' (empty if unnamed)."""
        if not self.names:
            return ""
        return self.names[0].lstrip("/")

    @classmethod
    def from_api(cls, entry: dict[str, Any]) -> "ContainerSummary":
        """
        Build a summary from a Docker Engine ``GET /containers/json`` entry.

        Args:
            entry: Raw container entry with ``Id``, ``Names`` and ``Image`` keys

        Returns:
            ContainerSummary instance
        """
        return cls(
            id=entry["Id"],
            names=tuple(entry.get("Names") or ()),
            image=entry.get("Image") or "",
        )


CandidateSet = Tuple[ContainerSummary, ...]


@dataclass
class CleanupOutcome:
    """Result of one confirmed cleanup batch."""

    removed_names: list[str] = field(default_factory=list)
    already_absent: list[str] = field(default_factory=list)
    error: Optional[CleanupError] = None

    @property
    def succeeded(self) -> bool:
        """True when every attempt either removed the container or found it gone."""
        return self.error is None
