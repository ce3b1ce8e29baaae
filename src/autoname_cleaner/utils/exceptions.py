"""Custom exceptions for Autoname Cleaner."""

from typing import Sequence


class AutonameCleanerError(Exception):
    """Base exception for Autoname Cleaner errors."""

    pass


class StartupError(AutonameCleanerError):
    """Exception raised when the container runtime cannot be reached at startup."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        """
        Initialize StartupError.

        Args:
            message: Error message
            original_error: Original exception from the runtime client
        """
        self.original_error = original_error
        super().__init__(message)


class DockerAPIError(AutonameCleanerError):
    """Exception raised when Docker API calls fail."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        """
        Initialize DockerAPIError.

        Args:
            message: Error message
            original_error: Original exception from Docker
        """
        self.original_error = original_error
        super().__init__(message)


class ContainerNotFoundError(DockerAPIError):
    """Exception raised when a container no longer exists in the runtime."""

    def __init__(self, identifier: str, original_error: Exception | None = None) -> None:
        """
        Initialize ContainerNotFoundError.

        Args:
            identifier: Container ID that was not found
            original_error: Original exception from Docker
        """
        self.identifier = identifier
        super().__init__(f"Container not found: {identifier}", original_error)


class OperationCancelledError(AutonameCleanerError):
    """Exception raised when a runtime call is abandoned because the run was cancelled."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Operation cancelled: {operation}")


class DiscoveryError(AutonameCleanerError):
    """Exception raised when listing the runtime's containers fails."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        """
        Initialize DiscoveryError.

        Args:
            message: Error message
            original_error: Original exception raised by the listing call
        """
        self.original_error = original_error
        super().__init__(message)


class RemovalError(AutonameCleanerError):
    """Exception describing a single container that could not be removed."""

    def __init__(
        self, container_id: str, container_name: str, original_error: Exception
    ) -> None:
        """
        Initialize RemovalError.

        Args:
            container_id: ID of the container that failed to be removed
            container_name: Primary name of that container
            original_error: Exception raised by the removal call
        """
        self.container_id = container_id
        self.container_name = container_name
        self.original_error = original_error
        super().__init__(
            f"failed to remove container {container_name} ({container_id}): {original_error}"
        )


class CleanupError(AutonameCleanerError):
    """Aggregate of every removal failure in one cleanup batch."""

    def __init__(self, failures: Sequence[RemovalError]) -> None:
        """
        Initialize CleanupError.

        Args:
            failures: Per-container failures, in attempt order
        """
        self.failures = list(failures)
        super().__init__("; ".join(str(failure) for failure in self.failures))

    @property
    def failed_names(self) -> list[str]:
        """Primary names of the containers that failed, in attempt order."""
        return [failure.container_name for failure in self.failures]
