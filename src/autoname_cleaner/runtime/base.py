"""Capability interface every container runtime client must provide."""

from typing import List, Protocol, runtime_checkable

from autoname_cleaner.models.containers import ContainerSummary


@runtime_checkable
class RuntimeClient(Protocol):
    """Minimal runtime surface used by discovery and removal."""

    def list_containers(self, all: bool = True) -> List[ContainerSummary]:
        """
        List containers known to the runtime.

        Args:
            all: Include stopped containers

        Returns:
            Containers in the runtime's listing order

        Raises:
            DockerAPIError: If the runtime call fails
        """
        ...

    def remove_container(self, container_id: str, force: bool = False) -> None:
        """
        Remove one container.

        Args:
            container_id: Container ID
            force: Kill a running container before removing it

        Raises:
            ContainerNotFoundError: If the container no longer exists
            DockerAPIError: For any other runtime failure
        """
        ...

    def close(self) -> None:
        """Release the connection to the runtime."""
        ...
