"""Docker SDK implementation of the runtime client."""

from contextlib import contextmanager
from typing import Iterator, List

import docker
from docker import DockerClient
from docker.errors import DockerException, NotFound

from autoname_cleaner.config import Settings
from autoname_cleaner.models.containers import ContainerSummary
from autoname_cleaner.utils import get_logger
from autoname_cleaner.utils.exceptions import (
    ContainerNotFoundError,
    DockerAPIError,
    StartupError,
)

logger = get_logger(__name__)


class DockerRuntimeClient:
    """Runtime client backed by the Docker Engine API."""

    def __init__(self, client: DockerClient) -> None:
        """
        Initialize the runtime client.

        Args:
            client: Connected Docker SDK client
        """
        self._client = client

    @classmethod
    def connect(cls, settings: Settings) -> "DockerRuntimeClient":
        """
        Connect to the Docker daemon and verify it answers.

        Args:
            settings: Application settings

        Returns:
            DockerRuntimeClient instance

        Raises:
            StartupError: If unable to connect to Docker daemon
        """
        client: DockerClient | None = None
        try:
            if settings.docker_host:
                client = docker.DockerClient(
                    base_url=settings.docker_host, timeout=settings.docker_timeout_s
                )
            else:
                client = docker.from_env(timeout=settings.docker_timeout_s)

            # Test connection
            client.ping()
            logger.info(
                "Successfully connected to Docker daemon",
                extra={"docker_host": settings.docker_host or "environment"},
            )
        except DockerException as e:
            logger.error("Failed to connect to Docker daemon", extra={"error": str(e)})
            if client is not None:
                client.close()
            raise StartupError(f"Failed to connect to Docker daemon: {e}", e) from e

        return cls(client)

    def list_containers(self, all: bool = True) -> List[ContainerSummary]:
        """
        List containers through ``GET /containers/json``.

        Args:
            all: Include stopped containers

        Returns:
            Container summaries in daemon order

        Raises:
            DockerAPIError: If the listing call fails
        """
        try:
            entries = self._client.api.containers(all=all)
        except DockerException as e:
            logger.error("Docker API error listing containers", extra={"error": str(e)})
            raise DockerAPIError(f"Failed to list containers: {e}", e) from e

        return [ContainerSummary.from_api(entry) for entry in entries]

    def remove_container(self, container_id: str, force: bool = False) -> None:
        """
        Remove a container through ``DELETE /containers/{id}``.

        Args:
            container_id: Container ID
            force: Kill a running container before removing it

        Raises:
            ContainerNotFoundError: If the container is already gone
            DockerAPIError: If Docker operations fail
        """
        try:
            self._client.api.remove_container(container_id, force=force)
        except NotFound as e:
            raise ContainerNotFoundError(container_id, e) from e
        except DockerException as e:
            raise DockerAPIError(f"Failed to remove container: {e}", e) from e

        logger.debug("Docker container removed", extra={"docker_id": container_id})

    def close(self) -> None:
        """Close Docker client connection."""
        self._client.close()
        logger.info("Docker client connection closed")


@contextmanager
def open_runtime(settings: Settings) -> Iterator[DockerRuntimeClient]:
    """
    Connect to the Docker daemon for the lifetime of the block.

    The connection is closed on every exit path.

    Args:
        settings: Application settings

    Yields:
        Connected DockerRuntimeClient

    Raises:
        StartupError: If unable to connect to Docker daemon
    """
    runtime = DockerRuntimeClient.connect(settings)
    try:
        yield runtime
    finally:
        runtime.close()
