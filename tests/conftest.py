"""Test configuration and fixtures."""

import os
import signal
import threading
from typing import Callable, Dict, Iterable, List, Optional

import pytest

from autoname_cleaner.config import Settings
from autoname_cleaner.context import CleanupContext
from autoname_cleaner.models.containers import ContainerSummary


class FakeRuntimeClient:
    """In-memory runtime client recording every call."""

    def __init__(
        self,
        containers: Optional[Iterable[ContainerSummary]] = None,
        remove_errors: Optional[Dict[str, Exception]] = None,
        list_error: Optional[Exception] = None,
    ) -> None:
        self.containers = list(containers or [])
        self.remove_errors = dict(remove_errors or {})
        self.list_error = list_error
        self.list_calls: List[bool] = []
        self.removed_ids: List[str] = []
        self.force_flags: List[bool] = []
        self.closed = False

    def list_containers(self, all: bool = True) -> List[ContainerSummary]:
        self.list_calls.append(all)
        if self.list_error is not None:
            raise self.list_error
        return list(self.containers)

    def remove_container(self, container_id: str, force: bool = False) -> None:
        self.removed_ids.append(container_id)
        self.force_flags.append(force)
        error = self.remove_errors.get(container_id)
        if error is not None:
            raise error

    def close(self) -> None:
        self.closed = True


class InterruptingRuntimeClient(FakeRuntimeClient):
    """Fake runtime that sends SIGINT to this process while removing one container."""

    def __init__(self, containers: Iterable[ContainerSummary], interrupt_id: str) -> None:
        super().__init__(containers)
        self.interrupt_id = interrupt_id
        self.release = threading.Event()

    def remove_container(self, container_id: str, force: bool = False) -> None:
        super().remove_container(container_id, force=force)
        if container_id == self.interrupt_id:
            os.kill(os.getpid(), signal.SIGINT)
            self.release.wait(timeout=5)


def summary(container_id: str, *names: str, image: str = "alpine:latest") -> ContainerSummary:
    """Build a ContainerSummary the way the Docker API reports it."""
    return ContainerSummary(id=container_id, names=tuple(names), image=image)


@pytest.fixture
def settings() -> Settings:
    """Default settings, independent of the caller's environment."""
    return Settings(_env_file=None)


@pytest.fixture
def make_ctx(settings) -> Callable[[FakeRuntimeClient], CleanupContext]:
    """Factory for cleanup contexts around a fake runtime."""

    def factory(runtime: FakeRuntimeClient) -> CleanupContext:
        return CleanupContext.create(runtime, settings)

    return factory
