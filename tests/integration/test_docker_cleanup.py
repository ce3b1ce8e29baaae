"""Integration tests for discovery and removal with real Docker."""

import random

import docker
import pytest
from docker.errors import DockerException, ImageNotFound

from autoname_cleaner.config import Settings
from autoname_cleaner.context import CleanupContext
from autoname_cleaner.managers import ContainerDiscovery, ContainerRemover
from autoname_cleaner.runtime import DockerRuntimeClient
from autoname_cleaner.utils.exceptions import StartupError

pytestmark = pytest.mark.integration

IMAGE = "alpine:latest"


@pytest.fixture(scope="module")
def docker_client():
    """Real Docker client, or skip when no daemon is reachable."""
    try:
        client = docker.from_env()
        client.ping()
    except DockerException as e:
        pytest.skip(f"Docker daemon not available: {e}")
    try:
        client.images.get(IMAGE)
    except ImageNotFound:
        client.images.pull(IMAGE)
    yield client
    client.close()


@pytest.fixture
def runtime(docker_client):
    try:
        runtime = DockerRuntimeClient.connect(Settings(_env_file=None))
    except StartupError as e:
        pytest.skip(str(e))
    yield runtime
    runtime.close()


@pytest.fixture
def created(docker_client):
    """Create one auto-named and one custom-named stopped container."""
    suffix = random.randint(1000, 9999)
    auto = docker_client.containers.create(IMAGE, name=f"focused_hopper{suffix}")
    custom = docker_client.containers.create(IMAGE, name=f"custom-app-{suffix}")
    yield auto, custom
    for container in (auto, custom):
        try:
            container.remove(force=True)
        except DockerException:
            pass  # Ignore cleanup errors in test teardown


@pytest.mark.asyncio
async def test_discovers_stopped_auto_named_container(runtime, created):
    """Test that stopped containers are listed and only auto names are kept."""
    auto, custom = created
    ctx = CleanupContext.create(runtime, Settings(_env_file=None))

    candidates = await ContainerDiscovery(ctx).find_candidates()

    ids = {candidate.id for candidate in candidates}
    assert auto.id in ids
    assert custom.id not in ids


@pytest.mark.asyncio
async def test_removes_candidate_and_reports_gone_container(runtime, docker_client, created):
    """Test removal, then that a second attempt counts the container as absent."""
    auto, _ = created
    ctx = CleanupContext.create(runtime, Settings(_env_file=None))
    candidates = tuple(
        candidate
        for candidate in await ContainerDiscovery(ctx).find_candidates()
        if candidate.id == auto.id
    )
    remover = ContainerRemover(ctx)

    outcome = await remover.remove_all(candidates)

    assert outcome.removed_names == [auto.name]
    assert outcome.error is None
    assert auto.id not in {c["Id"] for c in docker_client.api.containers(all=True)}

    again = await remover.remove_all(candidates)

    assert again.removed_names == []
    assert again.already_absent == [auto.name]
    assert again.error is None
