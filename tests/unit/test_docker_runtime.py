"""Tests for the Docker SDK runtime client."""

from unittest.mock import MagicMock, patch

import pytest
from docker.errors import APIError, DockerException, NotFound

from autoname_cleaner.config import Settings
from autoname_cleaner.runtime import DockerRuntimeClient, RuntimeClient, open_runtime
from autoname_cleaner.utils.exceptions import (
    ContainerNotFoundError,
    DockerAPIError,
    StartupError,
)


@pytest.fixture
def mock_docker_client():
    """Create mock Docker client."""
    return MagicMock()


def test_docker_runtime_satisfies_protocol(mock_docker_client):
    assert isinstance(DockerRuntimeClient(mock_docker_client), RuntimeClient)


def test_list_containers_maps_api_entries(mock_docker_client):
    """Test that raw API entries become ContainerSummary objects in order."""
    mock_docker_client.api.containers.return_value = [
        {"Id": "abc", "Names": ["/inspiring_franklin"], "Image": "alpine:latest"},
        {"Id": "def", "Names": None, "Image": None},
    ]
    runtime = DockerRuntimeClient(mock_docker_client)

    containers = runtime.list_containers(all=True)

    mock_docker_client.api.containers.assert_called_once_with(all=True)
    assert [c.id for c in containers] == ["abc", "def"]
    assert containers[0].primary_name == "inspiring_franklin"
    assert containers[0].image == "alpine:latest"
    assert containers[1].names == ()
    assert containers[1].primary_name == ""


def test_list_containers_wraps_docker_errors(mock_docker_client):
    mock_docker_client.api.containers.side_effect = APIError("server error")
    runtime = DockerRuntimeClient(mock_docker_client)

    with pytest.raises(DockerAPIError) as exc_info:
        runtime.list_containers()

    assert isinstance(exc_info.value.original_error, APIError)


def test_remove_container_passes_force_flag(mock_docker_client):
    runtime = DockerRuntimeClient(mock_docker_client)

    runtime.remove_container("abc")

    mock_docker_client.api.remove_container.assert_called_once_with("abc", force=False)


def test_remove_container_not_found(mock_docker_client):
    """Test that Docker's 404 is distinguishable from other failures."""
    mock_docker_client.api.remove_container.side_effect = NotFound("No such container")
    runtime = DockerRuntimeClient(mock_docker_client)

    with pytest.raises(ContainerNotFoundError) as exc_info:
        runtime.remove_container("abc")

    assert exc_info.value.identifier == "abc"


def test_remove_container_other_failure(mock_docker_client):
    mock_docker_client.api.remove_container.side_effect = APIError("conflict")
    runtime = DockerRuntimeClient(mock_docker_client)

    with pytest.raises(DockerAPIError) as exc_info:
        runtime.remove_container("abc")

    assert not isinstance(exc_info.value, ContainerNotFoundError)


def test_connect_uses_environment_by_default():
    settings = Settings(_env_file=None, docker_timeout_s=5)
    client = MagicMock()

    with patch(
        "autoname_cleaner.runtime.docker_runtime.docker.from_env", return_value=client
    ) as mock_from_env:
        runtime = DockerRuntimeClient.connect(settings)

    mock_from_env.assert_called_once_with(timeout=5)
    client.ping.assert_called_once()
    assert isinstance(runtime, DockerRuntimeClient)


def test_connect_uses_configured_host():
    settings = Settings(_env_file=None, docker_host="tcp://docker:2375")
    client = MagicMock()

    with patch(
        "autoname_cleaner.runtime.docker_runtime.docker.DockerClient", return_value=client
    ) as mock_client_cls:
        DockerRuntimeClient.connect(settings)

    mock_client_cls.assert_called_once_with(base_url="tcp://docker:2375", timeout=60)


def test_connect_failure_raises_startup_error():
    """Test that an unreachable daemon is reported as StartupError."""
    settings = Settings(_env_file=None)

    with patch(
        "autoname_cleaner.runtime.docker_runtime.docker.from_env",
        side_effect=DockerException("Error while fetching server API version"),
    ):
        with pytest.raises(StartupError):
            DockerRuntimeClient.connect(settings)


def test_connect_closes_client_when_ping_fails():
    settings = Settings(_env_file=None)
    client = MagicMock()
    client.ping.side_effect = APIError("unavailable")

    with patch("autoname_cleaner.runtime.docker_runtime.docker.from_env", return_value=client):
        with pytest.raises(StartupError):
            DockerRuntimeClient.connect(settings)

    client.close.assert_called_once()


def test_open_runtime_closes_on_error():
    """Test that the client is released even when the block fails."""
    settings = Settings(_env_file=None)
    client = MagicMock()

    with patch("autoname_cleaner.runtime.docker_runtime.docker.from_env", return_value=client):
        with pytest.raises(RuntimeError):
            with open_runtime(settings):
                raise RuntimeError("boom")

    client.close.assert_called_once()
