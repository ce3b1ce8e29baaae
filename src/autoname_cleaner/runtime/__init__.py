"""Container runtime clients."""

from .base import RuntimeClient
from .docker_runtime import DockerRuntimeClient, open_runtime

__all__ = ["DockerRuntimeClient", "RuntimeClient", "open_runtime"]
