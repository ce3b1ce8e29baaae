"""Manager modules for cleanup logic."""

from .cleanup_controller import CleanupController, CleanupState, is_confirmation
from .discovery_manager import ContainerDiscovery
from .removal_manager import ContainerRemover

__all__ = [
    "CleanupController",
    "CleanupState",
    "ContainerDiscovery",
    "ContainerRemover",
    "is_confirmation",
]
