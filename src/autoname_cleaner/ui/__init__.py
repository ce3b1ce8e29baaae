"""Operator-facing front ends."""

from .app import CleanupApp
from .prompt import run_prompt_session

__all__ = ["CleanupApp", "run_prompt_session"]
