"""Data models for Autoname Cleaner."""

from .containers import CandidateSet, CleanupOutcome, ContainerSummary

__all__ = ["CandidateSet", "CleanupOutcome", "ContainerSummary"]
