"""Persistent registry of tracked paths."""

from pathtrack.registry.models import AddResult
from pathtrack.registry.store import PathRegistry

__all__ = ["AddResult", "PathRegistry"]
