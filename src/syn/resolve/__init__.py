"""Operand-to-path resolution."""

from .model import ExistenceOutcome, Resolved, SkippedMissing
from .resolver import normalize_path, resolve_operand, resolve_paths

__all__ = [
    "ExistenceOutcome",
    "Resolved",
    "SkippedMissing",
    "normalize_path",
    "resolve_operand",
    "resolve_paths",
]
