"""
Path resolution against the active existence policy.

Each operand is normalized to an absolute path and probed by opening it for
read+write access. The probe handle is closed before the next operand is
looked at. Operands are processed strictly in input order.
"""

from __future__ import annotations

import os
from typing import Iterable, List

from ..errors import PermissionDeniedError, ResolutionError
from ..flags.model import ExistencePolicy, PolicyFlags
from ..logging import get_logger
from .model import ExistenceOutcome, Resolved, SkippedMissing

logger = get_logger(__name__)


def normalize_path(raw: str, base_directory: str) -> str:
    """Return ``raw`` unchanged if absolute, otherwise joined onto ``base_directory``."""
    if raw.startswith(os.sep):
        return raw
    return os.path.join(base_directory, raw)


def _probe(path: str, create: bool) -> None:
    flags = os.O_RDWR
    if create:
        flags |= os.O_CREAT
    fd = os.open(path, flags, 0o644)
    os.close(fd)


def _reason(exc: OSError) -> str:
    return exc.strerror or str(exc)


def resolve_operand(raw: str, base_directory: str, flags: PolicyFlags) -> ExistenceOutcome:
    """
    Resolve one operand.

    Returns Resolved or SkippedMissing. Raises PermissionDeniedError whenever
    access is refused, and ResolutionError when the policy does not allow the
    file to be missing or creating it fails.
    """
    path = normalize_path(raw, base_directory)
    policy = flags.existence_policy
    try:
        _probe(path, create=policy is ExistencePolicy.CREATE)
    except PermissionError as exc:
        raise PermissionDeniedError(
            f"Permission denied: '{path}' cannot be opened for reading and writing.",
            path,
        ) from exc
    except OSError as exc:
        if policy is ExistencePolicy.SKIP:
            logger.debug(f"Skipping missing file {path}: {_reason(exc)}")
            return SkippedMissing(path)
        raise ResolutionError(f"Failed to load '{path}'. {_reason(exc)}", path) from exc

    logger.debug(f"Resolved {path} ({policy.value})")
    return Resolved(path)


def resolve_paths(operands: Iterable[str], base_directory: str, flags: PolicyFlags) -> List[str]:
    """Resolve all operands in order, dropping the ones soft-strict skips."""
    paths: List[str] = []
    for raw in operands:
        outcome = resolve_operand(raw, base_directory, flags)
        if isinstance(outcome, Resolved):
            paths.append(outcome.path)
    return paths
