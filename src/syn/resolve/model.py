from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Resolved:
    """Operand whose file exists (or was just created) at ``path``."""
    path: str


@dataclass(frozen=True)
class SkippedMissing:
    """Operand dropped under soft-strict because ``path`` does not exist."""
    path: str


ExistenceOutcome = Union[Resolved, SkippedMissing]
