"""
Policy flag models.

PolicyFlags is built once per invocation from the argument vector and never
mutated afterwards. The existence policy used by the resolver is derived from
it rather than re-computed from the individual booleans at each call site.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class ExistencePolicy(Enum):
    """What the resolver does with an operand whose file is missing."""
    CREATE = "create"     # create an empty file, then resolve
    REQUIRE = "require"   # missing file is fatal
    SKIP = "skip"         # drop the operand silently


@dataclass(frozen=True)
class PolicyFlags:
    compare: bool = False
    strict: bool = False
    soft_strict: bool = False
    hexf_only: bool = False
    hexf_also: bool = False

    @property
    def existence_policy(self) -> ExistencePolicy:
        """
        Map the flag combination to an existence policy.

        Compare is strict unless soft-strict is also set, in which case missing
        files are created rather than skipped.
        """
        if self.compare:
            return ExistencePolicy.CREATE if self.soft_strict else ExistencePolicy.REQUIRE
        if self.strict:
            return ExistencePolicy.REQUIRE
        if self.soft_strict:
            return ExistencePolicy.SKIP
        return ExistencePolicy.CREATE


@dataclass(frozen=True)
class ParsedArguments:
    """Flags and path operands split out of the raw argument vector."""
    flags: PolicyFlags
    operands: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class HelpRequested:
    pass


@dataclass(frozen=True)
class VersionRequested:
    version: str
