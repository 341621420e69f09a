"""
Terminal outcomes of one invocation.

The core never exits the process. It returns one of these values and the CLI
decides what to print and which exit code to use.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Union

from .flags.model import HelpRequested, PolicyFlags, VersionRequested


@dataclass(frozen=True)
class Success:
    flags: PolicyFlags
    paths: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ConfigurationFailure:
    message: str


@dataclass(frozen=True)
class ResolutionFailure:
    message: str
    path: str
    permission_denied: bool = False


Outcome = Union[Success, ConfigurationFailure, ResolutionFailure, HelpRequested, VersionRequested]
