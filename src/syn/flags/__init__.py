"""Command-line flag vocabulary and validation."""

from .model import ExistencePolicy, HelpRequested, ParsedArguments, PolicyFlags, VersionRequested
from .parser import parse_arguments, validate_flags, validate_operand_count

__all__ = [
    "ExistencePolicy",
    "HelpRequested",
    "ParsedArguments",
    "PolicyFlags",
    "VersionRequested",
    "parse_arguments",
    "validate_flags",
    "validate_operand_count",
]
