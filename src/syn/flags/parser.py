"""Split raw command-line tokens into policy flags and path operands."""

from __future__ import annotations

from typing import Dict, Iterable, List, Union

from .. import __version__
from ..errors import ConfigurationError
from ..logging import get_logger
from .model import HelpRequested, ParsedArguments, PolicyFlags, VersionRequested

logger = get_logger(__name__)

HELP_TOKENS = frozenset({"-h", "--help"})
VERSION_TOKENS = frozenset({"-v", "--version"})

# token -> PolicyFlags field
FLAG_TOKENS: Dict[str, str] = {
    "-s": "strict",
    "--strict": "strict",
    "-ss": "soft_strict",
    "--soft-strict": "soft_strict",
    "-c": "compare",
    "--compare": "compare",
    "-x": "hexf_also",
    "--hexf": "hexf_also",
    "-xo": "hexf_only",
    "--hexf-only": "hexf_only",
}

COMPARE_CONFLICT = "Invalid input: '-c', '--compare' flag works only with '-ss' flag."
HEXF_CONFLICT = "Invalid input: Can't use both flags '-x' and '-xo'"
STRICT_CONFLICT = "Invalid input: Can't use both flags '-s' and '-ss'"
COMPARE_COUNT = "Invalid input: '-c', '--compare' requires two files."


def is_flag_token(token: str) -> bool:
    return token.startswith("-")


def parse_arguments(
    tokens: Iterable[str],
) -> Union[ParsedArguments, HelpRequested, VersionRequested]:
    """
    Scan tokens left to right.

    Help and version stop the scan as soon as they are seen. Flag-shaped
    tokens outside the vocabulary are dropped without complaint; everything
    else is an operand, kept in input order.
    """
    enabled = set()
    operands: List[str] = []

    for token in tokens:
        if not is_flag_token(token):
            operands.append(token)
            continue
        if token in HELP_TOKENS:
            return HelpRequested()
        if token in VERSION_TOKENS:
            return VersionRequested(version=__version__)
        name = FLAG_TOKENS.get(token)
        if name is None:
            logger.debug(f"Ignoring unrecognized option {token!r}")
            continue
        enabled.add(name)

    flags = PolicyFlags(**{name: True for name in enabled})
    return ParsedArguments(flags=flags, operands=operands)


def validate_flags(flags: PolicyFlags) -> None:
    """Raise ConfigurationError if the flags combine illegally."""
    if flags.compare and (flags.hexf_only or flags.hexf_also or flags.strict):
        raise ConfigurationError(COMPARE_CONFLICT)
    if flags.hexf_also and flags.hexf_only:
        raise ConfigurationError(HEXF_CONFLICT)
    if flags.strict and flags.soft_strict:
        raise ConfigurationError(STRICT_CONFLICT)


def validate_operand_count(flags: PolicyFlags, operands: List[str]) -> None:
    # Compare never skips an operand, so the operand count is the resolved count.
    if flags.compare and len(operands) != 2:
        raise ConfigurationError(COMPARE_COUNT)
