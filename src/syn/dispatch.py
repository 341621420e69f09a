from __future__ import annotations

from typing import Iterable

from .errors import ConfigurationError, PermissionDeniedError, ResolutionError
from .flags import ParsedArguments, parse_arguments, validate_flags, validate_operand_count
from .logging import get_logger
from .outcome import ConfigurationFailure, Outcome, ResolutionFailure, Success
from .resolve import resolve_paths

logger = get_logger(__name__)


def evaluate(tokens: Iterable[str], base_directory: str) -> Outcome:
    """
    Parse ``tokens`` and resolve their operands relative to ``base_directory``.

    Flag combinations and the compare file count are validated before any
    filesystem access. Resolution is all-or-nothing except for the operands
    soft-strict drops.
    """
    parsed = parse_arguments(tokens)
    if not isinstance(parsed, ParsedArguments):
        return parsed

    flags = parsed.flags
    try:
        validate_flags(flags)
        validate_operand_count(flags, parsed.operands)
    except ConfigurationError as exc:
        return ConfigurationFailure(str(exc))

    logger.debug(f"Resolving {len(parsed.operands)} operand(s) with policy {flags.existence_policy.value}")
    try:
        paths = resolve_paths(parsed.operands, base_directory, flags)
    except ResolutionError as exc:
        return ResolutionFailure(
            str(exc), exc.path, permission_denied=isinstance(exc, PermissionDeniedError)
        )

    return Success(flags=flags, paths=paths)
