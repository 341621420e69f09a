"""
Start the external viewers with resolved paths.

Both applications are opaque: they get a list of path arguments (plus the
compare switch for a two-file diff) and their output is discarded.
"""

from __future__ import annotations

import subprocess
from typing import Callable, List, Optional, Sequence

from ..config import Settings
from ..errors import LaunchError
from ..flags.model import PolicyFlags
from ..logging import get_logger

logger = get_logger(__name__)

Runner = Callable[..., subprocess.CompletedProcess]


class Launcher:
    def __init__(self, settings: Optional[Settings] = None, runner: Runner = subprocess.run) -> None:
        self.settings = settings or Settings()
        self._runner = runner

    def launch(self, flags: PolicyFlags, paths: Sequence[str]) -> None:
        """Open ``paths`` in the application(s) selected by ``flags``."""
        if flags.compare:
            self.compare(paths)
        elif flags.hexf_only:
            self.open_hex_viewer(paths)
        else:
            self.open_structure_analyzer(paths)
            if flags.hexf_also:
                self.open_hex_viewer(paths)

    def compare(self, paths: Sequence[str]) -> None:
        if len(paths) != 2:
            raise ValueError(f"compare needs exactly two paths, got {len(paths)}")
        self._run(self.settings.hex_viewer, [self.settings.compare_flag, *paths])

    def open_hex_viewer(self, paths: Sequence[str]) -> None:
        # The hex viewer needs a document name to open an empty window.
        args = list(paths) if paths else [self.settings.untitled_name]
        self._run(self.settings.hex_viewer, args)

    def open_structure_analyzer(self, paths: Sequence[str]) -> None:
        """Run the analyzer, re-running it while it exits unsuccessfully."""
        executable = self.settings.structure_analyzer
        attempts = self.settings.analyzer_attempts
        for attempt in range(1, attempts + 1):
            result = self._run(executable, list(paths))
            if result.returncode == 0:
                return
            logger.warning(f"'{executable}' exited with status {result.returncode} (attempt {attempt}/{attempts})")
        raise LaunchError(f"'{executable}' did not start successfully after {attempts} attempt(s).", executable)

    def _run(self, executable: str, args: List[str]) -> subprocess.CompletedProcess:
        command = [executable, *args]
        logger.debug(f"Running {command}")
        try:
            result = self._runner(command, capture_output=True, check=False)
        except OSError as exc:
            raise LaunchError(
                f"Maybe '{executable}' is not installed? "
                f"Make sure it is installed and available in the $PATH. {exc}",
                executable,
            ) from exc
        if result.stdout or result.stderr:
            logger.debug(f"'{executable}' output: {result.stdout!r} {result.stderr!r}")
        return result
