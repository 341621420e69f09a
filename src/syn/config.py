from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass
class Settings:
    hex_viewer: str = "hexf"
    structure_analyzer: str = "synalyze"
    untitled_name: str = "Untitled"
    compare_flag: str = "-d"
    analyzer_attempts: int = 3

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        """Build settings, applying ``SYN_*`` environment overrides."""
        env = os.environ if environ is None else environ
        settings = cls()

        hex_viewer = env.get("SYN_HEX_VIEWER")
        if hex_viewer:
            settings.hex_viewer = hex_viewer

        analyzer = env.get("SYN_STRUCTURE_ANALYZER")
        if analyzer:
            settings.structure_analyzer = analyzer

        attempts = env.get("SYN_ANALYZER_ATTEMPTS")
        if attempts:
            try:
                value = int(attempts)
            except ValueError:
                value = 0
            if value > 0:
                settings.analyzer_attempts = value

        return settings
