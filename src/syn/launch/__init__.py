"""External application launcher."""

from .launcher import Launcher

__all__ = ["Launcher"]
