"""Configuration error classes."""

from pathlib import Path
from typing import Optional


class ConfigError(Exception):
    """Raised when an explicitly requested config file cannot be loaded.

    Attributes:
        path: The config file that failed to load.
        reason: Description of what went wrong.
    """

    def __init__(self, message: str, path: Optional[Path] = None, reason: Optional[str] = None):
        super().__init__(message)
        self.path = path
        self.reason = reason
