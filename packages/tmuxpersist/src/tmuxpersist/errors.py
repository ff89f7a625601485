"""Errors raised outside the tmux layer.

PUBLIC API:
  - PersistError: Base exception for tmux-persist
  - ConfigError: Configuration file could not be loaded
  - WriteError: Restore script could not be written
"""

from pathlib import Path


class PersistError(Exception):
    """Base exception for tmux-persist."""

    pass


class ConfigError(PersistError):
    """Raised when the configuration file is malformed."""

    pass


class WriteError(PersistError):
    """Raised when a restore script cannot be written.

    Attributes:
        path: Destination that failed.
    """

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path
