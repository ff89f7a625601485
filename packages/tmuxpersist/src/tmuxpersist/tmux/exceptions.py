"""Tmux-specific exceptions.

PUBLIC API:
  - TmuxError: Base exception for all tmux operations
  - QueryError: A tmux listing command failed or timed out
  - ParseError: A tmux listing returned a malformed record
"""


class TmuxError(Exception):
    """Base exception for all tmux operations."""

    pass


class QueryError(TmuxError):
    """Raised when a tmux query cannot be run or exits non-zero."""

    pass


class ParseError(TmuxError):
    """Raised when tmux output does not match the requested format.

    Attributes:
        line: The offending output line.
    """

    def __init__(self, message: str, line: str = ""):
        super().__init__(message)
        self.line = line
