"""Pure tmux queries - read-only access to sessions and panes.

PUBLIC API:
  - run_tmux: Run tmux command and return result
  - list_sessions: List session names
  - list_panes: List panes of a session
  - parse_pane_line: Parse one list-panes record
  - TmuxClient: Subprocess-backed MultiplexerClient
  - TmuxError: Base exception for tmux operations
  - QueryError: tmux query failed
  - ParseError: tmux output malformed
"""

from .core import run_tmux
from .client import TmuxClient
from .exceptions import TmuxError, QueryError, ParseError
from .pane import list_panes, parse_pane_line
from .session import list_sessions

__all__ = [
    "run_tmux",
    "list_sessions",
    "list_panes",
    "parse_pane_line",
    "TmuxClient",
    "TmuxError",
    "QueryError",
    "ParseError",
]
