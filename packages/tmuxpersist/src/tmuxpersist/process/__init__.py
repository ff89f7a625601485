"""Process inspection for tmux-persist.

Resolves what each pane is running so the restore script can start it again.

PUBLIC API:
  - PsProcessTable: ps-backed ProcessTable
  - resolve_command: Foreground command for a pane's shell pid
  - resolve_panes: Resolve commands for many panes
"""

from .resolve import resolve_command, resolve_panes
from .table import PsProcessTable

__all__ = [
    "PsProcessTable",
    "resolve_command",
    "resolve_panes",
]
