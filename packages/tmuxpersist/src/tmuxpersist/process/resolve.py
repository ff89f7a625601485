"""Foreground command resolution for panes.

PUBLIC API:
  - resolve_command: Best-effort command currently running in a pane
  - resolve_panes: Resolve commands for a sequence of panes
"""

import logging
from typing import Iterable, List

from ..types import Pane, ProcessTable

logger = logging.getLogger(__name__)


def resolve_command(pid: int, table: ProcessTable) -> str:
    """Best-effort command currently running in a pane.

    Prefers a child of the pane's shell (the foreground program). Falls back
    to the shell itself with the login-shell dash removed.

    Args:
        pid: PID of the pane's shell process.
        table: Process table to query.

    Returns:
        Command line, or empty string when nothing could be found.
    """
    child = table.list_child_process(pid)
    if child:
        return child

    own = table.list_process(pid)
    if own.startswith("-"):
        own = own[1:]
    if not own:
        logger.debug(f"No command found for pid {pid}")
    return own


def resolve_panes(panes: Iterable[Pane], table: ProcessTable) -> List[Pane]:
    """Resolve commands for a sequence of panes, preserving order."""
    return [pane.with_command(resolve_command(pane.pid, table)) for pane in panes]
