"""Pane queries - capture every pane of a session.

PUBLIC API:
  - PANE_FORMAT: list-panes format string used for capture
  - parse_pane_line: Parse one list-panes record into a Pane
  - list_panes: List all panes across all windows of a session
"""

import logging
from typing import List, Optional

from .core import DEFAULT_TIMEOUT, run_tmux
from .exceptions import ParseError, QueryError
from ..types import PANE_FIELD_COUNT, Pane

logger = logging.getLogger(__name__)

# Tab-delimited so window names and paths with spaces survive the split
PANE_FORMAT = "\t".join(
    [
        "#{window_index}",
        "#{pane_index}",
        "#{window_width}",
        "#{window_height}",
        "#{pane_width}",
        "#{pane_height}",
        "#{window_name}",
        "#{pane_current_path}",
        "#{pane_pid}",
    ]
)

_NUMERIC_FIELDS = ("window_index", "pane_index", "window_width", "window_height", "pane_width", "pane_height")


def _parse_int(name: str, value: str, line: str) -> int:
    if not (value.isascii() and value.isdigit()):
        raise ParseError(f"Field {name} is not a non-negative integer: {value!r}", line)
    return int(value)


def parse_pane_line(line: str) -> Pane:
    """Parse one list-panes record into a Pane.

    Args:
        line: A single line produced with PANE_FORMAT.

    Returns:
        Pane with an empty command.

    Raises:
        ParseError: If the field count is wrong or a numeric field is invalid.
    """
    parts = line.split("\t")
    if len(parts) != PANE_FIELD_COUNT:
        raise ParseError(f"Expected {PANE_FIELD_COUNT} fields, got {len(parts)}", line)

    numbers = {name: _parse_int(name, value, line) for name, value in zip(_NUMERIC_FIELDS, parts[:6])}
    window_name, cwd, pid = parts[6], parts[7], parts[8]

    return Pane(
        window_name=window_name,
        cwd=cwd,
        pid=_parse_int("pid", pid, line),
        **numbers,
    )


def list_panes(session: str, timeout: Optional[float] = DEFAULT_TIMEOUT, binary: str = "tmux") -> List[Pane]:
    """List all panes across all windows of a session.

    Args:
        session: Session name.
        timeout: Seconds to wait for tmux.
        binary: Name or path of the tmux executable.

    Returns:
        Panes in tmux order, window-major then pane-minor.

    Raises:
        QueryError: If tmux fails.
        ParseError: If any record is malformed.
    """
    code, out, err = run_tmux(
        ["list-panes", "-s", "-t", f"={session}", "-F", PANE_FORMAT],
        timeout=timeout,
        binary=binary,
    )
    if code != 0:
        raise QueryError(f"Failed to list panes for {session}: {err.strip() or f'exit code {code}'}")

    panes = [parse_pane_line(line) for line in out.split("\n") if line]
    logger.debug(f"Session {session}: {len(panes)} panes")
    return panes
