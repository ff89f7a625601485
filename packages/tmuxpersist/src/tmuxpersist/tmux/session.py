"""Session queries for tmux.

PUBLIC API:
  - list_sessions: Get all tmux session names
"""

import logging
from typing import List, Optional

from .core import DEFAULT_TIMEOUT, run_tmux
from .exceptions import QueryError

logger = logging.getLogger(__name__)

# stderr fragments tmux prints when there is simply nothing running
_NO_SERVER_MARKERS = ("no server running", "no sessions")

# socket errors that also mean no server is listening
_DEAD_SOCKET_REASONS = ("(No such file or directory)", "(Connection refused)")


def _is_no_server(err: str) -> bool:
    if any(marker in err for marker in _NO_SERVER_MARKERS):
        return True
    return "error connecting to" in err and any(reason in err for reason in _DEAD_SOCKET_REASONS)


def list_sessions(timeout: Optional[float] = DEFAULT_TIMEOUT, binary: str = "tmux") -> List[str]:
    """Get all tmux session names.

    Args:
        timeout: Seconds to wait for tmux.
        binary: Name or path of the tmux executable.

    Returns:
        Session names in the order tmux reports them. Empty when no server
        is running.

    Raises:
        QueryError: If tmux fails for any other reason.
    """
    code, out, err = run_tmux(["list-sessions", "-F", "#{session_name}"], timeout=timeout, binary=binary)

    if code != 0:
        if _is_no_server(err):
            logger.debug(f"No tmux server: {err.strip()}")
            return []
        raise QueryError(f"Failed to list sessions: {err.strip() or f'exit code {code}'}")

    return [line for line in out.split("\n") if line]
