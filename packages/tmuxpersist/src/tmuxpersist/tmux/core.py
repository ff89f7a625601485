"""Core tmux operations - shared utilities for all tmux modules.

PUBLIC API:
  - run_tmux: Execute tmux command and return result
"""

import logging
import subprocess
from typing import List, Optional, Tuple

from .exceptions import QueryError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0


def run_tmux(args: List[str], timeout: Optional[float] = DEFAULT_TIMEOUT, binary: str = "tmux") -> Tuple[int, str, str]:
    """Run tmux command, return (returncode, stdout, stderr).

    Args:
        args: Arguments passed after the tmux binary.
        timeout: Seconds to wait before giving up. None waits forever.
        binary: Name or path of the tmux executable.

    Raises:
        QueryError: If tmux cannot be started or does not finish in time.
    """
    cmd = [binary] + args
    logger.debug(f"Running {cmd}")
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout)
    except FileNotFoundError as e:
        raise QueryError(f"tmux executable not found: {binary}") from e
    except OSError as e:
        raise QueryError(f"Cannot run {binary}: {e}") from e
    except subprocess.TimeoutExpired as e:
        raise QueryError(f"tmux {args[0]} timed out after {timeout}s") from e
    return result.returncode, result.stdout, result.stderr
