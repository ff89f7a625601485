"""Process table access using ps.

PUBLIC API:
  - PsProcessTable: ProcessTable implementation backed by `ps`
"""

import logging
import subprocess
from dataclasses import dataclass
from typing import List, Optional

logger = logging.getLogger(__name__)


def _first_line(output: str) -> str:
    """First non-empty line of ps output, stripped."""
    for line in output.splitlines():
        line = line.strip()
        if line:
            return line
    return ""


@dataclass
class PsProcessTable:
    """Look up command lines with `ps --no-headers -o cmd`.

    Every failure reads as "no such process": callers fall back rather than
    abort.

    Attributes:
        binary: Name or path of the ps executable.
        timeout: Seconds to wait for each ps call.
    """

    binary: str = "ps"
    timeout: Optional[float] = 5.0

    def _run_ps(self, args: List[str], default: str = "") -> str:
        """Run ps safely.

        Args:
            args: Arguments after `ps --no-headers -o cmd`.
            default: Value returned if ps fails.
        """
        cmd = [self.binary, "--no-headers", "-o", "cmd"] + args
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, timeout=self.timeout)
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.debug(f"Could not run {cmd}: {e}")
            return default

        # ps exits 1 when nothing matched
        if result.returncode != 0:
            return default
        return result.stdout

    def list_child_process(self, pid: int) -> str:
        """Command line of the first child of pid, or empty string."""
        return _first_line(self._run_ps(["--ppid", str(pid)]))

    def list_process(self, pid: int) -> str:
        """Command line of pid itself, or empty string."""
        return _first_line(self._run_ps(["-p", str(pid)]))
