"""Subprocess-backed multiplexer client.

PUBLIC API:
  - TmuxClient: MultiplexerClient implementation that shells out to tmux
"""

from dataclasses import dataclass
from typing import List, Optional

from .core import DEFAULT_TIMEOUT
from .pane import list_panes
from .session import list_sessions
from ..types import Pane


@dataclass
class TmuxClient:
    """Query a running tmux server.

    Attributes:
        binary: Name or path of the tmux executable.
        timeout: Seconds to wait for each tmux call.
    """

    binary: str = "tmux"
    timeout: Optional[float] = DEFAULT_TIMEOUT

    def list_sessions(self) -> List[str]:
        return list_sessions(timeout=self.timeout, binary=self.binary)

    def list_panes(self, session: str) -> List[Pane]:
        return list_panes(session, timeout=self.timeout, binary=self.binary)
