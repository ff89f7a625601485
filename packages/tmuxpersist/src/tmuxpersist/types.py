"""Type definitions for tmux-persist - snapshot-first architecture.

Everything is a read-only snapshot. Panes are captured once, resolved once,
planned once and rendered once. Nothing is mutated after creation.
"""

from dataclasses import dataclass, field, replace
from typing import Literal, Protocol, TypeAlias


# Split orientation as understood by `tmux join-pane -h|-v`
Orientation: TypeAlias = Literal["horizontal", "vertical"]

# Number of fields in one `list-panes` record
PANE_FIELD_COUNT = 9


@dataclass(frozen=True)
class Pane:
    """One tmux pane as captured from `list-panes -s`.

    Attributes:
        window_index: Index of the owning window.
        pane_index: Index inside the window, 0 is the base pane.
        window_width: Window width in cells.
        window_height: Window height in cells.
        pane_width: Pane width in cells.
        pane_height: Pane height in cells.
        window_name: Window label, not necessarily unique.
        cwd: Pane's current working directory.
        pid: PID of the pane's shell process.
        cmd: Resolved foreground command, empty when unknown.
    """

    window_index: int
    pane_index: int
    window_width: int
    window_height: int
    pane_width: int
    pane_height: int
    window_name: str
    cwd: str
    pid: int
    cmd: str = ""

    @property
    def is_base(self) -> bool:
        """Check if this pane was created together with its window."""
        return self.pane_index == 0

    def with_command(self, cmd: str) -> "Pane":
        """Return a copy of this pane carrying the resolved command."""
        return replace(self, cmd=cmd)


@dataclass(frozen=True)
class SessionSnapshot:
    """A session name and its panes in tmux enumeration order."""

    name: str
    panes: tuple[Pane, ...] = field(default_factory=tuple)

    @property
    def window_count(self) -> int:
        return len({pane.window_index for pane in self.panes})


@dataclass(frozen=True)
class PaneRef:
    """Window/pane address inside the restored session."""

    window: int
    pane: int = 0

    @property
    def window_target(self) -> str:
        """Target string for the window, relative to $SESSION."""
        return f"$SESSION:{self.window}"

    @property
    def pane_target(self) -> str:
        """Target string for the pane, relative to $SESSION."""
        return f"$SESSION:{self.window}.{self.pane}"


@dataclass(frozen=True)
class CreateWindow:
    """Create a window running the base pane's command."""

    window_index: int
    window_name: str
    cwd: str
    cmd: str


@dataclass(frozen=True)
class JoinPane:
    """Spawn a pane at `source` and join it into the `target` window."""

    orientation: Orientation
    size: int
    source: PaneRef
    target: PaneRef
    cwd: str
    cmd: str


LayoutAction: TypeAlias = CreateWindow | JoinPane


class MultiplexerClient(Protocol):
    """Read access to the running multiplexer."""

    def list_sessions(self) -> list[str]: ...

    def list_panes(self, session: str) -> list[Pane]: ...


class ProcessTable(Protocol):
    """Read access to the OS process table."""

    def list_child_process(self, pid: int) -> str: ...

    def list_process(self, pid: int) -> str: ...
