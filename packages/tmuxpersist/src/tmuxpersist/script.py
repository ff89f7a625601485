"""Restore script rendering.

PUBLIC API:
  - RestoreScript: Line builder for a session restore script
  - render_script: Render layout actions into restore script text
  - shell_command: Quoted `cd <cwd> && <cmd>` argument for tmux
"""

import shlex
from typing import List, Optional, Sequence

from .types import CreateWindow, JoinPane, LayoutAction

DEFAULT_SHELL = "/usr/bin/env bash"

_ORIENTATION_FLAGS = {"horizontal": "-h", "vertical": "-v"}


def shell_command(cwd: str, cmd: str) -> Optional[str]:
    """Quoted shell-command argument that enters cwd and runs cmd.

    Returns None when there is no command; the caller then only sets the
    start directory so no dangling `&&` is produced.
    """
    if not cmd:
        return None
    return shlex.quote(f"cd {shlex.quote(cwd)} && {cmd}")


def _spawn_args(cwd: str, cmd: str) -> List[str]:
    command = shell_command(cwd, cmd)
    if command is None:
        return ["-c", shlex.quote(cwd)]
    return [command]


class RestoreScript:
    """Line builder for a session restore script.

    Provides a fluent interface mirroring the sections of the script:
    header, guards, bootstrap, windows and panes, attach.

    Attributes:
        session: Session name being restored.
        shell: Interpreter named in the shebang.
    """

    def __init__(self, session: str, shell: str = DEFAULT_SHELL):
        self.session = session
        self.shell = shell
        self._lines: List[str] = []
        self._first_window: Optional[int] = None

    def _add_line(self, line: str = "") -> "RestoreScript":
        """Add a line to the script."""
        self._lines.append(line)
        return self

    def header(self) -> "RestoreScript":
        """Add shebang and SESSION assignment."""
        self._add_line(f"#!{self.shell}")
        self._add_line(f"SESSION={shlex.quote(self.session)}")
        self._add_line()
        return self

    def guards(self) -> "RestoreScript":
        """Refuse to run inside tmux; attach if the session already exists."""
        self._add_line('if [ -n "$TMUX" ]; then')
        self._add_line('  echo "Already inside tmux. Detach before restoring $SESSION." >&2')
        self._add_line("  exit 1")
        self._add_line("fi")
        self._add_line()
        self._add_line("# if session already exists, attach")
        self._add_line('if tmux has-session -t "=$SESSION" 2>/dev/null; then')
        self._add_line('  echo "Session $SESSION already exists. Attaching..."')
        self._add_line('  tmux attach-session -t "=$SESSION"')
        self._add_line("  exit 0")
        self._add_line("fi")
        self._add_line()
        return self

    def bootstrap(self, width: Optional[int] = None, height: Optional[int] = None) -> "RestoreScript":
        """Create the detached session, remembering its placeholder window."""
        size = ""
        if width and height:
            size = f" -x {width} -y {height}"
        self._add_line("# make new session")
        self._add_line(f"BOOTSTRAP=$(tmux new-session -d -s \"$SESSION\"{size} -P -F '#{{window_id}}')")
        self._add_line()
        return self

    def window(self, action: CreateWindow) -> "RestoreScript":
        """Add a new-window line, replacing whatever occupies the slot."""
        if self._first_window is None or action.window_index < self._first_window:
            self._first_window = action.window_index
        args = [
            "tmux",
            "new-window",
            "-k",
            "-t",
            f'"$SESSION:{action.window_index}"',
            "-n",
            shlex.quote(action.window_name),
        ]
        args.extend(_spawn_args(action.cwd, action.cmd))
        return self._add_line(" ".join(args))

    def pane(self, action: JoinPane) -> "RestoreScript":
        """Spawn the pane in its source slot and join it into the target window."""
        spawn = ["tmux", "new-window", "-d", "-k", "-t", f'"{action.source.window_target}"']
        spawn.extend(_spawn_args(action.cwd, action.cmd))
        self._add_line(" ".join(spawn))
        join = [
            "tmux",
            "join-pane",
            _ORIENTATION_FLAGS[action.orientation],
            "-l",
            str(action.size),
            "-s",
            f'"{action.source.pane_target}"',
            "-t",
            f'"{action.target.window_target}"',
        ]
        return self._add_line(" ".join(join))

    def attach(self) -> "RestoreScript":
        """Drop the placeholder window, select the first window and attach."""
        self._add_line()
        self._add_line("# drop the placeholder window unless a captured window replaced it")
        self._add_line('tmux kill-window -t "$BOOTSTRAP" 2>/dev/null || true')
        self._add_line()
        self._add_line("# attach to new session")
        if self._first_window is not None:
            self._add_line(f'tmux select-window -t "$SESSION:{self._first_window}"')
        self._add_line('tmux attach-session -t "$SESSION"')
        return self

    def render(self) -> str:
        """Get the script text."""
        return "\n".join(self._lines) + "\n"


def render_script(
    session: str,
    actions: Sequence[LayoutAction],
    shell: str = DEFAULT_SHELL,
    size: Optional[tuple[int, int]] = None,
) -> str:
    """Render layout actions into restore script text.

    Args:
        session: Session name.
        actions: Layout actions in playback order.
        shell: Interpreter for the shebang line.
        size: (width, height) for the new session, usually the first window's.

    Returns:
        Complete script text ending with a newline.
    """
    script = RestoreScript(session, shell=shell).header().guards()
    width, height = size if size else (None, None)
    script.bootstrap(width, height)

    for action in actions:
        if isinstance(action, CreateWindow):
            script.window(action)
        else:
            script.pane(action)

    return script.attach().render()
