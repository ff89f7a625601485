"""Capture pipeline - sessions in, restore scripts out.

Each session is handled on its own: a failure while inspecting or writing one
session is recorded and the run moves on to the next. Only a failure to list
sessions aborts the run.

PUBLIC API:
  - SessionResult: Outcome for one session
  - PersistReport: Outcome for a whole run
  - snapshot_session: Capture and resolve one session's panes
  - build_script: Render the restore script for a snapshot
  - persist: Run the full capture pipeline
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .config import PersistConfig
from .errors import WriteError
from .layout import plan_layout
from .output import clean_output_dir, write_script
from .process import resolve_panes
from .script import render_script
from .tmux import TmuxError
from .types import MultiplexerClient, ProcessTable, SessionSnapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionResult:
    """Outcome for one session.

    Attributes:
        session: Session name.
        path: Written script, None on failure.
        windows: Number of captured windows.
        panes: Number of captured panes.
        error: Failure message, None on success.
    """

    session: str
    path: Optional[Path] = None
    windows: int = 0
    panes: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class PersistReport:
    """Outcome for a whole run."""

    results: List[SessionResult] = field(default_factory=list)
    removed: List[Path] = field(default_factory=list)

    @property
    def written(self) -> List[SessionResult]:
        return [r for r in self.results if r.ok]

    @property
    def failed(self) -> List[SessionResult]:
        return [r for r in self.results if not r.ok]

    @property
    def ok(self) -> bool:
        return not self.failed


def snapshot_session(name: str, client: MultiplexerClient, table: ProcessTable) -> SessionSnapshot:
    """Capture and resolve one session's panes.

    Raises:
        QueryError: If tmux cannot list the panes.
        ParseError: If a pane record is malformed.
    """
    panes = client.list_panes(name)
    return SessionSnapshot(name=name, panes=tuple(resolve_panes(panes, table)))


def build_script(snapshot: SessionSnapshot, config: PersistConfig) -> str:
    """Render the restore script for a snapshot."""
    size = None
    if snapshot.panes:
        first = snapshot.panes[0]
        size = (first.window_width, first.window_height)
    return render_script(snapshot.name, plan_layout(snapshot.panes), shell=config.shell, size=size)


def _persist_session(name: str, client: MultiplexerClient, table: ProcessTable, config: PersistConfig) -> SessionResult:
    try:
        snapshot = snapshot_session(name, client, table)
        path = write_script(config.script_path(name), build_script(snapshot, config))
    except (TmuxError, WriteError) as e:
        logger.error(f"Session {name} skipped: {e}")
        return SessionResult(session=name, error=str(e))

    logger.info(f"Wrote {path}")
    return SessionResult(
        session=name,
        path=path,
        windows=snapshot.window_count,
        panes=len(snapshot.panes),
    )


def persist(client: MultiplexerClient, table: ProcessTable, config: PersistConfig) -> PersistReport:
    """Run the full capture pipeline.

    Lists sessions, removes stale restore scripts, then writes one script
    per session.

    Args:
        client: Multiplexer to capture.
        table: Process table for command resolution.
        config: Output settings.

    Returns:
        Report of written and failed sessions.

    Raises:
        QueryError: If sessions cannot be listed.
    """
    sessions = client.list_sessions()
    logger.debug(f"Found {len(sessions)} sessions")

    report = PersistReport(removed=clean_output_dir(config))
    for name in sessions:
        report.results.append(_persist_session(name, client, table, config))
    return report
