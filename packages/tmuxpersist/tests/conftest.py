"""Shared fixtures: in-memory tmux and process table."""

from dataclasses import dataclass, field
from typing import Dict, List

import pytest

from tmuxpersist.config import PersistConfig
from tmuxpersist.tmux import QueryError
from tmuxpersist.types import Pane


@dataclass
class FakeClient:
    """MultiplexerClient backed by dicts."""

    panes: Dict[str, List[Pane]] = field(default_factory=dict)
    failing: Dict[str, Exception] = field(default_factory=dict)
    sessions_error: Exception | None = None

    def list_sessions(self) -> List[str]:
        if self.sessions_error is not None:
            raise self.sessions_error
        return list(self.panes)

    def list_panes(self, session: str) -> List[Pane]:
        if session in self.failing:
            raise self.failing[session]
        return list(self.panes[session])


@dataclass
class FakeProcessTable:
    """ProcessTable backed by dicts keyed by pid."""

    children: Dict[int, str] = field(default_factory=dict)
    processes: Dict[int, str] = field(default_factory=dict)

    def list_child_process(self, pid: int) -> str:
        return self.children.get(pid, "")

    def list_process(self, pid: int) -> str:
        return self.processes.get(pid, "")


@pytest.fixture
def make_pane():
    """Build a Pane with sensible defaults for a 160x40 window."""

    def _make(window_index=0, pane_index=0, **overrides) -> Pane:
        values = dict(
            window_index=window_index,
            pane_index=pane_index,
            window_width=160,
            window_height=40,
            pane_width=160,
            pane_height=40,
            window_name="editor",
            cwd="/home/dev/project",
            pid=1000 + window_index * 10 + pane_index,
        )
        values.update(overrides)
        return Pane(**values)

    return _make


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def fake_table():
    return FakeProcessTable()


@pytest.fixture
def config(tmp_path):
    return PersistConfig(output_dir=str(tmp_path / "persist"))


@pytest.fixture
def query_error():
    return QueryError("no such session")
