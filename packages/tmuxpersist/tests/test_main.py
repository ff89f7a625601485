"""Tests for the command line entry point."""

from unittest import mock

import pytest

from tmuxpersist import __main__ as cli
from tmuxpersist.config import PersistConfig
from tmuxpersist.errors import ConfigError
from tmuxpersist.persist import PersistReport, SessionResult
from tmuxpersist.tmux import QueryError


@pytest.fixture
def patched_config(config):
    with mock.patch.object(cli, "load_config", return_value=config):
        yield config


def test_success(patched_config, capsys, tmp_path):
    report = PersistReport(results=[SessionResult("work", path=tmp_path / "work-restore.sh", windows=2, panes=3)])
    with mock.patch.object(cli, "persist", return_value=report):
        assert cli.main() == 0

    assert "work" in capsys.readouterr().out


def test_no_sessions(patched_config, capsys):
    with mock.patch.object(cli, "persist", return_value=PersistReport()):
        assert cli.main() == 0

    assert "No tmux sessions running." in capsys.readouterr().out


def test_failed_session_exits_non_zero(patched_config):
    report = PersistReport(results=[SessionResult("work", error="boom")])
    with mock.patch.object(cli, "persist", return_value=report):
        assert cli.main() == 1


def test_listing_failure_exits_non_zero(patched_config, capsys):
    with mock.patch.object(cli, "persist", side_effect=QueryError("no tmux [here]")):
        assert cli.main() == 1

    err = capsys.readouterr().err
    assert err.count("no tmux [here]") == 1


def test_bad_config_exits_non_zero(capsys):
    with mock.patch.object(cli, "load_config", side_effect=ConfigError("bad")):
        assert cli.main() == 1

    assert "bad" in capsys.readouterr().err


def test_capabilities_built_from_config():
    config = PersistConfig(tmux="tmux-next", timeout=1.0)
    with (
        mock.patch.object(cli, "load_config", return_value=config),
        mock.patch.object(cli, "persist", return_value=PersistReport()) as run,
    ):
        cli.main()

    client, table, passed = run.call_args.args
    assert (client.binary, client.timeout) == ("tmux-next", 1.0)
    assert table.timeout == 1.0
    assert passed is config
