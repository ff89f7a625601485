"""Capture running tmux sessions into restore scripts.

Entry point for tmux-persist. Takes no arguments; settings come from
tmux-persist.toml.
"""

import logging
import sys

from rich.console import Console
from rich.markup import escape

from .config import load_config
from .errors import ConfigError
from .formatters import report_table
from .persist import persist
from .process import PsProcessTable
from .tmux import TmuxClient, TmuxError

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
)


def main() -> int:
    """Write a restore script for every running tmux session.

    Returns:
        0 when every session was written, 1 otherwise.
    """
    console = Console()
    errors = Console(stderr=True)

    try:
        config = load_config()
    except ConfigError as e:
        errors.print(f"[red]Error:[/red] {escape(str(e))}", markup=True, highlight=False)
        return 1

    client = TmuxClient(binary=config.tmux, timeout=config.timeout)
    table = PsProcessTable(timeout=config.timeout)

    try:
        report = persist(client, table, config)
    except TmuxError as e:
        errors.print(f"[red]Error:[/red] {escape(str(e))}", markup=True, highlight=False)
        return 1

    if report.results:
        console.print(report_table(report))
    else:
        console.print("No tmux sessions running.")

    return 0 if report.ok else 1


if __name__ == "__main__":
    sys.exit(main())
