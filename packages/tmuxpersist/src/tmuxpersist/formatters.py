"""Console output for tmux-persist runs."""

from rich.markup import escape
from rich.table import Table

from .persist import PersistReport


def report_table(report: PersistReport) -> Table:
    """Build a summary table with one row per session."""
    table = Table(title="tmux-persist", show_lines=False)
    table.add_column("Session")
    table.add_column("Windows", justify="right")
    table.add_column("Panes", justify="right")
    table.add_column("Script")

    for result in report.results:
        if result.ok:
            table.add_row(escape(result.session), str(result.windows), str(result.panes), escape(str(result.path)))
        else:
            table.add_row(escape(result.session), "-", "-", f"[red]{escape(result.error or 'failed')}[/red]")

    return table
