"""Layout planning - turn captured panes into window/split actions.

PUBLIC API:
  - plan_pane: Layout action for a single pane
  - plan_layout: Layout actions for a session's panes
"""

from typing import Iterable, List

from .types import CreateWindow, JoinPane, LayoutAction, Pane, PaneRef


def plan_pane(pane: Pane) -> LayoutAction:
    """Layout action for a single pane.

    Base panes become windows. Every other pane is one split against its
    whole window: side-by-side when narrower than the window, otherwise
    stacked.

    Args:
        pane: Pane with its command already resolved.
    """
    if pane.is_base:
        return CreateWindow(
            window_index=pane.window_index,
            window_name=pane.window_name,
            cwd=pane.cwd,
            cmd=pane.cmd,
        )

    if pane.pane_width < pane.window_width:
        orientation, size = "horizontal", pane.pane_width
    else:
        orientation, size = "vertical", pane.pane_height

    # Spawned in the slot after its window; the next captured window does not exist yet
    return JoinPane(
        orientation=orientation,
        size=size,
        source=PaneRef(window=pane.window_index + 1, pane=0),
        target=PaneRef(window=pane.window_index, pane=0),
        cwd=pane.cwd,
        cmd=pane.cmd,
    )


def plan_layout(panes: Iterable[Pane]) -> List[LayoutAction]:
    """Layout actions for a session's panes, one per pane in input order."""
    return [plan_pane(pane) for pane in panes]
