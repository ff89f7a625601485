"""Tests for split inference and layout planning."""

from tmuxpersist.layout import plan_layout, plan_pane
from tmuxpersist.types import CreateWindow, JoinPane, PaneRef


class TestPlanPane:
    def test_base_pane_creates_window(self, make_pane):
        pane = make_pane(window_index=2, window_name="logs", cwd="/var/log").with_command("tail -f syslog")

        action = plan_pane(pane)

        assert action == CreateWindow(window_index=2, window_name="logs", cwd="/var/log", cmd="tail -f syslog")

    def test_narrow_pane_splits_horizontally_by_width(self, make_pane):
        pane = make_pane(pane_index=1, pane_width=80, window_width=160)

        action = plan_pane(pane)

        assert isinstance(action, JoinPane)
        assert action.orientation == "horizontal"
        assert action.size == 80

    def test_full_width_pane_splits_vertically_by_height(self, make_pane):
        pane = make_pane(pane_index=1, pane_width=160, window_width=160, pane_height=20, window_height=40)

        action = plan_pane(pane)

        assert action.orientation == "vertical"
        assert action.size == 20

    def test_join_addresses_slot_after_window(self, make_pane):
        pane = make_pane(window_index=3, pane_index=1, pane_width=50)

        action = plan_pane(pane)

        assert action.source == PaneRef(window=4, pane=0)
        assert action.target == PaneRef(window=3, pane=0)

    def test_join_carries_pane_process(self, make_pane):
        pane = make_pane(pane_index=1, cwd="/srv", pane_width=10).with_command("htop")

        action = plan_pane(pane)

        assert (action.cwd, action.cmd) == ("/srv", "htop")


class TestPlanLayout:
    def test_one_action_per_pane_in_order(self, make_pane):
        panes = [
            make_pane(0, 0),
            make_pane(0, 1, pane_width=80),
            make_pane(0, 2, pane_height=10),
            make_pane(1, 0, window_name="shell"),
            make_pane(1, 1, pane_width=40),
        ]

        actions = plan_layout(panes)

        assert [type(a) for a in actions] == [CreateWindow, JoinPane, JoinPane, CreateWindow, JoinPane]
        assert [a.orientation for a in actions if isinstance(a, JoinPane)] == ["horizontal", "vertical", "horizontal"]

    def test_base_panes_never_join(self, make_pane):
        panes = [make_pane(i, 0) for i in range(4)]

        assert all(isinstance(a, CreateWindow) for a in plan_layout(panes))

    def test_empty(self):
        assert plan_layout([]) == []
