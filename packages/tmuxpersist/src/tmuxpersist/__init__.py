"""Snapshot tmux sessions into standalone restore scripts.

Captures every session's windows, panes, sizes, working directories and
foreground commands, and writes one shell script per session that rebuilds
the layout.

PUBLIC API:
  - persist: Run the full capture pipeline
  - PersistConfig: Run settings
  - load_config: Load settings from tmux-persist.toml
  - plan_layout: Turn panes into layout actions
  - render_script: Render layout actions into a restore script
"""

from .config import PersistConfig, load_config
from .layout import plan_layout
from .persist import persist
from .script import render_script

__version__ = "0.1.0"
__all__ = ["persist", "PersistConfig", "load_config", "plan_layout", "render_script"]
