"""Interactive picker for tmux-selector.

PUBLIC API:
  - pick_pane: Run the picker and return the chosen pane
  - PaneSelectApp: Textual app behind pick_pane
  - render_panes: Build the picker frame
"""

from .picker import PaneSelectApp, pick_pane
from .render import render_panes

__all__ = [
    "PaneSelectApp",
    "pick_pane",
    "render_panes",
]
