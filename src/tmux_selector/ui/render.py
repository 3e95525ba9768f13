"""Picker frame rendering.

PUBLIC API:
  - render_panes: Build the full picker frame for a cursor position
"""

from typing import Sequence

from rich.text import Text

from ..tmux.pane import PaneRecord

__all__ = ["render_panes", "TITLE", "HELP"]

TITLE = "Select target tmux pane:"
HELP = "Use ↑↓←→/WS/AD/KJ/HL to navigate, Enter to select, q/Esc to cancel"

SELECTED_MARKER = "  > "
UNSELECTED_MARKER = "    "


def render_panes(panes: Sequence[PaneRecord], cursor: int) -> Text:
    """Build title, help line and one row per pane.

    Args:
        panes: Snapshot to list
        cursor: Index of the highlighted row

    Returns:
        Rich Text, not wrapped - long rows overflow the way the terminal does
    """
    frame = Text(no_wrap=True, overflow="ignore")
    frame.append(TITLE + "\n", style="yellow")
    frame.append(HELP + "\n", style="dim")
    frame.append("\n")

    for i, pane in enumerate(panes):
        if i == cursor:
            frame.append(f"{SELECTED_MARKER}{pane.display_name}", style="bold reverse")
        else:
            frame.append(f"{UNSELECTED_MARKER}{pane.display_name}")
        frame.append("\n")

    return frame
