"""Recency-based pane selection.

PUBLIC API:
  - select_best: Pick the pane most worth jumping to
"""

from typing import Optional, Sequence

from .tmux.pane import PaneRecord
from .types import SessionWindowPane


def select_best(panes: Sequence[PaneRecord], exclude: SessionWindowPane) -> Optional[int]:
    """Pick the best target pane in a single left-to-right scan.

    An active pane always takes over, and resets the running best time to its
    own timestamp even if that is lower. Otherwise a pane must be strictly
    more recent than the current best.

    When no pane is active and none has a known timestamp, the first
    non-excluded pane is returned.

    Args:
        panes: Snapshot in tmux order
        exclude: Identifier of the invoking pane, never chosen

    Returns:
        Index into panes, or None when nothing but the excluded pane exists
    """
    best_index = None
    best_time = 0

    for i, pane in enumerate(panes):
        if pane.full_id == exclude:
            continue

        if pane.is_active or pane.last_used > best_time:
            best_time = pane.last_used
            best_index = i

    if best_index is None:
        best_index = next((i for i, pane in enumerate(panes) if pane.full_id != exclude), None)

    return best_index
