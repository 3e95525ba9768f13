"""Pure tmux operations - shared utilities for all tmux modules.

PUBLIC API:
  - run_tmux: Run tmux command and return result
  - in_tmux: Check for the TMUX session marker
  - get_current_pane: Get the invoking pane's session:window.pane
  - list_panes: Snapshot all panes
  - parse_pane_listing: Parse raw listing output
  - PaneRecord: One pane in a snapshot
"""

from .core import run_tmux, in_tmux, get_current_pane

from .pane import (
    PaneRecord,
    list_panes,
    parse_pane_listing,
)

from .exceptions import (
    TmuxError,
    NotInTmuxError,
    AcquisitionError,
)

__all__ = [
    "run_tmux",
    "in_tmux",
    "get_current_pane",
    "PaneRecord",
    "list_panes",
    "parse_pane_listing",
    "TmuxError",
    "NotInTmuxError",
    "AcquisitionError",
]
