"""Tmux-specific exceptions.

PUBLIC API:
  - TmuxError: Base exception for all tmux operations
  - NotInTmuxError: Not running inside a tmux session
  - AcquisitionError: Pane listing could not be obtained
"""

from ..errors import SelectorError


class TmuxError(SelectorError):
    """Base exception for all tmux operations."""

    pass


class NotInTmuxError(TmuxError):
    """Raised when the tool is not running inside a tmux session."""

    pass


class AcquisitionError(TmuxError):
    """Raised when tmux fails to list panes."""

    pass
