"""tmux-selector run - acquire panes, choose one, format it.

Ties the tmux queries, the recency heuristic and the interactive picker
together. Nothing is printed here; the caller writes the returned text only
after everything has succeeded.
"""

import logging

from .config import SelectorConfig
from .errors import EmptyInventoryError, NoCandidateError, SelectionCancelled
from .formatters import format_pane
from .selection import select_best
from .tmux import get_current_pane, in_tmux, list_panes
from .tmux.exceptions import NotInTmuxError
from .tmux.pane import PaneRecord

logger = logging.getLogger(__name__)


def choose_pane(config: SelectorConfig) -> PaneRecord:
    """Choose a target pane per the configuration.

    Raises:
        NotInTmuxError: Not inside tmux, or the current pane is unknown
        AcquisitionError: Listing panes failed
        EmptyInventoryError: tmux listed no panes
        NoCandidateError: Auto mode found only the current pane
        SelectionCancelled: The user cancelled the picker
    """
    if not in_tmux():
        raise NotInTmuxError("Not running in tmux")

    current = get_current_pane()
    panes = list_panes()

    if not panes:
        raise EmptyInventoryError("No tmux panes found")

    if config.auto_select:
        index = select_best(panes, current)
        if index is None:
            raise NoCandidateError("No suitable pane found for auto-selection")
        logger.debug(f"Auto-selected {panes[index].full_id} from {len(panes)} panes")
        return panes[index]

    # Imported here so auto mode never loads textual
    from .ui import pick_pane

    pane = pick_pane(panes, current)
    if pane is None:
        raise SelectionCancelled("Pane selection cancelled")
    return pane


def run_selector(config: SelectorConfig) -> str:
    """Choose a pane and return the text to print.

    Raises:
        SelectorError: Any failure, see choose_pane and format_pane
    """
    pane = choose_pane(config)
    return format_pane(pane, config.output_format)
