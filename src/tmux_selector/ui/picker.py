"""Interactive pane picker.

PUBLIC API:
  - PaneSelectApp: Textual app driving the picker state machine
  - pick_pane: Run the picker and return the chosen pane
"""

import logging
from typing import Optional, Sequence

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Static

from .render import render_panes
from .state import Browsing, Cancelled, InputEvent, PickerState, Selected, classify_key, initial_state, transition
from ..tmux.pane import PaneRecord
from ..types import SessionWindowPane

__all__ = ["PaneSelectApp", "pick_pane"]

logger = logging.getLogger(__name__)


class PaneSelectApp(App[Optional[PaneRecord]]):
    """Select a pane from a snapshot.

    Every key press is classified into an InputEvent and run through the
    state machine; the frame is redrawn after each event. The app exits with
    the chosen pane, or None when cancelled.

    Args:
        panes: Snapshot to choose from, must not be empty
        state: Starting Browsing state
    """

    ENABLE_COMMAND_PALETTE = False

    # Priority so textual's own quit/back handling never sees them
    BINDINGS = [
        Binding("ctrl+c", "cancel", show=False, priority=True),
        Binding("escape", "cancel", show=False, priority=True),
    ]

    def __init__(self, panes: Sequence[PaneRecord], state: Browsing):
        super().__init__()
        self.panes = panes
        self.state: PickerState = state

    def compose(self) -> ComposeResult:
        yield Static(id="pane-list")

    def on_mount(self) -> None:
        self._redraw()

    def on_key(self, event: events.Key) -> None:
        event.stop()
        self.dispatch_input(classify_key(event.key, event.character))

    def on_resize(self, event: events.Resize) -> None:
        self.dispatch_input(InputEvent.RESIZE)

    def action_cancel(self) -> None:
        self.dispatch_input(InputEvent.CANCEL)

    def dispatch_input(self, event: InputEvent) -> None:
        """Advance the state machine and redraw or exit."""
        if not isinstance(self.state, Browsing):
            return

        self.state = transition(self.state, event, self.panes)

        if isinstance(self.state, Selected):
            logger.debug(f"Selected {self.state.pane.full_id}")
            self.exit(self.state.pane)
        elif isinstance(self.state, Cancelled):
            logger.debug("Selection cancelled")
            self.exit(None)
        else:
            self._redraw()

    def _redraw(self) -> None:
        if not isinstance(self.state, Browsing):
            return
        # Resize can arrive before compose has mounted the list
        for pane_list in self.query("#pane-list").results(Static):
            pane_list.update(render_panes(self.panes, self.state.cursor))


def pick_pane(panes: Sequence[PaneRecord], current: SessionWindowPane) -> Optional[PaneRecord]:
    """Run the picker until the user selects or cancels.

    The terminal is put back into its previous mode whenever this returns or
    raises.

    Args:
        panes: Snapshot to choose from
        current: Invoking pane, used to place the initial cursor

    Returns:
        Chosen pane, or None when cancelled

    Raises:
        EmptyInventoryError: If panes is empty
    """
    app = PaneSelectApp(panes, initial_state(panes, current))
    return app.run()
