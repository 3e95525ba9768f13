"""Picker state machine - pure, no terminal required.

The interactive picker is Browsing until an accept or cancel event moves it
to one of the terminal states. Moves wrap around the pane list.

PUBLIC API:
  - InputEvent: Classified input event
  - Browsing: Cursor over the pane list
  - Selected: Terminal state carrying the chosen pane
  - Cancelled: Terminal state without a pane
  - classify_key: Map a terminal key to an InputEvent
  - initial_state: Starting state for a snapshot
  - transition: Apply one event to a state
  - run_events: Apply a scripted sequence of events
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence

from ..errors import EmptyInventoryError
from ..selection import select_best
from ..tmux.pane import PaneRecord
from ..types import SessionWindowPane

__all__ = [
    "InputEvent",
    "Browsing",
    "Selected",
    "Cancelled",
    "PickerState",
    "classify_key",
    "initial_state",
    "transition",
    "run_events",
]


class InputEvent(Enum):
    MOVE_BACKWARD = "move_backward"
    MOVE_FORWARD = "move_forward"
    ACCEPT = "accept"
    CANCEL = "cancel"
    RESIZE = "resize"
    OTHER = "other"


@dataclass(frozen=True)
class Browsing:
    cursor: int


@dataclass(frozen=True)
class Selected:
    pane: PaneRecord


@dataclass(frozen=True)
class Cancelled:
    pass


type PickerState = Browsing | Selected | Cancelled

# Named keys as reported by the terminal layer
_KEY_EVENTS = {
    "up": InputEvent.MOVE_BACKWARD,
    "left": InputEvent.MOVE_BACKWARD,
    "down": InputEvent.MOVE_FORWARD,
    "right": InputEvent.MOVE_FORWARD,
    "ctrl+k": InputEvent.MOVE_BACKWARD,
    "ctrl+h": InputEvent.MOVE_BACKWARD,
    "ctrl+j": InputEvent.MOVE_FORWARD,
    "ctrl+l": InputEvent.MOVE_FORWARD,
    "enter": InputEvent.ACCEPT,
    "escape": InputEvent.CANCEL,
    "ctrl+c": InputEvent.CANCEL,
}

# Letter keys, matched case-insensitively
_LETTER_EVENTS = {
    "w": InputEvent.MOVE_BACKWARD,
    "k": InputEvent.MOVE_BACKWARD,
    "a": InputEvent.MOVE_BACKWARD,
    "h": InputEvent.MOVE_BACKWARD,
    "s": InputEvent.MOVE_FORWARD,
    "j": InputEvent.MOVE_FORWARD,
    "d": InputEvent.MOVE_FORWARD,
    "l": InputEvent.MOVE_FORWARD,
    "q": InputEvent.CANCEL,
}


def classify_key(key: str, character: Optional[str] = None) -> InputEvent:
    """Map a key press to an InputEvent.

    Args:
        key: Key name, e.g. "up", "enter", "ctrl+c", "W"
        character: Printable character for the key, if any

    Returns:
        InputEvent, OTHER for anything unrecognised
    """
    if key in _KEY_EVENTS:
        return _KEY_EVENTS[key]

    letter = character if character and len(character) == 1 else key
    if len(letter) == 1:
        return _LETTER_EVENTS.get(letter.lower(), InputEvent.OTHER)

    return InputEvent.OTHER


def initial_state(panes: Sequence[PaneRecord], current: SessionWindowPane) -> Browsing:
    """Start browsing at the auto-selected pane, or the first one.

    Raises:
        EmptyInventoryError: If there are no panes to browse
    """
    if not panes:
        raise EmptyInventoryError("No tmux panes found")

    best = select_best(panes, current)
    return Browsing(cursor=best if best is not None else 0)


def transition(state: PickerState, event: InputEvent, panes: Sequence[PaneRecord]) -> PickerState:
    """Apply one input event.

    Only Browsing reacts to events; Selected and Cancelled are final.
    """
    if not isinstance(state, Browsing):
        return state

    n = len(panes)

    if event is InputEvent.MOVE_BACKWARD:
        return Browsing(cursor=(state.cursor - 1 + n) % n)
    if event is InputEvent.MOVE_FORWARD:
        return Browsing(cursor=(state.cursor + 1) % n)
    if event is InputEvent.ACCEPT:
        return Selected(pane=panes[state.cursor])
    if event is InputEvent.CANCEL:
        return Cancelled()

    # RESIZE only needs a redraw; everything else is ignored
    return state


def run_events(
    panes: Sequence[PaneRecord], state: PickerState, events: Iterable[InputEvent]
) -> list[PickerState]:
    """Feed events through transition.

    Returns:
        Trace of states, starting with the given one
    """
    trace = [state]
    for event in events:
        state = transition(state, event, panes)
        trace.append(state)
    return trace
