"""Fast tmux pane selector with keyboard navigation.

Lists every tmux pane, lets the user pick one (or picks the most recently
used one automatically) and prints its session:window.pane identifier for
use by key bindings and scripts.

PUBLIC API:
  - run_selector: Choose a pane and return formatted output
  - choose_pane: Choose a pane and return its record
  - select_best: Recency heuristic over a pane snapshot
  - SelectorConfig: Settings for one run
  - PaneRecord: One pane in a snapshot
"""

from .app import choose_pane, run_selector
from .config import SelectorConfig
from .selection import select_best
from .tmux.pane import PaneRecord

__version__ = "0.1.0"
__all__ = ["run_selector", "choose_pane", "select_best", "SelectorConfig", "PaneRecord"]
