"""Type definitions for tmux-selector.

Panes are addressed by their session:window.pane identifier, the same string
tmux accepts as a target.
"""

from typing import Literal


type SessionWindowPane = str  # e.g., "main:0.1" - our canonical format

# Output formats accepted by --format
type OutputFormat = Literal["plain", "json"]

OUTPUT_FORMATS: tuple[str, ...] = ("plain", "json")
