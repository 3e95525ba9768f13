"""Core tmux operations - shared utilities for all tmux modules.

PUBLIC API:
  - run_tmux: Execute tmux command and return result
  - in_tmux: Check whether we were started inside a tmux session
  - get_current_pane: Get session:window.pane of the invoking pane
"""

import logging
import os
import subprocess
from typing import List, Tuple

from .exceptions import NotInTmuxError
from ..types import SessionWindowPane

logger = logging.getLogger(__name__)

CURRENT_PANE_FORMAT = "#{session_name}:#{window_index}.#{pane_index}"


def run_tmux(args: List[str]) -> Tuple[int, str, str]:
    """Run tmux command, return (returncode, stdout, stderr).

    Raises:
        OSError: If the tmux binary cannot be executed.
        UnicodeDecodeError: If tmux output is not valid in the locale encoding.
    """
    cmd = ["tmux"] + args
    logger.debug(f"Running {cmd}")
    result = subprocess.run(cmd, capture_output=True, text=True)
    return result.returncode, result.stdout, result.stderr


def in_tmux() -> bool:
    """Check if the TMUX session marker is present in the environment."""
    return bool(os.environ.get("TMUX"))


def get_current_pane() -> SessionWindowPane:
    """Get session:window.pane of the pane we were launched from.

    Returns:
        Identifier like "main:0.1"

    Raises:
        NotInTmuxError: If tmux can't be run or doesn't know the current pane
    """
    try:
        code, stdout, stderr = run_tmux(["display-message", "-p", CURRENT_PANE_FORMAT])
    except OSError as e:
        raise NotInTmuxError(f"Failed to run tmux: {e}") from e
    except UnicodeDecodeError as e:
        raise NotInTmuxError(f"Failed to read current pane: {e}") from e

    if code != 0:
        raise NotInTmuxError(f"Failed to get current pane: {stderr.strip() or f'exit status {code}'}")

    swp = stdout.strip()
    if not swp:
        raise NotInTmuxError("Failed to get current pane: empty response from tmux")

    return swp
