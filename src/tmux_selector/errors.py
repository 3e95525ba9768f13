"""Shared error types and formatting for tmux-selector.

Every failure surfaces to the command line unchanged and is reported as a
single "Error: ..." line with exit status 1.

PUBLIC API:
  - SelectorError: Base exception for every reported failure
  - ConfigError: Invalid configuration file or option value
  - EmptyInventoryError: tmux listed no usable panes
  - NoCandidateError: Auto-selection found nothing besides the current pane
  - SelectionCancelled: User cancelled the interactive picker
  - SerializationError: Structured output could not be encoded
  - string_error_response: Format an error for display
"""


class SelectorError(Exception):
    """Base exception for all tmux-selector failures."""

    pass


class ConfigError(SelectorError):
    """Raised when configuration can't be loaded or has invalid values."""

    pass


class EmptyInventoryError(SelectorError):
    """Raised when the pane listing succeeded but produced no panes."""

    pass


class NoCandidateError(SelectorError):
    """Raised when auto-selection finds no eligible pane."""

    pass


class SelectionCancelled(SelectorError):
    """Raised when the user leaves the picker without choosing."""

    pass


class SerializationError(SelectorError):
    """Raised when a pane can't be encoded for structured output."""

    pass


def string_error_response(message: str) -> str:
    """Create error response for string display.

    Args:
        message: The error message to display

    Returns:
        Formatted error string
    """
    return f"Error: {message}"
