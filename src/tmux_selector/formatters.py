"""Output formatters for the selected pane."""

import json

from .errors import ConfigError, SerializationError
from .tmux.pane import PaneRecord
from .types import OutputFormat


def format_plain(pane: PaneRecord) -> str:
    """Format pane as its session:window.pane identifier."""
    return pane.full_id


def format_json(pane: PaneRecord) -> str:
    """Format pane as a single-line JSON object.

    Raises:
        SerializationError: If the record can't be encoded
    """
    try:
        return json.dumps(pane.to_dict(), ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Failed to marshal JSON: {e}") from e


def format_pane(pane: PaneRecord, output_format: OutputFormat) -> str:
    """Format pane for stdout using the configured format."""
    if output_format == "json":
        return format_json(pane)
    if output_format == "plain":
        return format_plain(pane)
    raise ConfigError(f"Unknown output format: {output_format}")
