"""Configuration management for tmux-selector.

Command-line flags are the primary source. Defaults for the output format
and log level can be kept in tmux-selector.toml under a [default] table:

    [default]
    format = "json"
    log_level = "DEBUG"
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import logging
import tomllib

from .errors import ConfigError
from .types import OUTPUT_FORMATS, OutputFormat

CONFIG_FILENAME = "tmux-selector.toml"


@dataclass(frozen=True)
class SelectorConfig:
    """Settings for one run, built once from the command line."""

    output_format: OutputFormat = "plain"
    auto_select: bool = False
    log_level: str = "WARNING"


def _find_config_file(start: Optional[Path] = None) -> Optional[Path]:
    """Find tmux-selector.toml in current or parent directories."""
    current = start or Path.cwd()

    for parent in [current] + list(current.parents):
        config_file = parent / CONFIG_FILENAME
        if config_file.exists():
            return config_file

    return None


def _load_config(path: Optional[Path] = None) -> dict:
    """Load raw configuration from file."""
    if path is None:
        path = _find_config_file()

    if path is None or not path.exists():
        return {}

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (tomllib.TOMLDecodeError, OSError) as e:
        raise ConfigError(f"Failed to read {path}: {e}") from e


def _validate_format(value: str) -> OutputFormat:
    if value not in OUTPUT_FORMATS:
        raise ConfigError(f"Invalid output format '{value}', expected one of: {', '.join(OUTPUT_FORMATS)}")
    return value  # type: ignore[return-value]


def _validate_log_level(value: str) -> str:
    level = str(value).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"Invalid log level '{value}'")
    return level


def build_config(
    output_format: Optional[str] = None,
    auto_select: bool = False,
    path: Optional[Path] = None,
) -> SelectorConfig:
    """Build the run configuration.

    Args:
        output_format: --format value, None to use the file default
        auto_select: --auto flag
        path: Explicit config file, otherwise searched from the cwd upwards

    Returns:
        SelectorConfig

    Raises:
        ConfigError: If the file can't be parsed or holds invalid values
    """
    defaults = _load_config(path).get("default", {})
    if not isinstance(defaults, dict):
        raise ConfigError("[default] must be a table")

    fmt = output_format if output_format is not None else defaults.get("format", "plain")

    return SelectorConfig(
        output_format=_validate_format(fmt),
        auto_select=auto_select,
        log_level=_validate_log_level(defaults.get("log_level", "WARNING")),
    )
