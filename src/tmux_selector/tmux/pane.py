"""Pane listing - snapshot of every pane tmux knows about."""

from dataclasses import asdict, dataclass
import logging

from .core import run_tmux
from .exceptions import AcquisitionError
from ..types import SessionWindowPane

logger = logging.getLogger(__name__)

FIELD_DELIMITER = "|"
LIST_FORMAT = FIELD_DELIMITER.join(
    [
        "#{session_name}",
        "#{window_index}",
        "#{pane_index}",
        "#{pane_title}",
        "#{t:last-used}",
        "#{pane_active}",
    ]
)
_FIELD_COUNT = 6


@dataclass(frozen=True)
class PaneRecord:
    """One tmux pane as seen at snapshot time."""

    session_name: str
    window_index: str  # kept as tmux printed it
    pane_index: str
    pane_title: str
    last_used: int  # seconds, 0 = unknown/never
    is_active: bool

    @property
    def full_id(self) -> SessionWindowPane:
        """Get session:window.pane format."""
        return f"{self.session_name}:{self.window_index}.{self.pane_index}"

    @property
    def display_name(self) -> str:
        """Get display format for the picker list."""
        return f"{self.full_id} - {self.pane_title}"

    def to_dict(self) -> dict:
        """Structured form used for JSON output."""
        data = asdict(self)
        data["full_id"] = self.full_id
        return data


def _parse_timestamp(value: str) -> int:
    """Parse last-used seconds, 0 for anything that isn't an unsigned integer."""
    try:
        seconds = int(value)
    except ValueError:
        return 0
    return seconds if seconds >= 0 else 0


def parse_pane_listing(output: str) -> tuple[PaneRecord, ...]:
    """Parse `list-panes` output into pane records.

    Lines with fewer than six fields are skipped. Order is preserved.

    Args:
        output: Raw stdout of the listing query

    Returns:
        Tuple of PaneRecord, possibly empty
    """
    panes = []

    # Only \n separates records; titles may hold other line-break characters
    for line in output.split("\n"):
        line = line.removesuffix("\r")
        if not line:
            continue

        parts = line.split(FIELD_DELIMITER)
        if len(parts) < _FIELD_COUNT:
            logger.debug(f"Skipping malformed pane line: {line!r}")
            continue

        panes.append(
            PaneRecord(
                session_name=parts[0],
                window_index=parts[1],
                pane_index=parts[2],
                pane_title=parts[3],
                last_used=_parse_timestamp(parts[4]),
                is_active=parts[5] == "1",
            )
        )

    return tuple(panes)


def list_panes() -> tuple[PaneRecord, ...]:
    """List all panes across all sessions.

    Returns:
        Snapshot in tmux's own order

    Raises:
        AcquisitionError: If tmux can't be run or the query fails
    """
    try:
        code, stdout, stderr = run_tmux(["list-panes", "-a", "-F", LIST_FORMAT])
    except OSError as e:
        raise AcquisitionError(f"Failed to get tmux panes: {e}") from e
    except UnicodeDecodeError as e:
        raise AcquisitionError(f"Failed to read tmux panes: {e}") from e

    if code != 0:
        raise AcquisitionError(f"Failed to get tmux panes: {stderr.strip() or f'exit status {code}'}")

    panes = parse_pane_listing(stdout)
    logger.debug(f"Listed {len(panes)} panes")
    return panes
