import json

import pytest

from tmux_selector.errors import ConfigError, SerializationError
from tmux_selector.formatters import format_json, format_pane, format_plain
from tmux_selector.tmux.pane import PaneRecord

from conftest import make_pane


def test_plain_is_full_identifier(panes):
    assert format_plain(panes[1]) == "main:0.1"
    assert format_pane(panes[1], "plain") == "main:0.1"


def test_json_record_fields_and_types(panes):
    output = format_pane(panes[1], "json")

    assert "\n" not in output
    assert json.loads(output) == {
        "session_name": "main",
        "window_index": "0",
        "pane_index": "1",
        "pane_title": "vim",
        "last_used": 2000,
        "is_active": True,
        "full_id": "main:0.1",
    }


def test_json_keeps_non_ascii_titles():
    output = format_json(make_pane(title="café ✓"))
    assert json.loads(output)["pane_title"] == "café ✓"


def test_unencodable_record_raises_serialization_error():
    pane = PaneRecord("main", "0", "0", object(), 0, False)  # type: ignore[arg-type]

    with pytest.raises(SerializationError):
        format_json(pane)


def test_unknown_format_is_rejected(panes):
    with pytest.raises(ConfigError):
        format_pane(panes[0], "yaml")  # type: ignore[arg-type]
