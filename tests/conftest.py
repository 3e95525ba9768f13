import pytest

from tmux_selector.tmux.pane import PaneRecord


def make_pane(session="main", window="0", pane="0", title="bash", last_used=0, active=False) -> PaneRecord:
    return PaneRecord(
        session_name=session,
        window_index=str(window),
        pane_index=str(pane),
        pane_title=title,
        last_used=last_used,
        is_active=active,
    )


@pytest.fixture
def panes():
    """Three panes: main:0.0 bash, main:0.1 vim (active), main:1.0 bash."""
    return (
        make_pane("main", 0, 0, "bash", 1000, False),
        make_pane("main", 0, 1, "vim", 2000, True),
        make_pane("main", 1, 0, "bash", 500, False),
    )


@pytest.fixture
def listing():
    return "main|0|0|bash|1000|0\nmain|0|1|vim|2000|1\nmain|1|0|bash|500|0\n"
