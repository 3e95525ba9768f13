from tmux_selector.selection import select_best

from conftest import make_pane


def test_active_pane_beats_older_and_newer_neighbours(panes):
    # main:0.1 is active with 2000, the 500 pane after it does not exceed that
    assert select_best(panes, "main:0.0") == 1


def test_invoking_pane_is_never_chosen(panes):
    assert select_best(panes, "main:0.1") == 0


def test_most_recent_inactive_pane_wins():
    snapshot = (
        make_pane(pane=0, last_used=100),
        make_pane(pane=1, last_used=300),
        make_pane(pane=2, last_used=200),
    )
    assert select_best(snapshot, "other:0.0") == 1


def test_equal_timestamps_keep_first():
    snapshot = (make_pane(pane=0, last_used=100), make_pane(pane=1, last_used=100))
    assert select_best(snapshot, "other:0.0") == 0


def test_later_active_pane_overrides_more_recent_one():
    snapshot = (make_pane(pane=0, last_used=900), make_pane(pane=1, last_used=10, active=True))
    assert select_best(snapshot, "other:0.0") == 1


def test_active_pane_lowers_running_best_time():
    # After the active pane resets the best time to 0, a small timestamp
    # outranks the earlier, more recent inactive pane.
    snapshot = (
        make_pane(pane=0, last_used=900),
        make_pane(pane=1, last_used=0, active=True),
        make_pane(pane=2, last_used=5),
    )
    assert select_best(snapshot, "other:0.0") == 2


def test_unknown_timestamps_fall_back_to_first_other_pane():
    snapshot = (make_pane(pane=0, last_used=0), make_pane(pane=1, last_used=0))
    assert select_best(snapshot, "main:0.0") == 1
    assert select_best(snapshot, "other:0.0") == 0


def test_only_invoking_pane_gives_none():
    assert select_best((make_pane(),), "main:0.0") is None


def test_empty_snapshot_gives_none():
    assert select_best((), "main:0.0") is None


def test_same_input_same_answer(panes):
    assert {select_best(panes, "main:0.0") for _ in range(5)} == {1}
