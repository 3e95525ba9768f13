import asyncio

from tmux_selector.ui.picker import PaneSelectApp
from tmux_selector.ui.state import Browsing


def run_picker(panes, cursor, keys):
    """Drive the picker headless with a scripted key sequence."""

    async def scenario():
        app = PaneSelectApp(panes, Browsing(cursor=cursor))
        async with app.run_test() as pilot:
            await pilot.press(*keys)
        return app

    return asyncio.run(scenario())


def test_enter_selects_highlighted_pane(panes):
    app = run_picker(panes, 1, ["enter"])
    assert app.return_value == panes[1]


def test_moves_wrap_before_selecting(panes):
    app = run_picker(panes, 1, ["down", "j", "enter"])
    assert app.return_value == panes[0]


def test_backward_keys(panes):
    app = run_picker(panes, 0, ["up", "k", "enter"])
    assert app.return_value == panes[1]


def test_q_cancels(panes):
    app = run_picker(panes, 2, ["down", "q"])
    assert app.return_value is None


def test_escape_cancels(panes):
    app = run_picker(panes, 0, ["escape"])
    assert app.return_value is None


def test_unbound_keys_are_ignored(panes):
    app = run_picker(panes, 0, ["x", "tab", "enter"])
    assert app.return_value == panes[0]


def test_ctrl_c_cancels(panes):
    app = run_picker(panes, 1, ["down", "ctrl+c"])
    assert app.return_value is None


def test_control_keys_navigate(panes):
    app = run_picker(panes, 0, ["ctrl+j", "ctrl+j", "ctrl+k", "enter"])
    assert app.return_value == panes[1]


def test_resize_keeps_cursor(panes):
    async def scenario():
        app = PaneSelectApp(panes, Browsing(cursor=2))
        async with app.run_test(size=(80, 24)) as pilot:
            await pilot.resize_terminal(120, 40)
            await pilot.pause()
            cursor_after_resize = app.state
            await pilot.press("enter")
        return app, cursor_after_resize

    app, state = asyncio.run(scenario())

    assert state == Browsing(cursor=2)
    assert app.return_value == panes[2]
