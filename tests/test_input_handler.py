import pytest

from zjmux.command_is_executing import CommandIsExecuting
from zjmux.input_handler import (
    Action,
    ActionKind,
    Direction,
    ExitReason,
    Key,
    KeyEvent,
    KeyKind,
    MouseInput,
    MouseKind,
    Point,
    UnsupportedEvent,
    input_loop,
    parse_input,
)
from zjmux.styling import InputMode

QUIT = bytes([17])
MOVE_FOCUS_LEFT_IN_NORMAL_MODE = bytes([27, 104])
BRACKETED_PASTE_START = bytes([27, 91, 50, 48, 48, 126])
BRACKETED_PASTE_END = bytes([27, 91, 50, 48, 49, 126])


class FakeOs:
    def __init__(self, stdin_events, command_is_executing):
        self.stdin_events = list(stdin_events) + [QUIT]
        self.sent = []
        self.cie = command_is_executing
        self.repeated = []

    def read_from_stdin(self):
        if not self.stdin_events:
            raise RuntimeError("ran out of stdin events!")
        return self.stdin_events.pop(0)

    def send_to_server(self, msg):
        self.sent.append(msg)
        self.cie.unblock_input_thread()

    def enable_mouse(self):
        pass

    def start_action_repeater(self, action):
        self.repeated.append(action)


def keybinds(key, raw, mode):
    if key == Key.ctrl("q"):
        return [Action(ActionKind.QUIT)]
    if key == Key.alt("h"):
        return [Action(ActionKind.MOVE_FOCUS_OR_TAB, Direction.LEFT)]
    return [Action(ActionKind.WRITE, raw)]


def run(stdin_events):
    cie = CommandIsExecuting()
    os_api = FakeOs(stdin_events, cie)
    instructions = []
    input_loop(os_api, keybinds, cie, instructions.append, InputMode.NORMAL, False)
    return os_api, instructions


def test_quit_breaks_input_loop():
    os_api, instructions = run([])
    assert os_api.sent == [Action(ActionKind.QUIT)]
    assert instructions == [ExitReason.NORMAL]


def test_move_focus_left_in_pane_mode():
    os_api, _ = run([MOVE_FOCUS_LEFT_IN_NORMAL_MODE])
    assert os_api.sent == [
        Action(ActionKind.MOVE_FOCUS_OR_TAB, Direction.LEFT),
        Action(ActionKind.QUIT),
    ]


def test_bracketed_paste():
    os_api, _ = run(
        [BRACKETED_PASTE_START, MOVE_FOCUS_LEFT_IN_NORMAL_MODE, BRACKETED_PASTE_END]
    )
    assert os_api.sent == [
        Action(ActionKind.WRITE, MOVE_FOCUS_LEFT_IN_NORMAL_MODE),
        Action(ActionKind.QUIT),
    ]


def test_mouse_left_click():
    os_api, _ = run([b"\x1b[M" + bytes([32, 32 + 6, 32 + 3])])
    assert os_api.sent[0] == Action(ActionKind.LEFT_CLICK, Point(2, 5))


def test_mouse_hold_starts_repeater():
    os_api, _ = run([b"\x1b[<32;3;4M"])
    assert os_api.repeated == [Action(ActionKind.MOUSE_HOLD, Point(3, 2))]


def test_alt_left_bracket_is_a_key():
    os_api, _ = run([b"\x1b["])
    assert os_api.sent[0] == Action(ActionKind.WRITE, b"\x1b[")


@pytest.mark.parametrize(
    "data,key",
    [
        (b"\x11", Key.ctrl("q")),
        (b"\x1bh", Key.alt("h")),
        (b"a", Key.ch("a")),
        (b"\n", Key.ch("\n")),
        (b"\x7f", Key(KeyKind.BACKSPACE)),
        (b"\x1b[A", Key(KeyKind.UP)),
        (b"\x1b[3~", Key(KeyKind.DELETE)),
        (b"\x1bOP", Key(KeyKind.F, "1")),
        ("é".encode(), Key.ch("é")),
    ],
)
def test_parse_keys(data, key):
    assert parse_input(data) == [KeyEvent(key, data)]


def test_parse_paste_markers_are_unsupported():
    assert parse_input(BRACKETED_PASTE_START) == [UnsupportedEvent(BRACKETED_PASTE_START)]


def test_parse_sgr_release():
    (event,) = parse_input(b"\x1b[<0;1;1m")
    assert isinstance(event, MouseInput)
    assert event.event.kind is MouseKind.RELEASE
    assert event.event.point == Point(0, 0)


def test_parse_several_events():
    assert [e.key for e in parse_input(b"ab")] == [Key.ch("a"), Key.ch("b")]