"""Reading terminal input, turning it into actions and dispatching them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Protocol, Sequence, Union

from zjmux.command_is_executing import CommandIsExecuting
from zjmux.styling import InputMode

ALT_LEFT_BRACKET = b"\x1b["
BRACKETED_PASTE_START = b"\x1b[200~"
BRACKETED_PASTE_END = b"\x1b[201~"


class KeyKind(enum.Enum):
    CHAR = "char"
    CTRL = "ctrl"
    ALT = "alt"
    F = "f"
    BACKSPACE = "backspace"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    HOME = "home"
    END = "end"
    PAGE_UP = "pageup"
    PAGE_DOWN = "pagedown"
    BACK_TAB = "backtab"
    DELETE = "delete"
    INSERT = "insert"
    ESC = "esc"
    NULL = "null"


@dataclass(frozen=True)
class Key:
    """A key press; char holds the character, or the number of a function key."""

    kind: KeyKind
    char: str = ""

    @classmethod
    def ch(cls, char: str) -> "Key":
        return cls(KeyKind.CHAR, char)

    @classmethod
    def ctrl(cls, char: str) -> "Key":
        return cls(KeyKind.CTRL, char)

    @classmethod
    def alt(cls, char: str) -> "Key":
        return cls(KeyKind.ALT, char)


@dataclass(frozen=True)
class Point:
    line: int
    column: int


class MouseButton(enum.Enum):
    LEFT = "left"
    MIDDLE = "middle"
    RIGHT = "right"
    WHEEL_UP = "wheelup"
    WHEEL_DOWN = "wheeldown"


class MouseKind(enum.Enum):
    PRESS = "press"
    RELEASE = "release"
    HOLD = "hold"


@dataclass(frozen=True)
class MouseEvent:
    kind: MouseKind
    point: Point
    button: Optional[MouseButton] = None


@dataclass(frozen=True)
class KeyEvent:
    key: Key
    raw: bytes


@dataclass(frozen=True)
class MouseInput:
    event: MouseEvent
    raw: bytes


@dataclass(frozen=True)
class UnsupportedEvent:
    raw: bytes


InputEvent = Union[KeyEvent, MouseInput, UnsupportedEvent]


class Direction(enum.Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


class ActionKind(enum.Enum):
    QUIT = "quit"
    DETACH = "detach"
    SWITCH_TO_MODE = "switch_to_mode"
    WRITE = "write"
    CLOSE_FOCUS = "close_focus"
    NEW_PANE = "new_pane"
    NEW_TAB = "new_tab"
    GO_TO_NEXT_TAB = "go_to_next_tab"
    GO_TO_PREVIOUS_TAB = "go_to_previous_tab"
    CLOSE_TAB = "close_tab"
    GO_TO_TAB = "go_to_tab"
    MOVE_FOCUS = "move_focus"
    MOVE_FOCUS_OR_TAB = "move_focus_or_tab"
    SCROLL_UP = "scroll_up"
    SCROLL_DOWN = "scroll_down"
    SCROLL_UP_AT = "scroll_up_at"
    SCROLL_DOWN_AT = "scroll_down_at"
    LEFT_CLICK = "left_click"
    MOUSE_RELEASE = "mouse_release"
    MOUSE_HOLD = "mouse_hold"
    RESIZE = "resize"
    TOGGLE_FULLSCREEN = "toggle_fullscreen"
    NO_OP = "no_op"


@dataclass(frozen=True)
class Action:
    """An action for the server, with its argument if it takes one."""

    kind: ActionKind
    arg: Any = None


_BLOCKING = frozenset(
    {
        ActionKind.CLOSE_FOCUS,
        ActionKind.NEW_PANE,
        ActionKind.NEW_TAB,
        ActionKind.GO_TO_NEXT_TAB,
        ActionKind.GO_TO_PREVIOUS_TAB,
        ActionKind.CLOSE_TAB,
        ActionKind.GO_TO_TAB,
        ActionKind.MOVE_FOCUS_OR_TAB,
    }
)


class ExitReason(enum.Enum):
    NORMAL = "normal"


class ClientOsApi(Protocol):
    def read_from_stdin(self) -> bytes: ...
    def send_to_server(self, msg: Any) -> None: ...
    def enable_mouse(self) -> None: ...
    def start_action_repeater(self, action: Action) -> None: ...


KeyToActions = Callable[[Key, bytes, InputMode], Sequence[Action]]

_TILDE_KEYS = {
    1: Key(KeyKind.HOME),
    7: Key(KeyKind.HOME),
    2: Key(KeyKind.INSERT),
    3: Key(KeyKind.DELETE),
    4: Key(KeyKind.END),
    8: Key(KeyKind.END),
    5: Key(KeyKind.PAGE_UP),
    6: Key(KeyKind.PAGE_DOWN),
}
_F_CODES = {11: 1, 12: 2, 13: 3, 14: 4, 15: 5, 17: 6, 18: 7, 19: 8, 20: 9,
            21: 10, 23: 11, 24: 12}
_FINAL_KEYS = {
    ord("A"): Key(KeyKind.UP),
    ord("B"): Key(KeyKind.DOWN),
    ord("C"): Key(KeyKind.RIGHT),
    ord("D"): Key(KeyKind.LEFT),
    ord("H"): Key(KeyKind.HOME),
    ord("F"): Key(KeyKind.END),
    ord("Z"): Key(KeyKind.BACK_TAB),
}
_SS3_KEYS = {
    ord("P"): Key(KeyKind.F, "1"),
    ord("Q"): Key(KeyKind.F, "2"),
    ord("R"): Key(KeyKind.F, "3"),
    ord("S"): Key(KeyKind.F, "4"),
    **{k: v for k, v in _FINAL_KEYS.items() if k != ord("Z")},
}


def _mouse(cb: int, column: int, line: int, release: bool) -> MouseEvent:
    point = Point(line - 1, column - 1)
    if release:
        return MouseEvent(MouseKind.RELEASE, point)
    if cb & 64:
        button = MouseButton.WHEEL_UP if cb & 1 == 0 else MouseButton.WHEEL_DOWN
        return MouseEvent(MouseKind.PRESS, point, button)
    if cb & 32:
        return MouseEvent(MouseKind.HOLD, point)
    low = cb & 3
    if low == 3:
        return MouseEvent(MouseKind.RELEASE, point)
    button = (MouseButton.LEFT, MouseButton.MIDDLE, MouseButton.RIGHT)[low]
    return MouseEvent(MouseKind.PRESS, point, button)


def _utf8_len(lead: int) -> int:
    if lead < 0x80:
        return 1
    if lead >> 5 == 0b110:
        return 2
    if lead >> 4 == 0b1110:
        return 3
    if lead >> 3 == 0b11110:
        return 4
    return 0


def _decode_char(data: bytes, start: int) -> tuple[Optional[str], int]:
    """Decode one character at start; returns it and the index after it."""
    size = _utf8_len(data[start])
    if size == 0:
        return None, start + 1
    chunk = data[start:start + size]
    try:
        return chunk.decode("utf-8"), start + size
    except UnicodeDecodeError:
        return None, start + 1


def _control_key(byte: int) -> Optional[Key]:
    if byte in (0x0A, 0x0D):
        return Key.ch("\n")
    if byte == 0x09:
        return Key.ch("\t")
    if byte == 0x7F:
        return Key(KeyKind.BACKSPACE)
    if byte == 0:
        return Key(KeyKind.NULL)
    if 0x01 <= byte <= 0x1A:
        return Key.ctrl(chr(byte - 1 + ord("a")))
    if 0x1C <= byte <= 0x1F:
        return Key.ctrl(chr(byte - 0x1C + ord("4")))
    return None


def _parse_csi(data: bytes, start: int) -> tuple[InputEvent, int]:
    """Parse an escape sequence beginning with ESC [ at start."""
    j = start + 2
    if j >= len(data):
        return UnsupportedEvent(data[start:j]), j
    if data[j] == ord("M"):
        if j + 3 < len(data) + 0 and j + 3 <= len(data) - 1 or j + 4 <= len(data):
            cb, cx, cy = data[j + 1] - 32, data[j + 2] - 32, data[j + 3] - 32
            end = j + 4
            return MouseInput(_mouse(cb, cx, cy, False), data[start:end]), end
        return UnsupportedEvent(data[start:]), len(data)
    final = j
    while final < len(data) and not 0x40 <= data[final] <= 0x7E:
        final += 1
    if final >= len(data):
        return UnsupportedEvent(data[start:]), len(data)
    raw = data[start:final + 1]
    params = data[j:final].decode("ascii", errors="replace")
    end_byte = data[final]
    if params.startswith("<") and end_byte in (ord("M"), ord("m")):
        try:
            cb, cx, cy = (int(n) for n in params[1:].split(";"))
        except ValueError:
            return UnsupportedEvent(raw), final + 1
        return MouseInput(_mouse(cb, cx, cy, end_byte == ord("m")), raw), final + 1
    if end_byte == ord("~"):
        try:
            code = int(params)
        except ValueError:
            return UnsupportedEvent(raw), final + 1
        if code in _TILDE_KEYS:
            return KeyEvent(_TILDE_KEYS[code], raw), final + 1
        if code in _F_CODES:
            return KeyEvent(Key(KeyKind.F, str(_F_CODES[code])), raw), final + 1
        return UnsupportedEvent(raw), final + 1
    if params == "" and end_byte in _FINAL_KEYS:
        return KeyEvent(_FINAL_KEYS[end_byte], raw), final + 1
    return UnsupportedEvent(raw), final + 1


def parse_input(data: bytes) -> list[InputEvent]:
    """Split raw terminal input into key, mouse and unsupported events."""
    data = bytes(data)
    events: list[InputEvent] = []
    i = 0
    while i < len(data):
        byte = data[i]
        if byte == 0x1B:
            if i + 1 == len(data):
                events.append(KeyEvent(Key(KeyKind.ESC), data[i:i + 1]))
                i += 1
                continue
            nxt = data[i + 1]
            if nxt == ord("["):
                event, i = _parse_csi(data, i)
                events.append(event)
            elif nxt == ord("O") and i + 2 < len(data):
                raw = data[i:i + 3]
                key = _SS3_KEYS.get(data[i + 2])
                events.append(KeyEvent(key, raw) if key else UnsupportedEvent(raw))
                i += 3
            else:
                char, end = _decode_char(data, i + 1)
                raw = data[i:end]
                events.append(KeyEvent(Key.alt(char), raw) if char else UnsupportedEvent(raw))
                i = end
            continue
        control = _control_key(byte)
        if control is not None:
            events.append(KeyEvent(control, data[i:i + 1]))
            i += 1
            continue
        char, end = _decode_char(data, i)
        raw = data[i:end]
        events.append(KeyEvent(Key.ch(char), raw) if char else UnsupportedEvent(raw))
        i = end
    return events


@dataclass
class InputHandler:
    """Dispatches actions according to the current input mode."""

    os_input: ClientOsApi
    key_to_actions: KeyToActions
    command_is_executing: CommandIsExecuting
    send_client_instruction: Callable[[Any], None]
    mode: InputMode = InputMode.NORMAL
    disable_mouse_mode: bool = False
    should_exit: bool = field(default=False, init=False)
    pasting: bool = field(default=False, init=False)

    def handle_input(self) -> None:
        """Read and dispatch input until an action asks to exit."""
        if not self.disable_mouse_mode:
            self.os_input.enable_mouse()
        while not self.should_exit:
            for event in parse_input(self.os_input.read_from_stdin()):
                if isinstance(event, KeyEvent):
                    self._handle_key(event.key, event.raw)
                elif isinstance(event, MouseInput):
                    self._handle_mouse_event(event.event)
                elif event.raw == ALT_LEFT_BRACKET:
                    self._handle_key(Key.alt("["), event.raw)
                elif event.raw == BRACKETED_PASTE_START:
                    self.pasting = True
                elif event.raw == BRACKETED_PASTE_END:
                    self.pasting = False
                else:
                    self._handle_unknown_key(event.raw)

    def _writes_to_terminal(self) -> bool:
        return self.mode in (InputMode.NORMAL, InputMode.LOCKED)

    def _handle_unknown_key(self, raw: bytes) -> None:
        if self._writes_to_terminal():
            self.dispatch_action(Action(ActionKind.WRITE, raw))

    def _handle_key(self, key: Key, raw: bytes) -> None:
        if self.pasting:
            if self._writes_to_terminal():
                self.dispatch_action(Action(ActionKind.WRITE, raw))
            return
        for action in self.key_to_actions(key, raw, self.mode):
            if self.dispatch_action(action):
                self.should_exit = True

    def _handle_mouse_event(self, event: MouseEvent) -> None:
        if event.kind is MouseKind.PRESS:
            kind = {
                MouseButton.WHEEL_UP: ActionKind.SCROLL_UP_AT,
                MouseButton.WHEEL_DOWN: ActionKind.SCROLL_DOWN_AT,
                MouseButton.LEFT: ActionKind.LEFT_CLICK,
            }.get(event.button)
            if kind is not None:
                self.dispatch_action(Action(kind, event.point))
        elif event.kind is MouseKind.RELEASE:
            self.dispatch_action(Action(ActionKind.MOUSE_RELEASE, event.point))
        else:
            hold = Action(ActionKind.MOUSE_HOLD, event.point)
            self.dispatch_action(hold)
            self.os_input.start_action_repeater(hold)

    def dispatch_action(self, action: Action) -> bool:
        """Send an action to the server; True means the input loop should stop."""
        if action.kind in (ActionKind.QUIT, ActionKind.DETACH):
            self.os_input.send_to_server(action)
            self.send_client_instruction(ExitReason.NORMAL)
            return True
        if action.kind is ActionKind.SWITCH_TO_MODE:
            self.mode = action.arg
            self.os_input.send_to_server(action)
        elif action.kind in _BLOCKING:
            self.command_is_executing.block_input_thread()
            self.os_input.send_to_server(action)
            self.command_is_executing.wait_until_input_thread_is_unblocked()
        else:
            self.os_input.send_to_server(action)
        return False


def input_loop(
    os_input: ClientOsApi,
    key_to_actions: KeyToActions,
    command_is_executing: CommandIsExecuting,
    send_client_instruction: Callable[[Any], None],
    default_mode: InputMode = InputMode.NORMAL,
    disable_mouse_mode: bool = False,
) -> None:
    """Run an input handler until it exits."""
    InputHandler(
        os_input,
        key_to_actions,
        command_is_executing,
        send_client_instruction,
        default_mode,
        disable_mouse_mode,
    ).handle_input()