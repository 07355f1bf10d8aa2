"""The first line of the status bar: the Ctrl-key mode indicators."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Sequence

from zjmux.styling import (
    InputMode,
    LinePart,
    ModeInfo,
    Palette,
    PaletteSource,
    Style,
    ansi_strings,
    styled,
)


@dataclass(frozen=True)
class ColoredElements:
    """The styles of every element drawn on the first status line."""

    selected_prefix_separator: Style
    selected_char_left_separator: Style
    selected_char_shortcut: Style
    selected_char_right_separator: Style
    selected_styled_text: Style
    selected_suffix_separator: Style
    unselected_prefix_separator: Style
    unselected_char_left_separator: Style
    unselected_char_shortcut: Style
    unselected_char_right_separator: Style
    unselected_styled_text: Style
    unselected_suffix_separator: Style
    disabled_prefix_separator: Style
    disabled_styled_text: Style
    disabled_suffix_separator: Style
    selected_single_letter_prefix_separator: Style
    selected_single_letter_char_shortcut: Style
    selected_single_letter_suffix_separator: Style
    unselected_single_letter_prefix_separator: Style
    unselected_single_letter_char_shortcut: Style
    unselected_single_letter_suffix_separator: Style
    superkey_prefix: Style
    superkey_suffix_separator: Style


def color_elements(palette: Palette) -> ColoredElements:
    """Choose element styles for the palette, depending on where it came from."""
    p = palette
    # The palette has no "gray", so cyan serves as the bar background.
    if p.source is PaletteSource.DEFAULT:
        return ColoredElements(
            selected_prefix_separator=styled(p.cyan, p.green),
            selected_char_left_separator=styled(p.black, p.green).bold(),
            selected_char_shortcut=styled(p.red, p.green).bold(),
            selected_char_right_separator=styled(p.black, p.green).bold(),
            selected_styled_text=styled(p.black, p.green).bold(),
            selected_suffix_separator=styled(p.green, p.cyan).bold(),
            unselected_prefix_separator=styled(p.cyan, p.fg),
            unselected_char_left_separator=styled(p.black, p.fg).bold(),
            unselected_char_shortcut=styled(p.red, p.fg).bold(),
            unselected_char_right_separator=styled(p.black, p.fg).bold(),
            unselected_styled_text=styled(p.black, p.fg).bold(),
            unselected_suffix_separator=styled(p.fg, p.cyan),
            disabled_prefix_separator=styled(p.cyan, p.fg),
            disabled_styled_text=styled(p.cyan, p.fg).dimmed(),
            disabled_suffix_separator=styled(p.fg, p.cyan),
            selected_single_letter_prefix_separator=styled(p.cyan, p.green),
            selected_single_letter_char_shortcut=styled(p.red, p.green).bold(),
            selected_single_letter_suffix_separator=styled(p.green, p.cyan),
            unselected_single_letter_prefix_separator=styled(p.cyan, p.fg),
            unselected_single_letter_char_shortcut=styled(p.red, p.fg).bold(),
            unselected_single_letter_suffix_separator=styled(p.fg, p.cyan),
            superkey_prefix=styled(p.white, p.cyan).bold(),
            superkey_suffix_separator=styled(p.cyan, p.cyan),
        )
    return ColoredElements(
        selected_prefix_separator=styled(p.cyan, p.green),
        selected_char_left_separator=styled(p.fg, p.green).bold(),
        selected_char_shortcut=styled(p.red, p.green).bold(),
        selected_char_right_separator=styled(p.fg, p.green).bold(),
        selected_styled_text=styled(p.cyan, p.green).bold(),
        selected_suffix_separator=styled(p.green, p.cyan).bold(),
        unselected_prefix_separator=styled(p.cyan, p.fg),
        unselected_char_left_separator=styled(p.cyan, p.fg).bold(),
        unselected_char_shortcut=styled(p.red, p.fg).bold(),
        unselected_char_right_separator=styled(p.cyan, p.fg).bold(),
        unselected_styled_text=styled(p.cyan, p.fg).bold(),
        unselected_suffix_separator=styled(p.fg, p.cyan),
        disabled_prefix_separator=styled(p.cyan, p.fg),
        disabled_styled_text=styled(p.cyan, p.fg).dimmed(),
        disabled_suffix_separator=styled(p.fg, p.cyan),
        selected_single_letter_prefix_separator=styled(p.fg, p.green),
        selected_single_letter_char_shortcut=styled(p.red, p.green).bold(),
        selected_single_letter_suffix_separator=styled(p.green, p.fg),
        unselected_single_letter_prefix_separator=styled(p.fg, p.cyan),
        unselected_single_letter_char_shortcut=styled(p.red, p.fg).bold(),
        unselected_single_letter_suffix_separator=styled(p.fg, p.cyan),
        superkey_prefix=styled(p.cyan, p.fg).bold(),
        superkey_suffix_separator=styled(p.fg, p.cyan),
    )


class _CtrlKeyAction(enum.Enum):
    LOCK = ("LOCK", "g")
    PANE = ("PANE", "p")
    TAB = ("TAB", "t")
    RESIZE = ("RESIZE", "r")
    SCROLL = ("SCROLL", "s")
    QUIT = ("QUIT", "q")
    SESSION = ("SESSION", "o")

    def __init__(self, full_text: str, letter: str) -> None:
        self.full_text = full_text
        self.letter = letter


class _CtrlKeyMode(enum.Enum):
    UNSELECTED = enum.auto()
    SELECTED = enum.auto()
    DISABLED = enum.auto()


_KEY_ORDER = (
    _CtrlKeyAction.LOCK,
    _CtrlKeyAction.PANE,
    _CtrlKeyAction.TAB,
    _CtrlKeyAction.RESIZE,
    _CtrlKeyAction.SCROLL,
    _CtrlKeyAction.SESSION,
    _CtrlKeyAction.QUIT,
)

_SELECTED_ACTION = {
    InputMode.NORMAL: None,
    InputMode.RESIZE: _CtrlKeyAction.RESIZE,
    InputMode.PANE: _CtrlKeyAction.PANE,
    InputMode.TAB: _CtrlKeyAction.TAB,
    InputMode.RENAME_TAB: _CtrlKeyAction.TAB,
    InputMode.SCROLL: _CtrlKeyAction.SCROLL,
    InputMode.SESSION: _CtrlKeyAction.SESSION,
}

_Shortcut = tuple[_CtrlKeyMode, _CtrlKeyAction]


def _mode_shortcut(
    letter: str, text: str, selected: bool, colors: ColoredElements, separator: str
) -> LinePart:
    prefix = "selected" if selected else "unselected"

    def style(name: str) -> Style:
        return getattr(colors, f"{prefix}_{name}")

    part = ansi_strings(
        [
            style("prefix_separator").paint(separator),
            style("char_left_separator").paint(" <"),
            style("char_shortcut").paint(letter),
            style("char_right_separator").paint(">"),
            style("styled_text").paint(f"{text} "),
            style("suffix_separator").paint(separator),
        ]
    )
    # arrows, char separators, the character and the text padding
    return LinePart(part, len(text) + 7)


def _disabled_mode_shortcut(text: str, colors: ColoredElements, separator: str) -> LinePart:
    part = "".join(
        str(painted)
        for painted in (
            colors.disabled_prefix_separator.paint(separator),
            colors.disabled_styled_text.paint(f"{text} "),
            colors.disabled_suffix_separator.paint(separator),
        )
    )
    return LinePart(part, len(text) + 3)


def _single_letter_shortcut(
    letter: str, selected: bool, colors: ColoredElements, separator: str
) -> LinePart:
    prefix = "selected" if selected else "unselected"
    text = f" {letter} "
    part = ansi_strings(
        [
            getattr(colors, f"{prefix}_single_letter_prefix_separator").paint(separator),
            getattr(colors, f"{prefix}_single_letter_char_shortcut").paint(text),
            getattr(colors, f"{prefix}_single_letter_suffix_separator").paint(separator),
        ]
    )
    return LinePart(part, len(text) + 4)


def _full_ctrl_key(shortcut: _Shortcut, colors: ColoredElements, separator: str) -> LinePart:
    mode, action = shortcut
    if mode is _CtrlKeyMode.DISABLED:
        return _disabled_mode_shortcut(
            f" <{action.letter}> {action.full_text}", colors, separator
        )
    return _mode_shortcut(
        action.letter,
        f" {action.full_text}",
        mode is _CtrlKeyMode.SELECTED,
        colors,
        separator,
    )


def _single_letter_ctrl_key(
    shortcut: _Shortcut, colors: ColoredElements, separator: str
) -> LinePart:
    mode, action = shortcut
    if mode is _CtrlKeyMode.DISABLED:
        return _disabled_mode_shortcut(f" {action.letter}", colors, separator)
    return _single_letter_shortcut(
        action.letter, mode is _CtrlKeyMode.SELECTED, colors, separator
    )


def _key_indicators(
    max_len: int, keys: Sequence[_Shortcut], colors: ColoredElements, separator: str
) -> LinePart:
    for render in (_full_ctrl_key, _single_letter_ctrl_key):
        pieces = [render(key, colors, separator) for key in keys]
        line = LinePart(
            "".join(piece.part for piece in pieces), sum(piece.len for piece in pieces)
        )
        if line.len < max_len:
            return line
    return LinePart()


def superkey(palette: ColoredElements, separator: str) -> LinePart:
    """The leading " Ctrl +" indicator."""
    prefix_text = " Ctrl +"
    part = ansi_strings(
        [
            palette.superkey_prefix.paint(prefix_text),
            palette.superkey_suffix_separator.paint(separator),
        ]
    )
    return LinePart(part, len(prefix_text))


def ctrl_keys(mode_info: ModeInfo, max_len: int, separator: str) -> LinePart:
    """The mode indicators, shortened or dropped to fit into max_len columns."""
    colors = color_elements(mode_info.palette)
    if mode_info.mode is InputMode.LOCKED:
        keys = [
            (
                _CtrlKeyMode.SELECTED if action is _CtrlKeyAction.LOCK else _CtrlKeyMode.DISABLED,
                action,
            )
            for action in _KEY_ORDER
        ]
    else:
        selected = _SELECTED_ACTION[mode_info.mode]
        keys = [
            (
                _CtrlKeyMode.SELECTED if action is selected else _CtrlKeyMode.UNSELECTED,
                action,
            )
            for action in _KEY_ORDER
        ]
    return _key_indicators(max_len, keys, colors, separator)