"""The second line of the status bar: key hints for the current mode."""

from __future__ import annotations

from typing import Sequence

from zjmux.styling import MORE_MSG, InputMode, LinePart, ModeInfo, Palette, Style


def _join(parts: Sequence[object]) -> str:
    return "".join(str(part) for part in parts)


def _shortcut(
    is_first_shortcut: bool,
    letter: str,
    description: str,
    letter_style: Style,
    palette: Palette,
) -> LinePart:
    white = Style().fg(palette.white)
    separator_text = " " if is_first_shortcut else " / "
    part = _join(
        [
            white.paint(separator_text),
            white.paint("<"),
            letter_style.paint(letter),
            white.paint("> "),
            white.bold().paint(description),
        ]
    )
    # the <>'s around the shortcut and the space after it
    length = len(letter) + 3 + len(description) + len(separator_text)
    return LinePart(part, length)


def _full_length_shortcut(
    is_first_shortcut: bool, letter: str, description: str, palette: Palette
) -> LinePart:
    green = Style().fg(palette.green).bold()
    return _shortcut(is_first_shortcut, letter, description, green, palette)


def _first_word_shortcut(
    is_first_shortcut: bool, letter: str, description: str, palette: Palette
) -> LinePart:
    green = Style().fg(palette.green).bold()
    first_word = description.split(" ")[0]
    return _shortcut(is_first_shortcut, letter, first_word, green, palette)


def _select_pane_shortcut(is_first_shortcut: bool, palette: Palette) -> LinePart:
    orange = Style().fg(palette.orange).bold()
    return _shortcut(is_first_shortcut, "ENTER", "Select pane", orange, palette)


def _quicknav(palette: Palette, pieces: Sequence[tuple[str, str]]) -> LinePart:
    """Render (kind, text) pieces where kind is plain, alt or key."""
    styles = {
        "plain": None,
        "alt": Style().fg(palette.orange).bold(),
        "key": Style().fg(palette.green).bold(),
    }
    rendered = []
    for kind, text in pieces:
        style = styles[kind]
        rendered.append(text if style is None else str(style.paint(text)))
    return LinePart("".join(rendered), sum(len(text) for _, text in pieces))


def _quicknav_full(palette: Palette) -> LinePart:
    return _quicknav(
        palette,
        [
            ("plain", " Tip: "),
            ("alt", "Alt"),
            ("plain", " + "),
            ("key", "n"),
            ("plain", " => open new pane. "),
            ("alt", "Alt"),
            ("plain", " + "),
            ("key", "[]"),
            ("plain", " or "),
            ("key", "hjkl"),
            ("plain", " => navigate between panes."),
        ],
    )


def _quicknav_medium(palette: Palette) -> LinePart:
    return _quicknav(
        palette,
        [
            ("plain", " Tip: "),
            ("alt", "Alt"),
            ("plain", " + "),
            ("key", "n"),
            ("plain", " => new pane. "),
            ("alt", "Alt"),
            ("plain", " + "),
            ("key", "[]"),
            ("plain", " or "),
            ("key", "hjkl"),
            ("plain", " => navigate."),
        ],
    )


def _quicknav_short(palette: Palette) -> LinePart:
    return _quicknav(
        palette,
        [
            ("plain", " QuickNav: "),
            ("alt", "Alt"),
            ("plain", " + "),
            ("key", "n"),
            ("plain", "/"),
            ("key", "[]"),
            ("plain", "/"),
            ("key", "hjkl"),
        ],
    )


def _locked_interface_indication(palette: Palette) -> LinePart:
    text = " -- INTERFACE LOCKED -- "
    return LinePart(str(Style().fg(palette.white).bold().paint(text)), len(text))


def _shortcut_list(mode_info: ModeInfo, render) -> LinePart:
    pieces = [
        render(index == 0, letter, description, mode_info.palette)
        for index, (letter, description) in enumerate(mode_info.keybinds)
    ]
    pieces.append(_select_pane_shortcut(not mode_info.keybinds, mode_info.palette))
    return LinePart(
        "".join(piece.part for piece in pieces), sum(piece.len for piece in pieces)
    )


def _full_shortcut_list(mode_info: ModeInfo) -> LinePart:
    if mode_info.mode is InputMode.NORMAL:
        return _quicknav_full(mode_info.palette)
    if mode_info.mode is InputMode.LOCKED:
        return _locked_interface_indication(mode_info.palette)
    return _shortcut_list(mode_info, _full_length_shortcut)


def _shortened_shortcut_list(mode_info: ModeInfo) -> LinePart:
    if mode_info.mode is InputMode.NORMAL:
        return _quicknav_medium(mode_info.palette)
    if mode_info.mode is InputMode.LOCKED:
        return _locked_interface_indication(mode_info.palette)
    return _shortcut_list(mode_info, _first_word_shortcut)


def _best_effort_shortcut_list(mode_info: ModeInfo, max_len: int) -> LinePart:
    if mode_info.mode in (InputMode.NORMAL, InputMode.LOCKED):
        line = (
            _quicknav_short(mode_info.palette)
            if mode_info.mode is InputMode.NORMAL
            else _locked_interface_indication(mode_info.palette)
        )
        return line if line.len <= max_len else LinePart()

    line = LinePart()
    for index, (letter, description) in enumerate(mode_info.keybinds):
        shortcut = _first_word_shortcut(index == 0, letter, description, mode_info.palette)
        if line.len + shortcut.len + len(MORE_MSG) > max_len:
            line.part += MORE_MSG
            line.len += len(MORE_MSG)
            break
        line.part += shortcut.part
        line.len += shortcut.len
    select_pane = _select_pane_shortcut(not mode_info.keybinds, mode_info.palette)
    if line.len + select_pane.len <= max_len:
        line.part += select_pane.part
        line.len += select_pane.len
    return line


def keybinds(mode_info: ModeInfo, max_width: int) -> LinePart:
    """The most complete hint line that fits into max_width columns."""
    full = _full_shortcut_list(mode_info)
    if full.len <= max_width:
        return full
    shortened = _shortened_shortcut_list(mode_info)
    if shortened.len <= max_width:
        return shortened
    return _best_effort_shortcut_list(mode_info, max_width)