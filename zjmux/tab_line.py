"""Layout of the tab bar: which tabs fit and the "more tabs" markers."""

from __future__ import annotations

from typing import Optional, Sequence

from zjmux.styling import (
    ARROW_SEPARATOR,
    LinePart,
    Palette,
    PluginCapabilities,
    ansi_strings,
    styled,
)

_MANY_THRESHOLD = 10000


def _title_len(parts: Sequence[LinePart]) -> int:
    return sum(part.len for part in parts)


def _populate_tabs(
    before: list[LinePart], after: list[LinePart], to_render: list[LinePart], cols: int
) -> None:
    """Move tabs around the active one into to_render, alternating sides."""
    take_next = True
    while before or after:
        current = _title_len(to_render)
        if current >= cols:
            break
        can_take_next = bool(after) and after[0].len + current <= cols
        can_take_previous = bool(before) and before[-1].len + current <= cols
        if take_next and can_take_next:
            to_render.append(after.pop(0))
            take_next = False
        elif can_take_previous:
            to_render.insert(0, before.pop())
            take_next = True
        elif can_take_next:
            to_render.append(after.pop(0))
            take_next = False
        else:
            break


def _more_message(text: str, length: int, palette: Palette, separator: str) -> LinePart:
    part = ansi_strings(
        [
            styled(palette.cyan, palette.orange).paint(separator),
            styled(palette.black, palette.orange).bold().paint(text),
            styled(palette.orange, palette.cyan).paint(separator),
        ]
    )
    return LinePart(part, length)


def _left_more_message(count: int, palette: Palette, separator: str) -> LinePart:
    if count == 0:
        return LinePart()
    text = f" ← +{count} " if count < _MANY_THRESHOLD else " ← +many "
    return _more_message(text, len(text) + 2, palette, separator)


def _right_more_message(count: int, palette: Palette, separator: str) -> LinePart:
    if count == 0:
        return LinePart()
    text = f" +{count} → " if count < _MANY_THRESHOLD else " +many → "
    return _more_message(text, len(text) + 1, palette, separator)


def _add_previous_tabs_msg(
    before: list[LinePart],
    to_render: list[LinePart],
    title_bar: list[LinePart],
    cols: int,
    palette: Palette,
    separator: str,
) -> None:
    while (
        _title_len(to_render) + _left_more_message(len(before), palette, separator).len
        >= cols
    ):
        before.append(to_render.pop(0))
    title_bar.append(_left_more_message(len(before), palette, separator))


def _add_next_tabs_msg(
    after: list[LinePart],
    title_bar: list[LinePart],
    cols: int,
    palette: Palette,
    separator: str,
) -> None:
    while (
        _title_len(title_bar) + _right_more_message(len(after), palette, separator).len
        >= cols
    ):
        after.insert(0, title_bar.pop())
    title_bar.append(_right_more_message(len(after), palette, separator))


def _tab_line_prefix(session_name: Optional[str], palette: Palette) -> LinePart:
    text = " Zellij "
    if session_name is not None:
        text += f"({session_name}) "
    painted = styled(palette.white, palette.cyan).bold().paint(text)
    return LinePart(str(painted), len(text))


def tab_separator(capabilities: PluginCapabilities) -> str:
    """The separator glyph, empty when arrow fonts are not to be used."""
    return "" if capabilities.arrow_fonts else ARROW_SEPARATOR


def tab_line(
    session_name: Optional[str],
    all_tabs: Sequence[LinePart],
    active_tab_index: int,
    cols: int,
    palette: Palette,
    capabilities: PluginCapabilities,
) -> list[LinePart]:
    """The parts of the tab bar, prefix first, fitted into cols columns."""
    after = list(all_tabs[active_tab_index:])
    before = list(all_tabs[:active_tab_index])
    active = after.pop(0) if after else before.pop()
    to_render = [active]

    prefix = _tab_line_prefix(session_name, palette)
    available = cols - prefix.len
    _populate_tabs(before, after, to_render, available)

    separator = tab_separator(capabilities)
    line: list[LinePart] = []
    if before:
        _add_previous_tabs_msg(before, to_render, line, available, palette, separator)
    line.extend(to_render)
    if after:
        _add_next_tabs_msg(after, line, available, palette, separator)
    line.insert(0, prefix)
    return line