"""Rendering of a single tab in the tab bar."""

from __future__ import annotations

from zjmux.styling import LinePart, Palette, PluginCapabilities, ansi_strings, styled
from zjmux.tab_line import tab_separator


def _tab(text: str, background, palette: Palette, separator: str) -> LinePart:
    part = ansi_strings(
        [
            styled(palette.cyan, background).paint(separator),
            styled(palette.black, background).bold().paint(f" {text} "),
            styled(background, palette.cyan).paint(separator),
        ]
    )
    # the two separators and the padding around the text
    return LinePart(part, len(text) + 4)


def active_tab(text: str, palette: Palette, separator: str) -> LinePart:
    """The focused tab, drawn on the green background."""
    return _tab(text, palette.green, palette, separator)


def non_active_tab(text: str, palette: Palette, separator: str) -> LinePart:
    """An unfocused tab, drawn on the foreground colour."""
    return _tab(text, palette.fg, palette, separator)


def tab_style(
    text: str,
    is_active_tab: bool,
    is_sync_panes_active: bool,
    palette: Palette,
    capabilities: PluginCapabilities,
) -> LinePart:
    """Render a tab, marking it when its panes are synchronised."""
    separator = tab_separator(capabilities)
    if is_sync_panes_active:
        text = f"{text} (Sync)"
    if is_active_tab:
        return active_tab(text, palette, separator)
    return non_active_tab(text, palette, separator)