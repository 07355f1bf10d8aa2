from zjmux.styling import ARROW_SEPARATOR, Palette, PluginCapabilities
from zjmux.tab_style import active_tab, non_active_tab, tab_style

PALETTE = Palette()


def test_active_tab_length_and_padding():
    line = active_tab("editor", PALETTE, ARROW_SEPARATOR)
    assert line.len == len("editor") + 4
    assert " editor " in line.part
    assert PALETTE.green.background_code() in line.part


def test_non_active_tab_uses_fg_background():
    line = non_active_tab("logs", PALETTE, ARROW_SEPARATOR)
    assert line.len == len("logs") + 4
    assert PALETTE.fg.background_code() in line.part
    assert PALETTE.green.background_code() not in line.part


def test_tab_style_active_matches_active_tab():
    caps = PluginCapabilities(arrow_fonts=False)
    assert tab_style("a", True, False, PALETTE, caps) == active_tab(
        "a", PALETTE, ARROW_SEPARATOR
    )


def test_tab_style_inactive_matches_non_active_tab():
    caps = PluginCapabilities(arrow_fonts=False)
    assert tab_style("a", False, False, PALETTE, caps) == non_active_tab(
        "a", PALETTE, ARROW_SEPARATOR
    )


def test_tab_style_sync_suffix():
    caps = PluginCapabilities(arrow_fonts=False)
    line = tab_style("shell", True, True, PALETTE, caps)
    assert line == active_tab("shell (Sync)", PALETTE, ARROW_SEPARATOR)
    assert "shell (Sync)" in line.part


def test_arrow_fonts_drop_separator():
    caps = PluginCapabilities(arrow_fonts=True)
    line = tab_style("x", False, False, PALETTE, caps)
    assert line == non_active_tab("x", PALETTE, "")
    assert ARROW_SEPARATOR not in line.part