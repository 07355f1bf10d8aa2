import re

from zjmux.status_bar import StatusBar
from zjmux.styling import (
    ARROW_SEPARATOR,
    InputMode,
    ModeInfo,
    Palette,
    PaletteColor,
    PluginCapabilities,
)

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


def test_render_produces_two_lines():
    bar = StatusBar()
    out = bar.render(2, 200)
    lines = out.split("\n")
    assert len(lines) == 3
    assert lines[2] == ""
    first = _ANSI.sub("", lines[0])
    assert "Ctrl +" in first
    for name in ("LOCK", "PANE", "TAB", "RESIZE", "SCROLL", "SESSION", "QUIT"):
        assert name in first
    assert lines[1].startswith("\x1b[m")
    assert "Tip:" in lines[1]


def test_first_line_ends_with_palette_background():
    bar = StatusBar()
    first = bar.render(2, 200).split("\n")[0]
    code = Palette().cyan.background_code()
    assert first.endswith(f"\x1b[{code}m\x1b[0K")


def test_rgb_background():
    palette = Palette(cyan=PaletteColor.rgb(1, 2, 3))
    bar = StatusBar(ModeInfo(palette=palette))
    first = bar.render(2, 200).split("\n")[0]
    assert first.endswith("\x1b[48;2;1;2;3m\x1b[0K")


def test_separator_depends_on_arrow_fonts():
    with_arrows = StatusBar().render(2, 200)
    assert ARROW_SEPARATOR in with_arrows
    plain = StatusBar(ModeInfo(capabilities=PluginCapabilities(arrow_fonts=True)))
    assert ARROW_SEPARATOR not in plain.render(2, 200)


def test_update_replaces_mode_info():
    bar = StatusBar()
    locked = ModeInfo(mode=InputMode.LOCKED)
    bar.update(locked)
    assert bar.mode_info is locked
    assert "INTERFACE LOCKED" in bar.render(2, 200)


def test_narrow_render_drops_indicators():
    out = StatusBar().render(2, 10)
    first = _ANSI.sub("", out.split("\n")[0])
    assert "Ctrl +" in first
    assert "LOCK" not in first
    assert " g " not in first