import re

import pytest

from zjmux.styling import (
    RESET,
    InputMode,
    LinePart,
    ModeInfo,
    Palette,
    PaletteColor,
    PaletteSource,
    PluginCapabilities,
    Style,
    ansi_strings,
    styled,
)

ANSI = re.compile(r"\x1b\[[0-9;]*m")


def strip(text):
    return ANSI.sub("", text)


def test_plain_style_paints_text_unchanged():
    assert str(Style().paint("hello")) == "hello"


def test_eight_bit_foreground_escape():
    painted = Style().fg(PaletteColor.eight_bit(5)).paint("a")
    assert str(painted) == "\x1b[38;5;5ma" + RESET


def test_rgb_background_prefix():
    assert Style().on(PaletteColor.rgb(1, 2, 3)).prefix() == "\x1b[48;2;1;2;3m"


def test_attribute_order_is_bold_background_foreground():
    style = Style().fg(PaletteColor.eight_bit(1)).on(PaletteColor.eight_bit(2)).bold()
    assert style.prefix() == "\x1b[1;48;5;2;38;5;1m"


def test_modifiers_return_new_styles():
    base = Style()
    bold = base.bold()
    assert not base.is_bold
    assert bold.is_bold
    assert bold.dimmed().is_dimmed and bold.dimmed().is_bold
    assert base.reversed().is_reversed


def test_styled_sets_both_colours():
    fg = PaletteColor.eight_bit(10)
    bg = PaletteColor.rgb(9, 8, 7)
    assert styled(fg, bg) == Style().fg(fg).on(bg)


def test_ansi_strings_of_nothing_is_empty():
    assert ansi_strings([]) == ""


def test_ansi_strings_of_plain_parts_concatenates():
    plain = Style()
    assert ansi_strings([plain.paint("ab"), plain.paint("cd")]) == "abcd"


def test_ansi_strings_merges_identical_styles():
    style = Style().fg(PaletteColor.eight_bit(3)).bold()
    joined = ansi_strings([style.paint("ab"), style.paint("cd")])
    assert joined == str(style.paint("abcd"))


def test_dropping_an_attribute_resets():
    bold = Style().bold()
    joined = ansi_strings([bold.paint("a"), Style().paint("b")])
    assert joined == str(bold.paint("a")) + "b"


def test_adding_an_attribute_only_emits_the_difference():
    base = Style().fg(PaletteColor.eight_bit(4))
    joined = ansi_strings([base.paint("a"), base.bold().paint("b")])
    assert joined == base.prefix() + "a" + Style().bold().prefix() + "b" + RESET


def test_changing_foreground_only_emits_new_foreground():
    first = Style().fg(PaletteColor.eight_bit(4)).on(PaletteColor.eight_bit(7))
    second = first.fg(PaletteColor.eight_bit(9))
    joined = ansi_strings([first.paint("a"), second.paint("b")])
    expected = first.prefix() + "a" + Style().fg(PaletteColor.eight_bit(9)).prefix() + "b" + RESET
    assert joined == expected


@pytest.mark.parametrize(
    "styles",
    [
        [Style().bold(), Style().dimmed(), Style()],
        [Style().fg(PaletteColor.rgb(1, 1, 1)), Style().on(PaletteColor.eight_bit(2)).reversed()],
        [Style(), Style().bold().fg(PaletteColor.eight_bit(200))],
    ],
)
def test_stripped_output_is_the_text(styles):
    texts = [f"part{index} " for index, _ in enumerate(styles)]
    joined = ansi_strings(style.paint(text) for style, text in zip(styles, texts))
    assert strip(joined) == "".join(texts)


@pytest.mark.parametrize("args", [(256,), (-1,)])
def test_eight_bit_out_of_range(args):
    with pytest.raises(ValueError):
        PaletteColor.eight_bit(*args)


def test_rgb_out_of_range():
    with pytest.raises(ValueError):
        PaletteColor.rgb(0, 0, 300)


def test_line_part_displays_its_part():
    assert str(LinePart("abc", 3)) == "abc"
    assert LinePart() == LinePart("", 0)


def test_mode_info_defaults():
    info = ModeInfo()
    assert info.mode is InputMode.NORMAL
    assert info.keybinds == []
    assert info.palette.source is PaletteSource.DEFAULT
    assert info.capabilities == PluginCapabilities()


def test_palette_colours_are_distinct_from_each_other():
    palette = Palette()
    assert palette.green != palette.cyan
    assert not palette.cyan.is_rgb