"""Palette colours, ANSI text styling and the line-part type shared by the bars."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Iterable, Optional, Tuple, Union

ARROW_SEPARATOR = "\ue0b0"
MORE_MSG = " ... "
RESET = "\x1b[0m"


def _check_byte(value: int) -> int:
    if not 0 <= value <= 255:
        raise ValueError(f"colour component out of range 0..255: {value}")
    return value


@dataclass(frozen=True)
class PaletteColor:
    """A terminal colour: either a 24-bit RGB triple or an 8-bit palette index."""

    value: Union[int, Tuple[int, int, int]]

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> "PaletteColor":
        return cls((_check_byte(r), _check_byte(g), _check_byte(b)))

    @classmethod
    def eight_bit(cls, code: int) -> "PaletteColor":
        return cls(_check_byte(code))

    @property
    def is_rgb(self) -> bool:
        return isinstance(self.value, tuple)

    def _code(self, base: int) -> str:
        if isinstance(self.value, tuple):
            r, g, b = self.value
            return f"{base};2;{r};{g};{b}"
        return f"{base};5;{self.value}"

    def foreground_code(self) -> str:
        return self._code(38)

    def background_code(self) -> str:
        return self._code(48)


class PaletteSource(enum.Enum):
    DEFAULT = "default"
    XRESOURCES = "xresources"


@dataclass(frozen=True)
class Palette:
    """The set of colours the bars are drawn with."""

    source: PaletteSource = PaletteSource.DEFAULT
    fg: PaletteColor = PaletteColor(245)
    bg: PaletteColor = PaletteColor(238)
    black: PaletteColor = PaletteColor(16)
    red: PaletteColor = PaletteColor(124)
    green: PaletteColor = PaletteColor(154)
    yellow: PaletteColor = PaletteColor(226)
    blue: PaletteColor = PaletteColor(45)
    magenta: PaletteColor = PaletteColor(201)
    cyan: PaletteColor = PaletteColor(51)
    white: PaletteColor = PaletteColor(255)
    orange: PaletteColor = PaletteColor(166)


@dataclass(frozen=True)
class Painted:
    """A piece of text together with the style it is drawn in."""

    style: "Style"
    text: str

    def __str__(self) -> str:
        return f"{self.style.prefix()}{self.text}{self.style.suffix()}"


@dataclass(frozen=True)
class Style:
    """An immutable ANSI text style; every modifier returns a new style."""

    foreground: Optional[PaletteColor] = None
    background: Optional[PaletteColor] = None
    is_bold: bool = False
    is_dimmed: bool = False
    is_reversed: bool = False

    def fg(self, color: PaletteColor) -> "Style":
        return replace(self, foreground=color)

    def on(self, color: PaletteColor) -> "Style":
        return replace(self, background=color)

    def bold(self) -> "Style":
        return replace(self, is_bold=True)

    def dimmed(self) -> "Style":
        return replace(self, is_dimmed=True)

    def reversed(self) -> "Style":
        return replace(self, is_reversed=True)

    @property
    def is_plain(self) -> bool:
        return self == Style()

    def prefix(self) -> str:
        """The escape sequence that switches this style on."""
        if self.is_plain:
            return ""
        codes = []
        if self.is_bold:
            codes.append("1")
        if self.is_dimmed:
            codes.append("2")
        if self.is_reversed:
            codes.append("7")
        if self.background is not None:
            codes.append(self.background.background_code())
        if self.foreground is not None:
            codes.append(self.foreground.foreground_code())
        return "\x1b[" + ";".join(codes) + "m"

    def suffix(self) -> str:
        return "" if self.is_plain else RESET

    def paint(self, text: str) -> Painted:
        return Painted(self, str(text))


def styled(fg: PaletteColor, bg: PaletteColor) -> Style:
    """A style with the given foreground drawn on the given background."""
    return Style(foreground=fg, background=bg)


def _transition(first: Style, nxt: Style) -> str:
    if first == nxt:
        return ""
    lost_attribute = (
        (first.is_bold and not nxt.is_bold)
        or (first.is_dimmed and not nxt.is_dimmed)
        or (first.is_reversed and not nxt.is_reversed)
        or (first.foreground is not None and nxt.foreground is None)
        or (first.background is not None and nxt.background is None)
    )
    if lost_attribute:
        return RESET + nxt.prefix()
    extra = Style(
        foreground=nxt.foreground if first.foreground != nxt.foreground else None,
        background=nxt.background if first.background != nxt.background else None,
        is_bold=first.is_bold != nxt.is_bold,
        is_dimmed=first.is_dimmed != nxt.is_dimmed,
        is_reversed=first.is_reversed != nxt.is_reversed,
    )
    return extra.prefix()


def ansi_strings(parts: Iterable[Painted]) -> str:
    """Join painted pieces, emitting only the escapes needed between them."""
    pieces = list(parts)
    if not pieces:
        return ""
    out = [pieces[0].style.prefix(), pieces[0].text]
    for previous, current in zip(pieces, pieces[1:]):
        out.append(_transition(previous.style, current.style))
        out.append(current.text)
    out.append(pieces[-1].style.suffix())
    return "".join(out)


class InputMode(enum.Enum):
    NORMAL = "normal"
    LOCKED = "locked"
    RESIZE = "resize"
    PANE = "pane"
    TAB = "tab"
    SCROLL = "scroll"
    RENAME_TAB = "renametab"
    SESSION = "session"


@dataclass(frozen=True)
class PluginCapabilities:
    arrow_fonts: bool = False


@dataclass
class ModeInfo:
    """What the bars need to know about the current input mode."""

    mode: InputMode = InputMode.NORMAL
    keybinds: list[tuple[str, str]] = field(default_factory=list)
    palette: Palette = field(default_factory=Palette)
    capabilities: PluginCapabilities = field(default_factory=PluginCapabilities)
    session_name: Optional[str] = None


@dataclass
class LinePart:
    """Rendered text and its width on screen in columns."""

    part: str = ""
    len: int = 0

    def __str__(self) -> str:
        return self.part