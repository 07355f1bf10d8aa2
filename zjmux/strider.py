"""A keyboard-driven file browser pane."""

from __future__ import annotations

import enum
import math
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

from zjmux.styling import Style

KEY_UP = "Up"
KEY_DOWN = "Down"
KEY_LEFT = "Left"
KEY_RIGHT = "Right"

_UNITS = ("B", "kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")


def _format_number(value: float) -> str:
    return str(int(value)) if value == int(value) else repr(value)


def pretty_bytes(num: float) -> str:
    """A size in bytes as a short human-readable string, in powers of 1000."""
    negative = "-" if num < 0 else ""
    num = abs(num)
    if num < 1:
        return f"{negative}{_format_number(num)} B"
    exponent = min(int(math.floor(math.log(num) / math.log(1000))), len(_UNITS) - 1)
    value = float(f"{num / 1000 ** exponent:.2f}")
    return f"{negative}{_format_number(value)} {_UNITS[exponent]}"


class EntryKind(enum.IntEnum):
    DIR = 0
    FILE = 1


@dataclass(frozen=True, order=True)
class FsEntry:
    """A directory with its child count, or a file with its size in bytes."""

    kind: EntryKind
    path: Path
    size: int

    def name(self) -> str:
        return self.path.name

    def as_line(self, width: int) -> str:
        """Name and size laid out in exactly width columns."""
        info = str(self.size) if self.kind is EntryKind.DIR else pretty_bytes(self.size)
        space = width - len(info)
        if space < 2:
            raise ValueError(f"width {width} is too narrow for {info!r}")
        name = self.name()
        if space - 1 < len(name):
            return f"{name[:space - 2]}~ {info}"
        return name + " " * (space - len(name)) + info

    def is_hidden_file(self) -> bool:
        return self.name().startswith(".")


def _read_entry(entry: os.DirEntry) -> FsEntry:
    path = Path(entry.path)
    if entry.is_dir(follow_symlinks=False):
        with os.scandir(path) as children:
            return FsEntry(EntryKind.DIR, path, sum(1 for _ in children))
    return FsEntry(EntryKind.FILE, path, entry.stat(follow_symlinks=False).st_size)


@dataclass
class Browser:
    """Directory listing with a remembered cursor and scroll per directory."""

    path: Path
    open_file: Optional[Callable[[Path], None]] = None
    hide_hidden_files: bool = False
    files: list[FsEntry] = field(default_factory=list)
    cursor_hist: dict[Path, list[int]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.refresh()

    def _cursor(self) -> list[int]:
        return self.cursor_hist.setdefault(self.path, [0, 0])

    @property
    def selected(self) -> int:
        return self.cursor_hist.get(self.path, (0, 0))[0]

    @selected.setter
    def selected(self, value: int) -> None:
        self._cursor()[0] = value

    @property
    def scroll(self) -> int:
        return self.cursor_hist.get(self.path, (0, 0))[1]

    @scroll.setter
    def scroll(self, value: int) -> None:
        self._cursor()[1] = value

    def refresh(self) -> None:
        """Re-read the current directory; unreadable entries are skipped."""
        entries = []
        with os.scandir(self.path) as listing:
            for dir_entry in listing:
                try:
                    entry = _read_entry(dir_entry)
                except OSError:
                    continue
                if entry.is_hidden_file() and self.hide_hidden_files:
                    continue
                entries.append(entry)
        self.files = sorted(entries)

    def toggle_hidden_files(self) -> None:
        self.hide_hidden_files = not self.hide_hidden_files

    def handle_key(self, key: str) -> None:
        """React to a key: a single character or one of the KEY_* names."""
        if key in (KEY_UP, "k"):
            self.selected = max(self.selected - 1, 0)
        elif key in (KEY_DOWN, "j"):
            self.selected = min(max(len(self.files) - 1, 0), self.selected + 1)
        elif key in (KEY_RIGHT, "\n", "l") and self.files:
            entry = self.files[self.selected]
            if entry.kind is EntryKind.DIR:
                self.path = entry.path
                self.refresh()
            elif self.open_file is not None:
                self.open_file(entry.path)
        elif key in (KEY_LEFT, "h"):
            self.path = self.path.parent
            self.refresh()
        elif key == ".":
            self.toggle_hidden_files()
            self.refresh()

    def render(self, rows: int, cols: int) -> str:
        """rows newline-terminated lines showing the visible part of the listing."""
        lines = []
        for row in range(rows):
            if self.selected < self.scroll:
                self.scroll = self.selected
            if self.selected - self.scroll + 2 > rows:
                self.scroll = self.selected + 2 - rows
            index = self.scroll + row
            if index >= len(self.files):
                lines.append("")
                continue
            entry = self.files[index]
            style = Style()
            if entry.kind is EntryKind.DIR:
                style = style.dimmed().bold()
            if index == self.selected:
                style = style.reversed()
            lines.append(str(style.paint(entry.as_line(cols))))
        return "".join(f"{line}\n" for line in lines)