"""The two-line status bar shown at the bottom of the screen."""

from __future__ import annotations

from dataclasses import dataclass, field

from zjmux.status_first_line import color_elements, ctrl_keys, superkey
from zjmux.status_second_line import keybinds
from zjmux.styling import ARROW_SEPARATOR, ModeInfo


@dataclass
class StatusBar:
    """Keeps the latest mode information and renders the bar from it."""

    mode_info: ModeInfo = field(default_factory=ModeInfo)

    def update(self, mode_info: ModeInfo) -> None:
        self.mode_info = mode_info

    def render(self, rows: int, cols: int) -> str:
        """Both lines of the bar, each terminated by a newline."""
        info = self.mode_info
        separator = "" if info.capabilities.arrow_fonts else ARROW_SEPARATOR
        colors = color_elements(info.palette)
        prefix = superkey(colors, separator)
        keys = ctrl_keys(info, cols - prefix.len, separator)
        first_line = f"{prefix}{keys}"
        second_line = keybinds(info, cols)
        # fill the rest of the first line with the bar background, clear the second
        background = info.palette.cyan.background_code()
        return (
            f"{first_line}\x1b[{background}m\x1b[0K\n"
            f"\x1b[m{second_line}\x1b[0K\n"
        )