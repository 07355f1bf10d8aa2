"""The one-line tab bar shown at the top of the screen."""

from __future__ import annotations

from dataclasses import dataclass, field

from zjmux.styling import InputMode, LinePart, ModeInfo
from zjmux.tab_line import tab_line
from zjmux.tab_style import tab_style


@dataclass
class TabInfo:
    """What the bar knows about one tab."""

    position: int
    name: str
    active: bool = False
    is_sync_panes_active: bool = False


@dataclass
class TabBar:
    """Keeps the latest tabs and mode information and renders the bar."""

    tabs: list[TabInfo] = field(default_factory=list)
    mode_info: ModeInfo = field(default_factory=ModeInfo)

    def update_mode(self, mode_info: ModeInfo) -> None:
        self.mode_info = mode_info

    def update_tabs(self, tabs: list[TabInfo]) -> None:
        self.tabs = list(tabs)

    def render(self, rows: int, cols: int) -> str:
        """The bar as one newline-terminated line, or "" when there are no tabs."""
        if not self.tabs:
            return ""
        info = self.mode_info
        all_tabs: list[LinePart] = []
        active_tab_index = 0
        for tab in self.tabs:
            name = tab.name
            if tab.active:
                if info.mode is InputMode.RENAME_TAB and not name:
                    name = "Enter name..."
                active_tab_index = tab.position
            all_tabs.append(
                tab_style(
                    name,
                    tab.active,
                    tab.is_sync_panes_active,
                    info.palette,
                    info.capabilities,
                )
            )
        parts = tab_line(
            info.session_name,
            all_tabs,
            active_tab_index,
            cols,
            info.palette,
            info.capabilities,
        )
        line = "".join(part.part for part in parts)
        background = info.palette.cyan.background_code()
        return f"{line}\x1b[{background}m\x1b[0K\n"