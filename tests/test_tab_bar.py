from zjmux.styling import InputMode, ModeInfo, Palette, PluginCapabilities
from zjmux.tab_bar import TabBar, TabInfo
from zjmux.tab_style import tab_style


def _bar(tabs, mode=InputMode.NORMAL, session_name=None):
    bar = TabBar()
    bar.update_mode(ModeInfo(mode=mode, session_name=session_name))
    bar.update_tabs(tabs)
    return bar


def test_no_tabs_renders_nothing():
    assert TabBar().render(1, 80) == ""


def test_render_contains_tabs_and_prefix():
    bar = _bar([TabInfo(0, "first", active=True), TabInfo(1, "second")])
    out = bar.render(1, 120)
    assert " Zellij " in out
    assert " first " in out
    assert " second " in out
    assert out.endswith("\x1b[0K\n")
    assert Palette().cyan.background_code() in out


def test_active_tab_chosen_by_position():
    bar = _bar([TabInfo(0, "first"), TabInfo(1, "second", active=True)])
    out = bar.render(1, 120)
    expected = tab_style("second", True, False, Palette(), PluginCapabilities())
    assert expected.part in out


def test_rename_mode_shows_placeholder_for_empty_name():
    bar = _bar([TabInfo(0, "", active=True)], mode=InputMode.RENAME_TAB)
    assert "Enter name..." in bar.render(1, 120)


def test_empty_name_outside_rename_mode_has_no_placeholder():
    bar = _bar([TabInfo(0, "", active=True)])
    assert "Enter name..." not in bar.render(1, 120)


def test_sync_and_session_name():
    bar = _bar(
        [TabInfo(0, "main", active=True, is_sync_panes_active=True)],
        session_name="mysession",
    )
    out = bar.render(1, 120)
    assert "main (Sync)" in out
    assert "(mysession)" in out