# zjmux

Building blocks for a terminal workspace manager, in plain Python with no
third-party dependencies.

- **Styling** (`zjmux.styling`): palette colours (`PaletteColor`,
  `Palette`), immutable ANSI styles (`Style`), the input modes
  (`InputMode`) and `ModeInfo`, which carries the mode, its key bindings,
  the palette and the session name to the bars.
- **Status bar** (`zjmux.status_bar.StatusBar`): two lines. The first shows
  ` Ctrl +` and one indicator per mode (LOCK, PANE, TAB, RESIZE, SCROLL,
  SESSION, QUIT), falling back to single letters, or to nothing, when the
  width is too small. The second shows the key bindings of the current mode,
  a tip in normal mode, or ` -- INTERFACE LOCKED -- ` in locked mode, and
  shortens them to fit.
- **Tab bar** (`zjmux.tab_bar.TabBar`, `TabInfo`): a single line of tabs
  after a ` Zellij (session) ` prefix. It keeps the active tab in view and
  shows how many tabs are hidden on the left (`← +N`) and right (`+N →`).
  Lower-level pieces are in `zjmux.tab_line` and `zjmux.tab_style`.
- **File browser** (`zjmux.strider.Browser`, `FsEntry`): lists a directory
  (directories first, with their child count; files with a human-readable
  size), remembers the cursor and scroll position for each directory and
  can hide dot files.
- **Input handling** (`zjmux.input_handler`): `parse_input` splits raw
  terminal bytes into key, mouse and unsupported events; `InputHandler` and
  `input_loop` turn them into `Action`s and send them on. Bracketed paste is
  written through unchanged in normal and locked mode.
- **Sessions** (`zjmux.sessions`): finds the live session sockets in a
  directory and removes stale ones it finds there.
- **Data directory setup** (`zjmux.install.populate_data_dir`): writes the
  given assets and a `VERSION` file; existing files are replaced only when
  the recorded version differs.

## Installation

```
pip install .
```

## Command line

```
zjmux list-sessions          # or: zjmux ls
zjmux attach [NAME] [-f]     # or: zjmux a
zjmux [-s NAME]
```

Common options: `--socket-dir DIR` (where session sockets live) and
`--data-dir DIR`.

- `list-sessions` prints one live session per line, marking the one named
  in `ZELLIJ_SESSION_NAME` with ` (current)`.
- `attach` checks that the named session is running, or, with no name,
  picks the only running one, and prints its name.
- With no command, the session name (given with `-s` or made up) is checked
  not to be in use, the data directory gets its `VERSION` file, and the
  name is printed.

Errors are printed to standard error and the exit status is 1.

## Rendering a status bar

```python
from zjmux.styling import InputMode, ModeInfo
from zjmux.status_bar import StatusBar

bar = StatusBar()
bar.update(ModeInfo(mode=InputMode.PANE, keybinds=[("n", "New"), ("x", "Close")]))
print(bar.render(2, 120), end="")
```

## Rendering a tab bar

```python
from zjmux.tab_bar import TabBar, TabInfo

bar = TabBar()
bar.update_tabs([TabInfo(0, "Tab #1"), TabInfo(1, "Tab #2", active=True)])
print(bar.render(1, 80), end="")
```

## Browsing files

```python
from zjmux.strider import Browser, KEY_DOWN

browser = Browser(".", open_file=lambda path: print("open", path))
browser.handle_key(KEY_DOWN)
print(browser.render(10, 60), end="")
```

## Listing sessions

```python
from zjmux.sessions import get_sessions, format_sessions

print(format_sessions(get_sessions("/tmp/zjmux/sockets"), current="main"), end="")
```

## Dispatching input

`input_loop` needs an object with `read_from_stdin`, `send_to_server`,
`enable_mouse` and `start_action_repeater`, and a `key_to_actions(key, raw,
mode)` function that maps a `Key` to a list of `Action`s. Quit and detach
actions end the loop.

## What the package does not do

- It does not run a terminal client or a server: the command only looks up
  and checks session names, it does not start, attach to or draw a session.
- It has no panes, no terminal emulation and no layouts.
- It ships no key bindings and reads no configuration file; the caller
  supplies `key_to_actions`.
- It does not put the terminal into raw mode or talk to it; it produces
  strings and actions for a caller to use.

## Running the tests

```
pip install .[test]
pytest
```