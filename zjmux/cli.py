"""Command line entry point: session listing, attaching and new sessions."""

from __future__ import annotations

import argparse
import os
import random
import sys
import tempfile
from pathlib import Path
from typing import Optional, Sequence

from zjmux.install import populate_data_dir
from zjmux.sessions import (
    SessionError,
    assert_session,
    assert_session_ne,
    get_active_session,
    list_sessions,
)

VERSION = "0.1.0"

_ADJECTIVES = ("brave", "calm", "eager", "fuzzy", "gentle", "jolly", "lucky",
               "mighty", "quiet", "swift", "tidy", "witty")
_NOUNS = ("badger", "comet", "falcon", "garden", "harbor", "lantern", "meadow",
          "otter", "pebble", "river", "tiger", "walrus")


def _generate_name() -> str:
    return f"{random.choice(_ADJECTIVES)}-{random.choice(_NOUNS)}"


def _default_sock_dir() -> Path:
    return Path(tempfile.gettempdir()) / f"zellij-{os.getuid()}" / VERSION


def _default_data_dir() -> Path:
    base = os.environ.get("XDG_DATA_HOME") or Path.home() / ".local" / "share"
    return Path(base) / "zellij"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="zjmux")
    parser.add_argument("--socket-dir", type=Path, default=None)
    parser.add_argument("--data-dir", type=Path, default=None)
    parser.add_argument("-s", "--session", default=None)
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("list-sessions", aliases=["ls"])
    attach = sub.add_parser("attach", aliases=["a"])
    attach.add_argument("session_name", nargs="?")
    attach.add_argument("-f", "--force", action="store_true")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command; prints the resolved session name on success."""
    args = _parser().parse_args(argv)
    sock_dir = args.socket_dir or _default_sock_dir()
    try:
        if args.command in ("list-sessions", "ls"):
            sys.stdout.write(list_sessions(sock_dir))
            return 0
        if args.command in ("attach", "a"):
            if args.session_name is not None:
                assert_session(args.session_name, sock_dir)
                name = args.session_name
            else:
                name = get_active_session(sock_dir)
            print(name)
            return 0
        name = args.session or _generate_name()
        assert_session_ne(name, sock_dir)
        populate_data_dir(args.data_dir or _default_data_dir(), {}, VERSION)
        print(name)
        return 0
    except SessionError as err:
        print(err, file=sys.stderr)
        return 1