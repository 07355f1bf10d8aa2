"""Discovering running sessions through their sockets."""

from __future__ import annotations

import os
import socket
import stat
from pathlib import Path
from typing import Iterable, Optional, Union

NO_SESSIONS = "No active zellij sessions found."

PathLike = Union[str, os.PathLike]


class SessionError(Exception):
    """A session lookup failed or its result does not allow going on."""


def _socket_is_alive(path: Path) -> bool:
    """Whether a server answers on path; stale sockets are removed."""
    sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
    try:
        sock.connect(str(path))
    except ConnectionRefusedError:
        try:
            path.unlink()
        except OSError:
            pass
        return False
    except OSError:
        return True
    finally:
        sock.close()
    return True


def get_sessions(sock_dir: PathLike) -> list[str]:
    """Names of the live session sockets in sock_dir, in directory order."""
    directory = Path(sock_dir)
    try:
        entries = list(os.scandir(directory))
    except FileNotFoundError:
        return []
    except OSError as err:
        raise SessionError(f"Error occured: {err}") from err
    sessions = []
    for entry in entries:
        mode = entry.stat(follow_symlinks=False).st_mode
        if stat.S_ISSOCK(mode) and _socket_is_alive(directory / entry.name):
            sessions.append(entry.name)
    return sessions


def format_sessions(sessions: Iterable[str], current: Optional[str]) -> str:
    """One line per session, marking the current one."""
    return "".join(
        f"{name}{' (current)' if name == current else ''}\n" for name in sessions
    )


def _current_session() -> str:
    return os.environ.get("ZELLIJ_SESSION_NAME", "")


def list_sessions(sock_dir: PathLike) -> str:
    """The text listing the live sessions."""
    sessions = get_sessions(sock_dir)
    if not sessions:
        return NO_SESSIONS + "\n"
    return format_sessions(sessions, _current_session())


def get_active_session(sock_dir: PathLike) -> str:
    """The only live session; raises when there is none or more than one."""
    sessions = get_sessions(sock_dir)
    if len(sessions) == 1:
        return sessions[0]
    if not sessions:
        raise SessionError(NO_SESSIONS)
    raise SessionError(
        "Please specify the session name to attach to. "
        "The following sessions are active:\n"
        + format_sessions(sessions, _current_session()).rstrip("\n")
    )


def assert_session(name: str, sock_dir: PathLike) -> None:
    """Raise unless a session called name is running."""
    if name not in get_sessions(sock_dir):
        raise SessionError(f'No session named "{name}" found.')


def assert_session_ne(name: str, sock_dir: PathLike) -> None:
    """Raise if a session called name is already running."""
    if name in get_sessions(sock_dir):
        raise SessionError(
            f'Session with name "{name}" aleady exists. Use attach command to '
            "connect to it or specify a different name."
        )