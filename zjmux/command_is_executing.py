"""Synchronisation between the input thread and server acknowledgements."""

from __future__ import annotations

import threading


class CommandIsExecuting:
    """A flag the input thread can wait on until a command has been handled."""

    def __init__(self) -> None:
        self._condition = threading.Condition()
        self._blocked = False

    @property
    def is_blocked(self) -> bool:
        with self._condition:
            return self._blocked

    def block_input_thread(self) -> None:
        with self._condition:
            self._blocked = True

    def unblock_input_thread(self) -> None:
        with self._condition:
            self._blocked = False
            self._condition.notify_all()

    def wait_until_input_thread_is_unblocked(self) -> None:
        """Block the caller until the input thread has been unblocked."""
        with self._condition:
            self._condition.wait_for(lambda: not self._blocked)