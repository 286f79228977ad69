"""Process-wide exit flag that any part of the program can raise."""

from __future__ import annotations

import threading


class ExitSignal:
    """A one-way flag signalling that the program should shut down."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def request(self) -> None:
        self._event.set()

    def is_requested(self) -> bool:
        return self._event.is_set()


_EXIT = ExitSignal()


def request_exit() -> None:
    """Ask the main loop to stop."""
    _EXIT.request()


def exit_requested() -> bool:
    return _EXIT.is_requested()