"""Countdown timer for the exam time limit."""

import threading
from typing import Callable, Iterable, Optional

import config


class Timer:
    """Background countdown timer.

    Runs in a daemon thread and signals expiry through the time_up event.
    The line reader watches that event so a blocked read is abandoned as
    soon as time runs out.
    """

    def __init__(
        self,
        total_seconds: int,
        on_warning: Optional[Callable[[int], None]] = None,
        warning_seconds: Iterable[int] = config.WARNING_SECONDS,
        tick_seconds: float = 1.0,
    ):
        self.total_seconds = total_seconds
        self.remaining = total_seconds
        self.time_up = threading.Event()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._on_warning = on_warning
        self._pending_warnings = set(warning_seconds)
        self._tick_seconds = tick_seconds
        self._lock = threading.Lock()

    def start(self) -> None:
        if self.total_seconds <= 0:
            self.time_up.set()
            return
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def _run(self) -> None:
        while self.remaining > 0:
            if self._stop_event.wait(self._tick_seconds):
                return
            with self._lock:
                self.remaining -= 1
                current = self.remaining

            if current in self._pending_warnings:
                self._pending_warnings.discard(current)
                if self._on_warning:
                    self._on_warning(current)

            if current <= 0:
                self.time_up.set()

    def stop(self) -> None:
        self._stop_event.set()
        if self._thread and self._thread.is_alive():
            self._thread.join(timeout=2)

    def get_remaining(self) -> int:
        with self._lock:
            return self.remaining

