"""Blocking line input that can be abandoned when the exam time runs out."""

import queue
import sys
import threading
from typing import IO, Optional


class TimeExpired(Exception):
    """Raised by read_line() when its cancel event is set."""


class LineReader:
    """Reads lines from a stream on a daemon thread.

    Lines are queued in arrival order and handed out one per read_line()
    call, so an abandoned read never loses or repeats input. The main
    thread only ever waits on the queue, which keeps it responsive to
    Ctrl-C (KeyboardInterrupt propagates to the caller) and to the cancel
    event.
    """

    def __init__(self, stream: Optional[IO[str]] = None, poll_interval: float = 0.1):
        self.stream = stream if stream is not None else sys.stdin
        self.poll_interval = poll_interval
        self._lines: "queue.Queue[Optional[str]]" = queue.Queue()
        self._thread: Optional[threading.Thread] = None
        self._start_lock = threading.Lock()

    def _ensure_started(self) -> None:
        with self._start_lock:
            if self._thread is None:
                self._thread = threading.Thread(target=self._pump, daemon=True)
                self._thread.start()

    def _pump(self) -> None:
        while True:
            line = self.stream.readline()
            if not line:
                self._lines.put(None)
                return
            self._lines.put(line.rstrip("\r\n"))

    def read_line(self, cancel: Optional[threading.Event] = None) -> str:
        """Return the next line without its newline.

        Raises TimeExpired once cancel is set and EOFError at end of input.
        """
        self._ensure_started()
        while True:
            if cancel is not None and cancel.is_set():
                raise TimeExpired()
            try:
                line = self._lines.get(timeout=self.poll_interval)
            except queue.Empty:
                continue
            if line is None:
                # keep the end-of-input marker for later reads
                self._lines.put(None)
                raise EOFError()
            return line
