"""Background event loop thread for thread-safe debouncing.

Runs a private asyncio loop on a daemon thread so that debouncers can be
driven from any number of caller threads without those callers owning a loop.
"""

import asyncio
import threading
from collections.abc import Callable
from typing import Any


class _EventLoopThread:
    """Manages a background event loop used as a timer thread."""

    __slots__ = ("_loop", "_start_lock", "_started", "_thread")

    def __init__(self) -> None:
        self._loop: asyncio.AbstractEventLoop | None = None
        self._thread: threading.Thread | None = None
        self._started = threading.Event()
        self._start_lock = threading.Lock()

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        """The running background loop, started on first access."""
        if self._loop is None:
            self.start()
        assert self._loop is not None
        return self._loop

    def start(self) -> None:
        """Start the background event loop thread (idempotent)."""
        with self._start_lock:
            if self._thread is not None:
                return
            self._thread = threading.Thread(target=self._run, name="lull-timer", daemon=True)
            self._thread.start()
            self._started.wait()

    def _run(self) -> None:
        self._loop = asyncio.new_event_loop()
        asyncio.set_event_loop(self._loop)
        self._started.set()
        self._loop.run_forever()

    def time(self) -> float:
        """Current time according to the background loop's clock."""
        return self.loop.time()

    def in_loop_thread(self) -> bool:
        """Whether the caller is running on the background thread."""
        return self._thread is not None and threading.current_thread() is self._thread

    def call_soon(self, callback: Callable[..., Any], *args: Any) -> None:
        """Schedule *callback* on the background loop from any thread."""
        self.loop.call_soon_threadsafe(callback, *args)

    def shutdown(self) -> None:
        """Stop the background event loop and join the thread."""
        with self._start_lock:
            if self._loop is not None:
                self._loop.call_soon_threadsafe(self._loop.stop)
            if self._thread is not None:
                self._thread.join(timeout=5.0)
                self._thread = None
            if self._loop is not None and not self._loop.is_running():
                self._loop.close()
            self._loop = None
            self._started.clear()


# Module-level shared timer thread for threaded debouncers
_shared_loop = _EventLoopThread()


def get_shared_loop() -> _EventLoopThread:
    """Return the shared background event loop thread, starting it if needed."""
    _shared_loop.start()
    return _shared_loop
