"""Events and threads with suspend, resume and timed waits."""

from __future__ import annotations

import threading
from typing import Any, Callable

INFINITE = 0xFFFFFFFF
"""Wait duration meaning "wait until signalled", as on Windows."""

_MAX_MILLISECONDS = 0xFFFFFFFF

_local = threading.local()


def _timeout(milliseconds) -> float | None:
    if milliseconds is None or milliseconds == INFINITE:
        return None
    if not 0 <= milliseconds <= _MAX_MILLISECONDS:
        raise ValueError(f"milliseconds out of range: {milliseconds!r}")
    return milliseconds / 1000.0


class Event:
    """A signalling event with manual or automatic reset.

    With automatic reset, a successful :meth:`wait` consumes the signal,
    so only one waiter is released for each :meth:`set`.
    """

    def __init__(self, manual_reset=False, initial_state=False):
        self.manual_reset = bool(manual_reset)
        self._signaled = bool(initial_state)
        self._cond = threading.Condition()

    def __repr__(self) -> str:
        kind = "manual" if self.manual_reset else "auto"
        return f"Event({kind}, state={self._signaled})"

    def set(self) -> None:
        """Signal the event."""
        with self._cond:
            self._signaled = True
            self._cond.notify_all()

    def reset(self) -> None:
        """Clear the signal."""
        with self._cond:
            self._signaled = False

    def wait(self, milliseconds=INFINITE) -> bool:
        """Wait for the signal; return whether it was received in time."""
        timeout = _timeout(milliseconds)
        with self._cond:
            signaled = self._cond.wait_for(lambda: self._signaled, timeout)
            if signaled and not self.manual_reset:
                self._signaled = False
            return signaled

    def state(self) -> bool:
        """Whether the event is currently signalled."""
        with self._cond:
            return self._signaled


def checkpoint() -> None:
    """Block the calling :class:`Thread` while it is suspended.

    Suspension cannot interrupt running Python code, so a callback that
    should honour :meth:`Thread.suspend` while running calls this at safe
    points. Outside such a thread it returns at once.
    """
    current = getattr(_local, "thread", None)
    if current is not None:
        current._gate.wait()


class Thread:
    """A worker thread that runs ``callback(args)`` and can start paused."""

    def __init__(self, callback: Callable[[Any], Any], args=None, paused=False):
        if not callable(callback):
            raise TypeError("callback must be callable")
        self._callback = callback
        self._args = args
        self._gate = threading.Event()
        self._suspended = bool(paused)
        self._lock = threading.Lock()
        self.exception: BaseException | None = None
        if not paused:
            self._gate.set()
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    @classmethod
    def create(cls, callback, args=None, paused=False) -> Thread:
        """Start a thread running ``callback(args)``, held back if ``paused``."""
        return cls(callback, args, paused)

    def __repr__(self) -> str:
        if not self._thread.is_alive():
            state = "finished"
        elif self._suspended:
            state = "suspended"
        else:
            state = "running"
        return f"Thread({state})"

    def _run(self) -> None:
        _local.thread = self
        try:
            self._gate.wait()
            self._callback(self._args)
        except BaseException as exc:  # kept for the caller to inspect
            self.exception = exc
        finally:
            _local.thread = None

    def suspend(self) -> None:
        """Hold the thread before its callback starts or at its next checkpoint."""
        with self._lock:
            if self._suspended:
                return
            self._gate.clear()
            self._suspended = True

    def resume(self) -> None:
        """Let a suspended thread continue."""
        with self._lock:
            if not self._suspended:
                return
            self._gate.set()
            self._suspended = False

    def wait(self, milliseconds=INFINITE) -> bool:
        """Wait for the thread to finish; return whether it did in time."""
        self._thread.join(_timeout(milliseconds))
        return not self._thread.is_alive()

    def is_suspended(self) -> bool:
        return self._suspended

    @property
    def is_alive(self) -> bool:
        return self._thread.is_alive()