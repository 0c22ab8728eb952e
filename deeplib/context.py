"""Library context: access to the standard streams and the library version."""

from __future__ import annotations

import io
import sys
from enum import IntEnum
from typing import TextIO

from deeplib.errors import DeepError, ErrorCode

VERSION = "0.0.1"


class StdHandle(IntEnum):
    """One of the process's standard streams."""

    INPUT = 0
    OUTPUT = 1
    ERROR = 2


def _force_utf8(stream) -> None:
    """Switch a console stream to UTF-8 output where the platform needs it."""
    if sys.platform != "win32" or stream is None:
        return
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is None:
        return
    try:
        reconfigure(encoding="utf-8")
    except (ValueError, io.UnsupportedOperation):
        pass


class Context:
    """Holds the output and error writers used by the library.

    Without arguments it writes to the process's standard output and
    standard error. Once closed, the writers are no longer available.
    """

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None):
        if out is None:
            out = sys.stdout
            _force_utf8(out)
        if err is None:
            err = sys.stderr
            _force_utf8(err)
        self._out = out
        self._err = err
        self._closed = False

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"Context({state})"

    @property
    def closed(self) -> bool:
        return self._closed

    def _require_open(self) -> None:
        if self._closed:
            raise DeepError(ErrorCode.NO_INTERNAL_CTX, "context is closed")

    def _stream(self, which: StdHandle):
        if which is StdHandle.INPUT:
            return sys.stdin
        if which is StdHandle.OUTPUT:
            return self._out
        return self._err

    def out(self) -> TextIO:
        """The writer for normal output."""
        self._require_open()
        if self._out is None:
            raise DeepError(ErrorCode.BAD_FILE_DESCRIPTOR, "no output stream")
        return self._out

    def err(self) -> TextIO:
        """The writer for error output."""
        self._require_open()
        if self._err is None:
            raise DeepError(ErrorCode.BAD_FILE_DESCRIPTOR, "no error stream")
        return self._err

    def std_handle(self, which) -> int:
        """File descriptor behind a standard stream of this context."""
        self._require_open()
        try:
            handle = StdHandle(int(which))
        except (TypeError, ValueError):
            raise DeepError(
                ErrorCode.INVALID_ENUM_VALUE, f"invalid standard handle: {which!r}"
            ) from None
        stream = self._stream(handle)
        if stream is None:
            raise DeepError(ErrorCode.BAD_FILE_DESCRIPTOR, f"no stream for {handle.name}")
        try:
            return stream.fileno()
        except (AttributeError, OSError, ValueError):
            raise DeepError(
                ErrorCode.BAD_FILE_DESCRIPTOR,
                f"{handle.name} stream has no file descriptor",
            ) from None

    def close(self) -> None:
        """Release the context; the streams themselves are left open."""
        if self._closed:
            return
        for stream in (self._out, self._err):
            flush = getattr(stream, "flush", None)
            if flush is not None:
                try:
                    flush()
                except (OSError, ValueError):
                    pass
        self._closed = True

    def __enter__(self) -> Context:
        self._require_open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class ContextObject:
    """Base for objects that need a :class:`Context`."""

    def __init__(self, context: Context | None = None):
        self.context = context


def get_version() -> str:
    """Version of the library."""
    return VERSION


def create_context() -> Context:
    """A context bound to the process's standard streams."""
    return Context()