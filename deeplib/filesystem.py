"""File access built on operating-system file descriptors."""

from __future__ import annotations

import os
from contextlib import contextmanager
from enum import IntEnum
from typing import Iterator

from deeplib.errors import DeepError, ErrorCode, error_from_os


class FileMode(IntEnum):
    """How a file is opened."""

    NONE = 0
    APPEND = 1  # add data at the end; the file must exist
    CREATE = 2  # always create; truncate an existing file
    CREATE_NEW = 3  # create; fail if the file exists
    OPEN = 4  # open; fail if the file does not exist
    OPEN_OR_CREATE = 5  # open, creating the file if needed
    TRUNCATE = 6  # open and truncate; the file must exist


class FileAccess(IntEnum):
    """Level of access to an opened file."""

    NONE = 0
    READ = 1
    WRITE = 2
    READ_WRITE = 3


class FileShare(IntEnum):
    """Sharing allowed to other processes (advisory; not enforced on POSIX)."""

    NONE = 0
    DELETE = 1
    READ = 2
    WRITE = 3
    READ_WRITE = 4


class SeekOrigin(IntEnum):
    """Reference point for :meth:`File.seek`."""

    BEGIN = 0
    CURRENT = 1
    END = 2


_ACCESS_FLAGS = {
    FileAccess.READ: os.O_RDONLY,
    FileAccess.WRITE: os.O_WRONLY,
    FileAccess.READ_WRITE: os.O_RDWR,
}

_MODE_FLAGS = {
    FileMode.APPEND: os.O_APPEND,
    FileMode.CREATE: os.O_CREAT | os.O_TRUNC,
    FileMode.CREATE_NEW: os.O_CREAT | os.O_EXCL,
    FileMode.OPEN: 0,
    FileMode.OPEN_OR_CREATE: os.O_CREAT,
    FileMode.TRUNCATE: os.O_TRUNC,
}

_WHENCE = {
    SeekOrigin.BEGIN: os.SEEK_SET,
    SeekOrigin.CURRENT: os.SEEK_CUR,
    SeekOrigin.END: os.SEEK_END,
}

_CHUNK = 4096


@contextmanager
def _os_errors() -> Iterator[None]:
    try:
        yield
    except OSError as exc:
        raise error_from_os(exc) from exc


def _enum_value(enum_cls, value, low, high):
    try:
        member = enum_cls(int(value))
    except (TypeError, ValueError):
        raise DeepError(ErrorCode.INVALID_ENUM_VALUE, f"invalid {enum_cls.__name__}: {value!r}") from None
    if not low <= member <= high:
        raise DeepError(ErrorCode.INVALID_ENUM_VALUE, f"invalid {enum_cls.__name__}: {value!r}")
    return member


def _check_name(filename):
    if filename is None:
        raise DeepError(ErrorCode.EMPTY_STR, "file name is empty")
    name = os.fspath(filename)
    if len(name) == 0:
        raise DeepError(ErrorCode.EMPTY_STR, "file name is empty")
    return name


def get_cwd() -> str:
    """Return the current working directory."""
    with _os_errors():
        return os.getcwd()


class File:
    """An open file descriptor with read, write, seek and resize operations."""

    def __init__(self, fd: int, name=None):
        self._fd: int | None = fd
        self.name = name

    def __repr__(self) -> str:
        state = "closed" if self._fd is None else f"fd={self._fd}"
        return f"File({self.name!r}, {state})"

    @property
    def fd(self) -> int:
        return self._require()

    @property
    def closed(self) -> bool:
        return self._fd is None

    def _require(self) -> int:
        if self._fd is None:
            raise DeepError(ErrorCode.BAD_FILE_DESCRIPTOR, "file is closed")
        return self._fd

    def close(self) -> None:
        """Close the file; closing twice raises."""
        fd = self._require()
        self._fd = None
        with _os_errors():
            os.close(fd)

    def flush(self) -> None:
        """Flush written data to the storage device."""
        fd = self._require()
        with _os_errors():
            os.fsync(fd)

    def seek(self, offset: int, origin=SeekOrigin.BEGIN) -> int:
        """Move the position and return the new one."""
        fd = self._require()
        try:
            whence = _WHENCE[SeekOrigin(int(origin))]
        except (TypeError, ValueError, KeyError):
            raise DeepError(ErrorCode.INVALID_ARGUMENT, f"invalid seek origin: {origin!r}") from None
        with _os_errors():
            return os.lseek(fd, offset, whence)

    def read(self, count: int) -> bytes:
        """Read up to ``count`` bytes; fewer are returned at end of file."""
        fd = self._require()
        if count < 0:
            raise DeepError(ErrorCode.INVALID_ARGUMENT, "count must not be negative")
        chunks: list[bytes] = []
        total = 0
        with _os_errors():
            while total < count:
                chunk = os.read(fd, min(_CHUNK, count - total))
                if not chunk:
                    break
                chunks.append(chunk)
                total += len(chunk)
        return b"".join(chunks)

    def write(self, data) -> int:
        """Write ``data`` and return the number of bytes written."""
        fd = self._require()
        view = memoryview(data).cast("B")
        total = 0
        with _os_errors():
            while total < len(view):
                written = os.write(fd, view[total : total + _CHUNK])
                if written == 0:
                    break
                total += written
        return total

    def size(self) -> int:
        """Size of the file in bytes."""
        fd = self._require()
        with _os_errors():
            return os.fstat(fd).st_size

    def position(self) -> int:
        """Current position in the file."""
        fd = self._require()
        with _os_errors():
            return os.lseek(fd, 0, os.SEEK_CUR)

    def resize(self, size: int) -> None:
        """Grow or shrink the file to ``size`` bytes, keeping the position."""
        fd = self._require()
        if size < 0:
            raise DeepError(ErrorCode.INVALID_ARGUMENT, "size must not be negative")
        with _os_errors():
            current = os.lseek(fd, 0, os.SEEK_CUR)
            os.ftruncate(fd, size)
            os.lseek(fd, current, os.SEEK_SET)

    def __enter__(self) -> File:
        self._require()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._fd is not None:
            self.close()


def open_file(
    filename,
    mode=FileMode.OPEN,
    access=FileAccess.READ,
    share=FileShare.READ,
) -> File:
    """Open ``filename`` and return a :class:`File`.

    ``share`` is validated but has no effect on POSIX systems.
    """
    name = _check_name(filename)
    mode = _enum_value(FileMode, mode, FileMode.APPEND, FileMode.TRUNCATE)
    access = _enum_value(FileAccess, access, FileAccess.READ, FileAccess.READ_WRITE)
    _enum_value(FileShare, share, FileShare.DELETE, FileShare.READ_WRITE)

    flags = _ACCESS_FLAGS[access] | _MODE_FLAGS[mode] | getattr(os, "O_BINARY", 0)
    with _os_errors():
        fd = os.open(name, flags, 0o666)
    return File(fd, name)


def delete_file(filename) -> None:
    """Remove ``filename``."""
    name = _check_name(filename)
    with _os_errors():
        os.unlink(name)