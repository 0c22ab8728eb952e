"""Library error codes and conversion from operating-system error numbers."""

from __future__ import annotations

import errno
from enum import IntEnum


class ErrorCode(IntEnum):
    """Portable error codes reported by the library."""

    NO_ERROR = 0
    UNKNOWN_ERROR = 1
    EMPTY_STR = 2
    OUT_OF_RANGE = 3
    INVALID_ENUM_VALUE = 4
    PERMISSION_DENIED = 5
    BAD_FILE_DESCRIPTOR = 6
    BUSY = 7
    DISK_QUOTA_EXCEEDED = 8
    FILE_EXISTS = 9
    BAD_ADDRESS = 10
    FILE_TOO_LARGE = 11
    INTERRUPTED_FUNCTION_CALL = 12
    INVALID_ARGUMENT = 13
    IS_A_DIRECTORY = 14
    TOO_MANY_LEVELS_OF_SYMBOLIC_LINKS = 15
    TOO_MANY_OPEN_FILES = 16
    FILENAME_TOO_LONG = 17
    NO_SUCH_DEVICE = 18
    NO_SUCH_FILE_OR_DIRECTORY = 19
    NOT_ENOUGH_MEMORY = 20
    NO_SPACE_LEFT_ON_DEVICE = 21
    NOT_A_DIRECTORY = 22
    NO_SUCH_DEVICE_OR_ADDRESS = 23
    OPERATION_NOT_SUPPORTED = 24
    OVERFLOW = 25
    OPERATION_NOT_PERMITTED = 26
    READ_ONLY_FILESYSTEM = 27
    TEXT_FILE_BUSY = 28
    OPERATION_WOULD_BLOCK = 29
    INVALID_FUNCTION = 30
    NO_SUCH_FILE = 31
    NO_SUCH_DIRECTORY = 32
    ACCESS_DENIED = 33
    BAD_ACCESS = 34
    BAD_DATA = 35
    NO_INTERNAL_CTX = 36


class DeepError(Exception):
    """An error carrying an :class:`ErrorCode`."""

    def __init__(self, code, message=""):
        self.code = ErrorCode(code)
        self.message = message or self.code.name.replace("_", " ").lower()
        super().__init__(self.message)


def _build_errno_table() -> dict[int, ErrorCode]:
    pairs = [
        ("ERANGE", ErrorCode.OUT_OF_RANGE),
        ("EACCES", ErrorCode.PERMISSION_DENIED),
        ("EBADF", ErrorCode.BAD_FILE_DESCRIPTOR),
        ("EBUSY", ErrorCode.BUSY),
        ("EDQUOT", ErrorCode.DISK_QUOTA_EXCEEDED),
        ("EEXIST", ErrorCode.FILE_EXISTS),
        ("EFAULT", ErrorCode.BAD_ADDRESS),
        ("EFBIG", ErrorCode.FILE_TOO_LARGE),
        ("EINVAL", ErrorCode.INVALID_ARGUMENT),
        ("EISDIR", ErrorCode.IS_A_DIRECTORY),
        ("ELOOP", ErrorCode.TOO_MANY_LEVELS_OF_SYMBOLIC_LINKS),
        ("EMFILE", ErrorCode.TOO_MANY_OPEN_FILES),
        ("ENAMETOOLONG", ErrorCode.FILENAME_TOO_LONG),
        ("ENFILE", ErrorCode.TOO_MANY_OPEN_FILES),
        ("ENODEV", ErrorCode.NO_SUCH_DEVICE),
        ("ENOENT", ErrorCode.NO_SUCH_FILE_OR_DIRECTORY),
        ("ENOMEM", ErrorCode.NOT_ENOUGH_MEMORY),
        ("ENOSPC", ErrorCode.NO_SPACE_LEFT_ON_DEVICE),
        ("ENOTDIR", ErrorCode.NOT_A_DIRECTORY),
        ("ENXIO", ErrorCode.NO_SUCH_DEVICE_OR_ADDRESS),
        ("EOPNOTSUPP", ErrorCode.OPERATION_NOT_SUPPORTED),
        ("EOVERFLOW", ErrorCode.OVERFLOW),
        ("EPERM", ErrorCode.OPERATION_NOT_PERMITTED),
        ("EROFS", ErrorCode.READ_ONLY_FILESYSTEM),
        ("ETXTBSY", ErrorCode.TEXT_FILE_BUSY),
        ("EWOULDBLOCK", ErrorCode.OPERATION_WOULD_BLOCK),
    ]
    table: dict[int, ErrorCode] = {0: ErrorCode.NO_ERROR}
    for name, code in pairs:
        number = getattr(errno, name, None)
        if number is not None:
            table.setdefault(number, code)
    return table


_ERRNO_TABLE = _build_errno_table()

_WINDOWS_TABLE: dict[int, ErrorCode] = {
    0: ErrorCode.NO_ERROR,  # ERROR_SUCCESS
    1: ErrorCode.INVALID_FUNCTION,  # ERROR_INVALID_FUNCTION
    2: ErrorCode.NO_SUCH_FILE,  # ERROR_FILE_NOT_FOUND
    3: ErrorCode.NO_SUCH_DIRECTORY,  # ERROR_PATH_NOT_FOUND
    4: ErrorCode.TOO_MANY_OPEN_FILES,  # ERROR_TOO_MANY_OPEN_FILES
    5: ErrorCode.ACCESS_DENIED,  # ERROR_ACCESS_DENIED
    6: ErrorCode.BAD_FILE_DESCRIPTOR,  # ERROR_INVALID_HANDLE
    8: ErrorCode.NOT_ENOUGH_MEMORY,  # ERROR_NOT_ENOUGH_MEMORY
    9: ErrorCode.BAD_ADDRESS,  # ERROR_INVALID_BLOCK
    12: ErrorCode.BAD_ACCESS,  # ERROR_INVALID_ACCESS
    13: ErrorCode.BAD_DATA,  # ERROR_INVALID_DATA
    14: ErrorCode.NOT_ENOUGH_MEMORY,  # ERROR_OUTOFMEMORY
    122: ErrorCode.OUT_OF_RANGE,  # ERROR_INSUFFICIENT_BUFFER
    1004: ErrorCode.INVALID_ARGUMENT,  # ERROR_INVALID_FLAGS
}


def convert_errno(error_code) -> ErrorCode:
    """Map a POSIX errno value to an :class:`ErrorCode`."""
    if error_code is None:
        return ErrorCode.UNKNOWN_ERROR
    return _ERRNO_TABLE.get(error_code, ErrorCode.UNKNOWN_ERROR)


def convert_windows_error(error_code) -> ErrorCode:
    """Map a Windows system error code to an :class:`ErrorCode`."""
    if error_code is None:
        return ErrorCode.UNKNOWN_ERROR
    return _WINDOWS_TABLE.get(error_code, ErrorCode.UNKNOWN_ERROR)


def error_from_os(exc: OSError) -> DeepError:
    """Build a :class:`DeepError` from an :class:`OSError`."""
    winerror = getattr(exc, "winerror", None)
    if winerror is not None:
        code = convert_windows_error(winerror)
    else:
        code = convert_errno(exc.errno)
    message = exc.strerror or str(exc)
    error = DeepError(code, message)
    error.__cause__ = exc
    return error