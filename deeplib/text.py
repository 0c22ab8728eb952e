"""Length helpers for NUL-terminated wide-character text."""

from __future__ import annotations

WIDE_CHAR_SIZE = 2


def calc_length(text: str) -> int:
    """Number of characters before the first NUL character (or the whole text)."""
    end = text.find("\0")
    return len(text) if end < 0 else end


def calc_bytes_size(text: str, char_size: int = WIDE_CHAR_SIZE) -> int:
    """Size in bytes of the text's characters up to the first NUL."""
    if char_size <= 0:
        raise ValueError("char_size must be positive")
    return calc_length(text) * char_size