"""In-memory raster images with mirror, resize and copy operations."""

from __future__ import annotations

from enum import Enum


class ColorSpace(Enum):
    """Layout of the channels of a pixel."""

    NONE = 0
    GRAY = 1
    PALETTE = 2
    RGB = 3
    RGBA = 4
    GA = 5
    BGR = 6
    BGRA = 7


class Channel(Enum):
    """A single colour channel."""

    RED = 0
    GREEN = 1
    BLUE = 2
    ALPHA = 3


_CHANNELS = {
    ColorSpace.GRAY: 1,
    ColorSpace.PALETTE: 1,
    ColorSpace.RGB: 3,
    ColorSpace.BGR: 3,
    ColorSpace.RGBA: 4,
    ColorSpace.GA: 2,
    ColorSpace.BGRA: 4,
}


def channels_for(space) -> int:
    """Number of channels of a colour space (0 for ``ColorSpace.NONE``)."""
    return _CHANNELS.get(ColorSpace(space), 0)


class Image:
    """Pixel data stored row after row, each row ``row_bytes`` long."""

    def __init__(
        self,
        width,
        height,
        bit_depth,
        color_space,
        data,
        channels=None,
        row_bytes=None,
    ):
        if width < 0 or height < 0:
            raise ValueError("image dimensions must not be negative")
        if bit_depth <= 0:
            raise ValueError("bit depth must be positive")
        self.width = width
        self.height = height
        self.bit_depth = bit_depth
        self.color_space = ColorSpace(color_space)
        self.channels = channels_for(self.color_space) if channels is None else channels
        if row_bytes is None:
            row_bytes = (width * self.channels * bit_depth + 7) // 8
        self.row_bytes = row_bytes
        self.data = bytearray(data)
        if len(self.data) < self.row_bytes * height:
            raise ValueError(
                f"pixel data holds {len(self.data)} bytes, "
                f"{self.row_bytes * height} are needed"
            )

    def __repr__(self) -> str:
        return (
            f"Image({self.width}x{self.height}, {self.color_space.name}, "
            f"bit_depth={self.bit_depth}, channels={self.channels})"
        )

    def __eq__(self, other):
        if not isinstance(other, Image):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self.bit_depth == other.bit_depth
            and self.color_space == other.color_space
            and self.channels == other.channels
            and self.row_bytes == other.row_bytes
            and self.data == other.data
        )

    __hash__ = None

    def __bytes__(self) -> bytes:
        return bytes(self.data)

    def pixel_size(self) -> int:
        """Bytes per pixel for byte-aligned depths (0 below 8 bits)."""
        return self.channels * (self.bit_depth // 8)

    def mirror_horizontal(self) -> None:
        """Swap pixels left to right in every row."""
        size = self.pixel_size()
        line = self.width * size
        if line == 0:
            return
        for start in range(0, self.height * line, line):
            row = self.data[start : start + line]
            pixels = [row[offset : offset + size] for offset in range(0, line, size)]
            self.data[start : start + line] = b"".join(reversed(pixels))

    def mirror_vertical(self) -> None:
        """Swap rows top to bottom."""
        line = self.width * self.pixel_size()
        if line == 0:
            return
        for row in range(self.height // 2):
            top = row * line
            bottom = (self.height - 1 - row) * line
            upper = self.data[top : top + line]
            self.data[top : top + line] = self.data[bottom : bottom + line]
            self.data[bottom : bottom + line] = upper

    def resize(self, width, height) -> None:
        """Change the canvas size, keeping the top-left content and zero-filling the rest."""
        if width < 0 or height < 0:
            raise ValueError("image dimensions must not be negative")
        new_row_bytes = width * self.pixel_size()
        dest = bytearray(new_row_bytes * height)
        to_copy = min(self.row_bytes, new_row_bytes)
        for row in range(min(height, self.height)):
            source = row * self.row_bytes
            target = row * new_row_bytes
            dest[target : target + to_copy] = self.data[source : source + to_copy]
        self.data = dest
        self.width = width
        self.height = height
        self.row_bytes = new_row_bytes

    def copy(self) -> Image:
        """An independent copy of the image."""
        return Image(
            self.width,
            self.height,
            self.bit_depth,
            self.color_space,
            bytes(self.data),
            channels=self.channels,
            row_bytes=self.row_bytes,
        )