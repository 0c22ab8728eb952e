"""Reading and writing PNG images."""

from __future__ import annotations

import struct
import zlib

from deeplib.image import ColorSpace, Image

SIGNATURE = b"\x89PNG\r\n\x1a\n"
_SIG_CHECKED = 4
_MAX_DIMENSION = 0x7FFFFFFF

_COLOR_TYPE_CHANNELS = {0: 1, 2: 3, 3: 1, 4: 2, 6: 4}
_ALLOWED_DEPTHS = {
    0: (1, 2, 4, 8, 16),
    2: (8, 16),
    3: (1, 2, 4, 8),
    4: (8, 16),
    6: (8, 16),
}
_COLOR_SPACES = {
    0: ColorSpace.GRAY,
    3: ColorSpace.PALETTE,
    2: ColorSpace.RGB,
    6: ColorSpace.RGBA,
    4: ColorSpace.GA,
}
_WRITE_COLOR_TYPES = {
    ColorSpace.RGB: 2,
    ColorSpace.RGBA: 6,
    ColorSpace.GA: 4,
}
_KNOWN_CRITICAL = {b"IHDR", b"PLTE", b"IDAT", b"IEND"}


class PngError(Exception):
    """Raised when PNG data cannot be read or written."""


def _is_critical(chunk_type: bytes) -> bool:
    return not chunk_type[0] & 0x20


def _paeth(left: int, up: int, up_left: int) -> int:
    estimate = left + up - up_left
    dl, du, dul = abs(estimate - left), abs(estimate - up), abs(estimate - up_left)
    if dl <= du and dl <= dul:
        return left
    if du <= dul:
        return up
    return up_left


def _unfilter_row(filter_type: int, line: bytearray, prior: bytes, bpp: int) -> None:
    if filter_type == 0:
        return
    if filter_type == 1:
        for i in range(bpp, len(line)):
            line[i] = (line[i] + line[i - bpp]) & 0xFF
    elif filter_type == 2:
        line[:] = bytes((a + b) & 0xFF for a, b in zip(line, prior))
    elif filter_type == 3:
        for i in range(len(line)):
            left = line[i - bpp] if i >= bpp else 0
            line[i] = (line[i] + ((left + prior[i]) >> 1)) & 0xFF
    elif filter_type == 4:
        for i in range(len(line)):
            left = line[i - bpp] if i >= bpp else 0
            up_left = prior[i - bpp] if i >= bpp else 0
            line[i] = (line[i] + _paeth(left, prior[i], up_left)) & 0xFF
    else:
        raise PngError(f"bad adaptive filter value: {filter_type}")


class Png:
    """PNG data held in memory, decoded in two steps: header, then pixels."""

    def __init__(self, data=b""):
        self.data = bytes(data)
        self.position = 0
        self.width: int | None = None
        self.height: int | None = None
        self.bit_depth: int | None = None
        self.color_type: int | None = None
        self.interlace_type: int | None = None
        self.palette: bytes | None = None
        self._info_read = False

    @classmethod
    def load(cls, stream) -> Png:
        """Read everything from the stream's current position to its end."""
        if stream is None:
            raise PngError("no input stream")
        readable = getattr(stream, "readable", None)
        if readable is not None and not readable():
            raise PngError("input stream is not readable")
        try:
            data = stream.read()
        except OSError as exc:
            raise PngError(f"cannot read input stream: {exc}") from exc
        return cls(data or b"")

    @property
    def bytes_size(self) -> int:
        return len(self.data)

    @property
    def is_valid(self) -> bool:
        return bool(self.data)

    def check(self) -> bool:
        """Whether the data starts with the first bytes of the PNG signature."""
        return self.data[:_SIG_CHECKED] == SIGNATURE[:_SIG_CHECKED]

    def _take(self, count: int) -> bytes:
        end = self.position + count
        if end > len(self.data):
            raise PngError("cannot read more data")
        chunk = self.data[self.position : end]
        self.position = end
        return chunk

    def _next_chunk(self) -> tuple[bytes, bytes | None]:
        (length,) = struct.unpack(">I", self._take(4))
        if length > _MAX_DIMENSION:
            raise PngError("chunk length is too large")
        chunk_type = self._take(4)
        body = self._take(length)
        (crc,) = struct.unpack(">I", self._take(4))
        if zlib.crc32(body, zlib.crc32(chunk_type)) != crc:
            if _is_critical(chunk_type):
                raise PngError(f"CRC error in {chunk_type!r} chunk")
            return chunk_type, None
        return chunk_type, body

    def _parse_header(self, body: bytes) -> None:
        if len(body) != 13:
            raise PngError("invalid IHDR length")
        width, height, depth, color_type, compression, filter_method, interlace = (
            struct.unpack(">IIBBBBB", body)
        )
        if not 0 < width <= _MAX_DIMENSION or not 0 < height <= _MAX_DIMENSION:
            raise PngError("invalid image dimensions")
        if color_type not in _ALLOWED_DEPTHS:
            raise PngError(f"invalid color type: {color_type}")
        if depth not in _ALLOWED_DEPTHS[color_type]:
            raise PngError(f"invalid bit depth {depth} for color type {color_type}")
        if compression != 0:
            raise PngError("unknown compression method")
        if filter_method != 0:
            raise PngError("unknown filter method")
        if interlace not in (0, 1):
            raise PngError("unknown interlace method")
        self.width, self.height = width, height
        self.bit_depth, self.color_type, self.interlace_type = depth, color_type, interlace

    def read_info(self) -> None:
        """Parse the signature and the chunks that precede the image data."""
        self._info_read = False
        self.palette = None
        self.position = _SIG_CHECKED
        if self._take(len(SIGNATURE) - _SIG_CHECKED) != SIGNATURE[_SIG_CHECKED:]:
            raise PngError("not a PNG file")
        chunk_type, body = self._next_chunk()
        if chunk_type != b"IHDR":
            raise PngError("missing IHDR before other chunks")
        self._parse_header(body)

        while True:
            start = self.position
            chunk_type, body = self._next_chunk()
            if chunk_type == b"IDAT":
                self.position = start
                break
            if chunk_type == b"IHDR":
                raise PngError("duplicate IHDR chunk")
            if chunk_type == b"IEND":
                raise PngError("no image data before IEND")
            if chunk_type == b"PLTE":
                if len(body) % 3 or not 3 <= len(body) <= 768:
                    raise PngError("invalid palette length")
                self.palette = body
            elif _is_critical(chunk_type) and chunk_type not in _KNOWN_CRITICAL:
                raise PngError(f"unknown critical chunk {chunk_type!r}")

        if self.color_type == 3 and self.palette is None:
            raise PngError("missing PLTE before IDAT")
        self._info_read = True

    def read_image(self) -> Image:
        """Decode the pixel rows and read the chunks up to IEND."""
        if not self._info_read:
            raise PngError("read_info must be called before read_image")
        if self.interlace_type != 0:
            raise PngError("interlaced images are not supported")

        channels = _COLOR_TYPE_CHANNELS[self.color_type]
        bits_per_pixel = channels * self.bit_depth
        row_bytes = (self.width * bits_per_pixel + 7) // 8
        bpp = max(1, bits_per_pixel // 8)

        compressed = bytearray()
        chunk_type, body = self._next_chunk()
        while chunk_type == b"IDAT":
            compressed += body
            chunk_type, body = self._next_chunk()

        try:
            raw = zlib.decompressobj().decompress(bytes(compressed))
        except zlib.error as exc:
            raise PngError(f"invalid image data: {exc}") from exc
        stride = row_bytes + 1
        if len(raw) < stride * self.height:
            raise PngError("not enough image data")

        pixels = bytearray()
        prior = bytes(row_bytes)
        for start in range(0, stride * self.height, stride):
            line = bytearray(raw[start + 1 : start + stride])
            _unfilter_row(raw[start], line, prior, bpp)
            pixels += line
            prior = bytes(line)

        while chunk_type != b"IEND":
            if chunk_type == b"IDAT":
                raise PngError("too many IDAT chunks")
            if _is_critical(chunk_type) and chunk_type not in _KNOWN_CRITICAL:
                raise PngError(f"unknown critical chunk {chunk_type!r}")
            chunk_type, body = self._next_chunk()

        return Image(
            self.width,
            self.height,
            self.bit_depth,
            _COLOR_SPACES.get(self.color_type, ColorSpace.NONE),
            bytes(pixels),
            channels=channels,
            row_bytes=row_bytes,
        )


def _chunk(chunk_type: bytes, body: bytes) -> bytes:
    crc = zlib.crc32(body, zlib.crc32(chunk_type))
    return struct.pack(">I", len(body)) + chunk_type + body + struct.pack(">I", crc)


def write_png(image: Image, stream) -> None:
    """Encode an RGB, RGBA or gray-alpha image as PNG into a writable stream."""
    if stream is None:
        raise PngError("no output stream")
    writable = getattr(stream, "writable", None)
    if writable is not None and not writable():
        raise PngError("output stream is not writable")

    color_type = _WRITE_COLOR_TYPES.get(image.color_space)
    if color_type is None:
        raise PngError(f"cannot write color space {image.color_space.name}")
    if image.bit_depth not in _ALLOWED_DEPTHS[color_type]:
        raise PngError(f"invalid bit depth {image.bit_depth} for {image.color_space.name}")
    if not 0 < image.width <= _MAX_DIMENSION or not 0 < image.height <= _MAX_DIMENSION:
        raise PngError("invalid image dimensions")

    line = image.width * _COLOR_TYPE_CHANNELS[color_type] * image.bit_depth // 8
    rows = []
    for row in range(image.height):
        start = row * image.row_bytes
        data = bytes(image.data[start : start + line])
        if len(data) < line:
            raise PngError("image data is too short")
        rows.append(b"\x00" + data)

    header = struct.pack(
        ">IIBBBBB", image.width, image.height, image.bit_depth, color_type, 0, 0, 0
    )
    try:
        stream.write(SIGNATURE)
        stream.write(_chunk(b"IHDR", header))
        stream.write(_chunk(b"IDAT", zlib.compress(b"".join(rows))))
        stream.write(_chunk(b"IEND", b""))
    except OSError as exc:
        raise PngError(f"error writing to stream: {exc}") from exc