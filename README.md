# deeplib

A small general-purpose toolkit. It uses only the standard library, and each module can be used on its own.

- `deeplib.errors` provides the `ErrorCode` enumeration of library error codes and the `DeepError` exception, which has a `code` and a `message`. `convert_errno` and `convert_windows_error` map operating-system error numbers to codes, and any number they do not know becomes `UNKNOWN_ERROR`. `error_from_os` turns an `OSError` into a `DeepError`.
- `deeplib.maths` provides `deg_to_rad`. `unsigned_abs(value, bits)` gives the absolute value of a signed integer of 8, 16, 32 or 64 bits as an unsigned one, so `unsigned_abs(-128, 8) == 128`. `int_limits(bits, signed)` returns the limits of a width. The module also has constants from `MIN_INT8` to `MAX_UINT64`.
- `deeplib.text` has `calc_length`, which counts the characters before the first NUL. `calc_bytes_size` is that count times `char_size`, which is 2 by default.
- `deeplib.vec2` and `deeplib.vec3` hold the immutable `Vec2` and `Vec3` types. They support `+` and `-` with a vector or a scalar, and `*` and `/` with a scalar. They also have swizzles (`xy`, `yx`, `xzy`, …), `length`, `scale`, `normalized`, `dot` and `inverted`, and `Vec3` adds `cross`.
- `deeplib.mat4` holds `Mat4`, a 4x4 matrix in row-major order. Arguments left out of the constructor default to the identity. You can index it flat (`m[5]`) or by `(row, column)`. It provides `*`, `translate`, `scale`, `rotate_x`, `rotate_y`, `rotate_z` (all in degrees), `transpose` and `Mat4.perspective(fov, aspect_ratio, z_near, z_far)` with `fov` in radians. Two matrices holding floats compare equal when they agree to within 1e-6.
- `deeplib.filesystem` has `get_cwd`, `open_file(filename, mode, access, share)` and `delete_file`. The options are the enumerations `FileMode`, `FileAccess`, `FileShare` and `SeekOrigin`. A `File` provides `read`, `write`, `seek`, `position`, `size`, `resize`, `flush` and `close`, and it is a context manager. `FileShare` is checked, but it has no effect on POSIX systems.
- `deeplib.image` holds `Image`, a buffer of raw pixels with `mirror_horizontal`, `mirror_vertical`, `resize` (keeps the top-left content and fills the rest with zeros), `copy` and `pixel_size`. The colour layout is described by `ColorSpace`, and `channels_for` gives its channel count.
- `deeplib.png` decodes in-memory data with `Png.load(stream)`, then `check()`, `read_info()` and `read_image()`. `write_png(image, stream)` encodes an image. Failures raise `PngError`.
- `deeplib.sync` has an `Event` with automatic or manual reset, whose `wait(milliseconds)` returns whether the event was signalled in time. Its `Thread.create(callback, args, paused)` runs `callback(args)`, and the thread provides `suspend`, `resume`, `wait` and `is_suspended`. An exception raised by the callback is kept in `thread.exception`.
- `deeplib.context` holds `Context`, which keeps the output and error streams (standard output and standard error by default). Its methods are `out()`, `err()`, `std_handle(StdHandle.…)` and `close()`, and it is a context manager. `create_context()` builds one and `get_version()` returns the library version.

## Installation

```
pip install deeplib
```

## Examples

```python
from deeplib.vec3 import Vec3
from deeplib.mat4 import Mat4

m = Mat4().translate(Vec3(1.0, 2.0, 3.0)).rotate_z(90.0)
print(m.transpose()[3])
```

```python
from deeplib.filesystem import open_file, FileMode, FileAccess, FileShare

with open_file("data.bin", FileMode.CREATE, FileAccess.READ_WRITE, FileShare.READ) as f:
    f.write(b"hello")
    print(f.size())
```

```python
import io
from deeplib.image import Image, ColorSpace
from deeplib.png import Png, write_png

img = Image(2, 1, 8, ColorSpace.RGB, bytes([255, 0, 0, 0, 0, 255]))
buf = io.BytesIO()
write_png(img, buf)
buf.seek(0)

png = Png.load(buf)
png.read_info()
assert png.read_image() == img
```

```python
from deeplib.context import create_context, get_version

with create_context() as ctx:
    ctx.out().write(f"deeplib {get_version()}\n")
```

Most failures raise `deeplib.errors.DeepError`, and its `code` attribute holds an `ErrorCode`. PNG errors raise `PngError`.

## What it does not do

- It has no command-line tool. It is a library only.
- Interlaced PNG files are not decoded. Palette images come back as palette indices, because the palette is not applied. `write_png` writes only RGB, RGBA and gray-alpha images.
- `Image` mirroring and resizing expect depths of 8 bits or more.
- `Thread.suspend` cannot stop running Python code. It holds a thread before its callback starts, or at the points where the callback calls `deeplib.sync.checkpoint()`.

## Running the tests

```
pip install -e .[test]
pytest
```