"""General-purpose toolkit: error codes, maths, vectors, matrices, files, images, PNG, threads and a context."""

__version__ = "0.0.1"

__all__ = [
    "context",
    "errors",
    "filesystem",
    "image",
    "mat4",
    "maths",
    "png",
    "sync",
    "text",
    "vec2",
    "vec3",
]