import io
import sys

import pytest

from deeplib.context import (
    Context,
    ContextObject,
    StdHandle,
    create_context,
    get_version,
)
from deeplib.errors import DeepError, ErrorCode


def test_version_matches_project():
    assert get_version() == "0.0.1"


def test_out_and_err_return_given_streams():
    out, err = io.StringIO(), io.StringIO()
    ctx = Context(out, err)
    ctx.out().write("hello")
    ctx.err().write("oops")
    assert out.getvalue() == "hello"
    assert err.getvalue() == "oops"


def test_defaults_use_standard_streams():
    ctx = Context()
    assert ctx.out() is sys.stdout
    assert ctx.err() is sys.stderr


def test_create_context_is_open():
    ctx = create_context()
    assert ctx.closed is False
    assert ctx.out() is sys.stdout


def test_std_handle_of_real_file(tmp_path):
    with open(tmp_path / "out.txt", "w") as out_file:
        ctx = Context(out_file, io.StringIO())
        assert ctx.std_handle(StdHandle.OUTPUT) == out_file.fileno()


def test_std_handle_without_descriptor_raises():
    ctx = Context(io.StringIO(), io.StringIO())
    with pytest.raises(DeepError) as info:
        ctx.std_handle(StdHandle.ERROR)
    assert info.value.code == ErrorCode.BAD_FILE_DESCRIPTOR


@pytest.mark.parametrize("value", [7, -1, "output"])
def test_std_handle_invalid_value(value):
    ctx = Context(io.StringIO(), io.StringIO())
    with pytest.raises(DeepError) as info:
        ctx.std_handle(value)
    assert info.value.code == ErrorCode.INVALID_ENUM_VALUE


def test_closed_context_refuses_writers():
    ctx = Context(io.StringIO(), io.StringIO())
    ctx.close()
    assert ctx.closed is True
    with pytest.raises(DeepError) as info:
        ctx.out()
    assert info.value.code == ErrorCode.NO_INTERNAL_CTX
    with pytest.raises(DeepError):
        ctx.err()


def test_close_twice_keeps_closed():
    ctx = Context(io.StringIO(), io.StringIO())
    ctx.close()
    ctx.close()
    assert ctx.closed is True


def test_close_leaves_streams_open():
    out = io.StringIO()
    ctx = Context(out, io.StringIO())
    ctx.close()
    assert out.closed is False


def test_context_manager_closes():
    out = io.StringIO()
    with Context(out, io.StringIO()) as ctx:
        ctx.out().write("x")
    assert ctx.closed is True
    assert out.getvalue() == "x"


def test_context_object_keeps_context():
    ctx = Context(io.StringIO(), io.StringIO())
    obj = ContextObject(ctx)
    assert obj.context is ctx
    assert ContextObject().context is None