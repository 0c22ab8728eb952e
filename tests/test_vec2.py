import pytest

from deeplib.vec2 import Vec2

A = Vec2(1.5, -2.0)
B = Vec2(3.0, 4.0)


def test_add_sub_round_trip():
    assert (A + B) - B == A
    assert (A - B) + B == A


def test_add_is_componentwise():
    total = A + B
    assert total.x == A.x + B.x
    assert total.y == A.y + B.y


def test_scalar_add_sub_round_trip():
    assert (A + 2.5) - 2.5 == A
    shifted = A - 1.0
    assert shifted.y == A.y - 1.0


def test_mul_and_div():
    assert A * 2 == A + A
    assert 2 * A == A * 2
    assert (B * 3) / 3 == B


def test_div_by_zero():
    assert A / 1 == A
    with pytest.raises(ZeroDivisionError) as info:
        A / 0
    assert info.type is ZeroDivisionError


def test_unsupported_operand():
    assert A * 1 == A
    with pytest.raises(TypeError) as add_info:
        A + "a"
    assert add_info.type is TypeError
    with pytest.raises(TypeError) as mul_info:
        A * B
    assert mul_info.type is TypeError


def test_swizzles():
    assert A.xy() == A
    assert A.yx() == Vec2(A.y, A.x)
    assert A.yx().yx() == A


def test_length_pinned():
    assert B.length() == pytest.approx(5.0)


def test_length_of_zero():
    assert Vec2(0, 0).length() == 0


def test_scale_matches_mul():
    assert A.scale(4) == A * 4


def test_normalized_has_unit_length():
    n = B.normalized()
    assert n.length() == pytest.approx(1.0)
    assert n.x * B.y == pytest.approx(n.y * B.x)


def test_normalized_zero_vector_raises():
    with pytest.raises(ZeroDivisionError):
        Vec2(0, 0).normalized()


def test_dot():
    assert A.dot(A) == pytest.approx(A.length() ** 2)
    assert A.dot(B) == B.dot(A)
    assert B.dot(B.yx() * 1) == pytest.approx(2 * B.x * B.y)


def test_inverted():
    assert A + A.inverted() == Vec2(0, 0)
    assert -A == A.inverted()
    assert A.inverted().inverted() == A


def test_equality_and_iteration():
    assert Vec2(1, 2) == Vec2(1, 2)
    assert not (Vec2(1, 2) == Vec2(2, 1))
    assert tuple(A) == (A.x, A.y)


def test_augmented_assignment():
    v = Vec2(1, 1)
    v += B
    assert v == Vec2(1, 1) + B
    v *= 2
    assert v == (Vec2(1, 1) + B) * 2