import pytest

from trazador.direction import Direction


D1 = Direction(3.0, 4.0, 2.0)
D2 = Direction(1.0, 2.0, -1.0)


def test_addition():
    assert D1 + D2 == Direction(4.0, 6.0, 1.0)


def test_subtraction():
    assert D1 - D2 == Direction(2.0, 2.0, 3.0)


def test_equality_of_distinct_and_identical_directions():
    d4 = Direction(1.0, 2.0, -1.0)
    assert not (D1 == D2)
    assert D2 == d4


def test_scalar_multiplication_and_division():
    assert D1 * 2 == Direction(6.0, 8.0, 4.0)
    assert D1 / 2 == Direction(1.5, 2.0, 1.0)


def test_dot_product_of_scaled_vectors():
    d5 = D1 * 2
    d6 = D1 / 2
    assert d5.dot(d6) == pytest.approx(29.0)


def test_modulus_and_normalize():
    d10 = Direction(-3, 4, 0)
    assert d10.modulus() == pytest.approx(5.0)
    d9 = d10.normalize()
    assert d9.modulus() == pytest.approx(1.0)
    assert d9.is_normalized()
    assert str(d9) == "-->(-0.6, 0.8, 0)"


def test_not_normalized():
    assert not D1.is_normalized()


def test_normalize_zero_vector_is_zero():
    assert Direction().normalize() == Direction(0, 0, 0)


def test_cross_product_of_axes():
    assert Direction(1, 0, 0).cross(Direction(0, 1, 0)) == Direction(0, 0, 1)


def test_cross_product_is_orthogonal_to_operands():
    c = D1.cross(D2)
    assert c.dot(D1) == pytest.approx(0.0)
    assert c.dot(D2) == pytest.approx(0.0)


def test_is_perpendicular_checks_zero_cross_product():
    assert Direction(1, 2, 3).is_perpendicular(Direction(2, 4, 6))
    assert not Direction(1, 0, 0).is_perpendicular(Direction(0, 1, 0))


def test_angle_between_axes():
    assert Direction(1, 0, 0).angle_to(Direction(0, 1, 0)) == pytest.approx(90.0)
    assert Direction(1, 0, 0).angle_to(Direction(2, 0, 0)) == pytest.approx(0.0)
    assert Direction(1, 0, 0).angle_to(Direction(-1, 0, 0)) == pytest.approx(180.0)


def test_componentwise_ordering():
    big = Direction(2, 2, 2)
    small = Direction(1, 1, 1)
    mixed = Direction(2, 0, 2)
    assert big > small
    assert small < big
    assert big >= big
    assert small <= small
    assert not (mixed > small)
    assert not (mixed < small)


def test_division_by_zero_raises():
    assert D1 / 4 == Direction(0.75, 1.0, 0.5)
    with pytest.raises(ZeroDivisionError):
        D1 / 0


def test_str_format():
    assert str(D1) == "-->(3, 4, 2)"