import pytest

from trazador.coordinate import Coordinate


def test_defaults_are_zero():
    assert tuple(Coordinate()) == (0, 0, 0, 0)


def test_iteration_order():
    c = Coordinate(1.5, -2.0, 3.0, 1.0)
    assert list(c) == [1.5, -2.0, 3.0, 1.0]


def test_from_components_round_trip():
    c = Coordinate(4.0, 5.0, 6.0, 0.0)
    assert Coordinate.from_components(c) == c
    assert Coordinate.from_components([7, 8, 9, 1]) == Coordinate(7, 8, 9, 1)


def test_from_components_accepts_generator():
    c = Coordinate.from_components(v for v in (1, 2, 3, 1))
    assert c.is_point == 1
    assert c.z == 3


@pytest.mark.parametrize("components", [[], [1, 2, 3], [1, 2, 3, 4, 5]])
def test_from_components_wrong_length(components):
    with pytest.raises(ValueError):
        Coordinate.from_components(components)


def test_str_format():
    assert str(Coordinate(1, 1, 1, 1)) == "( 1, 1, 1, 1 )"


def test_is_immutable():
    c = Coordinate(1, 2, 3, 1)
    with pytest.raises(AttributeError):
        c.x = 5
    assert c.x == 1