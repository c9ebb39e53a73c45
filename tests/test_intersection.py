from trazador.direction import Direction
from trazador.intersection import Intersection
from trazador.point3d import Point3D


def test_default_is_a_miss():
    result = Intersection()
    assert not result
    assert result.distances == []
    assert result.points == []
    assert result.normal == Direction(0, 0, 0)


def test_hit_is_truthy():
    result = Intersection(True, [2.5], [Point3D(0, 0, 2.5)], Direction(0, 0, -1))
    assert result
    assert result.distances == [2.5]
    assert result.points == [Point3D(0, 0, 2.5)]


def test_default_lists_are_not_shared():
    first, second = Intersection(), Intersection()
    first.distances.append(1.0)
    assert second.distances == []