import pytest

from entities import Obstacle
from geometry import is_colliding


def box(x, y, w=10, h=10):
    return Obstacle(x, y, w, h)


@pytest.mark.parametrize("a, b, expected", [
    (box(0, 0), box(5, 5), True),
    (box(0, 0), box(10, 0), False),    # touching right edge
    (box(0, 0), box(0, 10), False),    # touching bottom edge
    (box(0, 0), box(20, 20), False),
    (box(0, 0, 50, 50), box(10, 10), True),  # containment
])
def test_overlap(a, b, expected):
    assert is_colliding(a, b) is expected


def test_symmetric():
    pairs = [(box(0, 0), box(5, 5)), (box(0, 0), box(10, 0)), (box(3, 4, 7, 2), box(9, 5, 1, 1))]
    for a, b in pairs:
        assert is_colliding(a, b) == is_colliding(b, a)


def test_box_overlaps_itself():
    a = box(1, 1)
    assert is_colliding(a, a)
    assert not is_colliding(a, box(1, 1, 0, 0))
