import pytest

from mazecarver.domain.neighbors import (
    get_in_between, get_step_neighbors, get_unvisited_neighbors
)
from mazecarver.domain.types import GridShape


def test_neighbor_order_is_right_bottom_left_top():
    shape = GridShape(7, 7)
    assert get_step_neighbors((2, 2), shape) == [(2, 4), (4, 2), (2, 0), (0, 2)]


def test_corner_neighbors_stay_inside_grid():
    shape = GridShape(5, 5)
    assert get_step_neighbors((0, 0), shape) == [(0, 2), (2, 0)]
    assert get_step_neighbors((4, 4), shape) == [(4, 2), (2, 4)]


def test_odd_origin_never_reaches_outer_ring():
    shape = GridShape(7, 7)
    assert get_step_neighbors((1, 1), shape) == [(1, 3), (3, 1)]
    assert get_step_neighbors((5, 5), shape) == [(5, 3), (3, 5)]


def test_unvisited_filter():
    shape = GridShape(5, 5)
    visited = {(0, 2)}
    assert get_unvisited_neighbors((0, 0), shape, visited) == [(2, 0)]


def test_in_between_is_midpoint():
    assert get_in_between((2, 2), (2, 4)) == (2, 3)
    assert get_in_between((2, 2), (0, 2)) == (1, 2)


@pytest.mark.parametrize("neighbor", [(2, 2), (2, 3), (4, 4), (2, 6)])
def test_in_between_rejects_non_step_neighbors(neighbor):
    with pytest.raises(ValueError):
        get_in_between((2, 2), neighbor)
