import random

import pytest

from NearestNeighbor import (best_start_tour, build_nearest_neighbor_tour,
                             nearest_unvisited, resolve_start)
from point import Point
from tour import Tour
from tsp_errors import EmptyCollection, InvalidStartIdentifier, TourError

def random_points(n, seed):
    rng = random.Random(seed)
    return [Point(i, rng.uniform(-50, 50), rng.uniform(-50, 50)) for i in range(n)]

def check_invariants(points, tour, start_id):
    ids = tour.ids()
    assert ids[0] == ids[-1] == start_id
    assert sorted(ids[:-1]) == sorted(p.id for p in points)
    assert len(tour.weights) == len(tour.path) == len(points) + 1
    assert tour.weights[0] == 0
    assert tour.total_distance == sum(tour.weights)

def test_triangle_scenario(triangle):
    tour = build_nearest_neighbor_tour(triangle, 1)
    assert tour.ids() == [1, 2, 3, 1]
    assert tour.weights == [0, 3, 5, 4]
    assert tour.total_distance == 12

def test_single_point():
    a = Point(7, 0.0, 0.0)
    tour = build_nearest_neighbor_tour([a], 7)
    assert tour.path == [a, a]
    assert tour.weights == [0, 0]
    assert tour.total_distance == 0

def test_missing_start_is_strict_by_default():
    points = [Point(1, 0, 0), Point(2, 1, 1)]
    with pytest.raises(InvalidStartIdentifier) as exc:
        build_nearest_neighbor_tour(points, 5)
    assert exc.value.start_id == 5
    assert isinstance(exc.value, TourError)

def test_missing_start_lenient_falls_back_to_first():
    points = [Point(1, 0, 0), Point(2, 1, 1)]
    tour = build_nearest_neighbor_tour(points, 5, strict=False)
    assert tour.ids() == [1, 2, 1]

def test_empty_collection():
    with pytest.raises(EmptyCollection):
        build_nearest_neighbor_tour([], 1)

def test_resolve_start(triangle):
    assert resolve_start(triangle, 3) is triangle[2]
    with pytest.raises(InvalidStartIdentifier):
        resolve_start(triangle, 9, strict=True)
    assert resolve_start(triangle, 9, strict=False) is triangle[0]

@pytest.mark.parametrize("seed", range(5))
def test_random_invariants(seed):
    points = random_points(40, seed)
    start_id = points[seed].id
    tour = build_nearest_neighbor_tour(points, start_id)
    check_invariants(points, tour, start_id)

def test_each_step_takes_the_nearest():
    points = random_points(25, 42)
    tour = build_nearest_neighbor_tour(points, 0)
    seen = {0}
    for i in range(1, len(points)):
        prev = tour.path[i - 1]
        remaining = [p for p in points if p.id not in seen]
        best = min(((prev.x - p.x) ** 2 + (prev.y - p.y) ** 2) ** 0.5 for p in remaining)
        assert tour.weights[i] == pytest.approx(best)
        seen.add(tour.path[i].id)

def test_deterministic():
    points = random_points(30, 3)
    assert build_nearest_neighbor_tour(points, 4) == build_nearest_neighbor_tour(points, 4)

def test_tie_goes_to_earlier_point():
    # 2 and 3 are both 1 away from the start
    points = [Point(1, 0, 0), Point(3, -1, 0), Point(2, 1, 0)]
    assert build_nearest_neighbor_tour(points, 1).ids()[1] == 3
    assert build_nearest_neighbor_tour(points, 1, tie_break='id').ids()[1] == 2

def test_unknown_tie_break():
    with pytest.raises(ValueError):
        build_nearest_neighbor_tour([Point(1, 0, 0)], 1, tie_break='random')

def test_integral_weights(triangle):
    points = triangle + [Point(4, 1, 1)]
    tour = build_nearest_neighbor_tour(points, 1, integral=True)
    assert all(isinstance(w, int) for w in tour.weights)
    assert tour.weights[1] == 1
    assert tour.total_distance == sum(tour.weights)

def test_coincident_points():
    points = [Point(1, 2, 2), Point(2, 2, 2), Point(3, 5, 6)]
    tour = build_nearest_neighbor_tour(points, 1)
    assert tour.ids() == [1, 2, 3, 1]
    assert tour.weights == [0, 0, 5, 5]

def test_nearest_unvisited_none_left(triangle):
    assert nearest_unvisited(triangle[0], triangle, {1, 2, 3}) == (None, None)

def test_input_is_not_modified(triangle):
    before = list(triangle)
    build_nearest_neighbor_tour(triangle, 2)
    assert triangle == before

def test_best_start_is_minimum():
    points = random_points(20, 7)
    best = best_start_tour(points, workers=3)
    totals = [build_nearest_neighbor_tour(points, p.id).total_distance for p in points]
    assert best.total_distance == min(totals)
    check_invariants(points, best, best.start.id)

def test_best_start_subset(triangle):
    tour = best_start_tour(triangle, start_ids=[2], workers=1)
    assert tour.start.id == 2

def test_best_start_errors(triangle):
    with pytest.raises(EmptyCollection):
        best_start_tour([])
    with pytest.raises(EmptyCollection):
        best_start_tour(triangle, start_ids=[])
    with pytest.raises(InvalidStartIdentifier):
        best_start_tour(triangle, start_ids=[1, 42], strict=True)

def test_total_is_exact_sum_of_weights():
    tour = Tour()
    for i in range(50):
        tour.add_stop(Point(i, 0.0, 0.0), 0.1 * (i % 7) + 1e-9 * i)
    assert tour.total_distance == sum(tour.weights)
    points = random_points(200, 11)
    tour = build_nearest_neighbor_tour(points, 0)
    assert tour.total_distance == sum(tour.weights)
