import random
import time, statistics
from typing import List

from NearestNeighbor import build_nearest_neighbor_tour
from point import Point

def random_points(n: int, seed: int = 0, size: float = 1000.0) -> List[Point]:
    rng = random.Random(seed)
    return [Point(i, rng.uniform(0, size), rng.uniform(0, size)) for i in range(1, n + 1)]

def time_tour(points: List[Point], start_id: int, repeats=30):
    times = []
    for _ in range(repeats):
        t0 = time.perf_counter()
        build_nearest_neighbor_tour(points, start_id)
        t1 = time.perf_counter()
        times.append((t1 - t0) * 1000)
    times.sort()
    return {
        "mean_ms": statistics.mean(times),
        "median_ms": statistics.median(times),
        "p95_ms": times[max(int(0.95 * len(times)) - 1, 0)],
        "min_ms": times[0],
        "max_ms": times[-1],
    }

if __name__ == "__main__":
    for n in (100, 500, 1000):
        pts = random_points(n)
        print(n, time_tour(pts, pts[0].id, repeats=5))
