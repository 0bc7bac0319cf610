# NearestNeighbor.py
import concurrent.futures
import logging
from typing import Iterable, List, Optional, Sequence

import config
from calcDist import Weight, euclidean
from point import Point
from tour import Tour
from tsp_errors import EmptyCollection, InvalidStartIdentifier

logger = logging.getLogger(__name__)

def resolve_start(points: Sequence[Point], start_id: int, strict: Optional[bool] = None) -> Point:
    """Return the point with id == start_id.

    A missing id raises InvalidStartIdentifier, or with strict=False falls
    back to the first point of the collection.
    """
    if not points:
        raise EmptyCollection()
    if strict is None:
        strict = config.STRICT_START

    for p in points:
        if p.id == start_id:
            return p

    if strict:
        raise InvalidStartIdentifier(start_id)
    logger.warning("Start id %s not found, falling back to point %s", start_id, points[0].id)
    return points[0]

def _closer(d: Weight, best_d: Optional[Weight], p: Point, best: Optional[Point], tie_break: str) -> bool:
    if best is None or d < best_d:
        return True
    return tie_break == 'id' and d == best_d and p.id < best.id

def nearest_unvisited(current: Point,
                      points: Iterable[Point],
                      visited: set,
                      integral: bool = False,
                      tie_break: str = 'order'):
    """Scan the unvisited points and return (nearest, distance); (None, None) if none is left."""
    best = None
    best_d = None
    for p in points:
        if p.id in visited:
            continue
        d = euclidean(current, p, integral=integral)
        if _closer(d, best_d, p, best, tie_break):
            best_d = d
            best = p
    return best, best_d

def build_nearest_neighbor_tour(points: Sequence[Point],
                                start_id: int,
                                integral: Optional[bool] = None,
                                strict: Optional[bool] = None,
                                tie_break: Optional[str] = None) -> Tour:
    """Greedy nearest-neighbor tour from start_id that returns to the start.

    Points are scanned in list order, so on an exact tie the earlier point
    wins unless tie_break="id", where the smallest identifier wins.
    """
    if integral is None:
        integral = config.INTEGRAL_WEIGHTS
    if tie_break is None:
        tie_break = config.TIE_BREAK
    if tie_break not in config.TIE_BREAK_CHOICES:
        raise ValueError(f"Unknown tie_break {tie_break!r}, expected one of {config.TIE_BREAK_CHOICES}")

    start = resolve_start(points, start_id, strict=strict)

    tour = Tour()
    tour.add_stop(start, 0)
    visited = {start.id}
    n_ids = len({p.id for p in points})

    current = start
    while len(visited) < n_ids:
        nxt, d = nearest_unvisited(current, points, visited, integral=integral, tie_break=tie_break)
        tour.add_stop(nxt, d)
        visited.add(nxt.id)
        current = nxt

    tour.add_stop(start, euclidean(current, start, integral=integral))

    logger.debug("Tour from %s: %d stops, total %s", start.id, len(points), tour.total_distance)
    return tour

def best_start_tour(points: Sequence[Point],
                    start_ids: Optional[Iterable[int]] = None,
                    workers: Optional[int] = None,
                    **kwargs) -> Tour:
    """Build a tour from every start id in parallel and keep the shortest.

    Ties on total distance go to the start that comes first in start_ids
    (default: collection order).
    """
    if not points:
        raise EmptyCollection()
    if start_ids is None:
        start_ids = [p.id for p in points]
    start_ids = list(start_ids)
    if not start_ids:
        raise EmptyCollection("No start ids to try.")
    if workers is None:
        workers = config.DEFAULT_WORKERS

    with concurrent.futures.ThreadPoolExecutor(max_workers=max(1, workers)) as executor:
        futures = [executor.submit(build_nearest_neighbor_tour, points, sid, **kwargs) for sid in start_ids]
        tours: List[Tour] = [f.result() for f in futures]

    best = None
    for t in tours:
        if best is None or t.total_distance < best.total_distance:
            best = t
    logger.info("Best of %d starts: %s (total %s)", len(tours), best.start.id, best.total_distance)
    return best
