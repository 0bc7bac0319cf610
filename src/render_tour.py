# render_tour.py
from typing import Iterator, List, Optional

import config
from calcDist import Weight
from tour import Tour

def format_weight(w: Weight, precision: Optional[int] = None) -> str:
    if precision is None:
        precision = config.WEIGHT_PRECISION
    if float(w).is_integer():
        return str(int(w))
    return f"{w:.{precision}f}"

def format_edges(tour: Tour, precision: Optional[int] = None) -> Iterator[str]:
    for a, b, w in tour.edges():
        yield f"EDGE {a.id} -> {b.id} | WEIGHT: {format_weight(w, precision)}"

def format_tour(tour: Tour, precision: Optional[int] = None) -> List[str]:
    """One line per edge in path order, then the total."""
    lines = list(format_edges(tour, precision))
    lines.append(f"TOTAL DISTANCE: {format_weight(tour.total_distance, precision)}")
    return lines

def display_tour(tour: Tour, precision: Optional[int] = None):
    for line in format_tour(tour, precision):
        print(line)
