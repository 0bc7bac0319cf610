# calcDist.py
import math
from typing import Union

from point import Point

Weight = Union[int, float]

def euclidean(a: Point, b: Point, integral: bool = False) -> Weight:
    """Plane distance between two points. Truncated to int when integral is set."""
    d = math.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2)
    if integral:
        return int(d)
    return d
