# tour.py
from dataclasses import dataclass, field
from typing import List

from calcDist import Weight
from point import Point

@dataclass
class Tour:
    """Closed visiting order plus the weight of the edge into each stop.

    weights[i] is the distance from path[i-1] to path[i]; weights[0] is 0
    since the start has no predecessor. path[0] and path[-1] are the start.
    """
    path: List[Point] = field(default_factory=list)
    weights: List[Weight] = field(default_factory=list)

    def add_stop(self, point: Point, weight: Weight):
        self.path.append(point)
        self.weights.append(weight)

    @property
    def total_distance(self) -> Weight:
        return sum(self.weights)

    @property
    def start(self) -> Point:
        return self.path[0]

    def ids(self) -> List[int]:
        return [p.id for p in self.path]

    def edges(self):
        """(from_point, to_point, weight) for each leg in path order."""
        for i in range(1, len(self.path)):
            yield self.path[i - 1], self.path[i], self.weights[i]
