# point.py
from dataclasses import dataclass

@dataclass(frozen=True)
class Point:
    """Represents a city with id and planar coordinates."""
    id: int
    x: float
    y: float
