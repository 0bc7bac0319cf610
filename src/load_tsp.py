"""
Read a TSPLIB-style .tsp file into an ordered list of Points.

Usage:
    from load_tsp import read_tsp_points
    cities = read_tsp_points("data/sample.tsp")
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import config
from point import Point
from tsp_errors import FileAccessError

logger = logging.getLogger(__name__)

@dataclass
class TspInstance:
    """Header fields from the preamble plus the points in file order."""
    header: Dict[str, str] = field(default_factory=dict)
    points: List[Point] = field(default_factory=list)

    @property
    def name(self) -> Optional[str]:
        return self.header.get('NAME')

    @property
    def dimension(self) -> Optional[int]:
        value = self.header.get('DIMENSION')
        try:
            return int(value) if value is not None else None
        except ValueError:
            return None

def parse_header_line(line: str) -> Optional[Tuple[str, str]]:
    """'KEY : VALUE' -> (KEY, VALUE), or None for anything else."""
    if ':' not in line:
        return None
    key, value = line.split(':', 1)
    key = key.strip().upper()
    if not key:
        return None
    return key, value.strip()

def parse_node_line(line: str) -> Optional[Point]:
    """'id x y' -> Point, or None when the line is not exactly those three fields."""
    parts = line.split()
    if len(parts) != 3:
        return None
    try:
        nid = int(parts[0])
        x = float(parts[1])
        y = float(parts[2])
    except ValueError:
        return None
    if nid < 0 or not math.isfinite(x) or not math.isfinite(y):
        return None
    return Point(id=nid, x=x, y=y)

def parse_tsp_lines(lines) -> TspInstance:
    instance = TspInstance()
    it = iter(lines)

    for line in it:
        if config.NODE_COORD_MARKER in line:
            break
        kv = parse_header_line(line)
        if kv:
            instance.header[kv[0]] = kv[1]
    else:
        logger.warning("No %s marker found; point collection is empty", config.NODE_COORD_MARKER)
        return instance

    for line in it:
        if line.strip() == config.EOF_MARKER:
            break
        p = parse_node_line(line)
        if p is None:
            break
        instance.points.append(p)

    dim = instance.dimension
    if dim is not None and dim != len(instance.points):
        logger.warning("DIMENSION is %d but %d points were read", dim, len(instance.points))
    return instance

def load_tsp_instance(filename: str) -> TspInstance:
    try:
        with open(filename, 'r', encoding='utf-8', errors='replace') as f:
            instance = parse_tsp_lines(f)
    except OSError as e:
        raise FileAccessError(filename, e.strerror or str(e)) from e
    logger.info("Loaded %d points from %s", len(instance.points), filename)
    return instance

def read_tsp_points(filename: str) -> List[Point]:
    """Points of a .tsp file in file order. Raises FileAccessError if it cannot be opened."""
    return load_tsp_instance(filename).points
