import matplotlib
matplotlib.use("Agg")

import pytest

from point import Point

@pytest.fixture
def triangle():
    # A(0,0) B(0,3) C(4,0)
    return [Point(1, 0.0, 0.0), Point(2, 0.0, 3.0), Point(3, 4.0, 0.0)]

@pytest.fixture
def tsp_file(tmp_path):
    def write(text: str):
        path = tmp_path / "instance.tsp"
        path.write_text(text)
        return str(path)
    return write
