import os
from typing import Dict

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

DATA_DIR = os.getenv('TSP_DATA_DIR', os.path.join(os.getcwd(), 'data'))


def _env_flag(name: str, default: str = 'False') -> bool:
    return os.getenv(name, default).lower() in ('true', '1', 'yes')


# Tour building

# Truncate edge weights to int (matches the legacy EDGE/WEIGHT output)
INTEGRAL_WEIGHTS = _env_flag('TSP_INTEGRAL_WEIGHTS')

# Raise InvalidStartIdentifier instead of falling back to the first point
STRICT_START = _env_flag('TSP_STRICT_START', 'True')

# "order": earlier point wins exact ties, "id": smallest identifier wins
TIE_BREAK = os.getenv('TSP_TIE_BREAK', 'order')
TIE_BREAK_CHOICES = ('order', 'id')

# Workers for the best-start search across start points
DEFAULT_WORKERS = int(os.getenv('TSP_WORKERS', '4'))


# Input format

NODE_COORD_MARKER = "NODE_COORD_SECTION"
EOF_MARKER = "EOF"


# Output

WEIGHT_PRECISION = int(os.getenv('TSP_WEIGHT_PRECISION', '2'))

VISUALIZATION_SETTINGS = {
    'dpi': 150,
    'figsize': (8, 8),
    'node_size': 25,
    'node_color': 'blue',
    'start_node_size': 60,
    'start_node_color': 'green',
    'route_edge_color': 'red',
    'route_edge_width': 2.0,
    'with_labels': False,
}

DEFAULT_TOUR_FILENAME = "nn_tour.png"


STREAMLIT_CONFIG = {
    'page_title': "NN Tour",
    'page_icon': "🧭",
    'layout': "wide",
}


def get_output_path(filename: str) -> str:
    """
    Get full path for output file in data directory.

    Args:
        filename: Name of the output file

    Returns:
        Full path to the output file
    """
    os.makedirs(DATA_DIR, exist_ok=True)
    return os.path.join(DATA_DIR, filename)


def get_sample_paths() -> Dict[str, str]:
    """Bundled .tsp instances shipped under data/, keyed by file name."""
    if not os.path.isdir(DATA_DIR):
        return {}
    return {
        name: os.path.join(DATA_DIR, name)
        for name in sorted(os.listdir(DATA_DIR))
        if name.endswith('.tsp')
    }


# Enable debug mode (can be overridden by environment variable)
DEBUG = _env_flag('DEBUG')

# Verbose logging
VERBOSE = _env_flag('VERBOSE')

LOG_FORMAT = '%(asctime)s - %(pathname)s[line:%(lineno)d] - %(levelname)s: %(message)s'


__version__ = "1.0.0"
__project__ = "Nearest-Neighbor TSP Tour Builder"
