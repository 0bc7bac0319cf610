# run_tour.py
"""
Run example:
python run_tour.py --file data/sample.tsp --start 1
Or, trying every start point:
python run_tour.py --file data/sample.tsp --best-start --workers 8
"""

import argparse
import logging
import os
import sys

import config
from NearestNeighbor import best_start_tour, build_nearest_neighbor_tour
from load_tsp import load_tsp_instance
from render_tour import display_tour, format_weight
from tsp_errors import TourError

def setup_logging():
    if config.DEBUG:
        level = logging.DEBUG
    elif config.VERBOSE:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(format=config.LOG_FORMAT, level=level)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Build a nearest-neighbor TSP tour from a .tsp file',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Start from city 1
  python run_tour.py --file data/sample.tsp --start 1

  # Legacy output: integer weights, unknown start falls back to the first city
  python run_tour.py --file data/sample.tsp --start 99 --integral --lenient-start

  # Try every city as the start and keep the shortest tour
  python run_tour.py --file data/sample.tsp --best-start --save_png tour.png
        """
    )

    parser.add_argument('--file', type=str, required=True,
                        help='Path to a .tsp file with a NODE_COORD_SECTION')
    parser.add_argument('--start', type=int, default=None,
                        help='Start city id (default: first city in the file)')
    parser.add_argument('--integral', action=argparse.BooleanOptionalAction, default=config.INTEGRAL_WEIGHTS,
                        help='Truncate edge weights to integers')
    parser.add_argument('--lenient-start', action=argparse.BooleanOptionalAction, default=not config.STRICT_START,
                        help='Fall back to the first city if --start is not found')
    parser.add_argument('--tie-break', choices=config.TIE_BREAK_CHOICES, default=config.TIE_BREAK)
    parser.add_argument('--best-start', action='store_true',
                        help='Build a tour from every city and keep the shortest')
    parser.add_argument('--workers', type=int, default=config.DEFAULT_WORKERS)
    parser.add_argument('--save_png', type=str, default=None,
                        help='Save a plot of the tour to this file')
    return parser

def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging()

    print("=" * 60)
    print("Nearest-Neighbor Tour")
    print("=" * 60)

    options = dict(integral=args.integral, strict=not args.lenient_start, tie_break=args.tie_break)
    try:
        instance = load_tsp_instance(args.file)
        print(f"✓ Loaded {len(instance.points)} cities from {os.path.basename(args.file)}"
              + (f" ({instance.name})" if instance.name else ""))

        if args.best_start:
            print(f"\n[SEARCHING ALL STARTS] workers={args.workers}")
            tour = best_start_tour(instance.points, workers=args.workers, **options)
        else:
            start_id = args.start
            if start_id is None and instance.points:
                start_id = instance.points[0].id
            print(f"\n[BUILDING TOUR] start={start_id}")
            tour = build_nearest_neighbor_tour(instance.points, start_id, **options)
    except TourError as e:
        print(f"✗ {e}")
        sys.exit(1)

    print(f"✓ Tour found from city {tour.start.id}: {len(tour.path) - 1} edges, "
          f"total {format_weight(tour.total_distance)}\n")
    display_tour(tour)

    if args.save_png:
        from visualize_tour import plot_tour
        print(f"\n[VISUALIZATION]")
        plot_tour(tour, filepath=args.save_png)
        print(f"✓ Saved visualization to: {args.save_png}")

    print("\n" + "=" * 60)
    print("Done!")
    print("=" * 60)
    return tour

if __name__ == "__main__":
    main()
