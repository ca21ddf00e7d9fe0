# run_tour.py
"""
Run example:
python -m run_tour --count 8
Or:
python -m run_tour --point "48.8566,2.3522" --point "Lyon, France" --point "Marseille"
"""

import argparse
import sys
from pathlib import Path

import config
from calcDist import tour_distance
from fetch_locations import LocationProviderError, fetch_random_locations, parse_location_input
from NearestNeighbor import solve_nearest_neighbor
from visualize_map import plot_tour_simple, save_tour_map


def load_points(args):
    if args.point:
        print(f"Resolving {len(args.point)} manual location(s)...")
        return [parse_location_input(text) for text in args.point]
    print(f"Fetching {args.count} random location(s)...")
    return fetch_random_locations(args.count)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Build a nearest-neighbor tour over a set of locations and save it as a map',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Random locations from randomuser.me
  python -m run_tour --count 8

  # Coordinates and place names
  python -m run_tour --point "48.8566,2.3522" --point "Lyon, France"
        """
    )
    parser.add_argument('--count', type=int, default=config.DEFAULT_LOCATION_COUNT,
                        help='Number of random locations to fetch')
    parser.add_argument('--point', action='append', default=None,
                        help='Location as "lat,lon" or a place name (repeatable); skips the random fetch')
    parser.add_argument('--output', type=str, default=None, help='HTML map file')
    parser.add_argument('--save_png', type=str, default=None)
    args = parser.parse_args(argv)

    config.configure_logging()

    print("=" * 60)
    print("Nearest Neighbor Tour")
    print("=" * 60)

    try:
        points = load_points(args)
        tour = solve_nearest_neighbor(points)
    except (LocationProviderError, ValueError) as e:
        # EmptyInputError and InvalidCoordinateError are ValueErrors
        print(f"✗ {e}")
        sys.exit(1)

    print(f"\n[TOUR]")
    for order, p in enumerate(tour, start=1):
        print(f"  {order:>3}. {p.name} ({p.lat:.4f}, {p.lon:.4f})")
    print(f"  Stops: {len(points)}")
    print(f"  Planar length: {tour_distance(tour):.4f}°")

    print(f"\n[VISUALIZATION]")
    map_path = save_tour_map(tour, args.output)
    print(f"Map URL: {Path(map_path).as_uri()}")
    if args.save_png:
        plot_tour_simple(tour, filepath=args.save_png)
        print(f"✓ Saved visualization to: {args.save_png}")

    print("\n" + "=" * 60)
    print("Done!")
    print("=" * 60)


if __name__ == "__main__":
    main()
