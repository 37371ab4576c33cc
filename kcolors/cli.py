"""
Command-line entry point.

Clusters the pixels of an image into k colors, paints one square per
cluster center down the left edge of the image and saves the result as
'<path>output.png'.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .clustering import ClusteringConfig, ColorClusterer, EmptyInputError
from .data_loader import load_points
from .render import draw_palette, format_palette, output_path, save_image

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='kcolors',
        description="Cluster image colors into k groups and paint the average colors",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  kcolors -p photo.png -k 5
  kcolors -p photo.png -k 8 --parallel --workers 4 --hex
        """
    )

    parser.add_argument('-p', '--path', required=True, help='Input image path')
    parser.add_argument('-k', type=int, required=True, help='Number of clusters')
    parser.add_argument(
        '--parallel',
        action='store_true',
        help='Run the assignment pass on a thread pool'
    )
    parser.add_argument('--workers', type=int, default=None, help='Worker threads (default: CPU count)')
    parser.add_argument(
        '--strategy',
        choices=['merge', 'lock'],
        default='merge',
        help='How parallel workers publish members (default: merge)'
    )
    parser.add_argument('--seed', type=int, default=None, help='Random seed for center sampling')
    parser.add_argument('-o', '--output', default=None, help="Output path (default: '<path>output.png')")
    parser.add_argument('--hex', action='store_true', help='Print one hex color and count per cluster')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    try:
        config = ClusteringConfig(
            n_clusters=args.k,
            mode='parallel' if args.parallel else 'sequential',
            n_workers=args.workers,
            strategy=args.strategy,
            random_state=args.seed
        )
        image, points = load_points(args.path)
        clusterer = ColorClusterer(config).fit(points)
    except EmptyInputError:
        logger.error("%s has no pixels to cluster", args.path)
        return 1
    except (ValueError, OSError) as e:
        logger.error("%s", e)
        return 1

    painted = draw_palette(image, clusterer.centers)
    destination = args.output or output_path(args.path)
    try:
        save_image(painted, destination)
    except (ValueError, OSError) as e:
        logger.error("Could not save %s: %s", destination, e)
        return 1

    if args.hex:
        for line in format_palette(clusterer.partition):
            print(line)

    return 0


if __name__ == '__main__':
    sys.exit(main())
