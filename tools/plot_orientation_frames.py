"""Plot the device frame for one orientation reading next to its reconstruction.

The left panel shows the device axes rotated by the matrix built from the
raw alpha/beta/gamma reading, the right panel the axes rotated by the
matrix rebuilt from the extracted heading, elevation and roll. Matching
panels mean the extraction kept the full orientation.

Usage:
    python tools/plot_orientation_frames.py --alpha 30 --beta 20 --gamma 10
    python tools/plot_orientation_frames.py --alpha 30 --beta 20 --gamma 10 --output plots
    python tools/plot_orientation_frames.py --alpha 30 --beta 20 --gamma 10 --show
"""

import argparse
import logging
import sys
from typing import List, Optional

import matplotlib.pyplot as plt

from tiltcompass.eval import SAVE_FORMATS, figure_name, plot_orientation_comparison, save_figure
from tiltcompass.heading import OrientationSample, compute_orientation, format_reading


logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point with CLI."""
    parser = argparse.ArgumentParser(
        description="Side-by-side 3D view of sensor and reconstructed device frames",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Save PNG into the current directory
  python %(prog)s --alpha 30 --beta 20 --gamma 10

  # Save SVG and PDF into plots/
  python %(prog)s --alpha 30 --beta 20 --gamma 10 --output plots --format svg pdf

  # Display interactively
  python %(prog)s --alpha 30 --beta 20 --gamma 10 --show
        """
    )

    parser.add_argument('--alpha', type=float, required=True, help='Alpha in degrees')
    parser.add_argument('--beta', type=float, required=True, help='Beta in degrees')
    parser.add_argument('--gamma', type=float, required=True, help='Gamma in degrees')

    parser.add_argument(
        '--output',
        type=str,
        default='.',
        help='Output directory for plots (default: current directory)'
    )

    parser.add_argument(
        '--name',
        type=str,
        default=None,
        help='Base filename (default: frames_a<alpha>_b<beta>_g<gamma>)'
    )

    parser.add_argument(
        '--format',
        type=str,
        nargs='+',
        choices=SAVE_FORMATS,
        default=['png'],
        help='Output format(s) (default: png)'
    )

    parser.add_argument(
        '--show',
        action='store_true',
        help='Display plot interactively instead of saving'
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    reading = compute_orientation(OrientationSample(args.alpha, args.beta, args.gamma))
    logger.info(format_reading(reading))
    if reading.is_degenerate:
        logger.warning("Reading is in gimbal lock; reconstructed frame left empty")

    fig = plot_orientation_comparison(reading)

    if args.show:
        plt.show()
    else:
        name = args.name or figure_name(reading)
        for path in save_figure(fig, args.output, name, tuple(args.format)):
            logger.info("Saved %s", path)

    plt.close(fig)
    return 0


if __name__ == "__main__":
    sys.exit(main())
