"""Print compass heading, elevation and roll for orientation readings.

Reads one sample from the command line or a batch of samples from a text
file (three columns: alpha, beta, gamma in degrees) and prints one
formatted line per sample. Readings in gimbal lock are reported as
"tilt device" instead of a heading.

Usage:
    python tools/orientation_report.py --alpha 30 --beta 20 --gamma 10
    python tools/orientation_report.py --samples readings.csv
    python tools/orientation_report.py --samples readings.txt --raw-heading -v
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import numpy as np

from tiltcompass.heading import (
    HeadingMethod,
    OrientationConfig,
    OrientationSample,
    compute_orientation,
    format_reading,
)


logger = logging.getLogger(__name__)


METHODS = {
    'linear': HeadingMethod.LINEAR_ALGEBRA,
    'worked': HeadingMethod.WORKED_EXAMPLE,
}


def load_samples(path: Path) -> List[OrientationSample]:
    """Load alpha/beta/gamma rows from a text file.

    Comma-separated when the file ends in ``.csv``, whitespace-separated
    otherwise. Lines starting with ``#`` are ignored; a non-numeric first
    line is treated as a header.

    Args:
        path: File with three numeric columns.

    Returns:
        One OrientationSample per row.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the rows do not have exactly three numeric columns.
    """
    if not path.exists():
        raise FileNotFoundError(f"Sample file not found: {path}")

    delimiter = ',' if path.suffix.lower() == '.csv' else None

    with path.open() as f:
        first_line = f.readline()
    skiprows = 0
    fields = first_line.replace(',', ' ').split()
    if fields and not fields[0].startswith('#'):
        try:
            [float(field) for field in fields]
        except ValueError:
            skiprows = 1

    data = np.loadtxt(path, delimiter=delimiter, comments='#', skiprows=skiprows, ndmin=2)
    if data.size == 0:
        return []
    if data.shape[1] != 3:
        raise ValueError(
            f"Expected 3 columns (alpha, beta, gamma) in {path}, got {data.shape[1]}"
        )

    return [OrientationSample(float(a), float(b), float(g)) for a, b, g in data]


def report(samples: List[OrientationSample], config: OrientationConfig) -> List[str]:
    """Format one line per sample, skipping samples with missing axes."""
    lines = []
    for index, sample in enumerate(samples):
        if not sample.is_complete:
            logger.warning("Skipping sample %d with unavailable axes: %s", index, sample)
            continue

        reading = compute_orientation(sample, config)
        line = format_reading(reading, decimals=config.decimals)
        if not reading.is_degenerate:
            line += f" round-trip={reading.round_trip_error:.2e}"
        lines.append(line)

    skipped = len(samples) - len(lines)
    logger.info("Processed %d sample(s), %d skipped", len(lines), skipped)
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point with CLI."""
    parser = argparse.ArgumentParser(
        description="Compass heading, elevation and roll from device orientation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Single reading
  python %(prog)s --alpha 30 --beta 20 --gamma 10

  # Batch from file, heading in [0, 360)
  python %(prog)s --samples readings.csv --raw-heading

  # Closed-form heading path, verbose logging
  python %(prog)s --alpha 30 --beta 20 --gamma 10 --method worked -v
        """
    )

    parser.add_argument('--alpha', type=float, default=None, help='Alpha in degrees')
    parser.add_argument('--beta', type=float, default=None, help='Beta in degrees')
    parser.add_argument('--gamma', type=float, default=None, help='Gamma in degrees')

    parser.add_argument(
        '--samples',
        type=Path,
        default=None,
        help='Text/CSV file with alpha, beta, gamma columns'
    )

    parser.add_argument(
        '--raw-heading',
        action='store_true',
        help='Show heading in [0, 360) instead of (-180, 180]'
    )

    parser.add_argument(
        '--method',
        choices=sorted(METHODS),
        default='linear',
        help='Heading computation (default: linear)'
    )

    parser.add_argument(
        '--decimals',
        type=int,
        default=1,
        help='Decimal places in output (default: 1)'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.decimals < 0:
        parser.error("--decimals must be non-negative")

    config = OrientationConfig(
        normalize_heading=not args.raw_heading,
        method=METHODS[args.method],
        decimals=args.decimals,
    )

    if args.samples is not None:
        try:
            samples = load_samples(args.samples)
        except (OSError, ValueError) as e:
            logger.error("Could not read samples: %s", e)
            return 1
    else:
        if args.alpha is None and args.beta is None and args.gamma is None:
            parser.error("give --alpha/--beta/--gamma or --samples")
        samples = [OrientationSample(args.alpha, args.beta, args.gamma)]

    logger.debug(
        "Heading range: %s, method: %s",
        "(-180, 180]" if config.normalize_heading else "[0, 360)",
        config.method.value,
    )

    if not samples:
        logger.warning("No samples to process")

    for line in report(samples, config):
        print(line)

    return 0


if __name__ == "__main__":
    sys.exit(main())
