"""
MagViz entry point

Loads raw magnetometer samples, solves the ellipsoid-to-sphere mapping and
prints the bias vector, correction matrix and radius statistics.

Usage:
    magviz samples.csv [--filter 2.0] [--iterations 1] [--output corrected.csv]

Example:
    magviz mag_log.csv --filter 2.0 --output corrected.csv
    magviz --demo
"""

import argparse
import dataclasses
import logging
import sys

import numpy as np

from . import __version__
from .calibration import (
    SolverConfig,
    EmptyInputError,
    DegenerateFitError,
    NumericalInstabilityError,
    calibrate,
)
from .data.loader import SampleFormatError, load_samples, save_samples
from .data.synthetic import ellipsoid_surface, random_rotation
from .tools import configure_logging, log_exceptions
from .utils.constants import (
    DEFAULT_DELIMITER,
    DEFAULT_MAX_CONDITION_NUMBER,
    FILTER_SPACES,
    FILTER_SPACE_RAW,
)
from .visualization.transforms import normalize_to_radius

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FIT_FAILED = 1
EXIT_BAD_INPUT = 2


def build_parser():
    parser = argparse.ArgumentParser(
        prog="magviz",
        description="Magnetometer hard-iron / soft-iron calibration",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "samples",
        nargs="?",
        help="Sample file, one 'x;y;z' reading per line"
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Calibrate a synthetic distorted cloud instead of a file"
    )
    parser.add_argument(
        "--delimiter",
        default=DEFAULT_DELIMITER,
        help=f"Field separator (default: {DEFAULT_DELIMITER!r})"
    )
    parser.add_argument(
        "--filter",
        type=float,
        dest="factor",
        help="Drop samples whose radius deviates more than FACTOR standard deviations"
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=1,
        help="Filter / re-solve passes (default: 1)"
    )
    parser.add_argument(
        "--filter-space",
        choices=FILTER_SPACES,
        default=FILTER_SPACE_RAW,
        help="Measure deviation on raw or corrected radii (default: raw)"
    )
    parser.add_argument(
        "--max-condition",
        type=float,
        default=DEFAULT_MAX_CONDITION_NUMBER,
        help=f"Largest accepted least-squares condition number (default: {DEFAULT_MAX_CONDITION_NUMBER:g})"
    )
    parser.add_argument(
        "--allow-ill-conditioned",
        action="store_true",
        help="Re-solve without the condition check instead of failing"
    )
    parser.add_argument(
        "--output",
        help="Write corrected samples to this file"
    )
    parser.add_argument(
        "--normalize-radius",
        type=float,
        help="Scale written samples so the farthest lies at this radius"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Debug logging"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    return parser


def demo_samples():
    """Biased, rotated ellipsoid with a little noise"""
    rng = np.random.default_rng(42)
    return ellipsoid_surface(
        radii=(48.0, 52.0, 45.0),
        bias=(12.5, -7.0, 30.0),
        rotation=random_rotation(rng),
        count=400,
        radial_noise=0.01,
        rng=rng,
    )


def run_calibration(samples, args, config):
    """calibrate() with the --allow-ill-conditioned fallback"""
    try:
        return calibrate(samples, args.factor, args.iterations, config, args.filter_space)
    except NumericalInstabilityError as e:
        # A singular system fails whatever the threshold
        if not args.allow_ill_conditioned or e.threshold is None:
            raise
        logger.warning("%s; continuing with reduced confidence", e)
        config = dataclasses.replace(config, max_condition_number=None)
        return calibrate(samples, args.factor, args.iterations, config, args.filter_space)


def print_report(report, total):
    result = report.result
    print(f"Points:            {len(report.samples)} of {total} "
          f"(discarded {report.discarded})")
    print("Bias:              [{:.6f}, {:.6f}, {:.6f}]".format(*result.bias))
    print("Correction matrix:")
    for row in result.matrix:
        print("    [{:12.8f} {:12.8f} {:12.8f}]".format(*row))
    print(f"Raw radius:        max {report.raw_statistics.max:.6f}, "
          f"mean {report.raw_statistics.mean:.6f}")
    print(f"Corrected radius:  mean {report.corrected_statistics.mean:.6f}, "
          f"stddev {report.corrected_statistics.standard_deviation:.6f}")


@log_exceptions
def run(args):
    if args.demo:
        samples = demo_samples()
    else:
        samples = load_samples(args.samples, args.delimiter)

    config = SolverConfig(max_condition_number=args.max_condition)
    report = run_calibration(samples, args, config)
    print_report(report, len(samples))

    if args.output:
        corrected = report.corrected
        if args.normalize_radius is not None:
            corrected = normalize_to_radius(corrected, args.normalize_radius)
        save_samples(args.output, corrected, args.delimiter,
                     header="corrected magnetometer samples (x;y;z)")
        print(f"Corrected samples written to {args.output}")

    return report


def main(argv=None):
    """Main entry point for the magviz command"""
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.demo and args.samples is None:
        parser.error("a sample file is required unless --demo is given")

    configure_logging(args.verbose)
    print(f"MagViz v{__version__}")

    try:
        run(args)
    except (DegenerateFitError, NumericalInstabilityError):
        return EXIT_FIT_FAILED
    except (EmptyInputError, SampleFormatError, OSError, ValueError):
        return EXIT_BAD_INPUT
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
