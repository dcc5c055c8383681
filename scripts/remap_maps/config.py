"""Command-line options -> immutable Configuration record."""

import argparse
from typing import NamedTuple, Optional

from .projections import PROJECTIONS

USAGE = (
    "%(prog)s -x|--xmap FILE_x.pgm -y|--ymap FILE_y.pgm "
    "-h|--height 300 -w|--width 400 -r|--rows 600 -c|--cols 800 "
    "[-m|--mode front|equirectangular] [-t|--thetaAdj 0.0] "
    "[-s|--source IMAGE] [-d|--diagram PNG] [--verbose|--brief]"
)


class ConfigurationError(ValueError):
    """Invalid command line; raised before any map is generated."""


class Configuration(NamedTuple):
    xmap: str
    ymap: str
    width: int  # source
    height: int  # source
    rows: int  # target
    cols: int  # target
    mode: str = "front"
    theta_adj: float = 0.0
    verbose: bool = False
    diagram: Optional[str] = None


class _OptionParser(argparse.ArgumentParser):
    """ArgumentParser that raises ConfigurationError instead of exiting."""

    def error(self, message):
        raise ConfigurationError(message)


def build_parser(prog=None):
    # -h is the source height, so help lives on -q/--help
    parser = _OptionParser(
        prog=prog,
        usage=USAGE,
        description=(
            "Generate x/y coordinate maps for ffmpeg's remap filter. "
            "h,w is the source size, r,c is the target size."
        ),
        add_help=False,
    )
    parser.add_argument("-q", "--help", action="help", help="Show this help and exit")
    parser.add_argument("-x", "--xmap", action="append", metavar="FILE", help="x-map output (PGM)")
    parser.add_argument("-y", "--ymap", action="append", metavar="FILE", help="y-map output (PGM)")
    parser.add_argument("-h", "--height", action="append", type=int, help="Source height in pixels")
    parser.add_argument("-w", "--width", action="append", type=int, help="Source width in pixels")
    parser.add_argument("-r", "--rows", action="append", type=int, help="Target rows")
    parser.add_argument("-c", "--cols", action="append", type=int, help="Target cols")
    parser.add_argument(
        "-m",
        "--mode",
        choices=sorted(PROJECTIONS),
        default="front",
        help="Projection mode (default: front)",
    )
    parser.add_argument(
        "-t",
        "--thetaAdj",
        dest="theta_adj",
        type=float,
        default=0.0,
        help="Azimuth offset for equirectangular mode, as a fraction of a turn (default: 0)",
    )
    parser.add_argument(
        "-s",
        "--source",
        metavar="IMAGE",
        help="Read the source width/height from this image instead of -w/-h",
    )
    parser.add_argument(
        "-d", "--diagram", metavar="PNG", help="Also save a sampling diagram"
    )
    parser.add_argument(
        "--verbose", dest="verbose", action="store_const", const=True, default=False
    )
    parser.add_argument("--brief", dest="verbose", action="store_const", const=False)
    return parser


def _once(values, label):
    """Return the single value given for a mandatory option."""
    if values is None or len(values) != 1:
        raise ConfigurationError(
            f"{label} are mandatory arguments and have to appear only once!"
        )
    return values[0]


def _positive(value, name):
    if value <= 0:
        raise ConfigurationError(f"{name} must be a positive integer, got: {value}")
    return value


def parse_options(argv=None, prog=None):
    """Parse ``argv`` into a Configuration.

    Raises ConfigurationError for missing or repeated mandatory options,
    unknown modes, trailing arguments and non-positive sizes.
    """
    args = build_parser(prog).parse_args(argv)

    xmap = _once(args.xmap, "Xmap and ymap")
    ymap = _once(args.ymap, "Xmap and ymap")
    rows = _once(args.rows, "Target Rows and Cols")
    cols = _once(args.cols, "Target Rows and Cols")

    if args.source is not None:
        if args.width is not None or args.height is not None:
            raise ConfigurationError("--source cannot be combined with --width/--height")
        from .probe import source_size

        width, height = source_size(args.source)
    else:
        width = _once(args.width, "Source Height and Width")
        height = _once(args.height, "Source Height and Width")

    return Configuration(
        xmap=xmap,
        ymap=ymap,
        width=_positive(width, "Source width"),
        height=_positive(height, "Source height"),
        rows=_positive(rows, "Target rows"),
        cols=_positive(cols, "Target cols"),
        mode=args.mode,
        theta_adj=args.theta_adj,
        verbose=args.verbose,
        diagram=args.diagram,
    )
