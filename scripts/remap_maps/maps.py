"""Build the x/y coordinate maps for a Configuration."""

import numpy as np

from .config import ConfigurationError
from .geometry import Point2
from .projections import PROJECTIONS

# Stored for cells whose projection is not finite (off-image for any source)
NON_FINITE = -1


def round_coordinates(values):
    """Round to the nearest integer, ties away from zero (C ``round()``).

    Non-finite inputs become NON_FINITE. Returns an int64 array.
    """
    values = np.asarray(values, dtype=np.float64)
    finite = np.isfinite(values)
    values = np.where(finite, values, 0.0)
    whole = np.trunc(values)
    # Compare the fraction instead of adding 0.5, which can round up early
    rounded = whole + np.sign(values) * (np.abs(values - whole) >= 0.5)
    out = rounded.astype(np.int64)
    out[~finite] = NON_FINITE
    return out


def evaluator_for(config):
    """Return ``f(out_pos, src_size) -> Point2`` for the configured mode."""
    try:
        evaluate = PROJECTIONS[config.mode]
    except KeyError:
        raise ConfigurationError(f"Mode {config.mode} not implemented") from None

    if config.mode == "equirectangular":
        return lambda out_pos, src_size: evaluate(out_pos, src_size, config.theta_adj)
    return evaluate


def generate_maps(config, rows=None):
    """Return ``(map_x, map_y)``, each an int64 array of shape (rows, cols).

    ``rows`` is the order in which output rows are filled (default: top to
    bottom). It must name every row exactly once. Rows are independent, so
    the order has no effect on the result.
    """
    evaluate = evaluator_for(config)

    order = list(range(config.rows)) if rows is None else list(rows)
    if sorted(order) != list(range(config.rows)):
        raise ValueError(f"rows must cover 0..{config.rows - 1} exactly once")

    src_size = Point2(float(config.width), float(config.height))
    xs = np.arange(config.cols, dtype=np.float64) / config.cols

    map_x = np.empty((config.rows, config.cols), dtype=np.int64)
    map_y = np.empty((config.rows, config.cols), dtype=np.int64)

    non_finite = 0
    for row in order:
        out_pos = Point2(xs, np.full(config.cols, row / config.rows))
        src = evaluate(out_pos, src_size)
        non_finite += int(np.count_nonzero(~(np.isfinite(src.x) & np.isfinite(src.y))))
        map_x[row] = round_coordinates(src.x)
        map_y[row] = round_coordinates(src.y)

    if config.verbose:
        print(f"Non-finite cells (stored as {NON_FINITE}): {non_finite}")

    return map_x, map_y
