"""CLI entry point for remap_maps.

Invoke as:  python scripts/remap_maps -x out_x.pgm -y out_y.pgm -h 400 -w 400 -r 400 -c 400
"""

# Bootstrap: when run as `python scripts/remap_maps` (directory path),
# re-execute through runpy so the package machinery resolves relative imports
# correctly and without DeprecationWarning.
if __name__ == "__main__" and not __package__:
    import os
    import runpy
    import sys

    _scripts_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    if _scripts_dir not in sys.path:
        sys.path.insert(0, _scripts_dir)
    runpy.run_module("remap_maps", run_name="__main__", alter_sys=True)
    raise SystemExit(0)  # unreachable, run_module already calls sys.exit()

import sys

from .config import ConfigurationError, parse_options
from .maps import generate_maps
from .pgm import PgmWriteError, check_dimensions, write_pgm_ascii
from .projections import MODE_LABELS


def main(argv=None):
    """Generate both coordinate maps and write them; return the exit status."""
    try:
        cfg = parse_options(argv)
    except ConfigurationError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        print("try --help for help", file=sys.stderr)
        return 1

    print(f"xmapfile: {cfg.xmap}")
    print(f"ymapfile: {cfg.ymap}")
    if cfg.verbose:
        print(f"Mode: {MODE_LABELS[cfg.mode]}")
        print(f"  Source size: {cfg.width}x{cfg.height}")
        print(f"  Target size: {cfg.cols}x{cfg.rows}")
        if cfg.mode == "equirectangular":
            print(f"  thetaAdj: {cfg.theta_adj}")

    try:
        check_dimensions(cfg.rows, cfg.cols, cfg.ymap)

        print("Generating maps")
        map_x, map_y = generate_maps(cfg)

        print("Writing files")
        write_pgm_ascii(cfg.ymap, map_y, cfg.rows, cfg.cols, cfg.ymap)
        write_pgm_ascii(cfg.xmap, map_x, cfg.rows, cfg.cols, cfg.xmap)
    except PgmWriteError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        print(f"Number of pixels written in file {exc.path}: {exc.written}", file=sys.stderr)
        return 1

    if cfg.diagram:
        from .diagram import save_diagram

        print("Saving diagram")
        save_diagram(map_x, map_y, cfg, cfg.diagram)

    return 0


if __name__ == "__main__":
    sys.exit(main())
