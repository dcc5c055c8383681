"""remap_maps: generate coordinate-remap images for ffmpeg's remap filter.

Writes two plain-text PGM files (x-map and y-map). For every output pixel
they hold the source-pixel coordinate to sample, under either a front lens
projection or an equirectangular-to-stereographic projection.

Usage:
    python -m remap_maps -x out_x.pgm -y out_y.pgm -h 400 -w 400 -r 400 -c 400
    python -m remap_maps -x fly360_x.pgm -y fly360_y.pgm -h 1504 -w 1504 \\
        -r 752 -c 1504 -m equirectangular --verbose
    ffmpeg -i input.jpg -i out_x.pgm -i out_y.pgm -lavfi remap out.png

Requires: pip install numpy Pillow matplotlib
"""

__version__ = "0.1.0"
