"""Projection evaluators: normalized output position -> source pixel position.

Every evaluator takes a normalized output position (x, y in [0, 1]) and the
source extent (width, height) and returns the real-valued source position to
sample. Results are neither rounded nor clamped; positions that project off
the source image come back outside [0, width) x [0, height).

The math is written with numpy ufuncs so the same evaluator handles a single
pixel (floats) or a whole row of pixels (arrays) in one call.

References:
  - https://trac.ffmpeg.org/wiki/RemapFilter
  - https://en.wikipedia.org/wiki/Stereographic_projection
  - http://paulbourke.net/geometry/transformationprojection/
"""

import numpy as np

from .geometry import Point2, Point3, Polar2, Polar3


def evaluate_front(out_pos, src_size):
    """Front lens projection of a full-sphere source image.

    The output position is taken to spherical angles in one coordinate
    system, placed on the unit sphere, re-read as angles in the source's own
    spherical parameterization, and finally projected onto the source disc.
    """
    # Half a sphere across each output axis
    azimuth = (1.0 - out_pos.x) * np.pi
    altitude = out_pos.y * np.pi

    sphere = Point3(
        np.cos(azimuth) * np.sin(altitude),
        np.sin(azimuth) * np.sin(altitude),
        np.cos(altitude),
    )

    azimuth2 = np.arctan2(-sphere.z, sphere.x)
    altitude2_over_pi = np.arccos(np.clip(sphere.y, -1.0, 1.0)) / np.pi

    return Point2(
        (altitude2_over_pi * np.cos(azimuth2) + 0.5) * src_size.x,
        (altitude2_over_pi * np.sin(azimuth2) + 0.5) * src_size.y,
    )


def evaluate_equirectangular(out_pos, src_size, theta_adj=0.0):
    """Reverse equirectangular projection followed by a stereographic one.

    1. Mirror the output position into a cartesian plane.
    2. Reverse equirectangular: plane -> polar coordinates on the sphere.
       ``theta_adj`` rotates the azimuth by a fraction of a full turn.
    3. Stereographic projection: sphere -> polar coordinates on a plane.
    4. Polar -> cartesian, centred and stretched to the source size.

    The stereographic step divides by ``1 - cos(phi)``; at phi = 0 the
    result is NaN or infinite and is returned as-is. For y in [0, 1], phi
    stays within [pi/2, pi] and the singularity is never reached.
    """
    plane = Point2(1.0 - out_pos.x, 1.0 - out_pos.y)

    sphere = Polar3(
        1.0,
        (plane.x - theta_adj) * 2.0 * np.pi,
        plane.y * np.pi / 2.0 + np.pi / 2.0,
    )

    with np.errstate(divide="ignore", invalid="ignore"):
        flat = Polar2(
            np.sin(sphere.phi) / (1.0 - np.cos(sphere.phi)),
            sphere.theta,
        )

        return Point2(
            (flat.r * np.cos(flat.theta) + 1.0) / 2.0 * src_size.x,
            (flat.r * np.sin(flat.theta) + 1.0) / 2.0 * src_size.y,
        )


# Mode name -> evaluator. Only equirectangular takes the angular offset.
PROJECTIONS = {
    "front": evaluate_front,
    "equirectangular": evaluate_equirectangular,
}

MODE_LABELS = {
    "front": "Front proj",
    "equirectangular": "Equirectangular proj",
}
