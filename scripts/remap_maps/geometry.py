"""Named intermediate values for the projection math.

Fields may be Python floats or numpy arrays of matching shape.
"""

from typing import Any, NamedTuple


class Point2(NamedTuple):
    x: Any
    y: Any


class Point3(NamedTuple):
    x: Any
    y: Any
    z: Any


class Polar2(NamedTuple):
    r: Any
    theta: Any


class Polar3(NamedTuple):
    r: Any
    theta: Any
    phi: Any
