import math

import numpy as np
import pytest

from remap_maps.geometry import Point2
from remap_maps.projections import (
    MODE_LABELS,
    PROJECTIONS,
    evaluate_equirectangular,
    evaluate_front,
)

SRC = Point2(400.0, 300.0)
CORNERS = [(0.0, 0.0), (1.0, 0.0), (0.0, 1.0), (1.0, 1.0)]


def front_closed_form(x, y, w, h):
    az = (1.0 - x) * math.pi
    alt = y * math.pi
    sx = math.cos(az) * math.sin(alt)
    sy = math.sin(az) * math.sin(alt)
    sz = math.cos(alt)
    az2 = math.atan2(-sz, sx)
    alt2 = math.acos(sy) / math.pi
    return (alt2 * math.cos(az2) + 0.5) * w, (alt2 * math.sin(az2) + 0.5) * h


@pytest.mark.parametrize("evaluate", [evaluate_front, evaluate_equirectangular])
@pytest.mark.parametrize("corner", CORNERS)
def test_corners_finite_and_repeatable(evaluate, corner):
    first = evaluate(Point2(*corner), SRC)
    second = evaluate(Point2(*corner), SRC)
    assert np.isfinite(first.x) and np.isfinite(first.y)
    assert first.x == second.x
    assert first.y == second.y


@pytest.mark.parametrize(
    "pos", [(0.0, 0.0), (0.25, 0.25), (0.7, 0.1), (0.1, 0.9), (0.5, 0.5), (0.9, 0.6)]
)
def test_front_matches_closed_form(pos):
    out = evaluate_front(Point2(*pos), SRC)
    ex, ey = front_closed_form(pos[0], pos[1], SRC.x, SRC.y)
    assert out.x == pytest.approx(ex, abs=1e-9)
    assert out.y == pytest.approx(ey, abs=1e-9)


def test_front_hand_computed_points():
    src = Point2(400.0, 400.0)

    # altitude 0: every column samples the top centre of the source
    out = evaluate_front(Point2(0.0, 0.0), src)
    assert out.x == pytest.approx(200.0)
    assert out.y == pytest.approx(0.0, abs=1e-9)

    # azimuth pi, altitude pi/4 -> azimuth2 -3pi/4, altitude2 1/2
    out = evaluate_front(Point2(0.0, 0.25), src)
    expected = (0.5 * math.cos(-0.75 * math.pi) + 0.5) * 400.0
    assert out.x == pytest.approx(expected)
    assert out.y == pytest.approx(expected)
    assert out.x == pytest.approx(58.5786, abs=1e-4)

    # azimuth 3pi/4, altitude pi/4 -> unit point (-1/2, 1/2, sqrt(2)/2)
    out = evaluate_front(Point2(0.25, 0.25), src)
    assert out.x == pytest.approx((0.5 - (1 / 3) / math.sqrt(3)) * 400.0)
    assert out.y == pytest.approx((0.5 - (1 / 3) * math.sqrt(2 / 3)) * 400.0)


def test_front_accepts_arrays():
    xs = np.array([0.0, 0.25, 0.5, 0.75])
    ys = np.full(4, 0.25)
    out = evaluate_front(Point2(xs, ys), SRC)
    assert out.x.shape == (4,)
    for i, x in enumerate(xs):
        single = evaluate_front(Point2(float(x), 0.25), SRC)
        assert out.x[i] == pytest.approx(single.x)
        assert out.y[i] == pytest.approx(single.y)


def test_equirectangular_centre():
    # y = 0 puts phi at pi, where the stereographic radius is zero
    out = evaluate_equirectangular(Point2(0.5, 0.0), SRC)
    assert out.x == pytest.approx(200.0)
    assert out.y == pytest.approx(150.0)


def test_equirectangular_rim():
    # y = 1 puts phi at pi/2, radius 1; theta = pi points at the left edge
    out = evaluate_equirectangular(Point2(0.5, 1.0), SRC)
    assert out.x == pytest.approx(0.0, abs=1e-9)
    assert out.y == pytest.approx(150.0)


def test_equirectangular_theta_adj_rotates():
    # a quarter turn moves the left-edge sample to the bottom centre
    out = evaluate_equirectangular(Point2(0.5, 1.0), SRC, theta_adj=0.25)
    assert out.x == pytest.approx(200.0)
    assert out.y == pytest.approx(300.0)

    full_turn = evaluate_equirectangular(Point2(0.3, 0.6), SRC, theta_adj=1.0)
    none = evaluate_equirectangular(Point2(0.3, 0.6), SRC)
    assert full_turn.x == pytest.approx(none.x)
    assert full_turn.y == pytest.approx(none.y)


def test_equirectangular_singularity_is_not_clamped():
    # phi = 0 divides 0 by 0; the NaN is passed through unchanged
    out = evaluate_equirectangular(Point2(0.5, 2.0), SRC)
    assert np.isnan(out.x)
    assert np.isnan(out.y)


def test_results_are_not_clamped_to_source():
    # phi = pi/4 gives a stereographic radius of 1 + sqrt(2)
    out = evaluate_equirectangular(Point2(0.5, 1.5), SRC)
    assert out.x == pytest.approx((1.0 - (1.0 + math.sqrt(2.0))) / 2.0 * SRC.x)
    assert out.x < 0.0


def test_registry():
    assert PROJECTIONS["front"] is evaluate_front
    assert PROJECTIONS["equirectangular"] is evaluate_equirectangular
    assert set(MODE_LABELS) == set(PROJECTIONS)
