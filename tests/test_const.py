import math

from pytest import approx

from geoframes._const import *


def test_wgs84_derived_values():
    assert WGS84_A == 6378137.0
    assert WGS84_F == 1 / 298.257223563
    assert WGS84_B == approx(6356752.314245, abs=1e-6)
    assert WGS84_E2 == approx(0.00669437999014, rel=1e-10)
    assert WGS84_E2 == approx(1 - (WGS84_B / WGS84_A) ** 2, rel=1e-12)
    assert WGS84_EP2 == approx(0.00673949674228, rel=1e-10)
    assert WGS84_EP2 == approx((WGS84_A / WGS84_B) ** 2 - 1, rel=1e-10)


def test_angle_factors():
    assert 180 * DEG_TO_RAD == approx(math.pi)
    assert math.pi * RAD_TO_DEG == approx(180.)
    assert DEG_TO_RAD * RAD_TO_DEG == approx(1.)
