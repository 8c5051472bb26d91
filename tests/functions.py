from pytest import approx

from geoframes import ECEFCoordinate, GeodeticCoordinate, Quaternion


def assert_ecef_equal(c1: ECEFCoordinate, c2: ECEFCoordinate, abs_tol=1e-6):
    """
    Asserts that two ECEF coordinates are equal within an absolute tolerance,
    in meters.
    """
    try:
        assert c1.x == approx(c2.x, abs=abs_tol)
        assert c1.y == approx(c2.y, abs=abs_tol)
        assert c1.z == approx(c2.z, abs=abs_tol)
    except AssertionError as e:
        print(c1)
        print(c2)
        raise e


def assert_geodetic_equal(
    c1: GeodeticCoordinate,
    c2: GeodeticCoordinate,
    deg_tol=1e-5,
    height_tol=1e-2
):
    """
    Asserts that two geodetic coordinates are equal within tolerance.

    Args:
        c1: The first GeodeticCoordinate
        c2: The second GeodeticCoordinate
        deg_tol: Tolerance for latitude/longitude, in degrees
        height_tol: Tolerance for height, in meters
    """
    try:
        assert c1.lat == approx(c2.lat, abs=deg_tol)
        assert c1.lon == approx(c2.lon, abs=deg_tol)
        assert c1.height == approx(c2.height, abs=height_tol)
    except AssertionError as e:
        print(c1)
        print(c2)
        raise e


def assert_quaternions_equal(q1: Quaternion, q2: Quaternion, abs_tol=1e-9):
    assert q1.to_float() == approx(q2.to_float(), abs=abs_tol)
