import math

import numpy as np
import pytest

from geoframes import ECEFCoordinate, GeodeticCoordinate, Quaternion
from tests.functions import assert_ecef_equal


def test_geodetic_init():
    c = GeodeticCoordinate(35, '139.5')
    assert c.lat == 35.
    assert c.lon == 139.5
    assert c.height == 0.
    assert c.to_float() == (35., 139.5, 0.)


def test_geodetic_eq_hash_repr():
    assert GeodeticCoordinate(1., 2., 3.) == GeodeticCoordinate(1, 2, 3)
    assert GeodeticCoordinate(1., 2., 3.) != GeodeticCoordinate(1., 2., 4.)
    assert GeodeticCoordinate(1., 2.) != (1., 2., 0.)
    assert len({GeodeticCoordinate(1., 2.), GeodeticCoordinate(1., 2.)}) == 1
    assert repr(GeodeticCoordinate(1., 2., 3.)) == \
        '<GeodeticCoordinate(lat=1.0, lon=2.0, height=3.0)>'


def test_immutability():
    with pytest.raises(AttributeError):
        GeodeticCoordinate(0., 0.).lat = 1.

    with pytest.raises(AttributeError):
        ECEFCoordinate(0., 0., 0.).x = 1.

    with pytest.raises(AttributeError):
        Quaternion.identity().w = 0.


def test_ecef_basics():
    c = ECEFCoordinate(1, 2, 3)
    assert c.to_float() == (1., 2., 3.)
    assert tuple(c) == (1., 2., 3.)
    assert repr(c) == '<ECEFCoordinate(1.0, 2.0, 3.0)>'
    assert c == ECEFCoordinate(1., 2., 3.)
    assert c != ECEFCoordinate(1., 2., 4.)
    assert c != (1., 2., 3.)
    assert len({c, ECEFCoordinate(1., 2., 3.)}) == 1
    np.testing.assert_array_equal(c.to_numpy(), np.array([1., 2., 3.]))


def test_ecef_from_float():
    assert ECEFCoordinate.from_float([1, 2, 3]) == ECEFCoordinate(1., 2., 3.)
    assert ECEFCoordinate.from_float(np.array([1., 2., 3.])) == ECEFCoordinate(1., 2., 3.)

    with pytest.raises(ValueError):
        ECEFCoordinate.from_float([1., 2.])


def test_ecef_vector_ops():
    c = ECEFCoordinate(3., 4., 0.)
    assert c.norm == 5.
    assert_ecef_equal(c.normalized(), ECEFCoordinate(0.6, 0.8, 0.), abs_tol=1e-12)

    x, y, z = ECEFCoordinate(1., 0., 0.), ECEFCoordinate(0., 1., 0.), ECEFCoordinate(0., 0., 1.)
    assert x.dot(y) == 0.
    assert c.dot(c) == 25.
    assert x.cross(y) == z
    assert y.cross(z) == x
    assert z.cross(x) == y
    assert y.cross(x) == ECEFCoordinate(0., 0., -1.)


def test_ecef_normalized_zero_vector():
    assert all(math.isnan(v) for v in ECEFCoordinate(0., 0., 0.).normalized())


def test_quaternion_basics():
    q = Quaternion(0., 0., 0., 1.)
    assert q == Quaternion.identity()
    assert q.magnitude == 1.
    assert q != Quaternion(0., 0., 1., 0.)
    assert q != (0., 0., 0., 1.)
    assert repr(q) == '<Quaternion(0.0, 0.0, 0.0, 1.0)>'
    assert Quaternion(1., 2., 3., 4.).conjugate() == Quaternion(-1., -2., -3., 4.)
    assert Quaternion(1., 2., 2., 4.).magnitude == 5.


def test_quaternion_multiplication():
    i, j, k = Quaternion(1., 0., 0., 0.), Quaternion(0., 1., 0., 0.), Quaternion(0., 0., 1., 0.)
    minus_one = Quaternion(0., 0., 0., -1.)

    # Hamilton's rules
    assert i * i == minus_one
    assert j * j == minus_one
    assert k * k == minus_one
    assert i * j == k
    assert j * k == i
    assert k * i == j
    assert j * i == Quaternion(0., 0., -1., 0.)

    q = Quaternion(0.1, 0.2, 0.3, 0.9)
    assert q * Quaternion.identity() == q
    assert Quaternion.identity() * q == q

    with pytest.raises(TypeError):
        q * 2


def test_quaternion_to_rotation_matrix():
    np.testing.assert_allclose(Quaternion.identity().to_rotation_matrix(), np.identity(3))

    # 90 degrees about Z
    s = math.sqrt(0.5)
    np.testing.assert_allclose(
        Quaternion(0., 0., s, s).to_rotation_matrix(),
        np.array([
            [0., -1., 0.],
            [1., 0., 0.],
            [0., 0., 1.],
        ]),
        atol=1e-12
    )
