"""
Conversions between ECEF (Earth-Centered, Earth-Fixed) coordinates and WGS84
geodetic coordinates, plus simple reductions over ECEF point sets
"""

__all__ = [
    'ecef_center', 'ecef_distance', 'ecef_to_geodetic', 'ecef_to_geodetic_array',
    'geodetic_to_ecef', 'geodetic_to_ecef_array',
]

import math
from typing import Sequence

import numpy as np

from geoframes._const import DEG_TO_RAD, RAD_TO_DEG, WGS84_A, WGS84_B, WGS84_E2, WGS84_EP2
from geoframes.coordinates import ECEFCoordinate, GeodeticCoordinate
from geoframes.errors import EmptyInputError


def ecef_to_geodetic(x: float, y: float, z: float) -> GeodeticCoordinate:
    """
    Convert ECEF coordinates to geodetic latitude, longitude and height using
    Bowring's closed-form approximation (no iteration). Accurate to well under
    a millimeter for points at ordinary distances from the Earth's center.

    Inputs are never validated. Degenerate positions return whatever the float
    arithmetic yields: on or near the polar axis p / cos(lat) divides by a
    near-zero value, so the height there is not reliable, and the Earth's
    center maps to lat 180, lon 0, height -WGS84_A.

    Args:
        x:
            ECEF X coordinate, in meters

        y:
            ECEF Y coordinate, in meters

        z:
            ECEF Z coordinate, in meters

    Returns:
        GeodeticCoordinate
    """
    p = math.sqrt(x * x + y * y)
    theta = math.atan2(z * WGS84_A, p * WGS84_B)

    lat = math.atan2(
        z + WGS84_EP2 * WGS84_B * math.sin(theta) ** 3,
        p - WGS84_E2 * WGS84_A * math.cos(theta) ** 3
    )
    lon = math.atan2(y, x)

    n = WGS84_A / math.sqrt(1 - WGS84_E2 * math.sin(lat) ** 2)
    height = p / math.cos(lat) - n

    return GeodeticCoordinate(lat * RAD_TO_DEG, lon * RAD_TO_DEG, height)


def geodetic_to_ecef(lat: float, lon: float, height: float = 0.) -> ECEFCoordinate:
    """
    Convert geodetic coordinates to ECEF. Values outside the usual latitude and
    longitude ranges are not rejected; they follow the trigonometric identities.

    Args:
        lat:
            Latitude, in degrees

        lon:
            Longitude, in degrees

        height: (Default 0.0)
            Height above the ellipsoid, in meters

    Returns:
        ECEFCoordinate
    """
    lat_rad = lat * DEG_TO_RAD
    lon_rad = lon * DEG_TO_RAD

    n = WGS84_A / math.sqrt(1 - WGS84_E2 * math.sin(lat_rad) ** 2)

    return ECEFCoordinate(
        (n + height) * math.cos(lat_rad) * math.cos(lon_rad),
        (n + height) * math.cos(lat_rad) * math.sin(lon_rad),
        (n * (1 - WGS84_E2) + height) * math.sin(lat_rad),
    )


def ecef_distance(p1: ECEFCoordinate, p2: ECEFCoordinate) -> float:
    """Straight-line (chord) distance between two ECEF points, in meters"""
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    dz = p2.z - p1.z
    return math.sqrt(dx * dx + dy * dy + dz * dz)


def ecef_center(points: Sequence[ECEFCoordinate]) -> ECEFCoordinate:
    """
    The arithmetic mean of a set of ECEF points.

    Args:
        points:
            A non-empty sequence of ECEFCoordinates

    Returns:
        ECEFCoordinate

    Raises:
        EmptyInputError: if no points are given
    """
    if len(points) == 0:
        raise EmptyInputError('Cannot calculate center of empty array')

    sum_x = sum_y = sum_z = 0.
    for point in points:
        sum_x += point.x
        sum_y += point.y
        sum_z += point.z

    count = len(points)
    return ECEFCoordinate(sum_x / count, sum_y / count, sum_z / count)


def _as_rows(values) -> np.ndarray:
    """Coerces a single point or a list of points to a float64 array of rows"""
    arr = np.asarray(values, dtype=np.float64)
    if arr.size == 0:
        return arr.reshape(0, 3)

    return np.atleast_2d(arr)


def ecef_to_geodetic_array(xyz) -> np.ndarray:
    """
    Vectorized ecef_to_geodetic for many points at once.

    Args:
        xyz:
            Array-like of shape (N, 3) holding ECEF x, y, z in meters

    Returns:
        np.ndarray of shape (N, 3) holding latitude (deg), longitude (deg) and
        height (m)
    """
    xyz = _as_rows(xyz)
    x, y, z = xyz[:, 0], xyz[:, 1], xyz[:, 2]

    p = np.hypot(x, y)
    theta = np.arctan2(z * WGS84_A, p * WGS84_B)
    lat = np.arctan2(
        z + WGS84_EP2 * WGS84_B * np.sin(theta) ** 3,
        p - WGS84_E2 * WGS84_A * np.cos(theta) ** 3
    )
    lon = np.arctan2(y, x)

    n = WGS84_A / np.sqrt(1 - WGS84_E2 * np.sin(lat) ** 2)
    with np.errstate(divide='ignore', invalid='ignore'):
        height = p / np.cos(lat) - n

    return np.column_stack((np.degrees(lat), np.degrees(lon), height))


def geodetic_to_ecef_array(llh) -> np.ndarray:
    """
    Vectorized geodetic_to_ecef for many points at once.

    Args:
        llh:
            Array-like of shape (N, 2) or (N, 3) holding latitude (deg),
            longitude (deg) and optionally height (m, default 0)

    Returns:
        np.ndarray of shape (N, 3) holding ECEF x, y, z in meters
    """
    llh = _as_rows(llh)
    lat = np.radians(llh[:, 0])
    lon = np.radians(llh[:, 1])
    height = llh[:, 2] if llh.shape[1] > 2 else np.zeros_like(lat)

    n = WGS84_A / np.sqrt(1 - WGS84_E2 * np.sin(lat) ** 2)

    return np.column_stack((
        (n + height) * np.cos(lat) * np.cos(lon),
        (n + height) * np.cos(lat) * np.sin(lon),
        (n * (1 - WGS84_E2) + height) * np.sin(lat),
    ))
