"""
Value types for points in Earth-centered and geodetic frames, and rotations
"""

__all__ = ['ECEFCoordinate', 'GeodeticCoordinate', 'Quaternion']

import math
from typing import Iterator, Sequence, Tuple

import numpy as np


class GeodeticCoordinate:
    """
    A position referenced to the WGS84 ellipsoid.

    Args:
        lat:
            Latitude, in degrees

        lon:
            Longitude, in degrees

        height: (Default 0.0)
            Height above the ellipsoid, in meters
    """

    __slots__ = ('lat', 'lon', 'height')

    def __init__(self, lat: float, lon: float, height: float = 0.0):
        object.__setattr__(self, 'lat', float(lat))
        object.__setattr__(self, 'lon', float(lon))
        object.__setattr__(self, 'height', float(height))

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, GeodeticCoordinate):
            return False

        return (
            self.lat == other.lat and
            self.lon == other.lon and
            self.height == other.height
        )

    def __hash__(self):
        return hash((self.lat, self.lon, self.height))

    def __repr__(self):
        return f'<GeodeticCoordinate(lat={self.lat}, lon={self.lon}, height={self.height})>'

    def to_float(self) -> Tuple[float, float, float]:
        """Returns (latitude, longitude, height)"""
        return self.lat, self.lon, self.height


class ECEFCoordinate:
    """
    A Cartesian position in meters with its origin at the ellipsoid center, Z
    toward the north pole and X/Y in the equatorial plane.

    Also used for local-frame positions and plain 3-vectors, which share the
    same arithmetic.
    """

    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float, y: float, z: float):
        object.__setattr__(self, 'x', float(x))
        object.__setattr__(self, 'y', float(y))
        object.__setattr__(self, 'z', float(z))

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, ECEFCoordinate):
            return False

        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __repr__(self):
        return f'<ECEFCoordinate({self.x}, {self.y}, {self.z})>'

    @classmethod
    def from_float(cls, values: Sequence[float]) -> 'ECEFCoordinate':
        """
        Creates an ECEFCoordinate from a sequence of exactly three numbers,
        e.g. a CESIUM_RTC center array or a numpy row.
        """
        if len(values) != 3:
            raise ValueError(f'Expected 3 values, got {len(values)}')

        return cls(*values)

    @property
    def norm(self) -> float:
        """Length of the vector from the origin"""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> 'ECEFCoordinate':
        """
        Returns the unit vector in the same direction. A zero-length vector
        has no direction and yields NaN components.
        """
        length = self.norm
        if length == 0:
            return ECEFCoordinate(math.nan, math.nan, math.nan)

        return ECEFCoordinate(self.x / length, self.y / length, self.z / length)

    def dot(self, other: 'ECEFCoordinate') -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: 'ECEFCoordinate') -> 'ECEFCoordinate':
        return ECEFCoordinate(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def to_float(self) -> Tuple[float, float, float]:
        """Returns (x, y, z)"""
        return self.x, self.y, self.z

    def to_numpy(self) -> np.ndarray:
        """Returns a float64 array of shape (3,)"""
        return np.array(self.to_float(), dtype=np.float64)


class Quaternion:
    """
    A rotation quaternion (x, y, z, w), with w the scalar part.

    Only unit quaternions represent rotations. Nothing in geoframes normalizes a
    quaternion on your behalf; check `magnitude` if the source is untrusted.
    """

    __slots__ = ('x', 'y', 'z', 'w')

    def __init__(self, x: float, y: float, z: float, w: float):
        object.__setattr__(self, 'x', float(x))
        object.__setattr__(self, 'y', float(y))
        object.__setattr__(self, 'z', float(z))
        object.__setattr__(self, 'w', float(w))

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, Quaternion):
            return False

        return self.to_float() == other.to_float()

    def __hash__(self):
        return hash(self.to_float())

    def __repr__(self):
        return f'<Quaternion({self.x}, {self.y}, {self.z}, {self.w})>'

    def __mul__(self, other: 'Quaternion') -> 'Quaternion':
        """Hamilton product, self * other"""
        if not isinstance(other, Quaternion):
            return NotImplemented

        return Quaternion(
            self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
            self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x,
            self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w,
            self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
        )

    @classmethod
    def identity(cls) -> 'Quaternion':
        return cls(0., 0., 0., 1.)

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x ** 2 + self.y ** 2 + self.z ** 2 + self.w ** 2)

    def conjugate(self) -> 'Quaternion':
        """The inverse rotation, for unit quaternions"""
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def to_float(self) -> Tuple[float, float, float, float]:
        """Returns (x, y, z, w)"""
        return self.x, self.y, self.z, self.w

    def to_rotation_matrix(self) -> np.ndarray:
        """
        Converts this (unit) quaternion to the equivalent 3x3 rotation matrix,
        for use on column vectors.

        Returns:
            np.ndarray of shape (3, 3)
        """
        x, y, z, w = self.to_float()
        return np.array([
            [1 - 2 * (y * y + z * z), 2 * (x * y - z * w), 2 * (x * z + y * w)],
            [2 * (x * y + z * w), 1 - 2 * (x * x + z * z), 2 * (y * z - x * w)],
            [2 * (x * z - y * w), 2 * (y * z + x * w), 1 - 2 * (x * x + y * y)],
        ])
