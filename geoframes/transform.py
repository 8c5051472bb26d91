"""
Local-frame transforms: moving ECEF coordinates into an origin-centered frame
around a reference point, rotating that frame so the point's radial "up" lies
along the local Y axis, and composing translation, rotation and scale into
reusable functions or 4x4 affine matrices.
"""

__all__ = [
    'UP_AXIS', 'BoundingExtent', 'TransformConfiguration',
    'apply_matrix', 'apply_quaternion', 'calculate_bounds',
    'create_ecef_to_local_rotation', 'create_local_up_rotation',
    'create_transform', 'create_transform_matrix',
    'ecef_to_local', 'local_to_ecef',
]

import math
from typing import Callable, Optional, Sequence, Union

import numpy as np
from pydantic import validate_call

from geoframes._const import ROTATION_AXIS_EPSILON
from geoframes.coordinates import ECEFCoordinate, Quaternion
from geoframes.errors import EmptyInputError
from geoframes.utils.logging import warn_once

# Local frames are Y-up
UP_AXIS = ECEFCoordinate(0., 1., 0.)

_UNIT_TOLERANCE = 1e-6


class TransformConfiguration:
    """
    Describes one ECEF -> local mapping: translate so `center` becomes the
    origin, then optionally rotate, then optionally scale uniformly.

    Args:
        center:
            The ECEF reference point that becomes the local origin

        rotation: (Default None)
            A unit quaternion applied after translation. Not normalized.

        scale: (Default 1.0)
            A uniform scale factor applied last
    """

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(
        self,
        center: ECEFCoordinate,
        rotation: Optional[Quaternion] = None,
        scale: float = 1.0,
    ):
        if rotation is not None and abs(rotation.magnitude - 1) > _UNIT_TOLERANCE:
            warn_once(
                'Transform rotation is not a unit quaternion and will not be normalized; '
                'rotated points will also be scaled. (this warning will not repeat)'
            )

        self._center = center
        self._rotation = rotation
        self._scale = scale

    def __eq__(self, other):
        if not isinstance(other, TransformConfiguration):
            return False

        return (
            self.center == other.center and
            self.rotation == other.rotation and
            self.scale == other.scale
        )

    def __hash__(self):
        return hash((self.center, self.rotation, self.scale))

    def __repr__(self):
        return (
            f'<TransformConfiguration(center={self.center!r}, '
            f'rotation={self.rotation!r}, scale={self.scale})>'
        )

    @property
    def center(self) -> ECEFCoordinate:
        return self._center

    @property
    def rotation(self) -> Optional[Quaternion]:
        return self._rotation

    @property
    def scale(self) -> float:
        return self._scale


class BoundingExtent:
    """The axis-aligned box around a set of points, and its midpoint"""

    __slots__ = ('min', 'max', 'center')

    def __init__(self, min: ECEFCoordinate, max: ECEFCoordinate):  # pylint: disable=redefined-builtin
        object.__setattr__(self, 'min', min)
        object.__setattr__(self, 'max', max)
        object.__setattr__(self, 'center', ECEFCoordinate(
            (min.x + max.x) / 2,
            (min.y + max.y) / 2,
            (min.z + max.z) / 2,
        ))

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, BoundingExtent):
            return False

        return self.min == other.min and self.max == other.max

    def __hash__(self):
        return hash((self.min, self.max))

    def __repr__(self):
        return f'<BoundingExtent(min={self.min!r}, max={self.max!r})>'

    def __contains__(self, point: ECEFCoordinate) -> bool:
        return (
            self.min.x <= point.x <= self.max.x and
            self.min.y <= point.y <= self.max.y and
            self.min.z <= point.z <= self.max.z
        )


def ecef_to_local(ecef: ECEFCoordinate, center: ECEFCoordinate) -> ECEFCoordinate:
    """Express an ECEF point relative to `center`"""
    return ECEFCoordinate(ecef.x - center.x, ecef.y - center.y, ecef.z - center.z)


def local_to_ecef(local: ECEFCoordinate, center: ECEFCoordinate) -> ECEFCoordinate:
    """Inverse of ecef_to_local"""
    return ECEFCoordinate(local.x + center.x, local.y + center.y, local.z + center.z)


def create_local_up_rotation(center: ECEFCoordinate) -> Quaternion:
    """
    Create the rotation that turns the radial "up" direction at `center` (the
    direction from the Earth's center to `center`) onto the local up axis, Y.

    When that direction is already parallel to Y the identity is returned. The
    same happens when it is anti-parallel (a point on the negative Y axis),
    where the correct answer would be a half turn; that case is logged and left
    as identity.

    "Parallel" means within about 1e-5 radians of the Y axis (see
    ROTATION_AXIS_EPSILON). Centers inside that band also get the identity, so
    for them the rotated direction can miss the up axis by up to about 1e-5.

    A zero-length center has no direction; the result is all NaN.

    Args:
        center:
            The ECEF reference point

    Returns:
        Quaternion
    """
    direction = center.normalized()
    angle = math.acos(max(min(direction.dot(UP_AXIS), 1.), -1.))

    axis = direction.cross(UP_AXIS)
    axis_length = axis.norm
    if axis_length < ROTATION_AXIS_EPSILON:
        if direction.y < 0:
            warn_once(
                'Center %s points opposite the local up axis; '
                'returning the identity rotation instead of a half turn.',
                center,
            )
        return Quaternion.identity()

    s = math.sin(angle / 2)
    return Quaternion(
        axis.x / axis_length * s,
        axis.y / axis_length * s,
        axis.z / axis_length * s,
        math.cos(angle / 2),
    )


# Name used by existing scene-graph adapters
create_ecef_to_local_rotation = create_local_up_rotation


def apply_quaternion(point: ECEFCoordinate, quaternion: Quaternion) -> ECEFCoordinate:
    """
    Rotate a point by a unit quaternion; equivalent to q * p * q^-1 without
    building the inverse. The quaternion must already be normalized.
    """
    qx, qy, qz, qw = quaternion.to_float()

    # t = 2 * (q_vec x p)
    tx = 2 * (qy * point.z - qz * point.y)
    ty = 2 * (qz * point.x - qx * point.z)
    tz = 2 * (qx * point.y - qy * point.x)

    # p' = p + w * t + q_vec x t
    return ECEFCoordinate(
        point.x + qw * tx + (qy * tz - qz * ty),
        point.y + qw * ty + (qz * tx - qx * tz),
        point.z + qw * tz + (qx * ty - qy * tx),
    )


def create_transform(config: TransformConfiguration) -> Callable[[ECEFCoordinate], ECEFCoordinate]:
    """
    Build a reusable ECEF -> local function from a configuration. Points are
    translated, then rotated (if configured), then scaled (if scale != 1); the
    order is fixed.

    Args:
        config:
            The TransformConfiguration to apply

    Returns:
        A function mapping an ECEFCoordinate to its local-frame coordinate
    """
    center, rotation, scale = config.center, config.rotation, config.scale

    def _transform(ecef: ECEFCoordinate) -> ECEFCoordinate:
        local = ecef_to_local(ecef, center)

        if rotation is not None:
            local = apply_quaternion(local, rotation)

        if scale != 1:
            local = ECEFCoordinate(local.x * scale, local.y * scale, local.z * scale)

        return local

    return _transform


def create_transform_matrix(
    center: Union[ECEFCoordinate, TransformConfiguration],
    auto_rotate: bool = False,
    scale: float = 1.0,
    rotation: Optional[Quaternion] = None,
) -> np.ndarray:
    """
    Build the 4x4 affine matrix (for column vectors) equivalent to
    create_transform: translation by -center, then rotation, then uniform scale.

    Args:
        center:
            The ECEF reference point, or a TransformConfiguration (in which case
            its rotation and scale are used and the other arguments ignored)

        auto_rotate: (Default False)
            If True and no explicit rotation is given, rotate by
            create_local_up_rotation(center)

        scale: (Default 1.0)
            A uniform scale factor

        rotation: (Default None)
            An explicit unit quaternion, taking precedence over auto_rotate

    Returns:
        np.ndarray of shape (4, 4)
    """
    if isinstance(center, TransformConfiguration):
        center, rotation, scale = center.center, center.rotation, center.scale
    elif rotation is None and auto_rotate:
        rotation = create_local_up_rotation(center)

    matrix = np.identity(4)
    matrix[:3, 3] = [-center.x, -center.y, -center.z]

    if rotation is not None:
        rotation_matrix = np.identity(4)
        rotation_matrix[:3, :3] = rotation.to_rotation_matrix()
        matrix = rotation_matrix @ matrix

    if scale != 1:
        matrix = np.diag([scale, scale, scale, 1.]) @ matrix

    return matrix


def apply_matrix(matrix: np.ndarray, point: ECEFCoordinate) -> ECEFCoordinate:
    """Apply a 4x4 affine matrix to a point"""
    result = matrix @ np.array([point.x, point.y, point.z, 1.])
    return ECEFCoordinate(*result[:3])


def calculate_bounds(points: Sequence[ECEFCoordinate]) -> BoundingExtent:
    """
    Calculate the axis-aligned bounding box of a set of points.

    Args:
        points:
            A non-empty sequence of ECEFCoordinates

    Returns:
        BoundingExtent

    Raises:
        EmptyInputError: if no points are given
    """
    if len(points) == 0:
        raise EmptyInputError('Cannot calculate bounds of empty array')

    min_x = max_x = points[0].x
    min_y = max_y = points[0].y
    min_z = max_z = points[0].z

    for point in points:
        min_x, max_x = min(min_x, point.x), max(max_x, point.x)
        min_y, max_y = min(min_y, point.y), max(max_y, point.y)
        min_z, max_z = min(min_z, point.z), max(max_z, point.z)

    return BoundingExtent(
        ECEFCoordinate(min_x, min_y, min_z),
        ECEFCoordinate(max_x, max_y, max_z),
    )
