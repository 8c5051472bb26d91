"""
A renderer-agnostic transform object that owns a tileset's reference center
and derives the local frame (offset, rotation, scale) a scene-graph node needs
to display ECEF content upright near the origin.
"""

__all__ = ['LocalFrame', 'TilesetTransform']

from typing import Any, Callable, Dict, List, Optional, Union

import numpy as np
from pydantic import validate_call

from geoframes.coordinates import ECEFCoordinate, GeodeticCoordinate, Quaternion
from geoframes.ecef import ecef_to_geodetic
from geoframes.errors import PreconditionError
from geoframes.parsers import parse_bounding_volume_center
from geoframes.transform import (
    TransformConfiguration, create_local_up_rotation, create_transform,
    create_transform_matrix,
)
from geoframes.utils.mixins import LoggingMixin


class LocalFrame:
    """
    Immutable snapshot of the node transform derived from a center.

    Attributes:
        center: the ECEF reference point
        offset: the node position; by default (0, -|center|, 0), which drops
            the rotated Earth so the center sits at the origin
        rotation: the node rotation
        scale: the uniform node scale
    """

    __slots__ = ('center', 'offset', 'rotation', 'scale')

    def __init__(
        self,
        center: ECEFCoordinate,
        offset: ECEFCoordinate,
        rotation: Quaternion,
        scale: float,
    ):
        object.__setattr__(self, 'center', center)
        object.__setattr__(self, 'offset', offset)
        object.__setattr__(self, 'rotation', rotation)
        object.__setattr__(self, 'scale', scale)

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, LocalFrame):
            return False

        return (
            self.center == other.center and
            self.offset == other.offset and
            self.rotation == other.rotation and
            self.scale == other.scale
        )

    def __repr__(self):
        return (
            f'<LocalFrame(center={self.center!r}, offset={self.offset!r}, '
            f'rotation={self.rotation!r}, scale={self.scale})>'
        )


class TilesetTransform(LoggingMixin):
    """
    Holds the current reference center of a tileset and recomputes its local
    frame whenever the center changes. Rendering adapters either read `frame`,
    call `copy_to(node)`, or `subscribe` to be told of new frames.

    Args:
        center: (Default None)
            The initial ECEF reference point. Most operations raise
            PreconditionError until a center is set.

        auto_rotate: (Default True)
            Rotate the frame so the center's radial up direction is +Y

        scale: (Default 1.0)
            Uniform scale applied after rotation

        offset: (Default None)
            A fixed node position overriding the computed (0, -|center|, 0)

    The options are fixed at construction so that the frame, the pointwise
    transform and the matrix always agree.
    """

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(
        self,
        center: Optional[ECEFCoordinate] = None,
        auto_rotate: bool = True,
        scale: float = 1.0,
        offset: Optional[ECEFCoordinate] = None,
    ):
        super().__init__()
        self._auto_rotate = auto_rotate
        self._scale = scale
        self._offset = offset

        self._frame: Optional[LocalFrame] = None
        self._transform: Optional[Callable[[ECEFCoordinate], ECEFCoordinate]] = None
        self._listeners: List[Callable[[LocalFrame], Any]] = []

        if center is not None:
            self.set_center(center)

    def __repr__(self):
        return f'<TilesetTransform(center={self.center!r}, auto_rotate={self.auto_rotate})>'

    @property
    def auto_rotate(self) -> bool:
        return self._auto_rotate

    @property
    def scale(self) -> float:
        return self._scale

    @property
    def offset(self) -> Optional[ECEFCoordinate]:
        """The fixed node position, or None when it is derived from the center"""
        return self._offset

    @property
    def center(self) -> Optional[ECEFCoordinate]:
        return self._frame.center if self._frame else None

    @property
    def frame(self) -> Optional[LocalFrame]:
        """The current local frame, or None before a center is set"""
        return self._frame

    @property
    def configuration(self) -> TransformConfiguration:
        """The equivalent TransformConfiguration for pointwise transforms"""
        frame = self._require_frame()
        return TransformConfiguration(
            frame.center,
            rotation=frame.rotation if self._auto_rotate else None,
            scale=frame.scale,
        )

    def _require_frame(self) -> LocalFrame:
        if self._frame is None:
            raise PreconditionError('Center must be set before transforming points')

        return self._frame

    def set_center(self, center: ECEFCoordinate) -> LocalFrame:
        """
        Set the reference center, recompute the local frame and notify
        subscribers.

        Args:
            center:
                The ECEF reference point

        Returns:
            The new LocalFrame
        """
        if self._auto_rotate and center.norm == 0:
            self.warn_once(
                'Center %r is the Earth\'s center and has no up direction; '
                'the frame rotation will be NaN. (this warning will not repeat)',
                center,
            )

        rotation = create_local_up_rotation(center) if self._auto_rotate else Quaternion.identity()
        offset = self._offset if self._offset is not None else ECEFCoordinate(0., -center.norm, 0.)

        self._frame = LocalFrame(center, offset, rotation, self._scale)
        self._transform = create_transform(self.configuration)
        self.logger.debug('Center set to %r; frame %r', center, self._frame)

        for listener in list(self._listeners):
            listener(self._frame)

        return self._frame

    def subscribe(self, listener: Callable[[LocalFrame], Any]) -> Callable[[], None]:
        """
        Register a callback invoked with each new LocalFrame. If a center is
        already set the callback is invoked immediately with the current frame.

        Returns:
            A function that removes the callback
        """
        self._listeners.append(listener)
        if self._frame is not None:
            listener(self._frame)

        def _unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def get_center_geodetic(self) -> Optional[GeodeticCoordinate]:
        """The current center as latitude/longitude/height, or None if unset"""
        center = self.center
        if center is None:
            return None

        return ecef_to_geodetic(*center)

    def transform_point(self, ecef: ECEFCoordinate) -> ECEFCoordinate:
        """
        Convert an ECEF point (e.g. a user-picked position) to local display
        coordinates.

        Raises:
            PreconditionError: if no center has been set
        """
        self._require_frame()
        return self._transform(ecef)  # type: ignore

    def to_matrix(self) -> np.ndarray:
        """
        The 4x4 affine matrix equivalent to transform_point.

        Raises:
            PreconditionError: if no center has been set
        """
        return create_transform_matrix(self.configuration)

    def update_from_tileset(self, tileset: Union[str, bytes, Dict[str, Any]]) -> Optional[LocalFrame]:
        """
        Take the center from a 3D Tiles tileset's root bounding volume. Leaves
        the transform untouched if the tileset has no bounding volume.

        Args:
            tileset:
                The parsed tileset JSON (a dict), or its raw JSON text

        Returns:
            The new LocalFrame, or None if no center was found
        """
        center = parse_bounding_volume_center(tileset)
        if center is None:
            self.logger.debug('Tileset has no root bounding volume; center unchanged')
            return None

        return self.set_center(center)

    def copy_to(self, node: Any) -> Any:
        """
        Copy the current frame onto a scene-graph node. The node only needs
        `position`, `quaternion` and `scale` attributes; each is either given
        a `set(...)` call, when it has one, or replaced by a tuple.

        Raises:
            PreconditionError: if no center has been set
        """
        frame = self._require_frame()
        values = {
            'position': frame.offset.to_float(),
            'quaternion': frame.rotation.to_float(),
            'scale': (frame.scale,) * 3,
        }
        for name, value in values.items():
            target = getattr(node, name, None)
            if callable(getattr(target, 'set', None)):
                target.set(*value)
            else:
                setattr(node, name, value)

        return node
