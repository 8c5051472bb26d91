
from geoframes._version import __version__  # noqa: F401
from geoframes.utils.logging import LOGGER
from geoframes.coordinates import ECEFCoordinate, GeodeticCoordinate, Quaternion
from geoframes.ecef import (
    ecef_center, ecef_distance, ecef_to_geodetic, ecef_to_geodetic_array,
    geodetic_to_ecef, geodetic_to_ecef_array,
)
from geoframes.errors import EmptyInputError, GeoframesError, PreconditionError
from geoframes.parsers import parse_bounding_volume_center, parse_cesium_rtc
from geoframes.transform import (
    BoundingExtent, TransformConfiguration, apply_matrix, apply_quaternion,
    calculate_bounds, create_ecef_to_local_rotation, create_local_up_rotation,
    create_transform, create_transform_matrix, ecef_to_local, local_to_ecef,
)
from geoframes.tileset import LocalFrame, TilesetTransform


__all__ = [
    'BoundingExtent',
    'ECEFCoordinate',
    'EmptyInputError',
    'GeodeticCoordinate',
    'GeoframesError',
    'LocalFrame',
    'PreconditionError',
    'Quaternion',
    'TilesetTransform',
    'TransformConfiguration',
    'apply_matrix',
    'apply_quaternion',
    'calculate_bounds',
    'create_ecef_to_local_rotation',
    'create_local_up_rotation',
    'create_transform',
    'create_transform_matrix',
    'ecef_center',
    'ecef_distance',
    'ecef_to_geodetic',
    'ecef_to_geodetic_array',
    'ecef_to_local',
    'geodetic_to_ecef',
    'geodetic_to_ecef_array',
    'local_to_ecef',
    'parse_bounding_volume_center',
    'parse_cesium_rtc',
    'LOGGER',
]
