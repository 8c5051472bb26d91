"""Module for reading ECEF reference points out of 3D Tiles and glTF metadata"""

__all__ = [
    'parse_bounding_volume_center', 'parse_cesium_rtc'
]

import json
import math
from numbers import Real
from typing import Any, Dict, Optional, Union

from geoframes.coordinates import ECEFCoordinate
from geoframes.ecef import geodetic_to_ecef


def _load(document: Union[str, bytes, Dict[str, Any]]) -> Dict[str, Any]:
    if isinstance(document, (str, bytes)):
        document = json.loads(document)

    if not isinstance(document, dict):
        raise ValueError('Expected a JSON object.')

    return document


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _to_center(values: Any, source: str) -> ECEFCoordinate:
    if (
        not isinstance(values, (list, tuple)) or
        len(values) < 3 or
        not all(_is_number(x) for x in values[:3])
    ):
        raise ValueError(f'Malformed {source}; expected an array of at least 3 numbers.')

    return ECEFCoordinate(*values[:3])


def parse_cesium_rtc(gltf: Union[str, bytes, Dict[str, Any]]) -> Optional[ECEFCoordinate]:
    """
    Reads the relative-to-center offset from a glTF document's CESIUM_RTC
    extension. Vertex positions in such an asset are stored relative to this
    ECEF point.

    Args:
        gltf:
            The parsed glTF JSON (a dict), or its raw JSON text

    Returns:
        The CESIUM_RTC center, or None if the extension is absent
    """
    gltf = _load(gltf)
    extension = (gltf.get('extensions') or {}).get('CESIUM_RTC') or {}
    center = extension.get('center')
    if center is None:
        return None

    if not isinstance(center, (list, tuple)) or len(center) != 3:
        raise ValueError('Malformed CESIUM_RTC center; expected exactly 3 numbers.')

    return _to_center(center, 'CESIUM_RTC center')


def parse_bounding_volume_center(
    tileset: Union[str, bytes, Dict[str, Any]]
) -> Optional[ECEFCoordinate]:
    """
    Extracts the ECEF center of a 3D Tiles tileset's root bounding volume.

    Supports the three bounding volume types: `sphere` ([x, y, z, radius]),
    `box` ([x, y, z, <9 half-axis values>]) and `region` ([west, south, east,
    north, min height, max height], angles in radians), the latter converted at
    its midpoint. Sphere takes precedence over box, and box over region.

    Args:
        tileset:
            The parsed tileset JSON (a dict), or its raw JSON text

    Returns:
        The bounding volume center, or None if the root has no bounding volume
    """
    tileset = _load(tileset)
    volume = (tileset.get('root') or {}).get('boundingVolume') or {}

    if 'sphere' in volume:
        return _to_center(volume['sphere'], 'bounding sphere')

    if 'box' in volume:
        return _to_center(volume['box'], 'bounding box')

    if 'region' in volume:
        region = volume['region']
        if (
            not isinstance(region, (list, tuple)) or
            len(region) != 6 or
            not all(_is_number(x) for x in region)
        ):
            raise ValueError('Malformed bounding region; expected 6 numbers.')

        west, south, east, north, min_height, max_height = map(float, region)
        if east < west:
            # Crosses the antimeridian
            east += 2 * math.pi

        return geodetic_to_ecef(
            math.degrees((south + north) / 2),
            math.degrees((west + east) / 2),
            (min_height + max_height) / 2,
        )

    return None
