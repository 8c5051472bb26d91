"""
Exposes the version of geoframes
"""
from importlib.metadata import PackageNotFoundError, version

# Used when running from a source tree without installed metadata
_FALLBACK_VERSION = 'v0.1.0'

try:
    __version__ = version("geoframes")
except PackageNotFoundError:
    __version__ = _FALLBACK_VERSION

__all__ = ["__version__"]
