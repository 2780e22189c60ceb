"""
Track records for a music collection.

``Track.create`` validates input and hands out process-unique ids. The
helpers re-exported here render and order tracks for display.
"""

from importlib import metadata

from .ids import IdGenerator
from .models import Track, compare, render, sort_tracks

try:
    __version__ = metadata.version("songbook")
except metadata.PackageNotFoundError:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0"

__all__ = ["IdGenerator", "Track", "compare", "render", "sort_tracks", "__version__"]
