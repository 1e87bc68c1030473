# geomop.py
"""
geomop - Boolean operations on 2-D polygons and polylines
"""
import logging

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

# Import main components to expose them at package level
from domain.geometry.point import Point
from domain.geometry.contour import Contour
from domain.geometry.polygon import Polygon
from domain.geometry.shapes import LineString, MultiLineString, MultiPoint, MultiPolygon, parse_geometry
from domain.operations.dispatcher import construct
from domain.operations.errors import UnsupportedGeometryKind
from domain.operations.operation import Operation
from domain.operations.settings import ClipperSettings

__version__ = "0.1.0"

# Make them available when someone does 'import geomop'
__all__ = [
    'Point',
    'Contour',
    'Polygon',
    'LineString',
    'MultiLineString',
    'MultiPoint',
    'MultiPolygon',
    'parse_geometry',
    'construct',
    'UnsupportedGeometryKind',
    'Operation',
    'ClipperSettings',
]
