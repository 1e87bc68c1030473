"""
Well-Known Binary encoding of the geometry variants.

Rings are implicitly closed in memory; in WKB the first vertex is repeated
at the end of each ring. Encoding adds the closing vertex and decoding
drops it again.
"""
from enum import IntEnum
from typing import List, Tuple
import struct

from domain.geometry.contour import Contour
from domain.geometry.point import Point
from domain.geometry.polygon import Polygon
from domain.geometry.shapes import LineString, MultiLineString, MultiPoint, MultiPolygon


class ByteOrder(IntEnum):
    """Byte order marker at the start of every WKB geometry."""
    XDR = 0  # big-endian
    NDR = 1  # little-endian


class WKBError(ValueError):
    """Raised for malformed WKB input or geometries that cannot be encoded."""


POINT_TYPE = 1
LINE_STRING_TYPE = 2
POLYGON_TYPE = 3
MULTI_POINT_TYPE = 4
MULTI_LINE_STRING_TYPE = 5
MULTI_POLYGON_TYPE = 6

_PREFIX = {ByteOrder.XDR: ">", ByteOrder.NDR: "<"}


def encode(geometry, byte_order: ByteOrder = ByteOrder.NDR) -> bytes:
    """
    Encode a geometry as WKB.

    Raises:
        WKBError: If the value is not one of the geometry variants
    """
    byte_order = ByteOrder(byte_order)
    chunks: List[bytes] = []
    _encode_geometry(geometry, _PREFIX[byte_order], byte_order, chunks)
    return b"".join(chunks)


def encode_hex(geometry, byte_order: ByteOrder = ByteOrder.NDR) -> str:
    return encode(geometry, byte_order).hex()


def decode(data: bytes):
    """
    Decode one WKB geometry.

    Raises:
        WKBError: On an unknown byte order or type code, truncated input,
            or bytes left over after the geometry
    """
    reader = _Reader(bytes(data))
    geometry = reader.read_geometry()
    if reader.offset != len(reader.data):
        raise WKBError(f"{len(reader.data) - reader.offset} trailing bytes after geometry")
    return geometry


def decode_hex(text: str):
    try:
        data = bytes.fromhex(text)
    except ValueError as e:
        raise WKBError(f"Invalid hex string: {e}") from e
    return decode(data)


def _encode_geometry(geometry, prefix: str, byte_order: ByteOrder, chunks: List[bytes]) -> None:
    if isinstance(geometry, Point):
        chunks.append(_header(prefix, byte_order, POINT_TYPE))
        chunks.append(struct.pack(prefix + "dd", geometry.x, geometry.y))
    elif isinstance(geometry, LineString):
        chunks.append(_header(prefix, byte_order, LINE_STRING_TYPE))
        _encode_points(geometry.points, prefix, chunks)
    elif isinstance(geometry, Polygon):
        chunks.append(_header(prefix, byte_order, POLYGON_TYPE))
        _encode_rings(geometry.rings, prefix, chunks)
    elif isinstance(geometry, MultiPoint):
        chunks.append(_header(prefix, byte_order, MULTI_POINT_TYPE))
        chunks.append(struct.pack(prefix + "I", len(geometry.points)))
        for point in geometry.points:
            _encode_geometry(point, prefix, byte_order, chunks)
    elif isinstance(geometry, MultiLineString):
        chunks.append(_header(prefix, byte_order, MULTI_LINE_STRING_TYPE))
        chunks.append(struct.pack(prefix + "I", len(geometry.lines)))
        for line in geometry.lines:
            _encode_geometry(line, prefix, byte_order, chunks)
    elif isinstance(geometry, MultiPolygon):
        chunks.append(_header(prefix, byte_order, MULTI_POLYGON_TYPE))
        chunks.append(struct.pack(prefix + "I", len(geometry.polygons)))
        for polygon in geometry.polygons:
            _encode_geometry(polygon, prefix, byte_order, chunks)
    else:
        raise WKBError(f"Cannot encode {type(geometry).__name__} as WKB")


def _header(prefix: str, byte_order: ByteOrder, type_code: int) -> bytes:
    return struct.pack(prefix + "BI", byte_order, type_code)


def _encode_points(points: List[Point], prefix: str, chunks: List[bytes]) -> None:
    chunks.append(struct.pack(prefix + "I", len(points)))
    for point in points:
        chunks.append(struct.pack(prefix + "dd", point.x, point.y))


def _encode_rings(rings: List[Contour], prefix: str, chunks: List[bytes]) -> None:
    chunks.append(struct.pack(prefix + "I", len(rings)))
    for ring in rings:
        points = list(ring.points)
        if points and points[0] != points[-1]:
            points.append(points[0])
        _encode_points(points, prefix, chunks)


class _Reader:
    """Cursor over a WKB byte string."""

    def __init__(self, data: bytes) -> None:
        self.data = data
        self.offset = 0

    def unpack(self, fmt: str) -> Tuple:
        size = struct.calcsize(fmt)
        if self.offset + size > len(self.data):
            raise WKBError(f"Unexpected end of data at offset {self.offset}")
        values = struct.unpack_from(fmt, self.data, self.offset)
        self.offset += size
        return values

    def read_header(self) -> Tuple[str, int]:
        (marker,) = self.unpack("B")
        try:
            prefix = _PREFIX[ByteOrder(marker)]
        except ValueError as e:
            raise WKBError(f"Unknown byte order {marker}") from e
        (type_code,) = self.unpack(prefix + "I")
        return prefix, type_code

    def read_geometry(self, expected: int = None):
        prefix, type_code = self.read_header()
        if expected is not None and type_code != expected:
            raise WKBError(f"Expected geometry type {expected}, got {type_code}")

        if type_code == POINT_TYPE:
            return self.read_point(prefix)
        if type_code == LINE_STRING_TYPE:
            return LineString(points=self.read_points(prefix))
        if type_code == POLYGON_TYPE:
            return Polygon(rings=self.read_rings(prefix))
        if type_code == MULTI_POINT_TYPE:
            return MultiPoint(points=self.read_members(prefix, POINT_TYPE))
        if type_code == MULTI_LINE_STRING_TYPE:
            return MultiLineString(lines=self.read_members(prefix, LINE_STRING_TYPE))
        if type_code == MULTI_POLYGON_TYPE:
            return MultiPolygon(polygons=self.read_members(prefix, POLYGON_TYPE))
        raise WKBError(f"Unknown geometry type {type_code}")

    def read_point(self, prefix: str) -> Point:
        x, y = self.unpack(prefix + "dd")
        try:
            return Point(x=x, y=y)
        except ValueError as e:
            raise WKBError(f"Invalid point ({x}, {y})") from e

    def read_points(self, prefix: str) -> List[Point]:
        (count,) = self.unpack(prefix + "I")
        return [self.read_point(prefix) for _ in range(count)]

    def read_rings(self, prefix: str) -> List[Contour]:
        (count,) = self.unpack(prefix + "I")
        rings = []
        for _ in range(count):
            points = self.read_points(prefix)
            if len(points) > 1 and points[0] == points[-1]:
                points.pop()
            rings.append(Contour(points=points))
        return rings

    def read_members(self, prefix: str, expected: int) -> List:
        (count,) = self.unpack(prefix + "I")
        return [self.read_geometry(expected) for _ in range(count)]
