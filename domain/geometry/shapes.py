"""
Geometry variants accepted and produced by the clipping operations.

Every variant carries a `kind` literal, so a `Geometry` value can be parsed
from plain data and dispatched on exhaustively.
"""
from typing import Annotated, List, Literal, Sequence, Tuple, Union
from pydantic import Field, TypeAdapter
from domain.geometry.point import Point
from domain.geometry.polygon import Polygon
from utils.base_model import ImmutableModel


class MultiPoint(ImmutableModel):
    """A collection of points."""
    kind: Literal["MultiPoint"] = "MultiPoint"
    points: List[Point] = Field(default_factory=list, description="Member points")

    @classmethod
    def from_coords(cls, coords: Sequence[Sequence[float]]) -> "MultiPoint":
        return cls(points=[Point.from_coords(c) for c in coords])

    def coords(self) -> List[Tuple[float, float]]:
        return [p.coords() for p in self.points]


class LineString(ImmutableModel):
    """An open polyline."""
    kind: Literal["LineString"] = "LineString"
    points: List[Point] = Field(default_factory=list, description="Vertices in drawing order")

    @classmethod
    def from_coords(cls, coords: Sequence[Sequence[float]]) -> "LineString":
        return cls(points=[Point.from_coords(c) for c in coords])

    def coords(self) -> List[Tuple[float, float]]:
        return [p.coords() for p in self.points]

    @property
    def length(self) -> float:
        """Total length of all line segments."""
        return sum(a.distance_to(b) for a, b in zip(self.points, self.points[1:]))


class MultiLineString(ImmutableModel):
    """A collection of polylines."""
    kind: Literal["MultiLineString"] = "MultiLineString"
    lines: List[LineString] = Field(default_factory=list, description="Member lines")

    @classmethod
    def from_coords(cls, lines: Sequence[Sequence[Sequence[float]]]) -> "MultiLineString":
        return cls(lines=[LineString.from_coords(line) for line in lines])

    def coords(self) -> List[List[Tuple[float, float]]]:
        return [line.coords() for line in self.lines]

    @property
    def length(self) -> float:
        return sum(line.length for line in self.lines)


class MultiPolygon(ImmutableModel):
    """A collection of polygons."""
    kind: Literal["MultiPolygon"] = "MultiPolygon"
    polygons: List[Polygon] = Field(default_factory=list, description="Member polygons")

    @classmethod
    def from_coords(cls, polygons: Sequence[Sequence[Sequence[Sequence[float]]]]) -> "MultiPolygon":
        return cls(polygons=[Polygon.from_coords(rings) for rings in polygons])

    def coords(self) -> List[List[List[Tuple[float, float]]]]:
        return [polygon.coords() for polygon in self.polygons]

    @property
    def area(self) -> float:
        return sum(polygon.area for polygon in self.polygons)


Geometry = Annotated[
    Union[Point, MultiPoint, LineString, MultiLineString, Polygon, MultiPolygon],
    Field(discriminator="kind"),
]

GEOMETRY_ADAPTER = TypeAdapter(Geometry)

AREAL_TYPES = (Polygon, MultiPolygon)
LINEAR_TYPES = (LineString, MultiLineString)


def parse_geometry(data) -> Union[Point, MultiPoint, LineString, MultiLineString, Polygon, MultiPolygon]:
    """Validate plain data (e.g. decoded JSON) into the matching geometry variant."""
    return GEOMETRY_ADAPTER.validate_python(data)
