"""
Reader for IGC flight recorder files.

Only two record types matter here: B records (position fixes) and the
HFDTE header (the flight date). Everything else is skipped.
"""
from datetime import datetime, timezone
from typing import Dict, Iterable, List
from pydantic import Field
import logging

from domain.geometry.point import Point
from domain.geometry.shapes import LineString
from utils.base_model import ImmutableModel

logger = logging.getLogger(__name__)


class TrackPoint(ImmutableModel):
    """A position fix: longitude, latitude and UTC time."""
    x: float = Field(description="Longitude in decimal degrees, east positive")
    y: float = Field(description="Latitude in decimal degrees, north positive")
    timestamp: float = Field(description="UTC seconds since the Unix epoch")

    @property
    def time(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp, tz=timezone.utc)

    def to_point(self) -> Point:
        return Point(x=self.x, y=self.y)


class TrackParseError(ValueError):
    """
    Raised when some lines of a track could not be parsed.

    Attributes:
        errors: Error message per 1-based line number
        points: The fixes that did parse
    """

    def __init__(self, errors: Dict[int, str], points: List[TrackPoint]):
        self.errors = errors
        self.points = points
        message = "\n".join(f"line {number}: {error}" for number, error in sorted(errors.items()))
        super().__init__(message)


class _TrackParser:
    def __init__(self) -> None:
        self.points: List[TrackPoint] = []
        self.year = 2000
        self.month = 1
        self.day = 1

    def parse_line(self, line: str) -> None:
        if not line:
            return
        if line[0] == "B":
            self.parse_fix(line)
        elif line.startswith("HFDTE"):
            self.parse_date(line)

    def parse_fix(self, line: str) -> None:
        if len(line) < 24:
            raise ValueError(f"B record too short ({len(line)} characters)")
        hour = _number(line[1:3])
        minute = _number(line[3:5])
        second = _number(line[5:7])

        lat = _number(line[7:9]) + _number(line[9:14]) / 60000.0
        hemisphere = line[14]
        if hemisphere == "S":
            lat = -lat
        elif hemisphere != "N":
            raise ValueError(f"Unexpected latitude hemisphere {hemisphere!r}")

        lng = _number(line[15:18]) + _number(line[18:23]) / 60000.0
        hemisphere = line[23]
        if hemisphere == "W":
            lng = -lng
        elif hemisphere != "E":
            raise ValueError(f"Unexpected longitude hemisphere {hemisphere!r}")

        moment = datetime(self.year, self.month, self.day, hour, minute, second, tzinfo=timezone.utc)
        self.points.append(TrackPoint(x=lng, y=lat, timestamp=moment.timestamp()))

    def parse_date(self, line: str) -> None:
        if len(line) < 11:
            raise ValueError(f"HFDTE record too short ({len(line)} characters)")
        day = _number(line[5:7])
        month = _number(line[7:9])
        year = _number(line[9:11])
        year += 2000 if year < 70 else 1900
        # Rejects impossible dates such as 31 February
        datetime(year, month, day)
        self.year, self.month, self.day = year, month, day


def _number(text: str) -> int:
    if not text.isdigit():
        raise ValueError(f"Expected digits, got {text!r}")
    return int(text)


def read(lines: Iterable[str]) -> List[TrackPoint]:
    """
    Parse the fixes of an IGC track.

    Args:
        lines: The lines of the file, with or without line endings

    Returns:
        The fixes in file order

    Raises:
        TrackParseError: If any line failed to parse. The fixes from the
            other lines are still available on the exception.
    """
    parser = _TrackParser()
    errors: Dict[int, str] = {}
    for number, line in enumerate(lines, start=1):
        try:
            parser.parse_line(line.rstrip("\r\n"))
        except ValueError as e:
            errors[number] = str(e)

    if errors:
        logger.warning(f"{len(errors)} IGC lines could not be parsed")
        raise TrackParseError(errors, parser.points)
    logger.debug(f"Read {len(parser.points)} track points")
    return parser.points


def read_file(path: str) -> List[TrackPoint]:
    with open(path, "r", encoding="ascii", errors="replace") as f:
        return read(f)


def to_line_string(points: List[TrackPoint]) -> LineString:
    """Turn a track into a LineString for use with the clipping operations."""
    return LineString(points=[p.to_point() for p in points])
