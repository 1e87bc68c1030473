from typing import Any


class UnsupportedGeometryKind(ValueError):
    """Raised when an operand is not a polygon, multi-polygon, line string or multi-line-string."""

    def __init__(self, geometry: Any):
        self.geometry_type = type(geometry).__name__
        super().__init__(f"Unsupported geometry type: {self.geometry_type}")
