from enum import Enum, IntEnum, auto


class Operation(IntEnum):
    """Boolean operation to perform; DIFFERENCE is subject minus clipping."""
    UNION = 0
    INTERSECTION = 1
    DIFFERENCE = 2
    XOR = 3


class OutputKind(Enum):
    """Shape of the geometry an operation produces."""
    POLYGON = auto()  # areal result
    LINE = auto()     # lines clipped by a polygon
    POINT = auto()    # crossings of two sets of lines


class EdgeType(Enum):
    """How an edge relates to an overlapping edge of the other polygon."""
    NORMAL = auto()
    NON_CONTRIBUTING = auto()
    SAME_TRANSITION = auto()
    DIFFERENT_TRANSITION = auto()
