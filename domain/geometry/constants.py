# domain/geometry/constants.py
"""Constants for geometric calculations."""

# Per-axis tolerance used by the clipping engine to decide two points coincide.
# Scaled by max(1, |a|, |b|), so it acts as an absolute tolerance near the
# origin and a relative one for large coordinates.
POINT_TOLERANCE = 1e-9

# Offset factor for the synthetic third vertex added to two-point rings
PADDING_DELTA = 1e-5
