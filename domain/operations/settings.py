import math
from pydantic import Field, field_validator
from domain.geometry.constants import POINT_TOLERANCE, PADDING_DELTA
from utils.base_model import ImmutableModel


class ClipperSettings(ImmutableModel):
    """
    Numerical settings for a clipping run.

    Passed explicitly from the dispatcher down to the engine, so different
    tolerances can be used side by side.
    """
    tolerance: float = Field(
        default=POINT_TOLERANCE,
        description="Per-axis tolerance for deciding that two points coincide"
    )
    padding_delta: float = Field(
        default=PADDING_DELTA,
        description="Offset factor for the third vertex added to two-point rings"
    )

    @field_validator("tolerance", "padding_delta")
    @classmethod
    def validate_positive(cls, value: float) -> float:
        """Validate that settings are positive and finite."""
        if not (value > 0 and math.isfinite(value)):
            raise ValueError(f"Setting must be positive and finite, got {value}")
        return value


DEFAULT_SETTINGS = ClipperSettings()
