import pytest
from pydantic import ValidationError
from domain.geometry.constants import PADDING_DELTA, POINT_TOLERANCE
from domain.operations.settings import ClipperSettings, DEFAULT_SETTINGS


class TestClipperSettings:
    def test_defaults(self):
        assert DEFAULT_SETTINGS.tolerance == POINT_TOLERANCE
        assert DEFAULT_SETTINGS.padding_delta == PADDING_DELTA

    @pytest.mark.parametrize("field", ["tolerance", "padding_delta"])
    @pytest.mark.parametrize("value", [0.0, -1e-6, float('inf'), float('nan')])
    def test_rejects_invalid_values(self, field, value):
        with pytest.raises(ValidationError):
            ClipperSettings(**{field: value})

    def test_with_changes(self):
        loose = DEFAULT_SETTINGS.with_changes(tolerance=1e-6)
        assert loose.tolerance == 1e-6
        assert loose.padding_delta == DEFAULT_SETTINGS.padding_delta
