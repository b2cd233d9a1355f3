"""Tests for angle conversion helpers."""

import numpy as np
import pytest

from telescope_lookup.utils.coordinates import (
    format_angle,
    hours_to_radians,
    radians_to_degrees,
    radians_to_sexagesimal,
    sexagesimal_to_radians,
)


class TestSexagesimal:
    """Test sexagesimal formatting and parsing."""

    def test_positive(self):
        rad = np.radians(19 + 49 / 60 + 22.11 / 3600)
        assert radians_to_sexagesimal(rad) == "19 49 22.11"

    def test_negative(self):
        rad = -np.radians(155 + 28 / 60 + 37.20 / 3600)
        assert radians_to_sexagesimal(rad) == "-155 28 37.20"

    def test_separator(self):
        rad = np.radians(19 + 49 / 60 + 22.11 / 3600)
        assert radians_to_sexagesimal(rad, sep=":") == "19:49:22.11"

    def test_separator_is_literal(self):
        """Separators that astropy treats as style names are still joined literally."""
        rad = np.radians(19 + 49 / 60 + 22.11 / 3600)
        assert radians_to_sexagesimal(rad, sep="dms") == "19dms49dms22.11"
        assert radians_to_sexagesimal(rad, sep="fromunit") == "19fromunit49fromunit22.11"
        assert radians_to_sexagesimal(-rad, sep="") == "-194922.11"

    def test_returns_builtin_str(self):
        assert type(radians_to_sexagesimal(0.5)) is str

    def test_parse(self):
        assert sexagesimal_to_radians("-155 28 37.20") == pytest.approx(
            -np.radians(155 + 28 / 60 + 37.20 / 3600))


class TestFormatAngle:
    """Test format selection."""

    def test_radians_by_default(self):
        assert format_angle(0.5) == 0.5

    def test_degrees(self):
        assert format_angle(np.pi, "d") == pytest.approx(180.0)
        assert format_angle(np.pi, "deg") == pytest.approx(180.0)

    def test_sexagesimal(self):
        rad = np.radians(19 + 49 / 60 + 22.11 / 3600)
        assert format_angle(rad, "s") == "19 49 22.11"
        assert format_angle(rad, "sexagesimal", sep="-") == "19-49-22.11"

    def test_none_passes_through(self):
        assert format_angle(None, "s") is None

    def test_unknown_format(self):
        with pytest.raises(ValueError):
            format_angle(1.0, "x")


class TestUnits:
    """Test unit helpers."""

    def test_hours(self):
        assert hours_to_radians(12.0) == pytest.approx(np.pi)

    def test_degrees(self):
        assert radians_to_degrees(np.pi / 2) == pytest.approx(90.0)
