"""Unit tests for unit conversion and measurement formatting."""

import pytest

from gallerywall.domain.units import (
    INCH_TO_CM,
    format_fractional_inches,
    format_measurement,
    format_number,
    format_short,
    from_display_unit,
    to_display_unit,
)
from gallerywall.domain.value_objects import Unit


class TestConversion:
    """Tests for converting between inches and the display unit."""

    def test_inches_is_identity(self) -> None:
        """Inches are the stored unit, so nothing changes."""
        assert to_display_unit(12.5, Unit.INCHES) == 12.5
        assert from_display_unit(12.5, "in") == 12.5

    def test_to_centimeters(self) -> None:
        """Ten inches are 25.4 centimetres."""
        assert to_display_unit(10.0, Unit.CENTIMETERS) == pytest.approx(25.4)

    def test_from_centimeters(self) -> None:
        """Centimetre input is converted back to inches."""
        assert from_display_unit(25.4, "cm") == pytest.approx(10.0)

    def test_conversion_factor(self) -> None:
        assert INCH_TO_CM == 2.54

    def test_unknown_unit_rejected(self) -> None:
        """Only inches and centimetres are supported."""
        with pytest.raises(ValueError):
            to_display_unit(1.0, "mm")


class TestFormatNumber:
    """Tests for format_number."""

    def test_trailing_zeros_trimmed(self) -> None:
        assert format_number(10.5, 3) == "10.5"
        assert format_number(10.0, 3) == "10"

    def test_rounds_to_max_decimals(self) -> None:
        assert format_number(1.23456, 2) == "1.23"

    def test_negative_zero_is_zero(self) -> None:
        """Values that round to zero never show a minus sign."""
        assert format_number(-0.0001, 3) == "0"


class TestFormatMeasurement:
    """Tests for format_measurement and format_short."""

    def test_inches_suffix(self) -> None:
        assert format_measurement(10.125, Unit.INCHES) == '10.125"'

    def test_centimeters_one_decimal(self) -> None:
        assert format_measurement(25.4, "cm") == "25.4 cm"
        assert format_measurement(30.0, "cm") == "30 cm"

    def test_negative_values_keep_sign(self) -> None:
        assert format_measurement(-3.5, "in") == '-3.5"'

    def test_short_form(self) -> None:
        """The short form drops the space before the centimetre suffix."""
        assert format_short(12.0, "in") == '12"'
        assert format_short(30.48, "cm") == "30.5cm"


class TestFractionalInches:
    """Tests for tape-measure fractions."""

    def test_eighths(self) -> None:
        assert format_fractional_inches(12.375) == '12 3/8"'

    def test_sixteenths(self) -> None:
        assert format_fractional_inches(2.0625) == '2 1/16"'

    def test_whole_number(self) -> None:
        assert format_fractional_inches(12.0) == '12"'

    def test_fraction_only(self) -> None:
        assert format_fractional_inches(0.75) == '3/4"'

    def test_negative(self) -> None:
        assert format_fractional_inches(-0.5) == '-1/2"'

    def test_rounds_to_zero(self) -> None:
        """Tiny values round to zero without a sign."""
        assert format_fractional_inches(-0.01) == '0"'

    def test_custom_denominator(self) -> None:
        assert format_fractional_inches(1.3, denominator=4) == '1 1/4"'
