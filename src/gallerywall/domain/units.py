"""Unit conversion and measurement formatting.

Lengths are stored in inches. These helpers convert to and from the user's
display unit and render values for display.
"""

from __future__ import annotations

import math

from .value_objects import Unit

INCH_TO_CM = 2.54

# Maximum decimals shown per unit: 1/8" is 0.125, centimetres to 1 mm.
_DECIMALS: dict[Unit, int] = {
    Unit.INCHES: 3,
    Unit.CENTIMETERS: 1,
}


def to_display_unit(value: float, unit: Unit | str) -> float:
    """Convert an inch value into the display unit."""
    if Unit(unit) is Unit.CENTIMETERS:
        return value * INCH_TO_CM
    return value


def from_display_unit(value: float, unit: Unit | str) -> float:
    """Convert a value entered in the display unit back to inches."""
    if Unit(unit) is Unit.CENTIMETERS:
        return value / INCH_TO_CM
    return value


def format_number(value: float, max_decimals: int) -> str:
    """Format with up to ``max_decimals`` places, trimming trailing zeros.

    Examples:
        >>> format_number(10.5, 3)
        '10.5'
        >>> format_number(10.0, 3)
        '10'
    """
    text = f"{value:.{max_decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def format_measurement(value: float, unit: Unit | str) -> str:
    """Format a value already in the display unit, with its suffix.

    Examples:
        >>> format_measurement(10.125, "in")
        '10.125"'
        >>> format_measurement(10.55, "cm")
        '10.6 cm'
    """
    unit = Unit(unit)
    number = format_number(value, _DECIMALS[unit])
    if unit is Unit.INCHES:
        return f'{number}"'
    return f"{number} cm"


def format_short(value: float, unit: Unit | str) -> str:
    """Compact variant of format_measurement for ``W x H`` expressions."""
    unit = Unit(unit)
    number = format_number(value, _DECIMALS[unit])
    if unit is Unit.INCHES:
        return f'{number}"'
    return f"{number}cm"


def format_fractional_inches(value: float, denominator: int = 16) -> str:
    """Format inches as a whole number plus a reduced fraction.

    The value is rounded to the nearest ``1/denominator`` inch, which is how
    a tape measure is read.

    Examples:
        >>> format_fractional_inches(12.375)
        '12 3/8"'
        >>> format_fractional_inches(-0.5)
        '-1/2"'
    """
    ticks = round(abs(value) * denominator)
    sign = "-" if value < 0 and ticks else ""
    whole, remainder = divmod(ticks, denominator)
    if remainder == 0:
        return f'{sign}{whole}"'
    divisor = math.gcd(remainder, denominator)
    fraction = f"{remainder // divisor}/{denominator // divisor}"
    if whole == 0:
        return f'{sign}{fraction}"'
    return f'{sign}{whole} {fraction}"'
