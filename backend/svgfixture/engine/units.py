"""Linear distance units used for path data, model space, spacing and density.

Inches are the pivot: every unit carries its scale factor as units-per-inch.
"""

from __future__ import annotations

import enum


class DistanceUnit(enum.Enum):
    """Fixed table of distance units: (name, singular, abbreviation, units per inch)."""

    INCHES = ("Inches", "Inch", "in", 1.0)
    FEET = ("Feet", "Foot", "ft", 1 / 12.0)
    YARDS = ("Yards", "Yard", "yd", 1 / 36.0)
    MILLIMETERS = ("Millimeters", "Millimeter", "mm", 25.4)
    CENTIMETERS = ("Centimeters", "Centimeter", "cm", 2.54)
    METERS = ("Meters", "Meter", "m", 0.0254)

    def __init__(self, label: str, singular: str, abbrev: str, scale_factor: float) -> None:
        self.label = label
        self.singular = singular
        self.abbrev = abbrev
        self.scale_factor = scale_factor

    def __str__(self) -> str:
        return self.label

    @classmethod
    def parse(cls, text: str | DistanceUnit) -> DistanceUnit:
        """Look up a unit by enum name, label, singular or abbreviation (case-insensitive)."""
        if isinstance(text, DistanceUnit):
            return text
        key = text.strip().lower()
        for unit in cls:
            if key in (unit.name.lower(), unit.label.lower(), unit.singular.lower(), unit.abbrev):
                return unit
        raise ValueError(f"Unknown distance unit: {text!r}")


def convert(source: DistanceUnit, target: DistanceUnit, value: float) -> float:
    """Convert a distance between units. Same-unit conversion returns ``value`` untouched."""
    if source is target:
        return value
    return value / source.scale_factor * target.scale_factor


def singular_options() -> list[str]:
    return [unit.singular for unit in DistanceUnit]
