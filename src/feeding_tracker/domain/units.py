"""Units of measurement and conversions between them."""

from enum import Enum


class UnitOfMeasurement(Enum):
    """Supported feeding units with their milliliter factor and display decimals."""

    OUNCE = ("oz", 29.5735295625, 1)
    MILLILITER = ("ml", 1.0, 0)

    def __init__(self, abbreviation: str, milliliters: float, decimals: int) -> None:
        self.abbreviation = abbreviation
        self.milliliters = milliliters
        self.decimals = decimals

    @classmethod
    def from_abbreviation(cls, text: str) -> "UnitOfMeasurement":
        """Return the unit for an abbreviation or enum name like "oz" or "OUNCE"."""
        cleaned = text.strip().lower()
        for unit in cls:
            if cleaned in {unit.abbreviation, unit.name.lower()}:
                return unit
        raise ValueError(f"Unknown unit of measurement: {text!r}")


def convert(
    quantity: float, from_unit: UnitOfMeasurement, to_unit: UnitOfMeasurement
) -> float:
    """Convert a quantity between units through milliliters."""
    _require_unit(from_unit)
    _require_unit(to_unit)
    if from_unit is to_unit:
        return quantity
    return quantity * from_unit.milliliters / to_unit.milliliters


def format_quantity(quantity: float, unit: UnitOfMeasurement) -> str:
    """Render a quantity with the unit's fixed number of decimals."""
    _require_unit(unit)
    rounded = round(quantity, unit.decimals)
    if rounded == 0:
        rounded = 0.0
    return f"{rounded:.{unit.decimals}f}"


def format_with_unit(quantity: float, unit: UnitOfMeasurement) -> str:
    """Render a quantity followed by the unit abbreviation, e.g. ``4.0oz``."""
    return f"{format_quantity(quantity, unit)}{unit.abbreviation}"


def _require_unit(unit: object) -> None:
    if not isinstance(unit, UnitOfMeasurement):
        raise TypeError(f"Expected UnitOfMeasurement, got {unit!r}")
