"""Exceptions raised by the conversion engine."""
from typing import Optional


class ConversionError(ValueError):
    """Base class for invalid conversion requests."""


class CategoryNotFoundError(ConversionError):
    def __init__(self, category_id: str):
        self.category_id = category_id
        super().__init__(f"Category {category_id} not found")


class UnitNotFoundError(ConversionError):
    def __init__(self, from_unit_id: str, to_unit_id: Optional[str] = None, category_id: Optional[str] = None):
        self.from_unit_id = from_unit_id
        self.to_unit_id = to_unit_id
        self.category_id = category_id
        if to_unit_id is None:
            message = f"Unit not found: {from_unit_id}"
        else:
            message = f"Units not found: {from_unit_id} or {to_unit_id}"
        if category_id:
            message += f" (category {category_id})"
        super().__init__(message)


class UnknownTemperatureUnitError(ConversionError):
    def __init__(self, unit_id: str):
        self.unit_id = unit_id
        super().__init__(f"Unknown temperature unit: {unit_id}")


class UnknownFuelUnitError(ConversionError):
    def __init__(self, unit_id: str):
        self.unit_id = unit_id
        super().__init__(f"Unknown fuel economy unit: {unit_id}")


__all__ = [
    "ConversionError",
    "CategoryNotFoundError",
    "UnitNotFoundError",
    "UnknownTemperatureUnitError",
    "UnknownFuelUnitError",
]
