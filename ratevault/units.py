"""Unit conversion logic for RateVault."""
import math
from typing import Callable, Dict, Tuple

from .catalog import CategoryKind, get_category
from .errors import (
    CategoryNotFoundError,
    UnitNotFoundError,
    UnknownFuelUnitError,
    UnknownTemperatureUnitError,
)

_Formula = Callable[[float], float]


class UnitConverter:
    """Converts values between units of the same catalog category."""

    # Results are rounded to this many decimal places
    PRECISION = 6
    _SCALE = 10 ** PRECISION

    # Temperature: (to Celsius, from Celsius)
    TEMPERATURE_FORMULAS: Dict[str, Tuple[_Formula, _Formula]] = {
        "c": (lambda v: v, lambda c: c),
        "f": (lambda v: (v - 32) * 5 / 9, lambda c: c * 9 / 5 + 32),
        "k": (lambda v: v - 273.15, lambda c: c + 273.15),
        "r": (lambda v: (v - 491.67) * 5 / 9, lambda c: c * 9 / 5 + 491.67),
        "re": (lambda v: v * 5 / 4, lambda c: c * 4 / 5),
        "n": (lambda v: v * 100 / 33, lambda c: c * 33 / 100),
        "de": (lambda v: 100 - v * 2 / 3, lambda c: (100 - c) * 3 / 2),
        "ro": (lambda v: (v - 7.5) * 40 / 21, lambda c: c * 21 / 40 + 7.5),
    }

    # Fuel economy: km/L per unit
    FACTOR_MPG_US = 0.425144
    FACTOR_MPG_UK = 0.354006
    FUEL_FACTORS: Dict[str, float] = {
        "kmpl": 1.0,
        "mpg_us": FACTOR_MPG_US,
        "mpg_uk": FACTOR_MPG_UK,
    }
    # Liters per 100 km is the reciprocal of km/L
    FUEL_RECIPROCAL_UNIT = "l100km"

    @classmethod
    def round_result(cls, value: float) -> float:
        """Round half-up to :attr:`PRECISION` decimals; non-finite values pass through."""
        scaled = value * cls._SCALE
        if not math.isfinite(scaled):
            return value
        return math.floor(scaled + 0.5) / cls._SCALE

    @classmethod
    def convert(cls, value: float, from_unit_id: str, to_unit_id: str, category_id: str) -> float:
        if from_unit_id == to_unit_id:
            return value

        category = get_category(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)

        from_unit = category.get_unit(from_unit_id)
        to_unit = category.get_unit(to_unit_id)
        if from_unit is None or to_unit is None:
            raise UnitNotFoundError(from_unit_id, to_unit_id, category_id)

        if category.kind == CategoryKind.TEMPERATURE:
            return cls.convert_temperature(value, from_unit_id, to_unit_id)
        if category.kind == CategoryKind.FUEL_ECONOMY:
            return cls.convert_fuel_economy(value, from_unit_id, to_unit_id)

        base_value = value * from_unit.base_multiplier
        return cls.round_result(base_value / to_unit.base_multiplier)

    @classmethod
    def to_celsius(cls, value: float, unit_id: str) -> float:
        try:
            to_celsius, _ = cls.TEMPERATURE_FORMULAS[unit_id]
        except KeyError:
            raise UnknownTemperatureUnitError(unit_id) from None
        return to_celsius(value)

    @classmethod
    def from_celsius(cls, celsius: float, unit_id: str) -> float:
        try:
            _, from_celsius = cls.TEMPERATURE_FORMULAS[unit_id]
        except KeyError:
            raise UnknownTemperatureUnitError(unit_id) from None
        return from_celsius(celsius)

    @classmethod
    def convert_temperature(cls, value: float, from_unit_id: str, to_unit_id: str) -> float:
        if from_unit_id == to_unit_id:
            return value
        celsius = cls.to_celsius(value, from_unit_id)
        return cls.round_result(cls.from_celsius(celsius, to_unit_id))

    @classmethod
    def to_km_per_liter(cls, value: float, unit_id: str) -> float:
        if unit_id == cls.FUEL_RECIPROCAL_UNIT:
            # Zero or negative consumption has no meaningful reciprocal
            return 100 / value if value > 0 else 0.0
        try:
            return value * cls.FUEL_FACTORS[unit_id]
        except KeyError:
            raise UnknownFuelUnitError(unit_id) from None

    @classmethod
    def from_km_per_liter(cls, km_per_liter: float, unit_id: str) -> float:
        if unit_id == cls.FUEL_RECIPROCAL_UNIT:
            return 100 / km_per_liter if km_per_liter > 0 else 0.0
        try:
            return km_per_liter / cls.FUEL_FACTORS[unit_id]
        except KeyError:
            raise UnknownFuelUnitError(unit_id) from None

    @classmethod
    def convert_fuel_economy(cls, value: float, from_unit_id: str, to_unit_id: str) -> float:
        if from_unit_id == to_unit_id:
            return value
        km_per_liter = cls.to_km_per_liter(value, from_unit_id)
        return cls.round_result(cls.from_km_per_liter(km_per_liter, to_unit_id))


def convert(value: float, from_unit_id: str, to_unit_id: str, category_id: str) -> float:
    """Convert ``value`` from one unit to another inside ``category_id``."""
    return UnitConverter.convert(value, from_unit_id, to_unit_id, category_id)


__all__ = ["UnitConverter", "convert"]
