"""Core interfaces for the RateVault unit converter."""

from .catalog import (
    CategoryKind,
    Unit,
    UnitCategory,
    UNIT_CATEGORIES,
    DEFAULT_UNITS_BY_CATEGORY,
    get_category,
    get_unit,
    get_units_for_category,
    list_categories,
)
from .errors import (
    ConversionError,
    CategoryNotFoundError,
    UnitNotFoundError,
    UnknownTemperatureUnitError,
    UnknownFuelUnitError,
)
from .units import UnitConverter, convert
from .formatting import format_value, parse_number_string
from .config import ConverterConfiguration
from .storage import PinnedUnitStorage, MemoryStorage, JsonFileStorage
from .pinned import PinnedUnit, PinnedUnitStore

__version__ = "1.0.0"

__all__ = [
    "CategoryKind",
    "Unit",
    "UnitCategory",
    "UNIT_CATEGORIES",
    "DEFAULT_UNITS_BY_CATEGORY",
    "get_category",
    "get_unit",
    "get_units_for_category",
    "list_categories",
    "ConversionError",
    "CategoryNotFoundError",
    "UnitNotFoundError",
    "UnknownTemperatureUnitError",
    "UnknownFuelUnitError",
    "UnitConverter",
    "convert",
    "format_value",
    "parse_number_string",
    "ConverterConfiguration",
    "PinnedUnitStorage",
    "MemoryStorage",
    "JsonFileStorage",
    "PinnedUnit",
    "PinnedUnitStore",
]
