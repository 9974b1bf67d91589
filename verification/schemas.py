"""
JSON Schema Definitions for Verification Module.

This module defines the JSON schema for reference conversion tables and the
validation applied when they are loaded.

A reference table lists conversions inside one category:

    {
        "category": "length",
        "description": "NIST length conversions",
        "tolerance": 1e-6,
        "cases": [
            {"value": 1, "from": "mi", "to": "km", "expected": 1.609344},
            {"value": 1, "from": "m", "to": "parsec", "expected_error": "UnitNotFoundError"}
        ]
    }

A case carries either ``expected`` (a number) or ``expected_error`` (the
name of the exception class the engine must raise).
"""

from typing import Any, Dict, List
from dataclasses import dataclass


# =============================================================================
# Reference Schema Definition
# =============================================================================

REFERENCE_SCHEMA = {
    "type": "object",
    "required": ["category", "cases"],
    "properties": {
        "category": {"type": "string", "description": "Category id (length, temperature, ...)"},
        "description": {"type": "string"},
        "source": {"type": "string", "description": "Where the expected values come from"},
        "tolerance": {"type": "number", "description": "Absolute tolerance applied to every case"},
        "cases": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["value", "from", "to"],
                "properties": {
                    "value": {"type": "number"},
                    "from": {"type": "string", "description": "Source unit id"},
                    "to": {"type": "string", "description": "Target unit id"},
                    "expected": {"type": "number"},
                    "expected_error": {"type": "string", "description": "Exception class name"},
                    "tolerance": {"type": "number", "description": "Overrides the table tolerance"},
                    "note": {"type": "string"},
                }
            }
        }
    }
}


# =============================================================================
# Validation Functions
# =============================================================================

@dataclass
class ValidationError:
    """Represents a schema validation error."""
    path: str
    message: str
    value: Any = None


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _validate_tolerance(path: str, value: Any, errors: List[ValidationError]) -> None:
    if not _is_number(value):
        errors.append(ValidationError(path, "tolerance must be a number", value))
    elif value < 0:
        errors.append(ValidationError(path, "tolerance must not be negative", value))


def validate_reference(data: Dict[str, Any]) -> List[ValidationError]:
    """
    Validate reference data against the schema.

    Args:
        data: Reference JSON data dictionary

    Returns:
        List of validation errors (empty if valid)
    """
    errors: List[ValidationError] = []

    if not isinstance(data, dict):
        return [ValidationError("", "Reference data must be an object", type(data))]

    if "category" not in data:
        errors.append(ValidationError("category", "Missing required field 'category'"))
    elif not isinstance(data["category"], str):
        errors.append(ValidationError("category", "category must be a string", data["category"]))

    if "tolerance" in data:
        _validate_tolerance("tolerance", data["tolerance"], errors)

    if "cases" not in data:
        errors.append(ValidationError("cases", "Missing required field 'cases'"))
        return errors
    if not isinstance(data["cases"], list):
        errors.append(ValidationError("cases", "cases must be an array", type(data["cases"])))
        return errors

    for i, case in enumerate(data["cases"]):
        path = f"cases[{i}]"
        if not isinstance(case, dict):
            errors.append(ValidationError(path, "Case entry must be an object"))
            continue

        for req in ["value", "from", "to"]:
            if req not in case:
                errors.append(ValidationError(f"{path}.{req}", f"Missing required field '{req}'"))

        if "value" in case and not _is_number(case["value"]):
            errors.append(ValidationError(f"{path}.value", "value must be a number", case["value"]))
        for key in ["from", "to"]:
            if key in case and not isinstance(case[key], str):
                errors.append(ValidationError(f"{path}.{key}", f"{key} must be a unit id string", case[key]))

        has_expected = "expected" in case
        has_error = "expected_error" in case
        if has_expected == has_error:
            errors.append(ValidationError(
                path,
                "Case needs exactly one of 'expected' or 'expected_error'"
            ))
        elif has_expected and not _is_number(case["expected"]):
            errors.append(ValidationError(f"{path}.expected", "expected must be a number", case["expected"]))
        elif has_error and not isinstance(case["expected_error"], str):
            errors.append(ValidationError(
                f"{path}.expected_error",
                "expected_error must be an exception class name",
                case["expected_error"]
            ))

        if "tolerance" in case:
            _validate_tolerance(f"{path}.tolerance", case["tolerance"], errors)

    return errors


# =============================================================================
# Category Name Normalization
# =============================================================================

CATEGORY_ALIASES = {
    "distance": "length",
    "mass": "weight",
    "temp": "temperature",
    "fuel_economy": "fuel",
    "fuel_consumption": "fuel",
    "storage": "data",
    "digital_storage": "data",
    "light": "illuminance",
}


def normalize_category_name(name: str) -> str:
    """
    Normalize a category name to the catalog's id.

    Args:
        name: Category name from a reference file (e.g., 'Mass', 'fuel-economy')

    Returns:
        Catalog category id (e.g., 'weight', 'fuel')
    """
    normalized = name.strip().lower().replace("-", "_").replace(" ", "_")
    return CATEGORY_ALIASES.get(normalized, normalized)


__all__ = [
    "REFERENCE_SCHEMA",
    "ValidationError",
    "validate_reference",
    "normalize_category_name",
    "CATEGORY_ALIASES",
]
