"""Serialization helpers for saved converter preferences."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, IO, List, Optional, Union

from .formatting import INDIAN, INTERNATIONAL

SCHEMA_VERSION = 1
_DEFAULT_CATEGORY = "length"
_NUMBER_SYSTEM_ALIASES = {
    "international": INTERNATIONAL,
    "western": INTERNATIONAL,
    "en_us": INTERNATIONAL,
    "indian": INDIAN,
    "eastern": INDIAN,
    "en_in": INDIAN,
}

_JSONSource = Union[str, Path, IO[str]]


def normalize_number_system(value: Any) -> str:
    """Return a canonical number system name.

    Older saves used ``western``/``eastern``; anything unrecognised falls back
    to international grouping.
    """

    if not isinstance(value, str):
        return INTERNATIONAL

    normalized = value.strip().lower().replace("-", "_").replace(" ", "_")
    return _NUMBER_SYSTEM_ALIASES.get(normalized, INTERNATIONAL)


def _pinned_units_from_data(raw: Any) -> Dict[str, List[str]]:
    pinned: Dict[str, List[str]] = {}
    if not isinstance(raw, dict):
        return pinned
    for category_id, unit_ids in raw.items():
        if not isinstance(unit_ids, (list, tuple)):
            continue
        pinned[str(category_id)] = [unit_id for unit_id in unit_ids if isinstance(unit_id, str)]
    return pinned


def _schema_version_from_data(raw: Any) -> int:
    if isinstance(raw, bool) or not isinstance(raw, (int, str)):
        return SCHEMA_VERSION
    try:
        return int(raw)
    except ValueError:
        return SCHEMA_VERSION


@dataclass
class ConverterConfiguration:
    """Everything the converter persists between sessions.

    Only *which* units are pinned is stored, never their values.
    """

    pinned_units_by_category: Dict[str, List[str]] = field(default_factory=dict)
    number_system: str = INTERNATIONAL
    active_category: str = _DEFAULT_CATEGORY
    schema_version: int = SCHEMA_VERSION

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representing the configuration."""

        return {
            "schema_version": self.schema_version,
            "active_category": self.active_category,
            "number_system": self.number_system,
            "pinned_units_by_category": {
                category_id: list(unit_ids)
                for category_id, unit_ids in self.pinned_units_by_category.items()
            },
        }

    def to_json(self, *, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ConverterConfiguration":
        """Create a configuration from a dictionary.

        The camelCase ``pinnedUnitsByCategory`` key written by the browser
        client is accepted as well.
        """

        raw_pinned = data.get("pinned_units_by_category", data.get("pinnedUnitsByCategory", {}))
        active_category = data.get("active_category", _DEFAULT_CATEGORY)
        return cls(
            pinned_units_by_category=_pinned_units_from_data(raw_pinned),
            number_system=normalize_number_system(data.get("number_system", data.get("numberSystem"))),
            active_category=str(active_category) if active_category else _DEFAULT_CATEGORY,
            schema_version=_schema_version_from_data(data.get("schema_version")),
        )

    @classmethod
    def from_json(cls, source: _JSONSource) -> "ConverterConfiguration":
        """Load a configuration from a JSON file path or file-like object."""

        if hasattr(source, "read"):
            data = json.load(source)  # type: ignore[arg-type]
        else:
            path = Path(source)
            with path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        if not isinstance(data, dict):
            raise ValueError("Converter configuration JSON must contain an object at the top level")
        return cls.from_dict(data)

    def save(self, target: Union[str, Path, IO[str]], *, indent: Optional[int] = 2) -> None:
        """Write the configuration to disk or a file-like object."""

        payload = self.to_json(indent=indent)
        if hasattr(target, "write"):
            target.write(payload)  # type: ignore[arg-type]
        else:
            path = Path(target)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(payload, encoding="utf-8")


__all__ = [
    "ConverterConfiguration",
    "SCHEMA_VERSION",
    "normalize_number_system",
]
