"""Durable storage for pinned unit ids.

Storage only ever sees ``category_id -> [unit_id, ...]`` plus the preferred
number system.  Values are never written.
"""
import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from .config import ConverterConfiguration, normalize_number_system

logger = logging.getLogger(__name__)


class PinnedUnitStorage:
    """Interface for the key-value store behind :class:`PinnedUnitStore`."""

    def load(self) -> ConverterConfiguration:
        raise NotImplementedError

    def store(self, configuration: ConverterConfiguration) -> None:
        raise NotImplementedError

    def get_pinned_units(self, category_id: str) -> Optional[List[str]]:
        """Return the stored ids for a category, or ``None`` if nothing was stored."""
        pinned = self.load().pinned_units_by_category.get(category_id)
        return list(pinned) if pinned is not None else None

    def save_pinned_units(self, category_id: str, unit_ids: Sequence[str]) -> None:
        configuration = self.load()
        configuration.pinned_units_by_category[category_id] = list(unit_ids)
        self.store(configuration)

    def clear_pinned_units(self, category_id: str) -> None:
        configuration = self.load()
        if configuration.pinned_units_by_category.pop(category_id, None) is not None:
            self.store(configuration)

    def get_number_system(self) -> str:
        return self.load().number_system

    def save_number_system(self, number_system: str) -> None:
        configuration = self.load()
        configuration.number_system = normalize_number_system(number_system)
        self.store(configuration)

    def get_active_category(self) -> str:
        return self.load().active_category

    def save_active_category(self, category_id: str) -> None:
        configuration = self.load()
        configuration.active_category = category_id
        self.store(configuration)


class MemoryStorage(PinnedUnitStorage):
    def __init__(self, pinned_units_by_category: Optional[Dict[str, List[str]]] = None):
        self._configuration = ConverterConfiguration(
            pinned_units_by_category={
                key: list(value) for key, value in (pinned_units_by_category or {}).items()
            }
        )

    def load(self) -> ConverterConfiguration:
        return ConverterConfiguration.from_dict(self._configuration.to_dict())

    def store(self, configuration: ConverterConfiguration) -> None:
        self._configuration = ConverterConfiguration.from_dict(configuration.to_dict())


class JsonFileStorage(PinnedUnitStorage):
    """Keeps the configuration in a single JSON file.

    A missing file reads as an empty configuration.  A corrupt file is logged
    and also read as empty so the converter stays usable; the next write
    replaces it.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> ConverterConfiguration:
        if not self.path.exists():
            return ConverterConfiguration()
        try:
            return ConverterConfiguration.from_json(self.path)
        except (OSError, ValueError) as exc:
            # json.JSONDecodeError is a ValueError
            logger.warning("Ignoring unreadable converter data in %s: %s", self.path, exc)
            return ConverterConfiguration()

    def store(self, configuration: ConverterConfiguration) -> None:
        configuration.save(self.path)
        logger.debug("Saved converter data to %s", self.path)


__all__ = [
    "PinnedUnitStorage",
    "MemoryStorage",
    "JsonFileStorage",
]
