"""Pinned units for the active category and their live values."""
import logging
from dataclasses import dataclass
from typing import List, Optional, Union

from .catalog import Unit, UnitCategory, default_unit_ids, get_category
from .errors import ConversionError, UnitNotFoundError
from .settings import load_config
from .storage import MemoryStorage, PinnedUnitStorage
from .units import convert

logger = logging.getLogger(__name__)


@dataclass
class PinnedUnit:
    unit: Unit
    category_id: str
    value: float = 0.0


class PinnedUnitStore:
    """Keeps the pinned units of one category mutually consistent.

    Editing one unit makes it the source of truth: every sibling is
    recomputed from it in the same call.  Only the ordered list of pinned unit
    ids is persisted; values always start at ``0`` after a reload.
    """

    def __init__(self, storage: Optional[PinnedUnitStorage] = None, category_id: Optional[str] = None):
        self.storage = storage if storage is not None else MemoryStorage()
        self._active_category = ""
        self._pinned: List[PinnedUnit] = []
        self.set_category(category_id or load_config().DEFAULT_CATEGORY)

    @property
    def active_category(self) -> str:
        return self._active_category

    @property
    def category(self) -> Optional[UnitCategory]:
        return get_category(self._active_category)

    @property
    def pinned_units(self) -> List[PinnedUnit]:
        return list(self._pinned)

    @property
    def pinned_unit_ids(self) -> List[str]:
        return [pinned.unit.id for pinned in self._pinned]

    def _find(self, unit_id: str) -> Optional[PinnedUnit]:
        for pinned in self._pinned:
            if pinned.unit.id == unit_id:
                return pinned
        return None

    def _persist(self) -> None:
        self.storage.save_pinned_units(self._active_category, self.pinned_unit_ids)

    def get_value(self, unit_id: str) -> Optional[float]:
        pinned = self._find(unit_id)
        return pinned.value if pinned else None

    def set_category(self, category_id: str) -> None:
        """Switch categories and load that category's pinned units with zero values."""
        self._active_category = category_id
        category = get_category(category_id)
        if category is None:
            logger.warning("Unknown unit category %r; nothing pinned", category_id)
            self._pinned = []
            return

        stored = self.storage.get_pinned_units(category_id)
        unit_ids = stored if stored is not None else default_unit_ids(category_id)

        pinned: List[PinnedUnit] = []
        for unit_id in unit_ids:
            unit = category.get_unit(unit_id)
            if unit is None:
                logger.debug("Skipping stored unit %r not in category %s", unit_id, category_id)
                continue
            if any(existing.unit.id == unit_id for existing in pinned):
                continue
            pinned.append(PinnedUnit(unit=unit, category_id=category_id, value=0.0))
        self._pinned = pinned

    def update_value(self, unit_id: str, raw_value: float) -> None:
        """Set one unit's value and recompute every other pinned unit from it.

        A sibling whose conversion fails keeps its previous value.
        """
        for pinned in self._pinned:
            if pinned.unit.id == unit_id:
                pinned.value = raw_value
                continue
            try:
                pinned.value = convert(raw_value, unit_id, pinned.unit.id, self._active_category)
            except ConversionError as exc:
                logger.error("Conversion error from %s to %s: %s", unit_id, pinned.unit.id, exc)

    def pin_unit(self, unit: Union[Unit, str]) -> None:
        category = self.category
        unit_id = unit if isinstance(unit, str) else unit.id
        resolved = category.get_unit(unit_id) if category else None
        if resolved is None or (isinstance(unit, Unit) and resolved != unit):
            raise UnitNotFoundError(unit_id, category_id=self._active_category)

        if self._find(unit_id) is not None:
            return

        initial_value = 0.0
        if self._pinned:
            first = self._pinned[0]
            try:
                initial_value = convert(first.value, first.unit.id, unit_id, self._active_category)
            except ConversionError as exc:
                logger.error("Conversion error from %s to %s: %s", first.unit.id, unit_id, exc)

        self._pinned.append(PinnedUnit(unit=resolved, category_id=self._active_category, value=initial_value))
        self._persist()

    def unpin_unit(self, unit_id: str) -> None:
        self._pinned = [pinned for pinned in self._pinned if pinned.unit.id != unit_id]
        self._persist()

    def get_available_units(self) -> List[Unit]:
        """Catalog units of the active category that are not pinned yet."""
        category = self.category
        if category is None:
            return []
        pinned_ids = set(self.pinned_unit_ids)
        return [unit for unit in category.units if unit.id not in pinned_ids]

    def reset_pinned_units(self) -> None:
        """Forget the stored selection and go back to the category defaults."""
        self.storage.clear_pinned_units(self._active_category)
        self.set_category(self._active_category)


__all__ = ["PinnedUnit", "PinnedUnitStore"]
