import logging

import pytest

from ratevault import PinnedUnitStore, UnitNotFoundError, convert
from ratevault.catalog import get_category
from ratevault.errors import ConversionError
from ratevault.storage import JsonFileStorage, MemoryStorage


def _values(store):
    return {pinned.unit.id: pinned.value for pinned in store.pinned_units}


def test_length_scenario():
    store = PinnedUnitStore(MemoryStorage({"length": ["m", "cm", "ft"]}), "length")
    store.update_value("m", 1)
    values = _values(store)
    assert values["m"] == 1
    assert values["cm"] == 100
    assert values["ft"] == pytest.approx(3.28084)


def test_temperature_scenario():
    store = PinnedUnitStore(MemoryStorage({"temperature": ["c", "f", "k"]}), "temperature")
    store.update_value("f", 98.6)
    values = _values(store)
    assert values["f"] == 98.6
    assert values["c"] == pytest.approx(37.0)
    assert values["k"] == pytest.approx(310.15)


@pytest.mark.parametrize(
    "category_id,unit_ids",
    [
        ("length", ["km", "mi", "ft", "nmi"]),
        ("weight", ["kg", "lb", "oz"]),
        ("temperature", ["k", "c", "r", "de"]),
        ("fuel", ["mpg_us", "kmpl", "l100km", "mpg_uk"]),
    ],
)
def test_update_keeps_siblings_consistent(category_id, unit_ids):
    store = PinnedUnitStore(MemoryStorage({category_id: unit_ids}), category_id)
    source = unit_ids[0]
    store.update_value(source, 100)
    values = _values(store)
    assert values[source] == 100
    for unit_id in unit_ids[1:]:
        assert values[unit_id] == convert(100, source, unit_id, category_id)


def test_defaults_used_when_nothing_stored():
    store = PinnedUnitStore(MemoryStorage(), "temperature")
    assert store.pinned_unit_ids == ["c", "f", "k", "r"]
    assert all(pinned.value == 0 for pinned in store.pinned_units)
    assert all(pinned.category_id == "temperature" for pinned in store.pinned_units)


def test_stored_empty_selection_stays_empty():
    store = PinnedUnitStore(MemoryStorage({"length": []}), "length")
    assert store.pinned_units == []
    assert len(store.get_available_units()) == len(get_category("length").units)


def test_stored_ids_are_filtered():
    storage = MemoryStorage({"length": ["km", "lb", "km", "mi"]})
    store = PinnedUnitStore(storage, "length")
    assert store.pinned_unit_ids == ["km", "mi"]


def test_default_category_from_environment(monkeypatch):
    monkeypatch.setenv("RATEVAULT_DEFAULT_CATEGORY", "fuel")
    store = PinnedUnitStore(MemoryStorage())
    assert store.active_category == "fuel"
    assert store.pinned_unit_ids == ["kmpl", "mpg_us", "l100km", "mpg_uk"]


def test_unknown_category_pins_nothing(caplog):
    with caplog.at_level(logging.WARNING, logger="ratevault.pinned"):
        store = PinnedUnitStore(MemoryStorage(), "nope")
    assert store.pinned_units == []
    assert store.category is None
    assert store.get_available_units() == []
    assert "Unknown unit category" in caplog.text


def test_set_category_resets_values():
    store = PinnedUnitStore(MemoryStorage(), "length")
    store.update_value("m", 5)
    store.set_category("weight")
    store.set_category("length")
    assert all(pinned.value == 0 for pinned in store.pinned_units)


def test_pin_unit_seeds_from_first_pinned():
    storage = MemoryStorage({"length": ["m", "cm"]})
    store = PinnedUnitStore(storage, "length")
    store.update_value("m", 2)

    store.pin_unit("ft")
    assert store.pinned_unit_ids == ["m", "cm", "ft"]
    assert store.get_value("ft") == convert(2, "m", "ft", "length")
    assert storage.get_pinned_units("length") == ["m", "cm", "ft"]


def test_pin_unit_accepts_unit_objects():
    store = PinnedUnitStore(MemoryStorage({"length": []}), "length")
    store.pin_unit(get_category("length").get_unit("mi"))
    assert store.pinned_unit_ids == ["mi"]
    assert store.get_value("mi") == 0


def test_pin_unit_twice_is_a_no_op():
    storage = MemoryStorage({"length": ["m"]})
    store = PinnedUnitStore(storage, "length")
    store.pin_unit("m")
    assert store.pinned_unit_ids == ["m"]


def test_pin_unit_from_other_category_rejected():
    store = PinnedUnitStore(MemoryStorage(), "length")
    with pytest.raises(UnitNotFoundError):
        store.pin_unit("lb")
    with pytest.raises(UnitNotFoundError):
        # Same id, but the speed-of-light unit is not Celsius
        PinnedUnitStore(MemoryStorage(), "temperature").pin_unit(get_category("speed").get_unit("c"))


def test_unpin_unit_persists():
    storage = MemoryStorage()
    store = PinnedUnitStore(storage, "length")
    store.unpin_unit("cm")
    assert "cm" not in store.pinned_unit_ids
    assert storage.get_pinned_units("length") == ["m", "ft", "in", "km", "mm"]
    assert any(unit.id == "cm" for unit in store.get_available_units())


def test_reload_restores_ids_but_not_values(tmp_path):
    path = tmp_path / "ratevault-data.json"
    store = PinnedUnitStore(JsonFileStorage(path), "length")
    store.unpin_unit("mm")
    store.pin_unit("mi")
    store.update_value("m", 1609.344)
    assert store.get_value("mi") == 1

    reloaded = PinnedUnitStore(JsonFileStorage(path), "length")
    assert reloaded.pinned_unit_ids == store.pinned_unit_ids
    # Only ids are persisted; every value starts at zero again
    assert all(pinned.value == 0 for pinned in reloaded.pinned_units)


def test_reset_pinned_units_restores_defaults():
    storage = MemoryStorage({"length": ["mi"]})
    store = PinnedUnitStore(storage, "length")
    store.reset_pinned_units()
    assert store.pinned_unit_ids == ["m", "cm", "ft", "in", "km", "mm"]
    assert storage.get_pinned_units("length") is None


def test_get_value_for_unpinned_unit():
    store = PinnedUnitStore(MemoryStorage(), "length")
    assert store.get_value("mi") is None


def test_failed_sibling_keeps_previous_value(monkeypatch, caplog):
    store = PinnedUnitStore(MemoryStorage({"length": ["m", "cm", "ft"]}), "length")
    store.update_value("m", 1)

    def flaky_convert(value, from_unit_id, to_unit_id, category_id):
        if to_unit_id == "ft":
            raise ConversionError("boom")
        return convert(value, from_unit_id, to_unit_id, category_id)

    monkeypatch.setattr("ratevault.pinned.convert", flaky_convert)
    with caplog.at_level(logging.ERROR, logger="ratevault.pinned"):
        store.update_value("m", 2)

    values = _values(store)
    assert values["m"] == 2
    assert values["cm"] == 200
    assert values["ft"] == pytest.approx(3.28084)
    assert "Conversion error from m to ft" in caplog.text
