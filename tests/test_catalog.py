from dataclasses import FrozenInstanceError

import pytest

from ratevault.catalog import (
    CategoryKind,
    DEFAULT_UNITS_BY_CATEGORY,
    UNIT_CATEGORIES,
    Unit,
    UnitCategory,
    default_unit_ids,
    get_category,
    get_unit,
    get_units_for_category,
    list_categories,
)
from ratevault.errors import UnitNotFoundError


def test_catalog_has_all_categories_in_order():
    ids = [category.id for category in list_categories()]
    assert ids == [
        "length", "weight", "volume", "temperature", "area", "speed", "energy",
        "power", "data", "time", "pressure", "angle", "frequency", "force",
        "fuel", "density", "cooking", "illuminance", "radiation",
    ]


def test_unit_ids_unique_within_each_category():
    for category in UNIT_CATEGORIES:
        assert len(category.unit_ids) == len(set(category.unit_ids)), category.id


@pytest.mark.parametrize("category", UNIT_CATEGORIES, ids=lambda c: c.id)
def test_default_units_exist_in_category(category):
    defaults = DEFAULT_UNITS_BY_CATEGORY[category.id]
    assert defaults
    for unit_id in defaults:
        assert category.get_unit(unit_id) is not None, unit_id


@pytest.mark.parametrize("category", UNIT_CATEGORIES, ids=lambda c: c.id)
def test_linear_base_unit_has_unit_multiplier(category):
    if category.kind != CategoryKind.LINEAR:
        pytest.skip("formula based category")
    assert category.base_unit.base_multiplier == 1


def test_category_kinds():
    assert get_category("temperature").kind == CategoryKind.TEMPERATURE
    assert get_category("fuel").kind == CategoryKind.FUEL_ECONOMY
    assert get_category("length").kind == CategoryKind.LINEAR


def test_get_category_unknown_returns_none():
    assert get_category("nope") is None


def test_get_units_for_category():
    units = get_units_for_category("fuel")
    assert [unit.id for unit in units] == ["kmpl", "mpg_us", "mpg_uk", "l100km"]
    assert get_units_for_category("nope") == ()


def test_get_unit_first_match_wins():
    # "c" is Celsius in temperature and the speed of light in speed
    unit, category = get_unit("c")
    assert category.id == "temperature"
    assert unit.name == "Celsius"
    assert get_category("speed").get_unit("c").base_multiplier == 299792458


def test_get_unit_unknown():
    assert get_unit("parsecs-per-fortnight") is None


def test_default_unit_ids_returns_copy():
    ids = default_unit_ids("length")
    ids.append("mi")
    assert default_unit_ids("length") == ["m", "cm", "ft", "in", "km", "mm"]
    assert default_unit_ids("nope") == []


def test_catalog_entries_are_immutable():
    unit = get_category("length").get_unit("m")
    with pytest.raises(FrozenInstanceError):
        unit.base_multiplier = 2


def test_missing_base_unit_raises():
    category = UnitCategory(
        id="broken",
        name="Broken",
        icon="",
        base_unit_id="m",
        units=(Unit("ft", "Foot", "ft", 0.3048),),
    )
    with pytest.raises(UnitNotFoundError) as excinfo:
        category.base_unit
    assert excinfo.value.from_unit_id == "m"
    assert excinfo.value.category_id == "broken"
