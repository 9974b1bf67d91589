import io
import json

import pytest

from ratevault.config import ConverterConfiguration, SCHEMA_VERSION, normalize_number_system
from ratevault.settings import Config, load_config


def test_configuration_defaults():
    config = ConverterConfiguration()
    assert config.pinned_units_by_category == {}
    assert config.number_system == "international"
    assert config.active_category == "length"
    assert config.schema_version == SCHEMA_VERSION


def test_configuration_round_trip_through_json():
    config = ConverterConfiguration(
        pinned_units_by_category={"length": ["m", "ft"], "temperature": []},
        number_system="indian",
        active_category="temperature",
    )
    buffer = io.StringIO()
    config.save(buffer)
    buffer.seek(0)

    restored = ConverterConfiguration.from_json(buffer)
    assert restored == config


def test_to_dict_keeps_non_ascii_unit_ids():
    config = ConverterConfiguration(pinned_units_by_category={"length": ["μm"]})
    assert "μm" in config.to_json()
    assert config.to_dict()["pinned_units_by_category"] == {"length": ["μm"]}


def test_from_dict_accepts_camel_case_keys():
    data = {"pinnedUnitsByCategory": {"length": ["km", "mi"]}, "numberSystem": "eastern"}
    config = ConverterConfiguration.from_dict(data)
    assert config.pinned_units_by_category == {"length": ["km", "mi"]}
    assert config.number_system == "indian"
    # Documents without a schema_version are version 1
    assert config.schema_version == 1


@pytest.mark.parametrize("raw,expected", [(2, 2), ("2", 2), (None, SCHEMA_VERSION), ([1], SCHEMA_VERSION), ("v2", SCHEMA_VERSION)])
def test_from_dict_schema_version(raw, expected):
    assert ConverterConfiguration.from_dict({"schema_version": raw}).schema_version == expected


def test_from_dict_drops_malformed_entries():
    data = {
        "pinned_units_by_category": {
            "length": ["m", 3, None, "ft"],
            "weight": "kg",
            "volume": {"l": True},
        },
        "active_category": "",
    }
    config = ConverterConfiguration.from_dict(data)
    assert config.pinned_units_by_category == {"length": ["m", "ft"]}
    assert config.active_category == "length"


def test_from_json_rejects_non_object(tmp_path):
    path = tmp_path / "prefs.json"
    path.write_text(json.dumps(["m", "ft"]), encoding="utf-8")
    with pytest.raises(ValueError):
        ConverterConfiguration.from_json(path)


def test_save_creates_parent_directories(tmp_path):
    target = tmp_path / "nested" / "dir" / "prefs.json"
    ConverterConfiguration(pinned_units_by_category={"fuel": ["kmpl"]}).save(target)
    assert json.loads(target.read_text(encoding="utf-8"))["pinned_units_by_category"] == {"fuel": ["kmpl"]}


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("international", "international"),
        ("Western", "international"),
        ("en-US", "international"),
        ("indian", "indian"),
        ("EASTERN", "indian"),
        ("en in", "indian"),
        ("roman", "international"),
        (None, "international"),
        (42, "international"),
    ],
)
def test_normalize_number_system(raw, expected):
    assert normalize_number_system(raw) == expected


def test_settings_defaults(monkeypatch, tmp_path):
    monkeypatch.delenv("RATEVAULT_DATA_DIR", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    config = Config()
    assert config.STORAGE_FILE == "ratevault-data.json"
    assert config.DEFAULT_CATEGORY == "length"
    assert config.NUMBER_SYSTEM == "international"
    assert config.storage_path().name == "ratevault-data.json"
    assert config.storage_path().parent.name == ".ratevault"


def test_settings_read_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("RATEVAULT_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("RATEVAULT_STORAGE_FILE", "prefs.json")
    monkeypatch.setenv("RATEVAULT_DEFAULT_CATEGORY", "weight")
    monkeypatch.setenv("RATEVAULT_NUMBER_SYSTEM", "indian")
    config = load_config()
    assert config.storage_path() == tmp_path / "prefs.json"
    assert config.DEFAULT_CATEGORY == "weight"
    assert config.NUMBER_SYSTEM == "indian"
