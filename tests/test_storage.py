import json
import logging

import pytest

from ratevault.config import SCHEMA_VERSION, ConverterConfiguration
from ratevault.pinned import PinnedUnitStore
from ratevault.storage import JsonFileStorage, MemoryStorage


def test_memory_storage_missing_category_is_none():
    storage = MemoryStorage()
    assert storage.get_pinned_units("length") is None


def test_memory_storage_save_and_clear():
    storage = MemoryStorage({"length": ["m"]})
    storage.save_pinned_units("length", ["km", "mi"])
    storage.save_pinned_units("weight", [])
    assert storage.get_pinned_units("length") == ["km", "mi"]
    # An explicitly empty selection is kept, not replaced by defaults
    assert storage.get_pinned_units("weight") == []

    storage.clear_pinned_units("length")
    assert storage.get_pinned_units("length") is None


def test_memory_storage_hands_out_copies():
    storage = MemoryStorage({"length": ["m"]})
    storage.get_pinned_units("length").append("ft")
    storage.load().pinned_units_by_category["length"].append("in")
    assert storage.get_pinned_units("length") == ["m"]


def test_number_system_and_active_category():
    storage = MemoryStorage()
    storage.save_number_system("eastern")
    storage.save_active_category("fuel")
    assert storage.get_number_system() == "indian"
    assert storage.get_active_category() == "fuel"


def test_json_storage_missing_file_reads_empty(tmp_path):
    storage = JsonFileStorage(tmp_path / "absent.json")
    assert storage.load() == ConverterConfiguration()
    assert storage.get_pinned_units("length") is None
    assert not storage.path.exists()


def test_json_storage_persists_between_instances(tmp_path):
    path = tmp_path / "data" / "ratevault-data.json"
    JsonFileStorage(path).save_pinned_units("length", ["m", "ft"])
    JsonFileStorage(path).save_number_system("indian")

    reopened = JsonFileStorage(path)
    assert reopened.get_pinned_units("length") == ["m", "ft"]
    assert reopened.get_number_system() == "indian"

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["pinned_units_by_category"] == {"length": ["m", "ft"]}
    assert "values" not in data


def test_json_storage_reads_browser_export(tmp_path):
    path = tmp_path / "export.json"
    path.write_text(json.dumps({"pinnedUnitsByCategory": {"speed": ["kph", "mph"]}}), encoding="utf-8")
    assert JsonFileStorage(path).get_pinned_units("speed") == ["kph", "mph"]


def test_json_storage_corrupt_file_logs_and_reads_empty(tmp_path, caplog):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    storage = JsonFileStorage(path)

    with caplog.at_level(logging.WARNING, logger="ratevault.storage"):
        assert storage.get_pinned_units("length") is None
    assert "Ignoring unreadable converter data" in caplog.text

    # The next write replaces the corrupt file
    storage.save_pinned_units("length", ["km"])
    assert JsonFileStorage(path).get_pinned_units("length") == ["km"]


@pytest.mark.parametrize("schema_version", [None, [1], {"v": 1}, "one", True])
def test_json_storage_tolerates_malformed_schema_version(tmp_path, schema_version):
    path = tmp_path / "ratevault-data.json"
    path.write_text(
        json.dumps({"schema_version": schema_version, "pinned_units_by_category": {"length": ["km", "mi"]}}),
        encoding="utf-8",
    )
    storage = JsonFileStorage(path)

    assert storage.load().schema_version == SCHEMA_VERSION
    assert storage.get_pinned_units("length") == ["km", "mi"]

    store = PinnedUnitStore(storage, "length")
    assert store.pinned_unit_ids == ["km", "mi"]
    assert [pinned.value for pinned in store.pinned_units] == [0, 0]
