import pytest


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep every test away from the real ~/.ratevault and from host settings."""
    monkeypatch.setenv("RATEVAULT_DATA_DIR", str(tmp_path / "ratevault-home"))
    for name in ("RATEVAULT_STORAGE_FILE", "RATEVAULT_DEFAULT_CATEGORY", "RATEVAULT_NUMBER_SYSTEM"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path / "ratevault-home"
