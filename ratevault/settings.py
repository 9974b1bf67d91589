import os
from pathlib import Path


class Config:
    """Runtime settings read from the environment."""

    def __init__(self) -> None:
        self.DATA_DIR = Path(os.environ.get("RATEVAULT_DATA_DIR", Path.home() / ".ratevault"))
        self.STORAGE_FILE = os.environ.get("RATEVAULT_STORAGE_FILE", "ratevault-data.json")
        self.DEFAULT_CATEGORY = os.environ.get("RATEVAULT_DEFAULT_CATEGORY", "length")
        self.NUMBER_SYSTEM = os.environ.get("RATEVAULT_NUMBER_SYSTEM", "international")

    def storage_path(self) -> Path:
        return self.DATA_DIR / self.STORAGE_FILE


def load_config() -> Config:
    return Config()
