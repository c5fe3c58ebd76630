import os
from functools import lru_cache
from pathlib import Path

from src.adapters.sqlite.repos import SQLiteOptionStore
from src.rules.loader import load_rules_or_default
from src.rules.models import PaletteRules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.data_dir = Path(os.environ.get("PALETTE_DATA_DIR", "./data"))
        self.db_path = str(self.data_dir / "palettes.db")
        self.rules_path = Path(os.environ.get("PALETTE_RULES_PATH", self.base_dir / "rules.yaml"))


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules() -> PaletteRules:
    return load_rules_or_default(get_settings().rules_path)


# --- Stores ---
def get_option_store() -> SQLiteOptionStore:
    return SQLiteOptionStore(get_settings().db_path)
