# journal_analyzer/infra/paths.py
from pathlib import Path
from journal_analyzer.core.config import CATEGORY_CATALOG_PATH, PACKAGE_DIR

DATA_DIR = PACKAGE_DIR / "data"

SEED_CATEGORIES_PATH = DATA_DIR / "categories.yaml"


def get_catalog_path() -> Path:
    return CATEGORY_CATALOG_PATH
