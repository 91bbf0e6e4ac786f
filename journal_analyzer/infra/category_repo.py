# journal_analyzer/infra/category_repo.py
from __future__ import annotations

import logging
import re
import shutil
import threading
import uuid
from pathlib import Path
from typing import Any, Dict, List, Optional

from journal_analyzer.domain.lexicon import DEFAULT_CATEGORY_COLOR
from journal_analyzer.domain.models import Category
from journal_analyzer.exceptions import (
    CatalogLoadError,
    CategoryConflictError,
    CategoryNotFoundError,
    InvalidInput,
)
from journal_analyzer.infra.paths import SEED_CATEGORIES_PATH, get_catalog_path
from journal_analyzer.infra.yaml_io import load_yaml, save_yaml

logger = logging.getLogger(__name__)

_COLOR_RE = re.compile(r"#[0-9A-Fa-f]{6}")

# shared by every repository instance (one is built per request)
_CATALOG_LOCK = threading.Lock()


def _clean_name(name: Optional[str]) -> str:
    name = (name or "").strip()
    if not name:
        raise InvalidInput("Name is required")
    return name


def _clean_color(color: Optional[str]) -> str:
    if color is None:
        return DEFAULT_CATEGORY_COLOR
    if not _COLOR_RE.fullmatch(color):
        raise InvalidInput("Must be a valid hex color")
    return color


class CategoryRepository:
    """
    YAML-backed global category catalog.

    file format:
    categories:
      - {id: cat-work, name: Work, color: "#3b82f6"}
      ...
    """

    def __init__(self, path: Path, seed_path: Optional[Path] = SEED_CATEGORIES_PATH):
        self.path = Path(path)
        self.seed_path = seed_path
        self._lock = _CATALOG_LOCK

    # -------------------------
    # file IO
    # -------------------------

    def _ensure_file(self) -> None:
        if self.path.exists():
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if self.seed_path is not None and Path(self.seed_path).exists():
            shutil.copyfile(self.seed_path, self.path)
            logger.info("Seeded category catalog %s from %s", self.path, self.seed_path)
        else:
            save_yaml(self.path, {"categories": []})

    def _load(self) -> List[Category]:
        self._ensure_file()
        data = load_yaml(self.path) or {}

        if not isinstance(data, dict) or not isinstance(data.get("categories") or [], list):
            raise CatalogLoadError(f"Category catalog has an unexpected layout: {self.path}")

        out: List[Category] = []
        for raw in data.get("categories") or []:
            if not isinstance(raw, dict) or not raw.get("id") or not raw.get("name"):
                raise CatalogLoadError(f"Malformed category record in {self.path}: {raw!r}")
            out.append(
                Category(
                    id=str(raw["id"]),
                    name=str(raw["name"]),
                    color=raw.get("color") or DEFAULT_CATEGORY_COLOR,
                )
            )
        return out

    def _save(self, categories: List[Category]) -> None:
        raw: Dict[str, Any] = {
            "categories": [
                {"id": c.id, "name": c.name, "color": c.color} for c in categories
            ]
        }
        save_yaml(self.path, raw)

    # -------------------------
    # queries
    # -------------------------

    def list_categories(self) -> List[Category]:
        """All categories sorted by name."""
        with self._lock:
            return sorted(self._load(), key=lambda c: c.name)

    def get_category(self, category_id: str) -> Category:
        with self._lock:
            for c in self._load():
                if c.id == category_id:
                    return c
        raise CategoryNotFoundError("Category not found")

    # -------------------------
    # admin mutations
    # -------------------------

    def create_category(self, name: str, color: Optional[str] = None) -> Category:
        name = _clean_name(name)
        color = _clean_color(color)

        with self._lock:
            categories = self._load()
            if any(c.name == name for c in categories):
                raise CategoryConflictError("Category with this name already exists")

            category = Category(id=uuid.uuid4().hex, name=name, color=color)
            categories.append(category)
            self._save(categories)

        logger.info("Created category %s (%s)", category.name, category.id)
        return category

    def update_category(
        self,
        category_id: str,
        name: Optional[str] = None,
        color: Optional[str] = None,
    ) -> Category:
        with self._lock:
            categories = self._load()
            for idx, current in enumerate(categories):
                if current.id == category_id:
                    break
            else:
                raise CategoryNotFoundError("Category not found")

            new_name = current.name if name is None else _clean_name(name)
            new_color = current.color if color is None else _clean_color(color)

            if new_name != current.name and any(c.name == new_name for c in categories):
                raise CategoryConflictError("Category with this name already exists")

            updated = Category(id=current.id, name=new_name, color=new_color)
            categories[idx] = updated
            self._save(categories)

        logger.info("Updated category %s", category_id)
        return updated

    def delete_category(self, category_id: str) -> None:
        with self._lock:
            categories = self._load()
            remaining = [c for c in categories if c.id != category_id]
            if len(remaining) == len(categories):
                raise CategoryNotFoundError("Category not found")
            self._save(remaining)

        logger.info("Deleted category %s", category_id)


def get_category_repo() -> CategoryRepository:
    """Repository for the configured catalog path (FastAPI dependency)."""
    return CategoryRepository(get_catalog_path())
