"""
Tests for the YAML backed category catalog.
"""
import pytest
import yaml

from journal_analyzer.exceptions import (
    CatalogLoadError,
    CategoryConflictError,
    CategoryNotFoundError,
    InvalidInput,
)
from journal_analyzer.infra.category_repo import CategoryRepository


def test_missing_catalog_is_seeded(repo, catalog_path):
    categories = repo.list_categories()

    assert catalog_path.exists()
    assert len(categories) == 10
    names = [c.name for c in categories]
    assert names == sorted(names)
    assert repo.get_category("cat-work").name == "Work"


def test_missing_catalog_without_seed_is_empty(tmp_path):
    repo = CategoryRepository(tmp_path / "empty.yaml", seed_path=None)
    assert repo.list_categories() == []


def test_create_category(repo, catalog_path):
    created = repo.create_category("  Gardening ", "#00FF00")

    assert created.name == "Gardening"
    assert created.color == "#00FF00"
    assert repo.get_category(created.id) == created

    on_disk = yaml.safe_load(catalog_path.read_text(encoding="utf-8"))
    assert {"id": created.id, "name": "Gardening", "color": "#00FF00"} in on_disk["categories"]


def test_create_uses_default_color(repo):
    assert repo.create_category("Dreams").color == "#3b82f6"


@pytest.mark.parametrize("name, color", [("   ", None), ("Ok", "blue"), ("Ok", "#12345"), ("Ok", "#aabbcc\n"), ("Ok", " #aabbcc")])
def test_create_rejects_invalid_input(repo, name, color):
    with pytest.raises(InvalidInput):
        repo.create_category(name, color)


def test_create_rejects_duplicate_name(repo):
    with pytest.raises(CategoryConflictError):
        repo.create_category("Work")


def test_update_category(repo):
    updated = repo.update_category("cat-work", name="Career", color="#000000")
    assert updated.name == "Career"
    assert repo.get_category("cat-work").color == "#000000"


def test_update_keeps_unspecified_fields(repo):
    before = repo.get_category("cat-health")
    after = repo.update_category("cat-health", color="#111111")
    assert after.name == before.name


def test_update_rejects_rename_onto_existing(repo):
    with pytest.raises(CategoryConflictError):
        repo.update_category("cat-work", name="Family")


def test_update_unknown_category(repo):
    with pytest.raises(CategoryNotFoundError):
        repo.update_category("nope", name="Anything")


def test_delete_category(repo):
    repo.delete_category("cat-social")
    with pytest.raises(CategoryNotFoundError):
        repo.get_category("cat-social")
    with pytest.raises(CategoryNotFoundError):
        repo.delete_category("cat-social")


def test_malformed_catalog(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("categories: [unclosed", encoding="utf-8")
    with pytest.raises(CatalogLoadError):
        CategoryRepository(path).list_categories()


def test_catalog_with_bad_record(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("categories:\n  - name: NoId\n", encoding="utf-8")
    with pytest.raises(CatalogLoadError):
        CategoryRepository(path).list_categories()
