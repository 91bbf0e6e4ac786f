"""
Tests for YAML file helpers.
"""
import pytest

from journal_analyzer.exceptions import CatalogLoadError
from journal_analyzer.infra.yaml_io import load_yaml, save_yaml


def test_save_and_load(tmp_path):
    path = tmp_path / "nested" / "doc.yaml"
    save_yaml(path, {"categories": [{"id": "a", "name": "Café"}]})

    assert load_yaml(path) == {"categories": [{"id": "a", "name": "Café"}]}
    # only the target remains, no temp files
    assert [p.name for p in path.parent.iterdir()] == ["doc.yaml"]


def test_save_replaces_existing_file(tmp_path):
    path = tmp_path / "doc.yaml"
    save_yaml(path, {"v": 1})
    save_yaml(path, {"v": 2})
    assert load_yaml(path) == {"v": 2}


def test_failed_save_keeps_previous_content(tmp_path):
    path = tmp_path / "doc.yaml"
    save_yaml(path, {"v": 1})

    with pytest.raises(Exception):
        save_yaml(path, {"v": object()})

    assert load_yaml(path) == {"v": 1}
    assert [p.name for p in tmp_path.iterdir()] == ["doc.yaml"]


def test_load_invalid_yaml(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("key: [unclosed", encoding="utf-8")
    with pytest.raises(CatalogLoadError):
        load_yaml(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_yaml(tmp_path / "missing.yaml")
