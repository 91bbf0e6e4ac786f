"""
Shared fixtures: a throw-away category catalog and an authenticated client.
"""
import pytest
from fastapi.testclient import TestClient

from journal_analyzer.app.main import create_app
from journal_analyzer.domain.models import Category
from journal_analyzer.infra.category_repo import CategoryRepository, get_category_repo

USER_HEADERS = {"Authorization": "Bearer user-token"}
ADMIN_HEADERS = {"Authorization": "Bearer admin-token"}


@pytest.fixture
def catalog_path(tmp_path):
    return tmp_path / "catalog" / "categories.yaml"


@pytest.fixture
def repo(catalog_path):
    """Repository seeded with the ten packaged categories on first access."""
    return CategoryRepository(catalog_path)


@pytest.fixture
def work_catalog():
    return [Category(id="c1", name="Work")]


@pytest.fixture
def client(repo, monkeypatch):
    monkeypatch.setenv("API_TOKENS", "user-token:user,admin-token:admin")
    app = create_app()
    app.dependency_overrides[get_category_repo] = lambda: repo
    with TestClient(app) as c:
        yield c
