# journal_analyzer/app/routes_categories.py
from __future__ import annotations
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from journal_analyzer.app.auth import require_admin, require_user
from journal_analyzer.exceptions import (
    CatalogLoadError,
    CategoryConflictError,
    CategoryNotFoundError,
    InvalidInput,
)
from journal_analyzer.infra.category_repo import CategoryRepository, get_category_repo

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/categories")


class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=1)
    color: Optional[str] = Field(None, description="#RRGGBB, defaults to blue")


class CategoryUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    color: Optional[str] = None


class CategoryOut(BaseModel):
    id: str
    name: str
    color: Optional[str] = None


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _catalog_error(e: CatalogLoadError) -> JSONResponse:
    logger.error("Category catalog unavailable: %s", e)
    return _error(500, "Failed to load categories")


@router.get("", response_model=List[CategoryOut])
def list_categories(
    _role: str = Depends(require_user),
    repo: CategoryRepository = Depends(get_category_repo),
):
    try:
        return [c.to_dict() for c in repo.list_categories()]
    except CatalogLoadError as e:
        return _catalog_error(e)


@router.get("/{category_id}", response_model=CategoryOut)
def get_category(
    category_id: str,
    _role: str = Depends(require_user),
    repo: CategoryRepository = Depends(get_category_repo),
):
    try:
        return repo.get_category(category_id).to_dict()
    except CategoryNotFoundError as e:
        return _error(404, str(e))
    except CatalogLoadError as e:
        return _catalog_error(e)


@router.post("", response_model=CategoryOut, status_code=201)
def create_category(
    body: CategoryCreate,
    _role: str = Depends(require_admin),
    repo: CategoryRepository = Depends(get_category_repo),
):
    try:
        return repo.create_category(body.name, body.color).to_dict()
    except (InvalidInput, CategoryConflictError) as e:
        logger.warning("Category create rejected: %s", e)
        return _error(400, str(e))
    except CatalogLoadError as e:
        return _catalog_error(e)


@router.put("/{category_id}", response_model=CategoryOut)
def update_category(
    category_id: str,
    body: CategoryUpdate,
    _role: str = Depends(require_admin),
    repo: CategoryRepository = Depends(get_category_repo),
):
    try:
        return repo.update_category(category_id, name=body.name, color=body.color).to_dict()
    except CategoryNotFoundError as e:
        return _error(404, str(e))
    except (InvalidInput, CategoryConflictError) as e:
        logger.warning("Category update rejected: %s", e)
        return _error(400, str(e))
    except CatalogLoadError as e:
        return _catalog_error(e)


@router.delete("/{category_id}")
def delete_category(
    category_id: str,
    _role: str = Depends(require_admin),
    repo: CategoryRepository = Depends(get_category_repo),
):
    try:
        repo.delete_category(category_id)
    except CategoryNotFoundError as e:
        return _error(404, str(e))
    except CatalogLoadError as e:
        return _catalog_error(e)
    return {"message": "Category deleted successfully"}
