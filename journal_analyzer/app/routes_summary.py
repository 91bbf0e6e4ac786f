# journal_analyzer/app/routes_summary.py
from __future__ import annotations
import logging
from datetime import datetime
from typing import List, Optional
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field
from journal_analyzer.app.auth import require_user
from journal_analyzer.domain.models import JournalEntry
from journal_analyzer.exceptions import AnalysisError, CatalogLoadError, InvalidInput
from journal_analyzer.infra.category_repo import CategoryRepository, get_category_repo
from journal_analyzer.services.analysis_service import summarize_journals

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/journals")


class JournalEntryIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    content: str
    date: datetime
    category_id: Optional[str] = Field(None, alias="categoryId")


class SummaryRequest(BaseModel):
    """Entries come from the caller's own store; only the catalog is local."""
    model_config = ConfigDict(populate_by_name=True)

    entries: List[JournalEntryIn] = Field(default_factory=list)
    start_date: Optional[datetime] = Field(None, alias="startDate")
    end_date: Optional[datetime] = Field(None, alias="endDate")


@router.post("/summary")
def journal_summary_route(
    req: SummaryRequest,
    _role: str = Depends(require_user),
    repo: CategoryRepository = Depends(get_category_repo),
):
    entries = [
        JournalEntry(id=e.id, content=e.content, date=e.date, category_id=e.category_id)
        for e in req.entries
    ]
    try:
        return summarize_journals(entries, repo, req.start_date, req.end_date)

    except InvalidInput as e:
        logger.warning("Invalid summary query: %s", e)
        return JSONResponse(status_code=400, content={"error": "Invalid query parameters", "details": str(e)})

    except (CatalogLoadError, AnalysisError) as e:
        logger.error("Summary error: %s", e)
        return JSONResponse(status_code=500, content={"error": "Failed to fetch journal summary"})
