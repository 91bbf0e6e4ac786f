# journal_analyzer/app/routes_analysis.py
from __future__ import annotations
import logging
from typing import List
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from journal_analyzer.app.auth import require_user
from journal_analyzer.exceptions import AnalysisError, CatalogLoadError, InvalidInput
from journal_analyzer.infra.category_repo import CategoryRepository, get_category_repo
from journal_analyzer.services.analysis_service import analyze_entry

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api")

# ---------------------------
# Request schema
# ---------------------------

class AnalyzeRequest(BaseModel):
    content: str = Field(..., min_length=1, description="Journal entry text to analyse")

# ---------------------------
# Response schema
# ---------------------------

class SentimentOut(BaseModel):
    score: float
    mood: str


class CategoryRecommendationOut(BaseModel):
    id: str
    name: str
    relevance: float


class AnalyzeResponse(BaseModel):
    """Shape of AnalysisResult.to_dict()."""
    sentiment: SentimentOut
    categoryRecommendations: List[CategoryRecommendationOut]
    themes: List[str]
    wordCount: int
    insight: str

# ---------------------------
# Routes
# ---------------------------

@router.post("/ai-analysis", response_model=AnalyzeResponse)
def ai_analysis_route(
    req: AnalyzeRequest,
    _role: str = Depends(require_user),
    repo: CategoryRepository = Depends(get_category_repo),
):
    """
    Keyword based analysis of one entry.

    - input : {content}
    - output: sentiment, up to 3 category suggestions, up to 5 themes,
              word count and a one-paragraph insight
    """
    try:
        return analyze_entry(req.content, repo)

    except InvalidInput as e:
        logger.warning("Invalid analysis input: %s", e)
        return JSONResponse(status_code=400, content={"error": "Invalid input", "details": str(e)})

    except CatalogLoadError as e:
        logger.error("Category catalog unavailable: %s", e)
        return JSONResponse(status_code=500, content={"error": "Failed to perform AI analysis"})

    except AnalysisError as e:
        logger.error("Analysis error: %s", e)
        return JSONResponse(status_code=500, content={"error": "Failed to perform AI analysis"})
