# journal_analyzer/services/analysis_service.py
"""
Service entry points used by the FastAPI routers.

Routers never touch the domain layer directly: they call these functions,
which load the category catalog, run the usecase and turn unexpected
failures into AnalysisError.
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, Iterable, Optional

from journal_analyzer.domain.models import JournalEntry
from journal_analyzer.exceptions import AnalysisError, CatalogLoadError, InvalidInput
from journal_analyzer.infra.category_repo import CategoryRepository
from journal_analyzer.usecases.analyze_entry import run_analyze_entry_usecase
from journal_analyzer.usecases.summarize_journals import run_summarize_journals_usecase

logger = logging.getLogger(__name__)


def analyze_entry(content: Optional[str], repo: CategoryRepository) -> Dict[str, Any]:
    """
    Single entry analysis.

    - input : raw entry text
    - output: {sentiment, categoryRecommendations, themes, wordCount, insight}
    """
    try:
        categories = repo.list_categories()
        return run_analyze_entry_usecase(content, categories)
    except (InvalidInput, CatalogLoadError):
        raise
    except Exception as e:
        logger.exception("Unexpected error during entry analysis")
        raise AnalysisError(f"Failed to perform AI analysis: {e}") from e


def summarize_journals(
    entries: Iterable[JournalEntry],
    repo: CategoryRepository,
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
) -> Dict[str, Any]:
    try:
        categories = repo.list_categories()
        return run_summarize_journals_usecase(entries, categories, start_date, end_date)
    except (InvalidInput, CatalogLoadError):
        raise
    except Exception as e:
        logger.exception("Unexpected error while building journal summary")
        raise AnalysisError(f"Failed to fetch journal summary: {e}") from e
