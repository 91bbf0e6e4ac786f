# journal_analyzer/usecases/analyze_entry.py
from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence

from journal_analyzer.domain.analyzer import analyze
from journal_analyzer.domain.models import Category
from journal_analyzer.exceptions import InvalidInput

logger = logging.getLogger(__name__)


def _validate_content(content: Optional[str]) -> str:
    if content is None or not content.strip():
        raise InvalidInput("Content is required for analysis")
    return content


def run_analyze_entry_usecase(
    content: Optional[str],
    known_categories: Sequence[Category],
) -> Dict[str, Any]:
    """Analysis of one journal entry against the current category catalog."""
    # 1) input validation
    content = _validate_content(content)

    # 2) keyword analysis
    result = analyze(content, known_categories)

    logger.debug(
        "analysed entry: words=%d mood=%s categories=%d themes=%d",
        result.word_count,
        result.sentiment.mood.value,
        len(result.category_recommendations),
        len(result.themes),
    )

    # 3) wire format
    return result.to_dict()
