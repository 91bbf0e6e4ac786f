# journal_analyzer/usecases/summarize_journals.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional, Sequence

from journal_analyzer.domain.aggregation import build_journal_summary, filter_by_date
from journal_analyzer.domain.models import Category, JournalEntry
from journal_analyzer.exceptions import InvalidInput


def _as_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Aware datetimes become naive UTC so that every comparison is valid."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def run_summarize_journals_usecase(
    entries: Iterable[JournalEntry],
    categories: Sequence[Category],
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
) -> Dict[str, Any]:
    """Statistics for the entries inside the optional [start_date, end_date] range."""
    start = _as_naive_utc(start_date)
    end = _as_naive_utc(end_date)
    if start is not None and end is not None and start > end:
        raise InvalidInput("startDate must not be after endDate")

    normalized = [
        JournalEntry(
            id=e.id,
            content=e.content,
            date=_as_naive_utc(e.date),
            category_id=e.category_id,
        )
        for e in entries
    ]
    selected = filter_by_date(normalized, start, end)

    return build_journal_summary(selected, categories).to_dict()
