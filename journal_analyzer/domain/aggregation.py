# journal_analyzer/domain/aggregation.py
from __future__ import annotations

import re
from collections import Counter
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from journal_analyzer.domain.analyzer import count_words
from journal_analyzer.domain.lexicon import (
    DEFAULT_CATEGORY_COLOR,
    SUMMARY_STOP_WORDS,
    UNCATEGORIZED,
)
from journal_analyzer.domain.models import Category, JournalEntry, JournalSummary

_PUNCT_RE = re.compile(r"[^\w\s]|_")


def extract_common_words(text: str, limit: int = 10) -> List[Dict[str, Any]]:
    """Most frequent words across ``text`` for the statistics word cloud.

    Punctuation is stripped (not split on), so "don't" counts as "dont".
    """
    cleaned = _PUNCT_RE.sub("", (text or "").lower())
    counts = Counter(
        w for w in cleaned.split()
        if w not in SUMMARY_STOP_WORDS and len(w) > 2
    )
    ordered = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)
    return [{"word": word, "count": count} for word, count in ordered[:limit]]


def _category_stats(
    entries: Sequence[JournalEntry],
    word_counts: Sequence[int],
    categories: Sequence[Category],
) -> List[Dict[str, Any]]:
    by_id = {c.id: c for c in categories}
    stats: Dict[str, Dict[str, Any]] = {}

    for entry, words in zip(entries, word_counts):
        category = by_id.get(entry.category_id) if entry.category_id else None
        name = category.name if category else UNCATEGORIZED
        color = (category.color if category else None) or DEFAULT_CATEGORY_COLOR
        bucket = stats.setdefault(
            name, {"name": name, "count": 0, "totalWordCount": 0, "color": color}
        )
        bucket["count"] += 1
        bucket["totalWordCount"] += words

    # categories without entries still show up (for chart colours)
    for category in categories:
        stats.setdefault(
            category.name,
            {
                "name": category.name,
                "count": 0,
                "totalWordCount": 0,
                "color": category.color or DEFAULT_CATEGORY_COLOR,
            },
        )
    return list(stats.values())


def build_journal_summary(
    entries: Sequence[JournalEntry],
    categories: Sequence[Category],
    word_limit: int = 10,
) -> JournalSummary:
    """
    Statistics page data for a set of entries.

    Entries are processed in date order. Hours and calendar days are taken
    from each entry's naive datetime; summarize_journals converts aware
    values to UTC first.
    """
    if not entries:
        return JournalSummary()

    entries = sorted(entries, key=lambda e: e.date)
    word_counts = [count_words(e.content) for e in entries]

    stats = _category_stats(entries, word_counts, categories)
    category_counts = [
        {"name": s["name"], "count": s["count"], "color": s["color"]} for s in stats
    ]
    entry_length = [
        {
            "category": s["name"],
            # round half up, same as Math.round on the statistics page
            "avgWordCount": int(s["totalWordCount"] / s["count"] + 0.5) if s["count"] else 0,
            "color": s["color"],
        }
        for s in stats
    ]

    monthly: Dict[str, Dict[str, Any]] = {}
    calendar: Dict[str, Dict[str, Any]] = {}
    hours = [{"hour": str(h), "count": 0} for h in range(24)]
    word_count_data: List[Dict[str, Any]] = []

    for entry, words in zip(entries, word_counts):
        month_key = entry.date.strftime("%Y-%m")
        monthly.setdefault(month_key, {"month": entry.date.strftime("%b %Y"), "count": 0})
        monthly[month_key]["count"] += 1

        day = entry.date.date().isoformat()
        calendar.setdefault(day, {"date": day, "count": 0})
        calendar[day]["count"] += 1

        hours[entry.date.hour]["count"] += 1
        word_count_data.append({"date": day, "wordCount": words})

    all_text = " ".join(e.content for e in entries)

    return JournalSummary(
        total_count=len(entries),
        category_counts=category_counts,
        monthly_count_data=list(monthly.values()),
        word_count_data=word_count_data,
        entry_length_by_category=entry_length,
        time_of_day_data=hours,
        word_frequency_data=extract_common_words(all_text, word_limit),
        calendar_data=list(calendar.values()),
    )


def filter_by_date(
    entries: Sequence[JournalEntry],
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
) -> List[JournalEntry]:
    """Keep entries with start <= date <= end (either bound optional)."""
    out = []
    for e in entries:
        if start is not None and e.date < start:
            continue
        if end is not None and e.date > end:
            continue
        out.append(e)
    return out
