# journal_analyzer/domain/analyzer.py
"""
Keyword based content analysis for a single journal entry.

Every function here is pure: no I/O, no shared state. ``analyze`` composes
the individual steps and is safe to call concurrently.
"""
from __future__ import annotations

import math
import re
from collections import Counter
from typing import Dict, Iterable, List, Pattern, Sequence, Tuple

from journal_analyzer.domain.lexicon import (
    CATEGORY_KEYWORDS,
    MAX_RECOMMENDATIONS,
    MAX_THEMES,
    MIN_THEME_LENGTH,
    NAME_MATCH_RELEVANCE,
    NEGATIVE_WORDS,
    POSITIVE_WORDS,
    SENTIMENT_LENGTH_CAP,
    THEME_STOP_WORDS,
)
from journal_analyzer.domain.models import (
    AnalysisResult,
    Category,
    CategoryRecommendation,
    Mood,
    SentimentResult,
)

_WORD_RE = re.compile(r"\b\w+\b")

# compiled once; keyword lists never change at runtime
_KEYWORD_PATTERNS: Dict[str, Tuple[Pattern[str], ...]] = {
    label: tuple(re.compile(rf"\b{re.escape(kw)}\b", re.IGNORECASE) for kw in keywords)
    for label, keywords in CATEGORY_KEYWORDS.items()
}


def tokenize(text: str) -> List[str]:
    """Lower-case ``text`` and return its word runs in order."""
    return _WORD_RE.findall((text or "").lower())


def _mood_for(score: float) -> Mood:
    if score >= 0.5:
        return Mood.VERY_POSITIVE
    if score >= 0.1:
        return Mood.POSITIVE
    if score > -0.1:
        return Mood.NEUTRAL
    if score > -0.5:
        return Mood.NEGATIVE
    return Mood.VERY_NEGATIVE


def score_sentiment(text: str) -> SentimentResult:
    """
    Weighted positive/negative word ratio.

    The polarity ratio is scaled by the share of sentiment words in the
    text (length capped at SENTIMENT_LENGTH_CAP words), so a long entry with
    a single "happy" lands close to neutral.
    """
    words = tokenize(text)
    positive = sum(1 for w in words if w in POSITIVE_WORDS)
    negative = sum(1 for w in words if w in NEGATIVE_WORDS)
    total_sentiment = positive + negative

    if total_sentiment == 0:
        return SentimentResult(score=0.0, mood=Mood.NEUTRAL)

    total_words = len(words)
    polarity = (positive - negative) / total_sentiment
    density = min(total_sentiment, total_words) / min(total_words, SENTIMENT_LENGTH_CAP)
    score = max(-1.0, min(1.0, polarity * density))

    return SentimentResult(score=round(score, 2), mood=_mood_for(score))


def _keyword_relevance(text: str, text_length: int) -> Dict[str, float]:
    """Uncapped relevance per canonical label, only for labels with at least one hit."""
    scores: Dict[str, float] = {}
    length_factor = math.sqrt(text_length / 100)

    for label, patterns in _KEYWORD_PATTERNS.items():
        matches = sum(len(p.findall(text)) for p in patterns)
        if matches > 0:
            scores[label] = matches / length_factor
    return scores


def recommend_categories(
    text: str,
    known_categories: Sequence[Category],
) -> List[CategoryRecommendation]:
    """
    Rank the caller's categories by keyword relevance (top 3, relevance > 0).

    A category whose name is a canonical label uses the keyword score; any
    other category scores NAME_MATCH_RELEVANCE when its name occurs in the text.
    Ranking uses the raw score; the reported relevance is capped at 1.0.
    """
    if not known_categories:
        return []

    normalized = (text or "").lower()
    keyword_scores = _keyword_relevance(normalized, len(text or ""))

    scored: List[Tuple[float, Category]] = []
    for category in known_categories:
        relevance = keyword_scores.get(category.name, 0.0)
        if not relevance and category.name and category.name.lower() in normalized:
            relevance = NAME_MATCH_RELEVANCE
        relevance = round(relevance, 2)
        if relevance > 0:
            scored.append((relevance, category))

    scored.sort(key=lambda item: item[0], reverse=True)
    return [
        CategoryRecommendation(
            category_id=category.id,
            name=category.name,
            relevance=min(1.0, relevance),
        )
        for relevance, category in scored[:MAX_RECOMMENDATIONS]
    ]


def extract_themes(text: str) -> List[str]:
    """Top 5 frequent non stop words longer than 3 chars; ties keep first-seen order."""
    counts = Counter(
        w for w in tokenize(text)
        if w not in THEME_STOP_WORDS and len(w) >= MIN_THEME_LENGTH
    )
    # Counter keeps insertion order and sorted() is stable
    ordered = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)
    return [word for word, _ in ordered[:MAX_THEMES]]


def synthesize_insight(
    sentiment: SentimentResult,
    recommendations: Iterable[CategoryRecommendation],
    themes: Sequence[str],
) -> str:
    recommendations = list(recommendations)
    insight = "Based on your entry, "

    if sentiment.mood is not Mood.NEUTRAL:
        insight += f"your mood appears to be {sentiment.mood.value.lower()}. "

    if recommendations:
        names = ", ".join(r.name.lower() for r in recommendations)
        insight += f"This entry seems to focus on themes related to {names}. "

    if themes:
        insight += f"Key topics include: {', '.join(themes)}."

    return insight


def count_words(text: str) -> int:
    return len((text or "").split())


def analyze(content: str, known_categories: Sequence[Category]) -> AnalysisResult:
    """
    Full analysis of one entry.

    Empty content is tolerated here (zero-valued result); rejecting it is
    the job of the calling usecase.
    """
    sentiment = score_sentiment(content)
    recommendations = recommend_categories(content, known_categories)
    themes = extract_themes(content)

    return AnalysisResult(
        sentiment=sentiment,
        category_recommendations=tuple(recommendations),
        themes=tuple(themes),
        word_count=count_words(content),
        insight=synthesize_insight(sentiment, recommendations, themes),
    )
