# journal_analyzer/domain/models.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class Mood(str, Enum):
    VERY_POSITIVE = "Very Positive"
    POSITIVE = "Positive"
    NEUTRAL = "Neutral"
    NEGATIVE = "Negative"
    VERY_NEGATIVE = "Very Negative"


@dataclass(frozen=True)
class Category:
    """A catalog entry. Only id and name matter to the analyzer."""
    id: str
    name: str
    color: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "color": self.color}


@dataclass(frozen=True)
class SentimentResult:
    score: float
    mood: Mood

    def to_dict(self) -> Dict[str, Any]:
        return {"score": self.score, "mood": self.mood.value}


@dataclass(frozen=True)
class CategoryRecommendation:
    category_id: str
    name: str
    relevance: float

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.category_id, "name": self.name, "relevance": self.relevance}


@dataclass(frozen=True)
class AnalysisResult:
    """Everything the analyzer derives from one entry. Never persisted."""
    sentiment: SentimentResult
    category_recommendations: Tuple[CategoryRecommendation, ...]
    themes: Tuple[str, ...]
    word_count: int
    insight: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sentiment": self.sentiment.to_dict(),
            "categoryRecommendations": [r.to_dict() for r in self.category_recommendations],
            "themes": list(self.themes),
            "wordCount": self.word_count,
            "insight": self.insight,
        }


@dataclass
class JournalEntry:
    id: str
    content: str
    date: datetime
    category_id: Optional[str] = None


@dataclass
class JournalSummary:
    total_count: int = 0
    category_counts: List[Dict[str, Any]] = field(default_factory=list)
    monthly_count_data: List[Dict[str, Any]] = field(default_factory=list)
    word_count_data: List[Dict[str, Any]] = field(default_factory=list)
    entry_length_by_category: List[Dict[str, Any]] = field(default_factory=list)
    time_of_day_data: List[Dict[str, Any]] = field(default_factory=list)
    word_frequency_data: List[Dict[str, Any]] = field(default_factory=list)
    calendar_data: List[Dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalCount": self.total_count,
            "categoryCounts": self.category_counts,
            "monthlyCountData": self.monthly_count_data,
            "wordCountData": self.word_count_data,
            "entryLengthByCategory": self.entry_length_by_category,
            "timeOfDayData": self.time_of_day_data,
            "wordFrequencyData": self.word_frequency_data,
            "calendarData": self.calendar_data,
        }
