# journal_analyzer/domain/lexicon.py
"""
Hand-curated English lookup tables used by the analyzer.

All tables are immutable; edit this file to tune the vocabulary.
"""
from types import MappingProxyType
from typing import FrozenSet, Mapping, Tuple

POSITIVE_WORDS: FrozenSet[str] = frozenset([
    "happy", "joy", "excited", "great", "wonderful", "amazing", "good", "excellent",
    "fantastic", "love", "loved", "beautiful", "grateful", "thankful", "appreciate",
    "optimistic", "positive", "proud", "accomplished", "success", "peaceful", "relaxed",
    "calm", "hopeful", "inspired", "blessed", "fun", "enjoyed", "smile", "pleased",
])

NEGATIVE_WORDS: FrozenSet[str] = frozenset([
    "sad", "angry", "upset", "frustrated", "disappointed", "hate", "terrible",
    "horrible", "awful", "bad", "worried", "anxious", "stressed", "depressed",
    "miserable", "unhappy", "annoyed", "fear", "scared", "tired", "exhausted",
    "lonely", "hurt", "pain", "sorry", "regret", "guilty", "ashamed", "lost",
    "confused", "overwhelmed",
])

# canonical category label -> characteristic vocabulary
CATEGORY_KEYWORDS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "Work": ("work", "job", "career", "office", "project", "meeting", "deadline",
             "colleague", "boss", "professional"),
    "Personal": ("personal", "self", "reflection", "growth", "identity", "goal",
                 "dream", "plan", "future"),
    "Family": ("family", "parent", "child", "kid", "mom", "dad", "brother", "sister",
               "spouse", "relative", "home"),
    "Health": ("health", "fitness", "exercise", "diet", "workout", "run", "gym",
               "doctor", "medicine", "symptom", "illness"),
    "Travel": ("travel", "trip", "vacation", "journey", "adventure", "explore",
               "destination", "flight", "hotel", "tourist"),
    "Finance": ("money", "finance", "budget", "expense", "income", "saving",
                "investment", "debt", "purchase", "cost"),
    "Education": ("study", "learn", "school", "college", "university", "class",
                  "course", "exam", "teacher", "student", "book"),
    "Creative": ("creative", "art", "music", "write", "paint", "draw", "design",
                 "craft", "project", "create", "imagination"),
    "Spiritual": ("spiritual", "meditation", "prayer", "faith", "belief", "religion",
                  "soul", "meaning", "purpose", "mindful"),
    "Social": ("friend", "social", "party", "gathering", "conversation", "meetup",
               "relationship", "community", "network", "connection"),
})

# dropped before counting theme candidates
THEME_STOP_WORDS: FrozenSet[str] = frozenset([
    "the", "and", "to", "of", "a", "in", "for", "is", "on", "that", "by",
    "this", "with", "i", "you", "it", "not", "or", "be", "are", "from",
    "at", "as", "your", "have", "more", "an", "was", "were", "they", "will",
    "there", "their", "what", "all", "when", "up", "out", "about", "who",
    "get", "which", "go", "me", "one", "my", "would", "very", "just", "can",
])

# smaller list used by the statistics page word cloud
SUMMARY_STOP_WORDS: FrozenSet[str] = frozenset([
    "the", "and", "to", "of", "a", "in", "for", "is", "on", "that", "by",
    "this", "with", "i", "you", "it", "not", "or", "be", "are", "from",
    "at", "as", "your", "have", "more", "an", "was", "were",
])

MAX_RECOMMENDATIONS = 3
MAX_THEMES = 5
MIN_THEME_LENGTH = 4
SENTIMENT_LENGTH_CAP = 100
NAME_MATCH_RELEVANCE = 0.5

DEFAULT_CATEGORY_COLOR = "#3b82f6"
UNCATEGORIZED = "Uncategorized"
