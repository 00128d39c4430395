"""Shared data models for the text analyzer.

Analysis functions return these frozen dataclasses; the analysis modules
convert them with `to_dict()` into the camelCase records that end up in
API responses, exports and the history file.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, List, Union

from .errors import expect

SENTIMENT = "sentiment"
KEYWORDS = "keywords"
SUMMARY = "summary"
READABILITY = "readability"

# Order in which results are produced and reported.
ANALYSIS_KINDS = (SENTIMENT, KEYWORDS, SUMMARY, READABILITY)


@dataclass(frozen=True)
class SentimentResult:
    score: float
    label: str
    emoji: str
    color: str
    positive_words: int
    negative_words: int
    confidence: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "label": self.label,
            "emoji": self.emoji,
            "color": self.color,
            "positiveWords": self.positive_words,
            "negativeWords": self.negative_words,
            "confidence": self.confidence,
        }


@dataclass(frozen=True)
class Keyword:
    word: str
    frequency: int
    importance: int

    def to_dict(self) -> Dict[str, Any]:
        return {"word": self.word, "frequency": self.frequency, "importance": self.importance}


@dataclass(frozen=True)
class ReadabilityResult:
    flesch_score: int
    level: str
    grade: str
    avg_words_per_sentence: float
    avg_syllables_per_word: float
    sentence_count: int
    word_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fleschScore": self.flesch_score,
            "level": self.level,
            "grade": self.grade,
            "avgWordsPerSentence": self.avg_words_per_sentence,
            "avgSyllablesPerWord": self.avg_syllables_per_word,
            "sentenceCount": self.sentence_count,
            "wordCount": self.word_count,
        }


@dataclass(frozen=True)
class AnalysisRequest:
    """Validated text plus the set of analyses to run on it."""

    text: str
    kinds: FrozenSet[str] = field(default_factory=lambda: frozenset(ANALYSIS_KINDS))

    def __post_init__(self):
        expect(isinstance(self.text, str) and self.text.strip() != "", "Please provide text to analyze")
        unknown = sorted(repr(kind) for kind in self.kinds if kind not in ANALYSIS_KINDS)
        expect(not unknown, f"Unknown analysis kind(s): {', '.join(unknown)}")

    @classmethod
    def from_options(cls, text: str, options: Union[Mapping, Iterable[str], None] = None) -> "AnalysisRequest":
        """
        Build a request from either a `{kind: bool}` mapping or an iterable
        of kind names. ``None`` selects every analysis.
        """
        if options is None:
            kinds = frozenset(ANALYSIS_KINDS)
        elif isinstance(options, Mapping):
            expect(all(isinstance(kind, str) for kind in options),
                   f"Analysis kinds must be names, got: {list(options)!r}")
            kinds = frozenset(kind for kind, enabled in options.items() if enabled)
        elif isinstance(options, str):
            # a single kind name, not an iterable of letters
            kinds = frozenset([options])
        else:
            expect(isinstance(options, Iterable), f"Analysis options must be a list or mapping, got: {options!r}")
            options = list(options)
            expect(all(isinstance(kind, str) for kind in options),
                   f"Analysis kinds must be names, got: {options!r}")
            kinds = frozenset(options)
        return cls(text=text, kinds=kinds)

    def ordered_kinds(self) -> List[str]:
        return [kind for kind in ANALYSIS_KINDS if kind in self.kinds]


@dataclass(frozen=True)
class HistoryEntry:
    """A saved analysis, as stored in the recent-history file."""

    id: int
    timestamp: str
    text: str
    text_preview: str
    results: Dict[str, Any]
    word_count: int
    char_count: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HistoryEntry":
        return cls(
            id=int(data["id"]),
            timestamp=data.get("timestamp", ""),
            text=data.get("text", ""),
            text_preview=data.get("textPreview", ""),
            results=data.get("results", {}),
            word_count=int(data.get("wordCount", 0)),
            char_count=int(data.get("charCount", 0)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "text": self.text,
            "textPreview": self.text_preview,
            "results": self.results,
            "wordCount": self.word_count,
            "charCount": self.char_count,
        }
