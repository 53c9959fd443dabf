from __future__ import annotations

from dataclasses import dataclass


class NoAnalyzableContentError(ValueError):
    """Raised when a statistic is requested for an empty token sequence."""


@dataclass(frozen=True, slots=True)
class SentenceStructure:
    """Punctuation-derived structure of a raw passage."""

    sentence_count: int
    comma_count: int
    semicolon_count: int
    average_sentence_length: float
    tier: str


@dataclass(frozen=True, slots=True)
class MetricsRecord:
    """Aggregate lexical statistics for one analysis run."""

    total_count: int
    total_characters: int
    min_length: int
    max_length: int
    average_length: float
    advanced_count: int
    advanced_ratio: float
    structure: SentenceStructure


@dataclass(frozen=True, slots=True)
class VocabularySample:
    """First few basic and advanced tokens, plus the size of each group."""

    basic_total: int
    advanced_total: int
    basic: tuple[str, ...]
    advanced: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class VocabularyAdvice:
    tier: str
    assessment: str
    recommendation: str
    strategy: str
    example: str


@dataclass(frozen=True, slots=True)
class StructuralAdvice:
    tier: str
    advice: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Recommendations:
    """Two independent recommendation dimensions for a passage."""

    vocabulary: VocabularyAdvice
    structure: StructuralAdvice


@dataclass(frozen=True, slots=True)
class AnalysisReport:
    """Everything produced by a single pass of the analysis pipeline.

    ``metrics``, ``score``, ``recommendations`` and ``vocabulary_sample`` are
    ``None`` when the passage yields no tokens.
    """

    passage: str
    tokens: tuple[str, ...]
    metrics: MetricsRecord | None = None
    score: float | None = None
    recommendations: Recommendations | None = None
    vocabulary_sample: VocabularySample | None = None

    @property
    def has_content(self) -> bool:
        return bool(self.tokens)
