from __future__ import annotations

import logging
from typing import Sequence

from .config import AnalyzerConfig
from .models import MetricsRecord, NoAnalyzableContentError, SentenceStructure

LOGGER = logging.getLogger(__name__)

SENTENCE_TERMINATORS = frozenset(".!?")


def analyze_sentence_structure(
    passage: str, config: AnalyzerConfig | None = None
) -> SentenceStructure:
    """Count sentence terminators and clause punctuation in the raw passage."""
    cfg = config or AnalyzerConfig()
    sentence_count = 0
    comma_count = 0
    semicolon_count = 0
    for ch in passage:
        if ch in SENTENCE_TERMINATORS:
            sentence_count += 1
        elif ch == ",":
            comma_count += 1
        elif ch == ";":
            semicolon_count += 1

    average_sentence_length = len(passage) / max(sentence_count, 1)
    return SentenceStructure(
        sentence_count=sentence_count,
        comma_count=comma_count,
        semicolon_count=semicolon_count,
        average_sentence_length=average_sentence_length,
        tier=classify_sentence_structure(average_sentence_length, cfg),
    )


def classify_sentence_structure(
    average_sentence_length: float, config: AnalyzerConfig | None = None
) -> str:
    """Map an average sentence length (in characters) to a structural tier."""
    cfg = config or AnalyzerConfig()
    if average_sentence_length > cfg.complex_sentence_length:
        return "complex"
    if average_sentence_length > cfg.moderate_sentence_length:
        return "moderate"
    return "simple"


def collect_metrics(
    tokens: Sequence[str], passage: str, config: AnalyzerConfig | None = None
) -> MetricsRecord:
    """Fold the token sequence into aggregate length statistics."""
    if not tokens:
        raise NoAnalyzableContentError("Cannot compute metrics for zero tokens.")
    cfg = config or AnalyzerConfig()

    total_characters = 0
    advanced_count = 0
    min_length = max_length = len(tokens[0])
    for token in tokens:
        length = len(token)
        total_characters += length
        min_length = min(min_length, length)
        max_length = max(max_length, length)
        if length > cfg.advanced_length_threshold:
            advanced_count += 1

    total_count = len(tokens)
    record = MetricsRecord(
        total_count=total_count,
        total_characters=total_characters,
        min_length=min_length,
        max_length=max_length,
        average_length=total_characters / total_count,
        advanced_count=advanced_count,
        advanced_ratio=advanced_count / total_count * 100.0,
        structure=analyze_sentence_structure(passage, cfg),
    )
    LOGGER.debug(
        "Collected metrics for %d tokens (avg length %.2f, %d advanced).",
        total_count,
        record.average_length,
        advanced_count,
    )
    return record
