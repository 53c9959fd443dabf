from __future__ import annotations

from typing import Sequence

from .config import AnalyzerConfig
from .models import NoAnalyzableContentError


def word_complexity_factor(token: str, config: AnalyzerConfig | None = None) -> float:
    """
    Weight a single token by its length.
    Long-word and technical-word bonuses are checked independently against the
    same length, so a token past both thresholds receives both multipliers.
    """
    cfg = config or AnalyzerConfig()
    length = len(token)
    factor = length * cfg.length_weight
    if length > cfg.long_word_threshold:
        factor *= cfg.long_word_multiplier
    if length > cfg.technical_word_threshold:
        factor *= cfg.technical_word_multiplier
    return factor


def raw_complexity_score(
    tokens: Sequence[str], config: AnalyzerConfig | None = None
) -> float:
    """Return the normalized mean complexity factor before the ceiling is applied."""
    if not tokens:
        raise NoAnalyzableContentError("Cannot score an empty token sequence.")
    cfg = config or AnalyzerConfig()
    total = sum(word_complexity_factor(token, cfg) for token in tokens)
    return (total / len(tokens)) / cfg.score_normalizer


def complexity_score(tokens: Sequence[str], config: AnalyzerConfig | None = None) -> float:
    """Score lexical complexity on a 0-10 scale, clamping at the ceiling."""
    cfg = config or AnalyzerConfig()
    return min(raw_complexity_score(tokens, cfg), cfg.score_ceiling)
