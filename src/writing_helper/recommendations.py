from __future__ import annotations

from typing import Sequence

from .config import AnalyzerConfig
from .models import (
    Recommendations,
    StructuralAdvice,
    VocabularyAdvice,
    VocabularySample,
)

VOCABULARY_ADVICE = {
    "basic": VocabularyAdvice(
        tier="basic",
        assessment="Basic writing proficiency detected in passage",
        recommendation="Incorporate more sophisticated vocabulary",
        strategy="Replace simple words with professional alternatives",
        example="'use' → 'utilize', 'help' → 'facilitate'",
    ),
    "intermediate": VocabularyAdvice(
        tier="intermediate",
        assessment="Intermediate writing proficiency demonstrated",
        recommendation="Enhance sentence structure complexity",
        strategy="Combine shorter sentences using advanced conjunctions",
        example="Add transitional phrases and subordinate clauses",
    ),
    "advanced": VocabularyAdvice(
        tier="advanced",
        assessment="Advanced writing proficiency achieved",
        recommendation="Maintain sophisticated language patterns",
        strategy="Focus on precision and contextual appropriateness",
        example="Refine word choice for maximum impact",
    ),
}

STRUCTURAL_ADVICE = {
    "expand": StructuralAdvice(
        tier="expand",
        advice=(
            "Expand passage length for comprehensive topic coverage",
            "Add supporting details and explanatory content",
        ),
    ),
    "condense": StructuralAdvice(
        tier="condense",
        advice=(
            "Consider paragraph breaks for improved readability",
            "Ensure concise expression without redundancy",
        ),
    ),
    "maintain": StructuralAdvice(
        tier="maintain",
        advice=(
            "Maintain current passage length for optimal readability",
            "Focus on content quality and coherence",
        ),
    ),
}


def vocabulary_tier(score: float, config: AnalyzerConfig | None = None) -> str:
    cfg = config or AnalyzerConfig()
    if score < cfg.intermediate_score:
        return "basic"
    if score < cfg.advanced_score:
        return "intermediate"
    return "advanced"


def structural_tier(passage_length: int, config: AnalyzerConfig | None = None) -> str:
    cfg = config or AnalyzerConfig()
    if passage_length < cfg.expand_below_length:
        return "expand"
    if passage_length > cfg.condense_above_length:
        return "condense"
    return "maintain"


def recommend(
    score: float, passage_length: int, config: AnalyzerConfig | None = None
) -> Recommendations:
    """Classify a passage along the vocabulary and structural dimensions."""
    cfg = config or AnalyzerConfig()
    return Recommendations(
        vocabulary=VOCABULARY_ADVICE[vocabulary_tier(score, cfg)],
        structure=STRUCTURAL_ADVICE[structural_tier(passage_length, cfg)],
    )


def sample_vocabulary(
    tokens: Sequence[str], config: AnalyzerConfig | None = None
) -> VocabularySample:
    """Split tokens into short and long groups and keep the first few of each."""
    cfg = config or AnalyzerConfig()
    basic: list[str] = []
    advanced: list[str] = []
    for token in tokens:
        if len(token) <= cfg.basic_sample_max_length:
            basic.append(token)
        elif len(token) > cfg.advanced_sample_min_length:
            advanced.append(token)
    return VocabularySample(
        basic_total=len(basic),
        advanced_total=len(advanced),
        basic=tuple(basic[: cfg.sample_size]),
        advanced=tuple(advanced[: cfg.sample_size]),
    )


def proficiency_label(score: float, config: AnalyzerConfig | None = None) -> str:
    """Two-way label used in the closing summary."""
    cfg = config or AnalyzerConfig()
    return "advanced" if score > cfg.proficient_score else "developing"
