from __future__ import annotations

import logging

from .config import AnalyzerConfig
from .metrics import collect_metrics
from .models import AnalysisReport
from .recommendations import recommend, sample_vocabulary
from .scoring import complexity_score
from .tokenization import tokenize

LOGGER = logging.getLogger(__name__)

SAMPLE_PASSAGE = (
    "The implementation of artificial intelligence technologies requires comprehensive "
    "understanding of algorithmic processes and computational methodologies. Modern "
    "systems utilize sophisticated machine learning frameworks to analyze complex "
    "data patterns and generate predictive models. Organizations must consider "
    "ethical implications while developing these advanced technological solutions "
    "for real-world applications and user interactions."
)


def analyze_passage(
    passage: str, config: AnalyzerConfig | None = None
) -> AnalysisReport:
    """Run tokenize -> metrics -> score -> recommend over a single passage."""
    cfg = config or AnalyzerConfig()
    tokens = tuple(tokenize(passage, cfg))
    if not tokens:
        LOGGER.info("Passage of %d characters yielded no tokens.", len(passage))
        return AnalysisReport(passage=passage, tokens=tokens)

    metrics = collect_metrics(tokens, passage, cfg)
    score = complexity_score(tokens, cfg)
    LOGGER.debug("Complexity score %.4f for %d tokens.", score, len(tokens))
    return AnalysisReport(
        passage=passage,
        tokens=tokens,
        metrics=metrics,
        score=score,
        recommendations=recommend(score, len(passage), cfg),
        vocabulary_sample=sample_vocabulary(tokens, cfg),
    )
