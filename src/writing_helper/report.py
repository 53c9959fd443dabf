"""
Text rendering for analysis results.

Every function here is pure: it turns models into lists of output lines and
leaves writing them to the caller.
"""

from __future__ import annotations

from typing import List

from .config import AnalyzerConfig
from .models import (
    AnalysisReport,
    MetricsRecord,
    Recommendations,
    SentenceStructure,
    VocabularySample,
)
from .recommendations import proficiency_label

PROGRESS_SEGMENTS = 20
FILLED_PROGRESS = "█"
EMPTY_PROGRESS = "░"
FILLED_CHART = "■"
EMPTY_CHART = "□"

SENTENCE_ASSESSMENTS = {
    "complex": "Complex sentence structures detected",
    "moderate": "Moderate sentence complexity observed",
    "simple": "Simple sentence structures identified",
}


def _heading(title: str, width: int) -> List[str]:
    return ["", title, "-" * width]


def render_banner(version: str) -> List[str]:
    rule = "=" * 65
    return [
        rule,
        "    PROFESSIONAL LANGUAGE IMPROVEMENT & PASSAGE ANALYSIS SYSTEM",
        f"    Version: {version} | Platform: Python",
        "    Purpose: Text Analysis and Writing Enhancement Tool",
        rule,
        "",
    ]


def render_menu() -> List[str]:
    return [
        "ANALYSIS OPTIONS AVAILABLE:",
        "1. Analyze custom text passage (user input)",
        "2. Demonstrate with sample passage analysis",
        "-" * 45,
    ]


def render_progress(current_step: int, total_steps: int) -> str:
    """Render one line of the 20-segment progress bar."""
    filled = (current_step * PROGRESS_SEGMENTS) // total_steps
    bar = FILLED_PROGRESS * filled + EMPTY_PROGRESS * (PROGRESS_SEGMENTS - filled)
    percent = (current_step * 100) // total_steps
    return f"Processing: [{bar}] {percent}% Complete"


def render_metrics(metrics: MetricsRecord) -> List[str]:
    lines = _heading("COMPREHENSIVE TEXT ANALYSIS RESULTS:", 45)
    lines.extend(
        [
            f"Total Words Analyzed: {metrics.total_count}",
            f"Average Word Length: {metrics.average_length:.2f} characters",
            f"Minimum Word Length: {metrics.min_length} characters",
            f"Maximum Word Length: {metrics.max_length} characters",
            f"Advanced Vocabulary Ratio: {metrics.advanced_ratio:.2f}%",
            f"Total Character Count: {metrics.total_characters}",
        ]
    )
    return lines


def render_sentence_structure(structure: SentenceStructure) -> List[str]:
    lines = _heading("SENTENCE STRUCTURE ANALYSIS:", 30)
    lines.extend(
        [
            f"Total Sentences Detected: {structure.sentence_count}",
            f"Average Sentence Length: {structure.average_sentence_length:.1f} characters",
            f"Comma Usage Frequency: {structure.comma_count} instances",
            f"Advanced Punctuation Usage: {structure.semicolon_count} semicolons",
            f"Assessment: {SENTENCE_ASSESSMENTS[structure.tier]}",
        ]
    )
    return lines


def render_score(score: float, config: AnalyzerConfig | None = None) -> List[str]:
    cfg = config or AnalyzerConfig()
    lines = _heading("COMPLEXITY ASSESSMENT RESULTS:", 30)
    lines.append(
        f"Overall Passage Complexity Score: {score:.2f}/{cfg.score_ceiling:.1f}"
    )
    return lines


def render_chart(score: float, config: AnalyzerConfig | None = None) -> List[str]:
    """Render the score as a bar filled up to its integer part."""
    cfg = config or AnalyzerConfig()
    filled = max(0, min(int(score), cfg.chart_segments))
    bar = FILLED_CHART * filled + EMPTY_CHART * (cfg.chart_segments - filled)
    lines = _heading("PASSAGE COMPLEXITY VISUALIZATION:", 35)
    lines.extend(
        [
            f"Complexity Level: {bar} ({score:.1f}/{cfg.score_ceiling:.1f})",
            "Scale: □□□□□ Basic | ■■■■■ Intermediate | ■■■■■■■■■■ Advanced",
        ]
    )
    return lines


def render_vocabulary_sample(sample: VocabularySample) -> List[str]:
    lines = _heading("VOCABULARY ENHANCEMENT SUGGESTIONS:", 40)
    lines.extend(
        [
            f"Basic Terms Identified ({sample.basic_total} items): "
            + ", ".join(sample.basic),
            f"Advanced Terms Detected ({sample.advanced_total} items): "
            + ", ".join(sample.advanced),
        ]
    )
    return lines


def render_recommendations(recommendations: Recommendations) -> List[str]:
    vocabulary = recommendations.vocabulary
    lines = _heading("SPECIFIC PASSAGE IMPROVEMENT RECOMMENDATIONS:", 50)
    lines.extend(
        [
            f"ASSESSMENT: {vocabulary.assessment}",
            f"PRIMARY RECOMMENDATION: {vocabulary.recommendation}",
            f"SPECIFIC STRATEGY: {vocabulary.strategy}",
            f"EXAMPLE ENHANCEMENT: {vocabulary.example}",
            "",
            "STRUCTURAL RECOMMENDATIONS:",
        ]
    )
    lines.extend(f"• {item}" for item in recommendations.structure.advice)
    return lines


def render_summary(
    token_count: int, score: float, config: AnalyzerConfig | None = None
) -> List[str]:
    lines = _heading("FINAL ASSESSMENT SUMMARY:", 25)
    lines.extend(
        [
            f"The text analysis system processed {token_count} vocabulary elements successfully.",
            f"Passage complexity indicates {proficiency_label(score, config)} writing proficiency levels.",
            "Specific enhancement recommendations generated for continued improvement.",
        ]
    )
    return lines


def render_no_content(passage: str) -> List[str]:
    return [
        "",
        "NO ANALYZABLE CONTENT: the passage contains no words of two or more letters.",
        f"Characters received: {len(passage)}",
    ]


def render_report(
    report: AnalysisReport,
    config: AnalyzerConfig | None = None,
    *,
    include_vocabulary: bool = True,
    include_summary: bool = True,
) -> List[str]:
    """Render a full analysis report in display order."""
    if (
        report.metrics is None
        or report.score is None
        or report.recommendations is None
        or report.vocabulary_sample is None
    ):
        return render_no_content(report.passage)

    lines = render_metrics(report.metrics)
    lines.extend(render_sentence_structure(report.metrics.structure))
    lines.extend(render_score(report.score, config))
    lines.extend(render_chart(report.score, config))
    if include_vocabulary:
        lines.extend(render_vocabulary_sample(report.vocabulary_sample))
    lines.extend(render_recommendations(report.recommendations))
    if include_summary:
        lines.extend(render_summary(len(report.tokens), report.score, config))
    return lines


def render_footer() -> List[str]:
    rule = "=" * 60
    return [
        "",
        rule,
        "SYSTEM STATUS: Application execution completed successfully",
        "TERMINATION: All analysis modules processed without errors",
        rule,
    ]
