import pytest

from writing_helper.pipeline import SAMPLE_PASSAGE, analyze_passage
from writing_helper.report import render_chart, render_progress, render_report


def test_sample_passage_analysis_is_deterministic():
    """The built-in sample yields identical results on every run."""
    first = analyze_passage(SAMPLE_PASSAGE)
    second = analyze_passage(SAMPLE_PASSAGE)

    assert first == second
    assert len(first.tokens) == 48
    assert "realworld" in first.tokens
    assert first.metrics is not None
    assert first.metrics.average_length == pytest.approx(388 / 48, abs=1e-3)
    assert first.metrics.structure.sentence_count == 3
    assert first.score == pytest.approx(1.7398, abs=1e-3)


def test_sample_passage_recommendations():
    report = analyze_passage(SAMPLE_PASSAGE)
    assert report.recommendations is not None
    assert report.recommendations.vocabulary.tier == "basic"
    assert report.recommendations.structure.tier == "maintain"


def test_passage_without_words_short_circuits():
    report = analyze_passage("?! 1 2 3 -- a")
    assert not report.has_content
    assert report.metrics is None
    assert report.score is None
    assert report.recommendations is None
    assert "NO ANALYZABLE CONTENT" in "\n".join(render_report(report))


def test_render_report_orders_sections():
    lines = render_report(analyze_passage("Plain words make plain sentences. Short ones."))
    text = "\n".join(lines)
    markers = [
        "COMPREHENSIVE TEXT ANALYSIS RESULTS:",
        "SENTENCE STRUCTURE ANALYSIS:",
        "Overall Passage Complexity Score:",
        "Complexity Level:",
        "VOCABULARY ENHANCEMENT SUGGESTIONS:",
        "SPECIFIC PASSAGE IMPROVEMENT RECOMMENDATIONS:",
        "FINAL ASSESSMENT SUMMARY:",
    ]
    positions = [text.index(marker) for marker in markers]
    assert positions == sorted(positions)


def test_render_report_can_skip_vocabulary_and_summary():
    report = analyze_passage(SAMPLE_PASSAGE)
    text = "\n".join(render_report(report, include_vocabulary=False, include_summary=False))
    assert "VOCABULARY ENHANCEMENT SUGGESTIONS:" not in text
    assert "FINAL ASSESSMENT SUMMARY:" not in text
    assert "Overall Passage Complexity Score: 1.74/10.0" in text


def test_render_chart_fills_integer_part():
    assert "■■■■■■■□□□ (7.9/10.0)" in render_chart(7.9)[3]
    assert "■■■■■■■■■■ (10.0/10.0)" in render_chart(10.0)[3]
    assert "□□□□□□□□□□ (0.6/10.0)" in render_chart(0.6)[3]


def test_render_progress_bar():
    assert render_progress(3, 6) == "Processing: [" + "█" * 10 + "░" * 10 + "] 50% Complete"
    assert render_progress(6, 6).endswith("] 100% Complete")
