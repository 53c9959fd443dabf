import pytest

from writing_helper.config import AnalyzerConfig
from writing_helper.metrics import (
    analyze_sentence_structure,
    classify_sentence_structure,
    collect_metrics,
)
from writing_helper.models import NoAnalyzableContentError
from writing_helper.tokenization import tokenize


def test_collect_metrics_basic_counts():
    passage = "Hello, World! Don't stop."
    metrics = collect_metrics(tokenize(passage), passage)

    assert metrics.total_count == 4
    assert metrics.total_characters == 18
    assert metrics.min_length == 4
    assert metrics.max_length == 5
    assert metrics.average_length == pytest.approx(4.5)
    assert metrics.advanced_count == 0
    assert metrics.advanced_ratio == 0.0
    assert metrics.structure.sentence_count == 2
    assert metrics.structure.comma_count == 1


def test_collect_metrics_counts_advanced_tokens():
    metrics = collect_metrics(["extraordinary", "is", "wonderful"], "")

    assert metrics.advanced_count == 2
    assert metrics.advanced_ratio == pytest.approx(200.0 / 3)
    assert metrics.average_length == pytest.approx(8.0)
    assert metrics.min_length == 2
    assert metrics.max_length == 13


def test_advanced_threshold_is_configurable():
    config = AnalyzerConfig(advanced_length_threshold=3)
    metrics = collect_metrics(["the", "quick", "fox", "jumps"], "", config)
    assert metrics.advanced_count == 2
    assert metrics.advanced_ratio == pytest.approx(50.0)


@pytest.mark.parametrize(
    "tokens",
    [
        ["ab"],
        ["ab", "abcdefghijklmnopqrst"],
        ["seven", "letters", "extraordinarily", "to", "be"],
        ["same", "size", "word"],
    ],
)
def test_metrics_invariants(tokens: list[str]):
    metrics = collect_metrics(tokens, " ".join(tokens))
    assert metrics.min_length <= metrics.average_length <= metrics.max_length
    assert 0.0 <= metrics.advanced_ratio <= 100.0
    assert metrics.total_count == len(tokens)


def test_collect_metrics_rejects_empty_sequence():
    with pytest.raises(NoAnalyzableContentError):
        collect_metrics([], "...")
    assert issubclass(NoAnalyzableContentError, ValueError)


def test_sentence_structure_counts_punctuation():
    passage = "Hi. Yes! No? a, b; c,"
    structure = analyze_sentence_structure(passage)

    assert structure.sentence_count == 3
    assert structure.comma_count == 2
    assert structure.semicolon_count == 1
    assert structure.average_sentence_length == pytest.approx(len(passage) / 3)
    assert structure.tier == "simple"


def test_sentence_structure_without_terminators_uses_raw_length():
    passage = "no terminators anywhere in this passage at all"
    structure = analyze_sentence_structure(passage)
    assert structure.sentence_count == 0
    assert structure.average_sentence_length == float(len(passage))


def test_sentence_structure_of_empty_passage():
    structure = analyze_sentence_structure("")
    assert structure.sentence_count == 0
    assert structure.average_sentence_length == 0.0


@pytest.mark.parametrize(
    ("average", "tier"),
    [
        (10.0, "simple"),
        (50.0, "simple"),
        (50.5, "moderate"),
        (80.0, "moderate"),
        (80.1, "complex"),
    ],
)
def test_classify_sentence_structure_boundaries(average: float, tier: str):
    assert classify_sentence_structure(average) == tier


def test_long_unterminated_passage_is_complex():
    structure = analyze_sentence_structure("word " * 20)
    assert structure.tier == "complex"
