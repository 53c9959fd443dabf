"""
writing_helper package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import AnalyzerConfig, config_from_dict, config_from_yaml, load_config
from .metrics import analyze_sentence_structure, collect_metrics
from .models import AnalysisReport, MetricsRecord, NoAnalyzableContentError
from .pipeline import SAMPLE_PASSAGE, analyze_passage
from .recommendations import recommend, sample_vocabulary
from .scoring import complexity_score, raw_complexity_score
from .tokenization import tokenize

__all__ = [
    "AnalyzerConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "AnalysisReport",
    "MetricsRecord",
    "NoAnalyzableContentError",
    "SAMPLE_PASSAGE",
    "analyze_passage",
    "analyze_sentence_structure",
    "collect_metrics",
    "complexity_score",
    "raw_complexity_score",
    "recommend",
    "sample_vocabulary",
    "tokenize",
]

__version__ = "2.0.0"
