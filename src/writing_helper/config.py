from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml


@dataclass(slots=True)
class AnalyzerConfig:
    """Tunable thresholds and weights for the passage analysis pipeline."""

    min_token_length: int = 2
    # Metrics: tokens longer than this count toward the advanced ratio.
    advanced_length_threshold: int = 7
    length_weight: float = 1.2
    long_word_threshold: int = 8
    long_word_multiplier: float = 1.5
    technical_word_threshold: int = 12
    technical_word_multiplier: float = 1.3
    score_normalizer: float = 8.0
    score_ceiling: float = 10.0
    intermediate_score: float = 3.0
    advanced_score: float = 6.0
    proficient_score: float = 5.0
    expand_below_length: int = 200
    condense_above_length: int = 500
    moderate_sentence_length: float = 50.0
    complex_sentence_length: float = 80.0
    # Vocabulary sample split; independent of advanced_length_threshold.
    basic_sample_max_length: int = 5
    advanced_sample_min_length: int = 8
    sample_size: int = 5
    progress_steps: int = 6
    progress_delay: float = 0.05
    chart_segments: int = 10

    def __post_init__(self) -> None:
        for name in ("min_token_length", "progress_steps", "chart_segments"):
            _require_int(name, getattr(self, name), minimum=1)
        _require_int("sample_size", self.sample_size, minimum=0)
        if not _is_number(self.score_normalizer) or self.score_normalizer <= 0:
            raise ValueError(
                f"score_normalizer must be positive, got {self.score_normalizer!r}."
            )
        if not _is_number(self.progress_delay) or self.progress_delay < 0:
            raise ValueError(
                f"progress_delay must be non-negative, got {self.progress_delay!r}."
            )
        if self.intermediate_score > self.advanced_score:
            raise ValueError("intermediate_score must not exceed advanced_score.")
        if self.expand_below_length > self.condense_above_length:
            raise ValueError("expand_below_length must not exceed condense_above_length.")

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _require_int(name: str, value: object, *, minimum: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or value < minimum:
        raise ValueError(f"{name} must be an integer >= {minimum}, got {value!r}.")


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(AnalyzerConfig)}
    return {key: data[key] for key in data if key in allowed}


def config_from_dict(data: Mapping[str, Any] | None) -> AnalyzerConfig:
    """Build an AnalyzerConfig from a dictionary-like input."""
    if data is None:
        return AnalyzerConfig()
    return AnalyzerConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> AnalyzerConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(contents) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid configuration YAML in {path}: {exc}") from exc
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> AnalyzerConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return AnalyzerConfig()
    return config_from_yaml(path)
