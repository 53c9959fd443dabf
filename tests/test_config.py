from pathlib import Path

import pytest

from writing_helper.config import (
    AnalyzerConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
)


def test_load_config_defaults():
    config = load_config()
    assert config == AnalyzerConfig()
    assert config.advanced_length_threshold == 7
    assert config.basic_sample_max_length == 5
    assert config.advanced_sample_min_length == 8


def test_config_from_dict_ignores_unknown_keys():
    config = config_from_dict({"score_ceiling": 5.0, "window_size": 99})
    assert config.score_ceiling == 5.0
    assert "window_size" not in config.to_dict()


def test_config_from_yaml(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("intermediate_score: 2.5\nsample_size: 3\n", encoding="utf-8")
    config = config_from_yaml(path)
    assert config.intermediate_score == 2.5
    assert config.sample_size == 3


def test_empty_yaml_yields_defaults(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == AnalyzerConfig()


def test_config_from_yaml_requires_mapping(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        config_from_yaml(path)


@pytest.mark.parametrize(
    "overrides",
    [
        {"chart_segments": 0},
        {"progress_steps": -1},
        {"min_token_length": 1.5},
        {"sample_size": -2},
        {"score_normalizer": 0},
        {"progress_delay": -0.1},
        {"intermediate_score": 7.0},
        {"expand_below_length": 600},
    ],
)
def test_config_rejects_invalid_values(overrides: dict):
    with pytest.raises(ValueError):
        config_from_dict(overrides)


def test_config_allows_zero_delay_and_sample_size():
    config = config_from_dict({"progress_delay": 0, "sample_size": 0})
    assert config.progress_delay == 0
    assert config.sample_size == 0


def test_malformed_yaml_raises_value_error(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("chart_segments: [unclosed\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid configuration YAML"):
        config_from_yaml(path)
