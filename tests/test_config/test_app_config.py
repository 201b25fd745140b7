"""
Tests for chart_recipes/config.py — layered configuration loading.

Covers:
  - Defaults: committed config/default.toml matches the model defaults.
  - Partial TOML files fall back to model defaults.
  - local.toml deep-merges over the main file.
  - CHART_RECIPES_* environment overrides.
  - Validation failures: bad log level, bad buckets, bad thresholds,
    missing file.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from chart_recipes.config import (
    AppConfig,
    ClassifierConfig,
    LoggingConfig,
    RecommendConfig,
    ScoringConfig,
    load_config,
)


def _write_toml(directory: Path, content: str, name: str = "test.toml") -> Path:
    p = directory / name
    p.write_text(content, encoding="utf-8")
    return p


# ── Loading ───────────────────────────────────────────────────────────────────

class TestLoadConfig:
    def test_default_file_matches_model_defaults(self, clean_env):
        config = load_config()
        assert config == AppConfig()

    def test_partial_file_uses_model_defaults(self, tmp_path, clean_env):
        path = _write_toml(tmp_path, "[recommend]\nmax_results = 5\n")
        config = load_config(path)
        assert config.recommend.max_results == 5
        assert config.recommend.min_confidence == 0.1
        assert config.scoring == ScoringConfig()

    def test_scoring_constants_tunable(self, tmp_path, clean_env):
        path = _write_toml(tmp_path, "[scoring]\nprimary_score = 0.3\npie_many_slices_threshold = 10\n")
        scoring = load_config(path).scoring
        assert scoring.primary_score == 0.3
        assert scoring.pie_many_slices_threshold == 10

    def test_local_toml_merges(self, tmp_path, clean_env):
        path = _write_toml(tmp_path, "[recommend]\nmax_results = 5\nmin_confidence = 0.2\n")
        _write_toml(tmp_path, "[recommend]\nmax_results = 3\n", name="local.toml")
        recommend = load_config(path).recommend
        assert recommend.max_results == 3
        assert recommend.min_confidence == 0.2

    def test_project_debug_flag(self, tmp_path, clean_env):
        path = _write_toml(tmp_path, "[project]\ndebug = true\n")
        assert load_config(path).debug is True

    def test_missing_file(self, tmp_path, clean_env):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "absent.toml")


class TestEnvOverrides:
    def test_log_level(self, tmp_path, clean_env):
        clean_env.setenv("CHART_RECIPES_LOG_LEVEL", "debug")
        config = load_config(_write_toml(tmp_path, ""))
        assert config.logging.level == "DEBUG"

    def test_recommend_overrides(self, tmp_path, clean_env):
        clean_env.setenv("CHART_RECIPES_MIN_CONFIDENCE", "0.25")
        clean_env.setenv("CHART_RECIPES_MAX_RESULTS", "4")
        recommend = load_config(_write_toml(tmp_path, "[recommend]\nmax_results = 9\n")).recommend
        assert recommend.min_confidence == 0.25
        assert recommend.max_results == 4

    @pytest.mark.parametrize("raw, expected", [("1", True), ("yes", True), ("false", False)])
    def test_debug(self, tmp_path, clean_env, raw, expected):
        clean_env.setenv("CHART_RECIPES_DEBUG", raw)
        assert load_config(_write_toml(tmp_path, "")).debug is expected

    def test_invalid_env_value_fails_validation(self, tmp_path, clean_env):
        clean_env.setenv("CHART_RECIPES_LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            load_config(_write_toml(tmp_path, ""))


# ── Validators ────────────────────────────────────────────────────────────────

class TestValidators:
    def test_log_level_normalised(self):
        assert LoggingConfig(level="warning").level == "WARNING"

    def test_bad_log_level(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="VERBOSE")

    @pytest.mark.parametrize("small, medium", [(0, 10), (500, 50), (50, 50)])
    def test_bad_size_buckets(self, small, medium):
        with pytest.raises(ValidationError):
            ScoringConfig(data_size_small=small, data_size_medium=medium)

    @pytest.mark.parametrize("value", [-0.1, 1.0])
    def test_bad_min_confidence(self, value):
        with pytest.raises(ValidationError):
            RecommendConfig(min_confidence=value)

    def test_bad_max_results(self):
        with pytest.raises(ValidationError):
            RecommendConfig(max_results=0)

    def test_bad_sample_size(self):
        with pytest.raises(ValidationError):
            ClassifierConfig(value_sample_size=0)

    def test_bad_match_ratio(self):
        with pytest.raises(ValidationError):
            ClassifierConfig(temporal_match_ratio=1.0)

    def test_frozen(self):
        config = AppConfig()
        with pytest.raises(ValidationError):
            config.debug = True  # type: ignore[misc]
