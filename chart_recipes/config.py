"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``      — committed static defaults
  2. ``config/local.toml``        — optional local overrides (gitignored)
  3. ``.env``                     — local env overrides (gitignored)
  4. Environment variables        — ``CHART_RECIPES_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``

The recipe engine, the CLI and the tests all receive an ``AppConfig``
instance. Every scoring constant lives in ``ScoringConfig`` so the weights
can be tuned without touching the engine.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

# ── Sub-config models ─────────────────────────────────────────────────────────


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: str = ""
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class ClassifierConfig(BaseModel):
    """Column classifier sampling parameters."""

    model_config = ConfigDict(frozen=True)

    value_sample_size: int = 50        # values read for geo / categorical checks
    temporal_sample_size: int = 20     # values read for the temporal value fallback
    temporal_match_ratio: float = 0.8  # share of temporal-looking values required
    min_geo_value_samples: int = 5     # below this, values never prove geography

    @field_validator("value_sample_size", "temporal_sample_size", "min_geo_value_samples")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"Sample sizes must be >= 1, got {v}.")
        return v

    @field_validator("temporal_match_ratio")
    @classmethod
    def validate_ratio(cls, v: float) -> float:
        if not 0.0 <= v < 1.0:
            raise ValueError(f"temporal_match_ratio must be in [0.0, 1.0), got {v}.")
        return v


class ScoringConfig(BaseModel):
    """Scoring weights and thresholds.

    The 0.4 / 0.4 base split, the pie penalties and the 50 / 500 size buckets
    were chosen empirically; treat them as tunable defaults.
    """

    model_config = ConfigDict(frozen=True)

    primary_score: float = 0.4
    secondary_score: float = 0.4
    secondary_match_bonus: float = 0.2     # scaled by matched fraction

    quality_high_threshold: float = 0.8
    quality_medium_threshold: float = 0.6
    quality_low_threshold: float = 0.3
    quality_bonus_high: float = 0.1
    quality_bonus_medium: float = 0.05
    quality_penalty_low: float = -0.05

    complexity_high_match: float = 0.8
    complexity_medium_match: float = 0.6
    complexity_bonus_high: float = 0.08
    complexity_bonus_medium: float = 0.04
    default_complexity_target: float = 0.5

    overcrowding_default_tolerance: float = 0.05
    overcrowding_penalty_max: float = 0.25

    data_size_small: int = 50
    data_size_medium: int = 500

    pie_perfect_bonus: float = 0.2          # 1 categorical + 1 numeric, 2 total
    pie_good_bonus: float = 0.1             # 1 categorical + 1 numeric, extras
    pie_multi_categorical_penalty: float = -0.3
    pie_many_slices_threshold: int = 12
    pie_many_slices_penalty: float = -0.15
    pie_some_slices_threshold: int = 8
    pie_some_slices_penalty: float = -0.05
    pie_min_good_slices: int = 3
    pie_good_slices_bonus: float = 0.1
    pie_filter_max_slices: int = 15
    pie_filter_max_issues: int = 2
    pie_filter_min_data_size: int = 3

    @model_validator(mode="after")
    def validate_size_buckets(self) -> "ScoringConfig":
        if not 0 < self.data_size_small < self.data_size_medium:
            raise ValueError(
                "data_size_small must be positive and below data_size_medium, "
                f"got {self.data_size_small} / {self.data_size_medium}."
            )
        return self


class RecommendConfig(BaseModel):
    """Aggregator output settings."""

    model_config = ConfigDict(frozen=True)

    min_confidence: float = 0.1
    max_results: int = 12

    # Post-filters: families kept only above a stricter confidence
    three_d_small_data_size: int = 100
    three_d_min_confidence: float = 0.7
    map_without_geo_min_confidence: float = 0.8
    complex_small_data_size: int = 50
    complex_max_ingredients: int = 2
    complex_min_confidence: float = 0.6

    @field_validator("min_confidence")
    @classmethod
    def validate_min_confidence(cls, v: float) -> float:
        if not 0.0 <= v < 1.0:
            raise ValueError(f"min_confidence must be in [0.0, 1.0), got {v}.")
        return v

    @field_validator("max_results")
    @classmethod
    def validate_max_results(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"max_results must be >= 1, got {v}.")
        return v


class AppConfig(BaseModel):
    """Complete application configuration — the single source of truth."""

    model_config = ConfigDict(frozen=True)

    logging: LoggingConfig = LoggingConfig()
    classifier: ClassifierConfig = ClassifierConfig()
    scoring: ScoringConfig = ScoringConfig()
    recommend: RecommendConfig = RecommendConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (contains pyproject.toml)."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return _PROJECT_ROOT


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If the specified ``config_path`` does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()

    # 1. Load .env file (silently skip if missing)
    load_dotenv(dotenv_path=root / ".env", override=False)

    # 2. Load TOML config
    if config_path is None:
        config_path = root / "config" / "default.toml"

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "Create config/default.toml or pass --config explicitly."
        )

    with open(config_path, "rb") as f:
        raw: dict[str, Any] = tomllib.load(f)

    # Also merge local.toml if present (gitignored local overrides)
    local_config_path = config_path.parent / "local.toml"
    if local_config_path.exists():
        with open(local_config_path, "rb") as f:
            local_raw: dict[str, Any] = tomllib.load(f)
        raw = _deep_merge(raw, local_raw)

    # 3. Apply CHART_RECIPES_* environment variable overrides
    raw = _apply_env_overrides(raw)

    # 4. Build and validate AppConfig
    return _build_app_config(raw)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply CHART_RECIPES_* env vars to the raw config dict.

    Supported overrides:
      CHART_RECIPES_LOG_LEVEL       → raw["logging"]["level"]
      CHART_RECIPES_MIN_CONFIDENCE  → raw["recommend"]["min_confidence"]
      CHART_RECIPES_MAX_RESULTS     → raw["recommend"]["max_results"]
      CHART_RECIPES_DEBUG           → raw["debug"]
    """
    if log_level := os.environ.get("CHART_RECIPES_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if min_conf := os.environ.get("CHART_RECIPES_MIN_CONFIDENCE"):
        raw.setdefault("recommend", {})["min_confidence"] = float(min_conf)

    if max_results := os.environ.get("CHART_RECIPES_MAX_RESULTS"):
        raw.setdefault("recommend", {})["max_results"] = int(max_results)

    if debug := os.environ.get("CHART_RECIPES_DEBUG"):
        raw["debug"] = debug.lower() in ("1", "true", "yes")

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    project = raw.pop("project", {})

    return AppConfig(
        logging=LoggingConfig(**raw.get("logging", {})),
        classifier=ClassifierConfig(**raw.get("classifier", {})),
        scoring=ScoringConfig(**raw.get("scoring", {})),
        recommend=RecommendConfig(**raw.get("recommend", {})),
        debug=raw.get("debug", project.get("debug", False)),
    )
