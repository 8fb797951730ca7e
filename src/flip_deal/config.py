"""Configuration loader."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigError
from .logging import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config.yaml"


@dataclass
class StrategyAssumptions:
    """Assumptions shared by every strategy template."""

    notary_rate: float


@dataclass
class ScoringThresholds:
    """Global-score cut-offs for the recommendation tiers."""

    recommended_min: float
    conditional_min: float


@dataclass
class RiskThresholds:
    """Trigger and escalation thresholds for the risk rules."""

    condition_threshold: float
    condition_high: float
    selling_time_threshold: float
    selling_time_high: float
    roi_threshold: float
    roi_high: float
    time_to_sell_threshold: float
    time_to_sell_high: float
    energy_ratings: tuple[str, ...]


@dataclass
class EstimateParams:
    """Default-estimate rates used when a listing gives no cost figures."""

    renovation_rate_poor: float
    renovation_rate_fair: float
    renovation_rate_default: float
    poor_condition_max: float
    fair_condition_max: float
    resale_uplift: float


def load_config(config_path: Path | str | None = None) -> dict[str, Any]:
    """Load config from YAML file.

    An explicit path must exist. Without one, ``FLIP_DEAL_CONFIG`` or the
    repository ``config.yaml`` is used, and built-in defaults apply if
    neither is present.
    """
    explicit = config_path or os.environ.get("FLIP_DEAL_CONFIG")
    path = Path(explicit) if explicit else DEFAULT_CONFIG_PATH
    if not path.exists():
        if explicit:
            raise FileNotFoundError(f"Config not found: {path}")
        logger.debug("config_defaults", missing=str(path))
        return {}
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a mapping: {path}")
    logger.debug("config_loaded", path=str(path))
    return data


def get_strategy_assumptions(config: dict[str, Any]) -> StrategyAssumptions:
    """Extract strategy assumptions from config."""
    st = config.get("strategies", {})
    return StrategyAssumptions(
        notary_rate=float(st.get("notary_rate", 0.08)),
    )


def get_scoring_thresholds(config: dict[str, Any]) -> ScoringThresholds:
    """Extract recommendation thresholds from config."""
    sc = config.get("scoring", {})
    return ScoringThresholds(
        recommended_min=float(sc.get("recommended_min", 7.5)),
        conditional_min=float(sc.get("conditional_min", 5.0)),
    )


def get_risk_thresholds(config: dict[str, Any]) -> RiskThresholds:
    """Extract risk rule thresholds from config."""
    rk = config.get("risk", {})
    ratings = rk.get("energy_ratings", ["F", "G"])
    return RiskThresholds(
        condition_threshold=float(rk.get("condition_threshold", 6)),
        condition_high=float(rk.get("condition_high", 4)),
        selling_time_threshold=float(rk.get("selling_time_threshold", 8)),
        selling_time_high=float(rk.get("selling_time_high", 12)),
        roi_threshold=float(rk.get("roi_threshold", 15)),
        roi_high=float(rk.get("roi_high", 5)),
        time_to_sell_threshold=float(rk.get("time_to_sell_threshold", 12)),
        time_to_sell_high=float(rk.get("time_to_sell_high", 18)),
        energy_ratings=tuple(str(r).upper() for r in ratings),
    )


def get_estimate_params(config: dict[str, Any]) -> EstimateParams:
    """Extract default-estimate rates from config."""
    es = config.get("estimates", {})
    return EstimateParams(
        renovation_rate_poor=float(es.get("renovation_rate_poor", 0.25)),
        renovation_rate_fair=float(es.get("renovation_rate_fair", 0.15)),
        renovation_rate_default=float(es.get("renovation_rate_default", 0.10)),
        poor_condition_max=float(es.get("poor_condition_max", 4)),
        fair_condition_max=float(es.get("fair_condition_max", 6)),
        resale_uplift=float(es.get("resale_uplift", 1.20)),
    )
