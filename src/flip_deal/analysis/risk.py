"""Rule-based risk factors and mitigation advice."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from ..config import RiskThresholds
from ..models import PropertyRecord, RiskFactor, RiskLevel, RiskReport, ScoreSet
from .scoring import compute_scores, round_half_up

DEFAULT_THRESHOLDS = RiskThresholds(
    condition_threshold=6,
    condition_high=4,
    selling_time_threshold=8,
    selling_time_high=12,
    roi_threshold=15,
    roi_high=5,
    time_to_sell_threshold=12,
    time_to_sell_high=18,
    energy_ratings=("F", "G"),
)

MITIGATIONS: dict[str, str] = {
    "structural": "Have a full structural survey carried out before purchase",
    "technical": "Plan a 20% safety margin on the works budget",
    "market": "Negotiate the purchase price to offset the market risk",
    "profitability": "Rework the strategy or the price positioning",
    "timing": "Stage the investments and arrange bridge financing",
    "energy": "Include an energy renovation in the works",
}


@dataclass(frozen=True)
class _Rule:
    id: str
    name: str
    description: str
    # (record, roi, thresholds) -> (level, impact) or None when not triggered
    evaluate: Callable[[PropertyRecord, float, RiskThresholds], tuple[RiskLevel, float] | None]


def _structural(r: PropertyRecord, roi: float, t: RiskThresholds):
    if r.structural_condition >= t.condition_threshold:
        return None
    level = RiskLevel.HIGH if r.structural_condition < t.condition_high else RiskLevel.MEDIUM
    return level, 10 - r.structural_condition


def _technical(r: PropertyRecord, roi: float, t: RiskThresholds):
    if r.technical_condition >= t.condition_threshold:
        return None
    level = RiskLevel.HIGH if r.technical_condition < t.condition_high else RiskLevel.MEDIUM
    return level, 10 - r.technical_condition


def _market(r: PropertyRecord, roi: float, t: RiskThresholds):
    if r.selling_time <= t.selling_time_threshold:
        return None
    level = RiskLevel.HIGH if r.selling_time > t.selling_time_high else RiskLevel.MEDIUM
    return level, min(8, r.selling_time / 2)


def _profitability(r: PropertyRecord, roi: float, t: RiskThresholds):
    if roi >= t.roi_threshold:
        return None
    level = RiskLevel.HIGH if roi < t.roi_high else RiskLevel.MEDIUM
    return level, max(1, 10 - roi / 2)


def _timing(r: PropertyRecord, roi: float, t: RiskThresholds):
    if r.time_to_sell <= t.time_to_sell_threshold:
        return None
    level = RiskLevel.HIGH if r.time_to_sell > t.time_to_sell_high else RiskLevel.MEDIUM
    return level, min(8, r.time_to_sell / 3)


def _energy(r: PropertyRecord, roi: float, t: RiskThresholds):
    if r.energy_rating not in t.energy_ratings:
        return None
    return RiskLevel.HIGH, 7


RULES: tuple[_Rule, ...] = (
    _Rule("structural", "Structural risk",
          "Degraded structure that may lead to cost overruns", _structural),
    _Rule("technical", "Technical risk",
          "Outdated installations requiring heavy works", _technical),
    _Rule("market", "Slow market",
          "Long selling time in the area", _market),
    _Rule("profitability", "Low profitability",
          "Profit margin too thin for the risks taken", _profitability),
    _Rule("timing", "Project delay",
          "Long execution delay increasing exposure", _timing),
    _Rule("energy", "Energy regulation",
          "Poor energy rating with upcoming regulatory constraints", _energy),
)


def global_risk_level(factors: list[RiskFactor]) -> RiskLevel:
    if not factors:
        return RiskLevel.LOW
    if any(f.level is RiskLevel.HIGH for f in factors):
        return RiskLevel.HIGH
    return RiskLevel.MEDIUM


def analyze_risks(
    record: PropertyRecord,
    roi: float,
    thresholds: RiskThresholds | None = None,
    scores: ScoreSet | None = None,
) -> RiskReport:
    """Evaluate every rule in order and collect triggered factors.

    Technical and market risk are the complements of the matching sub-scores
    on the 0-10 scale, rounded to whole points.
    """
    if scores is None:
        scores = compute_scores(record, roi)
    t = thresholds or DEFAULT_THRESHOLDS
    factors: list[RiskFactor] = []
    for rule in RULES:
        hit = rule.evaluate(record, roi, t)
        if hit is None:
            continue
        level, impact = hit
        factors.append(
            RiskFactor(
                id=rule.id,
                name=rule.name,
                level=level,
                impact=impact,
                description=rule.description,
            )
        )
    return RiskReport(
        factors=factors,
        global_level=global_risk_level(factors),
        mitigations=[MITIGATIONS[f.id] for f in factors],
        technical_risk=round_half_up(10 - scores.technical),
        market_risk=round_half_up(10 - scores.market),
    )
