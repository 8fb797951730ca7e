"""Sub-scores, global score and recommendation tier."""

from __future__ import annotations

import math

from ..config import ScoringThresholds
from ..models import PropertyRecord, Recommendation, ScoreSet

DEFAULT_THRESHOLDS = ScoringThresholds(recommended_min=7.5, conditional_min=5.0)


def _clamp(value: float, low: float = 0.0, high: float = 10.0) -> float:
    return min(high, max(low, value))


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with ties going up, unlike the builtin ``round``."""
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def round1(value: float) -> float:
    return round_half_up(value, 1)


def global_score(financial: float, technical: float, market: float, risk: float) -> float:
    """Unweighted mean of the four sub-scores, one decimal."""
    return round1((financial + technical + market + risk) / 4)


def compute_scores(record: PropertyRecord, roi: float) -> ScoreSet:
    """Score a property on four 0-10 axes.

    - financial: 50% ROI maps to 10
    - technical: mean of structural and technical condition
    - market: 6 months average selling time maps to 7
    - risk: shorter project delay scores higher, 6 months maps to 10
    """
    financial = _clamp(roi / 5)
    technical = (record.structural_condition + record.technical_condition) / 2
    market = _clamp(10 - record.selling_time / 2)
    risk = _clamp(10 - (record.time_to_sell - 6) / 2)
    return ScoreSet(
        financial=round1(financial),
        technical=technical,
        market=market,
        risk=risk,
        global_score=global_score(financial, technical, market, risk),
    )


def recommend(score: float, thresholds: ScoringThresholds | None = None) -> Recommendation:
    """Map a global score to its recommendation tier."""
    t = thresholds or DEFAULT_THRESHOLDS
    if score >= t.recommended_min:
        return Recommendation.RECOMMENDED
    if score >= t.conditional_min:
        return Recommendation.CONDITIONAL
    return Recommendation.NOT_RECOMMENDED
