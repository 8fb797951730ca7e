"""Analysis engine: financials, scores, strategies and risks in one pass."""

from __future__ import annotations

from typing import List

from ..config import (
    EstimateParams,
    RiskThresholds,
    ScoringThresholds,
    StrategyAssumptions,
    get_estimate_params,
    get_risk_thresholds,
    get_scoring_thresholds,
    get_strategy_assumptions,
    load_config,
)
from ..logging import get_logger
from ..models import AnalysisResult, PropertyRecord
from .estimates import fill_missing_estimates
from .financial import compute_financials
from .risk import analyze_risks
from .scoring import compute_scores, recommend
from .strategies import compare_strategies

logger = get_logger(__name__)


class AnalysisEngine:
    """
    Full recompute pipeline for a property record.
    No state is kept between calls; the same record always gives the same result.
    """

    def __init__(
        self,
        strategy_assumptions: StrategyAssumptions | None = None,
        scoring_thresholds: ScoringThresholds | None = None,
        risk_thresholds: RiskThresholds | None = None,
        estimate_params: EstimateParams | None = None,
        config: dict | None = None,
    ) -> None:
        cfg = config if config is not None else load_config()
        self.strategy_assumptions = strategy_assumptions or get_strategy_assumptions(cfg)
        self.scoring_thresholds = scoring_thresholds or get_scoring_thresholds(cfg)
        self.risk_thresholds = risk_thresholds or get_risk_thresholds(cfg)
        self.estimate_params = estimate_params or get_estimate_params(cfg)

    def analyze(self, record: PropertyRecord) -> AnalysisResult:
        """Run the full analysis on a record."""
        financials = compute_financials(record)
        scores = compute_scores(record, financials.roi)
        recommendation = recommend(scores.global_score, self.scoring_thresholds)
        strategies = compare_strategies(record, self.strategy_assumptions)
        risk = analyze_risks(record, financials.roi, self.risk_thresholds, scores)

        logger.debug(
            "analysis_complete",
            title=record.title,
            roi=round(financials.roi, 2),
            global_score=scores.global_score,
            recommendation=recommendation.value,
            strategy=strategies.recommended.id if strategies.recommended else None,
            risk_level=risk.global_level.value,
        )
        return AnalysisResult(
            record=record,
            financials=financials,
            scores=scores,
            recommendation=recommendation,
            strategies=strategies,
            risk=risk,
        )

    def analyze_many(self, records: List[PropertyRecord]) -> List[AnalysisResult]:
        """Analyze multiple records."""
        return [self.analyze(r) for r in records]

    def with_estimates(self, record: PropertyRecord) -> PropertyRecord:
        """Fill missing cost figures using this engine's assumptions."""
        return fill_missing_estimates(record, self.estimate_params, self.strategy_assumptions)
