"""Analysis pipeline for buy-renovate-resell deals."""

from .engine import AnalysisEngine
from .estimates import apply_patch, estimate_notary_fees, estimate_patch, fill_missing_estimates
from .financial import compute_financials, compute_roi
from .risk import MITIGATIONS, analyze_risks
from .scoring import compute_scores, global_score, recommend
from .strategies import STRATEGY_TEMPLATES, compare_strategies, evaluate_strategies, rank_strategies

__all__ = [
    "AnalysisEngine",
    "apply_patch",
    "estimate_notary_fees",
    "estimate_patch",
    "fill_missing_estimates",
    "compute_financials",
    "compute_roi",
    "MITIGATIONS",
    "analyze_risks",
    "compute_scores",
    "global_score",
    "recommend",
    "STRATEGY_TEMPLATES",
    "compare_strategies",
    "evaluate_strategies",
    "rank_strategies",
]
