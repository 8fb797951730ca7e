"""Evaluation and ranking of the fixed investment strategy templates."""

from __future__ import annotations

from dataclasses import dataclass

from ..config import StrategyAssumptions
from ..models import PropertyRecord, RiskLevel, Strategy, StrategyComparison

DEFAULT_ASSUMPTIONS = StrategyAssumptions(notary_rate=0.08)

SUCCESS_CONDITIONS: tuple[str, ...] = (
    "Recommended maximum purchase price",
    "Optimised works budget",
    "Controlled marketing delay",
    "Strategy-specific points of vigilance",
)


@dataclass(frozen=True)
class StrategyTemplate:
    """Cost and resale multipliers for one strategy.

    ``duration_months`` of None means the property's own time to sell,
    falling back to ``default_duration``.
    """

    id: str
    name: str
    description: str
    price_factor: float
    flat_cost: float
    renovation_factor: float
    resale_multiplier: float
    duration_months: float | None
    risk_level: RiskLevel
    feasibility: int
    default_duration: float = 6


STRATEGY_TEMPLATES: tuple[StrategyTemplate, ...] = (
    StrategyTemplate(
        "simple", "Simple resale", "Refresh and home staging only",
        price_factor=1.0, flat_cost=5000, renovation_factor=0, resale_multiplier=1.0,
        duration_months=3, risk_level=RiskLevel.LOW, feasibility=8,
    ),
    StrategyTemplate(
        "renovation", "Standard renovation", "Finishing works and modernisation",
        price_factor=1.0, flat_cost=0, renovation_factor=1.0, resale_multiplier=1.0,
        duration_months=None, risk_level=RiskLevel.MEDIUM, feasibility=7,
    ),
    StrategyTemplate(
        "heavy", "Heavy rehabilitation", "Full transformation: structure and networks",
        price_factor=1.0, flat_cost=0, renovation_factor=1.8, resale_multiplier=1.2,
        duration_months=12, risk_level=RiskLevel.HIGH, feasibility=5,
    ),
    StrategyTemplate(
        "division", "Division into lots", "Split the property into several units",
        price_factor=1.0, flat_cost=0, renovation_factor=1.3, resale_multiplier=1.4,
        duration_months=8, risk_level=RiskLevel.MEDIUM, feasibility=6,
    ),
    StrategyTemplate(
        "changeUse", "Change of use", "Shop to housing, office to residential",
        price_factor=1.0, flat_cost=0, renovation_factor=1.5, resale_multiplier=1.3,
        duration_months=10, risk_level=RiskLevel.HIGH, feasibility=4,
    ),
    StrategyTemplate(
        "extension", "Extension / raising", "Create additional floor area",
        price_factor=1.0, flat_cost=0, renovation_factor=2.0, resale_multiplier=1.5,
        duration_months=14, risk_level=RiskLevel.HIGH, feasibility=3,
    ),
    StrategyTemplate(
        "furnished", "Furnished upgrade", "High-end furnishing and decoration",
        price_factor=1.0, flat_cost=15000, renovation_factor=1.0, resale_multiplier=1.1,
        duration_months=4, risk_level=RiskLevel.MEDIUM, feasibility=8,
    ),
    StrategyTemplate(
        "occupied", "Occupied property", "Discounted purchase, vacate then resell",
        price_factor=0.85, flat_cost=10000, renovation_factor=0, resale_multiplier=1.0,
        duration_months=18, risk_level=RiskLevel.HIGH, feasibility=6,
    ),
)


def evaluate_strategy(
    template: StrategyTemplate,
    record: PropertyRecord,
    assumptions: StrategyAssumptions | None = None,
) -> Strategy:
    """Apply one template to a property."""
    a = assumptions or DEFAULT_ASSUMPTIONS
    notary = record.price * a.notary_rate
    investment = (
        record.price * template.price_factor
        + notary
        + template.flat_cost
        + record.renovation_costs * template.renovation_factor
    )
    profit = record.resale_price * template.resale_multiplier - investment
    roi = profit / investment * 100 if investment > 0 else 0.0
    duration = template.duration_months
    if duration is None:
        duration = record.time_to_sell or template.default_duration
    return Strategy(
        id=template.id,
        name=template.name,
        description=template.description,
        investment=investment,
        profit=profit,
        roi=roi,
        duration_months=duration,
        risk_level=template.risk_level,
        feasibility=template.feasibility,
        success_conditions=SUCCESS_CONDITIONS,
    )


def evaluate_strategies(
    record: PropertyRecord,
    assumptions: StrategyAssumptions | None = None,
) -> list[Strategy]:
    """Evaluate every template, in declaration order."""
    return [evaluate_strategy(t, record, assumptions) for t in STRATEGY_TEMPLATES]


def rank_strategies(strategies: list[Strategy]) -> list[Strategy]:
    """Sort by ROI descending; ties keep declaration order."""
    return sorted(strategies, key=lambda s: s.roi, reverse=True)


def compare_strategies(
    record: PropertyRecord,
    assumptions: StrategyAssumptions | None = None,
) -> StrategyComparison:
    """Evaluate, rank and pick the recommended strategy.

    The top-ranked strategy is only recommended when its ROI is positive.
    """
    strategies = evaluate_strategies(record, assumptions)
    ranked = rank_strategies(strategies)
    top = ranked[0] if ranked else None
    return StrategyComparison(
        strategies=strategies,
        ranked=ranked,
        recommended=top if top is not None and top.roi > 0 else None,
    )
