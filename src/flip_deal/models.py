"""Data models for property inputs and analysis results."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field, fields, replace
from enum import Enum
from typing import Any, Mapping

ENERGY_RATINGS: tuple[str, ...] = ("A", "B", "C", "D", "E", "F", "G")
DEFAULT_ENERGY_RATING = "D"

# Input aliases (form / listing-analysis camelCase keys -> field names)
_FIELD_ALIASES: dict[str, str] = {
    "notaryFees": "notary_fees",
    "renovationCosts": "renovation_costs",
    "estimatedRenovationCosts": "renovation_costs",
    "resalePrice": "resale_price",
    "estimatedResalePrice": "resale_price",
    "timeToSell": "time_to_sell",
    "structuralCondition": "structural_condition",
    "technicalCondition": "technical_condition",
    "energyRating": "energy_rating",
    "marketTrend": "market_trend",
    "sellingTime": "selling_time",
}

_TEXT_FIELDS = ("title", "location", "description")
_CONDITION_FIELDS = ("structural_condition", "technical_condition")


def _to_float(value: Any) -> float:
    """Parse a number the way a form field does: anything unparsable is 0."""
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, str):
        value = value.replace(" ", "").replace("\u00a0", "")
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def normalize_energy_rating(value: Any) -> str:
    """Upper-case an energy rating letter, falling back to D."""
    letter = str(value or "").strip().upper()
    return letter if letter in ENERGY_RATINGS else DEFAULT_ENERGY_RATING


@dataclass(frozen=True)
class PropertyRecord:
    """Property inputs for a buy-renovate-resell analysis.

    Records are immutable; use ``with_updates`` or ``apply_patch`` to derive
    an edited copy.
    """

    title: str = ""
    location: str = ""
    description: str = ""
    price: float = 0.0
    surface: float = 0.0
    notary_fees: float = 0.0
    renovation_costs: float = 0.0
    resale_price: float = 0.0
    time_to_sell: float = 0.0
    structural_condition: float = 5.0
    technical_condition: float = 5.0
    energy_rating: str = DEFAULT_ENERGY_RATING
    market_trend: float = 0.0
    selling_time: float = 6.0

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name in _TEXT_FIELDS:
                value = "" if value is None else str(value)
            elif f.name == "energy_rating":
                value = normalize_energy_rating(value)
            elif f.name in _CONDITION_FIELDS:
                value = min(10.0, max(0.0, _to_float(value)))
            else:
                value = _to_float(value)
            object.__setattr__(self, f.name, value)

    @property
    def price_per_sqm(self) -> float:
        return self.price / self.surface if self.surface > 0 else 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> PropertyRecord:
        """Build a record from a (possibly partial) mapping of raw values."""
        return cls().merge(data or {})

    def with_updates(self, **changes: Any) -> PropertyRecord:
        return self.merge(changes)

    def merge(self, changes: Mapping[str, Any]) -> PropertyRecord:
        """Return a copy with ``changes`` applied.

        Keys may be snake_case field names or the camelCase names used by the
        form layer. Unknown keys (including ``pricePerSqm``) are ignored.
        Values are coerced by ``__post_init__``.
        """
        known = {f.name for f in fields(self)}
        updates: dict[str, Any] = {}
        for key, value in changes.items():
            name = _FIELD_ALIASES.get(str(key), str(key))
            if name in known:
                updates[name] = value
        return replace(self, **updates)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["price_per_sqm"] = self.price_per_sqm
        return data


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Recommendation(str, Enum):
    RECOMMENDED = "RECOMMENDED"
    CONDITIONAL = "CONDITIONAL"
    NOT_RECOMMENDED = "NOT RECOMMENDED"


@dataclass
class FinancialSummary:
    """Investment totals and return ratios."""

    total_investment: float
    gross_profit: float
    profit_margin: float
    roi: float
    margin_rating: str = ""
    roi_rating: str = ""
    break_even_reached: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_investment": self.total_investment,
            "gross_profit": self.gross_profit,
            "profit_margin": self.profit_margin,
            "roi": self.roi,
            "margin_rating": self.margin_rating,
            "roi_rating": self.roi_rating,
            "break_even_reached": self.break_even_reached,
        }


@dataclass
class ScoreSet:
    """Sub-scores on a 0-10 scale and their mean."""

    financial: float
    technical: float
    market: float
    risk: float
    global_score: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "financial": self.financial,
            "technical": self.technical,
            "market": self.market,
            "risk": self.risk,
            "global": self.global_score,
        }


@dataclass
class Strategy:
    """One evaluated investment strategy."""

    id: str
    name: str
    description: str
    investment: float
    profit: float
    roi: float
    duration_months: float
    risk_level: RiskLevel
    feasibility: int
    success_conditions: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "investment": self.investment,
            "profit": self.profit,
            "roi": self.roi,
            "duration_months": self.duration_months,
            "risk_level": self.risk_level.value,
            "feasibility": self.feasibility,
            "success_conditions": list(self.success_conditions),
        }


@dataclass
class StrategyComparison:
    """Strategies in declaration order, ranked by ROI, and the pick (if any)."""

    strategies: list[Strategy]
    ranked: list[Strategy]
    recommended: Strategy | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "strategies": [s.to_dict() for s in self.strategies],
            "ranking": [s.id for s in self.ranked],
            "recommended": self.recommended.id if self.recommended else None,
        }


@dataclass
class RiskFactor:
    """A qualitative risk flag raised by a threshold rule."""

    id: str
    name: str
    level: RiskLevel
    impact: float
    description: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "level": self.level.value,
            "impact": self.impact,
            "description": self.description,
        }


@dataclass
class RiskReport:
    """Risk factors in rule order, global level and mitigation advice."""

    factors: list[RiskFactor]
    global_level: RiskLevel
    mitigations: list[str] = field(default_factory=list)
    technical_risk: float = 0.0
    market_risk: float = 0.0

    @property
    def factor_count(self) -> int:
        return len(self.factors)

    @property
    def exposure(self) -> float:
        """Share of the risk gauge filled, 20 points per factor."""
        return min(100.0, self.factor_count * 20.0)

    def to_dict(self) -> dict[str, Any]:
        return {
            "factors": [f.to_dict() for f in self.factors],
            "global_level": self.global_level.value,
            "mitigations": self.mitigations,
            "technical_risk": self.technical_risk,
            "market_risk": self.market_risk,
            "factor_count": self.factor_count,
            "exposure": self.exposure,
        }


@dataclass
class AnalysisResult:
    """Full analysis of a property record."""

    record: PropertyRecord
    financials: FinancialSummary
    scores: ScoreSet
    recommendation: Recommendation
    strategies: StrategyComparison
    risk: RiskReport

    def to_dict(self) -> dict[str, Any]:
        return {
            "property": self.record.to_dict(),
            "financials": self.financials.to_dict(),
            "scores": self.scores.to_dict(),
            "recommendation": self.recommendation.value,
            "strategies": self.strategies.to_dict(),
            "risk": self.risk.to_dict(),
        }
