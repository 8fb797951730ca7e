"""Investment totals, profit and return ratios."""

from __future__ import annotations

from ..models import FinancialSummary, PropertyRecord

# (lower bound exclusive, label), checked top-down
_MARGIN_RATINGS: tuple[tuple[float, str], ...] = (
    (20, "Excellent"),
    (10, "Good"),
    (0, "Acceptable"),
)
_ROI_RATINGS: tuple[tuple[float, str], ...] = (
    (30, "Excellent"),
    (20, "Very good"),
    (10, "Good"),
    (0, "Acceptable"),
)


def _rate(value: float, table: tuple[tuple[float, str], ...], fallback: str) -> str:
    for bound, label in table:
        if value > bound:
            return label
    return fallback


def total_investment(record: PropertyRecord) -> float:
    return record.price + record.notary_fees + record.renovation_costs


def compute_roi(record: PropertyRecord) -> float:
    """ROI in percent; 0 when nothing is invested."""
    invested = total_investment(record)
    if invested <= 0:
        return 0.0
    return (record.resale_price - invested) / invested * 100


def compute_financials(record: PropertyRecord) -> FinancialSummary:
    """Compute totals and ratios for a property.

    Profit margin and ROI share one formula and are always equal.
    """
    invested = total_investment(record)
    gross_profit = record.resale_price - invested
    roi = compute_roi(record)
    return FinancialSummary(
        total_investment=invested,
        gross_profit=gross_profit,
        profit_margin=roi,
        roi=roi,
        margin_rating=_rate(roi, _MARGIN_RATINGS, "Insufficient"),
        roi_rating=_rate(roi, _ROI_RATINGS, "Negative"),
        break_even_reached=roi > 0,
    )
