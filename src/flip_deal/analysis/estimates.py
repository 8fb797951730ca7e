"""Default estimates and partial-record patches from listing analysis."""

from __future__ import annotations

from typing import Any, Mapping

from ..config import EstimateParams, StrategyAssumptions
from ..logging import get_logger
from ..models import PropertyRecord
from .scoring import round_half_up

logger = get_logger(__name__)

DEFAULT_PARAMS = EstimateParams(
    renovation_rate_poor=0.25,
    renovation_rate_fair=0.15,
    renovation_rate_default=0.10,
    poor_condition_max=4,
    fair_condition_max=6,
    resale_uplift=1.20,
)


def renovation_rate(structural_condition: float, params: EstimateParams | None = None) -> float:
    """Share of the price to budget for works, by structural condition."""
    p = params or DEFAULT_PARAMS
    if structural_condition <= p.poor_condition_max:
        return p.renovation_rate_poor
    if structural_condition <= p.fair_condition_max:
        return p.renovation_rate_fair
    return p.renovation_rate_default


def estimate_patch(record: PropertyRecord, params: EstimateParams | None = None) -> dict[str, float]:
    """Fallback renovation cost and resale price, rounded to whole euros.

    Both are 0 when the price is unknown.
    """
    p = params or DEFAULT_PARAMS
    rate = renovation_rate(record.structural_condition, p)
    return {
        "renovation_costs": float(round_half_up(record.price * rate)),
        "resale_price": float(round_half_up(record.price * p.resale_uplift)),
    }


def estimate_notary_fees(
    record: PropertyRecord, assumptions: StrategyAssumptions | None = None
) -> float:
    rate = assumptions.notary_rate if assumptions else 0.08
    return record.price * rate


def apply_patch(record: PropertyRecord, patch: Mapping[str, Any] | None) -> PropertyRecord:
    """Merge a partial, possibly malformed, mapping into a record.

    A missing or non-mapping patch leaves the record unchanged, and None
    values leave the matching fields alone.
    """
    if not patch:
        return record
    if not isinstance(patch, Mapping):
        logger.warning("patch_ignored", patch_type=type(patch).__name__)
        return record
    return record.merge({k: v for k, v in patch.items() if v is not None})


def fill_missing_estimates(
    record: PropertyRecord,
    params: EstimateParams | None = None,
    assumptions: StrategyAssumptions | None = None,
) -> PropertyRecord:
    """Fill zero renovation, resale and notary figures from estimates.

    Values already entered are kept.
    """
    estimates = estimate_patch(record, params)
    updates: dict[str, float] = {}
    if record.renovation_costs <= 0:
        updates["renovation_costs"] = estimates["renovation_costs"]
    if record.resale_price <= 0:
        updates["resale_price"] = estimates["resale_price"]
    if record.notary_fees <= 0:
        updates["notary_fees"] = estimate_notary_fees(record, assumptions)
    if updates:
        logger.debug("estimates_applied", fields=sorted(updates))
    return record.with_updates(**updates)
