"""Tests for default estimates and listing patches."""

import pytest

from flip_deal.analysis import apply_patch, estimate_notary_fees, estimate_patch, fill_missing_estimates
from flip_deal.analysis.estimates import renovation_rate
from flip_deal.config import get_estimate_params
from flip_deal.models import PropertyRecord


class TestEstimatePatch:
    @pytest.mark.parametrize(
        "condition,expected",
        [(3, 50000), (4, 50000), (5, 30000), (6, 30000), (6.5, 20000), (9, 20000)],
    )
    def test_renovation_by_condition(self, condition: float, expected: float) -> None:
        patch = estimate_patch(PropertyRecord(price=200000, structural_condition=condition))
        assert patch["renovation_costs"] == expected
        assert patch["resale_price"] == 240000

    def test_ties_round_up(self) -> None:
        # 250002 * 0.25 = 62500.5
        patch = estimate_patch(PropertyRecord(price=250002, structural_condition=3))
        assert patch["renovation_costs"] == 62501
        assert patch["resale_price"] == 300002

    def test_unknown_price_gives_zero(self) -> None:
        assert estimate_patch(PropertyRecord()) == {"renovation_costs": 0, "resale_price": 0}

    def test_custom_params(self) -> None:
        params = get_estimate_params({"estimates": {"renovation_rate_default": 0.05, "resale_uplift": 1.3}})
        assert renovation_rate(8, params) == 0.05
        patch = estimate_patch(PropertyRecord(price=100000, structural_condition=8), params)
        assert patch == {"renovation_costs": 5000, "resale_price": 130000}

    def test_notary_fees(self) -> None:
        assert estimate_notary_fees(PropertyRecord(price=250000)) == pytest.approx(20000)


class TestApplyPatch:
    def test_partial_patch(self, flip_record: PropertyRecord) -> None:
        patched = apply_patch(flip_record, {"title": "Loft", "estimatedResalePrice": 400000})
        assert patched.title == "Loft"
        assert patched.resale_price == 400000
        assert patched.price == flip_record.price

    @pytest.mark.parametrize("patch", [None, {}, ["price", 1], "garbage"])
    def test_unusable_patch_leaves_record_unchanged(self, flip_record: PropertyRecord, patch) -> None:
        assert apply_patch(flip_record, patch) == flip_record

    def test_failed_listing_analysis(self) -> None:
        # A failed listing analysis yields zeros / empty strings everywhere
        patched = apply_patch(PropertyRecord(), {
            "title": "",
            "price": 0,
            "surface": 0,
            "energyRating": "",
            "structuralCondition": None,
        })
        assert patched.energy_rating == "D"
        assert patched.structural_condition == 5
        assert patched.price_per_sqm == 0

    def test_none_keeps_entered_value(self, flip_record: PropertyRecord) -> None:
        patched = apply_patch(flip_record, {"price": None, "resalePrice": None, "surface": 70})
        assert patched.price == 250000
        assert patched.resale_price == 380000
        assert patched.surface == 70


class TestFillMissingEstimates:
    def test_fills_only_missing_values(self) -> None:
        record = PropertyRecord(price=200000, structural_condition=5, resale_price=280000)
        filled = fill_missing_estimates(record)
        assert filled.renovation_costs == 30000
        assert filled.resale_price == 280000
        assert filled.notary_fees == pytest.approx(16000)

    def test_complete_record_unchanged(self, flip_record: PropertyRecord) -> None:
        assert fill_missing_estimates(flip_record) == flip_record
