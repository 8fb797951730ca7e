"""Tests for strategy evaluation and ranking."""

import pytest

from flip_deal.analysis import STRATEGY_TEMPLATES, compare_strategies, evaluate_strategies, rank_strategies
from flip_deal.config import StrategyAssumptions
from flip_deal.models import PropertyRecord, RiskLevel


@pytest.fixture
def deal() -> PropertyRecord:
    return PropertyRecord(price=250000, renovation_costs=50000, resale_price=380000)


def _by_id(record: PropertyRecord, **kwargs) -> dict:
    return {s.id: s for s in evaluate_strategies(record, **kwargs)}


class TestEvaluateStrategies:
    def test_declaration_order(self, deal: PropertyRecord) -> None:
        ids = [s.id for s in evaluate_strategies(deal)]
        assert ids == [
            "simple", "renovation", "heavy", "division",
            "changeUse", "extension", "furnished", "occupied",
        ]
        assert len(STRATEGY_TEMPLATES) == 8

    def test_simple_resale(self, deal: PropertyRecord) -> None:
        simple = _by_id(deal)["simple"]
        assert simple.investment == pytest.approx(275000)
        assert simple.profit == pytest.approx(105000)
        assert simple.roi == pytest.approx(105000 / 275000 * 100)
        assert simple.duration_months == 3
        assert simple.risk_level is RiskLevel.LOW
        assert simple.feasibility == 8

    def test_multipliers(self, deal: PropertyRecord) -> None:
        s = _by_id(deal)
        assert s["heavy"].investment == pytest.approx(360000)
        assert s["heavy"].profit == pytest.approx(96000)
        assert s["division"].investment == pytest.approx(335000)
        assert s["division"].profit == pytest.approx(197000)
        assert s["changeUse"].profit == pytest.approx(149000)
        assert s["extension"].investment == pytest.approx(370000)
        assert s["furnished"].investment == pytest.approx(335000)
        assert s["furnished"].profit == pytest.approx(83000)

    def test_occupied_discount(self, deal: PropertyRecord) -> None:
        occupied = _by_id(deal)["occupied"]
        # 0.85 * price, notary on the full price, 10k flat
        assert occupied.investment == pytest.approx(212500 + 20000 + 10000)
        assert occupied.profit == pytest.approx(137500)

    def test_notary_ignores_entered_fees(self, deal: PropertyRecord) -> None:
        with_fees = deal.with_updates(notary_fees=99999)
        assert _by_id(with_fees)["simple"].investment == _by_id(deal)["simple"].investment

    def test_custom_notary_rate(self, deal: PropertyRecord) -> None:
        simple = _by_id(deal, assumptions=StrategyAssumptions(notary_rate=0.1))["simple"]
        assert simple.investment == pytest.approx(280000)

    def test_renovation_duration_uses_time_to_sell(self, deal: PropertyRecord) -> None:
        assert _by_id(deal)["renovation"].duration_months == 6
        assert _by_id(deal.with_updates(time_to_sell=9))["renovation"].duration_months == 9

    def test_zero_investment_guard(self) -> None:
        s = _by_id(PropertyRecord())
        assert s["renovation"].investment == 0
        assert s["renovation"].roi == 0
        assert s["simple"].roi == pytest.approx(-100)


class TestCompareStrategies:
    def test_ranking(self, deal: PropertyRecord) -> None:
        comparison = compare_strategies(deal)
        assert [s.id for s in comparison.ranked] == [
            "division", "occupied", "extension", "changeUse",
            "simple", "heavy", "furnished", "renovation",
        ]
        assert comparison.recommended is not None
        assert comparison.recommended.id == "division"

    def test_ranking_is_deterministic(self, deal: PropertyRecord) -> None:
        first = [s.id for s in compare_strategies(deal).ranked]
        second = [s.id for s in compare_strategies(deal).ranked]
        assert first == second

    def test_ties_keep_declaration_order(self) -> None:
        ranked = [s.id for s in compare_strategies(PropertyRecord()).ranked]
        assert ranked == [
            "renovation", "heavy", "division", "changeUse", "extension",
            "simple", "furnished", "occupied",
        ]

    def test_no_recommendation_without_positive_roi(self) -> None:
        comparison = compare_strategies(PropertyRecord())
        assert comparison.ranked[0].roi == 0
        assert comparison.recommended is None

    def test_rank_does_not_mutate_input(self, deal: PropertyRecord) -> None:
        strategies = evaluate_strategies(deal)
        ids = [s.id for s in strategies]
        rank_strategies(strategies)
        assert [s.id for s in strategies] == ids

    def test_to_dict(self, deal: PropertyRecord) -> None:
        data = compare_strategies(deal).to_dict()
        assert data["recommended"] == "division"
        assert data["ranking"][0] == "division"
        assert len(data["strategies"]) == 8
        assert len(data["strategies"][0]["success_conditions"]) == 4
        assert data["strategies"][0]["risk_level"] == "low"
