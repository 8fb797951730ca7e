"""Tests for sub-scores, global score and recommendation tiers."""

import pytest

from flip_deal.analysis import compute_scores, global_score, recommend
from flip_deal.config import ScoringThresholds
from flip_deal.models import PropertyRecord, Recommendation


class TestComputeScores:
    def test_typical_deal(self, flip_record: PropertyRecord) -> None:
        scores = compute_scores(flip_record, roi=18.75)
        assert scores.financial == 3.8
        assert scores.technical == 6.75
        assert scores.market == 7
        assert scores.risk == 9
        # (3.75 + 6.75 + 7 + 9) / 4 = 6.625, from the unrounded financial score
        assert scores.global_score == 6.6

    @pytest.mark.parametrize(
        "roi,expected",
        [(250, 10), (50, 10), (25, 5), (0, 0), (-100, 0)],
    )
    def test_financial_score_clamped(self, roi: float, expected: float) -> None:
        assert compute_scores(PropertyRecord(), roi).financial == expected

    def test_financial_score_monotonic(self) -> None:
        rois = [-50, -1, 0, 3, 12.5, 30, 49, 50, 80]
        values = [compute_scores(PropertyRecord(), r).financial for r in rois]
        assert values == sorted(values)

    def test_market_score(self) -> None:
        assert compute_scores(PropertyRecord(selling_time=6), 0).market == 7
        assert compute_scores(PropertyRecord(selling_time=30), 0).market == 0
        assert compute_scores(PropertyRecord(selling_time=0), 0).market == 10

    def test_risk_score_clamped(self) -> None:
        assert compute_scores(PropertyRecord(time_to_sell=0), 0).risk == 10
        assert compute_scores(PropertyRecord(time_to_sell=14), 0).risk == 6
        assert compute_scores(PropertyRecord(time_to_sell=40), 0).risk == 0

    def test_default_record(self) -> None:
        scores = compute_scores(PropertyRecord(), 0)
        assert scores.global_score == 5.5


class TestGlobalScore:
    def test_mean_of_sub_scores(self) -> None:
        assert global_score(5, 6, 7, 8) == 6.5

    def test_rounds_half_up(self) -> None:
        # mean 6.25; round() would give 6.2
        assert global_score(6, 6, 6, 7) == 6.3


class TestRecommend:
    def test_boundaries(self) -> None:
        assert recommend(7.5) is Recommendation.RECOMMENDED
        assert recommend(7.49) is Recommendation.CONDITIONAL
        assert recommend(5) is Recommendation.CONDITIONAL
        assert recommend(4.99) is Recommendation.NOT_RECOMMENDED

    def test_custom_thresholds(self) -> None:
        thresholds = ScoringThresholds(recommended_min=6, conditional_min=4)
        assert recommend(6.6, thresholds) is Recommendation.RECOMMENDED
        assert recommend(4.5, thresholds) is Recommendation.CONDITIONAL

    def test_labels(self) -> None:
        assert Recommendation.NOT_RECOMMENDED.value == "NOT RECOMMENDED"
