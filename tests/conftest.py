"""Pytest fixtures."""

import pytest

from flip_deal.analysis import AnalysisEngine
from flip_deal.models import PropertyRecord


@pytest.fixture
def flip_record() -> PropertyRecord:
    """Typical renovation deal: 18.75% ROI, no risk factor triggered."""
    return PropertyRecord(
        title="3-room flat to renovate",
        location="Paris 11",
        description="Bright flat, renovation needed, metro nearby.",
        price=250000,
        surface=65,
        notary_fees=20000,
        renovation_costs=50000,
        resale_price=380000,
        time_to_sell=8,
        structural_condition=7,
        technical_condition=6.5,
        energy_rating="C",
        selling_time=6,
    )


@pytest.fixture
def nominal_record() -> PropertyRecord:
    """Record that triggers no risk rule once ROI is at least 15%."""
    return PropertyRecord(
        structural_condition=8,
        technical_condition=8,
        selling_time=6,
        time_to_sell=6,
        energy_rating="C",
    )


@pytest.fixture
def engine() -> AnalysisEngine:
    """Engine on built-in defaults (no config file)."""
    return AnalysisEngine(config={})


@pytest.fixture
def empty_config(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    return path
