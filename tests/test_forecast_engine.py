import pytest

from domain import FinancialAssumptions
from forecast_engine import ProjectionEngine


@pytest.fixture
def engine(assumptions):
    return ProjectionEngine(assumptions)


def test_projection_compounds_contributions(engine):
    series = engine.calculate_projection(10_000, 15, 0)

    assert len(series) == 15
    assert series[0] == 10_700
    assert series[1] == 22_149
    assert all(b > a for a, b in zip(series, series[1:]))
    assert series[-1] > 150_000


def test_contribution_lands_before_growth(engine):
    # start-of-year contribution: (100 + 1000) x 1.07
    assert engine.calculate_projection(1_000, 1, 100) == [1_177]


def test_default_horizon(engine, assumptions):
    assert len(engine.calculate_projection(5_000)) == assumptions.projection_years


@pytest.mark.parametrize(
    "saving, balance", [(0, 0), (10_000, 0), (37_543, 50_000), (0, 250_000), (1, 1)]
)
def test_fifteen_year_value_matches_last_projection(engine, assumptions, saving, balance):
    series = engine.calculate_projection(saving, assumptions.projection_years, balance)
    assert series[-1] == engine.calculate_fifteen_year_value(saving, balance)


def test_zero_return_is_simple_sum():
    engine = ProjectionEngine(FinancialAssumptions(investment_return_rate=0.0))
    assert engine.calculate_projection(1_000, 3, 500) == [1_500, 2_500, 3_500]
    assert engine.calculate_fifteen_year_value(1_000) == 15_000


def test_projection_frame(engine):
    df = engine.projection_frame(
        {
            "Current": engine.calculate_projection(1_000, 5),
            "Target": engine.calculate_projection(2_000, 5),
        }
    )
    assert list(df.columns) == ["Year", "Current", "Target"]
    assert df["Year"].tolist() == [1, 2, 3, 4, 5]


def test_projection_frame_rejects_mismatched_series(engine):
    with pytest.raises(ValueError):
        engine.projection_frame({"A": [1, 2], "B": [1, 2, 3]})
