import pytest

from crossover import CrossoverEngine
from domain import CrossoverOutcome, EnduranceOutcome


@pytest.fixture
def engine(assumptions):
    return CrossoverEngine(assumptions)


def test_already_financially_independent(engine):
    # 20,000 x 5% = 1,000
    result = engine.calculate_crossover_point(1_000, 20_000, 0)
    assert result.crossover_year == 0
    assert result.crosses


def test_first_crossing_year(engine):
    result = engine.calculate_crossover_point(1_000, 0, 10_000)

    # year 1: 10,000 -> 500; year 2: 20,700 -> 1,035
    assert result.yearly_records[1].passive_income == pytest.approx(500)
    assert result.yearly_records[2].assets == pytest.approx(20_700)
    assert result.crossover_year == 2


def test_growth_precedes_contribution(engine):
    result = engine.calculate_crossover_point(1_000_000, 1_000, 100)
    assert result.yearly_records[1].assets == pytest.approx(1_000 * 1.07 + 100)


def test_never_crosses(engine):
    result = engine.calculate_crossover_point(100_000, 0, 0)
    assert result.crossover_year is CrossoverOutcome.NEVER
    assert not result.crosses
    assert result.crossover_year is not EnduranceOutcome.INDEFINITE


def test_records_cover_horizon(engine, assumptions):
    result = engine.calculate_crossover_point(50_000, 10_000, 5_000)
    records = result.yearly_records

    assert len(records) == assumptions.crossover_horizon_years + 1
    assert [r.year for r in records] == list(range(assumptions.crossover_horizon_years + 1))
    assert all(r.earned_income == 50_000 for r in records)
    assert records[0].assets == 10_000
    assert records[0].passive_income == pytest.approx(500)


def test_to_dataframe(engine):
    df = engine.calculate_crossover_point(50_000, 10_000, 5_000).to_dataframe()
    assert list(df.columns) == ["Year", "Assets", "Passive Income", "Earned Income"]
    assert len(df) == 51


def test_all_crossover_points(engine, single_result):
    points = engine.calculate_all_crossover_points(single_result)
    worker = points["worker"]
    investor = points["investor"]

    assert set(points) == {"worker", "investor"}
    assert worker.crosses and investor.crosses
    assert investor.crossover_year < worker.crossover_year
    assert worker.yearly_records[0].earned_income == single_result.after_tax_income
    assert worker.yearly_records[0].assets == single_result.wealth_account
