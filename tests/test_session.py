import pytest

from domain import FilingStatus, UserInputs
from session import adjust_savings, default_adjusted_saving, start_session


@pytest.fixture
def session(calculator, single_inputs):
    return start_session(single_inputs, calculator)


def test_session_holds_all_outputs(session, single_result, assumptions):
    assert session.result == single_result
    assert set(session.projections) == {"current", "target", "adjusted"}
    for series in session.projections.values():
        assert len(series) == assumptions.projection_years
    assert set(session.crossover) == {"worker", "investor"}
    assert session.endurance.investor_wealth_15yr == session.projections["target"][-1]
    assert session.endurance.worker_wealth_15yr == session.projections["current"][-1]


def test_default_adjusted_saving_is_midpoint(session, single_result):
    assert session.adjusted_saving == default_adjusted_saving(single_result)
    assert single_result.estimated_saving <= session.adjusted_saving <= single_result.target_saving
    assert session.adjusted_fifteen_year_value == session.projections["adjusted"][-1]


def test_adjust_savings_recomputes_adjusted_only(session, calculator):
    adjusted = adjust_savings(session, calculator, 20_000)

    assert adjusted is not session
    assert adjusted.adjusted_saving == 20_000
    assert adjusted.projections["adjusted"] == calculator.projection_engine.calculate_projection(
        20_000, 15, session.result.wealth_account
    )
    assert adjusted.projections["current"] == session.projections["current"]
    assert adjusted.projections["target"] == session.projections["target"]
    assert adjusted.result == session.result
    assert adjusted.crossover == session.crossover
    assert adjusted.endurance == session.endurance
    # the first session is untouched
    assert session.adjusted_saving == default_adjusted_saving(session.result)


def test_adjust_savings_clamps_to_after_tax_income(session, calculator):
    too_high = adjust_savings(session, calculator, 10_000_000)
    assert too_high.adjusted_saving == 80_086

    negative = adjust_savings(session, calculator, -500)
    assert negative.adjusted_saving == 0


def test_start_session_accepts_slider_value(calculator, single_inputs):
    session = start_session(single_inputs, calculator, adjusted_saving=5_000)
    assert session.adjusted_saving == 5_000


def test_resubmission_is_idempotent(calculator, single_inputs):
    assert start_session(single_inputs, calculator) == start_session(
        single_inputs, calculator
    )


def test_new_submission_replaces_everything(calculator, single_inputs):
    first = start_session(single_inputs, calculator)
    second = start_session(
        UserInputs(
            pre_tax_income=250_000,
            wealth_account=None,
            state_income_tax=10_000,
            filing_status=FilingStatus.MARRIED_JOINTLY,
        ),
        calculator,
    )
    assert second.result != first.result
    assert second.result.wealth_account == 0
    assert second.projections["current"] != first.projections["current"]
