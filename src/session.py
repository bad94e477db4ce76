import logging

from dataclasses import dataclass, replace
from typing import Dict, List, Optional

# Internal Imports
from crossover import CrossoverEngine
from domain import (
    CalculationResult,
    CrossoverResult,
    EnduranceMetrics,
    TaxYearConfig,
    UserInputs,
)
from endurance import EnduranceEngine
from formatting import clamp
from forecast_engine import ProjectionEngine
from policies import TargetPolicy
from taxes import TaxCalculator


class Calculator:
    """
    Wires the engines for one tax-year configuration.
    """

    def __init__(self, config: TaxYearConfig):
        self.config = config
        self.tax_calc = TaxCalculator(config.brackets)
        self.target_policy = TargetPolicy(self.tax_calc, config.assumptions)
        self.projection_engine = ProjectionEngine(config.assumptions)
        self.endurance_engine = EnduranceEngine(
            config.assumptions, self.projection_engine
        )
        self.crossover_engine = CrossoverEngine(config.assumptions)


@dataclass(frozen=True)
class CalculationSession:
    """
    Everything derived from one submission. A new submission or a slider
    move produces a new session; sessions are never updated in place.
    """

    inputs: UserInputs
    result: CalculationResult
    projections: Dict[str, List[int]]
    adjusted_saving: int
    adjusted_fifteen_year_value: int
    crossover: Dict[str, CrossoverResult]
    endurance: EnduranceMetrics


def default_adjusted_saving(result: CalculationResult) -> int:
    return int(round((result.estimated_saving + result.target_saving) / 2))


def _clamp_saving(result: CalculationResult, saving: float) -> int:
    upper = max(0, result.after_tax_income)
    return int(round(clamp(saving, 0, upper)))


def start_session(
    inputs: UserInputs,
    calculator: Calculator,
    adjusted_saving: Optional[float] = None,
) -> CalculationSession:
    result = calculator.target_policy.calculate(inputs)
    logging.info(
        f"Calculated {inputs.filing_status.value} session: after-tax ${result.after_tax_income:,.0f}, "
        f"worker saving ${result.estimated_saving:,}, investor saving ${result.target_saving:,}"
    )

    saving = _clamp_saving(
        result,
        default_adjusted_saving(result) if adjusted_saving is None else adjusted_saving,
    )
    projections = calculator.projection_engine
    years = calculator.config.assumptions.projection_years

    return CalculationSession(
        inputs=inputs,
        result=result,
        projections={
            "current": projections.calculate_projection(
                result.estimated_saving, years, result.wealth_account
            ),
            "target": projections.calculate_projection(
                result.target_saving, years, result.wealth_account
            ),
            "adjusted": projections.calculate_projection(
                saving, years, result.wealth_account
            ),
        },
        adjusted_saving=saving,
        adjusted_fifteen_year_value=projections.calculate_fifteen_year_value(
            saving, result.wealth_account
        ),
        crossover=calculator.crossover_engine.calculate_all_crossover_points(result),
        endurance=calculator.endurance_engine.calculate_asset_endurance_metrics(
            result
        ),
    )


def adjust_savings(
    session: CalculationSession, calculator: Calculator, saving: float
) -> CalculationSession:
    """
    Recompute only the adjusted projection for a new slider value, clamped
    to [0, after-tax income].
    """
    result = session.result
    clamped = _clamp_saving(result, saving)
    if clamped != saving:
        logging.debug(f"Adjusted saving {saving} clamped to {clamped}")

    projections = calculator.projection_engine
    return replace(
        session,
        projections={
            **session.projections,
            "adjusted": projections.calculate_projection(
                clamped,
                calculator.config.assumptions.projection_years,
                result.wealth_account,
            ),
        },
        adjusted_saving=clamped,
        adjusted_fifteen_year_value=projections.calculate_fifteen_year_value(
            clamped, result.wealth_account
        ),
    )
