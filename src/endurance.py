import logging

# Internal Imports
from domain import (
    CalculationResult,
    EnduranceMetrics,
    EnduranceOutcome,
    EnduranceYears,
    FinancialAssumptions,
)
from forecast_engine import ProjectionEngine


class EnduranceLimitError(RuntimeError):
    pass


class EnduranceEngine:
    """
    Estimates how long an asset base sustains a fixed annual spending level.
    Each year spending is withdrawn first, then the remainder grows at the
    investment return rate.
    """

    def __init__(
        self, assumptions: FinancialAssumptions, projection_engine: ProjectionEngine
    ):
        self.assumptions = assumptions
        self.projection_engine = projection_engine

    def calculate_asset_endurance(
        self, annual_spending: float, asset_base: float, years_elapsed: int = 0
    ) -> EnduranceYears:
        rate = self.assumptions.investment_return_rate
        limit = self.assumptions.max_endurance_years

        while True:
            if annual_spending <= asset_base * rate:
                return EnduranceOutcome.INDEFINITE

            if asset_base - annual_spending <= 0:
                return years_elapsed + 1

            asset_base = (asset_base - annual_spending) * (1 + rate)
            years_elapsed += 1

            if years_elapsed >= limit:
                logging.error(
                    f"[Endurance] spending ${annual_spending:,.0f} not resolved after {limit} years"
                )
                raise EnduranceLimitError(
                    f"Asset endurance did not resolve within {limit} years"
                )

    def calculate_asset_endurance_metrics(
        self, result: CalculationResult
    ) -> EnduranceMetrics:
        worker_wealth_15yr = self.projection_engine.calculate_fifteen_year_value(
            result.estimated_saving, result.wealth_account
        )
        investor_wealth_15yr = self.projection_engine.calculate_fifteen_year_value(
            result.target_saving, result.wealth_account
        )

        return EnduranceMetrics(
            worker_current_endurance=self.calculate_asset_endurance(
                result.estimated_spending, result.wealth_account
            ),
            investor_current_endurance=self.calculate_asset_endurance(
                result.target_spending, result.wealth_account
            ),
            worker_future_endurance=self.calculate_asset_endurance(
                result.estimated_spending, worker_wealth_15yr
            ),
            investor_future_endurance=self.calculate_asset_endurance(
                result.target_spending, investor_wealth_15yr
            ),
            worker_wealth_15yr=worker_wealth_15yr,
            investor_wealth_15yr=investor_wealth_15yr,
        )
