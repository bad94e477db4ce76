import logging
from typing import Dict, List

# Internal Imports
from domain import (
    CalculationResult,
    CrossoverOutcome,
    CrossoverRecord,
    CrossoverResult,
    CrossoverYear,
    FinancialAssumptions,
)


class CrossoverEngine:
    """
    Finds the first year passive income (assets x withdrawal rate) meets
    earned income. Assets grow first, then the year's savings are added.
    """

    def __init__(self, assumptions: FinancialAssumptions):
        self.assumptions = assumptions

    def calculate_crossover_point(
        self, earned_income: float, current_assets: float, annual_savings: float
    ) -> CrossoverResult:
        rate = self.assumptions.investment_return_rate
        withdrawal_rate = self.assumptions.withdrawal_rate

        crossover_year: CrossoverYear = CrossoverOutcome.NEVER
        starting_passive_income = current_assets * withdrawal_rate
        if starting_passive_income >= earned_income:
            crossover_year = 0

        records: List[CrossoverRecord] = [
            CrossoverRecord(
                year=0,
                assets=current_assets,
                passive_income=starting_passive_income,
                earned_income=earned_income,
            )
        ]

        assets = current_assets
        for year in range(1, self.assumptions.crossover_horizon_years + 1):
            assets = assets * (1 + rate) + annual_savings
            passive_income = assets * withdrawal_rate
            records.append(
                CrossoverRecord(
                    year=year,
                    assets=assets,
                    passive_income=passive_income,
                    earned_income=earned_income,
                )
            )
            if (
                passive_income >= earned_income
                and crossover_year is CrossoverOutcome.NEVER
            ):
                crossover_year = year

        logging.debug(
            f"[Crossover] savings ${annual_savings:,.0f}/yr against ${earned_income:,.0f} earned: {crossover_year}"
        )
        return CrossoverResult(crossover_year=crossover_year, yearly_records=records)

    def calculate_all_crossover_points(
        self, result: CalculationResult
    ) -> Dict[str, CrossoverResult]:
        return {
            "worker": self.calculate_crossover_point(
                result.after_tax_income, result.wealth_account, result.estimated_saving
            ),
            "investor": self.calculate_crossover_point(
                result.after_tax_income, result.wealth_account, result.target_saving
            ),
        }
