import math
import pandas as pd

from typing import Any, Dict, List, Optional, Tuple

# Internal Imports
from domain import (
    CalculationResult,
    CrossoverOutcome,
    CrossoverResult,
    CrossoverYear,
    EnduranceMetrics,
    EnduranceOutcome,
    EnduranceYears,
    FinancialAssumptions,
    UserInputs,
)
from formatting import format_currency
from forecast_engine import ProjectionEngine
from taxes import TaxCalculator

MONTH_NAMES = [
    "JAN",
    "FEB",
    "MAR",
    "APR",
    "MAY",
    "JUN",
    "JUL",
    "AUG",
    "SEP",
    "OCT",
    "NOV",
    "DEC",
]


def format_crossover_years(years: CrossoverYear) -> str:
    if years is CrossoverOutcome.NEVER:
        return "Never"
    if years == 0:
        return "Already Free!"
    return f"{years} years"


def format_endurance_years(years: EnduranceYears) -> str:
    if years is EnduranceOutcome.INDEFINITE:
        return "Indefinite"
    return f"{years} years"


def income_summary_table(
    inputs: UserInputs, result: CalculationResult
) -> pd.DataFrame:
    rows = [
        ("Pre-Tax Income", inputs.pre_tax_income),
        ("Wealth Account", result.wealth_account),
        ("Federal Tax", result.federal_tax),
        ("State Income Tax", inputs.state_income_tax),
        ("Total Tax", result.total_tax),
        ("After-Tax Income", result.after_tax_income),
    ]
    return pd.DataFrame(rows, columns=["Item", "Amount"])


def months_worked_for_taxes(
    inputs: UserInputs, result: CalculationResult
) -> Dict[str, Any]:
    """
    Share of the year worked to pay taxes, in months to one decimal, plus
    a calendar marking the whole months spent on taxes.
    """
    rate = TaxCalculator.calculate_effective_rate(
        result.total_tax, inputs.pre_tax_income
    )
    months = round(rate * 12, 1)
    full_months = math.floor(months)

    return {
        "months": months,
        "calendar": [
            (name, "tax" if i < full_months else "keep")
            for i, name in enumerate(MONTH_NAMES)
        ],
    }


def savings_challenge(
    result: CalculationResult, assumptions: FinancialAssumptions
) -> Dict[str, float]:
    monthly = result.after_tax_income * assumptions.challenge_rate / 12
    return {
        "total": monthly * assumptions.challenge_months,
        "monthly": monthly,
    }


def already_saving_enough(result: CalculationResult) -> bool:
    return result.estimated_saving >= result.target_saving


def tax_analysis_table(
    inputs: UserInputs,
    result: CalculationResult,
    assumptions: FinancialAssumptions,
    projection_engine: ProjectionEngine,
) -> pd.DataFrame:
    """
    Compares the projection horizon of W-2 income taxed at the worker's
    effective rate against investment gains taxed at the flat capital
    gains rate. Investor gains exclude contributed principal.
    """
    horizon = assumptions.projection_years
    cg_rate = assumptions.capital_gains_tax_rate

    worker_gross = inputs.pre_tax_income * horizon
    worker_tax = result.total_tax * horizon
    worker_net = result.after_tax_income * horizon

    investor_wealth = projection_engine.calculate_fifteen_year_value(
        result.target_saving, result.wealth_account
    )
    contributions = result.wealth_account + result.target_saving * horizon
    investor_gross = investor_wealth - contributions
    investor_tax = investor_gross * cg_rate
    investor_net = investor_gross * (1 - cg_rate)

    worker_rate = round(
        TaxCalculator.calculate_effective_rate(result.total_tax, inputs.pre_tax_income)
        * 100,
        1,
    )
    investor_rate = round(cg_rate * 100, 1)

    worker_years = round(worker_rate / 100 * horizon, 1)
    investor_years = round(cg_rate * horizon, 1)

    # (metric, worker, investor, difference, favors investor)
    rows = [
        (
            "Gross Income",
            worker_gross,
            investor_gross,
            investor_gross - worker_gross,
            investor_gross - worker_gross >= 0,
        ),
        (
            "Tax Impact",
            worker_tax,
            investor_tax,
            investor_tax - worker_tax,
            investor_tax - worker_tax <= 0,
        ),
        (
            "Net Income",
            worker_net,
            investor_net,
            investor_net - worker_net,
            investor_net - worker_net >= 0,
        ),
        (
            "Tax Rate (%)",
            worker_rate,
            investor_rate,
            round(investor_rate - worker_rate, 1),
            investor_rate - worker_rate <= 0,
        ),
        (
            "Years Worked for Taxes",
            worker_years,
            investor_years,
            round(worker_years - investor_years, 1),
            worker_years - investor_years >= 0,
        ),
    ]
    return pd.DataFrame(
        rows, columns=["Metric", "Worker", "Investor", "Difference", "Favors Investor"]
    )


def crossover_difference(
    worker_year: CrossoverYear, investor_year: CrossoverYear
) -> Tuple[str, str]:
    worker_crosses = worker_year is not CrossoverOutcome.NEVER
    investor_crosses = investor_year is not CrossoverOutcome.NEVER

    if worker_crosses and investor_crosses:
        return f"{worker_year - investor_year} years faster", "positive"
    if investor_crosses:
        return "Investor achieves freedom", "positive"
    return "N/A", ""


def crossover_summary(
    result: CalculationResult, crossover: Dict[str, CrossoverResult]
) -> Dict[str, Any]:
    worker = crossover["worker"]
    investor = crossover["investor"]
    extra_savings = result.target_saving - result.estimated_saving

    if worker.crosses and investor.crosses:
        years_saved = worker.crossover_year - investor.crossover_year
        freedom_gained = f"{years_saved} years"
    else:
        years_saved = "N/A"
        freedom_gained = "Infinite"

    difference, _ = crossover_difference(worker.crossover_year, investor.crossover_year)
    return {
        "worker": format_crossover_years(worker.crossover_year),
        "investor": format_crossover_years(investor.crossover_year),
        "years_saved": years_saved,
        "freedom_gained": freedom_gained,
        "difference": difference,
        "extra_savings_needed": extra_savings,
    }


def crossover_chart_window(
    worker_year: CrossoverYear, investor_year: CrossoverYear, horizon: int = 50
) -> int:
    """
    Number of years shown on the crossover chart. Wide enough to show
    each path's crossing, zoomed in when both cross early.
    """
    worker_crosses = worker_year is not CrossoverOutcome.NEVER
    investor_crosses = investor_year is not CrossoverOutcome.NEVER

    max_years = 30
    if worker_crosses and worker_year > 0:
        max_years = min(horizon, max(max_years, math.ceil(worker_year * 1.3)))
    if investor_crosses and investor_year > 0:
        max_years = min(horizon, max(20, math.ceil(investor_year * 1.5)))

    if worker_crosses and investor_crosses and worker_year <= 10 and investor_year <= 10:
        max_years = 15

    return max_years


def crossover_chart_frame(
    result: CalculationResult,
    crossover: Dict[str, CrossoverResult],
    max_years: Optional[int] = None,
    horizon: int = 50,
) -> pd.DataFrame:
    if max_years is None:
        max_years = crossover_chart_window(
            crossover["worker"].crossover_year,
            crossover["investor"].crossover_year,
            horizon,
        )

    worker_df = crossover["worker"].to_dataframe().iloc[: max_years + 1]
    investor_df = crossover["investor"].to_dataframe().iloc[: max_years + 1]

    return pd.DataFrame(
        {
            "Year": worker_df["Year"],
            "Earned Income": result.after_tax_income,
            "Worker Passive Income": worker_df["Passive Income"],
            "Investor Passive Income": investor_df["Passive Income"].values,
        }
    )


def endurance_difference(
    worker: EnduranceYears, investor: EnduranceYears
) -> Tuple[str, str]:
    worker_forever = worker is EnduranceOutcome.INDEFINITE
    investor_forever = investor is EnduranceOutcome.INDEFINITE

    if worker_forever and investor_forever:
        return "Both indefinite", "positive"
    if investor_forever:
        return "Investor: Indefinite", "positive"
    if worker_forever:
        return "Worker: Indefinite", "negative"

    diff = investor - worker
    sign = "+" if diff > 0 else ""
    return f"{sign}{diff} years", "positive" if diff > 0 else "negative"


def endurance_insights(
    metrics: EnduranceMetrics,
    result: CalculationResult,
    crossover: Dict[str, CrossoverResult],
) -> List[str]:
    insights = []
    worker = crossover["worker"]
    investor = crossover["investor"]

    if worker.crosses and investor.crosses:
        years_saved = worker.crossover_year - investor.crossover_year
        insights.append(
            f"Following the investor path achieves financial independence {years_saved} years earlier"
        )
    elif investor.crosses:
        insights.append(
            "Only the investor path leads to financial independence within 50 years"
        )

    # current assets
    worker_now = metrics.worker_current_endurance
    investor_now = metrics.investor_current_endurance
    if result.wealth_account > 0:
        if investor_now is EnduranceOutcome.INDEFINITE:
            insights.append(
                "Your current assets can sustain investor-level spending indefinitely!"
            )
        elif worker_now is not EnduranceOutcome.INDEFINITE:
            diff = investor_now - worker_now
            if diff > 0:
                insights.append(
                    f"Investor spending patterns would make your current assets last {diff} year(s) longer"
                )

    # assets after the projection horizon
    worker_future = metrics.worker_future_endurance
    investor_future = metrics.investor_future_endurance
    if (
        investor_future is EnduranceOutcome.INDEFINITE
        and worker_future is not EnduranceOutcome.INDEFINITE
    ):
        insights.append(
            "Following the investor path for 15 years would give you indefinite financial freedom"
        )
    elif (
        investor_future is not EnduranceOutcome.INDEFINITE
        and worker_future is not EnduranceOutcome.INDEFINITE
    ):
        years_diff = investor_future - worker_future
        if years_diff > 0:
            insights.append(
                f"Investor habits would extend your future asset endurance by {years_diff} years"
            )

    wealth_diff = metrics.investor_wealth_15yr - metrics.worker_wealth_15yr
    if wealth_diff > 0:
        insights.append(
            f"Following investor principles would accumulate {format_currency(wealth_diff)} more wealth over 15 years"
        )

    if result.estimated_spending > 0:
        reduction = round(
            (result.estimated_spending - result.target_spending)
            / result.estimated_spending
            * 100
        )
        if reduction > 0:
            insights.append(
                f"Reducing spending by {reduction}% aligns you with investor principles"
            )

    return insights
