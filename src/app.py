import logging
import time

from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Any, Dict

# Internal Imports
from load_data import DEFAULT_TAX_YEAR, load_json, load_profile, load_tax_year_config
from logging_setup import setup_logging
from reports import (
    already_saving_enough,
    crossover_summary,
    endurance_difference,
    endurance_insights,
    format_endurance_years,
    income_summary_table,
    months_worked_for_taxes,
    savings_challenge,
    tax_analysis_table,
)
from session import Calculator, start_session
from validation import parse_inputs
from visualization import (
    plot_crossover,
    plot_income_breakdown,
    plot_projection,
    plot_spending_savings,
)

EXPORT_PATH = "export/"

# Visualization settings
SHOW_INCOME_CHART = False
SAVE_INCOME_CHART = False
SHOW_COMPARISON_CHART = False
SAVE_COMPARISON_CHART = False
SHOW_PROJECTION_CHART = False
SAVE_PROJECTION_CHART = False
SHOW_CROSSOVER_CHART = False
SAVE_CROSSOVER_CHART = False
SAVE_TABLES = False


@contextmanager
def timed(label):
    start = time.time()
    yield
    logging.info(f"{label} completed in {(time.time() - start):.2f} seconds.")


def profile_to_form(profile: Dict[str, Any]) -> Dict[str, Any]:
    """
    Map profile.json labels onto calculator form field names.
    """
    return {
        "preTaxIncome": profile.get("Pre-Tax Income"),
        "wealthAccount": profile.get("Wealth Account"),
        "stateIncomeTax": profile.get("State Income Tax"),
        "filingStatus": profile.get("Filing Status"),
    }


def main():
    setup_logging()
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")

    with timed("Calculation"):
        json_data = load_json()
        profile = load_profile(json_data)
        tax_year = int(profile.get("Tax Year", DEFAULT_TAX_YEAR))
        config = load_tax_year_config(tax_year, json_data)
        logging.info(f"Loaded {tax_year} configuration: {', '.join(sorted(json_data))}")

        inputs = parse_inputs(profile_to_form(profile))
        calculator = Calculator(config)
        session = start_session(inputs, calculator)

    result = session.result
    metrics = session.endurance
    assumptions = config.assumptions

    logging.info(
        f"Investor target: spend ${result.target_spending:,}, save ${result.target_saving:,}"
    )
    if already_saving_enough(result):
        logging.info("Worker savings already meet the investor target.")

    months = months_worked_for_taxes(inputs, result)
    logging.info(f"Months worked for taxes: {months['months']:.1f} months per year")

    challenge = savings_challenge(result, assumptions)
    logging.info(
        f"{assumptions.challenge_months}-month challenge: ${challenge['total']:,.0f} "
        f"(${challenge['monthly']:,.0f}/month)"
    )

    summary = crossover_summary(result, session.crossover)
    logging.info(
        f"Crossover | Worker: {summary['worker']} | Investor: {summary['investor']} "
        f"| Freedom gained: {summary['freedom_gained']} "
        f"| {summary['difference']}"
    )

    for label, worker, investor in [
        ("Current", metrics.worker_current_endurance, metrics.investor_current_endurance),
        ("Future", metrics.worker_future_endurance, metrics.investor_future_endurance),
    ]:
        diff_text, _ = endurance_difference(worker, investor)
        logging.info(
            f"{label} endurance | Worker: {format_endurance_years(worker)} "
            f"| Investor: {format_endurance_years(investor)} | {diff_text}"
        )

    for insight in endurance_insights(metrics, result, session.crossover):
        logging.info(f"Insight: {insight}")

    income_df = income_summary_table(inputs, result)
    tax_df = tax_analysis_table(inputs, result, assumptions, calculator.projection_engine)

    if SAVE_TABLES:
        Path(EXPORT_PATH).mkdir(parents=True, exist_ok=True)
        income_df.to_csv(f"{EXPORT_PATH}income_summary_{ts}.csv", index=False)
        tax_df.to_csv(f"{EXPORT_PATH}tax_analysis_{ts}.csv", index=False)
        logging.info(f"Tables saved to {EXPORT_PATH}")

    if any(
        [SAVE_INCOME_CHART, SAVE_COMPARISON_CHART, SAVE_PROJECTION_CHART, SAVE_CROSSOVER_CHART]
    ):
        Path(EXPORT_PATH).mkdir(parents=True, exist_ok=True)

    plot_income_breakdown(
        inputs,
        result,
        show=SHOW_INCOME_CHART,
        save=SAVE_INCOME_CHART,
        export_path=EXPORT_PATH,
        ts=ts,
    )
    plot_spending_savings(
        result,
        show=SHOW_COMPARISON_CHART,
        save=SAVE_COMPARISON_CHART,
        export_path=EXPORT_PATH,
        ts=ts,
    )
    plot_projection(
        session,
        assumptions,
        show=SHOW_PROJECTION_CHART,
        save=SAVE_PROJECTION_CHART,
        export_path=EXPORT_PATH,
        ts=ts,
    )
    plot_crossover(
        session,
        assumptions,
        show=SHOW_CROSSOVER_CHART,
        save=SAVE_CROSSOVER_CHART,
        export_path=EXPORT_PATH,
        ts=ts,
    )


if __name__ == "__main__":
    main()
