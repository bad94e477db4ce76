import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

# Internal Imports
from domain import (
    FilingStatus,
    FinancialAssumptions,
    TaxBracket,
    TaxBracketTable,
    TaxYearConfig,
)

BASE = Path(__file__).parent.parent
CONFIG = BASE / "config"

DEFAULT_TAX_YEAR = 2024

ASSUMPTION_KEYS = {
    "Wealth Spending Rate": "wealth_spending_rate",
    "After-Tax Spending Rate": "after_tax_spending_rate",
    "Default Savings Rate": "default_savings_rate",
    "Investment Return Rate": "investment_return_rate",
    "Withdrawal Rate": "withdrawal_rate",
    "Projection Years": "projection_years",
    "Crossover Horizon Years": "crossover_horizon_years",
    "Challenge Rate": "challenge_rate",
    "Challenge Months": "challenge_months",
    "Capital Gains Tax Rate": "capital_gains_tax_rate",
    "Max Endurance Years": "max_endurance_years",
}


def load_json(config_dir: Path = CONFIG) -> Dict[str, dict]:
    files = {f.stem: json.loads(f.read_text()) for f in config_dir.glob("*.json")}
    for required in ("tax_brackets", "assumptions"):
        if required not in files:
            logging.error(f"Required: `{required}.json` in the `config` directory.")
            sys.exit(1)

    return files


def build_bracket_table(raw_brackets: List[Dict[str, Any]]) -> TaxBracketTable:
    """
    A null ceiling marks the unbounded top bracket.
    """
    return TaxBracketTable(
        [
            TaxBracket(
                ceiling=float("inf") if b["ceiling"] is None else float(b["ceiling"]),
                rate=float(b["rate"]),
            )
            for b in raw_brackets
        ]
    )


def build_assumptions(raw: Dict[str, Any]) -> FinancialAssumptions:
    unknown = set(raw) - set(ASSUMPTION_KEYS)
    if unknown:
        raise ValueError(f"Unknown assumptions: {', '.join(sorted(unknown))}")

    return FinancialAssumptions(
        **{ASSUMPTION_KEYS[label]: value for label, value in raw.items()}
    )


def load_tax_year_config(
    tax_year: int = DEFAULT_TAX_YEAR, json_data: Optional[Dict[str, dict]] = None
) -> TaxYearConfig:
    """
    Build the bracket tables and financial assumptions for one tax year.
    Everything that changes between tax years lives in the config files.
    """
    json_data = json_data if json_data is not None else load_json()
    year_key = str(tax_year)

    brackets_cfg = json_data["tax_brackets"].get(year_key)
    assumptions_cfg = json_data["assumptions"].get(year_key)
    if brackets_cfg is None or assumptions_cfg is None:
        logging.error(
            f"Tax year {tax_year} is missing from `tax_brackets.json` or `assumptions.json`."
        )
        sys.exit(1)

    brackets: Dict[FilingStatus, TaxBracketTable] = {}
    for label, raw_brackets in brackets_cfg.items():
        status = FilingStatus.parse(label)
        if status is None:
            raise ValueError(f"Unknown filing status '{label}' in tax year {tax_year}")
        brackets[status] = build_bracket_table(raw_brackets)

    missing = [s.value for s in FilingStatus if s not in brackets]
    if missing:
        logging.warning(
            f"Tax year {tax_year} has no brackets for: {', '.join(missing)}"
        )

    return TaxYearConfig(
        tax_year=tax_year,
        brackets=brackets,
        assumptions=build_assumptions(assumptions_cfg),
    )


def load_profile(json_data: Optional[Dict[str, dict]] = None) -> Dict[str, Any]:
    json_data = json_data if json_data is not None else load_json()
    if "profile" not in json_data:
        logging.error("Required: `profile.json` in the `config` directory.")
        sys.exit(1)

    return json_data["profile"]
