import logging
from typing import Any, Dict

# Internal Imports
from domain import FilingStatus, UserInputs
from formatting import parse_currency


class InputValidationError(ValueError):
    def __init__(self, errors: Dict[str, str]):
        self.errors = errors
        super().__init__(
            "; ".join(f"{field}: {message}" for field, message in errors.items())
        )


def validate_inputs(raw: Dict[str, Any]) -> Dict[str, str]:
    """
    Check calculator form values keyed by form field name:
      - preTaxIncome:   required, > 0
      - wealthAccount:  must be present; blank ("") means no wealth
      - stateIncomeTax: optional, >= 0 and not above income
      - filingStatus:   one of the FilingStatus tags
    Returns a field -> message map, empty when the form is valid.
    """
    errors: Dict[str, str] = {}

    pre_tax_income = parse_currency(raw.get("preTaxIncome"))
    if not pre_tax_income or pre_tax_income <= 0:
        errors["preTaxIncome"] = "Please enter a valid income amount"

    raw_wealth = raw.get("wealthAccount")
    if raw_wealth is None:
        errors["wealthAccount"] = (
            "Please enter your wealth account amount (enter $0 if none)"
        )
    elif raw_wealth != "":
        wealth = parse_currency(raw_wealth)
        if wealth is None:
            errors["wealthAccount"] = (
                "Please enter your wealth account amount (enter $0 if none)"
            )
        elif wealth < 0:
            errors["wealthAccount"] = "Wealth account cannot be negative"

    state_income_tax = parse_currency(raw.get("stateIncomeTax")) or 0
    if state_income_tax < 0:
        errors["stateIncomeTax"] = "State tax cannot be negative"
    elif pre_tax_income is not None and state_income_tax > pre_tax_income:
        errors["stateIncomeTax"] = "State tax cannot exceed income"

    raw_status = raw.get("filingStatus")
    if not raw_status:
        errors["filingStatus"] = "Please select a filing status"
    elif FilingStatus.parse(raw_status) is None:
        errors["filingStatus"] = f"Unknown filing status '{raw_status}'"

    return errors


def parse_inputs(raw: Dict[str, Any]) -> UserInputs:
    errors = validate_inputs(raw)
    if errors:
        logging.info(f"Rejected calculator inputs: {', '.join(sorted(errors))}")
        raise InputValidationError(errors)

    raw_wealth = raw["wealthAccount"]
    return UserInputs(
        pre_tax_income=parse_currency(raw["preTaxIncome"]),
        wealth_account=None if raw_wealth == "" else parse_currency(raw_wealth),
        state_income_tax=parse_currency(raw.get("stateIncomeTax")) or 0,
        filing_status=FilingStatus.parse(raw["filingStatus"]),
    )
