import logging
from typing import Dict, Union

# Internal Imports
from domain import FilingStatus, TaxBracketTable


class TaxCalculator:
    """
    Calculates progressive federal income tax from per-filing-status
    bracket tables. State tax is a flat amount supplied by the user and
    is not handled here.
    """

    def __init__(self, brackets: Dict[FilingStatus, TaxBracketTable]):
        self.brackets = brackets

    def calculate_federal_tax(
        self, income: float, filing_status: Union[FilingStatus, str, None]
    ) -> int:
        status = FilingStatus.parse(filing_status)
        bracket_table = self.brackets.get(status) if status is not None else None
        if bracket_table is None:
            logging.warning(
                f"No tax brackets for filing status '{filing_status}', federal tax is 0"
            )
            return 0
        if income <= 0:
            return 0

        tax = 0.0
        previous_ceiling = 0.0
        for i, bracket in enumerate(bracket_table):
            if income <= previous_ceiling:
                break
            taxable_chunk = min(income, bracket.ceiling) - previous_ceiling
            logging.debug(
                f"Bracket {i}: {previous_ceiling}–{bracket.ceiling} at {bracket.rate}, "
                f"taxable_chunk={taxable_chunk}"
            )
            tax += taxable_chunk * bracket.rate
            previous_ceiling = bracket.ceiling

        return int(round(tax))

    @staticmethod
    def calculate_effective_rate(tax: float, income: float) -> float:
        if income <= 0:
            return 0.0
        return tax / income
