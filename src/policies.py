import logging

# Internal Imports
from domain import CalculationResult, FinancialAssumptions, UserInputs
from taxes import TaxCalculator


class TargetPolicy:
    """
    Derives the two spending/saving splits compared by the calculator.

    Worker path: save a fixed share of gross income, spend the rest of
    after-tax income.

    Investor path: spend a share of after-tax income plus a share of
    wealth, save the remainder. The investor split is then bounded so it
    never saves less, nor spends more, than the worker split. The saving
    floor is applied before the spending ceiling; the two corrections do
    not commute.
    """

    def __init__(self, tax_calc: TaxCalculator, assumptions: FinancialAssumptions):
        self.tax_calc = tax_calc
        self.assumptions = assumptions

    def calculate(self, inputs: UserInputs) -> CalculationResult:
        federal_tax = self.tax_calc.calculate_federal_tax(
            inputs.pre_tax_income, inputs.filing_status
        )
        total_tax = federal_tax + inputs.state_income_tax
        after_tax_income = inputs.pre_tax_income - total_tax

        # blank wealth field means no wealth
        wealth_account = (
            inputs.wealth_account if inputs.wealth_account is not None else 0
        )

        estimated_saving = inputs.pre_tax_income * self.assumptions.default_savings_rate
        estimated_spending = after_tax_income - estimated_saving

        target_spending = (
            self.assumptions.after_tax_spending_rate * after_tax_income
            + self.assumptions.wealth_spending_rate * wealth_account
        )
        target_saving = max(0, after_tax_income - target_spending)

        if target_saving < estimated_saving:
            logging.debug(
                f"[TargetPolicy] saving floor: {target_saving:,.0f} raised to {estimated_saving:,.0f}"
            )
            target_saving = estimated_saving
            target_spending = after_tax_income - target_saving

        if target_spending > estimated_spending:
            logging.debug(
                f"[TargetPolicy] spending ceiling: {target_spending:,.0f} lowered to {estimated_spending:,.0f}"
            )
            target_spending = estimated_spending
            target_saving = after_tax_income - target_spending

        return CalculationResult(
            federal_tax=federal_tax,
            total_tax=total_tax,
            after_tax_income=after_tax_income,
            target_spending=int(round(target_spending)),
            target_saving=int(round(target_saving)),
            estimated_saving=int(round(estimated_saving)),
            estimated_spending=int(round(estimated_spending)),
            wealth_account=wealth_account,
        )
