import pandas as pd

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Union


class FilingStatus(str, Enum):
    SINGLE = "single"
    MARRIED_JOINTLY = "marriedJointly"
    MARRIED_SEPARATELY = "marriedSeparately"
    HEAD_OF_HOUSEHOLD = "headOfHousehold"

    @classmethod
    def parse(cls, value) -> Optional["FilingStatus"]:
        """
        Map a raw filing-status tag to a member, or None when it is unknown.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


class EnduranceOutcome(Enum):
    """Assets never deplete: investment growth covers spending."""

    INDEFINITE = "indefinite"


class CrossoverOutcome(Enum):
    """Passive income never reaches earned income within the horizon."""

    NEVER = "never"


EnduranceYears = Union[int, EnduranceOutcome]
CrossoverYear = Union[int, CrossoverOutcome]


@dataclass(frozen=True)
class TaxBracket:
    ceiling: float
    rate: float


class TaxBracketTable:
    """
    Ordered marginal brackets for one filing status.
      - ceilings strictly increase
      - the last ceiling is unbounded (inf)
    """

    def __init__(self, brackets: List[TaxBracket]):
        if not brackets:
            raise ValueError("Bracket table must contain at least one bracket")

        previous = 0.0
        for bracket in brackets:
            if not 0.0 <= bracket.rate <= 1.0:
                raise ValueError(f"Bracket rate {bracket.rate} is outside [0, 1]")
            if bracket.ceiling <= previous:
                raise ValueError(
                    f"Bracket ceilings must strictly increase: {bracket.ceiling} <= {previous}"
                )
            previous = bracket.ceiling

        if brackets[-1].ceiling != float("inf"):
            raise ValueError("The final bracket must be unbounded")

        self.brackets = tuple(brackets)

    def __iter__(self):
        return iter(self.brackets)

    def __len__(self):
        return len(self.brackets)


@dataclass(frozen=True)
class FinancialAssumptions:
    wealth_spending_rate: float = 0.05
    after_tax_spending_rate: float = 0.5
    default_savings_rate: float = 0.10
    investment_return_rate: float = 0.07
    withdrawal_rate: float = 0.05
    projection_years: int = 15
    crossover_horizon_years: int = 50
    challenge_rate: float = 0.5
    challenge_months: int = 6
    capital_gains_tax_rate: float = 0.20
    max_endurance_years: int = 1000


@dataclass(frozen=True)
class TaxYearConfig:
    tax_year: int
    brackets: Dict[FilingStatus, TaxBracketTable]
    assumptions: FinancialAssumptions


@dataclass(frozen=True)
class UserInputs:
    pre_tax_income: float
    wealth_account: Optional[float]
    state_income_tax: float
    filing_status: FilingStatus


@dataclass(frozen=True)
class CalculationResult:
    federal_tax: int
    total_tax: float
    after_tax_income: float
    target_spending: int
    target_saving: int
    estimated_saving: int
    estimated_spending: int
    wealth_account: float


@dataclass(frozen=True)
class CrossoverRecord:
    year: int
    assets: float
    passive_income: float
    earned_income: float


@dataclass(frozen=True)
class CrossoverResult:
    crossover_year: CrossoverYear
    yearly_records: List[CrossoverRecord] = field(default_factory=list)

    @property
    def crosses(self) -> bool:
        return self.crossover_year is not CrossoverOutcome.NEVER

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(
            [
                {
                    "Year": r.year,
                    "Assets": r.assets,
                    "Passive Income": r.passive_income,
                    "Earned Income": r.earned_income,
                }
                for r in self.yearly_records
            ]
        )


@dataclass(frozen=True)
class EnduranceMetrics:
    worker_current_endurance: EnduranceYears
    investor_current_endurance: EnduranceYears
    worker_future_endurance: EnduranceYears
    investor_future_endurance: EnduranceYears
    worker_wealth_15yr: int
    investor_wealth_15yr: int
