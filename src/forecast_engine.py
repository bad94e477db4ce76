import numpy as np
import pandas as pd

from typing import Dict, List, Optional

# Internal Imports
from domain import FinancialAssumptions


class ProjectionEngine:
    """
    Compounds a fixed annual contribution at a fixed annual return.
    Contributions land at the start of each year, before growth.
    """

    def __init__(self, assumptions: FinancialAssumptions):
        self.assumptions = assumptions

    def calculate_projection(
        self,
        annual_saving: float,
        years: Optional[int] = None,
        starting_balance: float = 0,
    ) -> List[int]:
        if years is None:
            years = self.assumptions.projection_years

        growth = 1 + self.assumptions.investment_return_rate
        projection = []
        balance = starting_balance
        for _ in range(1, years + 1):
            balance += annual_saving
            balance = balance * growth
            projection.append(int(round(balance)))
        return projection

    def calculate_fifteen_year_value(
        self, annual_saving: float, starting_balance: float = 0
    ) -> int:
        growth = 1 + self.assumptions.investment_return_rate
        balance = starting_balance
        for _ in range(1, self.assumptions.projection_years + 1):
            balance += annual_saving
            balance = balance * growth
        return int(round(balance))

    @staticmethod
    def projection_frame(series_by_label: Dict[str, List[int]]) -> pd.DataFrame:
        """
        Year-indexed table of projection series; all series share a horizon.
        """
        lengths = {len(series) for series in series_by_label.values()}
        if len(lengths) > 1:
            raise ValueError(f"Projection series differ in length: {sorted(lengths)}")

        horizon = lengths.pop() if lengths else 0
        df = pd.DataFrame({"Year": np.arange(1, horizon + 1)})
        for label, series in series_by_label.items():
            df[label] = series
        return df
