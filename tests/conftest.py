"""
Pytest fixtures for the worker vs investor calculator tests.
"""

import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from domain import FilingStatus, UserInputs
from load_data import load_tax_year_config
from session import Calculator


# =============================================================================
# CONFIG FIXTURES
# =============================================================================

@pytest.fixture(scope="session")
def config():
    """2024 tax-year configuration shipped in config/."""
    return load_tax_year_config(2024)


@pytest.fixture
def assumptions(config):
    return config.assumptions


@pytest.fixture
def calculator(config):
    return Calculator(config)


# =============================================================================
# INPUT FIXTURES
# =============================================================================

@pytest.fixture
def single_inputs():
    """$100K single filer, $3K state tax, $50K wealth."""
    return UserInputs(
        pre_tax_income=100_000,
        wealth_account=50_000,
        state_income_tax=3_000,
        filing_status=FilingStatus.SINGLE,
    )


@pytest.fixture
def single_result(calculator, single_inputs):
    return calculator.target_policy.calculate(single_inputs)
