import pytest

from session import start_session
from visualization import (
    plot_crossover,
    plot_income_breakdown,
    plot_projection,
    plot_spending_savings,
)


@pytest.fixture
def session(calculator, single_inputs):
    return start_session(single_inputs, calculator)


def test_income_breakdown(single_inputs, single_result):
    fig = plot_income_breakdown(single_inputs, single_result, show=False)
    assert list(fig.data[0].values) == [80086, 16914, 3000]


def test_spending_savings(single_result):
    fig = plot_spending_savings(single_result, show=False)
    assert len(fig.data) == 2
    assert list(fig.data[0].y) == [70086, 42543]
    assert list(fig.data[1].y) == [10000, 37543]


def test_projection_chart(session, assumptions):
    fig = plot_projection(session, assumptions, show=False)
    assert [trace.name for trace in fig.data] == [
        "Current Path",
        "Investor Path",
        "Adjusted Path",
    ]
    assert list(fig.data[1].y) == session.projections["target"]
    assert list(fig.data[0].x) == list(range(1, 16))
    assert "15-Year Wealth Projection (7% annual return)" == fig.layout.title.text


def test_crossover_chart(session, assumptions):
    fig = plot_crossover(session, assumptions, show=False)
    assert len(fig.data) == 3
    assert fig.data[0].name == "Earned Income"


def test_save_writes_html_and_csv(session, assumptions, tmp_path):
    plot_crossover(
        session, assumptions, show=False, save=True, export_path=f"{tmp_path}/", ts="t"
    )
    assert (tmp_path / "crossover_t.html").exists()
    assert (tmp_path / "crossover_t.csv").exists()
