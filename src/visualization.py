import logging
import pandas as pd
import plotly.graph_objects as go

from plotly.subplots import make_subplots

# Internal Imports
from domain import CalculationResult, FinancialAssumptions, UserInputs
from formatting import format_percentage
from forecast_engine import ProjectionEngine
from reports import crossover_chart_frame, crossover_chart_window
from session import CalculationSession

COLORS = {
    "primary": "#8cc63f",
    "primary_dark": "#6fa02e",
    "secondary": "#ea9d4b",
    "gray": "#8a9ba8",
    "dark": "#2d2d2d",
    "error": "#e74c3c",
}


def _finish(
    fig: go.Figure,
    df: pd.DataFrame,
    name: str,
    show: bool,
    save: bool,
    export_path: str,
    ts: str,
) -> go.Figure:
    if show:
        fig.show()
    if save:
        csv_path = f"{export_path}{name}_{ts}.csv"
        html_path = f"{export_path}{name}_{ts}.html"
        df.to_csv(csv_path, index=False)
        fig.write_html(html_path)
        logging.debug(f"Saved {name} chart to {html_path}")
    return fig


def plot_income_breakdown(
    inputs: UserInputs,
    result: CalculationResult,
    show: bool = True,
    save: bool = False,
    export_path: str = "export/",
    ts: str = "",
) -> go.Figure:
    """
    Donut of after-tax income against federal and state tax.
    """
    df = pd.DataFrame(
        {
            "Component": ["After-Tax Income", "Federal Tax", "State Tax"],
            "Amount": [
                result.after_tax_income,
                result.federal_tax,
                inputs.state_income_tax,
            ],
        }
    )
    fig = go.Figure(
        go.Pie(
            labels=df["Component"],
            values=df["Amount"],
            hole=0.5,
            marker=dict(
                colors=[COLORS["primary"], COLORS["dark"], COLORS["gray"]],
            ),
            hovertemplate="%{label}: %{value:$,.0f}<extra></extra>",
        )
    )
    fig.update_layout(
        title="Income Breakdown",
        template="plotly_white",
        legend=dict(orientation="h", x=0.5, y=-0.05, xanchor="center", yanchor="top"),
    )
    return _finish(fig, df, "income_breakdown", show, save, export_path, ts)


def plot_spending_savings(
    result: CalculationResult,
    show: bool = True,
    save: bool = False,
    export_path: str = "export/",
    ts: str = "",
) -> go.Figure:
    """
    Side-by-side worker vs investor bars for spending and for saving.
    """
    df = pd.DataFrame(
        {
            "Path": ["Worker", "Investor"],
            "Spending": [result.estimated_spending, result.target_spending],
            "Saving": [result.estimated_saving, result.target_saving],
        }
    )
    fig = make_subplots(
        rows=1,
        cols=2,
        subplot_titles=("Spending Comparison", "Savings Comparison"),
    )
    for col_idx, col in enumerate(["Spending", "Saving"], start=1):
        fig.add_trace(
            go.Bar(
                x=df["Path"],
                y=df[col],
                name=col,
                marker_color=[COLORS["secondary"], COLORS["primary"]],
                hovertemplate=f"{col} %{{y:$,.0f}}<extra></extra>",
            ),
            row=1,
            col=col_idx,
        )
        fig.update_yaxes(tickformat="$,.0f", row=1, col=col_idx)

    fig.update_layout(
        title="Worker vs Investor",
        template="plotly_white",
        showlegend=False,
    )
    return _finish(fig, df, "spending_savings", show, save, export_path, ts)


def plot_projection(
    session: CalculationSession,
    assumptions: FinancialAssumptions,
    show: bool = True,
    save: bool = False,
    export_path: str = "export/",
    ts: str = "",
) -> go.Figure:
    projections = session.projections
    df = ProjectionEngine.projection_frame(
        {
            "Current Path": projections["current"],
            "Investor Path": projections["target"],
            "Adjusted Path": projections["adjusted"],
        }
    )

    line_styles = {
        "Current Path": dict(color=COLORS["secondary"], width=3),
        "Investor Path": dict(color=COLORS["primary"], width=3),
        "Adjusted Path": dict(color=COLORS["gray"], width=2, dash="dash"),
    }

    fig = go.Figure()
    for col, line in line_styles.items():
        fig.add_trace(
            go.Scatter(
                x=df["Year"],
                y=df[col],
                name=col,
                mode="lines",
                line=line,
                hovertemplate=f"{col}: %{{y:$,.0f}}<extra></extra>",
            )
        )

    title = (
        f"{assumptions.projection_years}-Year Wealth Projection "
        f"({format_percentage(assumptions.investment_return_rate)} annual return)"
    )
    fig.update_layout(
        title=title,
        template="plotly_white",
        hovermode="x unified",
        yaxis_tickformat="$,.0f",
        xaxis_title="Year",
        legend=dict(orientation="h", x=0.5, y=-0.1, xanchor="center", yanchor="top"),
    )
    return _finish(fig, df, "projection", show, save, export_path, ts)


def plot_crossover(
    session: CalculationSession,
    assumptions: FinancialAssumptions,
    show: bool = True,
    save: bool = False,
    export_path: str = "export/",
    ts: str = "",
) -> go.Figure:
    """
    Passive income for both paths against flat earned income, windowed so
    the crossings are visible.
    """
    worker = session.crossover["worker"]
    investor = session.crossover["investor"]
    max_years = crossover_chart_window(
        worker.crossover_year,
        investor.crossover_year,
        assumptions.crossover_horizon_years,
    )
    df = crossover_chart_frame(session.result, session.crossover, max_years)

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=df["Year"],
            y=df["Earned Income"],
            name="Earned Income",
            mode="lines",
            line=dict(color=COLORS["gray"], width=2, dash="dash"),
            hovertemplate="Earned Income: %{y:$,.0f}<extra></extra>",
        )
    )
    for col, color in [
        ("Worker Passive Income", COLORS["secondary"]),
        ("Investor Passive Income", COLORS["primary"]),
    ]:
        fig.add_trace(
            go.Scatter(
                x=df["Year"],
                y=df[col],
                name=col,
                mode="lines",
                line=dict(color=color, width=3),
                hovertemplate=f"{col}: %{{y:$,.0f}}<extra></extra>",
            )
        )

    for label, crossing, color in [
        ("Worker", worker, COLORS["secondary"]),
        ("Investor", investor, COLORS["primary"]),
    ]:
        if crossing.crosses and crossing.crossover_year <= max_years:
            fig.add_vline(
                x=crossing.crossover_year,
                line=dict(color=color, width=1, dash="dot"),
                annotation_text=f"{label} crossover",
            )

    fig.update_layout(
        title="Passive vs Earned Income",
        template="plotly_white",
        hovermode="x unified",
        yaxis_tickformat="$,.0f",
        xaxis_title="Years",
        legend=dict(orientation="h", x=0.5, y=-0.1, xanchor="center", yanchor="top"),
    )
    return _finish(fig, df, "crossover", show, save, export_path, ts)
