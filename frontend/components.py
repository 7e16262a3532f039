"""Reusable chart and table builders for the NPV Sweep frontend."""

import pandas as pd
import plotly.graph_objects as go


def sweep_table(points: list[dict]) -> pd.DataFrame:
    """Sweep points as a display table: rate in percent, NPV in currency units."""
    if not points:
        return pd.DataFrame(columns=["Discount Rate (%)", "NPV ($)"])
    df = pd.DataFrame(points)
    return pd.DataFrame({
        "Discount Rate (%)": (df["discountRate"] * 100).round(2),
        "NPV ($)": df["npv"].round(2),
    })


def npv_chart(points: list[dict]) -> go.Figure:
    """Create the NPV vs discount rate line chart."""
    if not points:
        return go.Figure()

    df = pd.DataFrame(points)
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=df["discountRate"] * 100, y=df["npv"],
        name="NPV", mode="lines+markers",
        line=dict(color="#3B82F6", width=3),
        hovertemplate="Rate %{x:.2f}%<br>NPV: $%{y:,.2f}<extra></extra>",
    ))
    fig.add_hline(y=0, line_dash="dash", line_color="#9CA3AF")

    fig.update_layout(
        title="NPV vs Discount Rate",
        xaxis_title="Discount Rate (%)", yaxis_title="NPV ($)",
        template="plotly_white",
        height=400,
    )
    return fig
