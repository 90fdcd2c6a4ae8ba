# file: src/lstm_forecaster/charts.py
"""Chart data and figures for the results view."""

from __future__ import annotations

import numpy as np
import pandas as pd
import plotly.graph_objects as go

from .objects import PredictionResult, TimeSeries

ORIGINAL_COLOR = "#3b82f6"
PREDICTED_COLOR = "#ef4444"


def build_chart_frame(original: TimeSeries, predicted: TimeSeries) -> pd.DataFrame:
    """
    Combine both series on one integer index axis.

    Predicted rows continue the index after the last original point; each row
    fills only its own column (the other is NaN) so the lines stay separate.
    `series` names the owning line, since a null value from the service is
    also NaN and is drawn as a gap.
    """
    n_original = len(original)
    rows = [
        {
            "index": i, "timestamp": p.timestamp, "series": "original",
            "original": p.value, "predicted": np.nan,
        }
        for i, p in enumerate(original)
    ]
    rows += [
        {
            "index": n_original + i, "timestamp": p.timestamp, "series": "predicted",
            "original": np.nan, "predicted": p.value,
        }
        for i, p in enumerate(predicted)
    ]
    return pd.DataFrame(rows, columns=["index", "timestamp", "series", "original", "predicted"])


def _mean(series: TimeSeries) -> float:
    values = [p.value for p in series if not np.isnan(p.value)]
    if not values:
        return 0.0
    return float(np.mean(values))


def summarize_result(result: PredictionResult) -> dict:
    return {
        "original_points": len(result.original),
        "predicted_points": len(result.predicted),
        "avg_original": _mean(result.original),
        "avg_predicted": _mean(result.predicted),
    }


def create_prediction_plot(result: PredictionResult, title: str = "Prediction Results") -> go.Figure:
    """Original series as a solid line, predicted series dashed, shared index axis."""
    df = build_chart_frame(result.original, result.predicted)
    is_original = df["series"] == "original"
    is_predicted = df["series"] == "predicted"

    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=df.loc[is_original, "index"],
        y=df.loc[is_original, "original"],
        customdata=df.loc[is_original, "timestamp"],
        mode="lines+markers",
        name="Original Data",
        line=dict(color=ORIGINAL_COLOR, width=2),
        marker=dict(size=5),
        hovertemplate="Index %{x}<br>%{customdata}<br>%{y:.4f}<extra></extra>",
    ))

    fig.add_trace(go.Scatter(
        x=df.loc[is_predicted, "index"],
        y=df.loc[is_predicted, "predicted"],
        customdata=df.loc[is_predicted, "timestamp"],
        mode="lines+markers",
        name="Predicted Data",
        line=dict(color=PREDICTED_COLOR, width=2, dash="dash"),
        marker=dict(size=5),
        hovertemplate="Index %{x}<br>%{customdata}<br>%{y:.4f}<extra></extra>",
    ))

    fig.update_layout(
        title=title,
        xaxis_title="Index",
        yaxis_title="Value",
        hovermode="x unified",
        legend=dict(orientation="h", yanchor="bottom", y=1.02),
        height=450,
    )

    return fig
