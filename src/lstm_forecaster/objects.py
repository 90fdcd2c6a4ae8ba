# file: src/lstm_forecaster/objects.py
"""
Time series objects and wire contracts for the forecasting service.

- TimeSeriesPoint: one (timestamp, value) observation
- TimeSeries: ordered list of points (order = chronological order)
- PredictionRequest / PredictionResult: /predict request and response bodies
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional

import pandas as pd

from .config import DEFAULT_STEPS


@dataclass(frozen=True)
class TimeSeriesPoint:
    """One observation. timestamp is an opaque label, never parsed as a date."""
    timestamp: str
    value: float

    def to_dict(self) -> dict:
        return {"timestamp": self.timestamp, "value": self.value}

    @classmethod
    def from_dict(cls, raw: dict) -> "TimeSeriesPoint":
        """Lenient read of a service point: a null value becomes NaN (a chart gap)."""
        if not isinstance(raw, dict):
            raise TypeError(f"point must be an object, got {type(raw).__name__}")
        timestamp = raw.get("timestamp")
        value = raw.get("value")
        return cls(
            timestamp="" if timestamp is None else str(timestamp),
            value=math.nan if value is None else float(value),
        )


TimeSeries = List[TimeSeriesPoint]


@dataclass(frozen=True)
class PredictionRequest:
    series: TimeSeries
    steps: int = DEFAULT_STEPS

    def to_payload(self) -> dict:
        """JSON body for POST /predict: {data: [{timestamp, value}], steps}"""
        return {
            "data": [point.to_dict() for point in self.series],
            "steps": int(self.steps),
        }


@dataclass(frozen=True)
class PredictionResult:
    original: TimeSeries = field(default_factory=list)
    predicted: TimeSeries = field(default_factory=list)
    success: bool = False
    message: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: dict) -> "PredictionResult":
        """
        Build a result from the service response.

        The response shape is taken as-is: missing lists default to empty and
        success/message are passed through without further checks.

        Raises:
            TypeError: the body is not a JSON object
        """
        if not isinstance(payload, dict):
            raise TypeError(f"response body must be an object, got {type(payload).__name__}")
        return cls(
            original=[TimeSeriesPoint.from_dict(p) for p in payload.get("original") or []],
            predicted=[TimeSeriesPoint.from_dict(p) for p in payload.get("predicted") or []],
            success=bool(payload.get("success", False)),
            message=payload.get("message"),
        )


def series_to_frame(series: TimeSeries) -> pd.DataFrame:
    """Tidy frame with columns [timestamp, value], one row per point."""
    return pd.DataFrame(
        {
            "timestamp": [p.timestamp for p in series],
            "value": [p.value for p in series],
        },
        columns=["timestamp", "value"],
    )
