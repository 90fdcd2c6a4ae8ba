# file: src/lstm_forecaster/validation.py
"""
Validate a parsed series before it can be submitted.

Gates, first match wins:
1. Empty series
2. Fewer than 2 points (no trend to forecast from)
3. No finite numeric value
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from .errors import ValidationError
from .objects import TimeSeries

MIN_POINTS = 2


def validate_time_series(series: TimeSeries) -> Optional[str]:
    """Return None when the series is usable, otherwise the rejection reason."""
    if len(series) == 0:
        return "No data provided"

    if len(series) < MIN_POINTS:
        return f"At least {MIN_POINTS} data points are required"

    values = np.array([p.value for p in series], dtype=float)
    if not np.isfinite(values).any():
        return "No valid numeric values found"

    return None


def require_valid(series: TimeSeries) -> TimeSeries:
    """Raise ValidationError if the series fails validate_time_series."""
    reason = validate_time_series(series)
    if reason is not None:
        raise ValidationError(reason)
    return series
