# file: src/lstm_forecaster/ingest.py
"""
Parse + validate in one step, returning an outcome instead of raising.

Every file load or text edit goes through here; the result replaces whatever
was parsed before.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

import pandas as pd

from .errors import ParseError
from .objects import TimeSeries, series_to_frame
from .parser import parse_csv_data, parse_text_data
from .validation import validate_time_series


@dataclass(frozen=True)
class IngestResult:
    ok: bool
    series: TimeSeries = field(default_factory=list)
    message: Optional[str] = None


def _ingest(raw_text: str, parse: Callable[[str], TimeSeries]) -> IngestResult:
    try:
        series = parse(raw_text)
    except ParseError as exc:
        return IngestResult(False, [], str(exc))

    reason = validate_time_series(series)
    if reason is not None:
        return IngestResult(False, [], reason)

    return IngestResult(True, series, None)


def ingest_csv(csv_text: str) -> IngestResult:
    return _ingest(csv_text, parse_csv_data)


def ingest_text(text_data: str) -> IngestResult:
    return _ingest(text_data, parse_text_data)


def preview_frame(series: TimeSeries, limit: int = 10) -> Tuple[pd.DataFrame, int]:
    """
    First `limit` points as a display table plus the count of hidden rows.

    Columns: Index (1-based), Timestamp, Value
    """
    head = series_to_frame(series[:limit]).rename(
        columns={"timestamp": "Timestamp", "value": "Value"}
    )
    head.insert(0, "Index", range(1, len(head) + 1))
    return head, max(0, len(series) - limit)
