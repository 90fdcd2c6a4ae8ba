# file: src/lstm_forecaster/parser.py
"""
Parse raw delimited text into a TimeSeries.

Two shapes are accepted:
1. CSV with a header row (file upload)
2. Free text, one "value" or "timestamp,value" per line (manual input)

Both paths are permissive: rows whose value does not parse are dropped, and
parsing only fails when nothing usable remains.
"""

from __future__ import annotations

import io
import logging
from typing import Iterable

import pandas as pd

from .errors import ParseError
from .objects import TimeSeries, TimeSeriesPoint

logger = logging.getLogger(__name__)

# Precedence order: first non-empty column wins, per row
TIMESTAMP_COLUMNS = ("timestamp", "date", "time")
VALUE_COLUMNS = ("value", "price", "amount", "y")

# Candidate field separators, in tie-break order
DELIMITERS = (",", "\t", "|", ";")

# Numeric prefix of a cell: "100 USD" -> 100, "5%" -> 5, "1e3x" -> 1000
LEADING_NUMBER = r"^\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"


def normalize_header(name: object) -> str:
    return str(name).replace("\ufeff", "").strip().lower()


def detect_delimiter(csv_text: str) -> str:
    """Separator that splits the header line into the most fields (default ",")."""
    header = next((line for line in csv_text.splitlines() if line.strip()), "")
    counts = {sep: header.count(sep) for sep in DELIMITERS}
    best = max(DELIMITERS, key=lambda sep: counts[sep])
    return best if counts[best] else ","


def leading_number(raw_values: pd.Series) -> pd.Series:
    """Float parsed from the start of each cell; NaN where no number leads."""
    matched = raw_values.astype(str).str.extract(LEADING_NUMBER, expand=False)
    return matched.map(float, na_action="ignore").astype(float)


def _read_table(csv_text: str) -> pd.DataFrame:
    sep = detect_delimiter(csv_text)
    if sep != ",":
        logger.info("[parser] csv: detected delimiter %r", sep)
    df = pd.read_csv(
        io.StringIO(csv_text),
        sep=sep,
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=True,
        index_col=False,
    )
    df.columns = [normalize_header(c) for c in df.columns]
    # "Value" and "value" collapse to one key; keep the first column
    df = df.loc[:, ~df.columns.duplicated()]
    return df.fillna("").reset_index(drop=True)


def first_present(df: pd.DataFrame, candidates: Iterable[str]) -> pd.Series:
    """
    Per row, the first non-empty field among candidate columns (in order).

    Missing columns are skipped; rows with no candidate filled get "".
    """
    present = [c for c in candidates if c in df.columns]
    picked = pd.Series("", index=df.index, dtype=object)
    for col in reversed(present):
        cells = df[col].astype(str).str.strip()
        picked = cells.where(cells != "", picked)
    return picked


def _to_series(timestamps: pd.Series, raw_values: pd.Series) -> TimeSeries:
    values = leading_number(raw_values)
    keep = values.notna()
    return [
        TimeSeriesPoint(timestamp=str(ts), value=float(v))
        for ts, v in zip(timestamps[keep], values[keep])
    ]


def parse_csv_data(csv_text: str) -> TimeSeries:
    """
    Parse CSV text with a header row.

    The separator (comma, tab, pipe or semicolon) is detected from the header.

    Column lookup (case-insensitive, trimmed headers):
    - timestamp: timestamp | date | time, else the zero-based row index
    - value: value | price | amount | y

    A value is the number a cell starts with ("100 USD" -> 100). Rows
    without one are dropped.

    Raises:
        ParseError: on malformed CSV or when no row survives
    """
    try:
        df = _read_table(csv_text)
    except pd.errors.EmptyDataError:
        df = pd.DataFrame()
    except pd.errors.ParserError as exc:
        raise ParseError(f"Failed to parse CSV: CSV parsing error: {exc}") from exc

    row_index = pd.Series(range(len(df)), index=df.index).astype(str)
    timestamps = first_present(df, TIMESTAMP_COLUMNS)
    timestamps = timestamps.where(timestamps != "", row_index)
    series = _to_series(timestamps, first_present(df, VALUE_COLUMNS))

    dropped = len(df) - len(series)
    if dropped:
        logger.info("[parser] csv: dropped %d of %d rows without a numeric value", dropped, len(df))

    if not series:
        raise ParseError("Failed to parse CSV: No valid data found in CSV")

    logger.info("[parser] csv: %d points", len(series))
    return series


def parse_text_data(text_data: str) -> TimeSeries:
    """
    Parse manual input, one observation per line.

    "2023-01-01,100" -> timestamp "2023-01-01", value 100
    "100"            -> timestamp "<line index>", value 100

    Raises:
        ParseError: when no line yields a numeric value
    """
    records = []
    for index, line in enumerate(text_data.strip().split("\n")):
        trimmed = line.strip()
        if not trimmed:
            continue

        parts = [p.strip() for p in trimmed.split(",")]
        if len(parts) >= 2:
            records.append((parts[0], parts[1]))
        else:
            records.append((str(index), parts[0]))

    frame = pd.DataFrame(records, columns=["timestamp", "raw_value"], dtype=object)
    series = _to_series(frame["timestamp"], frame["raw_value"])

    dropped = len(frame) - len(series)
    if dropped:
        logger.info("[parser] text: dropped %d of %d lines without a numeric value", dropped, len(frame))

    if not series:
        raise ParseError("Failed to parse text data: No valid data found in text")

    return series
