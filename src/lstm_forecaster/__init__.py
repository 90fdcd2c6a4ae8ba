"""
LSTM Forecaster: thin client for an external time series forecasting service

This module provides:
1. Data model and wire contracts (objects.py)
2. CSV / free-text parsing (parser.py) and validation (validation.py)
3. Prediction client for POST /predict (client.py)
4. View flow home -> input -> results (controller.py)
5. Streamlit UI (dashboard.py) and Typer CLI (cli.py)

Usage (Python):
    from src.lstm_forecaster import parse_text_data, validate_time_series, PredictionClient

Usage (Dashboard):
    streamlit run src/lstm_forecaster/dashboard.py
"""

from .client import PredictionClient
from .config import ForecasterConfig, load_config
from .controller import ForecasterController, ViewEvent, ViewState
from .errors import (
    ForecasterError,
    ParseError,
    RequestFailed,
    StateTransitionError,
    TransportError,
    ValidationError,
)
from .ingest import IngestResult, ingest_csv, ingest_text
from .objects import PredictionRequest, PredictionResult, TimeSeries, TimeSeriesPoint
from .parser import parse_csv_data, parse_text_data
from .validation import validate_time_series

__all__ = [
    "PredictionClient",
    "ForecasterConfig",
    "load_config",
    "ForecasterController",
    "ViewEvent",
    "ViewState",
    "ForecasterError",
    "ParseError",
    "RequestFailed",
    "StateTransitionError",
    "TransportError",
    "ValidationError",
    "IngestResult",
    "ingest_csv",
    "ingest_text",
    "PredictionRequest",
    "PredictionResult",
    "TimeSeries",
    "TimeSeriesPoint",
    "parse_csv_data",
    "parse_text_data",
    "validate_time_series",
]
