# file: src/lstm_forecaster/config.py
"""
Forecaster configuration.

The service base URL is the only external setting. Keep FORECASTER_API_URL in
env (prod) / .env (local); everything else is a fixed default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_API_BASE_URL = "http://localhost:5000"
API_URL_ENV_VAR = "FORECASTER_API_URL"
DEFAULT_STEPS = 10


@dataclass(frozen=True)
class ForecasterConfig:
    # Forecasting service
    api_base_url: str = DEFAULT_API_BASE_URL
    predict_path: str = "/predict"
    request_timeout: Optional[float] = None  # None = wait for the service indefinitely

    # Prediction steps (number input bounds)
    default_steps: int = DEFAULT_STEPS
    min_steps: int = 1
    max_steps: int = 100

    # Data preview table
    preview_rows: int = 10

    def predict_url(self) -> str:
        return self.api_base_url.rstrip("/") + "/" + self.predict_path.lstrip("/")

    def clamp_steps(self, steps: int) -> int:
        return max(self.min_steps, min(self.max_steps, int(steps)))


def load_config(api_base_url: Optional[str] = None) -> ForecasterConfig:
    """
    Load settings from environment.

    Reads FORECASTER_API_URL from .env file or environment variable; an
    explicit api_base_url argument takes precedence.
    """
    load_dotenv()

    base_url = api_base_url or os.getenv(API_URL_ENV_VAR) or DEFAULT_API_BASE_URL
    return ForecasterConfig(api_base_url=base_url)
