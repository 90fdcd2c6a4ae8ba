# file: src/lstm_forecaster/client.py
"""
Client for the external forecasting service.

One POST per call to {api_base_url}/predict:
    request:  {"data": [{"timestamp", "value"}, ...], "steps": n}
    response: {"original": [...], "predicted": [...], "success": bool, "message"?: str}

Single best-effort attempt: no retry adapter is mounted on the session and
there is no timeout unless the config sets one.
"""

from __future__ import annotations

import logging
from typing import Optional

import requests

from .config import ForecasterConfig
from .errors import RequestFailed, TransportError
from .objects import PredictionRequest, PredictionResult, TimeSeries

logger = logging.getLogger(__name__)

FALLBACK_TRANSPORT_MESSAGE = "Failed to get prediction"


def _error_message(resp: requests.Response) -> str:
    """Message from a structured error body, else one derived from the status."""
    try:
        payload = resp.json()
    except ValueError:
        payload = {}

    message = payload.get("message") if isinstance(payload, dict) else None
    return message or f"HTTP error! status: {resp.status_code}"


class PredictionClient:
    """Serialize a series, call /predict, and deserialize the result."""

    def __init__(
        self,
        config: Optional[ForecasterConfig] = None,
        *,
        session: Optional[requests.Session] = None,
    ):
        self.config = config or ForecasterConfig()
        self.session = session or self._create_session()

    def _create_session(self) -> requests.Session:
        session = requests.Session()
        session.headers.update({"Content-Type": "application/json"})
        return session

    def predict(self, series: TimeSeries, steps: int) -> PredictionResult:
        """
        Request a forecast of `steps` future points.

        Raises:
            RequestFailed: service answered outside 2xx, or a 2xx whose body
                is not a JSON object
            TransportError: the request could not complete
        """
        url = self.config.predict_url()
        payload = PredictionRequest(series=series, steps=steps).to_payload()
        logger.info("[client] POST %s points=%d steps=%d", url, len(series), steps)

        try:
            resp = self.session.post(url, json=payload, timeout=self.config.request_timeout)
        except requests.RequestException as exc:
            logger.error("[client] transport failure: %s", exc)
            raise TransportError(str(exc) or FALLBACK_TRANSPORT_MESSAGE) from exc

        if not 200 <= resp.status_code < 300:
            message = _error_message(resp)
            logger.error("[client] status=%s message=%s", resp.status_code, message)
            raise RequestFailed(message, status_code=resp.status_code)

        try:
            result = PredictionResult.from_dict(resp.json())
        except (ValueError, TypeError) as exc:
            logger.error("[client] unreadable prediction body status=%s: %s", resp.status_code, exc)
            raise RequestFailed(
                f"Invalid prediction response: {exc}", status_code=resp.status_code
            ) from exc

        logger.info(
            "[client] status=%s original=%d predicted=%d success=%s",
            resp.status_code,
            len(result.original),
            len(result.predicted),
            result.success,
        )
        return result
