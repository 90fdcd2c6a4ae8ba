"""Prediction client tests with mocked HTTP responses.

Run with:
    pytest tests/lstm_forecaster/test_client.py -v
"""

import math
from unittest.mock import MagicMock, patch

import pytest
import requests

from src.lstm_forecaster.client import PredictionClient
from src.lstm_forecaster.config import ForecasterConfig
from src.lstm_forecaster.errors import RequestFailed, TransportError
from src.lstm_forecaster.objects import TimeSeriesPoint


def _series(n):
    return [TimeSeriesPoint(f"2024-01-{i + 1:02d}", float(100 + i)) for i in range(n)]


def _response(status_code=200, payload=None, json_error=None):
    resp = MagicMock()
    resp.status_code = status_code
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = payload
    return resp


def _client(resp=None, *, side_effect=None):
    session = MagicMock()
    if side_effect is not None:
        session.post.side_effect = side_effect
    else:
        session.post.return_value = resp
    cfg = ForecasterConfig(api_base_url="http://forecast.test")
    return PredictionClient(cfg, session=session), session


@pytest.mark.client
class TestPredictSuccess:
    """One POST, response passed through as a PredictionResult"""

    def test_single_call_with_series_and_steps(self):
        """N points and steps=S go out in exactly one request body"""
        payload = {
            "original": [{"timestamp": "2024-01-01", "value": 100}],
            "predicted": [{"timestamp": "2024-01-04", "value": 103.5}],
            "success": True,
        }
        client, session = _client(_response(200, payload))

        client.predict(_series(3), 7)

        session.post.assert_called_once()
        args, kwargs = session.post.call_args
        assert args[0] == "http://forecast.test/predict"
        body = kwargs["json"]
        assert len(body["data"]) == 3
        assert body["data"][0] == {"timestamp": "2024-01-01", "value": 100.0}
        assert body["steps"] == 7
        assert kwargs["timeout"] is None

    def test_result_deserialized(self):
        payload = {
            "original": [{"timestamp": "0", "value": 1}, {"timestamp": "1", "value": 2}],
            "predicted": [{"timestamp": "2", "value": 3}],
            "success": True,
            "message": "Prediction completed",
        }
        client, _ = _client(_response(200, payload))

        result = client.predict(_series(2), 1)

        assert result.success is True
        assert result.message == "Prediction completed"
        assert len(result.original) == 2
        assert result.predicted == [TimeSeriesPoint("2", 3.0)]

    def test_response_shape_not_revalidated(self):
        """success=False on a 200 is returned as-is"""
        client, _ = _client(_response(200, {"success": False, "message": "too short"}))

        result = client.predict(_series(2), 1)

        assert result.success is False
        assert result.message == "too short"
        assert result.original == []
        assert result.predicted == []

    def test_null_predicted_value_kept_as_nan(self):
        """A null value or missing timestamp does not discard the forecast"""
        payload = {
            "original": [{"timestamp": "0", "value": 1}, {"value": 2}],
            "predicted": [{"timestamp": "2", "value": None}, {"timestamp": "3", "value": 4}],
            "success": True,
        }
        client, _ = _client(_response(200, payload))

        result = client.predict(_series(2), 2)

        assert result.original[1] == TimeSeriesPoint("", 2.0)
        assert result.predicted[0].timestamp == "2"
        assert math.isnan(result.predicted[0].value)
        assert result.predicted[1] == TimeSeriesPoint("3", 4.0)

    def test_201_is_success(self):
        client, _ = _client(_response(201, {"predicted": [], "success": True}))

        assert client.predict(_series(2), 1).success is True

    def test_non_object_body_is_request_failure(self):
        client, _ = _client(_response(200, [1, 2, 3]))

        with pytest.raises(RequestFailed, match="Invalid prediction response"):
            client.predict(_series(2), 1)

    def test_non_json_success_body_is_request_failure(self):
        client, _ = _client(_response(200, json_error=ValueError("Expecting value")))

        with pytest.raises(RequestFailed, match="Invalid prediction response") as exc_info:
            client.predict(_series(2), 1)

        assert exc_info.value.status_code == 200


@pytest.mark.client
class TestPredictFailures:
    """Non-success status and transport failures"""

    def test_500_without_body_uses_status_message(self):
        client, _ = _client(_response(500, json_error=ValueError("no body")))

        with pytest.raises(RequestFailed) as exc_info:
            client.predict(_series(2), 1)

        assert str(exc_info.value) == "HTTP error! status: 500"
        assert exc_info.value.status_code == 500

    def test_structured_error_message_used(self):
        client, _ = _client(_response(422, {"message": "Model not loaded"}))

        with pytest.raises(RequestFailed, match="Model not loaded"):
            client.predict(_series(2), 1)

    def test_error_body_without_message(self):
        client, _ = _client(_response(404, {"detail": "Not Found"}))

        with pytest.raises(RequestFailed, match="HTTP error! status: 404"):
            client.predict(_series(2), 1)

    def test_redirect_status_is_not_success(self):
        """Only 200-299 counts as success"""
        client, _ = _client(_response(304, json_error=ValueError("no body")))

        with pytest.raises(RequestFailed) as exc_info:
            client.predict(_series(2), 1)

        assert str(exc_info.value) == "HTTP error! status: 304"
        assert exc_info.value.status_code == 304

    def test_connection_error_is_transport_error(self):
        client, _ = _client(side_effect=requests.ConnectionError("Connection refused"))

        with pytest.raises(TransportError, match="Connection refused"):
            client.predict(_series(2), 1)

    def test_transport_error_without_message_falls_back(self):
        client, _ = _client(side_effect=requests.ConnectionError())

        with pytest.raises(TransportError, match="Failed to get prediction"):
            client.predict(_series(2), 1)


@pytest.mark.client
class TestSession:
    """Single best-effort attempt"""

    def test_default_session_has_no_retries(self):
        client = PredictionClient(ForecasterConfig())

        adapter = client.session.get_adapter("http://localhost:5000/predict")
        assert adapter.max_retries.total == 0

    @patch("src.lstm_forecaster.client.requests.Session.post")
    def test_uses_configured_url_and_timeout(self, mock_post):
        mock_post.return_value = _response(200, {"original": [], "predicted": [], "success": True})
        cfg = ForecasterConfig(api_base_url="http://svc:8000/", request_timeout=5.0)

        PredictionClient(cfg).predict(_series(2), 3)

        args, kwargs = mock_post.call_args
        assert args[0] == "http://svc:8000/predict"
        assert kwargs["timeout"] == 5.0
