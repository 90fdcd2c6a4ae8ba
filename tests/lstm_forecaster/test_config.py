"""Configuration: service URL from env / .env, step bounds."""

from src.lstm_forecaster.config import (
    API_URL_ENV_VAR,
    DEFAULT_API_BASE_URL,
    ForecasterConfig,
    load_config,
)
from src.lstm_forecaster.objects import PredictionRequest


def test_defaults() -> None:
    cfg = ForecasterConfig()

    assert cfg.api_base_url == DEFAULT_API_BASE_URL
    assert cfg.default_steps == 10
    assert (cfg.min_steps, cfg.max_steps) == (1, 100)
    assert cfg.request_timeout is None


def test_request_steps_default_matches_config() -> None:
    payload = PredictionRequest(series=[]).to_payload()

    assert payload["steps"] == ForecasterConfig().default_steps


def test_predict_url_joins_without_double_slash() -> None:
    assert ForecasterConfig(api_base_url="http://a:5000/").predict_url() == "http://a:5000/predict"
    assert ForecasterConfig(api_base_url="http://a:5000").predict_url() == "http://a:5000/predict"


def test_clamp_steps() -> None:
    cfg = ForecasterConfig()

    assert cfg.clamp_steps(0) == 1
    assert cfg.clamp_steps(250) == 100
    assert cfg.clamp_steps(12) == 12


def test_load_config_reads_env(monkeypatch) -> None:
    monkeypatch.setenv(API_URL_ENV_VAR, "http://lstm.internal:9000")

    assert load_config().api_base_url == "http://lstm.internal:9000"


def test_explicit_url_wins_over_env(monkeypatch) -> None:
    monkeypatch.setenv(API_URL_ENV_VAR, "http://from-env")

    assert load_config(api_base_url="http://explicit").api_base_url == "http://explicit"


def test_load_config_default(monkeypatch) -> None:
    monkeypatch.delenv(API_URL_ENV_VAR, raising=False)
    monkeypatch.setattr("src.lstm_forecaster.config.load_dotenv", lambda *a, **k: False)

    assert load_config().api_base_url == DEFAULT_API_BASE_URL
