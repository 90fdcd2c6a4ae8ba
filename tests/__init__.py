"""
LSTM Forecaster Test Suite

Tests organized by module (tests/lstm_forecaster/):
- test_parser.py: CSV / free-text parsing
- test_validation_ingest.py: validation gates, ingest outcome, preview
- test_client.py: /predict client (mocked HTTP)
- test_controller.py: home/input/results flow
- test_charts.py: chart frame, summary, Plotly figure
- test_config.py: env / .env configuration
- test_cli.py: Typer CLI
- test_dashboard.py: Streamlit AppTest smoke test
"""
