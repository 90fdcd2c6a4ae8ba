"""
LSTM Forecaster - time series forecasting client

Modules:
- lstm_forecaster: parsing, validation, prediction client, view flow,
  Streamlit dashboard and Typer CLI
"""
