# file: src/lstm_forecaster/cli.py
"""
Headless entry point: same parser, validator and client as the dashboard.

Usage:
    python -m src.lstm_forecaster.cli validate data.csv
    python -m src.lstm_forecaster.cli forecast data.csv --steps 12
    python -m src.lstm_forecaster.cli forecast values.txt --text --api-url http://localhost:5000
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .client import PredictionClient
from .config import load_config
from .errors import ForecasterError
from .objects import TimeSeries
from .parser import parse_csv_data, parse_text_data
from .validation import require_valid

logging.basicConfig(level=logging.INFO, format="%(asctime)s | %(levelname)s | %(message)s")
app = typer.Typer(add_completion=False)
console = Console()


def _load_series(path: Path, text: bool) -> TimeSeries:
    raw = path.read_text(encoding="utf-8-sig")
    series = parse_text_data(raw) if text else parse_csv_data(raw)
    return require_valid(series)


def _series_table(title: str, series: TimeSeries, limit: Optional[int] = None) -> Table:
    table = Table(title=title)
    table.add_column("Index", style="dim")
    table.add_column("Timestamp", style="cyan")
    table.add_column("Value", style="green", justify="right")

    shown = series if limit is None else series[:limit]
    for i, point in enumerate(shown, start=1):
        table.add_row(str(i), point.timestamp, f"{point.value:.4f}")
    if limit is not None and len(series) > limit:
        table.add_row("", f"... and {len(series) - limit} more rows", "")
    return table


@app.command()
def validate(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    text: bool = typer.Option(False, "--text", help="Parse as one value or timestamp,value per line"),
):
    """Parse and validate a data file without calling the service."""
    try:
        series = _load_series(path, text)
    except ForecasterError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)

    console.print(f"[green]✓ Parsed {len(series)} data points successfully[/green]")
    console.print(_series_table("Data Preview", series, limit=load_config().preview_rows))


@app.command()
def forecast(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    steps: int = typer.Option(10, "--steps", min=1, max=100, help="Future steps to predict"),
    text: bool = typer.Option(False, "--text", help="Parse as one value or timestamp,value per line"),
    api_url: Optional[str] = typer.Option(None, "--api-url", help="Overrides FORECASTER_API_URL"),
):
    """Validate a data file, request a forecast and print both series."""
    cfg = load_config(api_base_url=api_url)

    try:
        series = _load_series(path, text)
        result = PredictionClient(cfg).predict(series, steps)
    except ForecasterError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)

    console.print(_series_table("Original Data", result.original, limit=cfg.preview_rows))
    console.print(_series_table("Predicted Data", result.predicted))
    if result.message:
        console.print(result.message)


if __name__ == "__main__":
    app()
