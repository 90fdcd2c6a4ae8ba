# file: src/lstm_forecaster/controller.py
"""
View flow for the forecaster UI: home -> input -> results.

The controller owns all UI state (view, input form, loading flag, error,
held result) so the Streamlit script only renders it and forwards clicks.
Transitions go through a single table; anything not listed is rejected.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from .client import PredictionClient
from .config import ForecasterConfig
from .errors import ForecasterError, StateTransitionError
from .ingest import IngestResult, ingest_csv, ingest_text
from .objects import PredictionResult, TimeSeries
from .validation import require_valid

logger = logging.getLogger(__name__)


class ViewState(str, Enum):
    HOME = "home"
    INPUT = "input"
    RESULTS = "results"


class ViewEvent(str, Enum):
    GET_STARTED = "get_started"
    SUBMIT_VALID_DATA = "submit_valid_data"
    BACK_TO_INPUT = "back_to_input"
    BACK_TO_HOME = "back_to_home"


TRANSITIONS = {
    (ViewState.HOME, ViewEvent.GET_STARTED): ViewState.INPUT,
    (ViewState.INPUT, ViewEvent.SUBMIT_VALID_DATA): ViewState.RESULTS,
    (ViewState.RESULTS, ViewEvent.BACK_TO_INPUT): ViewState.INPUT,
    (ViewState.INPUT, ViewEvent.BACK_TO_HOME): ViewState.HOME,
}

INPUT_METHODS = ("upload", "text")


def next_state(state: ViewState, event: ViewEvent) -> ViewState:
    try:
        return TRANSITIONS[(state, event)]
    except KeyError:
        raise StateTransitionError(
            f"Cannot {event.value} from the {state.value} view"
        ) from None


class ForecasterController:
    """
    Single-session UI state machine.

    Two error slots are kept apart:
    - input_error: parse/validation problem with the current input (blocks submit)
    - error: request/transport failure from the last submit (offers retry)
    """

    def __init__(
        self,
        client: Optional[PredictionClient] = None,
        config: Optional[ForecasterConfig] = None,
    ):
        self.config = config or (client.config if client else ForecasterConfig())
        self.client = client or PredictionClient(self.config)

        self.state = ViewState.HOME
        self.loading = False
        self.error: Optional[str] = None
        self.result: Optional[PredictionResult] = None

        # Input form
        self.input_method = "upload"
        self.csv_file_name: Optional[str] = None
        self.text_data = ""
        self.steps = self.config.default_steps
        self.parsed: TimeSeries = []
        self.input_error: Optional[str] = None

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def _fire(self, event: ViewEvent) -> ViewState:
        new_state = next_state(self.state, event)
        logger.info("[controller] %s: %s -> %s", event.value, self.state.value, new_state.value)
        self.state = new_state
        return new_state

    def get_started(self) -> None:
        self._fire(ViewEvent.GET_STARTED)
        self.error = None

    def back(self) -> None:
        """Header back action: input -> home, results -> input."""
        if self.state == ViewState.INPUT:
            self._fire(ViewEvent.BACK_TO_HOME)
            self.error = None
            self.result = None
        elif self.state == ViewState.RESULTS:
            self._fire(ViewEvent.BACK_TO_INPUT)
            self.error = None
        else:
            raise StateTransitionError("No back action from the home view")

    def retry(self) -> None:
        self.error = None
        if self.state == ViewState.RESULTS:
            self._fire(ViewEvent.BACK_TO_INPUT)

    @property
    def header_label(self) -> Optional[str]:
        if self.state == ViewState.INPUT:
            return "Back to Home"
        if self.state == ViewState.RESULTS:
            return "Back to Input"
        return None

    # ------------------------------------------------------------------
    # Input form
    # ------------------------------------------------------------------
    def set_input_method(self, method: str) -> None:
        if method not in INPUT_METHODS:
            raise ValueError(f"input method must be one of {INPUT_METHODS}, got {method!r}")
        self.input_method = method

    def _apply(self, outcome: IngestResult) -> None:
        self.parsed = list(outcome.series) if outcome.ok else []
        self.input_error = outcome.message

    def load_csv(self, file_name: str, csv_text: str) -> None:
        """Replace the parsed series with the contents of an uploaded .csv file."""
        self.csv_file_name = file_name
        if not file_name.lower().endswith(".csv"):
            self._apply(IngestResult(False, [], f"Expected a .csv file, got {file_name}"))
            return
        self._apply(ingest_csv(csv_text))

    def change_text(self, text_data: str) -> None:
        self.text_data = text_data
        if not text_data.strip():
            self._apply(IngestResult(False, [], None))
            return
        self._apply(ingest_text(text_data))

    def clear_file(self) -> None:
        self.csv_file_name = None
        self._apply(IngestResult(False, [], None))

    def clear_text(self) -> None:
        self.text_data = ""
        self._apply(IngestResult(False, [], None))

    def set_steps(self, value: object) -> int:
        try:
            steps = int(value)
        except (TypeError, ValueError):
            steps = self.config.min_steps
        self.steps = self.config.clamp_steps(steps)
        return self.steps

    @property
    def is_data_valid(self) -> bool:
        return len(self.parsed) > 0 and self.input_error is None

    @property
    def can_submit(self) -> bool:
        return self.state == ViewState.INPUT and self.is_data_valid and not self.loading

    # ------------------------------------------------------------------
    # Submit
    # ------------------------------------------------------------------
    def submit(self) -> bool:
        """
        Send the parsed series to the forecasting service.

        Returns True and moves to results on success. On a request or
        transport failure the message is kept in `error` and the view
        stays on input.
        """
        if self.loading:
            raise StateTransitionError("A prediction request is already in flight")
        if self.state != ViewState.INPUT:
            raise StateTransitionError(f"Cannot submit from the {self.state.value} view")
        series = require_valid(self.parsed)

        self.loading = True
        self.error = None
        try:
            result = self.client.predict(series, self.steps)
        except ForecasterError as exc:
            self.error = str(exc)
            logger.error("[controller] submit failed: %s", self.error)
            return False
        finally:
            self.loading = False

        self.result = result
        self._fire(ViewEvent.SUBMIT_VALID_DATA)
        return True
