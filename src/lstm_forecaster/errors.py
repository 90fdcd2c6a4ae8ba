# file: src/lstm_forecaster/errors.py
"""Error kinds surfaced to the user as a single message string."""

from __future__ import annotations

from typing import Optional


class ForecasterError(Exception):
    """Base class for every error the UI and CLI display instead of crashing."""


class ParseError(ForecasterError, ValueError):
    """Source text is malformed or yields no usable rows."""


class ValidationError(ForecasterError, ValueError):
    """Parsed series is structurally fine but not enough to forecast from."""


class RequestFailed(ForecasterError):
    """The forecasting service answered with a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class TransportError(ForecasterError):
    """The request never completed (connection refused, DNS failure, ...)."""


class StateTransitionError(ForecasterError):
    """A view event that is not allowed from the current view state."""
