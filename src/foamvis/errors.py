"""
Domain exceptions for foamvis.

Expected user-input failures are reported with ``ValueResult`` (see
``foamvis.model.results``); these exceptions are for callers that prefer to
unwrap a result and for precondition violations.
"""
from __future__ import annotations


class FoamvisError(RuntimeError):
    """Base exception for all foamvis domain failures."""


class InvalidValueError(FoamvisError):
    """Raised when an invalid-value result is unwrapped."""
