"""
Healthscore Engine Errors
=========================
Exception types raised by the scoring engine.

The engine always terminates with a complete result or exactly one
exception. Out-of-declared-range values are NOT errors; only inputs for
which a formula is undefined are.
"""

from typing import Any, Optional


class HealthscoreError(Exception):
    """Base exception for the healthscore engine."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(HealthscoreError, ValueError):
    """
    Domain violation: the input makes a formula undefined.

    Examples: waist <= neck in the Navy body-fat formula, a zero height,
    NaN reaching a classifier, or a mapping that fails model validation.
    """

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.field = field
        self.value = value
