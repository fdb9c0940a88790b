"""Error taxonomy for wage parsing and tiered payment calculation."""

from __future__ import annotations

from enum import Enum


class ParseErrorKind(str, Enum):
    """Kinds of failure when reading a free-form wage line."""

    MISSING_MARKER = "MISSING_MARKER"
    INVALID_NUMBER = "INVALID_NUMBER"
    NO_HOURS_FOUND = "NO_HOURS_FOUND"


class ParseInputError(ValueError):
    """Raised when a wage line cannot be parsed."""

    kind: ParseErrorKind

    def __init__(self, text: str, message: str):
        self.text = text
        super().__init__(message)


class MissingMarkerError(ParseInputError):
    """Raised when no `*`-prefixed rate is present."""

    kind = ParseErrorKind.MISSING_MARKER

    def __init__(self, text: str):
        super().__init__(text, "No asterisk (*) followed by a rate found in the input")


class InvalidNumberError(ParseInputError):
    """Raised when a captured digit run is not a valid number."""

    kind = ParseErrorKind.INVALID_NUMBER

    def __init__(self, text: str, value: str):
        self.value = value
        super().__init__(text, f"Invalid number format: {value!r}")


class EmptyRateError(MissingMarkerError, InvalidNumberError):
    """Raised when every `*` marker in the input is followed by no digits.

    The marker is there but carries no number, so this is both a missing
    marker and an invalid number.
    """

    kind = ParseErrorKind.MISSING_MARKER

    def __init__(self, text: str):
        self.value = ""
        ParseInputError.__init__(self, text, "Asterisk (*) is not followed by a rate")


class NoHoursFoundError(ParseInputError):
    """Raised when no number follows any separator in the input."""

    kind = ParseErrorKind.NO_HOURS_FOUND

    def __init__(self, text: str):
        super().__init__(text, "No worked hours found in the input")


class InvalidScheduleError(ValueError):
    """Raised when a tiered schedule cannot be iterated."""

    def __init__(self, step_hours: float):
        self.step_hours = step_hours
        super().__init__(f"Hours per step must be strictly positive, got {step_hours}")


class InvalidHoursError(ValueError):
    """Raised when worked hours cannot be split into tiers."""

    def __init__(self, worked_hours: float):
        self.worked_hours = worked_hours
        super().__init__(f"Worked hours must be a finite number, got {worked_hours}")


class InputValidationError(ValueError):
    """Raised when wage inputs fail validation."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("; ".join(errors))
