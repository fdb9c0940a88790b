"""Extraction of a rate and worked hours from one free-form line.

A line looks like ``"rate is *50 for 40 hours"``: the rate follows the
``*`` marker and every number that follows a whitespace character counts
towards the worked hours. Both ``.`` and ``,`` are accepted as decimal
separators.
"""

from __future__ import annotations

import math

from paycalc.calculators.errors import (
    EmptyRateError,
    InvalidNumberError,
    MissingMarkerError,
    NoHoursFoundError,
)
from paycalc.calculators.types import ParsedWage

MARKER = "*"
SEPARATORS = frozenset(" \t\n\r\x0b\x0c")
NUMBER_CHARS = frozenset("0123456789.,")


def _scan_number(text: str, start: int) -> str:
    """Return the maximal run of digits, dots and commas at `start`."""
    end = start
    while end < len(text) and text[end] in NUMBER_CHARS:
        end += 1
    return text[start:end]


def _to_float(run: str) -> float:
    """Parse a captured run, accepting a comma as decimal separator.

    Raises:
        ValueError: If the normalized run is not a number (e.g. "1.2.3")
        OverflowError: If the run is too large to represent
    """
    value = float(run.replace(",", "."))
    if not math.isfinite(value):
        raise OverflowError(f"{run!r} overflows a float")
    return value


def extract_rate(text: str) -> float:
    """Extract the hourly rate following the first `*` marker.

    A marker with no digits after it is ignored, so the first marker that
    carries a number is the one honored. Later markers are never read.

    Args:
        text: One line of free-form input

    Returns:
        The rate as a float

    Raises:
        MissingMarkerError: If the line has no `*` marker
        EmptyRateError: If no marker is followed by digits
        InvalidNumberError: If the digits after the marker are malformed or
            too large to represent
    """
    saw_marker = False
    for i, char in enumerate(text):
        if char != MARKER:
            continue
        saw_marker = True
        run = _scan_number(text, i + 1)
        if not run:
            continue
        try:
            return _to_float(run)
        except (ValueError, OverflowError):
            raise InvalidNumberError(text, run) from None

    if saw_marker:
        raise EmptyRateError(text)
    raise MissingMarkerError(text)


def extract_total_hours(text: str) -> float:
    """Sum every number that follows a whitespace separator.

    The start of the line counts as a separator boundary. Runs that do not
    parse are skipped. Note that every separator-adjacent number is summed,
    so ``"*50 5 extra 5"`` yields 10 hours.

    Raises:
        NoHoursFoundError: If no number follows any separator
        InvalidNumberError: If a number, or the total, is too large to
            represent
    """
    runs: list[str] = []
    values: list[float] = []
    for i in range(len(text)):
        if i > 0 and text[i - 1] not in SEPARATORS:
            continue
        run = _scan_number(text, i)
        if not run:
            continue
        try:
            value = _to_float(run)
        except OverflowError:
            raise InvalidNumberError(text, run) from None
        except ValueError:
            continue
        runs.append(run)
        values.append(value)

    if not values:
        raise NoHoursFoundError(text)

    total = sum(values)
    if not math.isfinite(total):
        raise InvalidNumberError(text, " + ".join(runs))
    return total


def parse_line(text: str) -> ParsedWage:
    """Extract both the rate and the total hours from a line."""
    return ParsedWage(rate=extract_rate(text), hours=extract_total_hours(text))
