"""Parsing, validation, and comparison of swim time strings.

Canonical times are zero-padded ``MM:SS.ss`` strings ("01:35.60"). Raw input
from the entry forms is looser: "1:35.6", "24.5", "12:40.98", "59".

Typical use:
    if validate_time_input(raw):
        time = parse_time_to_standard_format(raw)   # "01:35.60"
    delta = calculate_improvement("01:00.00", "01:02.00")  # 2.0, faster
"""

import math
import re
from decimal import ROUND_HALF_UP, Decimal

# Optional 1-2 digit minutes with colon, 1-2 digit seconds, optional 1-2 digit fraction
TIME_INPUT_PATTERN = re.compile(r"^(\d{1,2}:)?\d{1,2}(\.\d{1,2})?$", re.ASCII)

# Leading-number prefixes: "35abc" parses as 35, "abc" does not parse
_LEADING_INT = re.compile(r"\s*([+-]?\d+)", re.ASCII)
_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)

_HUNDREDTHS = Decimal("0.01")


def _leading_int(text: str) -> int | None:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def _leading_float(text: str) -> float | None:
    match = _LEADING_FLOAT.match(text)
    return float(match.group(1)) if match else None


def _round_hundredths(seconds: float) -> Decimal | float:
    """Round to two decimals with exact halves going up ("24.125" -> 24.13)."""
    if not math.isfinite(seconds) or abs(seconds) >= 1e21:
        return seconds
    return Decimal(seconds).quantize(_HUNDREDTHS, rounding=ROUND_HALF_UP)


def _format_seconds(seconds: float) -> str:
    """Two decimals, zero-padded to five characters ("5.5" -> "05.50")."""
    return f"{_round_hundredths(seconds):05.2f}"


def validate_time_input(time_input: str) -> bool:
    """Check that raw input has an accepted time shape.

    Accepts "SS", "S.s", "SS.ss", "M:SS", "MM:SS.ss" and similar. Rejects empty
    input, letters, extra colons and more than two fractional digits. Ranges
    are not checked: "1:75" passes.
    """
    clean = time_input.strip()
    if not clean:
        return False
    return TIME_INPUT_PATTERN.match(clean) is not None


def parse_time_to_standard_format(time_input: str) -> str:
    """Normalize a raw time to canonical ``MM:SS.ss``.

    Does not raise. A numeric fragment that cannot be parsed counts as zero,
    and seconds of 60 or more are kept as-is rather than carried into minutes
    ("1:75" -> "01:75.00").

    Examples:
        "1:35.6"   -> "01:35.60"
        "24.5"     -> "00:24.50"
        "12:40.98" -> "12:40.98"
    """
    clean = time_input.strip()

    if ":" in clean:
        minutes_part, _, seconds_part = clean.partition(":")
        minutes = _leading_int(minutes_part) or 0
        seconds = _leading_float(seconds_part) or 0.0
        return f"{minutes:02d}:{_format_seconds(seconds)}"

    seconds = _leading_float(clean) or 0.0
    return f"00:{_format_seconds(seconds)}"


def normalize_time(time_input: str) -> str | None:
    """Validate and normalize in one step.

    Returns:
        Canonical time, or None when the input is rejected
    """
    if not validate_time_input(time_input):
        return None
    return parse_time_to_standard_format(time_input)


def parse_time(time_string: str) -> float:
    """Convert a canonical or raw time string to seconds.

    "MM:SS.ss" gives minutes * 60 + seconds; anything without exactly one colon
    is read as plain seconds. Unparseable parts give ``nan``, so callers
    comparing results must guard with ``math.isnan``.

    Examples:
        "01:35.60" -> 95.6
        "24.50"    -> 24.5
    """
    parts = time_string.split(":")

    if len(parts) == 2:
        minutes = _leading_int(parts[0])
        seconds = _leading_float(parts[1])
        if minutes is None or seconds is None:
            return math.nan
        return minutes * 60 + seconds

    seconds = _leading_float(time_string)
    return math.nan if seconds is None else seconds


def calculate_improvement(current_time: str, previous_time: str) -> float:
    """Seconds gained from ``previous_time`` to ``current_time``.

    Positive means the current swim was faster.
    """
    return parse_time(previous_time) - parse_time(current_time)


def is_personal_best(current_time: str, best_time: str | None = None) -> bool:
    """True if ``current_time`` beats ``best_time`` (or there is no best yet)."""
    if not best_time:
        return True
    return parse_time(current_time) < parse_time(best_time)


def format_time(seconds: float) -> str:
    """Format seconds for display: "1:35.60" from a minute up, "24.50" below."""
    minutes = math.floor(seconds / 60)
    remaining = seconds % 60

    if minutes > 0:
        return f"{minutes}:{_format_seconds(remaining)}"
    return f"{_round_hundredths(remaining):.2f}"
