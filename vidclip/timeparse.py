"""Free-form timestamp parsing and the time formats derived from it.

Accepted grammars, tried in order; the first one that matches decides the
result, even when its fields turn out to be out of range:

1. ``H:MM:SS[.f]``  clock with hours
2. ``M:SS[.f]``     clock without hours
3. ``1h30m45s``     unit-suffixed compound, descending units, any subset
4. ``90`` / ``12.5`` bare seconds
"""

import math
import re
from decimal import Decimal
from typing import Callable

from vidclip.errors import InvalidFormat

_FRACTION = r"(?:\.\d+)?"

_CLOCK_HMS = re.compile(rf"(\d+):(\d{{2}}):(\d{{2}}{_FRACTION})")
_CLOCK_MS = re.compile(rf"(\d+):(\d{{2}}{_FRACTION})")
_UNITS = re.compile(
    rf"""
    (?:(?P<h>\d+)h)?
    \s*
    (?:(?P<m>\d+)m)?
    \s*
    (?:(?P<s>\d+{_FRACTION})s)?
    """,
    re.VERBOSE,
)
_SECONDS = re.compile(rf"\d+{_FRACTION}")


def _clock(hours: str, minutes: str, seconds: str, text: str) -> Decimal:
    m = Decimal(minutes)
    s = Decimal(seconds)
    if m >= 60 or s >= 60:
        raise InvalidFormat(text)
    return Decimal(hours) * 3600 + m * 60 + s


def _from_hms(match: re.Match, text: str) -> Decimal:
    return _clock(match[1], match[2], match[3], text)


def _from_ms(match: re.Match, text: str) -> Decimal:
    return _clock("0", match[1], match[2], text)


def _from_units(match: re.Match, text: str) -> Decimal:
    h, m, s = match["h"], match["m"], match["s"]
    if h is None and m is None and s is None:
        raise InvalidFormat(text)
    return (
        Decimal(h or 0) * 3600
        + Decimal(m or 0) * 60
        + Decimal(s or 0)
    )


def _from_seconds(match: re.Match, text: str) -> Decimal:
    return Decimal(match[0])


_GRAMMARS: tuple[tuple[str, re.Pattern, Callable[[re.Match, str], Decimal]], ...] = (
    ("clock_hms", _CLOCK_HMS, _from_hms),
    ("clock_ms", _CLOCK_MS, _from_ms),
    ("units", _UNITS, _from_units),
    ("seconds", _SECONDS, _from_seconds),
)


def match_grammar(text: str) -> str | None:
    """Return the name of the grammar *text* falls under, or None."""
    stripped = text.strip()
    for name, pattern, _ in _GRAMMARS:
        if pattern.fullmatch(stripped):
            return name
    return None


def parse(text: str) -> float:
    """Convert timestamp text to a non-negative number of seconds.

    Raises:
        InvalidFormat: *text* matches no grammar, or a clock field is >= 60.
    """
    stripped = text.strip()
    for _, pattern, convert in _GRAMMARS:
        match = pattern.fullmatch(stripped)
        if match is not None:
            value = float(convert(match, text))
            if not math.isfinite(value):
                raise InvalidFormat(text)
            return value
    raise InvalidFormat(text)


def _split(seconds: float) -> tuple[int, int, int]:
    whole = int(seconds)
    return whole // 3600, (whole % 3600) // 60, whole % 60


def has_hours(seconds: float) -> bool:
    return _split(seconds)[0] > 0


def format_stamp(seconds: float, with_hours: bool = False) -> str:
    """Filename-safe ``MM-SS`` (or ``HH-MM-SS``) with sub-seconds truncated."""
    h, m, s = _split(seconds)
    if with_hours:
        return f"{h:02d}-{m:02d}-{s:02d}"
    return f"{h * 60 + m:02d}-{s:02d}"


def format_clock(seconds: float) -> str:
    """Human-readable ``MM:SS``, or ``HH:MM:SS`` past the first hour."""
    h, m, s = _split(seconds)
    if h > 0:
        return f"{h:02d}:{m:02d}:{s:02d}"
    return f"{m:02d}:{s:02d}"


def format_seconds(seconds: float) -> str:
    """Render seconds as an engine argument: ``90``, ``5.5``, ``0.0000001``.

    Uses the shortest repr of the float in plain notation, so no nonzero
    value ever renders as ``0``.
    """
    text = format(Decimal(repr(float(seconds))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
