"""Time range validation."""

import math

from vidclip.errors import ExceedsSourceDuration, NegativeStart, NonPositiveDuration
from vidclip.models import TimeRange


def validate(
    start: float, end: float, source_duration: float | None = None
) -> TimeRange:
    """Check a start/end pair and return it as a TimeRange.

    Zero-length and reversed ranges are both rejected. When *source_duration*
    is known, ``end`` may equal it but not pass it. NaN and infinite bounds
    never form a range.
    """
    if not (math.isfinite(start) and math.isfinite(end)):
        raise NonPositiveDuration(start, end)
    if start < 0 or end < 0:
        raise NegativeStart(start, end)
    if end <= start:
        raise NonPositiveDuration(start, end)
    if source_duration is not None and not end <= source_duration:
        raise ExceedsSourceDuration(end, source_duration)
    return TimeRange(start=float(start), end=float(end))
