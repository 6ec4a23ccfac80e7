"""Output file naming for clips."""

from pathlib import PurePath

from vidclip.models import TimeRange
from vidclip.timeparse import format_stamp, has_hours

DEFAULT_EXTENSION = "mp4"


def generate_name(
    input_name: str, time_range: TimeRange, extension: str = DEFAULT_EXTENSION
) -> str:
    """Build ``{stem}_clip_{start}_to_{end}.{extension}``.

    Stamps are ``MM-SS``; both switch to ``HH-MM-SS`` when either endpoint
    reaches an hour. Sub-second differences map to the same name.
    """
    stem = PurePath(input_name).stem or "clip"
    with_hours = has_hours(time_range.start) or has_hours(time_range.end)
    start = format_stamp(time_range.start, with_hours)
    end = format_stamp(time_range.end, with_hours)
    return f"{stem}_clip_{start}_to_{end}.{extension.lstrip('.')}"
