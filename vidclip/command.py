"""Engine argument synthesis.

The token order below is what the trimming engine expects; callers pass the
sequence straight to an argv-style API with the engine binary prepended.
"""

from vidclip.models import TimeRange
from vidclip.timeparse import format_seconds

_COPY = ("-c", "copy")
_AAC_FALLBACK = ("-c:v", "copy", "-c:a", "aac", "-b:a", "128k")


def synthesize(input_path: str, output_path: str, time_range: TimeRange) -> tuple[str, ...]:
    """Stream-copy *time_range* of *input_path* into *output_path*."""
    return (
        "-i", str(input_path),
        "-ss", format_seconds(time_range.start),
        "-t", format_seconds(time_range.clip_duration),
        *_COPY,
        "-avoid_negative_ts", "make_zero",
        "-y", str(output_path),
    )


def audio_fallback(arguments: tuple[str, ...]) -> tuple[str, ...]:
    """Swap the stream-copy pair for video copy plus AAC audio re-encode.

    Used when the output container refuses the source audio codec.
    """
    args = list(arguments)
    for i in range(len(args) - 1):
        if (args[i], args[i + 1]) == _COPY:
            return tuple(args[:i] + list(_AAC_FALLBACK) + args[i + 2:])
    raise ValueError("arguments contain no '-c copy' pair to replace")
