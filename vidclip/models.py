"""Shared data types used across vidclip."""

import shlex
from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path


@dataclass(frozen=True)
class TimeRange:
    """A validated start/end pair in seconds. Build with ``ranges.validate``."""

    start: float
    end: float
    clip_duration: float = field(init=False)

    def __post_init__(self) -> None:
        # Decimal over the shortest reprs, so 165.7 - 90.3 stays 75.4.
        duration = Decimal(repr(self.end)) - Decimal(repr(self.start))
        object.__setattr__(self, "clip_duration", float(duration))


@dataclass
class ClipRequest:
    """Raw, untrusted clip parameters as supplied by a caller."""

    input_file: str
    start_time: str
    end_time: str
    output_dir: str | None = None


@dataclass(frozen=True)
class ClipPlan:
    """A fully resolved trim operation, ready to hand to the engine."""

    input_file: str
    output_name: str
    output_path: str
    range: TimeRange
    arguments: tuple[str, ...]

    def command_line(self, binary: str = "ffmpeg") -> str:
        """Shell-quoted rendering for display only; execute ``arguments``."""
        return shlex.join([binary, *self.arguments])

    def to_dict(self) -> dict:
        return {
            "input_file": self.input_file,
            "output_file": self.output_path,
            "start_seconds": self.range.start,
            "end_seconds": self.range.end,
            "duration": self.range.clip_duration,
            "arguments": list(self.arguments),
            "command": self.command_line(),
        }


@dataclass
class ClipResult:
    """Outcome of running a plan through the native engine."""

    plan: ClipPlan
    output_path: Path
    file_size_mb: float | None = None
    used_fallback: bool = False


@dataclass
class ProbeResult:
    """Metadata extracted from a media file via ffprobe."""

    duration: float
    codec_video: str | None = None
    codec_audio: str | None = None
