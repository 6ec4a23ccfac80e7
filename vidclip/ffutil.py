"""FFmpeg/ffprobe subprocess helpers for running clip plans natively."""

import json
import logging
import shutil
import subprocess
from pathlib import Path

from vidclip.command import audio_fallback
from vidclip.models import ClipPlan, ClipResult, ProbeResult

logger = logging.getLogger(__name__)

AUDIO_ERROR_MARKERS = (
    "codec not currently supported in container",
    "could not find codec parameters for stream",
    "invalid codec tag",
    "audio codec",
    "stream copy",
    "does not support codec",
)


class FFmpegNotFoundError(RuntimeError):
    pass


class FFmpegError(RuntimeError):
    """Raised when the engine exits non-zero."""

    def __init__(self, message: str, stderr: str = ""):
        super().__init__(message)
        self.stderr = stderr


def check_ffmpeg(*binaries: str) -> None:
    """Raise FFmpegNotFoundError if any of *binaries* is not on PATH."""
    for cmd in binaries or ("ffmpeg", "ffprobe"):
        if shutil.which(cmd) is None:
            raise FFmpegNotFoundError(f"{cmd} not found on PATH")


def probe(input_path: Path, ffprobe_binary: str = "ffprobe") -> ProbeResult:
    """Extract media duration and codecs via ffprobe."""
    cmd = [
        ffprobe_binary,
        "-v", "quiet",
        "-print_format", "json",
        "-show_format",
        "-show_streams",
        str(input_path),
    ]
    result = subprocess.run(cmd, capture_output=True, text=True, check=True)
    data = json.loads(result.stdout)

    streams = data.get("streams", [])
    video_stream = next((s for s in streams if s.get("codec_type") == "video"), None)
    audio_stream = next((s for s in streams if s.get("codec_type") == "audio"), None)

    duration = data.get("format", {}).get("duration")
    if duration is None:
        raise ValueError(f"ffprobe reported no duration for {input_path}")

    return ProbeResult(
        duration=float(duration),
        codec_video=video_stream["codec_name"] if video_stream else None,
        codec_audio=audio_stream["codec_name"] if audio_stream else None,
    )


def is_audio_error(stderr: str) -> bool:
    """True when ffmpeg's stderr points at an audio stream-copy problem."""
    lowered = stderr.lower()
    return any(marker in lowered for marker in AUDIO_ERROR_MARKERS)


def _run(cmd: list[str]) -> subprocess.CompletedProcess:
    logger.info("Executing: %s", " ".join(cmd))
    return subprocess.run(cmd, capture_output=True, text=True)


def run_plan(
    plan: ClipPlan,
    ffmpeg_binary: str = "ffmpeg",
    audio_fallback_enabled: bool = True,
) -> ClipResult:
    """Execute *plan* with the native engine.

    If stream copy fails because of the audio codec, the clip is retried once
    with AAC audio. Any other failure raises FFmpegError.
    """
    input_path = Path(plan.input_file)
    if not input_path.exists():
        raise FileNotFoundError(f"File not found: {input_path}")

    check_ffmpeg(ffmpeg_binary)

    output_path = Path(plan.output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    result = _run([ffmpeg_binary, *plan.arguments])
    used_fallback = False

    if result.returncode != 0:
        stderr = result.stderr or ""
        if not (audio_fallback_enabled and is_audio_error(stderr)):
            logger.error("ffmpeg failed (rc=%s): %s", result.returncode, stderr[-500:])
            raise FFmpegError(f"ffmpeg failed: {stderr[-500:]}", stderr)

        logger.warning("Audio copy failed, retrying with AAC encoding")
        result = _run([ffmpeg_binary, *audio_fallback(plan.arguments)])
        if result.returncode != 0:
            stderr = result.stderr or ""
            logger.error("ffmpeg fallback failed (rc=%s): %s", result.returncode, stderr[-500:])
            raise FFmpegError(f"ffmpeg failed even with fallback: {stderr[-500:]}", stderr)
        used_fallback = True

    file_size_mb = None
    if output_path.exists():
        file_size_mb = output_path.stat().st_size / (1024 * 1024)

    return ClipResult(
        plan=plan,
        output_path=output_path,
        file_size_mb=file_size_mb,
        used_fallback=used_fallback,
    )
