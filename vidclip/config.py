"""JSON configuration shared by the CLI, the web API and the native runner."""

import json
from dataclasses import dataclass, fields
from pathlib import Path


@dataclass
class ClipperConfig:
    """Defaults for planning and executing clips."""

    output_dir: str = "downloads"
    extension: str = "mp4"
    ffmpeg_binary: str = "ffmpeg"
    ffprobe_binary: str = "ffprobe"
    audio_fallback: bool = True


def load_config(path: str | Path) -> ClipperConfig:
    """Load a config from a JSON file; missing keys keep their defaults."""
    path = Path(path)
    data = json.loads(path.read_text())

    if not isinstance(data, dict):
        raise ValueError("Config must be a JSON object")

    known = {f.name for f in fields(ClipperConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")

    for f in fields(ClipperConfig):
        if f.name in data and not isinstance(data[f.name], f.type):
            raise ValueError(
                f"Config key '{f.name}' must be a {f.type.__name__}"
            )

    return ClipperConfig(**data)
