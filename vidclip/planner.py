"""Orchestrator: turns a ClipRequest into a ClipPlan.

Every surface (CLI, native runner, JSON API) plans through ``plan`` so that
identical requests always produce identical plans.
"""

import logging
from dataclasses import replace
from pathlib import Path

from vidclip import timeparse
from vidclip.command import synthesize
from vidclip.config import ClipperConfig
from vidclip.models import ClipPlan, ClipRequest, TimeRange
from vidclip.naming import DEFAULT_EXTENSION, generate_name
from vidclip.ranges import validate

logger = logging.getLogger(__name__)


def plan(
    request: ClipRequest,
    source_duration: float | None = None,
    extension: str = DEFAULT_EXTENSION,
) -> ClipPlan:
    """Resolve *request* into a plan without touching the filesystem.

    The start text is parsed before the end text, so when both are invalid
    the start failure is the one raised.

    Raises:
        InvalidFormat: either timestamp is unparseable.
        ValidationError: the parsed range is rejected.
    """
    start = timeparse.parse(request.start_time)
    end = timeparse.parse(request.end_time)
    time_range = validate(start, end, source_duration)

    output_name = generate_name(request.input_file, time_range, extension)
    if request.output_dir:
        output_path = str(Path(request.output_dir) / output_name)
    else:
        output_path = output_name

    arguments = synthesize(request.input_file, output_path, time_range)
    logger.debug(
        "Planned %s [%s-%s] -> %s",
        request.input_file, time_range.start, time_range.end, output_path,
    )
    return ClipPlan(
        input_file=request.input_file,
        output_name=output_name,
        output_path=output_path,
        range=time_range,
        arguments=arguments,
    )


class Clipper:
    """Parse, validate and plan bundled behind one configured object."""

    def __init__(self, config: ClipperConfig | None = None):
        self.config = config or ClipperConfig()

    def parse(self, text: str) -> float:
        return timeparse.parse(text)

    def validate(
        self, start: float, end: float, source_duration: float | None = None
    ) -> TimeRange:
        return validate(start, end, source_duration)

    def plan(
        self, request: ClipRequest, source_duration: float | None = None
    ) -> ClipPlan:
        """Plan *request*, writing into the configured output directory
        unless the request names its own."""
        if request.output_dir is None:
            request = replace(request, output_dir=self.config.output_dir)
        return plan(request, source_duration, extension=self.config.extension)

    def output_name(self, input_file: str, start_time: str, end_time: str) -> str:
        time_range = validate(timeparse.parse(start_time), timeparse.parse(end_time))
        return generate_name(input_file, time_range, self.config.extension)
