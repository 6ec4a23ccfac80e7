"""vidclip: plan and cut video clips from human-friendly timestamps."""

from vidclip.errors import (
    EXPECTED_FORMATS,
    ClipError,
    ExceedsSourceDuration,
    InvalidFormat,
    NegativeStart,
    NonPositiveDuration,
    ParseError,
    ValidationError,
)
from vidclip.models import ClipPlan, ClipRequest, TimeRange
from vidclip.planner import Clipper, plan
from vidclip.ranges import validate
from vidclip.timeparse import parse

__all__ = [
    "EXPECTED_FORMATS",
    "ClipError",
    "ClipPlan",
    "ClipRequest",
    "Clipper",
    "ExceedsSourceDuration",
    "InvalidFormat",
    "NegativeStart",
    "NonPositiveDuration",
    "ParseError",
    "TimeRange",
    "ValidationError",
    "parse",
    "plan",
    "validate",
]
