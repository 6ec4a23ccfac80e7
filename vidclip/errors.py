"""Planning failures. Each one carries the offending input for diagnostics."""

EXPECTED_FORMATS = (
    "H:MM:SS[.f]   e.g. 1:02:03 or 0:45:30.5",
    "M:SS[.f]      e.g. 1:30 or 36:07.25",
    "NhNmNs        e.g. 1h30m, 5m, 90s, 1h 30m 45.5s",
    "N[.f]         seconds, e.g. 90 or 12.5",
)


class ClipError(ValueError):
    """Base class for every failure raised while planning a clip."""

    code = "clip_error"

    @property
    def offending_input(self) -> str:
        return ""


class ParseError(ClipError):
    code = "parse_error"


class InvalidFormat(ParseError):
    """Timestamp text matched no accepted grammar, or had an out-of-range field."""

    code = "invalid_format"

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Invalid time format: {text!r}")

    @property
    def offending_input(self) -> str:
        return self.text


class ValidationError(ClipError):
    code = "validation_error"


class NegativeStart(ValidationError):
    code = "negative_start"

    def __init__(self, start: float, end: float):
        self.start = start
        self.end = end
        super().__init__(f"Times must not be negative (start={start}, end={end})")

    @property
    def offending_input(self) -> str:
        return f"{self.start}..{self.end}"


class NonPositiveDuration(ValidationError):
    code = "non_positive_duration"

    def __init__(self, start: float, end: float):
        self.start = start
        self.end = end
        super().__init__(f"End time ({end}) must be after start time ({start})")

    @property
    def offending_input(self) -> str:
        return f"{self.start}..{self.end}"


class ExceedsSourceDuration(ValidationError):
    code = "exceeds_source_duration"

    def __init__(self, end: float, source_duration: float):
        self.end = end
        self.source_duration = source_duration
        super().__init__(
            f"End time ({end}) is past the end of the source ({source_duration})"
        )

    @property
    def offending_input(self) -> str:
        return str(self.end)
