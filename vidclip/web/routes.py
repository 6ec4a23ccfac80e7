"""JSON routes exposing parse, validate and plan to browser scripts."""

import math

from flask import Blueprint, current_app, jsonify, request

from vidclip.errors import EXPECTED_FORMATS, ClipError
from vidclip.models import ClipRequest
from vidclip.planner import Clipper
from vidclip.timeparse import format_clock

bp = Blueprint("api", __name__, url_prefix="/api")


class BadPayload(Exception):
    pass


def _clipper() -> Clipper:
    return Clipper(current_app.config["CLIPPER"])


def _body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise BadPayload("Request body must be a JSON object")
    return data


def _text(data: dict, key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise BadPayload(f"'{key}' must be a string")
    return value


def _finite(value, message: str) -> float:
    try:
        number = float(value)
    except OverflowError:
        raise BadPayload(message) from None
    if not math.isfinite(number):
        raise BadPayload(message)
    return number


def _seconds(clipper: Clipper, value) -> float:
    """Accept either a number of seconds or timestamp text."""
    if isinstance(value, bool):
        raise BadPayload("times must be numbers or timestamp strings")
    if isinstance(value, (int, float)):
        return _finite(value, "times must be finite numbers")
    if isinstance(value, str):
        return clipper.parse(value)
    raise BadPayload("times must be numbers or timestamp strings")


def _optional_number(data: dict, key: str) -> float | None:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise BadPayload(f"'{key}' must be a number")
    return _finite(value, f"'{key}' must be a finite number")


@bp.errorhandler(ClipError)
def clip_error(err: ClipError):
    return jsonify({
        "error": err.code,
        "message": str(err),
        "input": err.offending_input,
        "expected_formats": list(EXPECTED_FORMATS),
    }), 400


@bp.errorhandler(BadPayload)
def bad_request(err: BadPayload):
    return jsonify({"error": "bad_request", "message": str(err)}), 400


@bp.route("/formats")
def formats():
    return jsonify({"formats": list(EXPECTED_FORMATS)})


@bp.route("/parse", methods=["POST"])
def parse():
    text = _text(_body(), "text")
    seconds = _clipper().parse(text)
    return jsonify({"text": text, "seconds": seconds, "readable": format_clock(seconds)})


@bp.route("/validate", methods=["POST"])
def validate():
    data = _body()
    clipper = _clipper()
    if "start" not in data or "end" not in data:
        raise BadPayload("'start' and 'end' are required")
    start = _seconds(clipper, data["start"])
    end = _seconds(clipper, data["end"])
    time_range = clipper.validate(start, end, _optional_number(data, "source_duration"))
    return jsonify({
        "start": time_range.start,
        "end": time_range.end,
        "clip_duration": time_range.clip_duration,
    })


@bp.route("/plan", methods=["POST"])
def plan():
    data = _body()
    output_dir = data.get("output_dir")
    if output_dir is not None and not isinstance(output_dir, str):
        raise BadPayload("'output_dir' must be a string")

    clip_request = ClipRequest(
        input_file=_text(data, "input_file"),
        start_time=_text(data, "start_time"),
        end_time=_text(data, "end_time"),
        output_dir=output_dir,
    )
    result = _clipper().plan(clip_request, _optional_number(data, "source_duration"))
    return jsonify(result.to_dict())
