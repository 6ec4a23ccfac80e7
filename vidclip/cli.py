"""Thin CLI entry point: builds a ClipRequest and hands it to the planner."""

import argparse
import json
import logging
import subprocess
import sys
from pathlib import Path

from vidclip import ffutil
from vidclip.config import ClipperConfig, load_config
from vidclip.errors import EXPECTED_FORMATS, ClipError
from vidclip.models import ClipPlan, ClipRequest
from vidclip.planner import Clipper
from vidclip.timeparse import format_clock, format_seconds

EXIT_ENGINE_ERROR = 1
EXIT_PLAN_ERROR = 2


def _add_clip_arguments(p: argparse.ArgumentParser, required: bool) -> None:
    p.add_argument("input", nargs=None if required else "?", help="Input video file")
    p.add_argument("--start", "-s", required=required, help="Start time (e.g. 36:07, 1h5m or 2167)")
    p.add_argument("--end", "-e", required=required, help="End time (e.g. 37:19, 1h6m or 2239)")
    p.add_argument("--output-dir", "-o", help="Output directory (default from config: downloads)")
    p.add_argument("--source-duration", type=float, help="Reject ranges ending past this many seconds")
    p.add_argument("--probe", action="store_true", help="Read the source duration with ffprobe")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vidclip",
        description="vidclip: cut a time range out of a video without re-encoding.",
    )
    parser.add_argument("--config", "-c", type=Path, help="Path to a JSON config file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command")

    plan = sub.add_parser("plan", help="Print the engine command for a clip without running it")
    _add_clip_arguments(plan, required=True)
    plan.add_argument("--json", action="store_true", help="Print the plan as JSON")

    clip = sub.add_parser("clip", help="Cut a clip with the local ffmpeg")
    _add_clip_arguments(clip, required=False)
    clip.add_argument("--no-fallback", action="store_true", help="Do not retry with AAC audio")

    serve = sub.add_parser("serve", help="Launch the JSON API")
    serve.add_argument("--port", type=int, default=8321, help="Port to listen on")
    serve.add_argument("--host", type=str, default="127.0.0.1", help="Host to bind to")

    return parser


def _prompt(label: str) -> str:
    return input(f"{label}: ").strip().strip("\"'")


def _fill_interactively(args: argparse.Namespace) -> None:
    """Ask for whatever the clip command line left out."""
    if not args.input:
        args.input = _prompt("Video file path")
        if not args.input:
            print("Error: no file path provided.", file=sys.stderr)
            sys.exit(EXIT_PLAN_ERROR)
    if args.start is None:
        args.start = _prompt("Start (e.g. 36:07 or 2167)") or "0"
    if args.end is None:
        args.end = _prompt("End (e.g. 37:19 or 2239)")
        if not args.end:
            print("Error: end time required.", file=sys.stderr)
            sys.exit(EXIT_PLAN_ERROR)


def _report_plan_error(err: ClipError) -> None:
    print(f"Error: {err}", file=sys.stderr)
    if err.offending_input:
        print(f"  Offending input: {err.offending_input}", file=sys.stderr)
    print("  Accepted time formats:", file=sys.stderr)
    for fmt in EXPECTED_FORMATS:
        print(f"    {fmt}", file=sys.stderr)


def _source_duration(args: argparse.Namespace, config: ClipperConfig) -> float | None:
    if args.probe:
        return ffutil.probe(Path(args.input), config.ffprobe_binary).duration
    return args.source_duration


def _print_plan(plan: ClipPlan, config: ClipperConfig) -> None:
    r = plan.range
    print(f"Input:   {plan.input_file}")
    print(f"Output:  {plan.output_path}")
    print(f"Range:   {format_clock(r.start)} -> {format_clock(r.end)} ({format_seconds(r.clip_duration)}s)")
    print(f"Command: {plan.command_line(config.ffmpeg_binary)}")


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        config = load_config(args.config) if args.config else ClipperConfig()
    except (OSError, ValueError) as e:
        print(f"Error: could not load config {args.config}: {e}", file=sys.stderr)
        sys.exit(EXIT_ENGINE_ERROR)

    if args.command == "serve":
        from vidclip.web import create_app
        app = create_app(config)
        print(f"vidclip API: http://{args.host}:{args.port}")
        app.run(host=args.host, port=args.port, debug=False)
        return

    if args.command == "clip":
        _fill_interactively(args)

    request = ClipRequest(
        input_file=args.input,
        start_time=args.start,
        end_time=args.end,
        output_dir=args.output_dir,
    )
    clipper = Clipper(config)

    try:
        plan = clipper.plan(request, _source_duration(args, config))
    except ClipError as e:
        _report_plan_error(e)
        sys.exit(EXIT_PLAN_ERROR)
    except (subprocess.CalledProcessError, OSError, ValueError) as e:
        print(f"Error: could not probe {args.input}: {e}", file=sys.stderr)
        sys.exit(EXIT_ENGINE_ERROR)

    if args.command == "plan":
        if args.json:
            print(json.dumps(plan.to_dict(), indent=2))
        else:
            _print_plan(plan, config)
        return

    _print_plan(plan, config)
    print()
    print("Processing...")
    try:
        result = ffutil.run_plan(
            plan,
            ffmpeg_binary=config.ffmpeg_binary,
            audio_fallback_enabled=config.audio_fallback and not args.no_fallback,
        )
    except (FileNotFoundError, ffutil.FFmpegNotFoundError, ffutil.FFmpegError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_ENGINE_ERROR)

    print()
    print(f"Done! Clip saved: {result.output_path}")
    if result.file_size_mb is not None:
        print(f"  Size: {result.file_size_mb:.1f} MB")
    print(f"  Duration: {plan.range.clip_duration:.1f}s")
    if result.used_fallback:
        print("  Audio re-encoded to AAC (stream copy was rejected)")
