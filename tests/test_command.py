"""Tests for engine argument synthesis."""

import shlex

import pytest

from vidclip.command import audio_fallback, synthesize
from vidclip.ranges import validate


class TestSynthesize:
    def test_exact_token_order(self):
        args = synthesize("input.mp4", "output.mp4", validate(90, 165))
        assert args == (
            "-i", "input.mp4",
            "-ss", "90",
            "-t", "75",
            "-c", "copy",
            "-avoid_negative_ts", "make_zero",
            "-y", "output.mp4",
        )

    def test_fractional_times(self):
        args = synthesize("in.mp4", "out.mp4", validate(5.5, 31.25))
        assert args[args.index("-ss") + 1] == "5.5"
        assert args[args.index("-t") + 1] == "25.75"

    def test_zero_start(self):
        args = synthesize("in.mp4", "out.mp4", validate(0, 60))
        assert args[3] == "0"
        assert args[5] == "60"

    def test_large_and_tiny_values(self):
        args = synthesize("in.mp4", "out.mp4", validate(3661.5, 10861.5))
        assert args[3] == "3661.5"
        assert args[5] == "7200"
        args = synthesize("in.mp4", "out.mp4", validate(100, 100.001))
        assert args[5] == "0.001"

    def test_sub_microsecond_duration_is_not_zero(self):
        args = synthesize("in.mp4", "out.mp4", validate(10, 10.0000001))
        assert args[3] == "10"
        assert args[5] == "0.0000001"

    def test_tokens_are_flat_strings(self):
        args = synthesize("in.mp4", "out.mp4", validate(1, 2))
        assert isinstance(args, tuple)
        assert all(isinstance(a, str) for a in args)

    def test_paths_with_spaces_stay_single_tokens(self):
        args = synthesize("my video (2023) - final.mp4", "output [clipped].mp4", validate(30, 90))
        assert args[1] == "my video (2023) - final.mp4"
        assert args[-1] == "output [clipped].mp4"
        assert len(args) == 12
        non_paths = [a for i, a in enumerate(args) if i not in (1, len(args) - 1)]
        assert not any(ch.isspace() for a in non_paths for ch in a)
        assert shlex.split(shlex.join(args)) == list(args)


class TestAudioFallback:
    def test_replaces_copy_pair(self):
        args = synthesize("in.mp4", "out.mp4", validate(15, 60))
        fallback = audio_fallback(args)
        assert fallback == (
            "-i", "in.mp4",
            "-ss", "15",
            "-t", "45",
            "-c:v", "copy", "-c:a", "aac", "-b:a", "128k",
            "-avoid_negative_ts", "make_zero",
            "-y", "out.mp4",
        )

    def test_path_named_copy_is_untouched(self):
        args = synthesize("-c", "copy", validate(0, 1))
        fallback = audio_fallback(args)
        assert fallback[1] == "-c"
        assert fallback[-1] == "copy"
        assert "-c:a" in fallback

    def test_requires_copy_pair(self):
        with pytest.raises(ValueError, match="no '-c copy' pair"):
            audio_fallback(("-i", "in.mp4", "-y", "out.mp4"))
