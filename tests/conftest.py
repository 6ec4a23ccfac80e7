"""Shared test fixtures."""

from pathlib import Path

import pytest

from vidclip.models import ClipRequest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_config_path() -> Path:
    return FIXTURES_DIR / "sample_config.json"


@pytest.fixture
def basic_request() -> ClipRequest:
    return ClipRequest(input_file="input.mp4", start_time="1:30", end_time="2:45")
