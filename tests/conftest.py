"""Global pytest fixtures and configuration."""

from pathlib import Path

import pytest

from camel_cards.config.settings import get_settings

SAMPLE_INPUT = """\
32T3K 765
T55J5 684
KK677 28
KTJJT 220
QQQJA 483
"""


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make each test build settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_lines() -> list[str]:
    return SAMPLE_INPUT.splitlines()


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """Write the sample hands to input.txt in a temp directory."""
    path = tmp_path / "input.txt"
    path.write_text(SAMPLE_INPUT, encoding="utf-8")
    return path
