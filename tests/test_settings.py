"""CamelCardsSettings tests."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from camel_cards.config.settings import CamelCardsSettings, get_settings

ENV_VARS = [
    "AOC_2023_07_PATH",
    "CAMEL_CARDS_INPUT_FILE",
    "CAMEL_CARDS_JOKER_WILD",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestCamelCardsSettings:
    """CamelCardsSettings tests."""

    def test_default_values(self) -> None:
        settings = CamelCardsSettings(_env_file=None)

        assert settings.input_dir == Path(".")
        assert settings.input_filename == "input.txt"
        assert settings.input_path == Path("input.txt")
        assert settings.joker_wild is False
        assert settings.log_level == "WARNING"

    def test_env_loading(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AOC_2023_07_PATH", "/data/day07")
        monkeypatch.setenv("CAMEL_CARDS_INPUT_FILE", "sample.txt")
        monkeypatch.setenv("CAMEL_CARDS_JOKER_WILD", "true")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = CamelCardsSettings(_env_file=None)

        assert settings.input_path == Path("/data/day07/sample.txt")
        assert settings.joker_wild is True
        assert settings.log_level == "DEBUG"

    def test_lowercase_env_name(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("aoc_2023_07_path", "/puzzles")

        settings = CamelCardsSettings(_env_file=None)

        assert settings.input_path == Path("/puzzles/input.txt")

    def test_env_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / "config.env"
        env_file.write_text("AOC_2023_07_PATH=/from/file\nCAMEL_CARDS_JOKER_WILD=1\n")

        settings = CamelCardsSettings(_env_file=env_file)

        assert settings.input_dir == Path("/from/file")
        assert settings.joker_wild is True

    def test_invalid_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "LOUD")

        with pytest.raises(ValidationError):
            CamelCardsSettings(_env_file=None)

    def test_invalid_joker_flag(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CAMEL_CARDS_JOKER_WILD", "sometimes")

        with pytest.raises(ValidationError):
            CamelCardsSettings(_env_file=None)

    def test_init_by_field_name(self) -> None:
        settings = CamelCardsSettings(_env_file=None, input_dir=Path("/tmp"), joker_wild=True)

        assert settings.input_path == Path("/tmp/input.txt")
        assert settings.joker_wild is True


class TestGetSettings:
    """get_settings caching."""

    def test_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CAMEL_CARDS_JOKER_WILD", "true")

        assert get_settings().joker_wild is True
