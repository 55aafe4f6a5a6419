"""Unit tests for configuration loading.

Each test has a single assertion and focuses on behavior.
"""

import json

import pytest

from beesolver.cli import create_parser
from beesolver.core import Config, ConfigurationError, load_config


def _load(argv: list[str], json_path: str | None = None) -> Config:
    parser = create_parser()
    args = parser.parse_args(argv)
    return load_config(json_path, args, parser)


class TestConfig:
    """Test Config model validation."""

    def test_defaults_to_dictionary_txt(self) -> None:
        """When no dictionary is given, defaults to dictionary.txt."""
        assert Config().dictionary == "dictionary.txt"

    def test_defaults_to_case_insensitive(self) -> None:
        """When no case mode is given, defaults to insensitive."""
        assert Config().case_mode == "insensitive"

    def test_blank_letters_become_none(self) -> None:
        """When letters are blank, they are treated as unset."""
        assert Config(letters="  ").letters is None

    def test_rejects_middle_without_letters(self) -> None:
        """When a middle letter is given without letters, validation fails."""
        with pytest.raises(ValueError, match="middle requires letters"):
            Config(middle="n")

    def test_rejects_middle_outside_letters(self) -> None:
        """When the middle letter is not among the letters, validation fails."""
        with pytest.raises(ValueError, match="not one of the letters"):
            Config(letters="ablot", middle="n")

    def test_rejects_zero_min_word_length(self) -> None:
        """When min_word_length is zero, validation fails."""
        with pytest.raises(ValueError):
            Config(min_word_length=0)

    def test_build_puzzle_without_letters_raises(self) -> None:
        """When no letters are configured or passed, raises ConfigurationError."""
        with pytest.raises(ConfigurationError):
            Config().build_puzzle()

    def test_build_puzzle_uses_explicit_letters(self) -> None:
        """When letters are passed to build_puzzle, they are used."""
        assert Config().build_puzzle("tab").middle == "T"


class TestLoadConfig:
    """Test load_config behavior."""

    def test_reads_cli_letters(self) -> None:
        """When --letters is given, config holds the letters."""
        assert _load(["--letters", "nabloty"]).letters == "nabloty"

    def test_reads_values_from_json(self, tmp_path) -> None:
        """When a JSON config is given, its values are used."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"dictionary": "words.txt"}))
        assert _load([], str(config_file)).dictionary == "words.txt"

    def test_cli_overrides_json(self, tmp_path) -> None:
        """When both CLI and JSON set a value, the CLI value wins."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"min_word_length": 6}))
        assert _load(["--min-word-length", "5"], str(config_file)).min_word_length == 5

    def test_json_flag_is_respected(self, tmp_path) -> None:
        """When JSON enables verbose, config is verbose without the CLI flag."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"verbose": True}))
        assert _load([], str(config_file)).verbose

    def test_raises_on_missing_config_file(self, tmp_path) -> None:
        """When the config file does not exist, raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            _load([], str(tmp_path / "missing.json"))

    def test_raises_configuration_error_on_invalid_json(self, tmp_path) -> None:
        """When the config file is not valid JSON, raises ConfigurationError."""
        config_file = tmp_path / "config.json"
        config_file.write_text("{not json")
        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            _load([], str(config_file))

    def test_raises_configuration_error_on_non_utf8_file(self, tmp_path) -> None:
        """When the config file is not UTF-8, raises ConfigurationError."""
        config_file = tmp_path / "config.json"
        config_file.write_bytes(b'{"letters": "caf\xe9"}')
        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            _load([], str(config_file))

    def test_raises_configuration_error_on_non_object_json(self, tmp_path) -> None:
        """When the config file holds a JSON list, raises ConfigurationError."""
        config_file = tmp_path / "config.json"
        config_file.write_text("[1, 2]")
        with pytest.raises(ConfigurationError):
            _load([], str(config_file))

    def test_raises_configuration_error_on_bad_puzzle(self) -> None:
        """When the middle letter is not among the letters, raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            _load(["--letters", "ablot", "--middle", "z"])
