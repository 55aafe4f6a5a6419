"""Configuration management for BeeSolver."""

from __future__ import annotations

import json
from argparse import ArgumentParser
from typing import Literal

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from beesolver.core.exceptions import ConfigurationError
from beesolver.core.puzzle import Puzzle
from beesolver.utils import Constants, expand_file_path


class Config(BaseModel):
    """Configuration for a solver run."""

    dictionary: str = Field(Constants.DEFAULT_DICTIONARY, description="Dictionary file")
    builtin_dictionary: bool = Field(False, description="Use the english-words list")
    letters: str | None = Field(None, description="Hive letters, middle letter first")
    middle: str | None = Field(None, description="Explicit middle letter")
    case_mode: Literal["insensitive", "normalize", "exact"] = Field(
        Constants.CASE_INSENSITIVE, description="How letter case is compared"
    )
    min_word_length: int = Field(Constants.MIN_WORD_LENGTH, ge=1)
    output: str | None = None
    reports: str | None = None
    log_file: str | None = None
    progress: bool = False
    interactive: bool = False
    verbose: bool = False
    debug: bool = False

    @field_validator("letters", "middle", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        """Treat empty strings as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def validate_puzzle(self):
        """Validate that letters and middle letter form a puzzle."""
        if self.middle is not None and self.letters is None:
            raise ValueError("middle requires letters")
        if self.letters is not None:
            try:
                self.build_puzzle()
            except ConfigurationError as e:
                raise ValueError(str(e)) from e
        return self

    def build_puzzle(self, letters: str | None = None) -> Puzzle:
        """Build the puzzle from `letters`, or from the configured letters."""
        line = letters if letters is not None else self.letters
        if line is None:
            raise ConfigurationError("No letters provided")
        return Puzzle.from_input(line, middle=self.middle, case_mode=self.case_mode)


def load_config(json_path: str | None, cli_args, parser: ArgumentParser) -> Config:
    """Load JSON config, override with CLI args, return Config object."""

    def get_value(key: str, fallback):
        """Get value with correct priority: CLI > JSON > Fallback."""
        cli_value = getattr(cli_args, key)
        default_value = parser.get_default(key)
        if cli_value != default_value:
            return cli_value
        return json_config.get(key, fallback)

    json_config = {}
    if json_path:
        json_path = expand_file_path(json_path) or json_path
        try:
            with open(json_path, "r", encoding="utf-8") as f:
                json_config = json.load(f)
        except FileNotFoundError:
            logger.error(f"✗ Config file not found: {json_path}")
            logger.error("  Please check the file path and try again")
            raise
        except json.JSONDecodeError as e:
            logger.error(f"✗ Invalid JSON in config file {json_path}: {e}")
            logger.error("  Please validate your JSON syntax")
            raise ConfigurationError(f"Invalid JSON configuration: {e}") from e
        except PermissionError:
            logger.error(f"✗ Permission denied reading config file: {json_path}")
            logger.error("  Please check file permissions and try again")
            raise
        except UnicodeDecodeError as e:
            logger.error(f"✗ Encoding error reading config file {json_path}: {e}")
            logger.error("  Please ensure the file is UTF-8 encoded")
            raise ConfigurationError(f"Invalid JSON configuration: {e}") from e

        if not isinstance(json_config, dict):
            logger.error(f"✗ Config file {json_path} must contain a JSON object")
            raise ConfigurationError("Invalid JSON configuration: expected an object")

    config_dict = {
        "dictionary": get_value("dictionary", Constants.DEFAULT_DICTIONARY),
        "builtin_dictionary": cli_args.builtin_dictionary
        or json_config.get("builtin_dictionary", False),
        "letters": get_value("letters", None),
        "middle": get_value("middle", None),
        "case_mode": get_value("case_mode", Constants.CASE_INSENSITIVE),
        "min_word_length": get_value("min_word_length", Constants.MIN_WORD_LENGTH),
        "output": get_value("output", None),
        "reports": get_value("reports", None),
        "log_file": get_value("log_file", None),
        "progress": cli_args.progress or json_config.get("progress", False),
        "interactive": cli_args.interactive or json_config.get("interactive", False),
        "verbose": cli_args.verbose or json_config.get("verbose", False),
        "debug": cli_args.debug or json_config.get("debug", False),
    }

    try:
        return Config.model_validate(config_dict)
    except ValidationError as e:
        logger.error(f"✗ Configuration validation failed: {e}")
        logger.error("  Please check your configuration values")
        raise ConfigurationError(f"Invalid configuration: {e}") from e
