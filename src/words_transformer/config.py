from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DICTIONARY_ENV = "WORDS_TRANSFORMER_DICTIONARY"
LOG_FILE_ENV = "WORDS_TRANSFORMER_LOG_FILE"

DEFAULT_DICTIONARY_PATH = "WordsData"
DEFAULT_LOG_FILE = "words_transformer.log"


@dataclass(slots=True)
class AppConfig:
    """Container for user configurable runtime options."""

    dictionary_path: Path
    log_file: Path


def load_environment() -> None:
    """Load environment variables from .env files if present."""

    load_dotenv(override=False)


def build_config(args) -> AppConfig:
    """Create an :class:`AppConfig` instance from parsed CLI arguments."""

    load_environment()

    dictionary = getattr(args, "dictionary", None) or os.getenv(DICTIONARY_ENV) or DEFAULT_DICTIONARY_PATH
    dictionary_path = Path(dictionary).expanduser()
    if dictionary_path.is_dir():
        raise IsADirectoryError(f"Dictionary path is a directory: {dictionary_path}")

    log_file = getattr(args, "log_file", None) or os.getenv(LOG_FILE_ENV) or DEFAULT_LOG_FILE
    log_file = Path(log_file).expanduser()
    log_file.parent.mkdir(parents=True, exist_ok=True)

    return AppConfig(dictionary_path=dictionary_path, log_file=log_file)
