import argparse
from pathlib import Path

import pytest

from words_transformer.config import (
    DEFAULT_DICTIONARY_PATH,
    DEFAULT_LOG_FILE,
    DICTIONARY_ENV,
    LOG_FILE_ENV,
    build_config,
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    monkeypatch.delenv(DICTIONARY_ENV, raising=False)
    monkeypatch.delenv(LOG_FILE_ENV, raising=False)
    monkeypatch.chdir(tmp_path)


def test_build_config_from_arguments(tmp_path):
    args = argparse.Namespace(
        dictionary=str(tmp_path / "words.txt"),
        log_file=str(tmp_path / "logs" / "words.log"),
    )
    config = build_config(args)

    assert config.dictionary_path == tmp_path / "words.txt"
    assert config.log_file == tmp_path / "logs" / "words.log"
    assert (tmp_path / "logs").is_dir()


def test_build_config_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv(DICTIONARY_ENV, str(tmp_path / "env_words.txt"))
    monkeypatch.setenv(LOG_FILE_ENV, str(tmp_path / "env.log"))

    config = build_config(argparse.Namespace(dictionary=None, log_file=None))

    assert config.dictionary_path == tmp_path / "env_words.txt"
    assert config.log_file == tmp_path / "env.log"


def test_arguments_take_precedence_over_environment(monkeypatch, tmp_path):
    monkeypatch.setenv(DICTIONARY_ENV, str(tmp_path / "env_words.txt"))

    config = build_config(argparse.Namespace(dictionary=str(tmp_path / "cli.txt"), log_file=None))

    assert config.dictionary_path == tmp_path / "cli.txt"


def test_build_config_defaults():
    config = build_config(argparse.Namespace())

    assert config.dictionary_path == Path(DEFAULT_DICTIONARY_PATH)
    assert config.log_file == Path(DEFAULT_LOG_FILE)


def test_build_config_rejects_directory(tmp_path):
    with pytest.raises(IsADirectoryError):
        build_config(argparse.Namespace(dictionary=str(tmp_path), log_file=None))
