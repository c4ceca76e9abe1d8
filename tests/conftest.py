from pathlib import Path

import pytest

from words_transformer.dictionary import Dictionary

SAMPLE_DATA = """Abez = 阿別茲 -->阿貝茲
  Abhai = 阿拜
ability =技能
Abmin = 阿布明

Abraxas= 阿柏拉克薩斯
Absu = 阿布蘇"""


@pytest.fixture
def dictionary_path(tmp_path: Path) -> Path:
    path = tmp_path / "dictionary.txt"
    path.write_text(SAMPLE_DATA, encoding="utf-8")
    return path


@pytest.fixture
def dictionary(dictionary_path: Path) -> Dictionary:
    loaded = Dictionary(dictionary_path)
    loaded.read_data()
    return loaded
