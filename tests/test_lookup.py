import pytest

from words_transformer.dictionary import Dictionary
from words_transformer.lookup import LookupSession, Side


@pytest.fixture
def fruit_dictionary(tmp_path):
    dictionary = Dictionary(tmp_path / "fruit.txt")
    dictionary.add_edit("Apple", "蘋果")
    dictionary.add_edit("Fruit", "Apple pie")
    return dictionary


def test_search_strict_key_first(dictionary):
    result = LookupSession(dictionary).search(" abez ")
    assert result.index == 0
    assert result.side is Side.LEFT
    assert result.result == "Abez"
    assert result.value == "阿貝茲"
    assert result.evolution == "Abez = 阿別茲 --> 阿貝茲"


def test_search_falls_back_to_partial_key(dictionary):
    result = LookupSession(dictionary).search("bra")
    assert (result.index, result.side) == (4, Side.LEFT)
    assert result.result == "Abraxas"


def test_search_falls_back_to_values(dictionary):
    session = LookupSession(dictionary)

    exact = session.search("阿拜")
    assert (exact.index, exact.side) == (1, Side.RIGHT)
    assert exact.result == "阿拜"

    partial = session.search("布")
    assert (partial.index, partial.side) == (3, Side.RIGHT)
    assert partial.result == "阿布明"


def test_search_not_found(dictionary):
    session = LookupSession(dictionary)
    assert session.search("zzz") is None
    assert session.current is None
    assert session.search("   ") is None


def test_search_next_walks_partial_keys(dictionary):
    session = LookupSession(dictionary)
    session.search("Ab")
    indices = [session.search_next().index for _ in range(6)]
    assert indices == [1, 2, 3, 4, 5, 0]


def test_search_next_switches_side_when_exhausted(fruit_dictionary):
    session = LookupSession(fruit_dictionary)

    first = session.search("apple")
    assert (first.index, first.side) == (0, Side.LEFT)

    second = session.search_next()
    assert (second.index, second.side) == (1, Side.RIGHT)
    assert second.result == "Apple pie"

    third = session.search_next()
    assert (third.index, third.side) == (0, Side.LEFT)


def test_search_next_stays_on_single_match(dictionary):
    session = LookupSession(dictionary)
    session.search("技能")
    result = session.search_next()
    assert (result.index, result.side) == (2, Side.RIGHT)


def test_search_next_without_search_returns_none():
    session = LookupSession(Dictionary("unused.txt"))
    assert session.search_next() is None


def test_search_next_recovers_after_delete(dictionary):
    session = LookupSession(dictionary)
    session.search("Absu")
    dictionary.delete(5)
    assert session.search_next() is None


def test_iter_matches(dictionary, fruit_dictionary):
    results = list(LookupSession(dictionary).iter_matches("Ab"))
    assert [result.result for result in results] == ["Abez", "Abhai", "ability", "Abmin", "Abraxas", "Absu"]

    results = list(LookupSession(fruit_dictionary).iter_matches("APPLE"))
    assert [(result.index, result.side) for result in results] == [(0, Side.LEFT), (1, Side.RIGHT)]

    assert list(LookupSession(dictionary).iter_matches("missing")) == []
