from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, List, Optional, Tuple

from .dictionary import Dictionary


class Side(Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(slots=True)
class LookupResult:
    index: int
    side: Side
    key: str
    value: str
    evolution: str

    @property
    def result(self) -> str:
        """Text of the side that matched the keyword."""

        return self.key if self.side is Side.LEFT else self.value


class LookupSession:
    """Layered search over a dictionary with "next match" iteration.

    A search tries the strict then the fuzzy scan of the keys, then the same
    two scans of the values. ``search_next`` walks the fuzzy matches of the
    current side and moves to the other side once the scan wraps back onto the
    current match.
    """

    def __init__(self, dictionary: Dictionary) -> None:
        self.dictionary = dictionary
        self.keyword = ""
        self.current: Optional[LookupResult] = None

    def _strategies(self, side: Side) -> List[Callable[[str, int], Optional[int]]]:
        if side is Side.LEFT:
            return [self.dictionary.find_left_strictly, self.dictionary.find_left]
        return [self.dictionary.find_right_strictly, self.dictionary.find_right]

    def _first_hit(self, keyword: str, start_index: int, sides: Tuple[Side, ...]) -> Optional[Tuple[int, Side]]:
        for side in sides:
            for find in self._strategies(side):
                index = find(keyword, start_index)
                if index is not None:
                    return index, side
        return None

    def _build_result(self, index: int, side: Side) -> LookupResult:
        key = self.dictionary.get_left(index)
        value = self.dictionary.get_right(index)
        chain = self.dictionary.get_all_right_to_string(index)
        return LookupResult(index=index, side=side, key=key, value=value, evolution=f"{key} = {chain}")

    def search(self, keyword: str) -> Optional[LookupResult]:
        keyword = keyword.strip()
        self.keyword = keyword
        self.current = None
        if not keyword:
            return None

        hit = self._first_hit(keyword, 0, (Side.LEFT, Side.RIGHT))
        if hit is None:
            return None

        self.current = self._build_result(*hit)
        return self.current

    def search_next(self) -> Optional[LookupResult]:
        if self.current is None:
            return None

        keyword = self.keyword
        current_index = self.current.index
        side = self.current.side
        other = Side.RIGHT if side is Side.LEFT else Side.LEFT
        start_index = current_index + 1

        fuzzy = self.dictionary.find_left if side is Side.LEFT else self.dictionary.find_right
        next_index = fuzzy(keyword, start_index)

        if next_index is None:
            # The current match is gone, e.g. deleted since the last search.
            return self.search(keyword)

        if next_index == current_index:
            hit = self._first_hit(keyword, start_index, (other,))
            if hit is not None:
                next_index, side = hit

        self.current = self._build_result(next_index, side)
        return self.current

    def iter_matches(self, keyword: str) -> Iterator[LookupResult]:
        """Yield each distinct match reachable through repeated ``search_next``."""

        result = self.search(keyword)
        seen = set()
        while result is not None and (result.index, result.side) not in seen:
            seen.add((result.index, result.side))
            yield result
            result = self.search_next()
