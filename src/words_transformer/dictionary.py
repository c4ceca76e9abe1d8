"""Persistent word mapping with an append-only history of translations per term.

The backing file is plain text, one entry per line::

    Alduin = 阿爾杜因 --> 奥杜因
    Aldun = 奧爾敦

The left side is the lookup term. The right side is the evolution chain of
every value ever assigned to it; the last one is current.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, List, Mapping, Optional, Union

from .errors import (
    BrokenReason,
    DictionaryBrokenError,
    DictionaryWriteError,
    WriteReason,
)

KEY_VALUE_SEPARATOR = "="
CHAIN_SEPARATOR = "-->"
CHAIN_JOINER = f" {CHAIN_SEPARATOR} "


@dataclass(slots=True)
class Entry:
    key: str
    chain: List[str] = field(default_factory=list)

    @property
    def current(self) -> str:
        return self.chain[-1]

    def chain_to_string(self) -> str:
        return CHAIN_JOINER.join(self.chain)

    def to_line(self) -> str:
        return f"{self.key} {KEY_VALUE_SEPARATOR} {self.chain_to_string()}"


class EditOutcome(Enum):
    CREATED = "created"
    UPDATED = "updated"


def _contains_delimiter(text: str) -> bool:
    return CHAIN_SEPARATOR in text or KEY_VALUE_SEPARATOR in text


def _spans_lines(text: str) -> bool:
    return len(text.splitlines()) > 1


class Dictionary:
    """Word mapping bound to a dictionary file.

    Constructing an instance does not touch the file; call :meth:`read_data`
    to load it. Every mutation rewrites the whole file sorted by key.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._entries: List[Entry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Dictionary(path={str(self.path)!r}, count={len(self._entries)})"

    # Accessors

    def count(self) -> int:
        return len(self._entries)

    def _entry(self, index: int) -> Optional[Entry]:
        if 0 <= index < len(self._entries):
            return self._entries[index]
        return None

    def get_left(self, index: int) -> Optional[str]:
        entry = self._entry(index)
        return entry.key if entry is not None else None

    def get_right(self, index: int) -> Optional[str]:
        entry = self._entry(index)
        return entry.current if entry is not None else None

    def get_all_right(self, index: int) -> Optional[List[str]]:
        entry = self._entry(index)
        return list(entry.chain) if entry is not None else None

    def get_all_right_to_string(self, index: int) -> Optional[str]:
        entry = self._entry(index)
        return entry.chain_to_string() if entry is not None else None

    def entries(self) -> List[Entry]:
        return [Entry(entry.key, list(entry.chain)) for entry in self._entries]

    # Searching

    def _scan(self, start_index: int, predicate: Callable[[Entry], bool]) -> Optional[int]:
        """Visit every entry once from ``start_index``, wrapping around to 0."""

        size = len(self._entries)
        if size == 0:
            return None

        index = start_index % size
        for _ in range(size):
            if predicate(self._entries[index]):
                return index
            index += 1
            if index == size:
                index = 0
        return None

    def find_left_strictly(self, query: str, start_index: int = 0) -> Optional[int]:
        folded = query.casefold()
        return self._scan(start_index, lambda entry: entry.key.casefold() == folded)

    def find_left(self, query: str, start_index: int = 0) -> Optional[int]:
        folded = query.casefold()
        return self._scan(start_index, lambda entry: folded in entry.key.casefold())

    def find_right_strictly(self, query: str, start_index: int = 0) -> Optional[int]:
        folded = query.casefold()
        return self._scan(
            start_index,
            lambda entry: any(value.casefold() == folded for value in reversed(entry.chain)),
        )

    def find_right(self, query: str, start_index: int = 0) -> Optional[int]:
        folded = query.casefold()
        return self._scan(
            start_index,
            lambda entry: any(folded in value.casefold() for value in reversed(entry.chain)),
        )

    # Persistence

    def read_data(self) -> None:
        """Load entries from the dictionary file.

        A missing file is not an error and leaves the table empty. Entries
        parsed before a broken line stay in the table.
        """

        try:
            handle = self.path.open("r", encoding="utf-8")
        except FileNotFoundError:
            return

        with handle:
            try:
                self._parse_lines(handle)
            except UnicodeDecodeError as error:
                raise OSError(f"{self.path} is not valid UTF-8: {error}") from error

    def _parse_lines(self, lines: Iterable[str]) -> None:
        line_counter = 1
        for raw_line in lines:
            line = raw_line.strip()
            if not line:
                continue

            segments = line.split(KEY_VALUE_SEPARATOR)
            left_string = segments[0]
            if CHAIN_SEPARATOR in left_string:
                raise DictionaryBrokenError(line_counter, left_string, BrokenReason.BAD_LEFT_STRING)

            left_string = left_string.rstrip()

            existing = self.find_left_strictly(left_string, 0)
            if existing is not None:
                raise DictionaryBrokenError(
                    line_counter,
                    left_string,
                    BrokenReason.DUPLICATED,
                    another_left_string=self._entries[existing].key,
                )

            if len(segments) < 2:
                raise DictionaryBrokenError(line_counter, left_string, BrokenReason.NO_RIGHT_STRING)

            right_string = segments[1]
            if len(segments) > 2:
                raise DictionaryBrokenError(
                    line_counter, left_string, BrokenReason.BAD_RIGHT_STRING, right_string=right_string
                )

            chain = [piece.strip() for piece in right_string.split(CHAIN_SEPARATOR)]
            if not all(chain):
                raise DictionaryBrokenError(
                    line_counter, left_string, BrokenReason.BAD_RIGHT_STRING, right_string=right_string
                )

            self._entries.append(Entry(left_string, chain))
            line_counter += 1

    def write_data(self) -> None:
        """Rewrite the dictionary file, sorting the table by key first."""

        self._entries.sort(key=lambda entry: entry.key.upper())
        content = "\n".join(entry.to_line() for entry in self._entries)
        with self.path.open("w", encoding="utf-8", newline="\n") as handle:
            handle.write(content)

    # Mutation

    def add_edit(self, left: str, right: str) -> EditOutcome:
        """Add ``left = right``, or append ``right`` to the chain of an existing ``left``."""

        left = left.strip()
        right = right.strip()

        if not left or _contains_delimiter(left) or _spans_lines(left):
            raise DictionaryWriteError(WriteReason.BAD_LEFT_STRING)
        if not right or _contains_delimiter(right) or _spans_lines(right):
            raise DictionaryWriteError(WriteReason.BAD_RIGHT_STRING)
        if left == right:
            raise DictionaryWriteError(WriteReason.SAME)

        index = self.find_left_strictly(left, 0)
        if index is not None:
            entry = self._entries[index]
            if entry.current == right:
                raise DictionaryWriteError(WriteReason.DUPLICATED)
            entry.chain.append(right)
            self.write_data()
            return EditOutcome.UPDATED

        self._entries.append(Entry(left, [right]))
        self.write_data()
        return EditOutcome.CREATED

    def delete(self, index: int) -> bool:
        if not 0 <= index < len(self._entries):
            return False
        del self._entries[index]
        self.write_data()
        return True


def as_mapping(dictionary: Dictionary) -> Mapping[str, str]:
    """Return ``{key: current value}`` for every entry."""

    return {entry.key: entry.current for entry in dictionary.entries()}


def transform_text(text: str, dictionary: Dictionary) -> str:
    """Replace occurrences of dictionary keys with their current value.

    Keys match case-insensitively, longest first, in a single pass so that
    replaced text is never matched again.
    """

    mapping = as_mapping(dictionary)
    if not mapping:
        return text

    folded = {term.casefold(): value for term, value in mapping.items()}
    pattern = re.compile(
        "|".join(re.escape(term) for term in sorted(mapping, key=len, reverse=True)),
        re.IGNORECASE,
    )
    return pattern.sub(lambda match: folded.get(match.group(0).casefold(), match.group(0)), text)
