from __future__ import annotations

from enum import Enum
from typing import Optional


class BrokenReason(Enum):
    BAD_LEFT_STRING = "bad_left_string"
    NO_RIGHT_STRING = "no_right_string"
    BAD_RIGHT_STRING = "bad_right_string"
    DUPLICATED = "duplicated"


class WriteReason(Enum):
    BAD_LEFT_STRING = "bad_left_string"
    BAD_RIGHT_STRING = "bad_right_string"
    DUPLICATED = "duplicated"
    SAME = "same"


class DictionaryError(Exception):
    """Base class for errors raised by :class:`~words_transformer.dictionary.Dictionary`."""


class DictionaryBrokenError(DictionaryError):
    """The dictionary file could not be parsed at ``line``."""

    def __init__(
        self,
        line: int,
        left_string: str,
        reason: BrokenReason,
        right_string: Optional[str] = None,
        another_left_string: Optional[str] = None,
    ) -> None:
        self.line = line
        self.left_string = left_string
        self.reason = reason
        self.right_string = right_string
        self.another_left_string = another_left_string
        super().__init__(self._describe())

    def _describe(self) -> str:
        prefix = f"broken at line {self.line}, "
        if self.reason is BrokenReason.BAD_LEFT_STRING:
            return prefix + f"the left string {self.left_string!r} is not correct"
        if self.reason is BrokenReason.NO_RIGHT_STRING:
            return prefix + (
                f'expected a "=" after the left string {self.left_string!r} '
                "to concatenate a right string"
            )
        if self.reason is BrokenReason.BAD_RIGHT_STRING:
            return prefix + f"the right string {self.right_string!r} is not correct"
        if self.another_left_string is None or self.another_left_string == self.left_string:
            return prefix + f"the left string {self.left_string!r} is duplicated"
        return prefix + (
            f"the left string {self.left_string!r} and {self.another_left_string!r} are duplicated"
        )


_WRITE_MESSAGES = {
    WriteReason.BAD_LEFT_STRING: "the left word is not correct",
    WriteReason.BAD_RIGHT_STRING: "the right word is not correct",
    WriteReason.DUPLICATED: "the pair of the left word and the right word is duplicated",
    WriteReason.SAME: "the left word is equal to the right word",
}


class DictionaryWriteError(DictionaryError):
    """An add or edit was rejected before anything was written."""

    def __init__(self, reason: WriteReason) -> None:
        self.reason = reason
        super().__init__(_WRITE_MESSAGES[reason])
