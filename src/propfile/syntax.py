"""Character classes that drive the property file tokenizer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterable

SPACE = "space"
LINE_BREAK = "line_break"
COMMENT = "comment"
DELIMITER = "delimiter"


def _charset(name: str, chars: Iterable[str]) -> frozenset[str]:
    result = frozenset(chars)
    if not result:
        raise ValueError(f"{name} character set is empty")
    for char in result:
        if len(char) != 1:
            raise ValueError(f"{name} entries must be single characters, got {char!r}")
    return result


@dataclass(frozen=True)
class CharacterClasses:
    """Four disjoint character sets used to segment a property stream.

    ``line_break`` doubles as the statement separator, so ``;`` ends an entry
    exactly like a newline does.
    """

    space: frozenset[str] = frozenset(" \t")
    line_break: frozenset[str] = frozenset("\r\n;")
    comment: frozenset[str] = frozenset("#")
    delimiter: frozenset[str] = frozenset("=:")

    DEFAULT: ClassVar["CharacterClasses"]

    def __post_init__(self) -> None:
        groups = {
            SPACE: _charset(SPACE, self.space),
            LINE_BREAK: _charset(LINE_BREAK, self.line_break),
            COMMENT: _charset(COMMENT, self.comment),
            DELIMITER: _charset(DELIMITER, self.delimiter),
        }
        for name, chars in groups.items():
            object.__setattr__(self, name, chars)
        seen: dict[str, str] = {}
        for name, chars in groups.items():
            for char in chars:
                if char in seen:
                    raise ValueError(f"{char!r} is both {seen[char]} and {name}")
                seen[char] = name

    @classmethod
    def from_strings(
        cls,
        space: str = " \t",
        line_break: str = "\r\n;",
        comment: str = "#",
        delimiter: str = "=:",
    ) -> "CharacterClasses":
        return cls(
            space=frozenset(space),
            line_break=frozenset(line_break),
            comment=frozenset(comment),
            delimiter=frozenset(delimiter),
        )

    def classify(self, char: str) -> str | None:
        """Return the class name of ``char`` or None for ordinary characters."""

        if char in self.space:
            return SPACE
        if char in self.line_break:
            return LINE_BREAK
        if char in self.comment:
            return COMMENT
        if char in self.delimiter:
            return DELIMITER
        return None


CharacterClasses.DEFAULT = CharacterClasses()


def classify(char: str) -> str | None:
    return CharacterClasses.DEFAULT.classify(char)
