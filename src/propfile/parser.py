"""Single-pass tokenizer for INI-like ``key = value`` property streams.

The tokenizer holds one pending character at a time, read with ``read(1)``
from a text stream. The empty string marks end-of-stream. Each entry is
processed as: skip comment lines, skip blank separators, read the name, skip
delimiters, read the value, commit the pair when both sides are non-empty.
"""

from __future__ import annotations

import io
from typing import Iterable, Iterator, MutableMapping, Protocol

from .syntax import CharacterClasses

EOF_MARK = ""


class CharReader(Protocol):
    """Anything that yields text one character at a time."""

    def read(self, size: int = -1) -> str:
        """Return up to ``size`` characters, or an empty string at EOF."""


def crop(buffer: Iterable[str], spaces: frozenset[str]) -> str:
    """Join ``buffer`` and drop every trailing space character."""

    chars = list(buffer)
    end = len(chars)
    while end > 0 and chars[end - 1] in spaces:
        end -= 1
    return "".join(chars[:end])


class PropertyTokenizer:
    """Segment a character stream into name/value pairs."""

    def __init__(self, reader: CharReader, classes: CharacterClasses | None = None) -> None:
        self._reader = reader
        self._classes = classes or CharacterClasses.DEFAULT
        self._current = EOF_MARK

    def _advance(self) -> str:
        self._current = self._reader.read(1)
        return self._current

    def _skip_while(self, chars: frozenset[str]) -> None:
        while self._current != EOF_MARK and self._current in chars:
            self._advance()

    def _skip_until(self, chars: frozenset[str]) -> None:
        while self._current != EOF_MARK and self._current not in chars:
            self._advance()

    def _skip_comments(self) -> None:
        while self._current in self._classes.comment:
            self._skip_until(self._classes.line_break)
            self._skip_while(self._classes.line_break)

    def _skip_ignorable(self) -> None:
        # A comment can follow a blank line or the second half of a CRLF pair.
        classes = self._classes
        while self._current in classes.comment or self._current in classes.line_break:
            self._skip_comments()
            self._skip_while(classes.line_break)

    def _read_name(self) -> str:
        classes = self._classes
        self._skip_while(classes.space)
        buffer: list[str] = []
        while (
            self._current != EOF_MARK
            and self._current not in classes.delimiter
            and self._current not in classes.line_break
        ):
            buffer.append(self._current)
            self._advance()
        return crop(buffer, classes.space)

    def _read_value(self) -> str:
        classes = self._classes
        self._skip_while(classes.space)
        buffer: list[str] = []
        while self._current != EOF_MARK and self._current not in classes.line_break:
            buffer.append(self._current)
            self._advance()
        return crop(buffer, classes.space)

    def pairs(self) -> Iterator[tuple[str, str]]:
        """Yield ``(name, value)`` pairs in file order; empty sides are skipped."""

        # The character left over from the previous entry is always a line
        # break or EOF, so reading past it here loses nothing.
        while self._advance() != EOF_MARK:
            self._skip_ignorable()
            name = self._read_name()
            self._skip_while(self._classes.delimiter)
            value = self._read_value()
            if name and value:
                yield name, value


def parse_stream(
    reader: CharReader,
    classes: CharacterClasses | None = None,
    table: MutableMapping[str, str] | None = None,
) -> MutableMapping[str, str]:
    """Tokenize ``reader`` into ``table`` (a new dict when omitted).

    Pairs are stored as they are read, so an exception raised by the reader
    leaves every entry parsed before it in ``table``. Later keys overwrite
    earlier ones.
    """

    if table is None:
        table = {}
    for name, value in PropertyTokenizer(reader, classes).pairs():
        table[name] = value
    return table


def parse_text(text: str, classes: CharacterClasses | None = None) -> dict[str, str]:
    return dict(parse_stream(io.StringIO(text), classes))
