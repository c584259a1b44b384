"""Splitting of strings at any of a set of delimiter characters."""

from __future__ import annotations

from collections.abc import Iterator


class Tokenizer:
    """Yields the parts of a string separated by any delimiter character."""

    def __init__(self, data: str, delimiter: str = " ") -> None:
        self._data = data
        self._delimiters = frozenset(delimiter)
        self._pos: int | None = 0

    def __bool__(self) -> bool:
        """True while tokens remain."""
        return self._pos is not None

    def __iter__(self) -> Iterator[str]:
        while self:
            yield self.next()

    def next(self) -> str:
        """Return the next token, or an empty string when none is left."""
        if self._pos is None:
            return ""
        start = self._pos
        end = next(
            (i for i, ch in enumerate(self._data[start:], start) if ch in self._delimiters),
            None,
        )
        if end is None:
            self._pos = None
            return self._data[start:]
        self._pos = end + 1
        return self._data[start:end]

    def explode(self) -> list[str]:
        """Return all remaining tokens."""
        return list(self)