from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator


def read_characters(
    path: str | Path, encoding: str = "utf-8", chunk_size: int = 4096
) -> Iterator[str]:
    """Yield the characters of a text file one at a time.

    Newlines are passed through untranslated.
    """

    if chunk_size <= 0:
        raise ValueError("chunk_size must be >= 1")

    with open(path, "r", encoding=encoding, newline="") as f:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                break
            yield from chunk


class CharacterSource:
    """Sequential "has more / read next" view over a character iterable."""

    def __init__(self, chars: Iterable[str]) -> None:
        self._it = iter(chars)
        self._pending: list[str] = []

    @classmethod
    def from_file(cls, path: str | Path, encoding: str = "utf-8") -> CharacterSource:
        return cls(read_characters(path, encoding=encoding))

    def is_empty(self) -> bool:
        if self._pending:
            return False
        for c in self._it:
            self._pending.append(c)
            return False
        return True

    def read_char(self) -> str:
        if self.is_empty():
            raise EOFError("character source is exhausted")
        return self._pending.pop()

    def __iter__(self) -> Iterator[str]:
        while not self.is_empty():
            yield self.read_char()
