from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass
class Observation:
    char: str
    count: int = 1
    p: float = 0.0
    cp: float = 0.0

    def __str__(self) -> str:
        return f"({self.char} {self.count} {self.p} {self.cp})"


class WindowStatistics:
    """Ordered character -> Observation collection for a single window.

    New characters are inserted at the front, so iteration (and therefore
    sampling) visits the most recently introduced character first.
    """

    def __init__(self) -> None:
        self._observations: list[Observation] = []

    @property
    def size(self) -> int:
        return len(self._observations)

    def __len__(self) -> int:
        return len(self._observations)

    def __iter__(self) -> Iterator[Observation]:
        return iter(self._observations)

    def __contains__(self, ch: object) -> bool:
        return self.index_of(ch) != -1  # type: ignore[arg-type]

    @property
    def total_count(self) -> int:
        return sum(obs.count for obs in self._observations)

    def first(self) -> Observation | None:
        return self._observations[0] if self._observations else None

    def add_first(self, ch: str) -> Observation:
        obs = Observation(ch)
        self._observations.insert(0, obs)
        return obs

    def index_of(self, ch: str) -> int:
        for i, obs in enumerate(self._observations):
            if obs.char == ch:
                return i
        return -1

    def record_occurrence(self, ch: str) -> None:
        """Increment the count for `ch`, inserting it at the front if unseen."""

        idx = self.index_of(ch)
        if idx == -1:
            self.add_first(ch)
        else:
            self._observations[idx].count += 1

    def get(self, index: int) -> Observation:
        if index < 0 or index >= len(self._observations):
            raise IndexError(f"Index: {index}, Size: {len(self._observations)}")
        return self._observations[index]

    def iter_from(self, index: int) -> Iterator[Observation]:
        # index == size is allowed and yields nothing
        if index < 0 or index > len(self._observations):
            raise IndexError(f"Index: {index}, Size: {len(self._observations)}")
        return iter(self._observations[index:])

    def remove(self, ch: str) -> bool:
        idx = self.index_of(ch)
        if idx == -1:
            return False
        del self._observations[idx]
        return True

    def finalize_probabilities(self) -> None:
        """Set `p` and `cp` for every Observation from the current counts.

        `cp` is the running count divided by the total, in stored order, so
        the last entry is exactly 1.0.
        """

        total = self.total_count
        if total == 0:
            return

        running = 0
        for obs in self._observations:
            running += obs.count
            obs.p = obs.count / total
            obs.cp = running / total

    def select(self, r: float) -> str:
        """Return the first character whose `cp` exceeds `r`.

        Falls back to the last character when no `cp` is greater than `r`.
        """

        if not self._observations:
            raise ValueError("cannot select from empty window statistics")
        for obs in self._observations:
            if obs.cp > r:
                return obs.char
        return self._observations[-1].char

    def __str__(self) -> str:
        if not self._observations:
            return "()"
        return "(" + " ".join(str(obs) for obs in self._observations) + ")"

    def __repr__(self) -> str:
        return f"WindowStatistics({self})"
