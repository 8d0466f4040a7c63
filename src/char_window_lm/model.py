"""
Character-level sliding-window language model.

The model maps every window of `window_length` characters seen in a
training text to the statistics of the character that followed it, and
generates text by repeatedly sampling from those statistics.

Usage:
    lm = LanguageModel(3, seed=20)
    lm.train(read_characters("corpus.txt"))
    print(lm.generate("The", 200))
"""

from __future__ import annotations

import logging
from itertools import islice
from typing import Iterable

import numpy as np
import pandas as pd

from .config import LengthMode, ModelConfig
from .statistics import WindowStatistics

logger = logging.getLogger(__name__)


class LanguageModel:
    """
    Window -> WindowStatistics mapping with its own random generator.

    Attributes:
        window_length: Number of characters used as context
        config: Generation and re-training behaviour
    """

    def __init__(
        self,
        window_length: int,
        seed: int | None = None,
        *,
        config: ModelConfig | None = None,
    ) -> None:
        """
        Initialize an untrained model.

        Args:
            window_length: Context length, must be >= 1
            seed: Fixed seed for reproducible generation; None draws
                the generator state from OS entropy
            config: Optional ModelConfig, defaults to ModelConfig()
        """
        if window_length <= 0:
            raise ValueError("window_length must be >= 1")

        self.window_length = window_length
        self.seed = seed
        self.config = config or ModelConfig()
        self._rng = np.random.default_rng(seed)
        self._windows: dict[str, WindowStatistics] = {}

    def __len__(self) -> int:
        return len(self._windows)

    def __contains__(self, window: object) -> bool:
        return window in self._windows

    @property
    def windows(self) -> list[str]:
        return list(self._windows)

    def statistics_for(self, window: str) -> WindowStatistics | None:
        return self._windows.get(window)

    def train(self, source: Iterable[str], *, reset: bool | None = None) -> None:
        """
        Build window statistics from a stream of characters.

        The source is consumed once. A source no longer than the window
        length records nothing. Statistics accumulate across calls unless
        `reset` (or `config.accumulate=False`) asks for a fresh mapping.

        Args:
            source: Iterable of single characters (a str works)
            reset: Clear existing statistics first; None defers to config
        """
        if reset is None:
            reset = not self.config.accumulate
        if reset:
            self._windows.clear()

        chars = iter(source)
        window = "".join(islice(chars, self.window_length))
        consumed = len(window)

        for c in chars:
            consumed += 1
            stats = self._windows.get(window)
            if stats is None:
                stats = WindowStatistics()
                self._windows[window] = stats
            stats.record_occurrence(c)
            window = window[1:] + c

        if consumed <= self.window_length:
            logger.debug(
                f"Corpus of {consumed} characters is too short for window length {self.window_length}"
            )

        for stats in self._windows.values():
            stats.finalize_probabilities()

        logger.info(f"Trained on {consumed} characters, {len(self._windows)} windows in model")

    def sample_next_character(self, stats: WindowStatistics, r: float | None = None) -> str:
        """
        Pick a character by cumulative-distribution sampling.

        Args:
            stats: Finalized statistics of the active window
            r: Value in [0, 1) to use instead of drawing from the generator

        Returns:
            The first character whose cumulative probability exceeds r,
            or the last character if none does
        """
        if r is None:
            r = float(self._rng.random())
        return stats.select(r)

    def _target_length(self, initial_text: str, text_length: int) -> int:
        if self.config.length_mode is LengthMode.APPEND:
            return len(initial_text) + text_length
        return text_length

    def generate(self, initial_text: str, text_length: int) -> str:
        """
        Generate text continuing `initial_text`.

        With the default LengthMode.TOTAL, `text_length` is the length of
        the whole returned string; LengthMode.APPEND treats it as the number
        of characters to add. Generation stops early when the active window
        was never seen in training.

        Args:
            initial_text: Seed text; returned unchanged if shorter than
                the window length
            text_length: Length target, see above

        Returns:
            The generated text, starting with `initial_text`
        """
        if len(initial_text) < self.window_length:
            return initial_text

        target = self._target_length(initial_text, text_length)
        generated = list(initial_text)
        window = initial_text[-self.window_length :]

        while len(generated) < target:
            stats = self._windows.get(window)
            if stats is None:
                logger.debug(f"No continuation learned for window {window!r}, stopping")
                break
            generated.append(self.sample_next_character(stats))
            window = "".join(generated[-self.window_length :])

        return "".join(generated)

    def to_frame(self) -> pd.DataFrame:
        """One row per (window, character) observation, in model order."""
        rows = [
            (window, obs.char, obs.count, obs.p, obs.cp)
            for window, stats in self._windows.items()
            for obs in stats
        ]
        return pd.DataFrame(rows, columns=["window", "char", "count", "p", "cp"])

    def __str__(self) -> str:
        return "".join(f"{window} : {stats}\n" for window, stats in self._windows.items())
