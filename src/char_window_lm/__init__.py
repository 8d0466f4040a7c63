"""Character-level sliding-window language model.

Train a `LanguageModel` on a character stream, then sample text from it.
"""

from .config import DEFAULT_SEED, LengthMode, ModelConfig
from .corpus import CharacterSource, read_characters
from .model import LanguageModel
from .statistics import Observation, WindowStatistics

__all__ = [
    "DEFAULT_SEED",
    "CharacterSource",
    "LanguageModel",
    "LengthMode",
    "ModelConfig",
    "Observation",
    "WindowStatistics",
    "read_characters",
]
