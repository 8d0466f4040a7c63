from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# Seed used by the command line when a reproducible run is requested.
DEFAULT_SEED = 20


class LengthMode(Enum):
    """How `LanguageModel.generate` interprets its length argument."""

    TOTAL = "total"
    APPEND = "append"


@dataclass(frozen=True)
class ModelConfig:
    length_mode: LengthMode = LengthMode.TOTAL
    accumulate: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> ModelConfig:
        """Create a ModelConfig from a plain dictionary, ignoring unknown keys."""
        values = {k: v for k, v in config_dict.items() if k in cls.__annotations__}
        if "length_mode" in values:
            values["length_mode"] = LengthMode(values["length_mode"])
        return cls(**values)

    def to_dict(self) -> dict:
        return {
            "length_mode": self.length_mode.value,
            "accumulate": self.accumulate,
        }
