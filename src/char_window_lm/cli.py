"""
Command-line entry point.

Usage:
    char-window-lm 3 "The " 200 fixed corpus.txt    # reproducible run
    char-window-lm 3 "The " 200 random corpus.txt   # entropy-seeded run
"""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from .config import DEFAULT_SEED
from .corpus import read_characters
from .model import LanguageModel

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="char-window-lm",
        description="Train a character window language model on a corpus and generate text.",
    )
    parser.add_argument("window_length", type=int, help="Number of context characters")
    parser.add_argument("initial_text", help="Text to start generating from")
    parser.add_argument("text_length", type=int, help="Total length of the generated text")
    parser.add_argument(
        "mode", help='"random" for an entropy-seeded run, anything else for a fixed seed'
    )
    parser.add_argument("corpus", help="Path to the training text file")
    return parser


def make_model(window_length: int, mode: str) -> LanguageModel:
    if mode == "random":
        return LanguageModel(window_length)
    return LanguageModel(window_length, seed=DEFAULT_SEED)


def main(argv: Sequence[str] | None = None) -> None:
    logging.basicConfig(
        level=logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    args = build_parser().parse_args(argv)

    lm = make_model(args.window_length, args.mode)
    logger.info(f"Training on {args.corpus} with window length {args.window_length}")
    lm.train(read_characters(args.corpus))
    print(lm.generate(args.initial_text, args.text_length))


if __name__ == "__main__":
    main()
