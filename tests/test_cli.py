"""
Tests for the command-line entry point.
"""

import io
import tempfile
import unittest
import sys
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from char_window_lm.cli import build_parser, main, make_model
from char_window_lm.config import DEFAULT_SEED, LengthMode, ModelConfig


class TestParser(unittest.TestCase):
    """Tests for argument parsing."""

    def test_positional_arguments(self):
        args = build_parser().parse_args(["2", "ab", "10", "fixed", "corpus.txt"])
        self.assertEqual(args.window_length, 2)
        self.assertEqual(args.initial_text, "ab")
        self.assertEqual(args.text_length, 10)
        self.assertEqual(args.mode, "fixed")
        self.assertEqual(args.corpus, "corpus.txt")

    def test_missing_arguments(self):
        with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit):
            build_parser().parse_args(["2", "ab"])


class TestMakeModel(unittest.TestCase):
    """Tests for seeding by mode."""

    def test_random_mode_is_unseeded(self):
        self.assertIsNone(make_model(3, "random").seed)

    def test_other_modes_use_fixed_seed(self):
        self.assertEqual(make_model(3, "fixed").seed, DEFAULT_SEED)
        self.assertEqual(make_model(3, "anything").seed, DEFAULT_SEED)


class TestMain(unittest.TestCase):
    """End-to-end runs of the entry point."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = Path(self.tmp.name) / "corpus.txt"

    def tearDown(self):
        self.tmp.cleanup()

    def run_main(self, argv):
        out = io.StringIO()
        with redirect_stdout(out):
            main(argv)
        return out.getvalue()

    def test_generates_from_corpus(self):
        self.path.write_text("abcabc", encoding="utf-8")
        self.assertEqual(self.run_main(["3", "abc", "4", "fixed", str(self.path)]), "abca\n")

    def test_fixed_mode_is_reproducible(self):
        self.path.write_text("the cat sat on the mat and the rat ate the hat. " * 5, encoding="utf-8")
        argv = ["2", "th", "80", "fixed", str(self.path)]
        self.assertEqual(self.run_main(argv), self.run_main(argv))

    def test_short_initial_text(self):
        self.path.write_text("abcabc", encoding="utf-8")
        self.assertEqual(self.run_main(["3", "ab", "10", "random", str(self.path)]), "ab\n")

    def test_missing_corpus(self):
        with self.assertRaises(FileNotFoundError):
            self.run_main(["3", "abc", "4", "fixed", str(Path(self.tmp.name) / "nope.txt")])


class TestModelConfig(unittest.TestCase):
    """Tests for configuration helpers."""

    def test_round_trip_dict(self):
        cfg = ModelConfig(length_mode=LengthMode.APPEND, accumulate=False)
        self.assertEqual(ModelConfig.from_dict(cfg.to_dict()), cfg)

    def test_from_dict_ignores_unknown_keys(self):
        cfg = ModelConfig.from_dict({"accumulate": False, "window": 4})
        self.assertFalse(cfg.accumulate)
        self.assertEqual(cfg.length_mode, LengthMode.TOTAL)


if __name__ == '__main__':
    unittest.main()
