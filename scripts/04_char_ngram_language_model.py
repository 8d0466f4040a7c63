from __future__ import annotations

from char_window_lm import LanguageModel


def main() -> None:
    text = (
        "natural language processing (nlp) is fun. "
        "start small, iterate, and learn by coding. "
    )

    lm = LanguageModel(4, seed=42)
    lm.train(text)
    print(lm.to_frame().head(10))
    print(lm.generate("nlp ", 120))


if __name__ == "__main__":
    main()
