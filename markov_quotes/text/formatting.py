# markov_quotes/text/formatting.py
# helpers for turning generated words back into a quote

from typing import Iterable

DEFAULT_TERMINATORS = ".!?"


def contains_terminator(word: str, terminators: str = DEFAULT_TERMINATORS) -> bool:
    """True if any sentence-ending character appears anywhere in `word`."""
    return any(ch in word for ch in terminators)


def join_words(words: Iterable[str]) -> str:
    return " ".join(words)
