# markov_quotes/text/__init__.py
# corpus line handling and quote formatting

from .tokenizer import LineKind, classify_line, simple_tokenize, DEFAULT_SKIP_MARKER
from .formatting import contains_terminator, join_words, DEFAULT_TERMINATORS

__all__ = [
    "LineKind",
    "classify_line",
    "simple_tokenize",
    "contains_terminator",
    "join_words",
    "DEFAULT_SKIP_MARKER",
    "DEFAULT_TERMINATORS",
]
