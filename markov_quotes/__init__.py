"""
markov_quotes - trains a fixed-order Markov chain on a corpus of quotes and
generates new ones from it.
"""

from .core import (
    CorpusUnavailableError,
    MarkovContext,
    MarkovModel,
    QuoteGenerator,
    Trainer,
    TransitionTable,
    train_from_file,
)

__all__ = [
    "CorpusUnavailableError",
    "MarkovContext",
    "MarkovModel",
    "QuoteGenerator",
    "Trainer",
    "TransitionTable",
    "train_from_file",
]

__version__ = "0.1.0"
