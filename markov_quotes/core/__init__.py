"""
markov_quotes.core

The Markov chain engine behind the quote generator.
Contains:
 - the sliding word window used as a lookup key (MarkovContext)
 - per-context next-word counts with weighted sampling (TransitionTable)
 - the context-keyed hash table (MarkovModel)
 - corpus training (Trainer) and quote generation (QuoteGenerator)
"""

from .context import MarkovContext
from .transitions import TransitionTable, add_transition
from .markov_model import MarkovModel
from .trainer import CorpusUnavailableError, Trainer, TrainingStats, train_from_file
from .generator import QuoteGenerator

__all__ = [
    "MarkovContext",
    "TransitionTable",
    "add_transition",
    "MarkovModel",
    "CorpusUnavailableError",
    "Trainer",
    "TrainingStats",
    "train_from_file",
    "QuoteGenerator",
]
