# generator.py
# walks a trained MarkovModel to produce quotes.

from __future__ import annotations
from typing import List, Optional
import logging

from markov_quotes.text.formatting import DEFAULT_TERMINATORS, contains_terminator, join_words
from .markov_model import MarkovModel
from .protocols import RandomSource

logger = logging.getLogger(__name__)

DEFAULT_MAX_QUOTE_LENGTH = 50


class QuoteGenerator:
    """
    Produces word sequences from a model.

    Each quote starts from an unfilled context and ends when:
      - the model has nothing for the current context
      - a word containing a terminator (. ! ?) has been emitted
      - max_length words have been emitted
    """

    def __init__(
        self,
        model: MarkovModel,
        max_length: int = DEFAULT_MAX_QUOTE_LENGTH,
        rng: Optional[RandomSource] = None,
        terminators: str = DEFAULT_TERMINATORS,
    ) -> None:
        if max_length < 0:
            raise ValueError(f"max_length must be >= 0, got {max_length}")
        self.model = model
        self.max_length = max_length
        self.rng = rng
        self.terminators = terminators

    def generate_words(self) -> List[str]:
        ctx = self.model.new_context()
        words: List[str] = []
        for _ in range(self.max_length):
            word = self.model.predict_next(ctx, self.rng)
            if word is None:
                break
            words.append(word)
            ctx = ctx.push(word)
            if contains_terminator(word, self.terminators):
                break
        if not words:
            logger.debug("no prediction for the starting context, empty quote")
        return words

    def generate(self) -> str:
        return join_words(self.generate_words())

    def generate_many(self, count: int) -> List[str]:
        return [self.generate() for _ in range(count)]
