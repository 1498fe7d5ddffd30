# trainer.py
# feeds corpus lines into a MarkovModel, one word transition at a time.

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional
import logging
import os

from markov_quotes.text.tokenizer import DEFAULT_SKIP_MARKER, LineKind, classify_line
from markov_quotes.utils.logger_utils import Log
from .context import DEFAULT_CONTEXT_SIZE, MarkovContext
from .markov_model import DEFAULT_BUCKET_COUNT, MarkovModel

logger = logging.getLogger(__name__)


class CorpusUnavailableError(OSError):
    """Raised when the training text cannot be opened or read."""


@dataclass
class TrainingStats:
    lines: int = 0
    blank_lines: int = 0
    skipped_lines: int = 0
    tokens: int = 0


class Trainer:
    """
    Walks a stream of lines and records every word against the words that
    preceded it.

    - a blank line resets the running context, so passages do not bleed
      into each other
    - a line whose first word starts with the skip marker ("-" by default)
      is ignored and leaves the running context untouched; a transition can
      therefore span a skipped line
    - the running context carries over between train_lines() calls until
      reset() is called
    """

    def __init__(self, model: MarkovModel, skip_marker: str = DEFAULT_SKIP_MARKER) -> None:
        self.model = model
        self.skip_marker = skip_marker
        self.context: MarkovContext = model.new_context()
        self.stats = TrainingStats()

    def reset(self) -> None:
        self.context = self.context.reset()

    def train_line(self, line: str) -> None:
        kind, tokens = classify_line(line, self.skip_marker)
        self.stats.lines += 1

        if kind is LineKind.BLANK:
            self.stats.blank_lines += 1
            logger.debug("blank line %d, resetting context", self.stats.lines)
            self.reset()
            return
        if kind is LineKind.SKIP:
            self.stats.skipped_lines += 1
            logger.debug("skipping line %d: %r", self.stats.lines, line.rstrip())
            return

        ctx = self.context
        for word in tokens:
            self.model.add(ctx, word)
            ctx = ctx.push(word)
        self.context = ctx
        self.stats.tokens += len(tokens)

    def train_lines(self, lines: Iterable[str]) -> TrainingStats:
        for line in lines:
            self.train_line(line)
        return self.stats

    def train_file(self, path: str, encoding: str = "utf-8") -> TrainingStats:
        """
        Train on every line of the file at `path`.
        Any failure to open or decode the file raises CorpusUnavailableError.
        """
        try:
            with Log.time_block("training"):
                with open(path, "r", encoding=encoding) as f:
                    self.train_lines(f)
        except (OSError, UnicodeDecodeError) as e:
            raise CorpusUnavailableError(f"unable to read corpus {path!r}: {e}") from e

        logger.info(
            "trained on %s: %d lines, %d tokens, %d contexts",
            os.path.basename(path),
            self.stats.lines,
            self.stats.tokens,
            len(self.model),
        )
        return self.stats


def train_from_file(
    path: str,
    context_size: int = DEFAULT_CONTEXT_SIZE,
    bucket_count: int = DEFAULT_BUCKET_COUNT,
    skip_marker: str = DEFAULT_SKIP_MARKER,
    model: Optional[MarkovModel] = None,
) -> MarkovModel:
    """Build (or extend) a model from a corpus file."""
    if model is None:
        model = MarkovModel(bucket_count=bucket_count, context_size=context_size)
    Trainer(model, skip_marker=skip_marker).train_file(path)
    return model
