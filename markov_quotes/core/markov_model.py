# markov_model.py
# fixed-order Markov chain stored in a hash table keyed by word contexts.

from __future__ import annotations
from typing import Iterator, List, Optional, Tuple
import logging
import random

from .context import DEFAULT_CONTEXT_SIZE, MarkovContext, Word
from .protocols import ModelStats, RandomSource
from .transitions import TransitionTable, add_transition

logger = logging.getLogger(__name__)

DEFAULT_BUCKET_COUNT = 420


class _Entry:
    """One bucket entry: a stored context and its transition counts."""

    __slots__ = ("context", "table")

    def __init__(self, context: MarkovContext, table: TransitionTable) -> None:
        self.context = context
        self.table = table


class MarkovModel:
    """
    Hash table from MarkovContext to TransitionTable.

    - bucket index = context.fingerprint() % bucket_count
    - collisions are resolved by scanning the bucket for an equal context
    - the bucket count never changes, so pick it generously
    - entries are created on first sight of a context and never removed

    predict_next() returns None for a context it has never seen; that is the
    normal way for generation to run out of material, not an error.
    """

    def __init__(
        self,
        bucket_count: int = DEFAULT_BUCKET_COUNT,
        context_size: int = DEFAULT_CONTEXT_SIZE,
        rng: Optional[RandomSource] = None,
    ) -> None:
        if bucket_count < 1:
            raise ValueError(f"bucket_count must be >= 1, got {bucket_count}")
        if context_size < 1:
            raise ValueError(f"context_size must be >= 1, got {context_size}")
        self.bucket_count = bucket_count
        self.context_size = context_size
        self.rng: RandomSource = rng or random.Random()
        self._buckets: List[List[_Entry]] = [[] for _ in range(bucket_count)]
        self._entries = 0

    # ------------------------------------------------------------------
    # Lookup helpers
    # ------------------------------------------------------------------
    def new_context(self) -> MarkovContext:
        """Fresh, unfilled context sized for this model."""
        return MarkovContext.empty(self.context_size)

    def _check(self, context: MarkovContext) -> None:
        if context.size != self.context_size:
            raise ValueError(
                f"context has {context.size} slots, model expects {self.context_size}"
            )

    def _bucket_for(self, context: MarkovContext) -> List[_Entry]:
        return self._buckets[context.fingerprint() % self.bucket_count]

    @staticmethod
    def _find(bucket: List[_Entry], context: MarkovContext) -> Optional[_Entry]:
        for entry in bucket:
            if entry.context.equals(context):
                return entry
        return None

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------
    def add(self, context: MarkovContext, word: Word) -> None:
        """Record that `word` followed `context`."""
        self._check(context)
        bucket = self._bucket_for(context)
        entry = self._find(bucket, context)
        if entry is not None:
            entry.table.add(word)
            return
        bucket.append(_Entry(context.copy(), add_transition(None, word)))
        self._entries += 1

    # ------------------------------------------------------------------
    # Prediction
    # ------------------------------------------------------------------
    def transitions_for(self, context: MarkovContext) -> Optional[TransitionTable]:
        self._check(context)
        entry = self._find(self._bucket_for(context), context)
        return entry.table if entry is not None else None

    def predict_next(
        self, context: MarkovContext, rng: Optional[RandomSource] = None
    ) -> Optional[Word]:
        """
        Sample a successor of `context` weighted by observed counts.
        Returns None if the context was never trained on.
        """
        table = self.transitions_for(context)
        if table is None:
            return None
        return table.sample_weighted(rng or self.rng)

    # ------------------------------------------------------------------
    # Introspection helpers
    # ------------------------------------------------------------------
    def entries(self) -> Iterator[Tuple[MarkovContext, TransitionTable]]:
        for bucket in self._buckets:
            for entry in bucket:
                yield entry.context, entry.table

    def bucket_loads(self) -> List[int]:
        return [len(b) for b in self._buckets]

    def stats(self) -> ModelStats:
        loads = self.bucket_loads()
        return {
            "entries": self._entries,
            "buckets": self.bucket_count,
            "used_buckets": sum(1 for n in loads if n),
            "longest_bucket": max(loads),
            "transitions": sum(t.total for _, t in self.entries()),
        }

    def dump(self) -> str:
        """
        Text listing of every non-empty bucket, one block per bucket:

            [
            Context: [a, b, c]
            Value: [ {d: 2}, {e: 1} ]
            ]
        """
        blocks = []
        for bucket in self._buckets:
            if not bucket:
                continue
            lines = ["["]
            for entry in bucket:
                lines.append(f"Context: {entry.context.describe()}")
                lines.append(f"Value: {entry.table.describe()}")
            lines.append("]")
            blocks.append("\n".join(lines))
        return "\n\n".join(blocks)

    def __len__(self) -> int:
        return self._entries

    def __contains__(self, context: object) -> bool:
        if not isinstance(context, MarkovContext) or context.size != self.context_size:
            return False
        return self._find(self._bucket_for(context), context) is not None

    def __repr__(self) -> str:
        return (
            f"MarkovModel(bucket_count={self.bucket_count}, "
            f"context_size={self.context_size}, entries={self._entries})"
        )
