# transitions.py
# next-word counts for a single context, with count-weighted sampling.

from __future__ import annotations
from collections import Counter
from typing import Iterator, List, Optional, Tuple

from .protocols import RandomSource

Word = str
Count = int


class TransitionTable:
    """
    word -> number of times it followed one particular context.

    Counts only ever grow. Iteration (and therefore sampling) follows the
    order in which words were first seen, which keeps draws reproducible
    for a seeded random source.
    """

    __slots__ = ("_counts", "_total")

    def __init__(self) -> None:
        self._counts: Counter = Counter()
        self._total: int = 0

    def add(self, word: Word) -> "TransitionTable":
        self._counts[word] += 1
        self._total += 1
        return self

    def count(self, word: Word) -> Count:
        return self._counts.get(word, 0)

    @property
    def total(self) -> int:
        return self._total

    def sample_weighted(self, rng: RandomSource) -> Word:
        """
        Draw r in [0, total) and walk the entries, subtracting each count
        until r falls inside one of them.
        """
        if self._total == 0:
            raise ValueError("cannot sample from an empty transition table")
        r = rng.randrange(self._total)
        for word, count in self._counts.items():
            if r < count:
                return word
            r -= count
        # unreachable while _total matches the counts
        raise RuntimeError("transition counts out of sync with total")

    def items(self) -> List[Tuple[Word, Count]]:
        return list(self._counts.items())

    def as_dict(self) -> dict:
        return dict(self._counts)

    def describe(self) -> str:
        """Format: [ {word: count}, {word: count} ]"""
        body = ", ".join(f"{{{w}: {c}}}" for w, c in self._counts.items())
        return f"[ {body} ]"

    def __len__(self) -> int:
        return len(self._counts)

    def __iter__(self) -> Iterator[Word]:
        return iter(self._counts)

    def __contains__(self, word: object) -> bool:
        return word in self._counts

    def __repr__(self) -> str:
        return f"TransitionTable({dict(self._counts)!r})"


def add_transition(table: Optional[TransitionTable], word: Word) -> TransitionTable:
    """Add `word` to `table`, creating the table on first use."""
    if table is None:
        table = TransitionTable()
    return table.add(word)
