# context.py
# fixed-size sliding window of the most recent words, used as a model key.

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

Word = str
Slot = Optional[Word]  # None marks an unfilled slot

DEFAULT_CONTEXT_SIZE = 3

_DJB2_SEED = 5381
_HASH_MASK = (1 << 64) - 1  # keep the djb2 value in 64 bits


@dataclass(frozen=True)
class MarkovContext:
    """
    Ordered window of the last N words, oldest first.

    Contexts are immutable values: push() and reset() hand back a new
    context, so an instance stored by the model can never be changed by
    whoever is scanning text.
    """

    slots: Tuple[Slot, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "slots", tuple(self.slots))
        if not self.slots:
            raise ValueError("context needs at least one slot")

    # construction ---------------------------------------------------------
    @classmethod
    def empty(cls, size: int = DEFAULT_CONTEXT_SIZE) -> "MarkovContext":
        """Context with every slot unfilled."""
        if size < 1:
            raise ValueError(f"context size must be >= 1, got {size}")
        return cls((None,) * size)

    @classmethod
    def of(cls, words: Iterable[Slot]) -> "MarkovContext":
        return cls(tuple(words))

    @property
    def size(self) -> int:
        return len(self.slots)

    # updates --------------------------------------------------------------
    def push(self, word: Word) -> "MarkovContext":
        """Drop the oldest slot, shift the rest left and put `word` last."""
        return MarkovContext(self.slots[1:] + (word,))

    def reset(self) -> "MarkovContext":
        return MarkovContext.empty(self.size)

    def copy(self) -> "MarkovContext":
        return MarkovContext(tuple(self.slots))

    # comparison -----------------------------------------------------------
    def equals(self, other: "MarkovContext") -> bool:
        # tuple equality already treats None as equal only to None
        return self.slots == other.slots

    def fingerprint(self) -> int:
        """
        djb2 over the slots in order: each byte of a filled slot is folded in
        with hash*33 + byte, an unfilled slot only contributes hash*33.
        """
        h = _DJB2_SEED
        for word in self.slots:
            if word is None:
                h = (h * 33) & _HASH_MASK
                continue
            for byte in word.encode("utf-8"):
                h = (h * 33 + byte) & _HASH_MASK
        return h

    def is_empty(self) -> bool:
        return all(w is None for w in self.slots)

    # debugging ------------------------------------------------------------
    def describe(self) -> str:
        """Format: [word1, word2, word3] with unfilled slots as None."""
        return "[" + ", ".join("None" if w is None else w for w in self.slots) + "]"

    def __str__(self) -> str:
        return self.describe()
