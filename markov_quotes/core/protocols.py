# markov_quotes/core/protocols.py
"""
Small structural interfaces shared by the core components.

The model and generator only need `randrange` from a random source, so
tests can pass a seeded `random.Random` or a scripted stub.
"""

from __future__ import annotations

from typing import Protocol
from typing_extensions import TypedDict


class RandomSource(Protocol):
    """Anything with random.Random's randrange(stop) signature."""

    def randrange(self, stop: int) -> int:
        ...


# Typed structures ------------------------------------------------------------

class ModelStats(TypedDict):
    """Shape returned by MarkovModel.stats()."""
    entries: int
    buckets: int
    used_buckets: int
    longest_bucket: int
    transitions: int
