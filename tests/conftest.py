# tests/conftest.py
# shared fixtures: seeded randomness and throwaway corpus files

import logging
import random

import pytest


class ScriptedRandom:
    """randrange() stand-in that replays fixed draws."""

    def __init__(self, draws):
        self.draws = list(draws)
        self.calls = []

    def randrange(self, stop):
        self.calls.append(stop)
        return self.draws.pop(0)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def write_corpus(tmp_path):
    def _write(text, name="corpus.txt"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def restore_logger():
    """Undo configure_logging() so later tests see default logging."""
    from markov_quotes.utils.logger_utils import PACKAGE_LOGGER

    yield
    pkg = logging.getLogger(PACKAGE_LOGGER)
    for h in list(pkg.handlers):
        pkg.removeHandler(h)
        h.close()
    pkg.propagate = True
    pkg.setLevel(logging.NOTSET)
