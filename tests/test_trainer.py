# tests/test_trainer.py
import logging

import pytest

from markov_quotes.core.context import MarkovContext
from markov_quotes.core.generator import QuoteGenerator
from markov_quotes.core.markov_model import MarkovModel
from markov_quotes.core.trainer import CorpusUnavailableError, Trainer, train_from_file


def make_trainer(rng, context_size=2):
    return Trainer(MarkovModel(bucket_count=420, context_size=context_size, rng=rng))


def test_two_line_corpus(rng):
    tr = make_trainer(rng)
    tr.train_lines(["a b c.", "a b d."])
    table = tr.model.transitions_for(MarkovContext.of(["a", "b"]))
    assert table.as_dict() == {"c.": 1, "d.": 1}
    # the running context carries across the line break
    assert tr.model.predict_next(MarkovContext.of(["b", "c."])) == "a"


def test_two_line_corpus_predictions_split_evenly(rng):
    tr = make_trainer(rng)
    tr.train_lines(["a b c.", "a b d."])
    ctx = MarkovContext.of(["a", "b"])
    n = 4000
    cs = sum(1 for _ in range(n) if tr.model.predict_next(ctx) == "c.")
    assert 0.45 < cs / n < 0.55


def test_blank_line_resets_context(rng):
    tr = make_trainer(rng)
    tr.train_lines(["a b", "", "c d"])
    start = tr.model.transitions_for(MarkovContext.empty(2))
    assert start.as_dict() == {"a": 1, "c": 1}
    assert MarkovContext.of(["a", "b"]) not in tr.model
    assert tr.stats.blank_lines == 1


def test_whitespace_only_line_counts_as_blank(rng):
    tr = make_trainer(rng)
    tr.train_lines(["a b", " \t \r\n", "c"])
    assert tr.model.transitions_for(MarkovContext.empty(2)).as_dict() == {"a": 1, "c": 1}


def test_skip_line_ignored_without_reset(rng):
    tr = make_trainer(rng)
    tr.train_lines(["a b", "- Some Author", "c"])
    # context [a, b] leaks across the skipped line
    assert tr.model.predict_next(MarkovContext.of(["a", "b"])) == "c"
    for ctx, table in tr.model.entries():
        assert "Author" not in ctx.slots
        assert "Author" not in table
    assert tr.stats.skipped_lines == 1
    assert tr.stats.tokens == 3


def test_skip_marker_only_checked_on_first_token(rng):
    tr = make_trainer(rng)
    tr.train_lines(["-dash first", "x - y"])
    assert tr.stats.skipped_lines == 1
    assert tr.model.transitions_for(MarkovContext.of(["x", "-"])).as_dict() == {"y": 1}


def test_custom_skip_marker(rng):
    tr = Trainer(MarkovModel(context_size=1, rng=rng), skip_marker="#")
    tr.train_lines(["# comment", "- kept"])
    assert tr.model.transitions_for(MarkovContext.empty(1)).as_dict() == {"-": 1}


def test_context_persists_between_calls_until_reset(rng):
    tr = make_trainer(rng)
    tr.train_lines(["a b"])
    tr.train_lines(["c"])
    assert tr.model.predict_next(MarkovContext.of(["a", "b"])) == "c"
    tr.reset()
    tr.train_lines(["z"])
    assert tr.model.transitions_for(MarkovContext.empty(2)).as_dict() == {"a": 1, "z": 1}


def test_train_file(write_corpus, rng):
    path = write_corpus("one two three.\n- someone\n\nfour five\n")
    tr = make_trainer(rng)
    stats = tr.train_file(path)
    assert stats.lines == 4
    assert stats.blank_lines == 1
    assert stats.skipped_lines == 1
    assert stats.tokens == 5
    assert tr.model.transitions_for(MarkovContext.empty(2)).as_dict() == {"one": 1, "four": 1}


def test_missing_corpus_raises(tmp_path, rng):
    tr = make_trainer(rng)
    with pytest.raises(CorpusUnavailableError) as exc:
        tr.train_file(str(tmp_path / "nope.txt"))
    assert isinstance(exc.value, OSError)
    assert isinstance(exc.value.__cause__, FileNotFoundError)


def test_directory_as_corpus_raises(tmp_path, rng):
    with pytest.raises(CorpusUnavailableError):
        make_trainer(rng).train_file(str(tmp_path))


def test_undecodable_corpus_raises(tmp_path, rng):
    path = tmp_path / "bad.txt"
    path.write_bytes(b"caf\xe9 \xff\xfe\n")
    with pytest.raises(CorpusUnavailableError):
        make_trainer(rng).train_file(str(path))


def test_empty_corpus_gives_empty_model_and_quote(write_corpus, rng):
    path = write_corpus("\n\n- just metadata\n")
    model = train_from_file(path, context_size=3)
    assert len(model) == 0
    assert QuoteGenerator(model, rng=rng).generate() == ""


def test_train_from_file_extends_given_model(write_corpus, rng):
    model = MarkovModel(context_size=1, rng=rng)
    assert train_from_file(write_corpus("a b"), model=model) is model
    assert train_from_file(write_corpus("a c", name="more.txt"), model=model) is model
    assert model.transitions_for(MarkovContext.of(["a"])).as_dict() == {"b": 1, "c": 1}


def test_blank_and_skipped_lines_logged(rng, caplog, restore_logger):
    caplog.set_level(logging.DEBUG, logger="markov_quotes.core.trainer")
    make_trainer(rng).train_lines(["a b", "", "- author"])
    messages = [r.getMessage() for r in caplog.records]
    assert any("resetting context" in m for m in messages)
    assert any("skipping line 3" in m for m in messages)
