# tests/test_context.py
import pytest

from markov_quotes.core.context import MarkovContext


def test_empty_context_has_unfilled_slots():
    ctx = MarkovContext.empty(3)
    assert ctx.slots == (None, None, None)
    assert ctx.size == 3
    assert ctx.is_empty()


def test_empty_rejects_zero_size():
    with pytest.raises(ValueError):
        MarkovContext.empty(0)


def test_push_fills_from_the_right():
    ctx = MarkovContext.empty(3).push("a")
    assert ctx.slots == (None, None, "a")
    ctx = ctx.push("b")
    assert ctx.slots == (None, "a", "b")


def test_push_n_words_matches_direct_construction():
    ctx = MarkovContext.empty(3)
    for w in ("w1", "w2", "w3"):
        ctx = ctx.push(w)
    assert ctx.equals(MarkovContext.of(["w1", "w2", "w3"]))


def test_push_on_full_context_drops_oldest():
    ctx = MarkovContext.of(["a", "b", "c"]).push("d")
    assert ctx.slots == ("b", "c", "d")


def test_push_leaves_original_untouched():
    ctx = MarkovContext.of(["a", "b"])
    ctx.push("c")
    assert ctx.slots == ("a", "b")


def test_reset_clears_all_slots():
    ctx = MarkovContext.of(["a", "b", "c"]).reset()
    assert ctx == MarkovContext.empty(3)


def test_unfilled_slot_only_equals_unfilled():
    a = MarkovContext.of([None, "x", "y"])
    b = MarkovContext.of(["x", "x", "y"])
    c = MarkovContext.of([None, "x", "y"])
    assert not a.equals(b)
    assert not b.equals(a)
    assert a.equals(c)


def test_equality_is_reflexive_symmetric_transitive():
    a = MarkovContext.of(["p", None, "q"])
    b = MarkovContext.of(["p", None, "q"])
    c = a.copy()
    assert a.equals(a)
    assert a.equals(b) and b.equals(a)
    assert b.equals(c) and a.equals(c)


def test_equal_contexts_share_fingerprint():
    a = MarkovContext.empty(3).push("to").push("be")
    b = MarkovContext.of([None, "to", "be"])
    assert a.fingerprint() == b.fingerprint()


def test_fingerprint_is_order_sensitive():
    assert MarkovContext.of(["a", "b", "c"]).fingerprint() != MarkovContext.of(["c", "b", "a"]).fingerprint()


def test_fingerprint_follows_djb2():
    # 5381 * 33 for the unfilled slot, then * 33 + ord("a")
    assert MarkovContext.empty(1).fingerprint() == 5381 * 33
    assert MarkovContext.of(["a"]).fingerprint() == 5381 * 33 + 97


def test_fingerprint_tells_unfilled_from_empty_word():
    assert MarkovContext.of([None]).fingerprint() != MarkovContext.of([""]).fingerprint()


def test_fingerprint_stays_in_64_bits():
    ctx = MarkovContext.of(["x" * 500, "y" * 500])
    assert 0 <= ctx.fingerprint() < 2 ** 64


def test_copy_is_equal_but_distinct():
    ctx = MarkovContext.of(["a", None, "b"])
    dup = ctx.copy()
    assert dup.equals(ctx)
    assert dup is not ctx


def test_describe_matches_debug_format():
    assert MarkovContext.of([None, "a", "b"]).describe() == "[None, a, b]"


def test_list_slots_are_stored_as_tuple():
    ctx = MarkovContext(["a", "b"])
    assert ctx.slots == ("a", "b")
    assert ctx.push("c").slots == ("b", "c")
    assert hash(ctx) == hash(MarkovContext(("a", "b")))
