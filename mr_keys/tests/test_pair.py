import copy
import io
import math

import pytest

from mr_keys.core import EncodingError, PreconditionError, StreamError, to_float32
from mr_keys.keys import FloatStringPair


def test_encode_example_layout() -> None:
    pair = FloatStringPair(3.5, "cat")
    data = pair.to_bytes()
    assert data == bytes([0x40, 0x60, 0x00, 0x00, 0x03]) + b"cat"
    assert pair.encoded_size() == 8
    assert FloatStringPair.from_bytes(data) == pair


def test_stream_roundtrip() -> None:
    pairs = [
        FloatStringPair(3.5, "cat"),
        FloatStringPair(-0.25, ""),
        FloatStringPair(1e-30, "ünïcödé 😀"),
        FloatStringPair(math.inf, "z" * 300),
    ]
    buf = io.BytesIO()
    sizes = [pair.write(buf) for pair in pairs]
    assert sum(sizes) == len(buf.getvalue())
    buf.seek(0)
    out = [FloatStringPair.read(buf) for _ in pairs]
    assert out == pairs
    assert [p.right for p in out] == [p.right for p in pairs]


def test_left_is_rounded_to_float32() -> None:
    pair = FloatStringPair(0.1, "x")
    assert pair.left == to_float32(0.1)
    assert pair.left != 0.1
    assert FloatStringPair.from_bytes(pair.to_bytes()) == pair
    assert FloatStringPair(1e39, "big").left == math.inf
    assert FloatStringPair(-1e39, "big").left == -math.inf


def test_accessors_and_aliases() -> None:
    pair = FloatStringPair(2.0, "two")
    assert pair.get_left() == pair.left == pair.key == 2.0
    assert pair.get_right() == pair.right == pair.value == "two"


def test_set_replaces_both_fields() -> None:
    pair = FloatStringPair(1.0, "a")
    assert pair.set(2.0, "b") is pair
    assert (pair.left, pair.right) == (2.0, "b")
    with pytest.raises(TypeError):
        pair.set(3.0, 3)  # type: ignore[arg-type]
    assert (pair.left, pair.right) == (2.0, "b")


def test_replace_returns_new_pair() -> None:
    pair = FloatStringPair(1.0, "a")
    other = pair.replace(right="b")
    assert other == FloatStringPair(1.0, "b")
    assert pair == FloatStringPair(1.0, "a")
    assert pair.replace(left=5.0).left == 5.0


def test_constructor_requires_both_or_neither() -> None:
    with pytest.raises(TypeError):
        FloatStringPair(1.0)  # type: ignore[call-arg]


def test_unset_pair_guards_reads() -> None:
    pair = FloatStringPair()
    assert not pair.is_set
    with pytest.raises(PreconditionError):
        _ = pair.left
    with pytest.raises(PreconditionError):
        _ = pair.right
    with pytest.raises(PreconditionError):
        pair.to_bytes()
    with pytest.raises(PreconditionError):
        pair.write(io.BytesIO())
    with pytest.raises(PreconditionError):
        _ = pair < FloatStringPair(1.0, "a")
    assert isinstance(hash(pair), int)
    assert pair == FloatStringPair()
    assert repr(pair) == "FloatStringPair()"


def test_read_fields_populates_unset_pair() -> None:
    pair = FloatStringPair()
    pair.read_fields(io.BytesIO(FloatStringPair(7.0, "seven").to_bytes()))
    assert pair.is_set
    assert pair == FloatStringPair(7.0, "seven")


def test_truncated_decode_leaves_pair_unchanged() -> None:
    data = FloatStringPair(9.0, "nine").to_bytes()
    pair = FloatStringPair(1.0, "one")
    for cut in range(len(data)):
        with pytest.raises(StreamError):
            pair.read_fields(io.BytesIO(data[:cut]))
        assert pair == FloatStringPair(1.0, "one")


def test_malformed_payload_leaves_pair_unchanged() -> None:
    pair = FloatStringPair(1.0, "one")
    with pytest.raises(EncodingError):
        pair.read_fields(io.BytesIO(b"\x40\x60\x00\x00\x02\xff\xfe"))
    assert pair == FloatStringPair(1.0, "one")


def test_from_bytes_rejects_trailing_data() -> None:
    data = FloatStringPair(3.5, "cat").to_bytes()
    with pytest.raises(EncodingError):
        FloatStringPair.from_bytes(data + b"\x00")


def test_equality_uses_plain_float_semantics() -> None:
    assert FloatStringPair(0.0, "a") == FloatStringPair(-0.0, "a")
    nan_pair = FloatStringPair(math.nan, "a")
    assert nan_pair != nan_pair
    assert FloatStringPair(1.0, "a") != FloatStringPair(1.0, "b")
    assert FloatStringPair(1.0, "a") != FloatStringPair(2.0, "a")
    assert FloatStringPair(1.0, "a") != (1.0, "a")


def test_equal_pairs_hash_equally() -> None:
    a = FloatStringPair(3.5, "cat")
    b = FloatStringPair.from_bytes(a.to_bytes())
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b, a.copy()}) == 1


def test_stable_hash_values() -> None:
    assert FloatStringPair(3.5, "cat").stable_hash() == 3 + 98262
    assert FloatStringPair(-2.7, "").stable_hash() == -2
    assert FloatStringPair(math.nan, "").stable_hash() == 0
    assert FloatStringPair(1e20, "").stable_hash() == 2**31 - 1
    assert FloatStringPair(0.0, "😀").stable_hash() == 1772899


def test_display_string() -> None:
    assert str(FloatStringPair(3.5, "cat")) == "(3.5, cat)"
    assert str(FloatStringPair(0.1, "x y")) == "(0.1, x y)"
    assert str(FloatStringPair(-1.0, "")) == "(-1.0, )"
    assert str(FloatStringPair(math.inf, "i")) == "(inf, i)"
    assert repr(FloatStringPair(3.5, "cat")) == "FloatStringPair(left=3.5, right='cat')"


def test_copy_is_independent() -> None:
    pair = FloatStringPair(1.0, "a")
    for clone in (pair.copy(), copy.copy(pair), copy.deepcopy(pair)):
        assert clone == pair
        assert clone is not pair
        clone.set(2.0, "b")
        assert pair == FloatStringPair(1.0, "a")
