import io

import pytest

from mr_keys.core import EncodingError, StreamError
from mr_keys.wire import encode_vlong, pack_string, read_string, write_string


def test_pack_string_layout() -> None:
    assert pack_string("cat") == b"\x03cat"
    assert pack_string("") == b"\x00"
    assert pack_string("é") == b"\x02\xc3\xa9"


def test_long_string_uses_multibyte_prefix() -> None:
    text = "x" * 200
    data = pack_string(text)
    assert data[:2] == b"\x8f\xc8"
    assert len(data) == 202


def test_string_stream_roundtrip() -> None:
    buf = io.BytesIO()
    written = write_string(buf, "héllo 😀")
    assert written == len(buf.getvalue())
    buf.seek(0)
    assert read_string(buf) == "héllo 😀"


def test_unencodable_text_rejected() -> None:
    with pytest.raises(EncodingError):
        pack_string("\ud800")


def test_invalid_utf8_rejected() -> None:
    with pytest.raises(EncodingError):
        read_string(io.BytesIO(b"\x02\xff\xfe"))


def test_negative_length_rejected() -> None:
    with pytest.raises(EncodingError):
        read_string(io.BytesIO(encode_vlong(-1)))


def test_truncated_payload() -> None:
    with pytest.raises(StreamError):
        read_string(io.BytesIO(b"\x05ab"))
