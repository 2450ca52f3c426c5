"""Tests for the JSON codec."""

from __future__ import annotations

import json
import math

import pytest

from datavalues import DecodeFailure, JsonCodec


def test_encode_keeps_field_order() -> None:
    codec = JsonCodec()
    assert json.loads(codec.encode(("number", 42, "not numeric"))) == ["number", 42, "not numeric"]


def test_decode_returns_tuple() -> None:
    codec = JsonCodec()
    assert codec.decode('[null, {"a": [1, 2]}, "oops"]') == (None, {"a": [1, 2]}, "oops")


def test_decode_accepts_bytes() -> None:
    codec = JsonCodec()
    assert codec.decode('["text", "ünïcode", "bad"]'.encode("utf-8")) == ("text", "ünïcode", "bad")


def test_non_ascii_is_written_verbatim() -> None:
    assert "ü" in JsonCodec().encode((None, "ü", ""))
    assert "ü" not in JsonCodec(ensure_ascii=True).encode((None, "ü", ""))


def test_sort_keys_option() -> None:
    encoded = JsonCodec(sort_keys=True).encode((None, {"b": 1, "a": 2}, ""))
    assert encoded.index('"a"') < encoded.index('"b"')


def test_non_finite_floats_survive() -> None:
    codec = JsonCodec()
    _, payload, _ = codec.decode(codec.encode((None, [math.inf, -math.inf, math.nan], "")))
    assert payload[0] == math.inf
    assert payload[1] == -math.inf
    assert math.isnan(payload[2])


@pytest.mark.parametrize(
    "data, message",
    [
        ("[1, 2", "Invalid JSON"),
        ("", "Invalid JSON"),
        ('{"type": null}', "Expected a JSON array"),
        ('"just a string"', "Expected a JSON array"),
        ("[null, 1]", "Expected 3 fields, got 2"),
        ('[null, 1, "a", "b"]', "Expected 3 fields, got 4"),
        (b"\xff\xfe", "Invalid UTF-8"),
    ],
)
def test_decode_rejects_malformed_input(data, message) -> None:
    with pytest.raises(DecodeFailure) as info:
        JsonCodec().decode(data)
    assert message in str(info.value)
    assert info.value.raw_value == data


def test_decode_failure_chains_cause() -> None:
    with pytest.raises(DecodeFailure) as info:
        JsonCodec().decode("not json")
    assert isinstance(info.value.__cause__, json.JSONDecodeError)


def test_decode_failure_reports_codec_and_position() -> None:
    with pytest.raises(DecodeFailure) as info:
        JsonCodec().decode('[null, 1, "a"')
    assert info.value.codec == "JsonCodec"
    assert info.value.position == 13
    assert str(info.value).startswith("JsonCodec: Invalid JSON")
    assert str(info.value).endswith("at position 13")


def test_decode_failure_without_position() -> None:
    with pytest.raises(DecodeFailure) as info:
        JsonCodec().decode("[null, 1]")
    assert info.value.position is None
    assert str(info.value) == "JsonCodec: Expected 3 fields, got 2"
    assert "codec='JsonCodec'" in repr(info.value)


def test_decode_rejects_other_types() -> None:
    with pytest.raises(DecodeFailure):
        JsonCodec().decode(42)  # type: ignore[arg-type]


def test_describe() -> None:
    assert JsonCodec().describe() == "JsonCodec(sort_keys=False, ensure_ascii=False)"
