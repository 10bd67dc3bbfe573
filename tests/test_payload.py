"""
Tests for the round payload codec and share links.
"""

import base64
import hashlib
import json
import zlib
import pytest

from impostor_words.core import (
    RoundPayload, MalformedPayloadError, encode, decode, build_share_url, extract_payload,
)
from impostor_words.core.payload import MAX_DECOMPRESSED_BYTES
from impostor_words.core.roles import MAX_PARAM_INT


def _fp(label: str) -> str:
    return hashlib.sha256(label.encode("utf-8")).hexdigest()


def _pack(text: str) -> str:
    """Compress and encode arbitrary text the way the codec does."""
    return base64.urlsafe_b64encode(zlib.compress(text.encode("utf-8"))).decode("ascii").rstrip("=")


def _raw(data) -> str:
    """Encode an arbitrary record the way the codec does."""
    text = json.dumps(data, separators=(",", ":"))
    return base64.urlsafe_b64encode(zlib.compress(text.encode("utf-8"))).decode("ascii").rstrip("=")


def test_round_trip(payload, encoded_payload):
    assert decode(encoded_payload) == payload


def test_round_trip_handles_unicode_seed_and_empty_roster():
    payload = RoundPayload(
        seed="sala-ñandú 🎲", round_number=12, impostor_count=3, word_refresh=4, pair_index=2,
        fingerprints=(), impostor_fingerprints=(), roster_size=0,
    )
    assert decode(encode(payload)) == payload


def test_round_trip_hand_built_payload():
    fps = tuple(sorted(_fp(str(i)) for i in range(5)))
    payload = RoundPayload(
        seed="s", round_number=1, impostor_count=1, word_refresh=0, pair_index=0,
        fingerprints=fps, impostor_fingerprints=fps[:1], roster_size=5,
    )
    assert decode(encode(payload)) == payload


def test_encoded_payload_is_url_safe(encoded_payload):
    assert all(c.isalnum() or c in "-_" for c in encoded_payload)


def test_wire_field_names(payload):
    wire = payload.to_wire()
    assert set(wire) == {"s", "r", "k", "w", "p", "list", "imp", "n"}
    assert wire["n"] == len(wire["list"])


def test_payload_stays_compact_for_thirty_players():
    from impostor_words.core import RoundParams, build_payload

    roster = [f"Player {i}" for i in range(30)]
    encoded = encode(build_payload(roster, RoundParams(seed="room-42", impostor_count=2)))
    raw_size = len(json.dumps(build_payload(roster, RoundParams(seed="room-42", impostor_count=2)).to_wire()))
    assert len(encoded) < raw_size
    assert len(encoded) < 1500


@pytest.mark.parametrize("text", ["", "   ", "not a payload!!", "A", "AAAA", "%%%%"])
def test_decode_rejects_garbage(text):
    with pytest.raises(MalformedPayloadError):
        decode(text)


def test_decode_rejects_truncated_payload(encoded_payload):
    with pytest.raises(MalformedPayloadError):
        decode(encoded_payload[: len(encoded_payload) // 2])


def test_decode_rejects_non_json():
    text = base64.urlsafe_b64encode(zlib.compress(b"hello there")).decode("ascii")
    with pytest.raises(MalformedPayloadError):
        decode(text)


@pytest.mark.parametrize("text", [
    "[" * 5000 + "]" * 5000,
    '{"s":"x","r":' + "1" * 5000 + ',"k":1,"w":0,"p":0,"list":[],"imp":[],"n":0}',
    "[" * 200000 + "]" * 200000,
    " " * (MAX_DECOMPRESSED_BYTES + 1) + "{}",
])
def test_decode_rejects_hostile_json(text):
    encoded = _pack(text)
    assert len(encoded) < 2000
    with pytest.raises(MalformedPayloadError):
        decode(encoded)


@pytest.mark.parametrize("mutation", [
    lambda d: [d],
    lambda d: {**d, "s": 5},
    lambda d: {**d, "r": 0},
    lambda d: {**d, "r": MAX_PARAM_INT + 1},
    lambda d: {**d, "s": "\ud800"},
    lambda d: {**d, "k": "1"},
    lambda d: {**d, "w": True},
    lambda d: {**d, "list": "abc"},
    lambda d: {**d, "list": d["list"] + ["xyz"]},
    lambda d: {**d, "imp": [_fp("stranger")]},
    lambda d: {**d, "n": d["n"] + 1},
])
def test_decode_rejects_bad_fields(payload, mutation):
    with pytest.raises(MalformedPayloadError):
        decode(_raw(mutation(payload.to_wire())))


def test_decode_without_impostor_list_uses_sorted_prefix(payload):
    wire = payload.to_wire()
    del wire["imp"]
    decoded = decode(_raw(wire))
    assert decoded.impostor_fingerprints == payload.fingerprints[:payload.impostor_count]
    assert decoded == payload


def test_malformed_error_has_user_message():
    with pytest.raises(MalformedPayloadError) as exc_info:
        decode("###")
    assert "admin" in exc_info.value.message


def test_share_url_carries_mode_and_payload(payload):
    url = build_share_url("https://game.example/play?lang=en", payload)
    assert url.startswith("https://game.example/play?")
    assert "lang=en" in url
    assert "mode=player" in url
    assert extract_payload(url) == encode(payload)


def test_share_url_replaces_existing_payload(payload):
    url = build_share_url("https://game.example/?mode=admin&payload=old", payload)
    assert "mode=admin" not in url
    assert "payload=old" not in url
    assert decode(extract_payload(url)) == payload


def test_extract_payload_accepts_bare_payload(encoded_payload):
    assert extract_payload(f"  {encoded_payload}\n") == encoded_payload


def test_extract_payload_requires_payload_param():
    with pytest.raises(MalformedPayloadError):
        extract_payload("https://game.example/?mode=player")
