"""
Round payload wire format.

A payload is compact JSON, zlib-compressed and URL-safe base64 encoded so it
fits in a query parameter or a QR code.
"""

import base64
import binascii
import json
import re
import zlib
from dataclasses import dataclass
from typing import Any, Dict, Tuple
from urllib.parse import parse_qs, urlencode, urlparse, urlunparse

from .exceptions import MalformedPayloadError
from .hashing import FINGERPRINT_LENGTH
from .names import is_utf8_encodable
from .roles import MAX_PARAM_INT

PAYLOAD_PARAM = "payload"
_FINGERPRINT_RE = re.compile(r"^[0-9a-f]{%d}$" % FINGERPRINT_LENGTH)
MAX_DECOMPRESSED_BYTES = 64 * 1024


@dataclass(frozen=True)
class RoundPayload:
    """Public state of one round, enough for a player device to resolve itself."""
    seed: str
    round_number: int
    impostor_count: int
    word_refresh: int
    pair_index: int
    fingerprints: Tuple[str, ...]  # sorted by ordering key
    impostor_fingerprints: Tuple[str, ...]
    roster_size: int

    def to_wire(self) -> Dict[str, Any]:
        return {
            "s": self.seed,
            "r": self.round_number,
            "k": self.impostor_count,
            "w": self.word_refresh,
            "p": self.pair_index,
            "list": list(self.fingerprints),
            "imp": list(self.impostor_fingerprints),
            "n": self.roster_size,
        }

    @classmethod
    def from_wire(cls, data: Any) -> "RoundPayload":
        """Validate a decoded wire record and build a payload from it."""
        if not isinstance(data, dict):
            raise MalformedPayloadError("payload is not an object")

        seed = data.get("s")
        if not isinstance(seed, str):
            raise MalformedPayloadError("missing room seed")
        if not is_utf8_encodable(seed):
            raise MalformedPayloadError("room seed is not valid text")

        round_number = _wire_int(data, "r", 1)
        impostor_count = _wire_int(data, "k", 1)
        word_refresh = _wire_int(data, "w", 0)
        pair_index = _wire_int(data, "p", 0)

        fingerprints = _wire_fingerprints(data, "list")
        if "imp" in data:
            impostors = _wire_fingerprints(data, "imp")
        else:
            # Issuers that only ship the sorted list: its prefix is the impostor set
            impostors = fingerprints[:min(impostor_count, len(fingerprints))]
        if not set(impostors) <= set(fingerprints):
            raise MalformedPayloadError("impostor list is not part of the roster")

        roster_size = _wire_int(data, "n", 0) if "n" in data else len(fingerprints)
        if roster_size != len(fingerprints):
            raise MalformedPayloadError("roster size does not match the roster list")

        return cls(
            seed=seed,
            round_number=round_number,
            impostor_count=impostor_count,
            word_refresh=word_refresh,
            pair_index=pair_index,
            fingerprints=fingerprints,
            impostor_fingerprints=impostors,
            roster_size=roster_size,
        )


def _wire_int(data: Dict[str, Any], key: str, minimum: int) -> int:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, int) or not minimum <= value <= MAX_PARAM_INT:
        raise MalformedPayloadError(f"field '{key}' must be an integer between {minimum} and {MAX_PARAM_INT}")
    return value


def _wire_fingerprints(data: Dict[str, Any], key: str) -> Tuple[str, ...]:
    value = data.get(key)
    if not isinstance(value, list):
        raise MalformedPayloadError(f"field '{key}' must be a list")
    for fp in value:
        if not isinstance(fp, str) or not _FINGERPRINT_RE.match(fp):
            raise MalformedPayloadError(f"field '{key}' holds an invalid fingerprint")
    return tuple(value)


def encode(payload: RoundPayload) -> str:
    """Serialize, compress and URL-safe encode a payload."""
    text = json.dumps(payload.to_wire(), sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    compressed = zlib.compress(text.encode("utf-8"), 9)
    return base64.urlsafe_b64encode(compressed).decode("ascii").rstrip("=")


def decode(text: str) -> RoundPayload:
    """
    Inverse of ``encode``.

    Raises:
        MalformedPayloadError: If the string is corrupt, truncated or does not
            describe a round
    """
    if not isinstance(text, str) or not text.strip():
        raise MalformedPayloadError("empty payload")
    text = text.strip()
    try:
        compressed = base64.urlsafe_b64decode(text + "=" * (-len(text) % 4))
    except (binascii.Error, ValueError) as e:
        raise MalformedPayloadError(f"not base64: {e}") from e
    try:
        inflater = zlib.decompressobj()
        raw = inflater.decompress(compressed, MAX_DECOMPRESSED_BYTES)
        if inflater.unconsumed_tail or len(raw) >= MAX_DECOMPRESSED_BYTES:
            raise MalformedPayloadError("payload is too large")
        raw += inflater.flush()
        if not inflater.eof:
            raise MalformedPayloadError("payload is truncated")
    except zlib.error as e:
        raise MalformedPayloadError(f"cannot decompress: {e}") from e
    try:
        data = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, ValueError, RecursionError) as e:
        raise MalformedPayloadError(f"not JSON: {e}") from e
    return RoundPayload.from_wire(data)


def build_share_url(base_url: str, payload: RoundPayload) -> str:
    """Build the player link for a payload, keeping any other query parameters of ``base_url``."""
    parts = urlparse(base_url)
    query = {k: v[-1] for k, v in parse_qs(parts.query).items() if k not in ("mode", PAYLOAD_PARAM)}
    query["mode"] = "player"
    query[PAYLOAD_PARAM] = encode(payload)
    return urlunparse(parts._replace(query=urlencode(query)))


def extract_payload(text: str) -> str:
    """Pull the encoded payload out of a share URL, or return a bare payload as is."""
    text = (text or "").strip()
    if "?" in text or "://" in text:
        values = parse_qs(urlparse(text).query).get(PAYLOAD_PARAM)
        if not values:
            raise MalformedPayloadError("link has no payload")
        return values[-1]
    return text
