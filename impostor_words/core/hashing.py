"""
Deterministic player fingerprints used for roster membership and impostor ordering.
"""

import hashlib

from .names import normalize

SEPARATOR = "|"
FINGERPRINT_LENGTH = 64  # sha256 hex digest
ORDERING_KEY_WIDTH = 12  # hex digits, 48 bits


def fingerprint(name: str, seed: str, round_number: int) -> str:
    """
    Compute a player's fingerprint for one round.

    Args:
        name: Player name as typed (normalized here)
        seed: Room seed chosen by the admin
        round_number: Round counter within the room

    Returns:
        Lowercase hex SHA-256 digest of "name|seed|round"
    """
    material = SEPARATOR.join([normalize(name), seed, str(round_number)])
    return hashlib.sha256(material.encode("utf-8")).hexdigest()


def ordering_key(fp: str, width: int = ORDERING_KEY_WIDTH) -> int:
    """Read the leading hex digits of a fingerprint as an unsigned integer."""
    return int(fp[:width], 16)


def sort_fingerprints(fingerprints):
    """Sort fingerprints by ordering key, breaking ties lexicographically."""
    return sorted(fingerprints, key=lambda fp: (ordering_key(fp), fp))
