"""
Player name canonicalization.
"""

import re
from typing import Iterable, List, Optional

_WHITESPACE = re.compile(r"\s+")


def is_utf8_encodable(text: str) -> bool:
    """False for strings holding lone surrogates, which cannot be hashed."""
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def normalize(raw: Optional[str]) -> str:
    """
    Canonicalize a typed player name into its identity key.

    Trims the ends, collapses whitespace runs to one space and lowercases,
    so " Alice  Smith" and "alice smith" hash identically on every device.
    """
    return _WHITESPACE.sub(" ", (raw or "").strip()).lower()


def dedupe_roster(roster: Iterable[str]) -> List[str]:
    """Drop blank names and later names that normalize to an earlier one."""
    seen = set()
    players = []
    for name in roster:
        key = normalize(name)
        if not key or key in seen:
            continue
        seen.add(key)
        players.append(name.strip())
    return players
