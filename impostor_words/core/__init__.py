"""
Core round logic: fingerprints, impostor selection, words, payloads and resolution.
"""

from .names import normalize, dedupe_roster
from .hashing import fingerprint, ordering_key, sort_fingerprints
from .chooser import seeded_choice, choose_pair_index
from .themes import Category, ThemePair, ThemeCatalog, DEFAULT_CATALOG
from .roles import Role, RoundParams, PlayerAssignment
from .payload import RoundPayload, encode, decode, build_share_url, extract_payload
from .assignment import (
    RosterWarning,
    RosterWarningKind,
    ImpostorSelection,
    build_impostor_set,
    word_for,
    assign,
    build_payload,
    check_roster,
)
from .resolver import Resolution, resolve, resolve_link
from .exceptions import RoundError, MalformedPayloadError, NotRegisteredError, InvalidRoundParamsError

__all__ = [
    'normalize',
    'dedupe_roster',
    'fingerprint',
    'ordering_key',
    'sort_fingerprints',
    'seeded_choice',
    'choose_pair_index',
    'Category',
    'ThemePair',
    'ThemeCatalog',
    'DEFAULT_CATALOG',
    'Role',
    'RoundParams',
    'PlayerAssignment',
    'RoundPayload',
    'encode',
    'decode',
    'build_share_url',
    'extract_payload',
    'RosterWarning',
    'RosterWarningKind',
    'ImpostorSelection',
    'build_impostor_set',
    'word_for',
    'assign',
    'build_payload',
    'check_roster',
    'Resolution',
    'resolve',
    'resolve_link',
    'RoundError',
    'MalformedPayloadError',
    'NotRegisteredError',
    'InvalidRoundParamsError',
]
