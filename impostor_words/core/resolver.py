"""
Player-side resolution of a single name against a round payload.
"""

from dataclasses import dataclass

from .assignment import get_pair, word_for
from .exceptions import InvalidRoundParamsError, MalformedPayloadError, NotRegisteredError
from .hashing import fingerprint
from .names import is_utf8_encodable
from .payload import RoundPayload, decode, extract_payload
from .roles import Role, RoundParams
from .themes import DEFAULT_CATALOG, ThemeCatalog


@dataclass(frozen=True)
class Resolution:
    """What a player sees after entering their name."""
    name: str
    role: Role
    word: str
    round_number: int
    roster_size: int
    main_label: str


def resolve(payload: RoundPayload, typed_name: str, catalog: ThemeCatalog = DEFAULT_CATALOG) -> Resolution:
    """
    Reproduce one player's role and word from a payload.

    Raises:
        NotRegisteredError: If the name's fingerprint is not in the payload roster
        MalformedPayloadError: If the payload names a theme the catalog lacks
    """
    if not is_utf8_encodable(typed_name or ""):
        raise NotRegisteredError(typed_name.encode("utf-8", "replace").decode("utf-8"), payload.round_number)
    fp = fingerprint(typed_name, payload.seed, payload.round_number)
    if fp not in payload.fingerprints:
        raise NotRegisteredError(typed_name, payload.round_number)

    role = Role.IMPOSTOR if fp in payload.impostor_fingerprints else Role.CREW
    params = RoundParams(
        seed=payload.seed,
        round_number=payload.round_number,
        impostor_count=payload.impostor_count,
        word_refresh=payload.word_refresh,
        pair_index=payload.pair_index,
    )
    try:
        pair = get_pair(catalog, params.pair_index)
    except InvalidRoundParamsError as e:
        raise MalformedPayloadError("unknown theme pair") from e

    return Resolution(
        name=typed_name.strip(),
        role=role,
        word=word_for(typed_name, role, params, catalog),
        round_number=payload.round_number,
        roster_size=payload.roster_size,
        main_label=pair.main.label,
    )


def resolve_link(text: str, typed_name: str, catalog: ThemeCatalog = DEFAULT_CATALOG) -> Resolution:
    """Resolve a name against a share URL or a bare encoded payload."""
    return resolve(decode(extract_payload(text)), typed_name, catalog)
