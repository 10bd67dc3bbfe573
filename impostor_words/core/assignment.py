"""
Assignment engine: picks impostors and words for a roster.

Impostors are the players whose fingerprints have the lowest ordering keys,
so any device holding the same (name, seed, round) inputs agrees on the
result without coordination.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from .chooser import seeded_choice
from .exceptions import InvalidRoundParamsError
from .hashing import fingerprint, sort_fingerprints
from .names import dedupe_roster, is_utf8_encodable, normalize
from .payload import RoundPayload
from .roles import PlayerAssignment, Role, RoundParams
from .themes import DEFAULT_CATALOG, ThemeCatalog, ThemePair


class RosterWarningKind(Enum):
    """Admin-side roster problems that still produce a valid round."""
    EMPTY_ROSTER = "empty_roster"
    INSUFFICIENT_ROSTER = "insufficient_roster"


@dataclass(frozen=True)
class RosterWarning:
    kind: RosterWarningKind
    message: str


@dataclass(frozen=True)
class ImpostorSelection:
    """Fingerprints for a roster and the impostor subset chosen from them."""
    fingerprints: Dict[str, str]  # {name: fingerprint}
    sorted_fingerprints: Tuple[str, ...]
    impostor_fingerprints: Tuple[str, ...]

    def role_of(self, fp: str) -> Role:
        return Role.IMPOSTOR if fp in self.impostor_fingerprints else Role.CREW


def get_pair(catalog: ThemeCatalog, pair_index: int) -> ThemePair:
    """Look up a theme pair, reporting a bad index as a round parameter error."""
    try:
        return catalog[pair_index]
    except IndexError:
        raise InvalidRoundParamsError(
            "pair_index", pair_index,
            f"pair_index must be between 0 and {len(catalog) - 1}, got {pair_index}"
        ) from None


def build_impostor_set(roster: Sequence[str], seed: str, round_number: int, impostor_count: int) -> ImpostorSelection:
    """
    Fingerprint a roster and take the lowest-keyed ones as impostors.

    Args:
        roster: Player names (deduplicated by normalized form first)
        seed: Room seed
        round_number: Round counter
        impostor_count: Requested number of impostors, clamped to the roster size

    Returns:
        ImpostorSelection with the sorted fingerprints and the impostor prefix
    """
    players = dedupe_roster(roster)
    for name in players:
        if not is_utf8_encodable(name):
            raise InvalidRoundParamsError(
                "roster", name, f"Player name {name!r} contains characters that cannot be encoded as UTF-8"
            )
    fingerprints = {name: fingerprint(name, seed, round_number) for name in players}
    ordered = tuple(sort_fingerprints(fingerprints.values()))
    impostors = ordered[:min(impostor_count, len(ordered))]
    return ImpostorSelection(
        fingerprints=fingerprints,
        sorted_fingerprints=ordered,
        impostor_fingerprints=impostors,
    )


def word_for(name: str, role: Role, params: RoundParams, catalog: ThemeCatalog = DEFAULT_CATALOG) -> str:
    """Pick a player's secret word from the category matching their role."""
    pair = get_pair(catalog, params.pair_index)
    words = pair.impostor.words if role.is_impostor else pair.main.words
    seed_string = f"{params.seed}|{params.round_number}|{params.word_refresh}|{normalize(name)}|word"
    return seeded_choice(words, seed_string)


def assign(roster: Sequence[str], params: RoundParams, catalog: ThemeCatalog = DEFAULT_CATALOG) -> List[PlayerAssignment]:
    """
    Compute every player's role and word for a round.

    Rows follow roster order. An empty roster gives an empty table, and an
    impostor count at or above the roster size makes everyone an impostor.
    """
    get_pair(catalog, params.pair_index)
    selection = build_impostor_set(roster, params.seed, params.round_number, params.impostor_count)

    assignments = []
    for name, fp in selection.fingerprints.items():
        role = selection.role_of(fp)
        assignments.append(PlayerAssignment(
            name=name,
            role=role,
            word=word_for(name, role, params, catalog),
            fingerprint=fp,
        ))
    return assignments


def build_payload(roster: Sequence[str], params: RoundParams) -> RoundPayload:
    """Snapshot the public state a player device needs to resolve itself."""
    selection = build_impostor_set(roster, params.seed, params.round_number, params.impostor_count)
    return RoundPayload(
        seed=params.seed,
        round_number=params.round_number,
        impostor_count=params.impostor_count,
        word_refresh=params.word_refresh,
        pair_index=params.pair_index,
        fingerprints=selection.sorted_fingerprints,
        impostor_fingerprints=selection.impostor_fingerprints,
        roster_size=len(selection.sorted_fingerprints),
    )


def check_roster(roster: Sequence[str], impostor_count: int) -> Optional[RosterWarning]:
    """Report a roster too small for the requested impostors, if any."""
    size = len(dedupe_roster(roster))
    if size == 0:
        return RosterWarning(
            RosterWarningKind.EMPTY_ROSTER,
            "No players yet. Add player names to generate words and roles.",
        )
    if size < impostor_count:
        return RosterWarning(
            RosterWarningKind.INSUFFICIENT_ROSTER,
            f"Not enough players for {impostor_count} impostor(s). Add at least {impostor_count + 1} players.",
        )
    return None
