"""
Role definitions and round parameter types.
"""

from enum import Enum
from dataclasses import dataclass

from .exceptions import InvalidRoundParamsError
from .names import is_utf8_encodable

MAX_PARAM_INT = 2 ** 53 - 1


class Role(Enum):
    """Hidden role handed to each player."""
    CREW = "CREW"
    IMPOSTOR = "IMPOSTOR"

    @property
    def is_impostor(self) -> bool:
        return self == Role.IMPOSTOR

    def __str__(self) -> str:
        return self.value.title()


def _check_int(field_name: str, value, minimum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not minimum <= value <= MAX_PARAM_INT:
        raise InvalidRoundParamsError(
            field_name, value, f"{field_name} must be an integer between {minimum} and {MAX_PARAM_INT}, got {value!r}"
        )


@dataclass(frozen=True)
class RoundParams:
    """
    Everything that scopes one computed round.

    Changing any field and recomputing gives a logically distinct round.
    """
    seed: str
    round_number: int = 1
    impostor_count: int = 1
    word_refresh: int = 0
    pair_index: int = 0

    def __post_init__(self):
        if not isinstance(self.seed, str):
            raise InvalidRoundParamsError("seed", self.seed, f"seed must be a string, got {self.seed!r}")
        if not is_utf8_encodable(self.seed):
            raise InvalidRoundParamsError("seed", self.seed, "seed contains characters that cannot be encoded as UTF-8")
        _check_int("round_number", self.round_number, 1)
        _check_int("impostor_count", self.impostor_count, 1)
        _check_int("word_refresh", self.word_refresh, 0)
        _check_int("pair_index", self.pair_index, 0)


@dataclass(frozen=True)
class PlayerAssignment:
    """One row of the admin's assignment table."""
    name: str
    role: Role
    word: str
    fingerprint: str

    @property
    def is_impostor(self) -> bool:
        return self.role.is_impostor
