"""
Exceptions for round decoding and resolution errors.
"""

from typing import Optional


class RoundError(Exception):
    """Base class for user-correctable round errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class MalformedPayloadError(RoundError):
    """Raised when a payload string cannot be decoded into a round."""

    def __init__(self, reason: str, message: str = ""):
        self.reason = reason
        super().__init__(
            message or f"Invalid round link or payload ({reason}). Ask the admin to share the link or QR for this round again."
        )


class NotRegisteredError(RoundError):
    """Raised when a typed name is not part of the round's roster."""

    def __init__(self, name: str, round_number: Optional[int] = None, message: str = ""):
        self.name = name
        self.round_number = round_number
        where = f" for round {round_number}" if round_number is not None else ""
        super().__init__(
            message or f"Name '{name.strip()}' is not registered{where}. Check the spelling matches what the admin entered, or ask the admin to add you."
        )


class InvalidRoundParamsError(RoundError, ValueError):
    """Raised when round parameters are out of range."""

    def __init__(self, field_name: str, value, message: str = ""):
        self.field_name = field_name
        self.value = value
        super().__init__(message or f"Invalid {field_name}: {value!r}")
