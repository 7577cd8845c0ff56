"""Custom exception hierarchy for the standup package."""

from __future__ import annotations


class StandupError(Exception):
    """Base error for all stand-up order related exceptions."""


class ValidationError(StandupError):
    """Raised when input data cannot be validated."""


class ConfigError(StandupError):
    """Raised when the service endpoint, credential or config file is unusable."""


class TransportError(StandupError):
    """Raised when the randomness service could not be reached."""


class ProtocolError(StandupError):
    """Raised when the randomness service returned an unusable response."""

    def __init__(self, message: str, *, code: int | None = None) -> None:
        super().__init__(message)
        self.code = code
