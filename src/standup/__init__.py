"""Randomized speaking order for the morning stand-up meeting."""

from .exceptions import ConfigError, ProtocolError, StandupError, TransportError, ValidationError
from .models import Category, Member, RunDirectives, parse_category
from .permutation import DEFAULT_API_URI, PermutationSource, RandomOrgClient
from .randomizer import AttendeeRandomizer, randomize
from .roster import eligible_roster, filter_roster
from .session import StandupSession

__all__ = [
    "AttendeeRandomizer",
    "Category",
    "ConfigError",
    "DEFAULT_API_URI",
    "Member",
    "PermutationSource",
    "ProtocolError",
    "RandomOrgClient",
    "RunDirectives",
    "StandupError",
    "StandupSession",
    "TransportError",
    "ValidationError",
    "eligible_roster",
    "filter_roster",
    "parse_category",
    "randomize",
]
