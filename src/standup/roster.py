"""Utilities for deciding who attends today's meeting."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .core.logging import logger
from .models import Category, Member, RunDirectives


def _is_visible(member: Member, directives: RunDirectives) -> bool:
    if member.category is Category.BOSS:
        return directives.include_boss
    if member.category is Category.SOMETIMES:
        return directives.include_sometimes
    return True


def _guests(names: Iterable[str]) -> List[Member]:
    return [Member(name, Category.SOMETIMES) for name in names]


def eligible_roster(roster: Sequence[Member], directives: RunDirectives) -> List[Member]:
    """Return the members eligible for today's meeting.

    Excluded names are removed first, so an excluded boss stays out even when
    bosses are included. Guests are appended after the roster.
    """

    present = [member for member in roster if member.name not in directives.excluded_names]
    unmatched = directives.excluded_names - {member.name for member in roster}
    if unmatched:
        logger.debug("Excluded names not found in roster: {}", sorted(unmatched))

    candidates = present + _guests(directives.guest_names)
    return [member for member in candidates if _is_visible(member, directives)]


def filter_roster(roster: Sequence[Member], directives: RunDirectives) -> List[str]:
    """Return the names of today's attendees in roster order, guests last."""

    return [member.name for member in eligible_roster(roster, directives)]
