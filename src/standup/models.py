"""Data models describing meeting members and per-run directives."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import FrozenSet, Tuple

from .exceptions import ConfigError, ValidationError


class Category(enum.Enum):
    """Attendee category governing default visibility in the meeting list."""

    WORKER = "worker"
    BOSS = "boss"
    SOMETIMES = "sometimes"


def parse_category(value: str) -> Category:
    """Normalise a configured attendee type such as ``"Boss"`` to a :class:`Category`."""

    try:
        return Category(str(value).strip().lower())
    except ValueError:
        allowed = ", ".join(c.value for c in Category)
        raise ConfigError(f"Unknown attendee type {value!r}; expected one of: {allowed}.") from None


@dataclass(slots=True, frozen=True)
class Member:
    """Represents a meeting member.

    Names are kept exactly as given: exclusions and guests are matched by
    plain string equality.
    """

    name: str
    category: Category = Category.WORKER

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Member name must not be empty.")
        if not isinstance(self.category, Category):
            object.__setattr__(self, "category", parse_category(self.category))


@dataclass(slots=True, frozen=True)
class RunDirectives:
    """Run-specific instructions supplied at invocation time."""

    include_boss: bool = False
    guest_names: Tuple[str, ...] = ()
    excluded_names: FrozenSet[str] = field(default_factory=frozenset)
    sometimes_requested: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "guest_names", tuple(self.guest_names))
        if any(not name or not name.strip() for name in self.guest_names):
            raise ValidationError("Guest names must not be empty.")
        object.__setattr__(self, "excluded_names", frozenset(self.excluded_names))

    @property
    def include_sometimes(self) -> bool:
        """Guests are Sometimes members, so any guest enables the whole category."""

        return self.sometimes_requested or bool(self.guest_names)
