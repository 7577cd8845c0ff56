"""Reorder attendee names using a remotely generated permutation."""

from __future__ import annotations

from typing import List, Sequence

from .core.logging import logger
from .permutation import PermutationSource


def randomize(names: Sequence[str], source: PermutationSource) -> List[str]:
    """Return ``names`` reordered by a permutation from ``source``.

    Lists of zero or one name are returned as a copy without consulting the
    source. Errors raised by the source propagate unchanged.
    """

    names = list(names)
    if len(names) <= 1:
        return names

    permutation = source.generate_permutation(len(names))
    logger.debug("Applying permutation {} to {} names", permutation, len(names))
    return [names[index] for index in permutation]


class AttendeeRandomizer:
    """Binds a permutation source so callers only pass the names."""

    def __init__(self, source: PermutationSource) -> None:
        self.source = source

    def randomize(self, names: Sequence[str]) -> List[str]:
        return randomize(names, self.source)
