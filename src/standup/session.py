"""High level loop for producing stand-up speaking orders."""

from __future__ import annotations

from typing import Callable, Iterable, List, Sequence

from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from .core.logging import logger
from .exceptions import ProtocolError, TransportError, ValidationError
from .models import Member, RunDirectives
from .randomizer import AttendeeRandomizer
from .roster import filter_roster


class StandupSession:
    """Encapsulates the roster, run directives and the filter+randomize cycle."""

    def __init__(
        self,
        roster: Iterable[Member],
        directives: RunDirectives,
        randomizer: AttendeeRandomizer,
        *,
        retry_attempts: int = 1,
        retry_backoff: float = 1.0,
    ) -> None:
        if retry_attempts < 1:
            raise ValidationError("At least one attempt is required.")
        self._roster = list(roster)
        self._directives = directives
        self._randomizer = randomizer
        self._retry_attempts = retry_attempts
        self._retry_backoff = retry_backoff

    @property
    def roster(self) -> List[Member]:
        return list(self._roster)

    @property
    def directives(self) -> RunDirectives:
        return self._directives

    def eligible_names(self) -> List[str]:
        return filter_roster(self._roster, self._directives)

    def generate(self) -> List[str]:
        names = self.eligible_names()
        logger.info("{} attendees eligible today", len(names))

        for attempt in Retrying(
            wait=wait_exponential(multiplier=self._retry_backoff, max=10),
            stop=stop_after_attempt(self._retry_attempts),
            retry=retry_if_exception_type(TransportError),
            reraise=True,
        ):
            with attempt:
                if attempt.retry_state.attempt_number > 1:
                    logger.warning(
                        "Retrying randomness request, attempt {}",
                        attempt.retry_state.attempt_number,
                    )
                order = self._randomizer.randomize(names)
        return order

    @staticmethod
    def format_order(order: Sequence[str]) -> str:
        return "\n".join(f"{position}. {name}" for position, name in enumerate(order, start=1))

    @classmethod
    def render_order(cls, order: Sequence[str]) -> str:
        return cls.format_order(order) if order else "Nobody is attending today."

    def run(
        self,
        ask_again: Callable[[], bool],
        emit: Callable[[str], None],
        emit_error: Callable[[str], None] | None = None,
    ) -> int:
        """Print orders until ``ask_again`` returns false; return how many were printed.

        Remote failures go to ``emit_error`` (``emit`` when not given) and the
        user is asked again.
        """

        emit_error = emit_error or emit

        produced = 0
        while True:
            try:
                order = self.generate()
            except (TransportError, ProtocolError) as exc:
                logger.info("Could not randomize attendees: {}", exc)
                emit_error(f"Error: {exc}")
            else:
                produced += 1
                emit(self.render_order(order))
            if not ask_again():
                return produced
