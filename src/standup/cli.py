"""
standup - print a randomized speaking order for the morning stand-up.

Usage:
    standup                      # workers only
    standup --withboss           # include the boss
    standup -g "Bob,Zaphod"      # add guests (also enables sometimes members)
    standup -r Sam -r Alex       # leave people out of today's list
"""

from __future__ import annotations

from typing import Iterable, Tuple

import click

from .core.config import DEFAULT_CONFIG_FILE, get_settings
from .core.logging import configure_logging, logger
from .exceptions import StandupError
from .models import RunDirectives
from .permutation import RandomOrgClient
from .randomizer import AttendeeRandomizer
from .session import StandupSession

BANNER = "Morning Stand-Up Meeting Name Randomizer"
AGAIN_PROMPT = "Again? y/[N] >"


def split_names(values: Iterable[str]) -> Tuple[str, ...]:
    """Split comma-separated option values, dropping blank fragments."""

    names = []
    for value in values:
        names.extend(part for part in value.split(",") if part.strip())
    return tuple(names)


def build_directives(
    withboss: bool,
    withsometimes: bool,
    guests: Iterable[str],
    excluded: Iterable[str],
) -> RunDirectives:
    return RunDirectives(
        include_boss=withboss,
        guest_names=split_names(guests),
        excluded_names=frozenset(excluded),
        sometimes_requested=withsometimes,
    )


def _ask_again() -> bool:
    try:
        answer = click.prompt(AGAIN_PROMPT, default="", show_default=False, prompt_suffix="")
    except click.Abort:
        # stdin closed
        click.echo()
        return False
    return answer.strip().lower() == "y"


@click.command()
@click.option("-b", "--withboss", is_flag=True, default=False,
              help="Include anyone listed as the boss attendee type in the list")
@click.option("-s", "--withsometimes", is_flag=True, default=False,
              help="Include anyone listed as the sometimes attendee type in the list")
@click.option("-c", "--configfile", default=DEFAULT_CONFIG_FILE, show_default=True,
              help="Change the configuration file for this run from the default")
@click.option("-g", "--addguest", "guests", multiple=True,
              help="Add guest(s) to the meeting, comma separated")
@click.option("-r", "--exclude", "excluded", multiple=True,
              help="Exclude regular member(s) from this meeting")
@click.option("--once", is_flag=True, default=False,
              help="Print a single order without asking to run again")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging")
def main(
    withboss: bool,
    withsometimes: bool,
    configfile: str,
    guests: Tuple[str, ...],
    excluded: Tuple[str, ...],
    once: bool,
    verbose: bool,
) -> None:
    """Print a randomized speaking order for the stand-up meeting."""

    click.echo(BANNER)

    try:
        directives = build_directives(withboss, withsometimes, guests, excluded)
        settings = get_settings(configfile)
        configure_logging("DEBUG" if verbose else "WARNING", settings.log_file)
        roster = settings.roster()
        client = RandomOrgClient(
            settings.service_credential,
            settings.service_endpoint,
            timeout=settings.request_timeout,
        )
    except StandupError as exc:
        raise click.ClickException(str(exc)) from exc

    logger.info("Loaded {} members from {}", len(roster), configfile)
    session = StandupSession(
        roster,
        directives,
        AttendeeRandomizer(client),
        retry_attempts=settings.retry_attempts,
        retry_backoff=settings.retry_backoff,
    )
    with client:
        try:
            if once:
                click.echo(session.render_order(session.generate()))
            else:
                session.run(
                    ask_again=_ask_again,
                    emit=click.echo,
                    emit_error=lambda text: click.echo(text, err=True),
                )
        except StandupError as exc:
            raise click.ClickException(str(exc)) from exc


if __name__ == "__main__":
    main()
