"""Heuristics for spotting sessions created by the scheduler.

The scheduler does not always record a ``schedule_id`` on the sessions it
creates, so the explicit marker is backed by weaker signals. Rules are
checked in order and the first match wins.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass

from session_list.domain.sessions import SessionRecord

_TIMESTAMP_ID = re.compile(r"[0-9]{8}_[0-9]{6}")

# Whitespace and line terminators recognized by the session list UI.
_BLANK = (
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)


@dataclass(frozen=True)
class SchedulerRule:
    """Named predicate that marks a session as scheduler-created."""

    name: str
    matches: Callable[[SessionRecord], bool]


def has_schedule_id(session: SessionRecord) -> bool:
    """Return True when the session links to a schedule."""
    schedule_id = session.metadata.schedule_id
    return schedule_id is not None and schedule_id != ""


def has_blank_description(session: SessionRecord) -> bool:
    """Return True when the description is missing or whitespace only."""
    description = session.metadata.description or ""
    return description.strip(_BLANK) == ""


def has_timestamp_echo(session: SessionRecord) -> bool:
    """Return True when the description repeats a timestamp-shaped id."""
    return (
        session.metadata.description == session.id
        and _TIMESTAMP_ID.fullmatch(session.id) is not None
    )


SCHEDULER_RULES: tuple[SchedulerRule, ...] = (
    SchedulerRule("schedule_id", has_schedule_id),
    SchedulerRule("blank_description", has_blank_description),
    SchedulerRule("timestamp_echo", has_timestamp_echo),
)


def matching_rule(session: SessionRecord) -> SchedulerRule | None:
    """Return the first rule that flags the session, if any."""
    for rule in SCHEDULER_RULES:
        if rule.matches(session):
            return rule
    return None


def is_scheduler_session(session: SessionRecord) -> bool:
    """Return True if the session was created by the scheduler."""
    return matching_rule(session) is not None
