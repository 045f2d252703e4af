"""Value-level lifecycle updates for contacts."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from uuid import uuid4

from relationdex.schema import Contact


def _now() -> datetime:
    return datetime.now(timezone.utc)


def new_contact(
    name: str,
    notes: str = "",
    desired_talk_frequency: float = 0,
    desired_see_frequency: float = 0,
) -> Contact:
    """Create a contact with a fresh id and no recorded interactions."""

    return Contact(
        id=uuid4().hex,
        name=name,
        notes=notes,
        last_talked_date=None,
        last_seen_date=None,
        desired_talk_frequency=desired_talk_frequency,
        desired_see_frequency=desired_see_frequency,
    )


def record_talk(contact: Contact, when: datetime | None = None) -> Contact:
    """Return a copy with the talk logged at ``when`` (now, in UTC, by default)."""

    return replace(contact, last_talked_date=when or _now())


def record_seen(contact: Contact, when: datetime | None = None) -> Contact:
    """Return a copy with the in-person meeting logged at ``when``."""

    return replace(contact, last_seen_date=when or _now())


def update_frequencies(contact: Contact, talk: float | None = None, see: float | None = None) -> Contact:
    """Replace whichever cadence targets are given."""

    changes = {}
    if talk is not None:
        changes["desired_talk_frequency"] = talk
    if see is not None:
        changes["desired_see_frequency"] = see
    return replace(contact, **changes)
