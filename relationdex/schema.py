"""Core data schema for tracked contacts."""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional


class ValidationError(ValueError):
    """Raised when a contact or a collection of contacts is malformed."""


def _check_frequency(label: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{label} must be a number of days, got {value!r}")
    if isinstance(value, float) and not math.isfinite(value):
        raise ValidationError(f"{label} must be a finite number of days, got {value}")
    if value < 0:
        raise ValidationError(f"{label} must be non-negative, got {value}")


@dataclass(frozen=True)
class Contact:
    """A tracked person: identity, notes, interaction history and desired cadence.

    A date of ``None`` means the interaction has never been recorded.
    Frequencies are in days.
    """

    id: str
    name: str
    notes: str
    last_talked_date: Optional[datetime]
    last_seen_date: Optional[datetime]
    desired_talk_frequency: float
    desired_see_frequency: float

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id.strip():
            raise ValidationError("id must be a non-empty string")
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError(f"Contact {self.id}: name must be a non-empty string")
        if not isinstance(self.notes, str):
            raise ValidationError(f"Contact {self.id}: notes must be a string")

        for label in ("last_talked_date", "last_seen_date"):
            value = getattr(self, label)
            if value is not None and not isinstance(value, datetime):
                raise ValidationError(f"Contact {self.id}: {label} must be a datetime or None")

        _check_frequency("desired_talk_frequency", self.desired_talk_frequency)
        _check_frequency("desired_see_frequency", self.desired_see_frequency)


def ensure_unique_ids(contacts: Iterable[Contact]) -> None:
    """Raise ValidationError if any id appears more than once."""

    counts = Counter(contact.id for contact in contacts)
    duplicates = [contact_id for contact_id, count in counts.items() if count > 1]
    if duplicates:
        raise ValidationError(f"duplicate contact ids {duplicates}")
