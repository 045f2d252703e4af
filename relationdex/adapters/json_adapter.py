"""JSON adapter for contacts."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any

from relationdex.schema import Contact, ValidationError, ensure_unique_ids

_REQUIRED_FIELDS = ("id", "name", "desiredTalkFrequency", "desiredSeeFrequency")


def _parse_date(value: Any, key: str, index: int) -> datetime | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"Item {index}: {key} must be an ISO-8601 string or null")
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError as exc:
        raise ValidationError(f"Item {index}: malformed {key}") from exc


def _parse_frequency(value: Any, key: str, index: int) -> float:
    if isinstance(value, bool):
        raise ValidationError(f"Item {index}: invalid {key}")
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise ValidationError(f"Item {index}: invalid {key}") from exc


def _format_date(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def to_dict(contact: Contact) -> dict:
    """Map a contact onto its camelCase wire form."""

    return {
        "id": contact.id,
        "name": contact.name,
        "notes": contact.notes,
        "lastTalkedDate": _format_date(contact.last_talked_date),
        "lastSeenDate": _format_date(contact.last_seen_date),
        "desiredTalkFrequency": contact.desired_talk_frequency,
        "desiredSeeFrequency": contact.desired_see_frequency,
    }


def from_dict(item: dict, index: int = 1) -> Contact:
    """Build a contact from its wire form; ``index`` labels error messages."""

    if not isinstance(item, dict):
        raise ValidationError(f"Item {index}: expected an object")

    missing = [field for field in _REQUIRED_FIELDS if item.get(field) in (None, "")]
    if missing:
        raise ValidationError(f"Item {index}: missing required fields {missing}")

    notes = item.get("notes")
    if notes is None:
        notes = ""
    for key, value in (("id", item["id"]), ("name", item["name"]), ("notes", notes)):
        if not isinstance(value, str):
            raise ValidationError(f"Item {index}: {key} must be a string")

    try:
        return Contact(
            id=item["id"],
            name=item["name"],
            notes=notes,
            last_talked_date=_parse_date(item.get("lastTalkedDate"), "lastTalkedDate", index),
            last_seen_date=_parse_date(item.get("lastSeenDate"), "lastSeenDate", index),
            desired_talk_frequency=_parse_frequency(item["desiredTalkFrequency"], "desiredTalkFrequency", index),
            desired_see_frequency=_parse_frequency(item["desiredSeeFrequency"], "desiredSeeFrequency", index),
        )
    except ValidationError as exc:
        if str(exc).startswith("Item "):
            raise
        raise ValidationError(f"Item {index}: {exc}") from exc


def dumps(contacts: list[Contact]) -> str:
    return json.dumps([to_dict(contact) for contact in contacts], indent=2, allow_nan=False)


def loads(text: str) -> list[Contact]:
    """Parse a JSON list of contact objects."""

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValidationError("malformed JSON payload") from exc

    if not isinstance(payload, list):
        raise ValidationError("JSON payload must be a list of objects")

    contacts = [from_dict(item, i) for i, item in enumerate(payload, start=1)]
    ensure_unique_ids(contacts)
    return contacts


def parse(file_path: str) -> list[Contact]:
    """Parse JSON file into contacts."""

    with open(file_path, encoding="utf-8") as handle:
        return loads(handle.read())


def write(file_path: str, contacts: list[Contact]) -> None:
    """Write contacts to a JSON file."""

    ensure_unique_ids(contacts)
    with open(file_path, "w", encoding="utf-8") as handle:
        handle.write(dumps(contacts))
        handle.write("\n")
