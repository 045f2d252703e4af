"""CSV adapter for contacts."""

from __future__ import annotations

import csv
from datetime import datetime

from relationdex.schema import Contact, ValidationError, ensure_unique_ids

FIELDNAMES = [
    "id",
    "name",
    "notes",
    "lastTalkedDate",
    "lastSeenDate",
    "desiredTalkFrequency",
    "desiredSeeFrequency",
]
_REQUIRED_FIELDS = ("id", "name", "desiredTalkFrequency", "desiredSeeFrequency")


def _parse_date(raw: str | None, key: str, row_number: int) -> datetime | None:
    text = (raw or "").strip()
    if not text:
        return None
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError as exc:
        raise ValidationError(f"Row {row_number}: malformed {key}") from exc


def _parse_frequency(raw: str, key: str, row_number: int) -> float:
    try:
        return float(raw)
    except ValueError as exc:
        raise ValidationError(f"Row {row_number}: invalid {key}") from exc


def _parse_row(row: dict, row_number: int) -> Contact:
    missing = [field for field in _REQUIRED_FIELDS if not row.get(field)]
    if missing:
        raise ValidationError(f"Row {row_number}: missing required fields {missing}")

    try:
        return Contact(
            id=row["id"],
            name=row["name"],
            notes=row.get("notes") or "",
            last_talked_date=_parse_date(row.get("lastTalkedDate"), "lastTalkedDate", row_number),
            last_seen_date=_parse_date(row.get("lastSeenDate"), "lastSeenDate", row_number),
            desired_talk_frequency=_parse_frequency(row["desiredTalkFrequency"], "desiredTalkFrequency", row_number),
            desired_see_frequency=_parse_frequency(row["desiredSeeFrequency"], "desiredSeeFrequency", row_number),
        )
    except ValidationError as exc:
        if str(exc).startswith("Row "):
            raise
        raise ValidationError(f"Row {row_number}: {exc}") from exc


def _format_row(contact: Contact) -> dict:
    return {
        "id": contact.id,
        "name": contact.name,
        "notes": contact.notes,
        "lastTalkedDate": contact.last_talked_date.isoformat() if contact.last_talked_date else "",
        "lastSeenDate": contact.last_seen_date.isoformat() if contact.last_seen_date else "",
        "desiredTalkFrequency": contact.desired_talk_frequency,
        "desiredSeeFrequency": contact.desired_see_frequency,
    }


def parse(file_path: str) -> list[Contact]:
    """Parse CSV file into a list of contacts."""

    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return []

        contacts: list[Contact] = []
        for row_number, row in enumerate(reader, start=2):
            contacts.append(_parse_row(row, row_number))

    ensure_unique_ids(contacts)
    return contacts


def write(file_path: str, contacts: list[Contact]) -> None:
    """Write contacts to a CSV file with a header row."""

    ensure_unique_ids(contacts)
    with open(file_path, "w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=FIELDNAMES)
        writer.writeheader()
        for contact in contacts:
            writer.writerow(_format_row(contact))
