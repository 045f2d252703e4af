from datetime import datetime, timezone

import pytest

from relationdex.lifecycle import new_contact, record_seen, record_talk, update_frequencies
from relationdex.schema import ValidationError


def test_new_contact_assigns_unique_ids():
    first = new_contact("Ada Lovelace", desired_talk_frequency=30)
    second = new_contact("Ada Lovelace", desired_talk_frequency=30)
    assert first.id and second.id
    assert first.id != second.id
    assert first.notes == ""
    assert first.last_talked_date is None and first.last_seen_date is None


def test_new_contact_requires_name():
    with pytest.raises(ValidationError):
        new_contact("")


def test_record_talk_and_seen_are_independent():
    contact = new_contact("Grace Hopper")
    when = datetime(2024, 3, 1, 18, 30, tzinfo=timezone.utc)

    talked = record_talk(contact, when)
    assert talked.last_talked_date == when
    assert talked.last_seen_date is None
    assert contact.last_talked_date is None

    seen = record_seen(talked, when)
    assert seen.last_seen_date == when
    assert seen.id == contact.id


def test_record_talk_defaults_to_now():
    before = datetime.now(timezone.utc)
    contact = record_talk(new_contact("Grace Hopper"))
    assert contact.last_talked_date >= before


def test_update_frequencies_keeps_id():
    contact = new_contact("Grace Hopper", desired_talk_frequency=7, desired_see_frequency=60)
    updated = update_frequencies(contact, see=30)
    assert updated.id == contact.id
    assert updated.desired_talk_frequency == 7
    assert updated.desired_see_frequency == 30

    with pytest.raises(ValidationError):
        update_frequencies(contact, talk=-5)
