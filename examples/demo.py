"""Demo script for relationdex."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from relationdex.adapters import json_adapter
from relationdex.lifecycle import new_contact, record_talk, update_frequencies


def main() -> None:
    contact = new_contact("Ada Lovelace", notes="met at the analytical engine meetup", desired_talk_frequency=30)
    contact = record_talk(contact)
    contact = update_frequencies(contact, see=90)
    print("Contact:", contact)
    print(json_adapter.dumps([contact]))


if __name__ == "__main__":
    main()
