"""Validate a CSV/JSON contacts file and print a summary report."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from relationdex.adapters import csv_adapter, json_adapter
from relationdex.schema import ValidationError


def _load_contacts(path: Path):
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(str(path))
    if suffix == ".json":
        return json_adapter.parse(str(path))
    raise ValidationError("Unsupported input format, expected .csv or .json")


def main() -> int:
    parser = argparse.ArgumentParser(description="Validate a relationdex contacts file")
    parser.add_argument("--data", required=True, help="Path to CSV/JSON contacts file")
    args = parser.parse_args()

    try:
        contacts = _load_contacts(Path(args.data))
    except ValidationError as exc:
        print(f"Invalid contacts file: {exc}", file=sys.stderr)
        return 1

    report = {
        "n_contacts": len(contacts),
        "never_talked": sum(1 for c in contacts if c.last_talked_date is None),
        "never_seen": sum(1 for c in contacts if c.last_seen_date is None),
    }
    print(json.dumps(report, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
