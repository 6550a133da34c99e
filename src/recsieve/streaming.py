"""NDJSON stream utilities.

- read_records: parse NDJSON lines into dicts
- write_records: emit records as compact NDJSON
"""

import json
from collections.abc import Iterable
from typing import Any, List, TextIO


def read_records(input_stream: TextIO) -> List[Any]:
    """Read every NDJSON object from the input stream.

    Blank lines are skipped.

    Raises:
        ValueError: If a line is not a valid JSON object
    """
    records = []
    for lineno, line in enumerate(input_stream, start=1):
        if not line.strip():
            continue
        try:
            record = json.loads(line)
        except json.JSONDecodeError as e:
            raise ValueError(f"line {lineno}: invalid JSON ({e.msg})") from e
        if not isinstance(record, dict):
            raise ValueError(f"line {lineno}: expected a JSON object")
        records.append(record)
    return records


def write_records(records: Iterable[Any], output_stream: TextIO) -> None:
    """Write records to the output stream, one JSON object per line."""
    for record in records:
        output_stream.write(json.dumps(record, separators=(",", ":")))
        output_stream.write("\n")
