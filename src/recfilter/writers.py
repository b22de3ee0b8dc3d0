"""NDJSON reading and writing (streaming)."""

import json
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, TextIO


def read_ndjson(stream: TextIO) -> Iterator[Dict[str, Any]]:
    """Yield one record per non-blank line.

    Raises:
        ValueError: a line is not valid JSON; the message carries the line number.
    """
    for lineno, line in enumerate(stream, start=1):
        line = line.strip()
        if not line:
            continue
        try:
            yield json.loads(line)
        except json.JSONDecodeError as exc:
            raise ValueError(f"line {lineno}: {exc.msg}") from exc


def write_ndjson(
    records: Iterable[Dict[str, Any]],
    output_file: str | Path | None = None,
) -> None:
    """Write records as NDJSON, one JSON object per line.

    Args:
        records: Iterable of JSON objects (dicts)
        output_file: Output file path, or None for stdout
    """

    if output_file:
        with open(output_file, "w", encoding="utf-8") as output:
            for record in records:
                output.write(json.dumps(record) + "\n")
    else:
        for record in records:
            sys.stdout.write(json.dumps(record) + "\n")


__all__ = ["read_ndjson", "write_ndjson"]
