"""I/O utilities for JSON and JSONL catalog files.

orjson-backed readers that always hand back plain Python containers.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import orjson


def load_json(path: Path) -> Any:
    """Load JSON from a file."""
    return orjson.loads(path.read_bytes())


def load_jsonl(path: Path) -> list[dict[str, Any]]:
    """Load a JSON Lines file (one JSON object per line). Blank lines skipped."""
    records: list[dict[str, Any]] = []
    for line in path.read_bytes().split(b"\n"):
        line = line.strip()
        if line:
            records.append(orjson.loads(line))
    return records


def dumps_json(obj: Any, *, pretty: bool = True) -> bytes:
    """Serialize an object to JSON bytes (UTF-8, emoji left unescaped)."""
    opts = orjson.OPT_INDENT_2 if pretty else 0
    return orjson.dumps(obj, option=opts)
