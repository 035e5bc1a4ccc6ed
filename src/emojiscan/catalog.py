"""Catalog loading and qualification filtering.

Records come from one of two providers:
  - a JSON / JSONL catalog file (one object per emoji)
  - the ``emoji`` distribution's ``EMOJI_DATA`` table

Every load failure is a ``CatalogLoadError``. These are initialization
errors: callers are expected to let them abort startup.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import orjson

from emojiscan.config import ScanConfig
from emojiscan.emoji_types import (
    ACTIVE_QUALIFICATIONS,
    QUALIFICATIONS,
    Emoji,
    Qualification,
)
from emojiscan.io_utils import load_json, load_jsonl

log = logging.getLogger(__name__)

_ALIAS_FIELDS: dict[str, tuple[str, str]] = {
    "aliases": ("aliases", "aliases"),
    "discord_aliases": ("discordAliases", "discord_aliases"),
    "github_aliases": ("githubAliases", "github_aliases"),
    "slack_aliases": ("slackAliases", "slack_aliases"),
}


class CatalogError(RuntimeError):
    """Base class for fatal catalog initialization failures."""


class CatalogLoadError(CatalogError):
    """Raised when a catalog is missing, unreadable or malformed."""


class DuplicateSequenceError(CatalogError):
    """Raised when two retained records share one emoji sequence."""


def strip_alias_colons(alias: str) -> str:
    """Drop one pair of surrounding ``:`` delimiters (``:thumbsup:`` -> ``thumbsup``)."""
    if len(alias) >= 2 and alias.startswith(":") and alias.endswith(":"):
        return alias[1:-1]
    return alias


def normalize_qualification(raw: Any) -> Qualification:
    """Map ``FULLY_QUALIFIED`` / ``fully_qualified`` / ``fully-qualified`` to one spelling."""
    if not isinstance(raw, str):
        raise CatalogLoadError(f"Qualification must be a string, got {raw!r}")
    value = raw.strip().lower().replace("_", "-")
    for qualification in QUALIFICATIONS:
        if qualification == value:
            return qualification
    raise CatalogLoadError(f"Unknown qualification: {raw!r}")


def _alias_set(raw: Any, *, field_name: str) -> frozenset[str]:
    if raw is None:
        return frozenset()
    if isinstance(raw, str) or not isinstance(raw, Iterable):
        raise CatalogLoadError(f"{field_name} must be a list of strings")
    names: set[str] = set()
    for alias in raw:
        if not isinstance(alias, str):
            raise CatalogLoadError(f"{field_name} must be a list of strings")
        name = strip_alias_colons(alias.strip())
        if name:
            names.add(name)
    return frozenset(names)


def emoji_from_dict(payload: Mapping[str, Any]) -> Emoji:
    """Build an Emoji from one catalog record.

    Accepts ``emoji`` or ``sequence`` for the sequence and camelCase or
    snake_case alias keys. Unknown keys are ignored.
    """
    sequence = payload.get("emoji", payload.get("sequence"))
    if not isinstance(sequence, str) or not sequence:
        raise CatalogLoadError(f"Catalog record has no emoji sequence: {dict(payload)!r}")
    alias_kwargs: dict[str, frozenset[str]] = {}
    for attr, (camel, snake) in _ALIAS_FIELDS.items():
        raw = payload.get(camel, payload.get(snake))
        alias_kwargs[attr] = _alias_set(raw, field_name=camel)
    return Emoji(
        emoji=sequence,
        qualification=normalize_qualification(payload.get("qualification", "fully-qualified")),
        **alias_kwargs,
    )


def emojis_from_records(records: Any) -> list[Emoji]:
    """Convert a decoded catalog payload (a list of objects) into records."""
    if not isinstance(records, list):
        raise CatalogLoadError("Catalog payload must be a JSON array of records")
    emojis: list[Emoji] = []
    for i, record in enumerate(records):
        if not isinstance(record, dict):
            raise CatalogLoadError(f"Catalog record {i} must be an object")
        emojis.append(emoji_from_dict(record))
    return emojis


def filter_qualified(records: Iterable[Emoji]) -> list[Emoji]:
    """Keep fully-qualified and component records, preserving catalog order."""
    return [r for r in records if r.qualification in ACTIVE_QUALIFICATIONS]


def load_catalog_json(path: Path) -> list[Emoji]:
    """Load every record (unfiltered) from a JSON array file."""
    if not path.is_file():
        raise CatalogLoadError(f"Catalog file not found: {path}")
    try:
        payload = load_json(path)
    except (OSError, orjson.JSONDecodeError) as exc:
        raise CatalogLoadError(f"Catalog file is not valid JSON: {path} ({exc})") from exc
    records = emojis_from_records(payload)
    log.debug("Read %d catalog records from %s", len(records), path)
    return records


def load_catalog_jsonl(path: Path) -> list[Emoji]:
    """Load every record (unfiltered) from a JSON Lines file."""
    if not path.is_file():
        raise CatalogLoadError(f"Catalog file not found: {path}")
    try:
        payload = load_jsonl(path)
    except (OSError, orjson.JSONDecodeError) as exc:
        raise CatalogLoadError(f"Catalog file is not valid JSONL: {path} ({exc})") from exc
    records = emojis_from_records(payload)
    log.debug("Read %d catalog records from %s", len(records), path)
    return records


def catalog_from_emoji_package() -> list[Emoji]:
    """Build records from the ``emoji`` distribution's EMOJI_DATA table.

    The English name and the ``alias`` list both become generic aliases;
    the package carries no platform-specific alias schemes.
    """
    import emoji as emoji_pkg

    status_names = {value: name for name, value in emoji_pkg.STATUS.items()}
    records: list[Emoji] = []
    for sequence, data in emoji_pkg.EMOJI_DATA.items():
        status = data.get("status")
        raw_status = status_names.get(status, status)
        names = [data.get("en", ""), *data.get("alias", [])]
        records.append(
            Emoji(
                emoji=sequence,
                qualification=normalize_qualification(raw_status),
                aliases=_alias_set(names, field_name="alias"),
            )
        )
    log.debug("Read %d catalog records from the emoji package", len(records))
    return records


def load_catalog(config: ScanConfig | None = None) -> list[Emoji]:
    """Load and filter the catalog selected by ``config``."""
    config = config or ScanConfig()
    path = config.catalog_path
    if path is None:
        raw = catalog_from_emoji_package()
        source = "emoji package"
    elif path.suffix.lower() == ".jsonl":
        raw = load_catalog_jsonl(path)
        source = str(path)
    else:
        raw = load_catalog_json(path)
        source = str(path)
    records = filter_qualified(raw)
    log.info(
        "Loaded %d emoji (%d filtered out) from %s",
        len(records), len(raw) - len(records), source,
    )
    return records
