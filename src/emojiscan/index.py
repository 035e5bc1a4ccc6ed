"""Immutable lookup structures built once from a filtered catalog.

  exact : sequence -> record
  length_desc : every record, longest sequence first
  by_first_unit : first codepoint -> candidate records, longest first
  pattern : compiled alternation (see emojiscan.pattern)

All rankings use ``length_rank``: sequence length descending, ties kept in
catalog order (``sorted`` is stable).
"""
from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from emojiscan.catalog import DuplicateSequenceError
from emojiscan.emoji_types import Emoji
from emojiscan.pattern import compile_emoji_pattern

log = logging.getLogger(__name__)


def length_rank(record: Emoji) -> int:
    """Sort key: longer sequences first."""
    return -len(record.emoji)


def rank_length_desc(records: Iterable[Emoji]) -> list[Emoji]:
    return sorted(records, key=length_rank)


@dataclass(frozen=True, slots=True)
class EmojiIndex:
    """Read-only index over one catalog."""

    exact: Mapping[str, Emoji]
    length_desc: tuple[Emoji, ...]
    by_first_unit: Mapping[str, tuple[Emoji, ...]]
    pattern: re.Pattern[str]

    def __len__(self) -> int:
        return len(self.length_desc)

    def candidates(self, unit: str) -> tuple[Emoji, ...]:
        """Records starting with ``unit``, longest first (empty if none)."""
        return self.by_first_unit.get(unit, ())


def build_exact_map(records: Iterable[Emoji]) -> dict[str, Emoji]:
    """Map sequence -> record, failing on the first duplicate sequence."""
    exact: dict[str, Emoji] = {}
    for record in records:
        if record.emoji in exact:
            raise DuplicateSequenceError(
                f"Duplicate emoji sequence in catalog: {record.emoji!r} "
                f"(codepoints {[hex(cp) for cp in record.codepoints]})"
            )
        exact[record.emoji] = record
    return exact


def group_by_first_unit(records_length_desc: Iterable[Emoji]) -> dict[str, tuple[Emoji, ...]]:
    """Group ranked records by first codepoint; each group keeps the ranking."""
    groups: dict[str, list[Emoji]] = {}
    for record in records_length_desc:
        groups.setdefault(record.emoji[0], []).append(record)
    return {unit: tuple(group) for unit, group in groups.items()}


def build_index(records: Iterable[Emoji]) -> EmojiIndex:
    """Build every lookup structure from already-filtered records."""
    records = list(records)
    exact = build_exact_map(records)
    length_desc = tuple(rank_length_desc(records))
    by_first_unit = group_by_first_unit(length_desc)
    index = EmojiIndex(
        exact=MappingProxyType(exact),
        length_desc=length_desc,
        by_first_unit=MappingProxyType(by_first_unit),
        pattern=compile_emoji_pattern(length_desc),
    )
    log.debug(
        "Built emoji index: %d records, %d first units, longest sequence %d",
        len(length_desc), len(by_first_unit),
        len(length_desc[0].emoji) if length_desc else 0,
    )
    return index
