"""EmojiManager: the public facade over one immutable catalog index.

Build once, read many::

    manager = EmojiManager.from_config(ScanConfig.from_env())
    manager.extract_emojis_in_order("Hi 😀 there 😀!")

``get_default_manager()`` returns a process-wide instance built on first
use from ``ScanConfig.from_env()``. Every method is a pure read, so one
manager can be shared across threads.
"""
from __future__ import annotations

import logging
import re
import threading
from collections.abc import Iterable

from emojiscan import aliases, bulk, scanner
from emojiscan.catalog import filter_qualified, load_catalog
from emojiscan.config import ScanConfig
from emojiscan.emoji_types import Emoji, EmojiHit
from emojiscan.index import EmojiIndex, build_index

log = logging.getLogger(__name__)


class EmojiManager:
    """Lookup, extraction, removal and replacement over a fixed catalog."""

    __slots__ = ("_index",)

    def __init__(self, index: EmojiIndex) -> None:
        self._index = index

    @classmethod
    def from_records(cls, records: Iterable[Emoji]) -> EmojiManager:
        """Filter to fully-qualified/component records and index them."""
        return cls(build_index(filter_qualified(records)))

    @classmethod
    def from_config(cls, config: ScanConfig | None = None) -> EmojiManager:
        """Load the configured catalog and index it. Raises CatalogError."""
        return cls(build_index(load_catalog(config)))

    @property
    def index(self) -> EmojiIndex:
        return self._index

    def __len__(self) -> int:
        return len(self._index)

    # -- lookups ----------------------------------------------------------

    def get_emoji(self, sequence: str | None) -> Emoji | None:
        return scanner.get_emoji(sequence, self._index)

    def is_emoji(self, sequence: str | None) -> bool:
        return scanner.is_emoji(sequence, self._index)

    def get_all_emojis(self) -> frozenset[Emoji]:
        return frozenset(self._index.length_desc)

    def get_all_emojis_length_descending(self) -> tuple[Emoji, ...]:
        return self._index.length_desc

    def get_by_alias(self, alias: str | None) -> Emoji | None:
        """Search every alias scheme; surrounding colons are optional."""
        return aliases.find_by_alias(alias, self._index.exact.values())

    def get_by_discord_alias(self, alias: str | None) -> Emoji | None:
        return aliases.find_by_alias(alias, self._index.exact.values(), scheme="discord")

    def get_by_github_alias(self, alias: str | None) -> Emoji | None:
        return aliases.find_by_alias(alias, self._index.exact.values(), scheme="github")

    def get_by_slack_alias(self, alias: str | None) -> Emoji | None:
        return aliases.find_by_alias(alias, self._index.exact.values(), scheme="slack")

    @property
    def emoji_pattern(self) -> re.Pattern[str]:
        """Alternation of every sequence, longest first, for ``re`` consumers."""
        return self._index.pattern

    # -- extraction -------------------------------------------------------

    def contains_emoji(self, text: str | None) -> bool:
        return scanner.contains_emoji(text, self._index)

    def scan(self, text: str | None) -> list[EmojiHit]:
        """Hits with offsets into the letter/separator-stripped text."""
        return scanner.scan_hits(text, self._index)

    def extract_emojis_in_order(self, text: str | None) -> list[Emoji]:
        return scanner.extract_emojis_in_order(text, self._index)

    def extract_emojis(self, text: str | None) -> set[Emoji]:
        return scanner.extract_emojis(text, self._index)

    # -- removal / replacement -------------------------------------------

    def remove_all_emojis(self, text: str | None) -> str:
        return bulk.remove_all_emojis(text, self._index)

    def remove_emojis(self, text: str | None, to_remove: Iterable[Emoji]) -> str:
        return bulk.remove_emojis(text, to_remove)

    def remove_all_emojis_except(self, text: str | None, to_keep: Iterable[Emoji]) -> str:
        return bulk.remove_all_emojis_except(text, to_keep, self._index)

    def replace_all_emojis(self, text: str | None, replacement: str) -> str:
        return bulk.replace_all_emojis(text, replacement, self._index)

    def replace_emojis(
        self, text: str | None, replacement: str, to_replace: Iterable[Emoji],
    ) -> str:
        return bulk.replace_emojis(text, replacement, to_replace)


_default_manager: EmojiManager | None = None
_default_lock = threading.Lock()


def get_default_manager() -> EmojiManager:
    """Process-wide manager, built once from ``ScanConfig.from_env()``.

    A failed build raises CatalogError and caches nothing, so a half-built
    index is never shared.
    """
    global _default_manager
    if _default_manager is None:
        with _default_lock:
            if _default_manager is None:
                manager = EmojiManager.from_config(ScanConfig.from_env())
                log.info("Default emoji catalog ready (%d emoji)", len(manager))
                _default_manager = manager
    return _default_manager
