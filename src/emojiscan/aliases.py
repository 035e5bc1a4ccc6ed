"""Alias lookups (``:thumbsup:`` style shortcodes).

Linear scans in catalog order; the first record carrying the alias wins.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Literal, TypeAlias

from emojiscan.catalog import strip_alias_colons
from emojiscan.emoji_types import Emoji

AliasScheme: TypeAlias = Literal["any", "discord", "github", "slack"]

_SCHEME_FIELDS: dict[AliasScheme, Callable[[Emoji], frozenset[str]]] = {
    "any": lambda e: e.all_aliases,
    "discord": lambda e: e.discord_aliases,
    "github": lambda e: e.github_aliases,
    "slack": lambda e: e.slack_aliases,
}


def find_by_alias(
    alias: str | None, records: Iterable[Emoji], *, scheme: AliasScheme = "any",
) -> Emoji | None:
    """Return the first record whose ``scheme`` aliases contain ``alias``.

    ``scheme="any"`` searches the union of every alias list.
    """
    if not alias:
        return None
    name = strip_alias_colons(alias)
    aliases_of = _SCHEME_FIELDS[scheme]
    return next((record for record in records if name in aliases_of(record)), None)
