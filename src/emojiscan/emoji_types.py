"""Core types shared by the catalog, index and scanner layers.

Type hierarchy:
  Qualification : Unicode qualification status of a catalog sequence
  Emoji : One catalog record (identity = its sequence string)
  EmojiHit : A scanner match at a specific offset
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, TypeAlias


Qualification: TypeAlias = Literal[
    "fully-qualified",
    "component",
    "minimally-qualified",
    "unqualified",
]

QUALIFICATIONS: tuple[Qualification, ...] = (
    "fully-qualified",
    "component",
    "minimally-qualified",
    "unqualified",
)

# Statuses that survive the catalog filter; the rest are non-canonical variants.
ACTIVE_QUALIFICATIONS: frozenset[Qualification] = frozenset(
    {"fully-qualified", "component"}
)


@dataclass(frozen=True, slots=True)
class Emoji:
    """A single catalog record.

    Equality and hashing use ``emoji`` only: the sequence string is the
    record's identity, so two records with the same sequence are the same
    emoji regardless of their alias lists.
    """

    emoji: str
    qualification: Qualification = field(default="fully-qualified", compare=False)
    aliases: frozenset[str] = field(default_factory=frozenset[str], compare=False)
    discord_aliases: frozenset[str] = field(default_factory=frozenset[str], compare=False)
    github_aliases: frozenset[str] = field(default_factory=frozenset[str], compare=False)
    slack_aliases: frozenset[str] = field(default_factory=frozenset[str], compare=False)

    def __post_init__(self) -> None:
        if not self.emoji:
            raise ValueError("Emoji sequence cannot be empty")
        if self.qualification not in QUALIFICATIONS:
            raise ValueError(f"Unknown qualification: {self.qualification!r}")

    @property
    def all_aliases(self) -> frozenset[str]:
        """Union of every alias scheme."""
        return self.aliases | self.discord_aliases | self.github_aliases | self.slack_aliases

    @property
    def codepoints(self) -> tuple[int, ...]:
        return tuple(ord(ch) for ch in self.emoji)

    def __len__(self) -> int:
        return len(self.emoji)

    def __str__(self) -> str:
        return self.emoji


@dataclass(frozen=True, slots=True)
class EmojiHit:
    """A scanner match. Offsets index the preprocessed (stripped) text."""

    emoji: Emoji
    char_offset: int

    def __post_init__(self) -> None:
        if self.char_offset < 0:
            raise ValueError(f"char_offset must be >= 0, got {self.char_offset}")

    @property
    def char_end(self) -> int:
        return self.char_offset + len(self.emoji.emoji)
