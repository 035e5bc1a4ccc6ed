"""Greedy leftmost-longest emoji scanner.

Pure text operations over an EmojiIndex. The scan walks the text once;
at each position it tries the candidates for the current codepoint longest
first and consumes the first full match, so a base emoji never shadows a
longer sequence that extends it (👍 vs 👍🏽).
"""
from __future__ import annotations

import regex

from emojiscan.emoji_types import Emoji, EmojiHit
from emojiscan.index import EmojiIndex

# ASCII letters and Unicode separators (Zs, Zl, Zp) never occur inside a
# catalog sequence. The letter class is ASCII-only: ℹ and 🅰 are Unicode
# alphabetic and must survive.
NOT_EMOJI_CHARS = regex.compile(r"[A-Za-z\p{Z}]")


def strip_non_emoji_chars(text: str | None) -> str:
    """Remove ASCII letters and separators. ``None`` becomes ``""``."""
    if not text:
        return ""
    return NOT_EMOJI_CHARS.sub("", text)


def _matches_at(text: str, start: int, sequence: str) -> bool:
    for offset, unit in enumerate(sequence):
        if text[start + offset] != unit:
            return False
    return True


def scan_hits(text: str | None, index: EmojiIndex) -> list[EmojiHit]:
    """Find non-overlapping emoji in left-to-right order.

    The text is stripped with ``strip_non_emoji_chars`` first, so emoji
    separated only by letters or spaces still match as contiguous
    sequences. Hit offsets index the stripped text.

    Args:
        text: Arbitrary text; ``None`` or empty yields no hits.
        index: Catalog index to match against.

    Returns:
        Hits with strictly increasing, non-overlapping spans. Repeated
        emoji produce repeated hits.
    """
    stripped = strip_non_emoji_chars(text)
    if not stripped:
        return []

    hits: list[EmojiHit] = []
    text_len = len(stripped)
    i = 0
    while i < text_len:
        matched = 0
        for candidate in index.candidates(stripped[i]):
            length = len(candidate.emoji)
            if i + length > text_len:
                continue
            if _matches_at(stripped, i, candidate.emoji):
                hits.append(EmojiHit(candidate, i))
                matched = length
                break
        i += matched or 1
    return hits


def extract_emojis_in_order(text: str | None, index: EmojiIndex) -> list[Emoji]:
    """Emoji in text order, duplicates included."""
    return [hit.emoji for hit in scan_hits(text, index)]


def extract_emojis(text: str | None, index: EmojiIndex) -> set[Emoji]:
    """Distinct emoji found in text."""
    return set(extract_emojis_in_order(text, index))


def contains_emoji(text: str | None, index: EmojiIndex) -> bool:
    """True if any catalog sequence occurs literally in text."""
    if not text:
        return False
    return any(sequence in text for sequence in index.exact)


def get_emoji(sequence: str | None, index: EmojiIndex) -> Emoji | None:
    """Exact lookup; ``None`` when absent or when the input is empty."""
    if not sequence:
        return None
    return index.exact.get(sequence)


def is_emoji(sequence: str | None, index: EmojiIndex) -> bool:
    if not sequence:
        return False
    return sequence in index.exact
