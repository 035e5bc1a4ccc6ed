"""Remove / replace operations over raw text.

Unlike the scanner these work on the text as given (no stripping). Empty
or ``None`` text always yields ``""``.
"""
from __future__ import annotations

from collections.abc import Iterable

from emojiscan.emoji_types import Emoji
from emojiscan.index import EmojiIndex, rank_length_desc


def remove_all_emojis(text: str | None, index: EmojiIndex) -> str:
    """Delete every catalog sequence, longest match first.

    Deleting a match can join its neighbours into a new sequence (``#``
    and a trailing U+FE0F U+20E3 become a keycap), so passes repeat until
    nothing matches. Each pass shortens the text, so the loop ends.
    """
    if not text:
        return ""
    while True:
        text, count = index.pattern.subn("", text)
        if not count:
            return text


def remove_emojis(text: str | None, to_remove: Iterable[Emoji]) -> str:
    """Delete every literal occurrence of each record, in the order given.

    Order only matters when one sequence contains another: removing 👍
    before 👍🏽 leaves the 🏽 behind.
    """
    if not text:
        return ""
    for record in to_remove:
        text = text.replace(record.emoji, "")
    return text


def remove_all_emojis_except(
    text: str | None, to_keep: Iterable[Emoji], index: EmojiIndex,
) -> str:
    """Delete every catalog sequence except ``to_keep``.

    Matches are taken longest first, so a kept 👍🏽 is left whole even
    though its 👍 and 🏽 parts are themselves catalog sequences. Like
    ``remove_all_emojis`` this repeats until no unkept match remains.
    """
    if not text:
        return ""
    keep = {record.emoji for record in to_keep}
    while True:
        stripped = index.pattern.sub(
            lambda m: m.group(0) if m.group(0) in keep else "", text,
        )
        if stripped == text:
            return text
        text = stripped


def replace_emojis(
    text: str | None, replacement: str, to_replace: Iterable[Emoji],
) -> str:
    """Literally replace each given record, longest sequence first.

    The replacement string is inserted verbatim (no group references).
    Each record is a separate ``str.replace`` pass, so emoji inside the
    replacement are rewritten too when a later record matches them:
    ``replace_emojis("😀", "[👍]", [😀, 👍])`` gives ``"[[👍]]"``.
    """
    if not text:
        return ""
    for record in rank_length_desc(to_replace):
        text = text.replace(record.emoji, replacement)
    return text


def replace_all_emojis(text: str | None, replacement: str, index: EmojiIndex) -> str:
    """Replace every catalog sequence, longest match first, in one pass.

    Inserted text is never scanned again, so a replacement that contains
    emoji comes through unchanged.
    """
    if not text:
        return ""
    return index.pattern.sub(lambda _m: replacement, text)
