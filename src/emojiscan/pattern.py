"""Compiled alternation pattern over the whole catalog.

Python's ``re`` alternation is leftmost-first: at each start position the
first listed branch that matches wins. Listing the sequences longest first
therefore reproduces the scanner's leftmost-longest choice.
"""
from __future__ import annotations

import re
from collections.abc import Iterable

from emojiscan.emoji_types import Emoji

# Matches nothing; used for an empty catalog.
_NEVER = r"(?!)"


def compile_emoji_pattern(records_length_desc: Iterable[Emoji]) -> re.Pattern[str]:
    """Compile one pattern from records already ranked longest-first."""
    terms = [re.escape(record.emoji) for record in records_length_desc]
    return re.compile("|".join(terms) if terms else _NEVER)
