"""emojiscan: catalog-driven emoji lookup, extraction and removal."""

from emojiscan.catalog import (
    CatalogError,
    CatalogLoadError,
    DuplicateSequenceError,
    catalog_from_emoji_package,
    filter_qualified,
    load_catalog,
    load_catalog_json,
    load_catalog_jsonl,
)
from emojiscan.config import ScanConfig
from emojiscan.emoji_types import Emoji, EmojiHit, Qualification
from emojiscan.index import EmojiIndex, build_index
from emojiscan.manager import EmojiManager, get_default_manager
from emojiscan.pattern import compile_emoji_pattern

__version__ = "0.1.0"

__all__ = [
    "CatalogError",
    "CatalogLoadError",
    "DuplicateSequenceError",
    "Emoji",
    "EmojiHit",
    "EmojiIndex",
    "EmojiManager",
    "Qualification",
    "ScanConfig",
    "build_index",
    "catalog_from_emoji_package",
    "compile_emoji_pattern",
    "filter_qualified",
    "get_default_manager",
    "load_catalog",
    "load_catalog_json",
    "load_catalog_jsonl",
]
