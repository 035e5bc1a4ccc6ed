#!/usr/bin/env python3
"""Find, strip or replace emoji in text.

Reads text from --text or stdin and writes a JSON result to stdout.
Diagnostics go to stderr.

Usage:
    # Emoji in order of appearance
    python3 scripts/emoji_scan.py extract --text "Hi 😀 there 😀!"

    # Distinct emoji, from stdin, against a custom catalog
    cat message.txt | python3 scripts/emoji_scan.py extract-set --catalog emojis.json

    # Strip or replace
    python3 scripts/emoji_scan.py remove --text "Hi 😀!"
    python3 scripts/emoji_scan.py replace --text "Hi 😀!" --replacement "[emoji]"
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from emojiscan.catalog import CatalogError
from emojiscan.config import ScanConfig
from emojiscan.emoji_types import Emoji
from emojiscan.io_utils import dumps_json
from emojiscan.manager import EmojiManager

log = logging.getLogger("emoji_scan")

MODES = ("extract", "extract-set", "contains", "remove", "replace")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find, strip or replace emoji in text."
    )
    parser.add_argument("mode", choices=MODES, help="Operation to run")
    parser.add_argument(
        "--text", default=None, help="Input text (default: read stdin)"
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="JSON/JSONL catalog file (default: $EMOJISCAN_CATALOG, then the emoji package)",
    )
    parser.add_argument(
        "--replacement",
        default="",
        help="Replacement string for 'replace' mode (default: empty)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Verbose logging"
    )
    return parser


def emoji_to_dict(record: Emoji) -> dict[str, Any]:
    """JSON-serializable view of a catalog record."""
    return {
        "emoji": record.emoji,
        "codepoints": [f"U+{cp:04X}" for cp in record.codepoints],
        "qualification": record.qualification,
        "aliases": sorted(record.aliases),
    }


def run_mode(manager: EmojiManager, mode: str, text: str, replacement: str = "") -> Any:
    """Run one mode and return its JSON-serializable result."""
    if mode == "extract":
        return [emoji_to_dict(e) for e in manager.extract_emojis_in_order(text)]
    if mode == "extract-set":
        found = sorted(manager.extract_emojis(text), key=lambda e: e.emoji)
        return [emoji_to_dict(e) for e in found]
    if mode == "contains":
        return {"contains_emoji": manager.contains_emoji(text)}
    if mode == "remove":
        return {"text": manager.remove_all_emojis(text)}
    if mode == "replace":
        return {"text": manager.replace_all_emojis(text, replacement)}
    raise ValueError(f"Unknown mode: {mode!r}")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = ScanConfig(catalog_path=args.catalog) if args.catalog else ScanConfig.from_env()
    try:
        manager = EmojiManager.from_config(config)
    except CatalogError as exc:
        log.error("Catalog initialization failed: %s", exc)
        return 1

    text = args.text if args.text is not None else sys.stdin.read()
    result = run_mode(manager, args.mode, text, args.replacement)
    log.debug("Mode %s over %d chars", args.mode, len(text))
    sys.stdout.buffer.write(dumps_json(result))
    sys.stdout.buffer.write(b"\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
