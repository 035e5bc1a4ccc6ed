"""Tests for scripts/emoji_scan.py."""
import io
from pathlib import Path

import orjson
import pytest

from emojiscan.config import CATALOG_ENV_VAR, ScanConfig
from emojiscan.emoji_types import Emoji
from emojiscan.manager import EmojiManager
from scripts.emoji_scan import build_parser, emoji_to_dict, main, run_mode

CATALOG = Path(__file__).resolve().parent / "fixtures" / "emoji_catalog.json"
THUMBS = "\U0001F44D"
TONE = "\U0001F3FD"
GRIN = "\U0001F600"


def _manager() -> EmojiManager:
    return EmojiManager.from_config(ScanConfig(catalog_path=CATALOG))


class TestBuildParser:
    def test_defaults(self) -> None:
        args = build_parser().parse_args(["extract"])
        assert args.mode == "extract"
        assert args.text is None
        assert args.catalog is None
        assert args.replacement == ""

    def test_rejects_unknown_mode(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["explode"])


class TestEmojiToDict:
    def test_fields(self) -> None:
        d = emoji_to_dict(Emoji(THUMBS + TONE, aliases=frozenset({"b", "a"})))
        assert d == {
            "emoji": THUMBS + TONE,
            "codepoints": ["U+1F44D", "U+1F3FD"],
            "qualification": "fully-qualified",
            "aliases": ["a", "b"],
        }


class TestRunMode:
    def test_extract(self) -> None:
        result = run_mode(_manager(), "extract", "a" + GRIN + THUMBS + TONE + GRIN)
        assert [r["emoji"] for r in result] == [GRIN, THUMBS + TONE, GRIN]

    def test_extract_set(self) -> None:
        result = run_mode(_manager(), "extract-set", GRIN + GRIN)
        assert [r["emoji"] for r in result] == [GRIN]

    def test_contains(self) -> None:
        assert run_mode(_manager(), "contains", "no") == {"contains_emoji": False}

    def test_remove(self) -> None:
        assert run_mode(_manager(), "remove", "Hi " + GRIN + "!") == {"text": "Hi !"}

    def test_replace(self) -> None:
        assert run_mode(_manager(), "replace", GRIN + "!", "<e>") == {"text": "<e>!"}

    def test_unknown_mode(self) -> None:
        with pytest.raises(ValueError):
            run_mode(_manager(), "explode", "")


class TestMain:
    def test_writes_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["remove", "--text", "Hi " + GRIN + "!", "--catalog", str(CATALOG)])
        assert code == 0
        out = capsys.readouterr().out
        assert orjson.loads(out) == {"text": "Hi !"}

    def test_reads_stdin_and_env(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv(CATALOG_ENV_VAR, str(CATALOG))
        monkeypatch.setattr("sys.stdin", io.StringIO(THUMBS + TONE))
        assert main(["extract"]) == 0
        out = orjson.loads(capsys.readouterr().out)
        assert [r["emoji"] for r in out] == [THUMBS + TONE]

    def test_bad_catalog_exits_nonzero(self, tmp_path: Path) -> None:
        assert main(["extract", "--text", "x", "--catalog", str(tmp_path / "none.json")]) == 1
