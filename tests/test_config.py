"""Tests for emojiscan.config module."""
from pathlib import Path
from types import MappingProxyType

import pytest

from emojiscan.config import CATALOG_ENV_VAR, ScanConfig


class TestFromEnv:
    def test_unset(self) -> None:
        assert ScanConfig.from_env({}).catalog_path is None

    def test_blank(self) -> None:
        assert ScanConfig.from_env({CATALOG_ENV_VAR: "  "}).catalog_path is None

    def test_path(self) -> None:
        config = ScanConfig.from_env({CATALOG_ENV_VAR: "/data/emojis.json"})
        assert config.catalog_path == Path("/data/emojis.json")

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(CATALOG_ENV_VAR, "catalog.jsonl")
        assert ScanConfig.from_env().catalog_path == Path("catalog.jsonl")

    def test_accepts_read_only_mapping(self) -> None:
        env = MappingProxyType({CATALOG_ENV_VAR: "emojis.json"})
        assert ScanConfig.from_env(env).catalog_path == Path("emojis.json")


class TestFromJson:
    def test_relative_path_resolves_against_config_dir(self, tmp_path: Path) -> None:
        cfg = tmp_path / "emojiscan.json"
        cfg.write_text('{"catalog_path": "data/emojis.json"}', encoding="utf-8")
        assert ScanConfig.from_json(cfg).catalog_path == tmp_path / "data" / "emojis.json"

    def test_absolute_path_kept(self, tmp_path: Path) -> None:
        cfg = tmp_path / "emojiscan.json"
        target = tmp_path / "elsewhere.json"
        cfg.write_text(f'{{"catalog_path": "{target.as_posix()}"}}', encoding="utf-8")
        assert ScanConfig.from_json(cfg).catalog_path == target

    def test_missing_key_means_default(self, tmp_path: Path) -> None:
        cfg = tmp_path / "emojiscan.json"
        cfg.write_text("{}", encoding="utf-8")
        assert ScanConfig.from_json(cfg) == ScanConfig()

    def test_non_object_rejected(self, tmp_path: Path) -> None:
        cfg = tmp_path / "emojiscan.json"
        cfg.write_text("[]", encoding="utf-8")
        with pytest.raises(ValueError, match="JSON object"):
            ScanConfig.from_json(cfg)

    def test_non_string_path_rejected(self, tmp_path: Path) -> None:
        cfg = tmp_path / "emojiscan.json"
        cfg.write_text('{"catalog_path": 3}', encoding="utf-8")
        with pytest.raises(ValueError, match="must be a string"):
            ScanConfig.from_json(cfg)
