"""Runtime configuration for catalog selection.

The catalog source is picked once at startup. ``catalog_path`` of None
means the catalog shipped with the ``emoji`` distribution.
"""
from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import orjson

CATALOG_ENV_VAR = "EMOJISCAN_CATALOG"


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Catalog source selection."""

    catalog_path: Path | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ScanConfig:
        """Build from ``EMOJISCAN_CATALOG``; unset or blank means the default catalog."""
        env = os.environ if environ is None else environ
        raw = str(env.get(CATALOG_ENV_VAR, "") or "").strip()
        return cls(catalog_path=Path(raw) if raw else None)

    @classmethod
    def from_json(cls, path: Path) -> ScanConfig:
        """Load from a config file such as ``{"catalog_path": "emojis.json"}``.

        Relative catalog paths resolve against the config file's directory.
        """
        data: Any = orjson.loads(path.read_bytes())
        if not isinstance(data, dict):
            raise ValueError(f"Config payload must be a JSON object: {path}")
        raw = data.get("catalog_path")
        if raw is None or raw == "":
            return cls()
        if not isinstance(raw, str):
            raise ValueError(f"catalog_path must be a string, got {type(raw).__name__}")
        catalog_path = Path(raw)
        if not catalog_path.is_absolute():
            catalog_path = path.parent / catalog_path
        return cls(catalog_path=catalog_path)
