"""Tool configuration dataclass.

Loaded from ``.mcm-meta.yaml`` in the mod directory when present, or from
an explicit ``--config`` path.  Every field has a default, so the file is
optional and may list only the settings it changes::

    duplicate_keys: warn
    extra_baseline_keys: ["$MyFrameworkKey"]
    extra_json_sources: ["SKSE/Plugins/MyPlugin/labels.json"]
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from mcm_meta_helper.model import DuplicateKeyPolicy

CONFIG_FILENAMES = (".mcm-meta.yaml", ".mcm-meta.yml")

# 8 MiB of decoded UTF-8; a real translation file is a few hundred KiB.
DEFAULT_MAX_DECODED_BYTES = 8 * 1024 * 1024


@dataclass(frozen=True)
class HelperConfig:
    """Immutable tool configuration."""

    duplicate_keys: DuplicateKeyPolicy = DuplicateKeyPolicy.LAST_WINS
    # Terminator for every line this tool writes.  Existing lines keep theirs.
    line_terminator: str = "\r\n"
    stub_header: str = "---------- new translation stubs ----------"
    extra_baseline_keys: tuple[str, ...] = ()
    extra_json_sources: tuple[str, ...] = ()
    max_decoded_bytes: int = DEFAULT_MAX_DECODED_BYTES
    grid_width: int = 20

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "HelperConfig":
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = str(key).replace("-", "_")
            if name not in known:
                continue
            if name == "duplicate_keys":
                value = DuplicateKeyPolicy(value)
            elif name in ("extra_baseline_keys", "extra_json_sources"):
                value = tuple(str(v) for v in value or ())
            elif name in ("max_decoded_bytes", "grid_width"):
                value = int(value)
            kwargs[name] = value
        return cls(**kwargs)

    @classmethod
    def from_yaml(cls, path: Path) -> "HelperConfig":
        """Load configuration from a YAML file."""
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a mapping at the top level")
        return cls.from_mapping(data)

    @classmethod
    def discover(cls, moddir: Path) -> "HelperConfig":
        """Load the first config file found in *moddir*, else the defaults."""
        for name in CONFIG_FILENAMES:
            candidate = moddir / name
            if candidate.is_file():
                return cls.from_yaml(candidate)
        return cls()
