"""Load RelistConfig from relist.yaml if present.

Merges file config with keyword overrides. Overrides win.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from relist.config import RelistConfig

if TYPE_CHECKING:
    from pathlib import Path

_CONFIG_KEYS = frozenset({"strict", "lookup", "report_errors", "profile", "max_events"})


def load_config(root: Path, **overrides: object) -> RelistConfig:
    """Load RelistConfig from root, optionally merging relist.yaml.

    Looks for relist.yaml, relist.yml, or relist.toml in root. If found, loads
    and merges with overrides. Overrides take precedence.
    """
    file_config = _read_relist_config(root)
    merged = {**file_config, **overrides}
    return RelistConfig(**merged)  # type: ignore[arg-type]


def _read_relist_config(root: Path) -> dict[str, object]:
    """Read relist config from yaml/toml if present. Returns empty dict otherwise."""
    for name in ("relist.yaml", "relist.yml"):
        path = root / name
        if path.is_file():
            return _parse_yaml(path)
    toml_path = root / "relist.toml"
    if toml_path.is_file():
        return _parse_toml(toml_path)
    return {}


def _parse_yaml(path: Path) -> dict[str, object]:
    """Parse YAML config. Returns empty dict on error."""
    import yaml

    try:
        data = yaml.safe_load(path.read_text()) or {}
    except (OSError, yaml.YAMLError):
        return {}
    if not isinstance(data, dict):
        return {}
    return _flatten_relist_section(data)


def _parse_toml(path: Path) -> dict[str, object]:
    """Parse TOML config. Returns empty dict on error."""
    import tomllib

    try:
        data = tomllib.loads(path.read_text())
    except (OSError, tomllib.TOMLDecodeError):
        return {}
    return _flatten_relist_section(data)


def _flatten_relist_section(data: dict[str, object]) -> dict[str, object]:
    """Extract relist.* keys into top-level config.

    Unknown keys are dropped so a typo in the file never breaks construction.
    """
    result: dict[str, object] = {}
    for k, v in data.items():
        if k in _CONFIG_KEYS:
            result[k] = v
    section = data.get("relist")
    if isinstance(section, dict):
        for k, v in section.items():
            if k in _CONFIG_KEYS:
                result[k] = v
    return result
