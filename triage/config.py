# word_triage/triage/config.py
"""Typed configuration for a triage run.

Configuration is optional. Without a file, :class:`TriageConfig` defaults
apply and the category files are looked up in the current working directory.
A YAML file (see ``configs/default.yaml``) may override them under a
``triage`` stanza:

```yaml
triage:
  known_path: known.txt
  unknown_path: unknown.txt
  skip_path: skip.txt
  sort_unknown: false
  keys:
    known: ["y"]
    unknown: ["n", " "]
    skip: ["s"]
```

Relative paths in the file are resolved against the file's own directory.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from .persistence import CategoryPaths
from .prompter import KeyBindings


_ALLOWED_KEYS = {"known_path", "unknown_path", "skip_path", "sort_unknown", "keys"}
_ALLOWED_BINDINGS = {"known", "unknown", "skip"}


@dataclass
class TriageConfig:
    """Options controlling a single triage run."""

    input_path: Path
    paths: CategoryPaths = field(default_factory=CategoryPaths)
    keys: KeyBindings = field(default_factory=KeyBindings)
    sort_unknown: bool = False


def load_config(input_path: Path, config_path: Path | None = None) -> TriageConfig:
    """Return the run configuration, reading ``config_path`` when given."""

    if config_path is None:
        return TriageConfig(input_path=Path(input_path))

    config_path = Path(config_path).expanduser().resolve()
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")
    config_data = _load_yaml(config_path)
    triage_cfg = config_data.get("triage")
    if triage_cfg is None:
        raise KeyError(f"'triage' section not found in configuration {config_path}")
    return _parse_triage_config(triage_cfg, Path(input_path), config_path.parent)


def _load_yaml(path: Path) -> Mapping[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, Mapping):
        raise ValueError(f"Configuration must be a YAML mapping: {path}")
    return data


def _resolve_path(base_dir: Path, value: str) -> Path:
    candidate = Path(value).expanduser()
    if not candidate.is_absolute():
        candidate = (base_dir / candidate).resolve()
    return candidate


def _parse_triage_config(config: Mapping[str, Any], input_path: Path, base_dir: Path) -> TriageConfig:
    if not isinstance(config, Mapping):
        raise ValueError("'triage' section must be a mapping.")
    unexpected = set(config) - _ALLOWED_KEYS
    if unexpected:
        raise ValueError(f"Unknown triage option(s): {', '.join(sorted(unexpected))}")

    defaults = CategoryPaths()
    paths = CategoryPaths(
        known=_resolve_path(base_dir, _path_option(config, "known_path", defaults.known)),
        unknown=_resolve_path(base_dir, _path_option(config, "unknown_path", defaults.unknown)),
        skip=_resolve_path(base_dir, _path_option(config, "skip_path", defaults.skip)),
    )

    sort_unknown = config.get("sort_unknown", False)
    if not isinstance(sort_unknown, bool):
        raise ValueError(f"'sort_unknown' must be true or false, got {sort_unknown!r}")

    return TriageConfig(
        input_path=input_path,
        paths=paths,
        keys=_parse_key_bindings(config.get("keys") or {}),
        sort_unknown=sort_unknown,
    )


def _path_option(config: Mapping[str, Any], name: str, default: Path) -> str:
    value = config.get(name, str(default))
    if not isinstance(value, str) or not value:
        raise ValueError(f"'{name}' must be a path string, got {value!r}")
    return value


def _parse_key_bindings(config: Mapping[str, Any]) -> KeyBindings:
    if not isinstance(config, Mapping):
        raise ValueError("'keys' must be a mapping of category to key list.")
    unexpected = set(config) - _ALLOWED_BINDINGS
    if unexpected:
        raise ValueError(f"Unknown key binding(s): {', '.join(sorted(unexpected))}")

    kwargs: dict[str, tuple[str, ...]] = {}
    for name, keys in config.items():
        if isinstance(keys, str):
            keys = [keys]
        if not isinstance(keys, (list, tuple)):
            raise ValueError(f"Key binding for '{name}' must be a list of characters.")
        kwargs[name] = tuple(str(key) for key in keys)
    return KeyBindings(**kwargs)


__all__ = [
    "TriageConfig",
    "load_config",
]
