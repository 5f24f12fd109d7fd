"""
Configuration loading and merging for vercmp.

Comparison settings come from three layers, later layers winning:

1. **Built-in defaults** (`DEFAULT_CONFIG`)
   - Default parser, no depth limit, text segments kept

2. **Config file** (YAML, optional)
   - Project-wide settings, e.g. checked into a repository as vercmp.yaml

3. **Overrides** (dict, optional)
   - Usually built from CLI flags (--parser, --max-depth, --ignore-text)

File Format
-----------
    parser: pep440
    manifest:
      max_depth: 3
      ignore_text: false

Merge Behavior
--------------
  - **Dicts**: Recursively merged (keys from overlay override base)
  - **Scalars**: Overwritten (strings, numbers, booleans, null)

Error Handling
--------------
Every problem (missing file, YAML syntax, unknown key, wrong type, unknown
parser) raises ConfigError, chained with "from err" where there is a cause.

Examples
--------
    >>> from pathlib import Path
    >>> from vercmp.config import load_config
    >>> cfg = load_config(Path("vercmp.yaml"), overrides={"manifest": {"max_depth": 2}})
    >>> cfg.parser
    'pep440'
    >>> cfg.manifest.max_depth
    2
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from vercmp.exceptions import ConfigError
from vercmp.logging import Logger, get_global_logger
from vercmp.parsers import get_parser

from .manifest import Manifest

DEFAULT_CONFIG: dict[str, Any] = {
    "parser": "default",
    "manifest": {
        "max_depth": None,
        "ignore_text": False,
    },
}

_TOP_LEVEL_KEYS = frozenset(DEFAULT_CONFIG)
_MANIFEST_KEYS = frozenset(DEFAULT_CONFIG["manifest"])


# -------------------------------
# Data types
# -------------------------------


@dataclass(frozen=True)
class CompareConfig:
    """Effective comparison settings after merging all layers."""

    parser: str
    manifest: Manifest
    source: Path | None = None


# -------------------------------
# YAML helpers
# -------------------------------


def _load_yaml_file(p: Path) -> dict[str, Any]:
    """
    Load a YAML config file and return the parsed mapping.

    An empty file is treated as an empty mapping (all defaults).
    """
    if not p.exists():
        raise ConfigError(f"Config file not found: {p}")
    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as err:
        raise ConfigError(f"Error parsing YAML: {p}: {err}") from err
    except OSError as err:
        raise ConfigError(f"Cannot read config file: {p}: {err}") from err
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Config file must contain a mapping, got {type(data).__name__}: {p}"
        )
    return data


# -------------------------------
# Merge logic
# -------------------------------


def _deep_merge_dicts(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """
    Deep-merge two dicts with "overlay wins".

    This function does not mutate inputs; returns a new dict.
    """
    result: dict[str, Any] = dict(base)
    for k, v in overlay.items():
        if k in result and isinstance(result[k], dict) and isinstance(v, dict):
            result[k] = _deep_merge_dicts(result[k], v)
        else:
            result[k] = v
    return result


# -------------------------------
# Validation
# -------------------------------


def _validate(cfg: dict[str, Any], where: str) -> CompareConfig:
    """Check keys and types, then build the CompareConfig."""
    unknown = set(cfg) - _TOP_LEVEL_KEYS
    if unknown:
        raise ConfigError(f"Unknown config key(s) in {where}: {', '.join(sorted(unknown))}")

    parser = cfg["parser"]
    if not isinstance(parser, str) or not parser:
        raise ConfigError(f"'parser' must be a non-empty string in {where}")
    get_parser(parser)

    manifest = cfg["manifest"]
    if not isinstance(manifest, dict):
        raise ConfigError(f"'manifest' must be a mapping in {where}")
    unknown = set(manifest) - _MANIFEST_KEYS
    if unknown:
        raise ConfigError(
            f"Unknown manifest key(s) in {where}: {', '.join(sorted(unknown))}"
        )

    max_depth = manifest["max_depth"]
    # bool is an int subclass
    if max_depth is not None and (
        isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 0
    ):
        raise ConfigError(
            f"'manifest.max_depth' must be a non-negative integer or null in {where}"
        )

    ignore_text = manifest["ignore_text"]
    if not isinstance(ignore_text, bool):
        raise ConfigError(f"'manifest.ignore_text' must be true or false in {where}")

    return CompareConfig(
        parser=parser,
        manifest=Manifest(max_depth=max_depth, ignore_text=ignore_text),
    )


# -------------------------------
# Public API
# -------------------------------


def load_config(
    path: Path | None = None,
    *,
    overrides: dict[str, Any] | None = None,
    logger: Logger | None = None,
) -> CompareConfig:
    """
    Load the effective comparison settings.

    Steps
      1) Start from DEFAULT_CONFIG.
      2) Merge the YAML file at 'path', if given.
      3) Merge 'overrides', if given.
      4) Validate keys, types and the parser name.

    Raises
      ConfigError on any missing file, YAML or validation problem.
    """
    if logger is None:
        logger = get_global_logger()

    cfg = DEFAULT_CONFIG
    where = "defaults"
    if path is not None:
        path = Path(path)
        logger.verbose("CONFIG", f"Loading config: {path}")
        cfg = _deep_merge_dicts(cfg, _load_yaml_file(path))
        where = str(path)
    if overrides:
        cfg = _deep_merge_dicts(cfg, overrides)

    result = _validate(cfg, where)
    logger.debug(
        "CONFIG",
        f"parser={result.parser} max_depth={result.manifest.max_depth} "
        f"ignore_text={result.manifest.ignore_text}",
    )
    return CompareConfig(parser=result.parser, manifest=result.manifest, source=path)
