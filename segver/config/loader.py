"""
Configuration loading and merging for segver.

Configuration names reusable version patterns and the default selection
options used by the CLI. It is built from two layers:

1. **Built-in defaults**
   - ``patterns.simple`` and ``patterns.semver`` (the standard patterns)
   - ``defaults.pattern: simple`` and ``defaults.numbers_only: false``

2. **Project file** (segver.yaml)
   - Either passed explicitly or found by walking upward from the
     working directory
   - Overrides and extends the built-in layer

Example file::

    patterns:
      java: '^(?P<d1>\\d+)\\.(?P<d2>\\d+)\\.(?P<d3>\\d+)(?:_(?P<d4>\\d+))?-(?P<d5>\\d+)$'
    defaults:
      pattern: java
      numbers_only: true

Merge Behavior
--------------
The loader performs deep merging with "last wins" semantics:
  - **Dicts**: Recursively merged (keys from overlay override base)
  - **Lists**: Completely replaced (NOT appended/extended)
  - **Scalars**: Overwritten (strings, numbers, booleans)

Functions
---------
load_effective_config : function
    Load and merge configuration (main public API).
resolve_pattern : function
    Turn a configured pattern name or a literal regex into a compiled pattern.

Error Handling
--------------
- ConfigError: explicit file missing, YAML parse errors, wrong structure,
  invalid regex
- All errors are chained with "from err" for better debugging
"""

from __future__ import annotations

import copy
from pathlib import Path
import re
from typing import Any

import yaml

from segver.exceptions import ConfigError
from segver.logging import Logger, get_global_logger
from segver.versioning.regex import SEMVER_PATTERN, SIMPLE_PATTERN

CONFIG_FILENAME = "segver.yaml"

BUILTIN_CONFIG: dict[str, Any] = {
    "patterns": {
        "simple": SIMPLE_PATTERN.pattern,
        "semver": SEMVER_PATTERN.pattern,
    },
    "defaults": {
        "pattern": "simple",
        "numbers_only": False,
    },
}

# -------------------------------
# YAML helpers
# -------------------------------


def _load_yaml_file(p: Path) -> dict[str, Any]:
    """
    Load a YAML file that must contain a mapping.

    An empty file is treated as an empty mapping.

    Raises:
      ConfigError - missing file, invalid YAML, or non-mapping top level
    """
    if not p.exists():
        raise ConfigError(f"config file not found: {p}")
    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as err:
        raise ConfigError(f"Error parsing YAML: {p}: {err}") from err
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"top-level YAML must be a mapping (dict): {p}")
    return data


# -------------------------------
# Merge logic
# -------------------------------


def _deep_merge_dicts(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """
    Deep-merge two dicts with "overlay wins".

    Rules:
      - dict + dict -> deep merge
      - list + list -> overlay REPLACES base (not concatenated)
      - everything else -> overlay overwrites base

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
# Discovery
# -------------------------------


def _find_config_file(start_dir: Path) -> Path | None:
    """
    Walk upward from 'start_dir' looking for segver.yaml.
    Returns the file path or None if not found.
    """
    for parent in [start_dir] + list(start_dir.parents):
        candidate = parent / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def _check_structure(cfg: dict[str, Any], source: Path) -> None:
    for section in ("patterns", "defaults"):
        if not isinstance(cfg.get(section), dict):
            raise ConfigError(f"'{section}' must be a mapping in {source}")
    for name, regex in cfg["patterns"].items():
        if not isinstance(regex, str):
            raise ConfigError(f"pattern '{name}' must be a string in {source}")


def _print_yaml_content(data: dict[str, Any], logger: Logger) -> None:
    yaml_str = yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    for line in yaml_str.split("\n"):
        if line.strip():
            logger.debug("CONFIG", line)


# -------------------------------
# Public API
# -------------------------------


def load_effective_config(
    config_path: Path | None = None,
    *,
    start_dir: Path | None = None,
    logger: Logger | None = None,
) -> dict[str, Any]:
    """
    Load and merge the effective configuration.

    Steps
      1) Start from the built-in layer.
      2) Use 'config_path' if given, else search upward from 'start_dir'
         (default: current directory) for segver.yaml.
      3) Merge the file on top (dicts deep-merge, lists replace).

    Returns
      A merged configuration dict with 'patterns' and 'defaults' mappings.
      If no file was found, a copy of the built-in layer is returned.

    Raises
      ConfigError if an explicit file is missing, or any file is invalid.
    """
    if logger is None:
        logger = get_global_logger()

    merged = copy.deepcopy(BUILTIN_CONFIG)

    if config_path is None:
        search_from = (start_dir or Path.cwd()).resolve()
        config_path = _find_config_file(search_from)
        if config_path is None:
            logger.verbose("CONFIG", f"No {CONFIG_FILENAME} found; using built-ins")
            return merged
    config_path = config_path.resolve()

    logger.verbose("CONFIG", f"Loading: {config_path}")
    file_cfg = _load_yaml_file(config_path)
    _print_yaml_content(file_cfg, logger)

    merged = _deep_merge_dicts(merged, file_cfg)
    _check_structure(merged, config_path)

    logger.verbose(
        "CONFIG", f"Patterns available: {', '.join(sorted(merged['patterns']))}"
    )
    return merged


def resolve_pattern(
    name_or_regex: str | None, config: dict[str, Any]
) -> re.Pattern[str]:
    """
    Return the compiled pattern for a configured name or a literal regex.

    None selects defaults.pattern. A name found under 'patterns' wins over
    interpreting the argument as a regex.

    Raises
      ConfigError if the regex does not compile.
    """
    if name_or_regex is None:
        name_or_regex = str(config["defaults"]["pattern"])
    source = config["patterns"].get(name_or_regex, name_or_regex)
    try:
        return re.compile(source)
    except re.error as err:
        raise ConfigError(f"Invalid regex pattern {name_or_regex!r}: {err}") from err
