# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Configuration loader for dewey.

Configuration comes from two layers:

1. **Built-in defaults** (DEFAULT_CONFIG below)
2. **dewey.yaml**, either passed explicitly or found by walking upward from
   the working directory

The file is deep-merged over the defaults (dicts merge, lists and scalars
replace). Relative fixture paths are resolved against the directory that
holds dewey.yaml, so a project can be checked from any subdirectory.

Example dewey.yaml:

    overflow: saturate
    fixtures:
      - tests/fixtures/versions.txt
      - https://example.com/xbps-versions.txt
    http:
      timeout: 10

Public API
----------
load_config : Load, merge and validate the effective configuration
find_config : Locate dewey.yaml by walking upward

Private Helpers
---------------
_load_yaml_file : Load YAML with error handling
_deep_merge_dicts : Recursive dict merge (overlay wins)
_resolve_fixture_paths : Make relative fixture paths absolute
_validate_config : Check value types and ranges

Example
-------
    >>> from dewey.config import load_config
    >>> cfg = load_config()
    >>> cfg["overflow"]
    'wrap'

Notes
-----
- A missing dewey.yaml is not an error: the defaults are returned.
- An explicitly requested file that does not exist is a ConfigError.
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import yaml

from dewey.exceptions import ConfigError
from dewey.io.fixtures import DEFAULT_TIMEOUT, is_url
from dewey.logging import get_global_logger

CONFIG_FILENAME = "dewey.yaml"

DEFAULT_CONFIG: dict[str, Any] = {
    "overflow": "wrap",
    "fixtures": [],
    "http": {
        "timeout": DEFAULT_TIMEOUT,
    },
}

_OVERFLOW_CHOICES = ("wrap", "saturate")


# -------------------------------
# YAML helpers
# -------------------------------


def _load_yaml_file(p: Path) -> Any:
    """Loads a YAML file and returns the parsed Python object.

    Args:
        p: Path to the YAML file.

    Returns:
        The parsed YAML content.

    Raises:
        ConfigError: If the file is missing, the YAML is invalid, or the
            file is empty.
    """
    if not p.exists():
        raise ConfigError(f"file not found: {p}")
    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as err:
        raise ConfigError(f"Error parsing YAML: {p}: {err}") from err
    if data is None:
        raise ConfigError(f"YAML file is empty: {p}")
    return data


def _print_yaml_content(data: dict[str, Any]) -> None:
    """Print YAML content in a readable format for debug mode."""
    logger = get_global_logger()
    yaml_str = yaml.dump(data, default_flow_style=False, sort_keys=False)
    for line in yaml_str.split("\n"):
        if line.strip():
            logger.debug("CONFIG", line)


# -------------------------------
# Merge logic
# -------------------------------


def _deep_merge_dicts(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Deep-merges two dicts with "overlay wins".

    Rules:
      - dict + dict -> deep merge
      - list + list -> overlay REPLACES base (not concatenated)
      - everything else -> overlay overwrites base

    Does not mutate inputs; returns a new dict.
    """
    result: dict[str, Any] = dict(base)
    for k, v in overlay.items():
        if k in result and isinstance(result[k], dict) and isinstance(v, dict):
            result[k] = _deep_merge_dicts(result[k], v)
        else:
            result[k] = v
    return result


# -------------------------------
# Discovery and validation
# -------------------------------


def find_config(start_dir: Path) -> Path | None:
    """Walks upward from start_dir looking for dewey.yaml.

    Args:
        start_dir: The directory to start searching from.

    Returns:
        Path to the first dewey.yaml found, or None.
    """
    start_dir = start_dir.resolve()
    for parent in [start_dir] + list(start_dir.parents):
        candidate = parent / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def _resolve_fixture_paths(cfg: dict[str, Any], base_dir: Path) -> None:
    """Resolves relative fixture paths against base_dir (in place).

    URLs and absolute paths are left untouched.
    """
    resolved: list[str] = []
    for source in cfg.get("fixtures", []):
        if is_url(source) or Path(source).is_absolute():
            resolved.append(source)
        else:
            resolved.append(str((base_dir / source).resolve()))
    cfg["fixtures"] = resolved


def _validate_config(cfg: dict[str, Any], origin: str) -> None:
    """Checks value types and ranges of a merged config.

    Raises:
        ConfigError: On the first invalid value found.
    """
    overflow = cfg.get("overflow")
    if overflow not in _OVERFLOW_CHOICES:
        raise ConfigError(
            f"{origin}: overflow must be one of {', '.join(_OVERFLOW_CHOICES)}, "
            f"got {overflow!r}"
        )

    fixtures = cfg.get("fixtures")
    if not isinstance(fixtures, list) or not all(
        isinstance(s, str) and s.strip() for s in fixtures
    ):
        raise ConfigError(f"{origin}: fixtures must be a list of paths or URLs")

    http = cfg.get("http")
    if not isinstance(http, dict):
        raise ConfigError(f"{origin}: http must be a mapping")
    timeout = http.get("timeout")
    if isinstance(timeout, bool) or not isinstance(timeout, int) or timeout <= 0:
        raise ConfigError(
            f"{origin}: http.timeout must be a positive integer, got {timeout!r}"
        )


# -------------------------------
# Public API
# -------------------------------


def load_config(
    path: Path | None = None,
    *,
    start_dir: Path | None = None,
) -> dict[str, Any]:
    """Loads the effective dewey configuration.

    Performs the following operations:

    1. Use path if given, else search upward from start_dir (default: cwd)
    2. Read dewey.yaml if one was found
    3. Merge: defaults -> file (dicts deep-merge, lists replace)
    4. Resolve relative fixture paths against the file's directory
    5. Validate values

    Args:
        path: Explicit config file. Must exist when given.
        start_dir: Where to start searching when path is None.

    Returns:
        The merged configuration dict. Without a config file this is a
            copy of DEFAULT_CONFIG.

    Raises:
        ConfigError: On a missing explicit file, YAML errors, an empty file,
            a non-mapping top level, or invalid values.
    """
    logger = get_global_logger()

    if path is None:
        path = find_config(start_dir or Path.cwd())
        if path is None:
            logger.verbose("CONFIG", f"No {CONFIG_FILENAME} found; using defaults")
            return copy.deepcopy(DEFAULT_CONFIG)

    path = path.resolve()
    logger.verbose("CONFIG", f"Loading: {path}")

    file_obj = _load_yaml_file(path)
    if not isinstance(file_obj, dict):
        raise ConfigError(f"top-level YAML must be a mapping (dict): {path}")

    logger.debug("CONFIG", f"--- Content from {path.name} ---")
    _print_yaml_content(file_obj)

    merged = _deep_merge_dicts(copy.deepcopy(DEFAULT_CONFIG), file_obj)
    _validate_config(merged, str(path))
    _resolve_fixture_paths(merged, path.parent)

    logger.verbose(
        "CONFIG",
        f"overflow={merged['overflow']} fixtures={len(merged['fixtures'])} "
        f"timeout={merged['http']['timeout']}s",
    )
    return merged
