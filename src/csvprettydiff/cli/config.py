#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the csvprettydiff CLI.

This module handles automatic discovery of configuration files, loading
configs from JSON, TOML or YAML format, and turning the loaded values into
the options used by comparison sessions.

Recognized keys, either at the top level or grouped under ``[format]`` and
``[parse]`` tables::

    delimiter = ","
    format_type = "grid"              # grid | simple
    insert_line_between_rows = true
    header_location = "first_row"     # none | first_row | implicit
    update_view_when_text_changes = true
"""

import argparse
import json
import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from csvprettydiff.constants import (
    CONFIG_FILENAMES,
    DEFAULT_DELIMITER,
    NAMED_DELIMITERS,
    PYPROJECT_TOOL_SECTION,
)
from csvprettydiff.options.pretty import FormatOptions, ParseOptions

logger = logging.getLogger(__name__)

_FORMAT_KEYS = ("format_type", "insert_line_between_rows", "header_location", "update_view_when_text_changes")


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load [tool.csvprettydiff] section from pyproject.toml file.

    Parameters
    ----------
    pyproject_path : Path
        Path to pyproject.toml file

    Returns
    -------
    dict
        Configuration dictionary from [tool.csvprettydiff] section, or empty dict if not found

    Raises
    ------
    argparse.ArgumentTypeError
        If pyproject.toml cannot be parsed

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)

        config = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION)
        if config is None:
            return {}
        if not isinstance(config, dict):
            raise argparse.ArgumentTypeError(
                f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, "
                f"got {type(config).__name__}"
            )
        return config

    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading pyproject.toml {pyproject_path}: {e}") from e


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find configuration file by searching parent directories.

    Walks up the directory tree from start_dir to the filesystem root,
    checking each directory for the dedicated configuration files, then for
    a pyproject.toml with a [tool.csvprettydiff] section.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except argparse.ArgumentTypeError as e:
                logger.debug(f"Skipping unreadable {pyproject_path}: {e}")

        parent = current.parent
        if parent == current:
            break

        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover configuration file in standard locations.

    Searches parent directories from ``start_dir`` (default: cwd) up to the
    filesystem root, then the user home directory. Returns the first
    configuration file found.

    Returns
    -------
    Path or None
        Path to discovered config file, or None if not found

    """
    config_in_parents = find_config_in_parents(start_dir)
    if config_in_parents:
        return config_in_parents

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from JSON, TOML, YAML, or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    argparse.ArgumentTypeError
        If the file cannot be read, parsed, or has invalid format

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")

    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        return _load_pyproject_section(config_path)
    elif ext == ".toml":
        return _load_toml_config(config_path)
    elif ext in (".yaml", ".yml"):
        return _load_yaml_config(config_path)
    elif ext == ".json":
        return _load_json_config(config_path)
    else:
        raise argparse.ArgumentTypeError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml")


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading TOML config {config_path}: {e}") from e


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid JSON in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading JSON config {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(f"JSON config file must contain an object, got {type(config).__name__}")
    return config


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise argparse.ArgumentTypeError(f"Invalid YAML in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading YAML config {config_path}: {e}") from e

    # an empty file loads as None
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(f"YAML config file must contain a mapping, got {type(config).__name__}")
    return config


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load configuration with proper priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (--config flag)
    2. Environment variable config path (CSVPRETTYDIFF_CONFIG)
    3. Auto-discovered config file

    Returns
    -------
    dict
        Loaded configuration dictionary (empty dict if no config found)

    Raises
    ------
    argparse.ArgumentTypeError
        If a config file is specified but cannot be loaded

    """
    if explicit_path:
        return load_config_file(explicit_path)

    if env_var_path:
        return load_config_file(env_var_path)

    discovered_path = discover_config_file()
    if discovered_path:
        logger.debug(f"Using configuration from {discovered_path}")
        return load_config_file(discovered_path)

    return {}


def _flatten_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Lift keys of the ``[format]`` and ``[parse]`` tables to the top level."""
    flat = {key: value for key, value in config.items() if not isinstance(value, dict)}
    for section in ("format", "parse"):
        table = config.get(section)
        if isinstance(table, dict):
            flat.update(table)
    return flat


def resolve_delimiter(value: Any) -> str:
    """Resolve a configured delimiter, accepting the names ``csv``, ``tsv`` and ``psv``.

    Raises
    ------
    ValueError
        If the value is not a single character or a known name

    """
    if not isinstance(value, str) or not value:
        raise ValueError(f"delimiter must be a non-empty string, got {value!r}")
    if value.lower() in NAMED_DELIMITERS:
        return NAMED_DELIMITERS[value.lower()]
    # validates the single character constraint
    return ParseOptions(delimiter=value).delimiter


def options_from_config(config: Dict[str, Any]) -> tuple[FormatOptions, str]:
    """Build format options and delimiter from a loaded configuration.

    Invalid values are logged and replaced by their defaults.

    Parameters
    ----------
    config : dict
        Configuration loaded by ``load_config_file``

    Returns
    -------
    tuple[FormatOptions, str]
        Format options and delimiter

    """
    flat = _flatten_config(config)

    delimiter = DEFAULT_DELIMITER
    if "delimiter" in flat:
        try:
            delimiter = resolve_delimiter(flat["delimiter"])
        except ValueError as e:
            logger.warning(f"Ignoring configured delimiter: {e}")

    options = FormatOptions()
    for key in _FORMAT_KEYS:
        if key not in flat:
            continue
        try:
            options = options.create_updated(**{key: flat[key]})
        except (TypeError, ValueError) as e:
            logger.warning(f"Ignoring configured {key}: {e}")

    unknown = set(flat) - set(_FORMAT_KEYS) - {"delimiter"}
    if unknown:
        logger.debug(f"Unrecognized configuration keys: {', '.join(sorted(unknown))}")

    return options, delimiter
