"""
config.py - Configuration Management

Loads optional settings from a .slugren.toml file and environment variables.

Usage:
    from slugren.lib.config import build_settings

    settings = build_settings(Path.cwd(), dry_run=True)

Config file (searched upward from the walk root):
    # .slugren.toml
    [rename]
    dry_run = false
    maintain_case = true
    separator = "-"

Fallback chain per key: ENV > config file > default.
CLI flags are applied on top by the caller.
"""
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

from slugren.errors import FilesystemError
from slugren.models import RenameSettings

CONFIG_FILENAME = ".slugren.toml"
CONFIG_SECTION = "rename"

ENV_VARS = {
    "dry_run": "SLUGREN_DRY_RUN",
    "maintain_case": "SLUGREN_MAINTAIN_CASE",
    "separator": "SLUGREN_SEPARATOR",
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def find_config_file(start: Path) -> Optional[Path]:
    """
    Find .slugren.toml in start or any of its parents.

    Returns:
        Path or None if no config file exists
    """
    current = Path(start).absolute()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_config(start: Path) -> Dict[str, Any]:
    """
    Load configuration from the nearest .slugren.toml.

    Returns:
        Dict: Parsed TOML ({} when no config file exists)

    Raises:
        tomllib.TOMLDecodeError: If the config file is invalid
        FilesystemError: If a candidate file cannot be probed or read
    """
    try:
        config_path = find_config_file(start)
        if config_path is None:
            return {}

        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except OSError as e:
        raise FilesystemError.from_oserror(e, e.filename or start) from e


def parse_bool(value: str) -> bool:
    v = value.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")


def get_config_value(
    config: Dict[str, Any],
    key: str,
    env_var: Optional[str] = None,
    default: Any = None,
) -> Any:
    """
    Get configuration value with fallback chain: ENV > config file > default.

    Example:
        >>> get_config_value({"rename": {"separator": "_"}}, "separator", "SLUGREN_SEPARATOR", "-")
        '_'
    """
    # 1. Environment variable (runtime override)
    if env_var:
        env_value = os.getenv(env_var)
        if env_value is not None:
            return env_value

    # 2. Config file
    section = config.get(CONFIG_SECTION, {})
    if key in section:
        return section[key]

    # 3. Default
    return default


def build_settings(root: Path, dry_run: Optional[bool] = None) -> RenameSettings:
    """
    Assemble validated settings for one run.

    Args:
        root: Directory to walk (also where the config search starts)
        dry_run: CLI override; None means "use config"

    Raises:
        tomllib.TOMLDecodeError: Invalid config file
        ValueError: Invalid boolean in an env var
        pydantic.ValidationError: Invalid setting values
    """
    config = load_config(root)
    values: Dict[str, Any] = {"root": Path(root).absolute()}

    for key, env_var in ENV_VARS.items():
        value = get_config_value(config, key, env_var)
        if value is None:
            continue
        if key != "separator" and isinstance(value, str):
            value = parse_bool(value)
        values[key] = value

    if dry_run:
        values["dry_run"] = True

    return RenameSettings(**values)
