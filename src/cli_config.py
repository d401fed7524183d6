"""Configuration overrides for runtime tunables.

Values are applied onto Constants in increasing precedence: YAML config
file, then environment variables, then CLI flags.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Callable, Dict, Mapping, Optional

import yaml

from constants import Constants

logger = logging.getLogger(__name__)


def _attempts(value: Any) -> int:
    """At least one request is always made."""
    return max(1, int(value))


# config key -> (Constants attribute, coercion)
_CONFIG_KEYS: Dict[str, tuple] = {
    "releases_index_url": ("RELEASES_INDEX_URL", str),
    "request_timeout": ("REQUEST_TIMEOUT", float),
    "retry_max": ("HTTP_RETRY_MAX", _attempts),
    "retry_base_delay": ("HTTP_RETRY_BASE_DELAY_SEC", float),
    "script_dir": ("SCRIPT_DIR", str),
    "quality_min_major": ("QUALITY_MIN_MAJOR", int),
}


def load_config(config_path: Optional[str]) -> Dict[str, Any]:
    """Load the YAML configuration file.

    Returns an empty dict when no path is given or the file cannot be used;
    the problem is logged.
    """
    if not config_path:
        return {}

    if not os.path.isfile(config_path):
        logger.warning("Config file not found: %s", config_path)
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.error("Failed to load config: %s", e)
        return {}

    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning("Config file %s must contain a mapping, ignoring it", config_path)
        return {}
    # Allow the settings to live under a top-level "setup_dotnet" section
    section = data.get("setup_dotnet", data)
    return section if isinstance(section, dict) else {}


def _set(attr: str, coerce: Callable[[Any], Any], value: Any, source: str) -> None:
    try:
        setattr(Constants, attr, coerce(value))
    except (TypeError, ValueError):
        logger.warning("Ignoring invalid %s value for %s: %r", source, attr, value)
        return
    logger.debug("Applied %s override %s=%r", source, attr, getattr(Constants, attr))


def apply_config(config: Mapping[str, Any]) -> None:
    """Apply config file values onto Constants; unknown keys are ignored."""
    for key, value in config.items():
        target = _CONFIG_KEYS.get(key)
        if target is None:
            logger.warning("Unknown config key ignored: %s", key)
            continue
        attr, coerce = target
        _set(attr, coerce, value, "config")


def apply_env_overrides(env: Optional[Mapping[str, str]] = None) -> None:
    """Apply SETUP_DOTNET_* environment overrides."""
    env = os.environ if env is None else env
    index_url = env.get(Constants.ENV_INDEX_URL)
    if index_url:
        _set("RELEASES_INDEX_URL", str, index_url, "environment")
    script_dir = env.get(Constants.ENV_SCRIPT_DIR)
    if script_dir:
        _set("SCRIPT_DIR", str, script_dir, "environment")


def apply_cli_overrides(args: Any) -> None:
    """Apply CLI flags, which take precedence over everything else."""
    if getattr(args, "INDEX_URL", None):
        _set("RELEASES_INDEX_URL", str, args.INDEX_URL, "CLI")
    if getattr(args, "SCRIPT_DIR", None):
        _set("SCRIPT_DIR", str, args.SCRIPT_DIR, "CLI")


def configure(args: Any, env: Optional[Mapping[str, str]] = None) -> None:
    """Load and apply all configuration layers for a CLI run."""
    apply_config(load_config(getattr(args, "CONFIG", None)))
    apply_env_overrides(env)
    apply_cli_overrides(args)
