"""Configuration loading for the conversion tools."""

import copy
from typing import Any

import yaml
from fastmcp.utilities.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = "config/config.yaml"

DEFAULT_CONFIG: dict[str, Any] = {
    "converter": {
        "strip_whitespace": True,
        "max_input_length": 1024,
    },
}


def _matches_default(value: Any, default: Any) -> bool:
    # bool is an int subclass, so compare exact types for those
    if isinstance(default, bool) or isinstance(value, bool):
        return type(value) is type(default)
    return isinstance(value, type(default))


def merge_section(section: str, defaults: dict[str, Any], values: Any) -> dict[str, Any]:
    """Merge one configuration section over its defaults.

    A section that is not a mapping, or a value whose type differs from its
    default, is logged and ignored. Keys without a default are kept as given.

    Args:
        section: Section name, used in log messages.
        defaults: Default values for the section.
        values: The section as loaded or passed in.

    Returns:
        dict[str, Any]: A new mapping with the accepted values applied.
    """
    merged = dict(defaults)
    if values is None:
        return merged
    if not isinstance(values, dict):
        logger.error("Config section %r is not a mapping, using default settings", section)
        return merged

    for key, value in values.items():
        if key in defaults and not _matches_default(value, defaults[key]):
            logger.error(
                "Config value %s.%s has type %s, expected %s; using default %r",
                section,
                key,
                type(value).__name__,
                type(defaults[key]).__name__,
                defaults[key],
            )
            continue
        merged[key] = value
    return merged


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> dict[str, Any]:
    """Load the YAML configuration and merge it over the defaults.

    Args:
        config_path: Path to the configuration file.
            Defaults to "config/config.yaml"

    Returns:
        dict[str, Any]: The effective configuration. Missing or unreadable
        files yield the defaults.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    try:
        with open(config_path, encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.info("Config file %s not found, using default settings", config_path)
        return config
    except (yaml.YAMLError, OSError) as e:
        logger.error("Error loading config: %s", e)
        return config

    if not isinstance(loaded, dict):
        logger.error("Config file %s does not contain a mapping, using default settings", config_path)
        return config

    for section, values in loaded.items():
        if isinstance(config.get(section), dict):
            config[section] = merge_section(section, config[section], values)
        else:
            config[section] = values
    return config
