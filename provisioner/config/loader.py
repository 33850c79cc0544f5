"""
Configuration loader.

Reads the YAML settings file holding per-region API credentials and the
region configuration file written by previous setup runs.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from ..errors import ConfigError
from .models import Credentials

logger = logging.getLogger(__name__)


def _read_yaml(file_path: Path) -> Dict[str, Any]:
    """Read and parse a YAML file."""
    try:
        with open(file_path, "r") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {file_path}: {e}")
    except IOError as e:
        raise ConfigError(f"Cannot read {file_path}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping of regions in {file_path}")
    return data


def load_credentials(
    settings_path: Union[str, Path],
    region: str,
) -> Optional[Credentials]:
    """
    Load API credentials for a region from the settings file.

    The settings file maps region names to credential blocks:

        us:
          url: https://us.example.com/cmp
          token: ...

    Args:
        settings_path: Path to the YAML settings file
        region: Region whose block to load

    Returns:
        Credentials for the region, or None if the settings file does not exist

    Raises:
        ConfigError: If the file is malformed or has no valid block for the region
    """
    settings_path = Path(settings_path)
    if not settings_path.is_file():
        return None

    data = _read_yaml(settings_path)
    block = data.get(region)
    if block is None:
        available = ", ".join(sorted(str(k) for k in data)) or "none"
        raise ConfigError(
            f"No settings for region '{region}' in {settings_path}. "
            f"Available regions: {available}"
        )

    try:
        credentials = Credentials(**block)
    except (TypeError, ValidationError) as e:
        raise ConfigError(f"Invalid settings for region '{region}': {e}")

    logger.debug("Loaded credentials for region %s from %s", region, settings_path)
    return credentials


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load the region configuration written by a previous run.

    Returns:
        Parsed configuration, or an empty dict if the file does not exist
    """
    config_path = Path(config_path)
    if not config_path.exists():
        return {}

    try:
        with open(config_path, "r") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {config_path}: {e}")
    except IOError as e:
        raise ConfigError(f"Cannot read {config_path}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a JSON object in {config_path}")
    return data
