"""
Configuration writer.

Merges provisioning results into the region block and writes config.json.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from ..errors import ConfigError
from ..fields import layered_merge, strip_fields

logger = logging.getLogger(__name__)


def apply_results(
    config: Dict[str, Any],
    region: str,
    app: Dict[str, Any],
    widget: Dict[str, Any],
) -> Dict[str, Any]:
    """
    Store the final app and widget records in the region block.

    Returns:
        The same config object, updated in place
    """
    block = config.setdefault(region, {})
    block["app_json"] = layered_merge(app, {"distribution": ["all"]})
    block["widget_json"] = layered_merge(strip_fields(widget), {"use_public_bucket": True})
    return config


def write_config(config: Dict[str, Any], output_path: Union[str, Path]) -> Path:
    """
    Serialize the whole configuration, overwriting any previous file.

    Args:
        config: Configuration to write
        output_path: Destination file

    Returns:
        Path written
    """
    output_path = Path(output_path)
    try:
        with open(output_path, "w") as f:
            f.write(json.dumps(config, indent=4))
    except OSError as e:
        raise ConfigError(f"Cannot write {output_path}: {e}")

    logger.info("Wrote %s", output_path)
    return output_path
