"""
Default configuration values.

Provides the values a setup run falls back to when the command line and
the settings file say nothing.
"""

import copy
from typing import Any, Dict

DEFAULT_REGION = "us"

CONFIG_FILENAME = "config.json"
SETTINGS_FILENAME = "settings.yaml"

# Name of the bucket entry the widget source points at
DEFAULT_ENTRY = "widget.zip"

# Customer granted read access on shared widget buckets
MARKETPLACE_CUSTOMER_ID = "marketplace"

REGION_SKELETON: Dict[str, Any] = {
    "app_json": {"distribution": ["all"]},
    "widget_json": {"use_public_widget": True},
}

DEFAULT_WIDGET: Dict[str, Any] = {
    "use_public_bucket": True,
}


def get_region_skeleton() -> Dict[str, Any]:
    """Get a fresh copy of the per-region configuration skeleton."""
    return copy.deepcopy(REGION_SKELETON)


def get_default_widget() -> Dict[str, Any]:
    """Get a fresh copy of the caller widget defaults."""
    return copy.deepcopy(DEFAULT_WIDGET)
