"""Configuration handling for the provisioner."""

from .models import BucketMode, Credentials, ProvisionDefaults
from .loader import load_config, load_credentials

__all__ = [
    "BucketMode",
    "Credentials",
    "ProvisionDefaults",
    "load_config",
    "load_credentials",
]
