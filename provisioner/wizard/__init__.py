"""
Provisioner Setup Wizard

Registers an app and widget, wires the widget's storage bucket and
records the results per region.
"""

from .runner import SetupWizard
from .state import SettingsAccumulator, ProvisioningContext
from .region import RegionResolver, RegionResolution
from .pipeline import ProvisioningPipeline

__all__ = [
    "SetupWizard",
    "SettingsAccumulator",
    "ProvisioningContext",
    "RegionResolver",
    "RegionResolution",
    "ProvisioningPipeline",
]
