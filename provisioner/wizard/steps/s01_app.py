"""
Step 1: Create App

Register the application that owns the widget.
"""

from .base import ProvisioningStep
from ..state import ProvisioningContext, SettingsAccumulator
from ...fields import strip_fields


class CreateAppStep(ProvisioningStep):
    """Create the app record from the operator's name and description."""

    name = "Create App"
    description = "Register the application"
    done_message = "Created app"

    def __init__(self, app_name: str, app_description: str):
        self.app_name = app_name
        self.app_description = app_description

    def execute(
        self,
        settings: SettingsAccumulator,
        context: ProvisioningContext,
    ) -> SettingsAccumulator:
        app = {
            "name": self.app_name,
            "description": self.app_description,
            "distribution": ["all"],
        }

        response = self.call(context, "/api/apps", app)
        return SettingsAccumulator(app=strip_fields(response))
