"""
Step 2: Create Widget

Create the marketplace widget attached to the new app.
"""

from typing import Any, Dict

from .base import ProvisioningStep
from ..state import ProvisioningContext, SettingsAccumulator
from ...fields import layered_merge, strip_fields


class CreateWidgetStep(ProvisioningStep):
    """Create the widget; caller widget defaults override derived fields."""

    name = "Create Widget"
    description = "Create the marketplace widget"
    done_message = "Created widget"

    def derived_fields(self, app: Dict[str, Any]) -> Dict[str, Any]:
        """Widget fields computed from the app record."""
        derived = {
            "app_id": app.get("id"),
            "description": app.get("description"),
            "source": "test",
            "title": app.get("name"),
            "type": "marketplace",
            "use_public_bucket": True,
        }
        # fields the app response did not carry are left out of the payload
        return {key: value for key, value in derived.items() if value is not None}

    def execute(
        self,
        settings: SettingsAccumulator,
        context: ProvisioningContext,
    ) -> SettingsAccumulator:
        widget = layered_merge(
            self.derived_fields(settings.app),
            context.defaults.widget,
        )

        response = self.call(context, "/api/apps/widgets", widget)
        return settings.with_widget(strip_fields(response))
