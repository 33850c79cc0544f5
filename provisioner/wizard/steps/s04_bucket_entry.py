"""
Step 4: Create Bucket Entry

Create the public entry inside the widget bucket.
"""

from .base import ProvisioningStep
from ..state import ProvisioningContext, SettingsAccumulator


class CreateBucketEntryStep(ProvisioningStep):
    """PUT a public entry under the widget bucket."""

    name = "Create Bucket Entry"
    description = "Create the public bucket entry"
    done_message = "Created bucket entry"

    def execute(
        self,
        settings: SettingsAccumulator,
        context: ProvisioningContext,
    ) -> SettingsAccumulator:
        path = f"/api/storage/buckets/{settings.widget_id}/entry"
        self.call(context, path, {"type": "public"}, "put")
        return settings
