"""
Step 3: Create Bucket

Create the storage bucket that hosts the widget package. The bucket is
named after the widget id; later steps and the widget source path rely
on that.
"""

from typing import Any, Dict

from .base import ProvisioningStep
from ..state import ProvisioningContext, SettingsAccumulator
from ...config.models import BucketMode, ProvisionDefaults


class CreateBucketStep(ProvisioningStep):
    """PUT the bucket at /api/storage/buckets/<widget id>."""

    name = "Create Bucket"
    description = "Create the widget storage bucket"
    done_message = "Created bucket"

    def bucket_spec(self, defaults: ProvisionDefaults) -> Dict[str, Any]:
        """Bucket body for the configured visibility mode."""
        if defaults.bucket_mode == BucketMode.PUBLIC:
            return {"type": "public"}

        return {
            "type": "shared",
            "acl": [
                {"customer_id": defaults.customer_id, "permission": "read"},
            ],
        }

    def execute(
        self,
        settings: SettingsAccumulator,
        context: ProvisioningContext,
    ) -> SettingsAccumulator:
        path = f"/api/storage/buckets/{settings.widget_id}"
        self.call(context, path, self.bucket_spec(context.defaults), "put")
        return settings
