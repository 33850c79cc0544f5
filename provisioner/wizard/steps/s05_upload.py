"""
Step 5: Upload Widget

Point the widget at its bucket entry and push the final widget record.
"""

from .base import ProvisioningStep
from ..state import ProvisioningContext, SettingsAccumulator
from ...fields import layered_merge, strip_fields

SOURCE_TEMPLATE = "/cmp/api/storage/buckets/{widget_id}/{entry}"


def widget_source(widget_id, entry: str) -> str:
    """Storage path the widget is served from."""
    return SOURCE_TEMPLATE.format(widget_id=widget_id, entry=entry)


class UploadWidgetStep(ProvisioningStep):
    """PUT the updated widget to /api/apps/widgets/<widget id>."""

    name = "Upload Widget"
    description = "Update the widget with its storage source"
    done_message = "Uploaded widget"

    def execute(
        self,
        settings: SettingsAccumulator,
        context: ProvisioningContext,
    ) -> SettingsAccumulator:
        widget_id = settings.widget_id
        source = widget_source(widget_id, context.defaults.entry)

        # the update endpoint rejects 'id' in the body
        current = dict(settings.widget)
        current.pop("id", None)

        payload = layered_merge(
            context.defaults.widget,
            current,
            {"type": "marketplace", "source": source},
        )
        payload.pop("id", None)

        response = self.call(context, f"/api/apps/widgets/{widget_id}", payload, "put")

        return settings.with_widget(layered_merge(
            strip_fields(response),
            {"id": widget_id, "source": source},
        ))
