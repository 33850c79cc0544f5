"""
Pipeline State

Carriers passed between provisioning steps.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional

from ..api.client import ResourceClient
from ..config.models import ProvisionDefaults
from ..errors import ApiError


@dataclass(frozen=True)
class SettingsAccumulator:
    """
    Results collected so far by the pipeline.

    Each step returns a new accumulator; app is set once by the first step
    and only forwarded after that.
    """
    app: Dict[str, Any] = field(default_factory=dict)
    widget: Optional[Dict[str, Any]] = None

    @property
    def widget_id(self) -> Any:
        """Id the remote system assigned to the widget."""
        if not self.widget or self.widget.get("id") is None:
            raise ApiError(
                "Widget response carried no id",
                method="post",
                path="/api/apps/widgets",
                body=self.widget,
            )
        return self.widget["id"]

    def with_widget(self, widget: Dict[str, Any]) -> "SettingsAccumulator":
        """Return a copy carrying a new widget record."""
        return replace(self, widget=widget)


@dataclass
class ProvisioningContext:
    """Collaborators every step receives explicitly."""
    client: ResourceClient
    defaults: ProvisionDefaults = field(default_factory=ProvisionDefaults)
    logger: logging.Logger = field(
        default_factory=lambda: logging.getLogger("provisioner.pipeline")
    )
