"""
Provisioning Pipeline

Runs the provisioning steps strictly in order, halting on the first error.
"""

import logging
from typing import Callable, List, Optional

from .state import ProvisioningContext, SettingsAccumulator
from .steps import (
    ProvisioningStep,
    CreateAppStep,
    CreateWidgetStep,
    CreateBucketStep,
    CreateBucketEntryStep,
    UploadWidgetStep,
)

logger = logging.getLogger(__name__)


class ProvisioningPipeline:
    """
    Drives a fixed sequence of provisioning steps.

    Remote resources created before a failing step are left in place; the
    names of the completed steps are logged so they can be cleaned up by hand.
    """

    def __init__(
        self,
        steps: List[ProvisioningStep],
        context: ProvisioningContext,
        on_step: Optional[Callable[[int, int, ProvisioningStep], None]] = None,
    ):
        """
        Initialize the pipeline.

        Args:
            steps: Steps in execution order
            context: Collaborators passed to every step
            on_step: Called with (index, total, step) before each step runs
        """
        self.steps = steps
        self.context = context
        self.on_step = on_step
        self.completed: List[str] = []

    @classmethod
    def for_app(
        cls,
        name: str,
        description: str,
        context: ProvisioningContext,
        on_step: Optional[Callable[[int, int, ProvisioningStep], None]] = None,
    ) -> "ProvisioningPipeline":
        """Build the standard five-step pipeline."""
        return cls(
            [
                CreateAppStep(name, description),
                CreateWidgetStep(),
                CreateBucketStep(),
                CreateBucketEntryStep(),
                UploadWidgetStep(),
            ],
            context,
            on_step=on_step,
        )

    def run(self, settings: Optional[SettingsAccumulator] = None) -> SettingsAccumulator:
        """
        Run every step in order.

        Returns:
            Accumulator produced by the last step

        Raises:
            Whatever the failing step raised; later steps are not run
        """
        settings = settings or SettingsAccumulator()
        self.completed = []

        for index, step in enumerate(self.steps):
            if self.on_step:
                self.on_step(index, len(self.steps), step)
            try:
                settings = step.execute(settings, self.context)
            except Exception:
                if self.completed:
                    logger.warning(
                        "%s failed after: %s. Resources created so far were not removed.",
                        step.name,
                        ", ".join(self.completed),
                    )
                raise
            self.completed.append(step.name)

        return settings
