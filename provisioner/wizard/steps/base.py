"""
Base Provisioning Step

Abstract base class for all pipeline steps.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from ..state import ProvisioningContext, SettingsAccumulator


class ProvisioningStep(ABC):
    """
    Abstract base class for provisioning steps.

    A step makes exactly one API call and returns the accumulator the next
    step consumes. Errors are raised, never swallowed.
    """

    # Step metadata
    name: str = "Unnamed Step"
    description: str = ""
    done_message: str = ""

    @abstractmethod
    def execute(
        self,
        settings: SettingsAccumulator,
        context: ProvisioningContext,
    ) -> SettingsAccumulator:
        """
        Execute this step.

        Args:
            settings: Accumulator returned by the previous step
            context: Client, defaults and logger for the run

        Returns:
            Accumulator for the next step
        """
        pass

    def call(
        self,
        context: ProvisioningContext,
        path: str,
        payload: Dict[str, Any],
        method: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Send one request and log the outcome."""
        if method is None:
            response = context.client(path, payload)
        else:
            response = context.client(path, payload, method)
        context.logger.info(self.done_message or self.name)
        context.logger.debug(response)
        return response or {}
