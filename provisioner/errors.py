"""Exceptions raised while provisioning."""

from typing import Any, Optional


class ProvisioningError(Exception):
    """Base error for a failed setup run."""
    pass


class ConfigError(ProvisioningError):
    """Settings or configuration file loading or validation error."""
    pass


class ApiError(ProvisioningError):
    """A remote API call failed at the transport or HTTP level."""

    def __init__(
        self,
        message: str,
        method: str = "",
        path: str = "",
        status: Optional[int] = None,
        body: Any = None,
    ):
        super().__init__(message)
        self.method = method
        self.path = path
        self.status = status
        self.body = body

    def __str__(self) -> str:
        text = super().__str__()
        if self.status is not None:
            text = f"{text} (HTTP {self.status})"
        if self.body:
            text = f"{text}: {self.body}"
        return text
