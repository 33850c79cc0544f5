"""
Pydantic models for settings validation.

These models define the schema for per-region API credentials and the
defaults a provisioning run is parameterized with.
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from .defaults import DEFAULT_ENTRY, MARKETPLACE_CUSTOMER_ID, get_default_widget


class BucketMode(str, Enum):
    """Visibility of the storage bucket created for a widget."""
    PUBLIC = "public"
    SHARED = "shared"


class Credentials(BaseModel):
    """API endpoint and credentials for one region."""

    url: str = Field(..., description="Base URL of the platform API")
    token: Optional[str] = Field(None, description="Bearer token")
    username: Optional[str] = Field(None, description="Basic auth username")
    password: Optional[str] = Field(None, description="Basic auth password")
    verify_ssl: bool = Field(default=True, description="Verify TLS certificates")

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Require an http(s) URL and drop the trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"API url must start with http:// or https://: {v}")
        return v.rstrip("/")

    @model_validator(mode="after")
    def check_auth(self):
        """A username without a password cannot authenticate."""
        if self.username and not self.password:
            raise ValueError("password is required when username is set")
        return self


class ProvisionDefaults(BaseModel):
    """Caller defaults threaded through the provisioning pipeline."""

    widget: Dict[str, Any] = Field(default_factory=get_default_widget)
    entry: str = Field(default=DEFAULT_ENTRY, description="Bucket entry the widget serves")
    bucket_mode: BucketMode = Field(default=BucketMode.SHARED)
    customer_id: str = Field(default=MARKETPLACE_CUSTOMER_ID)

    @field_validator("entry")
    @classmethod
    def validate_entry(cls, v: str) -> str:
        """Entry names are single path segments."""
        v = v.strip().strip("/")
        if not v or "/" in v:
            raise ValueError(f"Invalid bucket entry name: {v!r}")
        return v
