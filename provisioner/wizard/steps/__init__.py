"""
Provisioning Steps

Each step creates or updates one remote resource.
"""

from .base import ProvisioningStep
from .s01_app import CreateAppStep
from .s02_widget import CreateWidgetStep
from .s03_bucket import CreateBucketStep
from .s04_bucket_entry import CreateBucketEntryStep
from .s05_upload import UploadWidgetStep, widget_source

__all__ = [
    "ProvisioningStep",
    "CreateAppStep",
    "CreateWidgetStep",
    "CreateBucketStep",
    "CreateBucketEntryStep",
    "UploadWidgetStep",
    "widget_source",
]
