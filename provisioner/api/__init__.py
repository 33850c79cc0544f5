"""
Platform API Module

HTTP access to the app, widget and storage endpoints.
"""

from .client import ApiClient, ResourceClient

__all__ = [
    "ApiClient",
    "ResourceClient",
]
