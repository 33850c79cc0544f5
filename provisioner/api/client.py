"""
Platform API client.

Sends JSON requests to the platform REST API on behalf of the
provisioning steps.
"""

import base64
import json
import logging
import ssl
import urllib.error
import urllib.request
from typing import Any, Callable, Dict, Optional

from ..config.models import Credentials
from ..errors import ApiError

logger = logging.getLogger(__name__)

# (path, payload, method) -> response body
ResourceClient = Callable[..., Dict[str, Any]]


class ApiClient:
    """
    Minimal JSON client for the platform API.

    Instances are callable as client(path, payload, method="post") so the
    pipeline steps do not depend on the transport.
    """

    METHODS = ("post", "put")

    def __init__(self, credentials: Credentials, timeout: float = 30.0):
        """
        Initialize the client.

        Args:
            credentials: Base URL and authentication for one region
            timeout: Socket timeout in seconds
        """
        self.credentials = credentials
        self.timeout = timeout

    def __call__(
        self,
        path: str,
        payload: Optional[Dict[str, Any]] = None,
        method: str = "post",
    ) -> Dict[str, Any]:
        return self.request(path, payload, method)

    def get_base_url(self) -> str:
        """Get the base URL requests are resolved against."""
        return self.credentials.url

    def request(
        self,
        path: str,
        payload: Optional[Dict[str, Any]] = None,
        method: str = "post",
    ) -> Dict[str, Any]:
        """
        Make an API request.

        Args:
            path: Endpoint path, e.g. /api/apps
            payload: JSON body
            method: HTTP method, case-insensitive

        Returns:
            Decoded JSON body; {} for an empty body

        Raises:
            ApiError: On connection failure, HTTP error status or undecodable body
        """
        method = method.lower()
        if method not in self.METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        url = f"{self.get_base_url()}/{path.lstrip('/')}"
        req = urllib.request.Request(url, method=method.upper())
        req.add_header("Content-Type", "application/json")
        req.add_header("Accept", "application/json")

        auth = self._auth_header()
        if auth:
            req.add_header("Authorization", auth)

        if payload is not None:
            req.data = json.dumps(payload).encode("utf-8")

        logger.debug("%s %s", method.upper(), url)

        try:
            with urllib.request.urlopen(
                req, timeout=self.timeout, context=self._get_ssl_context()
            ) as resp:
                raw = resp.read().decode("utf-8")
        except urllib.error.HTTPError as e:
            raise ApiError(
                f"{method.upper()} {path} failed",
                method=method,
                path=path,
                status=e.code,
                body=self._read_error_body(e),
            ) from e
        except urllib.error.URLError as e:
            raise ApiError(
                f"{method.upper()} {path} failed: {e.reason}",
                method=method,
                path=path,
            ) from e

        if not raw.strip():
            return {}

        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise ApiError(
                f"{method.upper()} {path} returned invalid JSON",
                method=method,
                path=path,
                body=raw[:200],
            ) from e

    def _auth_header(self) -> Optional[str]:
        """Build the Authorization header value."""
        if self.credentials.token:
            return f"Bearer {self.credentials.token}"
        if self.credentials.username:
            credentials = base64.b64encode(
                f"{self.credentials.username}:{self.credentials.password}".encode()
            ).decode()
            return f"Basic {credentials}"
        return None

    def _get_ssl_context(self):
        """Get SSL context for API requests."""
        if not self.credentials.verify_ssl:
            context = ssl.create_default_context()
            context.check_hostname = False
            context.verify_mode = ssl.CERT_NONE
            return context
        return None

    @staticmethod
    def _read_error_body(error: urllib.error.HTTPError) -> Any:
        """Decode an HTTP error body, falling back to text."""
        try:
            raw = error.read().decode("utf-8")
        except (OSError, AttributeError):
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            return raw
