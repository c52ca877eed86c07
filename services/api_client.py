# -*- coding: utf-8 -*-
"""
Property API Client - HTTP access to the listings backend.

Only property creation is needed by the Add Property wizard:
POST /property as multipart/form-data with the scalar fields, the units
as a JSON string, and one "images" part per file.
"""

import mimetypes
from contextlib import ExitStack
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from models.property_draft import PropertyDraft
from services.exceptions import ApiException, NetworkException
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class ApiConfig:
    """
    Connection settings for the listings API.

    Values left as None are loaded from Config (which reads .env).
    """
    base_url: str = None
    token: Optional[str] = None
    timeout: int = None

    def __post_init__(self):
        """Load from Config if not provided."""
        from app.config import Config

        if self.base_url is None:
            self.base_url = Config.API_BASE_URL
        if self.token is None:
            self.token = Config.API_TOKEN
        if self.timeout is None:
            self.timeout = Config.API_TIMEOUT


class PropertyApiClient:
    """
    Client for the property endpoints.

    Usage:
        client = PropertyApiClient(ApiConfig(base_url="http://localhost:8000"))
        property_id = client.create_property(draft)
    """

    def __init__(self, config: ApiConfig = None):
        self.config = config or ApiConfig()
        self.base_url = self.config.base_url.rstrip('/')
        self.access_token: Optional[str] = self.config.token

    def _headers(self) -> Dict[str, str]:
        # No Content-Type: requests sets the multipart boundary itself
        headers = {"Accept": "application/json"}
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return headers

    def _request(
        self,
        method: str,
        endpoint: str,
        data: Optional[Dict] = None,
        files: Optional[list] = None
    ) -> Any:
        """
        Perform an HTTP request and convert failures.

        Returns:
            Response JSON data (None for an empty body)

        Raises:
            ApiException: non-2xx response
            NetworkException: connection failure or timeout
        """
        url = f"{self.base_url}{endpoint}"
        logger.info(f"[API REQ] {method} {endpoint}")
        if data:
            logger.debug(f"[API REQ] Fields: {data}")

        try:
            response = requests.request(
                method=method,
                url=url,
                data=data,
                files=files,
                headers=self._headers(),
                timeout=self.config.timeout
            )
            response.raise_for_status()

            result = None
            if response.text:
                result = response.json()

            logger.info(f"[API RES] {response.status_code} {endpoint}")
            return result

        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else 0
            response_data = {}
            try:
                response_data = e.response.json() if e.response is not None else {}
            except ValueError:
                pass
            if not isinstance(response_data, dict):
                response_data = {"detail": response_data}
            message = (
                response_data.get("detail")
                or response_data.get("message")
                or f"Request failed with status {status_code}"
            )
            logger.error(f"[API ERR] {status_code} {method} {endpoint} | Response: {response_data}")
            raise ApiException(
                message=str(message),
                status_code=status_code,
                response_data=response_data
            )
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.error(f"Network error: {endpoint} - {e}")
            raise NetworkException(
                message=str(e),
                original_error=e
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed: {endpoint} - {e}")
            raise NetworkException(
                message=str(e),
                original_error=e
            )

    # ==================== Properties ====================

    def create_property(self, draft: PropertyDraft) -> str:
        """
        Create a property listing from a completed draft.

        Args:
            draft: Validated PropertyDraft

        Returns:
            The new property's id
        """
        fields = draft.to_submission_fields()
        with ExitStack() as stack:
            files = []
            for path in draft.images:
                handle = stack.enter_context(open(path, "rb"))
                content_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
                files.append(("images", (path.name, handle, content_type)))

            result = self._request("POST", "/property", data=fields, files=files or None)

        data = (result or {}).get("data") or {}
        property_id = data.get("property_id")
        if not property_id:
            raise ApiException(
                message="Property created but no id was returned",
                response_data=result or {},
                context="property"
            )
        logger.info(f"Property created: {property_id}")
        return property_id


def get_property_client():
    """
    Build the property client for the configured data mode.

    Returns:
        PropertyApiClient in "api" mode, MockPropertyClient otherwise
    """
    from app.config import Config

    if Config.DATA_MODE == "api":
        return PropertyApiClient(ApiConfig())

    from services.mock_property_client import MockPropertyClient
    return MockPropertyClient(delay=Config.MOCK_SUBMIT_DELAY)
