"""Shared contract and HTTP plumbing for platform adapters."""

import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx

from album_share_publisher.config import Settings
from album_share_publisher.models import AlbumShareData, Platform, ShareResult

logger = logging.getLogger(__name__)

PHOTO_COUNT_TEMPLATE = "{count} 張照片"
VIEW_ALBUM_LABEL = "查看相簿"


class ProviderError(Exception):
    """Base exception for a failed publish step."""

    pass


class ProviderAPIError(ProviderError):
    """Exception raised when a platform rejects a request."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ProviderNetworkError(ProviderError):
    """Exception raised when a platform cannot be reached."""

    pass


class SocialProvider(ABC):
    """Adapter publishing album share data to one social platform."""

    platform: Platform
    not_configured_message = "Platform is not configured"

    def __init__(self, settings: Settings, client: httpx.AsyncClient) -> None:
        """Initialize the adapter.

        Args:
            settings: Provider credentials
            client: Shared HTTP client
        """
        self.settings = settings
        self.client = client

    @property
    def label(self) -> str:
        return self.platform.label

    @abstractmethod
    def is_configured(self) -> bool:
        """Check whether the required credentials are present."""

    @abstractmethod
    async def _publish(self, data: AlbumShareData, message: str | None) -> ShareResult:
        """Run the platform's publish protocol.

        May raise; ``publish`` converts any exception into a failed result.
        """

    async def publish(
        self, data: AlbumShareData, message: str | None = None
    ) -> ShareResult:
        """Publish an album, never raising.

        Args:
            data: Sanitized share data
            message: Custom text replacing the album description

        Returns:
            Share result for this platform
        """
        if not self.is_configured():
            logger.info(f"{self.label} is not configured, skipping")
            return ShareResult.failure(self.platform, self.not_configured_message)

        try:
            result = await self._publish(data, message)
        except Exception as e:
            logger.error(f"{self.label} publish failed: {e}")
            return ShareResult.failure(self.platform, str(e) or f"{self.label} publish failed")

        if result.success:
            logger.info(f"{self.label} post published: {result.post_url or 'no post URL'}")
        else:
            logger.warning(f"{self.label} publish failed: {result.error}")
        return result

    async def _post_json(
        self,
        url: str,
        payload: dict[str, Any],
        context: str,
        headers: dict[str, str] | None = None,
        params: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """POST a JSON payload and return the parsed response body.

        Args:
            url: Endpoint URL
            payload: JSON body
            context: Description of the step, used in error messages
            headers: Extra request headers
            params: Query parameters

        Returns:
            Parsed JSON body

        Raises:
            ProviderNetworkError: If the request could not be sent
            ProviderAPIError: If the platform answered with an error
        """
        try:
            response = await self.client.post(
                url, json=payload, headers=headers, params=params
            )
        except httpx.RequestError as e:
            raise ProviderNetworkError(
                f"Network error while {context} on {self.label}: {e}"
            ) from e

        result = self._parse_json_response(response, context)

        if response.status_code >= 400 or not self._is_ok(result):
            self._handle_error_response(response.status_code, result, context)

        return result

    def _parse_json_response(
        self, response: httpx.Response, context: str
    ) -> dict[str, Any]:
        """Parse a JSON response, handling empty and non-JSON bodies.

        Raises:
            ProviderAPIError: If the body is not a JSON object
        """
        if not response.content:
            return {}
        try:
            result = response.json()
        except ValueError:
            raise ProviderAPIError(
                f"{self.label} API responded {response.status_code} while {context}: "
                f"{response.text[:200]}",
                response.status_code,
            )
        if not isinstance(result, dict):
            raise ProviderAPIError(
                f"Invalid {self.label} API response while {context}",
                response.status_code,
            )
        return result

    def _handle_error_response(
        self, status_code: int, result: dict[str, Any], context: str
    ) -> None:
        """Raise the platform's own error message when one is available.

        Raises:
            ProviderAPIError: Always
        """
        message = self._error_message(result)
        if not message:
            message = f"{self.label} API responded {status_code} while {context}"
        logger.debug(f"{self.label} error response while {context}: {result}")
        raise ProviderAPIError(message, status_code)

    def _is_ok(self, result: dict[str, Any]) -> bool:
        """Check a successful status's body for an embedded failure."""
        return True

    def _error_message(self, result: dict[str, Any]) -> str | None:
        """Extract an error message from a Graph-style error body."""
        error = result.get("error")
        if isinstance(error, dict):
            return error.get("message") or None
        return None


def body_text(data: AlbumShareData, message: str | None) -> str | None:
    """Custom message when given, else the album description."""
    return message or data.description or None


def photo_count_text(data: AlbumShareData) -> str:
    return PHOTO_COUNT_TEMPLATE.format(count=data.photo_count)
