"""Concurrent fan-out of one album to several social platforms."""

import asyncio
import logging
from collections.abc import Iterable, Sequence
from typing import Any

import httpx

from album_share_publisher.config import Settings
from album_share_publisher.models import (
    AlbumShareData,
    Platform,
    ShareResult,
    platform_tag,
)
from album_share_publisher.providers import SocialProvider, build_providers
from album_share_publisher.url_filter import sanitize

logger = logging.getLogger(__name__)


class SocialPublisher:
    """Publishes album share data to the platforms a caller selects."""

    def __init__(
        self,
        settings: Settings,
        client: httpx.AsyncClient | None = None,
        providers: Iterable[SocialProvider] | None = None,
        publish_timeout: float | None = None,
    ) -> None:
        """Initialize the publisher.

        Args:
            settings: Provider credentials and timeouts
            client: HTTP client to share between adapters; one is created
                (and closed with the publisher) when omitted
            providers: Adapters to register instead of the built-in ones
            publish_timeout: Seconds each platform may take before it is
                reported as failed (defaults to ``settings.publish_timeout``)
        """
        self.settings = settings
        self.publish_timeout = (
            settings.publish_timeout if publish_timeout is None else publish_timeout
        )
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=settings.request_timeout)

        if providers is None:
            self._providers = build_providers(settings, self._client)
        else:
            self._providers = {provider.platform: provider for provider in providers}

    async def __aenter__(self) -> "SocialPublisher":
        """Async context manager entry."""
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Async context manager exit."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this publisher created it."""
        if self._owns_client:
            await self._client.aclose()

    def get_configured_platforms(self) -> dict[Platform, bool]:
        """Report which platforms have enough configuration to publish.

        Returns:
            Mapping of every platform to whether it is configured
        """
        return {
            platform: platform in self._providers
            and self._providers[platform].is_configured()
            for platform in Platform
        }

    async def publish_to_social(
        self,
        platforms: Sequence[Platform | str],
        data: AlbumShareData,
        message: str | None = None,
    ) -> list[ShareResult]:
        """Publish an album to several platforms concurrently.

        Unsafe URLs are removed from the data once before any adapter runs.
        A failure on one platform never affects the others.

        Args:
            platforms: Platforms to publish to, in the order results are wanted
            data: Album share data
            message: Custom text replacing the album description

        Returns:
            One result per requested platform, in request order
        """
        tags = [platform_tag(platform) for platform in platforms]
        logger.info(f"Publishing album '{data.title}' to [{', '.join(tags)}]")

        safe_data = sanitize(data)
        outcomes = await asyncio.gather(
            *(self._publish_one(tag, safe_data, message) for tag in tags),
            return_exceptions=True,
        )

        results: list[ShareResult] = []
        for tag, outcome in zip(tags, outcomes):
            if isinstance(outcome, BaseException):
                logger.error(f"Unexpected error publishing to {tag}: {outcome!r}")
                outcome = ShareResult.failure(tag, f"Unexpected error: {outcome}")
            results.append(outcome)

        successful = sum(1 for r in results if r.success)
        logger.info(f"Published to {successful}/{len(results)} platform(s)")
        return results

    async def _publish_one(
        self, tag: str, data: AlbumShareData, message: str | None
    ) -> ShareResult:
        """Publish to a single platform within the per-platform timeout."""
        provider = self._get_provider(tag)
        if provider is None:
            logger.warning(f"Unsupported platform: {tag}")
            return ShareResult.failure(tag, f"Unsupported platform: {tag}")

        try:
            return await asyncio.wait_for(
                provider.publish(data, message), timeout=self.publish_timeout
            )
        except asyncio.TimeoutError:
            logger.error(f"{provider.label} publish timed out after {self.publish_timeout:g}s")
            return ShareResult.failure(
                tag, f"{provider.label} publish timed out after {self.publish_timeout:g}s"
            )

    def _get_provider(self, tag: str) -> SocialProvider | None:
        try:
            platform = Platform(tag)
        except ValueError:
            return None
        return self._providers.get(platform)
